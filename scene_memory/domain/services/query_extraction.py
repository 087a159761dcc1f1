"""
Turn raw language-model output into a SearchPlan.

Model output is not guaranteed to be pure JSON: it can come wrapped in prose or
markdown fences. The first balanced brace-delimited region is parsed, and any
problem is reported as UpstreamExtractionError so the caller can fall back to
heuristic_search_plan().
"""

import json
import re
from typing import Any, List, Optional

from scene_memory.domain.exceptions import UpstreamExtractionError
from scene_memory.domain.models.search_plan import SearchPlan, SearchPlanSource

MAX_CANDIDATE_TITLES = 3
HEURISTIC_MAX_TOKENS = 10

_YEAR_RE = re.compile(r"^\d{4}$")


def extract_json_object(text: str) -> Optional[str]:
    """Return the first balanced {...} substring of text, or None.

    Braces inside JSON strings are ignored, so titles such as "Brace {Yourself}"
    do not break the scan.
    """
    if not text:
        return None

    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start : i + 1]
        start = text.find("{", start + 1)
    return None


def _normalize_year(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    year = str(value).strip()
    return year if _YEAR_RE.match(year) else None


def _normalize_titles(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    titles = [t.strip() for t in value if isinstance(t, str) and t.strip()]
    return titles[:MAX_CANDIDATE_TITLES]


def _normalize_keywords(value: Any) -> Optional[str]:
    if isinstance(value, list):
        value = " ".join(v.strip() for v in value if isinstance(v, str) and v.strip())
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_search_plan(raw: str) -> SearchPlan:
    """Parse a language-model reply into a SearchPlan.

    Titles win over keywords when the model returns both.
    """
    candidate = extract_json_object(raw)
    if candidate is None:
        raise UpstreamExtractionError("Language model response contains no JSON object")

    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise UpstreamExtractionError(f"Language model returned invalid JSON: {e.msg}") from e

    year = _normalize_year(payload.get("year"))

    titles = _normalize_titles(payload.get("titles"))
    if titles:
        return SearchPlan(source=SearchPlanSource.TITLES, titles=titles, year=year)

    keywords = _normalize_keywords(payload.get("keywords"))
    if keywords:
        return SearchPlan(source=SearchPlanSource.KEYWORDS, keywords=keywords, year=year)

    raise UpstreamExtractionError("Language model response has neither titles nor keywords")


def heuristic_search_plan(description: str) -> SearchPlan:
    """Keyword plan built from the first words of the description, with no year filter"""
    tokens = (description or "").split()[:HEURISTIC_MAX_TOKENS]
    return SearchPlan(source=SearchPlanSource.HEURISTIC, keywords=" ".join(tokens))
