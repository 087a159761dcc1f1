from typing import Iterable, List, Optional

from scene_memory.domain.models.external_search_result import ExternalSearchResult
from scene_memory.domain.models.movie_candidate import Confidence, MovieCandidate

MAX_CANDIDATES = 4
UNKNOWN_YEAR = "N/A"
SYNOPSIS_PLACEHOLDER = "Sinopse não disponível."


def confidence_for_position(index: int) -> Confidence:
    if index == 0:
        return Confidence.HIGH
    if index == 1:
        return Confidence.MEDIUM
    return Confidence.LOW


def release_year(release_date: Optional[str]) -> str:
    """4-digit year prefix of a YYYY-MM-DD date, or N/A"""
    if release_date and len(release_date) >= 4 and release_date[:4].isdigit():
        return release_date[:4]
    return UNKNOWN_YEAR


def to_movie_candidate(result: ExternalSearchResult, index: int) -> MovieCandidate:
    return MovieCandidate(
        title=result.title or "",
        year=release_year(result.release_date),
        synopsis=result.overview or SYNOPSIS_PLACEHOLDER,
        poster_path=result.poster_path,
        confidence=confidence_for_position(index),
    )


def rank_candidates(results: Iterable[ExternalSearchResult]) -> List[MovieCandidate]:
    """Label search results by position, keeping the order they were obtained in.

    A movie found by more than one query is kept at its first position only.
    """
    unique: List[ExternalSearchResult] = []
    seen_ids = set()
    for result in results:
        if result.id is not None:
            if result.id in seen_ids:
                continue
            seen_ids.add(result.id)
        unique.append(result)
        if len(unique) == MAX_CANDIDATES:
            break

    return [to_movie_candidate(result, index) for index, result in enumerate(unique)]
