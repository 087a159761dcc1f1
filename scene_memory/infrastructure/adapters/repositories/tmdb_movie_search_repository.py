import asyncio
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from scene_memory.domain.exceptions import UpstreamSearchError
from scene_memory.domain.models.external_search_result import ExternalSearchResult
from scene_memory.domain.ports.repositories.movie_search_repository import MovieSearchRepository
from scene_memory.domain.ports.services.logger import LoggerPort
from scene_memory.infrastructure.config.settings import Settings


class TMDBMovieSearchRepository(MovieSearchRepository):
    """Movie search backed by TMDB's /search/movie endpoint"""

    def __init__(self, settings: Settings, logger: LoggerPort):
        self.settings = settings
        self.base_url = settings.TMDB_BASE_URL.rstrip("/")
        self.logger = logger

    def _params(self, query: str, year: Optional[str]) -> Dict[str, Any]:
        params = {
            "api_key": self.settings.TMDB_API_KEY,
            "query": query,
            "language": self.settings.TMDB_LANGUAGE,
            "include_adult": "false",
        }
        if self.settings.TMDB_REGION:
            params["region"] = self.settings.TMDB_REGION
        if year:
            params["primary_release_year"] = year
        return params

    async def search(self, query: str, year: Optional[str] = None) -> List[ExternalSearchResult]:
        url = f"{self.base_url}/search/movie"
        self.logger.info("tmdb search query=%r year=%s", query, year)
        try:
            resp = await asyncio.to_thread(
                requests.get, url, params=self._params(query, year), timeout=self.settings.TMDB_TIMEOUT_SECONDS
            )
        except requests.RequestException as e:
            raise UpstreamSearchError(f"Movie search request failed: {e.__class__.__name__}") from e

        if not resp.ok:
            raise UpstreamSearchError(f"Movie search API error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamSearchError("Movie search API returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise UpstreamSearchError("Movie search API returned an unexpected body")

        results: List[ExternalSearchResult] = []
        for item in data.get("results") or []:
            if not isinstance(item, dict):
                continue
            try:
                results.append(ExternalSearchResult.model_validate(item))
            except ValidationError as e:
                self.logger.warning("tmdb search skipped malformed record id=%r errors=%d", item.get("id"), e.error_count())
        self.logger.info("tmdb search done query=%r results=%d", query, len(results))
        return results
