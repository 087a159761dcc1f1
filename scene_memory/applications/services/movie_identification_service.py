import asyncio
from typing import List, Optional

from scene_memory.applications.services.scene_query_extractor import SceneQueryExtractor
from scene_memory.domain.exceptions import ConfigurationError, UpstreamSearchError, ValidationError
from scene_memory.domain.models.external_search_result import ExternalSearchResult
from scene_memory.domain.models.movie_candidate import IdentificationResult
from scene_memory.domain.models.search_plan import SearchPlan
from scene_memory.domain.ports.repositories.movie_search_repository import MovieSearchRepository
from scene_memory.domain.ports.services.logger import LoggerPort
from scene_memory.domain.ports.services.movie_identification_service_port import MovieIdentificationServicePort
from scene_memory.domain.services.ranking import rank_candidates
from scene_memory.infrastructure.config.settings import Settings


class MovieIdentificationService(MovieIdentificationServicePort):
    """Application service turning a scene description into ranked movie guesses"""

    def __init__(
        self,
        settings: Settings,
        query_extractor: SceneQueryExtractor,
        movie_search_repository: MovieSearchRepository,
        logger: LoggerPort,
    ):
        self.settings = settings
        self.query_extractor = query_extractor
        self.movie_search_repository = movie_search_repository
        self.logger = logger

    def _ensure_configured(self) -> None:
        missing = [
            name for name in ("OPENAI_API_KEY", "TMDB_API_KEY") if not getattr(self.settings, name, None)
        ]
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    async def identify(self, description: Optional[str]) -> IdentificationResult:
        if not isinstance(description, str) or not description.strip():
            raise ValidationError("A scene description is required")
        description = description.strip()
        self.logger.info(f"Identification request received ({len(description)} chars)")

        self._ensure_configured()

        plan = await self.query_extractor.extract(description)

        if plan.is_fan_out:
            results = await self._search_titles(plan)
        else:
            results = await self._search_keywords(plan)
        self.logger.info(f"Movie search returned {len(results)} results")

        movies = rank_candidates(results)
        self.logger.info(f"Returning {len(movies)} candidates")
        return IdentificationResult(movies=movies)

    async def _search_keywords(self, plan: SearchPlan) -> List[ExternalSearchResult]:
        results = await self.movie_search_repository.search(plan.keywords or "", year=plan.year)
        return results

    async def _search_titles(self, plan: SearchPlan) -> List[ExternalSearchResult]:
        outcomes = await asyncio.gather(
            *(self.movie_search_repository.search(title, year=plan.year) for title in plan.titles),
            return_exceptions=True,
        )

        results: List[ExternalSearchResult] = []
        failures = 0
        for title, outcome in zip(plan.titles, outcomes):
            if isinstance(outcome, BaseException):
                failures += 1
                self.logger.warning(f"Search for candidate title {title!r} failed: {outcome}")
                continue
            if not outcome:
                self.logger.info(f"No search result for candidate title {title!r}")
                continue
            results.append(outcome[0])

        if failures == len(plan.titles):
            raise UpstreamSearchError("Movie search failed for every candidate title")
        return results
