from typing import Annotated

from fastapi import Depends

from scene_memory.applications.services.movie_identification_service import MovieIdentificationService
from scene_memory.applications.services.scene_query_extractor import SceneQueryExtractor
from scene_memory.domain.ports.repositories.movie_search_repository import MovieSearchRepository
from scene_memory.domain.ports.services.llm import LLMPort
from scene_memory.domain.ports.services.logger import LoggerPort
from scene_memory.domain.ports.services.movie_identification_service_port import MovieIdentificationServicePort
from scene_memory.infrastructure.adapters.repositories.tmdb_movie_search_repository import TMDBMovieSearchRepository
from scene_memory.infrastructure.config.settings import Settings
from scene_memory.infrastructure.llm.openai_client import LangChainOpenAILLM
from scene_memory.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("scene_memory", prefix="[identify]")


def get_settings() -> Settings:
    return Settings()


def get_llm(settings: Annotated[Settings, Depends(get_settings)]) -> LLMPort:
    return LangChainOpenAILLM(settings)


def get_movie_search_repository(
    settings: Annotated[Settings, Depends(get_settings)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieSearchRepository:
    return TMDBMovieSearchRepository(settings, logger=logger)


def get_scene_query_extractor(
    llm: Annotated[LLMPort, Depends(get_llm)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> SceneQueryExtractor:
    return SceneQueryExtractor(llm=llm, logger=logger)


def get_movie_identification_service(
    settings: Annotated[Settings, Depends(get_settings)],
    query_extractor: Annotated[SceneQueryExtractor, Depends(get_scene_query_extractor)],
    movie_search_repository: Annotated[MovieSearchRepository, Depends(get_movie_search_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieIdentificationServicePort:
    return MovieIdentificationService(
        settings=settings,
        query_extractor=query_extractor,
        movie_search_repository=movie_search_repository,
        logger=logger,
    )
