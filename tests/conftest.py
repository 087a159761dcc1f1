from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from scene_memory.app import app
from scene_memory.applications.services.movie_identification_service import MovieIdentificationService
from scene_memory.applications.services.scene_query_extractor import SceneQueryExtractor
from scene_memory.domain.ports.repositories.movie_search_repository import MovieSearchRepository
from scene_memory.domain.ports.services.llm import LLMPort
from scene_memory.domain.ports.services.logger import LoggerPort
from scene_memory.infrastructure.config.dependencies import get_llm, get_movie_search_repository, get_settings
from scene_memory.infrastructure.config.settings import Settings


@pytest.fixture
def settings():
    """Settings with fake credentials, ignoring any local .env"""
    return Settings(_env_file=None, OPENAI_API_KEY="test-openai-key", TMDB_API_KEY="test-tmdb-key")


@pytest.fixture
def unconfigured_settings():
    return Settings(_env_file=None, OPENAI_API_KEY=None, TMDB_API_KEY=None)


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def mock_llm():
    """Mock language model port"""
    return AsyncMock(spec=LLMPort)


@pytest.fixture
def mock_movie_search_repository():
    """Mock movie search repository, answering every query with no results"""
    repository = AsyncMock(spec=MovieSearchRepository)
    repository.search.return_value = []
    return repository


@pytest.fixture
def query_extractor(mock_llm, mock_logger):
    return SceneQueryExtractor(llm=mock_llm, logger=mock_logger)


@pytest.fixture
def identification_service(settings, query_extractor, mock_movie_search_repository, mock_logger):
    return MovieIdentificationService(
        settings=settings,
        query_extractor=query_extractor,
        movie_search_repository=mock_movie_search_repository,
        logger=mock_logger,
    )


@pytest.fixture
def client(settings, mock_llm, mock_movie_search_repository):
    """Test client with external collaborators replaced by mocks"""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_llm] = lambda: mock_llm
    app.dependency_overrides[get_movie_search_repository] = lambda: mock_movie_search_repository

    yield TestClient(app)

    app.dependency_overrides.clear()
