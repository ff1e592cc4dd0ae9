from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from movie_catalog.app import app
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.adapters.repositories.in_memory_movie_repository import InMemoryMovieRepository
from movie_catalog.infrastructure.config.dependencies import get_movie_repository

from .factories import movie_factory


@pytest.fixture
def star_wars():
    return movie_factory.create_domain_movie(id="a1")


@pytest.fixture
def movie_repository(star_wars):
    """Store seeded with a single record"""
    return InMemoryMovieRepository([star_wars])


@pytest.fixture
def client(movie_repository):
    app.dependency_overrides[get_movie_repository] = lambda: movie_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


# Shared fixtures for use case testing
@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for use case testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)
