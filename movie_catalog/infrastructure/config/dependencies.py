from fastapi import Request

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog")


def get_settings() -> Settings:
    return Settings()


def get_movie_repository(request: Request) -> MovieRepository:
    repository = getattr(request.app.state, "movie_repository", None)
    if repository is None:
        raise ConfigurationError("Movie repository has not been initialised")
    return repository
