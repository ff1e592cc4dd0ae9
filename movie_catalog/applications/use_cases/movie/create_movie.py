from typing import Any, Dict

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, movie_data: Dict[str, Any]) -> MoviePublic:
        created_movie = await self.movie_repository.create(movie_data)
        self.logger.info("Created movie %s (%s)", created_movie.id, created_movie.title)

        return MoviePublic.model_validate(created_movie)
