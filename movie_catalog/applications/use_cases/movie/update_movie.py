from typing import Any, Dict

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.domain.exceptions import MovieNotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, movie_id: str, movie_data: Dict[str, Any]) -> MoviePublic:
        updated_movie = await self.movie_repository.update(movie_id, movie_data)
        if not updated_movie:
            raise MovieNotFoundError(movie_id)

        self.logger.info("Updated movie %s fields: %s", movie_id, ", ".join(sorted(movie_data)) or "none")
        return MoviePublic.model_validate(updated_movie)
