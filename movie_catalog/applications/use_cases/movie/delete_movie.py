from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.domain.exceptions import MovieNotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def execute(self, movie_id: str) -> Message:
        deleted = await self.movie_repository.delete(movie_id)
        if not deleted:
            raise MovieNotFoundError(movie_id)

        self.logger.info("Deleted movie %s", movie_id)
        return Message(message="Movie deleted")
