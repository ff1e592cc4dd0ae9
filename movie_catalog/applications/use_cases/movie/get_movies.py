from typing import List, Optional

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, genre: Optional[str] = None) -> List[MoviePublic]:
        movies = await self.movie_repository.get_all(genre=genre)

        return [MoviePublic.model_validate(movie) for movie in movies]
