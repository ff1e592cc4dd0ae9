import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from movie_catalog.domain.models.movie import Movie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class InMemoryMovieRepository(MovieRepository):
    """Insertion-ordered movie store living in process memory.

    Every access goes through a single lock, so the store stays consistent
    when handlers run on a thread pool as well as on the event loop.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])
        self._lock = threading.RLock()

    def _index_of(self, movie_id: str) -> int:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return -1

    def _new_id(self) -> str:
        existing = {movie.id for movie in self._movies}
        movie_id = str(uuid.uuid4())
        while movie_id in existing:
            movie_id = str(uuid.uuid4())
        return movie_id

    async def get_all(self, genre: Optional[str] = None) -> List[Movie]:
        with self._lock:
            if genre:
                return [movie for movie in self._movies if movie.has_genre(genre)]
            return list(self._movies)

    async def get_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            index = self._index_of(movie_id)
            return self._movies[index] if index != -1 else None

    async def create(self, fields: Dict[str, Any]) -> Movie:
        with self._lock:
            movie = Movie(**{**fields, "id": self._new_id()})
            self._movies.append(movie)
            return movie

    async def update(self, movie_id: str, fields: Dict[str, Any]) -> Optional[Movie]:
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return None

            current = self._movies[index]
            updated = Movie(**{**current.model_dump(), **fields, "id": current.id})
            self._movies[index] = updated
            return updated

    async def delete(self, movie_id: str) -> bool:
        with self._lock:
            index = self._index_of(movie_id)
            if index == -1:
                return False

            del self._movies[index]
            return True

    async def count(self) -> int:
        with self._lock:
            return len(self._movies)
