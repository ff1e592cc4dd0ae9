from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from movie_catalog.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_all(self, genre: Optional[str] = None) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_id(self, movie_id: str) -> Optional[Movie]:
        pass

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie_id: str, fields: Dict[str, Any]) -> Optional[Movie]:
        pass

    @abstractmethod
    async def delete(self, movie_id: str) -> bool:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
