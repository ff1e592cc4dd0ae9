from enum import Enum
from typing import Annotated, List

from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

MIN_YEAR = 1900
MAX_YEAR = 2100
MIN_RATING = 0
MAX_RATING = 10


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    CRIME = "Crime"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a valid URL") from None
    if not url.host:
        raise ValueError("must be a valid URL")
    return value


def _check_unique_genres(value: List[Genre]) -> List[Genre]:
    if len(set(value)) != len(value):
        raise ValueError("genres must not repeat")
    return value


Title = Annotated[str, Field(strict=True, min_length=1)]
Year = Annotated[int, Field(strict=True, ge=MIN_YEAR, le=MAX_YEAR)]
Director = Annotated[str, Field(strict=True, min_length=1)]
Duration = Annotated[int, Field(strict=True, gt=0)]
Rating = Annotated[float, Field(strict=True, ge=MIN_RATING, le=MAX_RATING)]
Poster = Annotated[str, Field(strict=True), AfterValidator(_check_url)]
Genres = Annotated[List[Genre], Field(min_length=1), AfterValidator(_check_unique_genres)]


class Movie(BaseModel):
    id: str
    title: Title
    year: Year
    director: Director
    duration: Duration
    rating: Rating
    poster: Poster
    genre: Genres

    def has_genre(self, genre: str) -> bool:
        wanted = genre.lower()
        return any(g.value.lower() == wanted for g in self.genre)
