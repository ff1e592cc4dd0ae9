from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

from movie_catalog.domain.models.movie import Director, Duration, Genre, Genres, Poster, Rating, Title, Year


class MovieSchema(BaseModel):
    title: Title
    year: Year
    director: Director
    duration: Duration
    rating: Rating
    poster: Poster
    genre: Genres


class MoviePartialSchema(BaseModel):
    title: Title = None
    year: Year = None
    director: Director = None
    duration: Duration = None
    rating: Rating = None
    poster: Poster = None
    genre: Genres = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        # defaults are never validated, so this only fires for explicit nulls
        if value is None:
            raise ValueError("must not be null")
        return value


class MoviePublic(BaseModel):
    id: str
    title: str
    year: int
    director: str
    duration: int
    rating: float
    poster: str
    genre: List[Genre]
    model_config = ConfigDict(from_attributes=True)
