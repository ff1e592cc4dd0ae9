import json
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.domain.models.movie import Movie

BUNDLED_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "movies.json"


def load_movies(path: Optional[str] = None) -> List[Movie]:
    """Read the seed dataset and validate every record against the movie schema."""
    dataset_path = Path(path) if path else BUNDLED_DATASET_PATH

    try:
        raw = json.loads(dataset_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read movie dataset {dataset_path}: {e}") from e

    if not isinstance(raw, list):
        raise ConfigurationError(f"Movie dataset {dataset_path} must contain a JSON array")

    movies = []
    seen_ids = set()
    for position, record in enumerate(raw):
        try:
            movie = Movie.model_validate(record)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid movie at position {position} in {dataset_path}: {e}") from e
        if movie.id in seen_ids:
            raise ConfigurationError(f"Duplicate movie id {movie.id} in {dataset_path}")
        seen_ids.add(movie.id)
        movies.append(movie)

    return movies
