"""Schema validation for incoming movie payloads.

Validation never raises. Callers receive either a :class:`ValidationSuccess`
holding the normalized fields or a :class:`ValidationFailure` listing every
violation, and must branch on ``success``.
"""

from typing import Any, Dict, List, Literal, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from movie_catalog.applications.interfaces.dtos.movie import MoviePartialSchema, MovieSchema


class Violation(BaseModel):
    path: List[Union[str, int]]
    message: str
    code: str


class ValidationSuccess(BaseModel):
    success: Literal[True] = True
    data: Dict[str, Any]


class ValidationFailure(BaseModel):
    success: Literal[False] = False
    violations: List[Violation]


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def _to_violation(error: Dict[str, Any]) -> Violation:
    return Violation(path=list(error["loc"]), message=error["msg"], code=error["type"])


def _validate(schema: Type[BaseModel], payload: Any, exclude_unset: bool) -> ValidationResult:
    if not isinstance(payload, dict):
        return ValidationFailure(
            violations=[Violation(path=[], message="Expected a JSON object", code="invalid_type")]
        )

    try:
        parsed = schema.model_validate(payload)
    except PydanticValidationError as e:
        return ValidationFailure(violations=[_to_violation(error) for error in e.errors()])

    return ValidationSuccess(data=parsed.model_dump(mode="json", exclude_unset=exclude_unset))


def validate_movie(payload: Any) -> ValidationResult:
    """Validate a complete movie record; every field is required."""
    return _validate(MovieSchema, payload, exclude_unset=False)


def validate_partial_movie(payload: Any) -> ValidationResult:
    """Validate a subset of movie fields; absent fields are left out of ``data``."""
    return _validate(MoviePartialSchema, payload, exclude_unset=True)
