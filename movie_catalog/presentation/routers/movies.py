from http import HTTPStatus
from typing import Annotated, Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.movie import MoviePublic
from movie_catalog.applications.interfaces.validation import (
    ValidationFailure,
    Violation,
    validate_movie,
    validate_partial_movie,
)
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.exceptions import NotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.config.dependencies import get_logger, get_movie_repository

router = APIRouter(prefix="/movies", tags=["movies"])


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise _bad_request([Violation(path=[], message="Request body must be valid JSON", code="json_invalid")])


MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
LoggerDep = Annotated[LoggerPort, Depends(get_logger)]
JsonBody = Annotated[Any, Depends(read_json_body)]


def _bad_request(violations: List[Violation]) -> HTTPException:
    return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=[v.model_dump() for v in violations])


@router.get("", response_model=List[MoviePublic])
async def read_movies(movie_repository: MovieRepositoryDep, genre: Annotated[Optional[str], Query()] = None):
    use_case = GetMoviesUseCase(movie_repository)
    return await use_case.execute(genre)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: str, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.post("", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(body: JsonBody, movie_repository: MovieRepositoryDep, logger: LoggerDep):
    result = validate_movie(body)
    if isinstance(result, ValidationFailure):
        raise _bad_request(result.violations)

    use_case = CreateMovieUseCase(movie_repository, logger)
    return await use_case.execute(result.data)


@router.patch("/{movie_id}", response_model=MoviePublic)
async def update_movie(movie_id: str, body: JsonBody, movie_repository: MovieRepositoryDep, logger: LoggerDep):
    result = validate_partial_movie(body)
    if isinstance(result, ValidationFailure):
        raise _bad_request(result.violations)

    try:
        use_case = UpdateMovieUseCase(movie_repository, logger)
        return await use_case.execute(movie_id, result.data)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: str, movie_repository: MovieRepositoryDep, logger: LoggerDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository, logger)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
