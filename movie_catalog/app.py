from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Annotated

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog.applications.interfaces.dtos.health import Health
from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.adapters.repositories.in_memory_movie_repository import InMemoryMovieRepository
from movie_catalog.infrastructure.config.dependencies import get_logger, get_movie_repository, get_settings
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.dataset import load_movies
from movie_catalog.presentation.middleware.origin_policy import OriginPolicyMiddleware
from movie_catalog.presentation.routers import movies

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    seed = load_movies(settings.MOVIES_DATA_PATH)
    app.state.movie_repository = InMemoryMovieRepository(seed)
    logger.info("Loaded %d movies into the catalog", len(seed))
    try:
        yield
    finally:
        app.state.movie_repository = None


app = FastAPI(title="Movie Catalog", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["GET", "HEAD", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
)
# registered last so it runs first
app.add_middleware(OriginPolicyMiddleware, allowed_origins=settings.ALLOWED_ORIGINS, logger=logger)

app.include_router(movies.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog API"}


@app.get("/health", response_model=Health)
async def health(movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)]):
    return Health(status="healthy", movies=await movie_repository.count())
