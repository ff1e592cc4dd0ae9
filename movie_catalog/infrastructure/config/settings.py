from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_catalog.domain.services.origin_policy import DEFAULT_ALLOWED_ORIGINS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 1234
    ALLOWED_ORIGINS: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    MOVIES_DATA_PATH: Optional[str] = None
    LOG_LEVEL: str = "INFO"
