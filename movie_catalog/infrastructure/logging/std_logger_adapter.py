import logging
from typing import Optional

from movie_catalog.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: Optional[str] = None):
        self._logger = logging.getLogger(name)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)
