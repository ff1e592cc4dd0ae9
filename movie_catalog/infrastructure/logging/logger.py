import logging
from typing import Optional


def setup_logging(level: Optional[str] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=(level or "INFO").upper(),
        handlers=[handler],
        force=True,
    )
