from typing import Iterable, Optional

from pydantic import BaseModel

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:1234",
    "https://movies.com",
    "https://midu.dev",
]


class OriginDecision(BaseModel):
    allowed: bool
    reason: str


def check_origin(origin: Optional[str], allowed_origins: Iterable[str]) -> OriginDecision:
    """Decide whether a request carrying ``origin`` may be served.

    Requests without an origin come from non-browser callers and are always
    allowed. Otherwise the origin must match an allow-list entry exactly.
    """
    if not origin:
        return OriginDecision(allowed=True, reason="no origin")
    if origin in allowed_origins:
        return OriginDecision(allowed=True, reason="allow-listed")
    return OriginDecision(allowed=False, reason="origin not allowed")


def is_origin_allowed(origin: Optional[str], allowed_origins: Iterable[str] = DEFAULT_ALLOWED_ORIGINS) -> bool:
    return check_origin(origin, allowed_origins).allowed
