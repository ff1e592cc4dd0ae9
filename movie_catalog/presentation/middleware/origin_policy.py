from http import HTTPStatus
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.services.origin_policy import check_origin


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """Reject requests from origins outside the allow-list before routing.

    A rejected request gets an empty 403 response; the CORS headers of allowed
    requests are left to Starlette's CORSMiddleware.
    """

    def __init__(self, app: ASGIApp, allowed_origins: Iterable[str], logger: LoggerPort):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)
        self.logger = logger

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get("origin")
        decision = check_origin(origin, self.allowed_origins)
        if not decision.allowed:
            self.logger.warning("Rejected %s %s from %s: %s", request.method, request.url.path, origin, decision.reason)
            return Response(status_code=HTTPStatus.FORBIDDEN)

        return await call_next(request)
