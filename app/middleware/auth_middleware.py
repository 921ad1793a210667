# app/middleware/auth_middleware.py
import logging
from typing import Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp

from app.core.config import settings
from app.core.exceptions import AuthException
from app.services.auth_services import verify_request_token

logger = logging.getLogger(__name__)


class CheckTokenMiddleware(BaseHTTPMiddleware):
    """Reject requests under ``protected_prefixes`` that lack a valid session cookie.

    Missing cookie -> 403, bad/expired token -> 401, both with a ``{"msg": ...}``
    body. On success the decoded payload is left on ``request.state.token_payload``.
    """

    def __init__(self, app: ASGIApp, protected_prefixes: Sequence[str] = ("/",)):
        super().__init__(app)
        self.protected_prefixes = tuple(protected_prefixes)

    def is_protected(self, path: str) -> bool:
        # "/api/v1/users" guards "/api/v1/users" and "/api/v1/users/...", not "/api/v1/usersettings"
        for prefix in self.protected_prefixes:
            base = prefix.rstrip("/")
            if path == base or path.startswith(base + "/"):
                return True
        return False

    async def dispatch(self, request: Request, call_next):
        request.state.token_payload = None
        if not self.is_protected(request.url.path):
            return await call_next(request)

        token = request.cookies.get(settings.COOKIE_NAME)
        try:
            request.state.token_payload = verify_request_token(token)
        except AuthException as exc:
            logger.info(
                "Rejected %s %s: %s", request.method, request.url.path, type(exc).__name__
            )
            return JSONResponse(status_code=exc.status_code, content={"msg": exc.detail})

        return await call_next(request)
