from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from farmtrack.application.errors import AuthError
from farmtrack.infrastructure.auth.jwt_service import JWTService

PUBLIC_PATHS = frozenset(
    {
        "/api/v1/health",
        # Called by the scheduler; guarded by the cron secret header instead
        "/api/v1/notifications/daily",
        "/openapi.json",
    }
)
DOCS_PREFIXES: tuple[str, ...] = ("/docs", "/redoc")


def _is_public(path: str) -> bool:
    return path.rstrip("/") in PUBLIC_PATHS or path.startswith(DOCS_PREFIXES)


def _bearer_token(request: Request) -> str:
    header = request.headers.get("Authorization")
    if not header:
        raise AuthError("Missing Authorization header")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError("Invalid Authorization header")
    return token.strip()


class AuthMiddleware(BaseHTTPMiddleware):
    """Attaches an ``AuthContext`` to every non-public request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS" or _is_public(request.url.path):
            return await call_next(request)

        jwt_service: JWTService = request.app.state.jwt_service
        try:
            request.state.auth_context = jwt_service.authenticate(_bearer_token(request))
        except AuthError as exc:
            return JSONResponse(
                status_code=exc.status_code,
                content={"code": exc.code, "message": exc.message},
            )
        return await call_next(request)
