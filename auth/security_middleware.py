"""Security middleware for FastAPI - session validation on dashboard routes."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes
from auth.exceptions import SessionExpiredError
from auth.session import SessionManager


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware that requires a valid session on protected routes.

    For paths under PROTECTED_PREFIXES:
    1. Extracts the session token from the session cookie
    2. Validates it via SessionManager (sliding expiry)
    3. Stores user_id and session on request.state

    Everything else (login, logout, health, docs) passes through untouched.
    """

    PROTECTED_PREFIXES = ("/dashboard", "/api")

    def __init__(self, app, session_manager: SessionManager, cookie_name: str = "session_token"):
        super().__init__(app)
        self._session_manager = session_manager
        self._cookie_name = cookie_name

    def _is_protected_path(self, path: str) -> bool:
        return any(
            path == prefix or path.startswith(prefix + "/")
            for prefix in self.PROTECTED_PREFIXES
        )

    async def dispatch(self, request: Request, call_next):
        if not self._is_protected_path(request.url.path):
            return await call_next(request)

        session_token = request.cookies.get(self._cookie_name)

        if not session_token:
            return JSONResponse(
                status_code=401,
                content=error_response(
                    ErrorCodes.NOT_AUTHENTICATED,
                    "Authentication required",
                ).model_dump(mode="json"),
            )

        try:
            session = self._session_manager.validate_session(session_token)
        except SessionExpiredError:
            return JSONResponse(
                status_code=401,
                content=error_response(
                    ErrorCodes.SESSION_EXPIRED,
                    "Session has expired",
                ).model_dump(mode="json"),
            )

        request.state.user_id = session.user_id
        request.state.session = session

        return await call_next(request)
