"""HTTP routes for signing in and out."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from auth.config import AuthConfig
from auth.service import CredentialAuthenticator
from auth.session import SessionManager
from auth.types import SignInRedirect


def create_auth_router(
    authenticator: CredentialAuthenticator,
    session_manager: SessionManager,
    config: AuthConfig,
) -> APIRouter:
    """Create auth router with injected collaborators."""
    router = APIRouter(tags=["auth"])

    @router.post("/login")
    async def login(request: Request):
        """Sign in with the email/password login form.

        Success redirects (303) to the dashboard and sets the session
        cookie; failure returns the message to show on the form.
        """
        form = await request.form()
        outcome = authenticator.authenticate(None, form)

        if isinstance(outcome, str):
            return JSONResponse(status_code=401, content={"message": outcome})

        response = RedirectResponse(outcome.location, status_code=303)
        if isinstance(outcome, SignInRedirect) and outcome.session is not None:
            session = outcome.session
            response.set_cookie(
                key=config.session_cookie_name,
                value=session.token,
                httponly=True,
                secure=config.session_cookie_secure,
                samesite="lax",
                max_age=int((session.expires_at - session.created_at).total_seconds()),
            )
        return response

    @router.post("/logout")
    async def logout(request: Request):
        """Revoke the session, clear the cookie, go back to the login page."""
        session_token = request.cookies.get(config.session_cookie_name)
        if session_token:
            session_manager.revoke_session(session_token)

        response = RedirectResponse(config.login_path, status_code=303)
        response.delete_cookie(key=config.session_cookie_name)
        return response

    return router
