"""Authentication: credentials sign-in, sessions and route protection."""

from auth.exceptions import (
    AuthError,
    CallbackRouteError,
    CredentialsSigninError,
    UnknownProviderError,
    SessionExpiredError,
)
from auth.types import User, Credentials, Session, SignInRedirect
from auth.config import AuthConfig
from auth.database import AuthDatabase
from auth.session import SessionManager
from auth.provider import CredentialsProvider, SignInService
from auth.service import CredentialAuthenticator
from auth.security_middleware import AuthMiddleware
from auth.api import create_auth_router
