"""Sign-in providers.

The credentials provider checks an email/password pair against the users
table. SignInService dispatches a login form to a provider by id and, on
success, opens a session and returns where to navigate next.
"""

import logging
from typing import Any, Mapping

import psycopg2
from pydantic import ValidationError

from auth.config import AuthConfig
from auth.database import AuthDatabase
from auth.exceptions import CallbackRouteError, CredentialsSigninError, UnknownProviderError
from auth.passwords import verify_password
from auth.session import SessionManager
from auth.types import Credentials, SignInRedirect, User

logger = logging.getLogger(__name__)


class CredentialsProvider:
    """Email/password provider backed by AuthDatabase."""

    id = "credentials"

    def __init__(self, auth_db: AuthDatabase, config: AuthConfig):
        self._auth_db = auth_db
        self._config = config

    def authorize(self, form: Mapping[str, Any]) -> User:
        """
        Return the user the submitted credentials belong to.

        Raises:
            CredentialsSigninError: Malformed email/password, unknown user,
                or wrong password.
            CallbackRouteError: The user store could not be queried, or the
                stored hash is unreadable.
        """
        try:
            credentials = Credentials(
                email=form.get("email"),
                password=form.get("password"),
            )
        except ValidationError:
            raise CredentialsSigninError("malformed credentials")

        if len(credentials.password) < self._config.password_min_length:
            raise CredentialsSigninError("malformed credentials")

        try:
            user = self._auth_db.get_user_by_email(credentials.email)
        except psycopg2.Error as e:
            logger.error(f"User lookup failed: {e}", exc_info=True)
            raise CallbackRouteError("user lookup failed")

        if user is None:
            raise CredentialsSigninError("unknown user")

        try:
            matches = verify_password(credentials.password, user.password_hash)
        except ValueError:
            logger.error(f"Unreadable password hash for user {user.id}")
            raise CallbackRouteError("unreadable password hash")

        if not matches:
            raise CredentialsSigninError("password mismatch")

        return user


class SignInService:
    """Runs a sign-in through a named provider and opens a session."""

    def __init__(
        self,
        providers: list[CredentialsProvider],
        session_manager: SessionManager,
        config: AuthConfig,
    ):
        self._providers = {provider.id: provider for provider in providers}
        self._session_manager = session_manager
        self._config = config

    def sign_in(self, provider_id: str, form: Mapping[str, Any]) -> SignInRedirect:
        """
        Authenticate form data with provider_id.

        Returns:
            SignInRedirect to the post-login page, carrying the new session.

        Raises:
            UnknownProviderError: provider_id isn't configured.
            CredentialsSigninError / CallbackRouteError: from the provider.
        """
        provider = self._providers.get(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id)

        user = provider.authorize(form)
        session = self._session_manager.create_session(user.id)
        logger.info(f"User {user.id} signed in via {provider_id}")

        return SignInRedirect(location=self._config.login_redirect, session=session)
