"""Typed exceptions for sign-in failures.

Every AuthError carries a short machine-readable type that is also the
start of its message ("CredentialsSignin: unknown email"). The login action
classifies failures by that message.
"""


class AuthError(Exception):
    """Base class for authentication errors the login action knows how to report."""

    type = "AuthError"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(f"{self.type}: {detail}" if detail else self.type)


class CredentialsSigninError(AuthError):
    """
    Email/password pair rejected.

    Raised for unknown emails, wrong passwords and malformed credentials
    alike, so the response never reveals which one it was.
    """

    type = "CredentialsSignin"


class UnknownProviderError(AuthError):
    """Sign-in requested with a provider id that isn't configured."""

    type = "UnknownProvider"


class SessionExpiredError(AuthError):
    """Session not found or expired; the user must sign in again."""

    type = "SessionExpired"


class CallbackRouteError(AuthError):
    """A provider failed for a reason other than bad credentials (e.g. the user store is down)."""

    type = "CallbackRouteError"
