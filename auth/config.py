"""Authentication configuration."""

from pydantic import BaseModel, Field


class AuthConfig(BaseModel):
    """
    Authentication configuration.

    Durations are in hours; paths are application routes.
    """

    # Session settings
    session_expiry_hours: int = Field(
        default=168,  # 7 days
        description="Session lifetime in hours",
        ge=1,
        le=2160,
    )
    session_cookie_name: str = Field(
        default="session_token",
        description="Cookie carrying the session token",
    )
    session_cookie_secure: bool = Field(
        default=True,
        description="Send the session cookie over HTTPS only",
    )

    # Credentials
    password_min_length: int = Field(
        default=6,
        description="Shortest password accepted on the login form",
        ge=6,
        le=128,
    )

    # Navigation
    login_path: str = Field(
        default="/login",
        description="Where signed-out users are sent",
    )
    login_redirect: str = Field(
        default="/dashboard",
        description="Where users land after signing in",
    )
