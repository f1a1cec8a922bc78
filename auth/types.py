"""Pydantic models for the auth domain."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from api.base import Redirect


class User(BaseModel):
    """A dashboard user able to sign in with email and password."""

    id: UUID
    name: str
    email: EmailStr
    password_hash: str = Field(..., repr=False)

    model_config = {"from_attributes": True}


class Credentials(BaseModel):
    """Email/password pair submitted on the login form."""

    email: EmailStr
    password: str = Field(..., min_length=6)


class Session(BaseModel):
    """An active user session."""

    token: str = Field(..., description="Session token (opaque string)")
    user_id: UUID
    created_at: datetime
    expires_at: datetime
    last_activity_at: datetime


@dataclass(frozen=True)
class SignInRedirect(Redirect):
    """Navigation after a successful sign-in, carrying the new session."""

    session: Session | None = None
