"""Database operations for authentication.

Looks up users by email. Passwords are stored as bcrypt hashes in the
'password' column.
"""

from uuid import UUID

from clients.postgres_client import PostgresClient
from auth.types import User


class AuthDatabase:
    """Database operations for authentication."""

    def __init__(self, postgres: PostgresClient):
        self._db = postgres

    @staticmethod
    def _to_user(row: dict) -> User:
        return User(
            id=UUID(row["id"]) if isinstance(row["id"], str) else row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password"],
        )

    def get_user_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive)."""
        row = self._db.execute_single(
            "SELECT id, name, email, password FROM users WHERE lower(email) = lower(%s)",
            (email,),
        )
        if row is None:
            return None
        return self._to_user(row)
