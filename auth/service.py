"""Login form action: run the credentials sign-in and turn failures into messages."""

import logging
from typing import Any, Callable, Mapping

from api.base import Redirect
from auth.exceptions import AuthError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."
SOMETHING_WENT_WRONG = "Something went wrong."

SignIn = Callable[[str, Mapping[str, Any]], Redirect]


class CredentialAuthenticator:
    """
    Classifies the outcome of a credentials sign-in.

    - sign-in succeeds: its Redirect is returned and the caller navigates.
    - AuthError mentioning CredentialsSignin: "Invalid credentials."
    - any other AuthError: "Something went wrong."
    - anything else propagates unchanged.
    """

    PROVIDER_ID = "credentials"

    def __init__(self, sign_in: SignIn):
        self._sign_in = sign_in

    def authenticate(
        self,
        prev_state: str | None,
        form: Mapping[str, Any],
    ) -> Redirect | str:
        try:
            return self._sign_in(self.PROVIDER_ID, form)
        except AuthError as e:
            if "CredentialsSignin" in str(e):
                logger.info("Sign-in rejected: invalid credentials")
                return INVALID_CREDENTIALS
            logger.warning(f"Sign-in failed: {e}")
            return SOMETHING_WENT_WRONG
