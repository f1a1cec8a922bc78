"""API modules for HTTP interface."""

from api.base import (
    APIError,
    APIMeta,
    APIResponse,
    ActionState,
    Redirect,
    success_response,
    error_response,
    ErrorCodes,
)
