"""API test fixtures - authenticated TestClient over mocked storage."""

from datetime import timedelta
from unittest.mock import Mock
from uuid import UUID

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from api.actions import InvoiceActions, create_actions_router
from api.data import create_data_router
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from auth.security_middleware import AuthMiddleware
from auth.session import SessionManager
from auth.types import Session
from core.services.invoice_service import InvoiceService
from utils.timezone import now_utc


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def invoice_service(db):
    return InvoiceService(db)


@pytest.fixture
def actions(invoice_service, page_cache, app_config):
    return InvoiceActions(invoice_service, page_cache, app_config)


# =============================================================================
# AUTH FIXTURES
# =============================================================================


@pytest.fixture
def mock_session_manager():
    now = now_utc()
    mock = Mock(spec=SessionManager)
    mock.validate_session.return_value = Session(
        token="test-token",
        user_id=UUID("00000000-0000-0000-0000-000000000001"),
        created_at=now,
        expires_at=now + timedelta(hours=24),
        last_activity_at=now,
    )
    return mock


# =============================================================================
# APP & CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def app(mock_session_manager, actions, invoice_service, page_cache, app_config):
    """FastAPI app with auth middleware, error handlers, and data/actions routes."""
    app = FastAPI()
    app.add_middleware(AuthMiddleware, session_manager=mock_session_manager)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_actions_router(actions))
    app.include_router(create_data_router(invoice_service, page_cache, app_config), prefix="/api")

    return app


@pytest.fixture
def client(app):
    """Authenticated test client that does not follow redirects."""
    c = TestClient(app, raise_server_exceptions=False, follow_redirects=False)
    c.cookies.set("session_token", "test-token")
    return c


@pytest.fixture
def unauthed_client(app):
    """Unauthenticated test client (no session cookie)."""
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)
