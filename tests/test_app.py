"""Tests for main.create_app - the assembled application."""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from auth.config import AuthConfig
from auth.passwords import hash_password
from clients.valkey_client import ValkeyClient
from main import create_app

USER_ID = "00000000-0000-0000-0000-000000000001"
CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"


@pytest.fixture
def client(db, valkey):
    db.execute_single.return_value = {
        "id": USER_ID,
        "name": "User",
        "email": "user@nextmail.com",
        "password": hash_password("123456"),
    }
    app = create_app(db, valkey, auth_config=AuthConfig(session_cookie_secure=False))
    return TestClient(app, follow_redirects=False, raise_server_exceptions=False)


def _login(client):
    return client.post("/login", data={"email": "user@nextmail.com", "password": "123456"})


class TestCreateApp:

    def test_health_is_public(self, client):
        response = client.get("/health")

        assert response.json() == {"status": "ok"}
        assert "X-Request-ID" in response.headers

    def test_dashboard_requires_session(self, client):
        response = client.post("/dashboard/invoices/create", data={})
        assert response.status_code == 401

    def test_unauthorized_response_still_gets_request_id(self, client):
        response = client.get("/api/data", params={"type": "invoices"})
        assert "X-Request-ID" in response.headers

    def test_login_then_create_invoice(self, client, db, valkey):
        login = _login(client)
        assert login.status_code == 303
        assert login.headers["location"] == "/dashboard"
        client.cookies.set("session_token", login.cookies["session_token"])

        valkey.set("page:/dashboard/invoices", "[]")
        response = client.post("/dashboard/invoices/create", data={
            "customerId": CUSTOMER_ID, "amount": "12.34", "status": "pending",
        })

        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard/invoices"
        assert db.execute_write.call_args.args[1][:3] == (CUSTOMER_ID, 1234, "pending")
        assert "page:/dashboard/invoices" not in valkey.store

    def test_wrong_password(self, client):
        response = client.post("/login", data={"email": "user@nextmail.com", "password": "wrong1"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials."}

    def test_logout_clears_session(self, client, valkey):
        client.cookies.set("session_token", _login(client).cookies["session_token"])

        response = client.post("/logout")

        assert response.headers["location"] == "/login"
        assert not any(key.startswith("session:") for key in valkey.store)


class TestLifespan:

    def test_shutdown_closes_clients(self, db):
        valkey = Mock(spec=ValkeyClient)

        with TestClient(create_app(db, valkey)) as client:
            client.get("/health")
            db.close.assert_not_called()

        db.close.assert_called_once()
        valkey.close.assert_called_once()
