"""Shared test fixtures for the invoices dashboard test suite."""

import json
from pathlib import Path
from unittest.mock import Mock
from uuid import UUID

import pytest
from dotenv import load_dotenv

# Load .env before anything reads env vars; the suite itself needs none
load_dotenv(Path(__file__).parent.parent / ".env", override=True)

import clients.vault_client as vault_module

from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from core.config import AppConfig
from core.page_cache import PageCache


# =============================================================================
# TEST CONSTANTS
# =============================================================================

TEST_USER_ID = UUID("00000000-0000-0000-0000-000000000001")
TEST_USER_EMAIL = "user@nextmail.com"
TEST_USER_PASSWORD = "123456"

TEST_CUSTOMER_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
TEST_INVOICE_ID = "cc27c14a-0acf-4f4a-a6c9-d45682c144b9"


@pytest.fixture(autouse=True)
def reset_vault_cache():
    """Vault singleton and secret cache must not leak between tests."""
    vault_module._vault_client_instance = None
    vault_module._secret_cache.clear()
    yield
    vault_module._vault_client_instance = None
    vault_module._secret_cache.clear()


# =============================================================================
# CLIENT DOUBLES
# =============================================================================


class InMemoryValkey:
    """Dict-backed stand-in for ValkeyClient's key/value surface (TTL recorded, not enforced)."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, expire_seconds=None):
        self.store[key] = value
        if expire_seconds is not None:
            self.ttls[key] = expire_seconds

    def delete(self, key):
        self.ttls.pop(key, None)
        return self.store.pop(key, None) is not None

    def set_json(self, key, value, expire_seconds=None):
        self.set(key, json.dumps(value), expire_seconds)

    def get_json(self, key):
        value = self.get(key)
        return None if value is None else json.loads(value)


@pytest.fixture
def db():
    """PostgresClient double; configure return values per test."""
    return Mock(spec=PostgresClient)


@pytest.fixture
def valkey():
    return InMemoryValkey()


@pytest.fixture
def mock_valkey():
    """ValkeyClient double for asserting calls."""
    return Mock(spec=ValkeyClient)


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def page_cache(valkey, app_config):
    return PageCache(valkey, ttl_seconds=app_config.page_cache_ttl_seconds)
