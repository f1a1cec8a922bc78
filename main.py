"""Application entry point: wires clients, services and routes into a FastAPI app."""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from api.actions import InvoiceActions, create_actions_router
from api.data import create_data_router
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from auth.api import create_auth_router
from auth.config import AuthConfig
from auth.database import AuthDatabase
from auth.provider import CredentialsProvider, SignInService
from auth.security_middleware import AuthMiddleware
from auth.service import CredentialAuthenticator
from auth.session import SessionManager
from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from core.config import AppConfig
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    postgres: PostgresClient,
    valkey: ValkeyClient,
    config: AppConfig | None = None,
    auth_config: AuthConfig | None = None,
) -> FastAPI:
    """Build the app around already-connected clients."""
    config = config or AppConfig()
    auth_config = auth_config or AuthConfig()

    page_cache = PageCache(valkey, ttl_seconds=config.page_cache_ttl_seconds)
    invoice_service = InvoiceService(postgres)
    actions = InvoiceActions(invoice_service, page_cache, config)

    session_manager = SessionManager(valkey, auth_config)
    sign_in = SignInService(
        providers=[CredentialsProvider(AuthDatabase(postgres), auth_config)],
        session_manager=session_manager,
        config=auth_config,
    )
    authenticator = CredentialAuthenticator(sign_in.sign_in)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Release the pool and the Valkey connection on shutdown."""
        yield
        logger.info("Invoices dashboard shutting down")
        postgres.close()
        valkey.close()

    app = FastAPI(title="Invoices Dashboard", lifespan=lifespan)
    app.add_middleware(
        AuthMiddleware,
        session_manager=session_manager,
        cookie_name=auth_config.session_cookie_name,
    )
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_auth_router(authenticator, session_manager, auth_config))
    app.include_router(create_actions_router(actions))
    app.include_router(create_data_router(invoice_service, page_cache, config), prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def build_app() -> FastAPI:
    """Production factory: config from the environment, secrets from Vault."""
    from clients.vault_client import get_database_url, get_valkey_url

    load_dotenv(Path(__file__).parent / ".env")

    config = AppConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
    )
    setup_logging(config.log_level, config.log_format)

    postgres = PostgresClient(
        get_database_url(),
        sslmode=config.database_sslmode,
        min_connections=config.database_min_connections,
        max_connections=config.database_max_connections,
    )
    valkey = ValkeyClient(get_valkey_url())
    logger.info("Invoices dashboard starting")

    return create_app(postgres, valkey, config)
