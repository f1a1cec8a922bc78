"""Application configuration."""

from pydantic import BaseModel, Field


class AppConfig(BaseModel):
    """
    Runtime settings for the invoices dashboard.

    Secrets (database and Valkey URLs) are not here; they come from Vault
    via clients.vault_client.
    """

    # Views
    invoices_path: str = Field(
        default="/dashboard/invoices",
        description="List view invalidated and navigated to after invoice mutations",
    )

    # Page cache
    page_cache_ttl_seconds: int = Field(
        default=300,
        description="How long a cached list view lives without invalidation",
        ge=1,
        le=86400,
    )
    invoice_list_limit: int = Field(
        default=50,
        description="Rows in the cached invoices list",
        ge=1,
        le=500,
    )

    # Database
    database_sslmode: str = Field(
        default="require",
        description="libpq sslmode for every pooled connection",
        pattern="^(require|verify-ca|verify-full)$",
    )
    database_min_connections: int = Field(default=1, ge=1)
    database_max_connections: int = Field(default=10, ge=1, le=100)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", pattern="^(json|text)$")
