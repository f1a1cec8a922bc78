"""Core domain models."""

from core.models.invoice import (
    Invoice,
    InvoiceForm,
    InvoiceStatus,
    InvoiceSummary,
    amount_to_cents,
    MAX_AMOUNT_CENTS,
    CUSTOMER_REQUIRED,
    AMOUNT_INVALID,
    STATUS_INVALID,
)

__all__ = [
    "Invoice", "InvoiceForm", "InvoiceStatus", "InvoiceSummary", "amount_to_cents", "MAX_AMOUNT_CENTS",
    "CUSTOMER_REQUIRED", "AMOUNT_INVALID", "STATUS_INVALID",
]
