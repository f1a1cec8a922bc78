"""GET /api/data - read endpoint behind the invoices list view."""

from uuid import UUID

from fastapi import APIRouter, Query

from api.base import success_response
from core.config import AppConfig
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService


VALID_TYPES = {"invoices"}


def create_data_router(
    invoice_svc: InvoiceService,
    page_cache: PageCache,
    config: AppConfig,
) -> APIRouter:
    router = APIRouter()

    @router.get("/data")
    async def get_data(
        type: str | None = Query(None),
        id: str | None = Query(None),
    ):
        if type is None:
            raise ValueError("'type' query parameter is required")

        if type not in VALID_TYPES:
            raise ValueError(f"Unknown type '{type}'. Valid types: {', '.join(sorted(VALID_TYPES))}")

        if id:
            return _handle_invoice(invoice_svc, id)

        return _handle_invoice_list(invoice_svc, page_cache, config)

    return router


def _handle_invoice(invoice_svc, id):
    # Ids are UUIDs; anything else cannot name an invoice
    try:
        UUID(id)
    except ValueError:
        raise ValueError(f"Invoice {id} not found")

    invoice = invoice_svc.get_by_id(id)
    if invoice is None:
        raise ValueError(f"Invoice {id} not found")

    return success_response(invoice.model_dump(mode="json")).model_dump(mode="json")


def _handle_invoice_list(invoice_svc, page_cache, config):
    # Cached under the view path so invoice actions can invalidate it
    cached = page_cache.get(config.invoices_path)
    if cached is None:
        invoices = invoice_svc.list_latest(config.invoice_list_limit)
        cached = [i.model_dump(mode="json") for i in invoices]
        page_cache.store(config.invoices_path, cached)

    return success_response(cached).model_dump(mode="json")
