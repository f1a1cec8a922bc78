"""Invoice form actions and the form-post routes that invoke them.

Ordering on every action: the write attempt finishes, then the invoices
list view is invalidated, then (create/update success only) the caller is
told to navigate back to it.
"""

import logging
from typing import Any, Mapping

import psycopg2
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from api.base import ActionState, Redirect
from core.config import AppConfig
from core.forms import InvalidForm, validate_invoice_form
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


class InvoiceActions:
    """Create, update and delete invoices from form submissions."""

    def __init__(self, service: InvoiceService, page_cache: PageCache, config: AppConfig):
        self.service = service
        self.page_cache = page_cache
        self.config = config

    @property
    def invoices_path(self) -> str:
        return self.config.invoices_path

    def _done(self) -> Redirect:
        self.page_cache.invalidate(self.invoices_path)
        return Redirect(self.invoices_path)

    def create_invoice(
        self,
        prev_state: ActionState | None,
        form: Mapping[str, Any],
    ) -> ActionState | Redirect:
        """
        Validate the form and insert a new invoice dated today.

        Returns:
            Redirect to the invoices list on success, otherwise the
            ActionState to render with the form.
        """
        result = validate_invoice_form(form)
        if isinstance(result, InvalidForm):
            return ActionState(
                errors=result.errors,
                message="Missing Fields. Failed to Create Invoice.",
            )

        try:
            self.service.create(result.data)
        except psycopg2.Error as e:
            logger.error(f"Failed to create invoice: {e}", exc_info=True)
            return ActionState(message="Database Error: Failed to Create Invoice.")

        return self._done()

    def update_invoice(
        self,
        invoice_id: str,
        prev_state: ActionState | None,
        form: Mapping[str, Any],
    ) -> ActionState | Redirect:
        """Validate the form and overwrite customer, amount and status of invoice_id."""
        result = validate_invoice_form(form)
        if isinstance(result, InvalidForm):
            return ActionState(
                errors=result.errors,
                message="Missing Fields. Failed to Update Invoice.",
            )

        try:
            self.service.update(invoice_id, result.data)
        except psycopg2.Error as e:
            logger.error(f"Failed to update invoice {invoice_id}: {e}", exc_info=True)
            return ActionState(message="Database Error: Failed to Update Invoice.")

        return self._done()

    def delete_invoice(self, invoice_id: str) -> None:
        """
        Delete invoice_id.

        A storage failure is logged and otherwise ignored; the list view
        is invalidated either way.
        """
        try:
            self.service.delete(invoice_id)
        except psycopg2.Error as e:
            logger.error(f"Failed to delete invoice {invoice_id}: {e}", exc_info=True)
        self.page_cache.invalidate(self.invoices_path)


def _to_response(outcome: ActionState | Redirect):
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.location, status_code=303)

    # Field errors are the user's to fix; a bare message means the write failed
    status_code = 422 if outcome.errors else 500
    return JSONResponse(
        status_code=status_code,
        content=outcome.model_dump(mode="json", exclude_none=True),
    )


def create_actions_router(actions: InvoiceActions) -> APIRouter:
    router = APIRouter(tags=["invoices"])

    @router.post("/dashboard/invoices/create")
    async def create_invoice(request: Request):
        form = await request.form()
        return _to_response(actions.create_invoice(None, form))

    @router.post("/dashboard/invoices/{invoice_id}/edit")
    async def update_invoice(invoice_id: str, request: Request):
        form = await request.form()
        return _to_response(actions.update_invoice(invoice_id, None, form))

    @router.post("/dashboard/invoices/{invoice_id}/delete")
    async def delete_invoice(invoice_id: str):
        actions.delete_invoice(invoice_id)
        return RedirectResponse(actions.invoices_path, status_code=303)

    return router
