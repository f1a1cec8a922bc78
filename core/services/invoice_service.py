"""
Invoice service: persistence for the dashboard's invoice actions.

Each write is exactly one parameterized statement. Driver errors
(psycopg2.Error) are not caught here; the action layer decides what the
user sees.
"""

import logging

from clients.postgres_client import PostgresClient
from core.models import Invoice, InvoiceForm, InvoiceSummary
from utils.timezone import today_iso

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice operations."""

    def __init__(self, postgres: PostgresClient):
        self.postgres = postgres

    def create(self, form: InvoiceForm) -> None:
        """
        Insert a new invoice dated today (UTC).

        The id is assigned by the database.
        """
        self.postgres.execute_write(
            """
            INSERT INTO invoices (customer_id, amount, status, date)
            VALUES (%s, %s, %s, %s)
            """,
            (form.customer_id, form.amount_cents, form.status.value, today_iso())
        )
        logger.info(f"Invoice created for customer {form.customer_id}")

    def update(self, invoice_id: str, form: InvoiceForm) -> None:
        """
        Overwrite customer, amount and status of an invoice.

        The invoice date is left as it was at creation.
        """
        self.postgres.execute_write(
            """
            UPDATE invoices
            SET customer_id = %s, amount = %s, status = %s
            WHERE id = %s
            """,
            (form.customer_id, form.amount_cents, form.status.value, invoice_id)
        )
        logger.info(f"Invoice {invoice_id} updated")

    def delete(self, invoice_id: str) -> None:
        """Remove an invoice."""
        self.postgres.execute_write(
            "DELETE FROM invoices WHERE id = %s",
            (invoice_id,)
        )
        logger.info(f"Invoice {invoice_id} deleted")

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        """
        Get invoice by ID.

        Returns:
            Invoice if found, None otherwise.
        """
        row = self.postgres.execute_single(
            "SELECT id, customer_id, amount, status, date FROM invoices WHERE id = %s",
            (invoice_id,)
        )

        if row is None:
            return None

        return Invoice.model_validate(row)

    def list_latest(self, limit: int = 50) -> list[InvoiceSummary]:
        """
        List the most recent invoices with their customer's name and email.

        Args:
            limit: Maximum results

        Returns:
            Invoices ordered by date DESC
        """
        rows = self.postgres.execute(
            """
            SELECT invoices.id, invoices.customer_id, invoices.amount,
                   invoices.status, invoices.date,
                   customers.name, customers.email
            FROM invoices
            JOIN customers ON invoices.customer_id = customers.id
            ORDER BY invoices.date DESC
            LIMIT %s
            """,
            (limit,)
        )

        return [InvoiceSummary.model_validate(row) for row in rows]
