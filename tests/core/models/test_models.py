"""Tests for invoice domain models."""

from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import ValidationError

from core.models import Invoice, InvoiceForm, InvoiceStatus, InvoiceSummary, amount_to_cents


class TestInvoiceStatus:

    def test_closed_set(self):
        assert {s.value for s in InvoiceStatus} == {"pending", "paid"}

    def test_is_string_enum(self):
        assert InvoiceStatus.PAID == "paid"


class TestAmountToCents:
    """Dollars to cents rounds half-up to an integer."""

    @pytest.mark.parametrize("amount,cents", [
        ("12.50", 1250),
        ("1", 100),
        ("0.01", 1),
        ("19.99", 1999),
        ("0.005", 1),
        ("0.004", 0),
        ("1234.5678", 123457),
    ])
    def test_conversion(self, amount, cents):
        assert amount_to_cents(Decimal(amount)) == cents

    def test_returns_int(self):
        assert type(amount_to_cents(Decimal("3.30"))) is int

    def test_long_fraction_rounds_on_exact_value(self):
        assert amount_to_cents(Decimal("0.00499999999999999999999999999999")) == 0


class TestInvoiceForm:

    def test_populates_by_field_name(self):
        form = InvoiceForm(customer_id="c1", amount=Decimal("5"), status="paid")
        assert form.customer_id == "c1"

    def test_frozen(self):
        form = InvoiceForm(customerId="c1", amount="5", status="paid")
        with pytest.raises(ValidationError):
            form.amount = Decimal("6")


class TestInvoice:

    def _row(self, **overrides):
        row = {
            "id": "cc27c14a-0acf-4f4a-a6c9-d45682c144b9",
            "customer_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
            "amount": 15795,
            "status": "pending",
            "date": date(2022, 12, 6),
        }
        row.update(overrides)
        return row

    def test_validates_database_row(self):
        invoice = Invoice.model_validate(self._row())

        assert invoice.id == UUID("cc27c14a-0acf-4f4a-a6c9-d45682c144b9")
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.date == date(2022, 12, 6)

    def test_amount_dollars(self):
        assert Invoice.model_validate(self._row()).amount_dollars == 157.95

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            Invoice.model_validate(self._row(amount=-1))

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Invoice.model_validate(self._row(status="overdue"))

    def test_summary_carries_customer(self):
        summary = InvoiceSummary.model_validate(
            self._row(name="Lee Robinson", email="lee@robinson.com")
        )
        assert summary.name == "Lee Robinson"
        assert summary.model_dump(mode="json")["date"] == "2022-12-06"
