"""Invoice domain models.

Amounts are entered in dollars on the form and stored in cents (integer).
$12.50 = 1250 cents.
"""

import datetime as dt
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

CUSTOMER_REQUIRED = "Please select a customer"
AMOUNT_INVALID = "Please enter an amount greater than $0."
STATUS_INVALID = "Please select an invoice status."

# invoices.amount is an INT column
MAX_AMOUNT_CENTS = 2_147_483_647
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS).scaleb(-2)


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


def amount_to_cents(amount: Decimal) -> int:
    """Dollars to integer cents, rounding half-up: 0.005 -> 1."""
    with localcontext() as ctx:
        # Exact product, so long fractions round on their real value
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 3)
        return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))


class InvoiceForm(BaseModel):
    """
    Invoice fields as submitted from the create/edit form.

    Field aliases are the form field names, so validation errors are keyed
    the way the form renders them (customerId, amount, status). Every rule
    failure on a field reports that field's single user-facing message.
    """

    model_config = {"populate_by_name": True, "frozen": True}

    customer_id: str = Field(..., alias="customerId")
    amount: Decimal
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def _customer_selected(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("customer_required", CUSTOMER_REQUIRED)
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _positive_amount(cls, value: Any) -> Decimal:
        # Form inputs are strings; a missing field arrives as None
        if value is None or isinstance(value, bool):
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)
        # Compared, not multiplied: 1e999999 * 100 overflows the context
        if not amount.is_finite() or amount <= 0 or amount > MAX_AMOUNT:
            raise PydanticCustomError("amount_invalid", AMOUNT_INVALID)
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def _known_status(cls, value: Any) -> InvoiceStatus:
        try:
            return InvoiceStatus(value)
        except (ValueError, TypeError):
            raise PydanticCustomError("status_invalid", STATUS_INVALID)

    @property
    def amount_cents(self) -> int:
        return amount_to_cents(self.amount)


class Invoice(BaseModel):
    """Full invoice entity as stored."""

    id: UUID
    customer_id: UUID
    amount: int = Field(..., ge=0, description="Amount in cents")
    status: InvoiceStatus
    date: dt.date

    model_config = {"from_attributes": True}

    @property
    def amount_dollars(self) -> float:
        """Amount in dollars for display."""
        return self.amount / 100


class InvoiceSummary(Invoice):
    """Invoice row of the dashboard list, joined with its customer."""

    name: str
    email: str
