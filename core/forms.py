"""Form validation for invoice submissions.

Validation never raises. The outcome is either ValidForm (typed data) or
InvalidForm (field-error map), never both.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import ValidationError

from core.models import InvoiceForm

logger = logging.getLogger(__name__)

INVOICE_FORM_FIELDS = ("customerId", "amount", "status")


@dataclass(frozen=True)
class ValidForm:
    """Submission passed validation."""

    data: InvoiceForm


@dataclass(frozen=True)
class InvalidForm:
    """Submission failed validation; errors keyed by form field name."""

    errors: dict[str, list[str]] = field(default_factory=dict)


FormResult = ValidForm | InvalidForm


def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """
    Flatten a pydantic ValidationError into {field: [messages]}.

    Messages keep the order pydantic reported them. Errors not tied to a
    field land under "_form".
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        name = str(loc[0]) if loc else "_form"
        errors.setdefault(name, []).append(error["msg"])
    return errors


def validate_invoice_form(form: Mapping[str, Any]) -> FormResult:
    """
    Validate a raw invoice form submission.

    Only the invoice fields are read; a field absent from the submission
    is validated as None, the same as an empty form control.
    """
    raw = {name: form.get(name) for name in INVOICE_FORM_FIELDS}
    try:
        data = InvoiceForm.model_validate(raw)
    except ValidationError as e:
        errors = field_errors(e)
        logger.info(f"Invoice form rejected: {sorted(errors)}")
        return InvalidForm(errors=errors)
    return ValidForm(data=data)
