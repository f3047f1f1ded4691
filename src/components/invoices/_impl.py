"""
Invoice form validation and amount conversion.

Functional Core - pure business logic.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from src.domain.entities import INVOICE_STATUSES

from .models import Invalid, InvoiceFields, InvoiceValidationError, Valid, ValidationOutcome

CENTS_PER_UNIT = Decimal(100)

# SQLite INTEGER is a signed 64-bit value
MAX_AMOUNT_CENTS = 2**63 - 1
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS) / CENTS_PER_UNIT

_CUSTOMER_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class InvoiceConfig:
    """Invoice configuration from rules."""

    listing_path: str = "/dashboard/invoices"
    customer_id_max_length: int = 64


DEFAULT_CONFIG = InvoiceConfig()


# --- Conversion ---


def to_cents(amount: Decimal) -> int:
    """
    Scale a finite decimal amount to integer cents, rounding half up.

    Precision and exponent range are widened to fit the amount, so the
    result is exact for any finite input.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits), amount.adjusted() + 4)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        scaled = amount.scaleb(2).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(scaled)


def parse_amount(raw: Any) -> Decimal | None:
    """Parse a form value into a finite Decimal, or None."""
    if raw is None or isinstance(raw, bool):
        return None
    text = str(raw).strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


# --- Validation Functions ---


def validate_customer_id(
    raw: Any, config: InvoiceConfig = DEFAULT_CONFIG
) -> list[InvoiceValidationError]:
    """Validate the customer reference. Every failing rule is reported."""
    errors: list[InvoiceValidationError] = []
    value = "" if raw is None else str(raw)

    if not value.strip():
        errors.append(
            InvoiceValidationError(
                code="customer_required",
                message="Please select a customer.",
                field="customerId",
            )
        )
    if not _CUSTOMER_ID_PATTERN.match(value):
        errors.append(
            InvoiceValidationError(
                code="customer_invalid",
                message="Customer reference may only contain letters, digits, '-' and '_'.",
                field="customerId",
            )
        )
    if len(value) > config.customer_id_max_length:
        errors.append(
            InvoiceValidationError(
                code="customer_too_long",
                message=(
                    f"Customer reference must be {config.customer_id_max_length} "
                    "characters or less."
                ),
                field="customerId",
            )
        )
    return errors


def validate_amount(raw: Any) -> list[InvoiceValidationError]:
    """Validate the invoice amount."""
    amount = parse_amount(raw)
    if amount is None:
        return [
            InvoiceValidationError(
                code="amount_invalid",
                message="Please enter a valid amount.",
                field="amount",
            )
        ]
    if amount <= 0:
        return [
            InvoiceValidationError(
                code="amount_not_positive",
                message="Please enter an amount greater than $0.",
                field="amount",
            )
        ]
    if amount > MAX_AMOUNT:
        return [
            InvoiceValidationError(
                code="amount_too_large",
                message=f"Amount must be {MAX_AMOUNT} or less.",
                field="amount",
            )
        ]
    if to_cents(amount) == 0:
        return [
            InvoiceValidationError(
                code="amount_below_minimum",
                message="Please enter an amount of at least $0.01.",
                field="amount",
            )
        ]
    return []


def validate_status(raw: Any) -> list[InvoiceValidationError]:
    """Validate the invoice status."""
    if raw not in INVOICE_STATUSES:
        return [
            InvoiceValidationError(
                code="status_invalid",
                message="Please select an invoice status.",
                field="status",
            )
        ]
    return []


def validate_invoice_form(
    form: Mapping[str, Any],
    config: InvoiceConfig = DEFAULT_CONFIG,
) -> ValidationOutcome:
    """
    Validate raw invoice form fields.

    Reads ``customerId``, ``amount`` and ``status``. All field errors are
    collected before returning.

    Returns:
        Valid with the typed fields, or Invalid with every error found.
    """
    customer_id = form.get("customerId")
    amount = form.get("amount")
    status = form.get("status")

    errors = [
        *validate_customer_id(customer_id, config),
        *validate_amount(amount),
        *validate_status(status),
    ]
    if errors:
        return Invalid(errors=tuple(errors))

    parsed = parse_amount(amount)
    assert parsed is not None  # validate_amount passed
    return Valid(
        record=InvoiceFields(
            customer_id=str(customer_id),
            amount_cents=to_cents(parsed),
            status=status,
        )
    )
