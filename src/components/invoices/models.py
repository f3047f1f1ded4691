"""
Invoices component - Data models.

Input, validation and result types for the invoice mutation actions.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from src.domain.entities import InvoiceStatus

# --- Validation Errors ---


@dataclass(frozen=True)
class InvoiceValidationError:
    """Invoice validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateInvoiceInput:
    """Input for creating an invoice from a submitted form."""

    form: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateInvoiceInput:
    """Input for updating an invoice from a submitted form."""

    invoice_id: str
    form: Mapping[str, Any]


@dataclass(frozen=True)
class DeleteInvoiceInput:
    """Input for deleting an invoice."""

    invoice_id: str


# --- Validated Records ---


@dataclass(frozen=True)
class InvoiceFields:
    """Typed invoice fields produced by a successful validation."""

    customer_id: str
    amount_cents: int
    status: InvoiceStatus


@dataclass(frozen=True)
class NewInvoice:
    """Row values for an invoice insert."""

    customer_id: str
    amount_cents: int
    status: InvoiceStatus
    date: date


@dataclass(frozen=True)
class Valid:
    record: InvoiceFields


@dataclass(frozen=True)
class Invalid:
    errors: tuple[InvoiceValidationError, ...]

    def field_errors(self) -> dict[str, list[str]]:
        """Group messages by field, keeping their order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field or "_form", []).append(error.message)
        return grouped


ValidationOutcome = Valid | Invalid


# --- Output Models ---


@dataclass(frozen=True)
class Navigate:
    """Terminal navigation to a view; the caller must not continue."""

    path: str


@dataclass(frozen=True)
class Completed:
    """Mutation applied. ``navigate`` is set when control moves to another view."""

    navigate: Navigate | None = None


@dataclass(frozen=True)
class Failed:
    """Mutation not applied."""

    message: str
    field_errors: dict[str, list[str]] = field(default_factory=dict)


MutationResult = Completed | Failed
