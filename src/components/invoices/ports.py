"""
Invoices component - Port interfaces.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from src.domain.entities import Invoice

from .models import InvoiceFields, NewInvoice


class PersistenceError(Exception):
    """Raised by invoice stores when a statement cannot be applied."""


class InvoiceRepoPort(Protocol):
    """Repository interface for invoices."""

    def insert(self, invoice: NewInvoice) -> str:
        """Insert a new invoice and return its ID."""
        ...

    def update(self, invoice_id: str, fields: InvoiceFields) -> int:
        """Overwrite customer, amount and status. Returns rows affected."""
        ...

    def delete(self, invoice_id: str) -> int:
        """Delete invoice. Returns rows affected."""
        ...

    def list_all(self) -> list[Invoice]:
        """List all invoices, newest first."""
        ...


class CacheInvalidatorPort(Protocol):
    """Cache invalidation hook keyed by view path."""

    def invalidate(self, path: str) -> None:
        """Drop cached output for the given view path."""
        ...


class TimePort(Protocol):
    """Port for time operations."""

    def today(self) -> date:
        """Get the current calendar date."""
        ...
