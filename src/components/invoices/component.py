"""
Invoices component - Invoice create, update and delete actions.

Each action validates the submitted form, applies one statement to the
invoice store, then invalidates the listing view.

Shell Layer - handles I/O and error conversion.

Invariants:
- I1: The store is never called when validation fails
- I2: No exception escapes an action; store failures become Failed results
- I3: Invalidation runs only after a successful store call, before navigation
"""

from __future__ import annotations

import logging

from ._impl import DEFAULT_CONFIG, InvoiceConfig, validate_invoice_form
from .models import (
    Completed,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    Failed,
    Invalid,
    MutationResult,
    Navigate,
    NewInvoice,
    UpdateInvoiceInput,
)
from .ports import CacheInvalidatorPort, InvoiceRepoPort, TimePort

logger = logging.getLogger(__name__)

CREATE_INVALID_MESSAGE = "Missing Fields. Failed to Create Invoice."
CREATE_FAILED_MESSAGE = "Failed to Create Invoice: Database Error."
UPDATE_INVALID_MESSAGE = "Missing Fields. Failed to Update Invoice."
UPDATE_FAILED_MESSAGE = "Failed to Update Invoice: Database Error."
DELETE_FAILED_MESSAGE = "Failed to Delete Invoice: Database Error."


# --- Component Entry Points ---


def run_create(
    inp: CreateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    clock: TimePort,
    config: InvoiceConfig = DEFAULT_CONFIG,
) -> MutationResult:
    """
    Create an invoice from a submitted form.

    Args:
        inp: Input containing the raw form fields.
        repo: Invoice repository port.
        cache: Cache invalidator port.
        clock: Time port used for the invoice date.
        config: Optional invoice configuration.

    Returns:
        Completed with navigation to the listing view, or Failed.
    """
    outcome = validate_invoice_form(inp.form, config)
    if isinstance(outcome, Invalid):
        return Failed(message=CREATE_INVALID_MESSAGE, field_errors=outcome.field_errors())

    record = outcome.record
    invoice = NewInvoice(
        customer_id=record.customer_id,
        amount_cents=record.amount_cents,
        status=record.status,
        date=clock.today(),
    )

    try:
        invoice_id = repo.insert(invoice)
    except Exception:
        logger.exception("Invoice insert failed for customer %s", record.customer_id)
        return Failed(message=CREATE_FAILED_MESSAGE)

    logger.info("Created invoice %s", invoice_id)
    cache.invalidate(config.listing_path)
    return Completed(navigate=Navigate(config.listing_path))


def run_update(
    inp: UpdateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    config: InvoiceConfig = DEFAULT_CONFIG,
) -> MutationResult:
    """
    Overwrite customer, amount and status of an existing invoice.

    The invoice date is left untouched. An ID matching no row is reported
    as a database error.
    """
    outcome = validate_invoice_form(inp.form, config)
    if isinstance(outcome, Invalid):
        return Failed(message=UPDATE_INVALID_MESSAGE, field_errors=outcome.field_errors())

    try:
        affected = repo.update(inp.invoice_id, outcome.record)
    except Exception:
        logger.exception("Invoice update failed for %s", inp.invoice_id)
        return Failed(message=UPDATE_FAILED_MESSAGE)

    if affected == 0:
        logger.warning("Invoice update matched no rows: %s", inp.invoice_id)
        return Failed(message=UPDATE_FAILED_MESSAGE)

    logger.info("Updated invoice %s", inp.invoice_id)
    cache.invalidate(config.listing_path)
    return Completed(navigate=Navigate(config.listing_path))


def run_delete(
    inp: DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    config: InvoiceConfig = DEFAULT_CONFIG,
) -> MutationResult:
    """
    Delete an invoice.

    The caller is already on the listing view, so success only invalidates
    it. Deleting a missing ID is a no-op.
    """
    try:
        affected = repo.delete(inp.invoice_id)
    except Exception:
        logger.exception("Invoice delete failed for %s", inp.invoice_id)
        return Failed(message=DELETE_FAILED_MESSAGE)

    if affected == 0:
        logger.info("Invoice %s already absent", inp.invoice_id)
    else:
        logger.info("Deleted invoice %s", inp.invoice_id)
    cache.invalidate(config.listing_path)
    return Completed()


def run(
    inp: CreateInvoiceInput | UpdateInvoiceInput | DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    cache: CacheInvalidatorPort,
    clock: TimePort,
    config: InvoiceConfig = DEFAULT_CONFIG,
) -> MutationResult:
    """
    Main entry point for the invoices component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CreateInvoiceInput):
        return run_create(inp, repo=repo, cache=cache, clock=clock, config=config)
    elif isinstance(inp, UpdateInvoiceInput):
        return run_update(inp, repo=repo, cache=cache, config=config)
    elif isinstance(inp, DeleteInvoiceInput):
        return run_delete(inp, repo=repo, cache=cache, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
