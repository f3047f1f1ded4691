"""
Invoices component - Validated invoice mutations.

Create, update and delete invoices from submitted form data.
"""

from ._impl import (
    DEFAULT_CONFIG,
    MAX_AMOUNT,
    MAX_AMOUNT_CENTS,
    InvoiceConfig,
    parse_amount,
    to_cents,
    validate_amount,
    validate_customer_id,
    validate_invoice_form,
    validate_status,
)
from .component import (
    CREATE_FAILED_MESSAGE,
    CREATE_INVALID_MESSAGE,
    DELETE_FAILED_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    UPDATE_INVALID_MESSAGE,
    run,
    run_create,
    run_delete,
    run_update,
)
from .models import (
    Completed,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    Failed,
    Invalid,
    InvoiceFields,
    InvoiceValidationError,
    MutationResult,
    Navigate,
    NewInvoice,
    UpdateInvoiceInput,
    Valid,
)
from .ports import CacheInvalidatorPort, InvoiceRepoPort, PersistenceError, TimePort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_update",
    "run_delete",
    # Validation
    "validate_invoice_form",
    "validate_customer_id",
    "validate_amount",
    "validate_status",
    "parse_amount",
    "to_cents",
    "InvoiceConfig",
    "DEFAULT_CONFIG",
    "MAX_AMOUNT",
    "MAX_AMOUNT_CENTS",
    # Input models
    "CreateInvoiceInput",
    "UpdateInvoiceInput",
    "DeleteInvoiceInput",
    # Records and results
    "InvoiceFields",
    "NewInvoice",
    "Valid",
    "Invalid",
    "InvoiceValidationError",
    "MutationResult",
    "Completed",
    "Failed",
    "Navigate",
    # Messages
    "CREATE_INVALID_MESSAGE",
    "CREATE_FAILED_MESSAGE",
    "UPDATE_INVALID_MESSAGE",
    "UPDATE_FAILED_MESSAGE",
    "DELETE_FAILED_MESSAGE",
    # Ports
    "InvoiceRepoPort",
    "CacheInvalidatorPort",
    "TimePort",
    "PersistenceError",
]
