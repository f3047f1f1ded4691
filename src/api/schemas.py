from datetime import date

from pydantic import BaseModel, Field

from src.domain.entities import InvoiceStatus


# --- Invoices ---
class InvoiceResponse(BaseModel):
    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: date


class InvoiceListResponse(BaseModel):
    items: list[InvoiceResponse]
    total: int


# --- Form State ---
class FormStateResponse(BaseModel):
    """Returned to the form when a mutation is not applied."""

    message: str
    errors: dict[str, list[str]] = Field(default_factory=dict)
