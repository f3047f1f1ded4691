from datetime import date
from typing import Literal

from pydantic import BaseModel

# --- Enums / Literals ---
InvoiceStatus = Literal["pending", "paid"]
INVOICE_STATUSES: tuple[InvoiceStatus, ...] = ("pending", "paid")

# --- Invoices ---

class Invoice(BaseModel):
    id: str
    customer_id: str
    amount: int  # minor currency units (cents)
    status: InvoiceStatus
    date: date
