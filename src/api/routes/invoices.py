"""Dashboard routes for listing and mutating invoices."""

from fastapi import APIRouter, Depends, Form, Response
from fastapi.responses import JSONResponse, RedirectResponse

from src.adapters.clock import SystemClock
from src.adapters.path_cache import PathCache
from src.adapters.sqlite.repos import SQLiteInvoiceRepo
from src.api.deps import get_clock, get_invoice_config, get_invoice_repo, get_path_cache
from src.api.schemas import FormStateResponse, InvoiceListResponse, InvoiceResponse
from src.components.invoices import (
    Completed,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceConfig,
    MutationResult,
    UpdateInvoiceInput,
    run_create,
    run_delete,
    run_update,
)

router = APIRouter()


def _form_fields(
    customer_id: str | None, amount: str | None, status: str | None
) -> dict[str, str | None]:
    return {"customerId": customer_id, "amount": amount, "status": status}


def _to_response(result: MutationResult) -> Response:
    """Map a mutation result onto HTTP: navigation, empty success or form state."""
    if isinstance(result, Completed):
        if result.navigate is not None:
            return RedirectResponse(url=result.navigate.path, status_code=303)
        return Response(status_code=204)

    state = FormStateResponse(message=result.message, errors=result.field_errors)
    status_code = 422 if result.field_errors else 500
    return JSONResponse(status_code=status_code, content=state.model_dump())


# --- Routes ---


@router.get("", response_model=InvoiceListResponse)
def list_invoices(
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: PathCache = Depends(get_path_cache),
    config: InvoiceConfig = Depends(get_invoice_config),
) -> InvoiceListResponse:
    """List all invoices, served from the view cache when warm."""
    version = cache.version(config.listing_path)
    cached = cache.get(config.listing_path)
    if cached is not None:
        return cached

    invoices = repo.list_all()
    payload = InvoiceListResponse(
        items=[
            InvoiceResponse(
                id=inv.id,
                customer_id=inv.customer_id,
                amount=inv.amount,
                status=inv.status,
                date=inv.date,
            )
            for inv in invoices
        ],
        total=len(invoices),
    )
    cache.set_if_version(config.listing_path, version, payload)
    return payload


@router.post("/create")
def create_invoice(
    customer_id: str | None = Form(default=None, alias="customerId"),
    amount: str | None = Form(default=None),
    status: str | None = Form(default=None),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: PathCache = Depends(get_path_cache),
    clock: SystemClock = Depends(get_clock),
    config: InvoiceConfig = Depends(get_invoice_config),
) -> Response:
    """Create an invoice from the submitted form."""
    input_data = CreateInvoiceInput(form=_form_fields(customer_id, amount, status))
    result = run_create(input_data, repo=repo, cache=cache, clock=clock, config=config)
    return _to_response(result)


@router.post("/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    customer_id: str | None = Form(default=None, alias="customerId"),
    amount: str | None = Form(default=None),
    status: str | None = Form(default=None),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: PathCache = Depends(get_path_cache),
    config: InvoiceConfig = Depends(get_invoice_config),
) -> Response:
    """Update an invoice from the submitted form."""
    input_data = UpdateInvoiceInput(
        invoice_id=invoice_id,
        form=_form_fields(customer_id, amount, status),
    )
    result = run_update(input_data, repo=repo, cache=cache, config=config)
    return _to_response(result)


@router.post("/{invoice_id}/delete")
def delete_invoice(
    invoice_id: str,
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: PathCache = Depends(get_path_cache),
    config: InvoiceConfig = Depends(get_invoice_config),
) -> Response:
    """Delete an invoice."""
    result = run_delete(DeleteInvoiceInput(invoice_id=invoice_id), repo=repo, cache=cache, config=config)
    return _to_response(result)
