"""
Invoice Computation

Pure functions: no storage, no I/O. Callers holding line items use these to
produce the totalAmount snapshot before saving an invoice, and to render
previews and dashboards.

Arithmetic is plain float. Rounding to 2 decimal places is a display
concern and does not happen here.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Iterable, Optional, Union

from pydantic import BaseModel

from invoice_desk.models.entities import Invoice, InvoiceItem, InvoiceStatus


DEFAULT_TAX_RATE = 10.0
DEFAULT_DUE_DAYS = 7


class InvoiceTotals(BaseModel):
    """Derived amounts for a set of line items."""

    subtotal: float
    tax_amount: float
    total: float


class InvoiceSummary(BaseModel):
    """Dashboard figures over a user's invoices."""

    invoice_count: int
    revenue: float
    pending_count: int


def line_total(item: InvoiceItem) -> float:
    return item.quantity * item.price


def calculate_subtotal(items: Iterable[InvoiceItem]) -> float:
    """Sum of quantity x price. Empty input gives 0."""
    return sum((line_total(item) for item in items), 0.0)


def calculate_tax_amount(subtotal: float, tax_rate: Optional[float]) -> float:
    """Tax on a subtotal at a percentage rate. A missing rate counts as 0."""
    return subtotal * ((tax_rate or 0) / 100)


def calculate_totals(
    items: Iterable[InvoiceItem],
    tax_rate: Optional[float] = None,
) -> InvoiceTotals:
    subtotal = calculate_subtotal(items)
    tax_amount = calculate_tax_amount(subtotal, tax_rate)
    return InvoiceTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
    )


def calculate_total(
    items: Iterable[InvoiceItem],
    tax_rate: Optional[float] = None,
) -> float:
    """Grand total (subtotal + tax): the value stored as totalAmount."""
    return calculate_totals(items, tax_rate).total


def summarize_invoices(invoices: Iterable[Invoice]) -> InvoiceSummary:
    """
    Revenue counts only paid invoices; anything not paid is pending.

    Uses the stored totalAmount snapshot, not a recomputation from items.
    """
    invoices = list(invoices)
    revenue = sum(
        (inv.total_amount for inv in invoices if inv.status == InvoiceStatus.PAID),
        0.0,
    )
    pending = sum(1 for inv in invoices if inv.status != InvoiceStatus.PAID)
    return InvoiceSummary(
        invoice_count=len(invoices),
        revenue=revenue,
        pending_count=pending,
    )


def filter_by_status(
    invoices: Iterable[Invoice],
    status: Union[InvoiceStatus, str, None] = None,
) -> list[Invoice]:
    """
    Invoices with the given status, in order. None or "all" keeps everything.

    A status no invoice can have (e.g. "pending") matches nothing.
    """
    if status is None or status == "all":
        return list(invoices)
    return [inv for inv in invoices if inv.status.value == status]


def new_invoice_defaults(now: Optional[datetime] = None) -> dict:
    """
    Starting values for a fresh invoice form.

    The invoice number is derived from the last six digits of the current
    epoch milliseconds, so it is unique enough for a demo, not guaranteed.
    """
    now = now or datetime.now(timezone.utc)
    today: date = now.date()
    millis = int(now.timestamp() * 1000)
    return {
        "invoice_number": f"INV-{str(millis)[-6:]}",
        "date": today,
        "due_date": today + timedelta(days=DEFAULT_DUE_DAYS),
        "items": [
            InvoiceItem(id=str(millis), description="", quantity=1, price=0),
        ],
        "tax_rate": DEFAULT_TAX_RATE,
        "status": InvoiceStatus.DRAFT,
    }
