"""Invoice computation package."""

from invoice_desk.billing.totals import (
    DEFAULT_DUE_DAYS,
    DEFAULT_TAX_RATE,
    InvoiceSummary,
    InvoiceTotals,
    calculate_subtotal,
    calculate_tax_amount,
    calculate_total,
    calculate_totals,
    filter_by_status,
    line_total,
    new_invoice_defaults,
    summarize_invoices,
)

__all__ = [
    "DEFAULT_DUE_DAYS",
    "DEFAULT_TAX_RATE",
    "InvoiceSummary",
    "InvoiceTotals",
    "calculate_subtotal",
    "calculate_tax_amount",
    "calculate_total",
    "calculate_totals",
    "filter_by_status",
    "line_total",
    "new_invoice_defaults",
    "summarize_invoices",
]
