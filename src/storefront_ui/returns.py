"""
Returns screens: the returns list and the select-invoice-for-return list
with its removable filter chips.
"""

from typing import Iterable, Sequence

from storefront_ui.models.commerce import InvoiceSummary, ReturnRecord
from storefront_ui.utils import contains_text

RETURN_TYPES = ("sales", "purchase")

# Chips naming a payment status; any other chip is a party name.
STATUS_CHIPS = {
    "Paid": "paid",
    "Partially Paid": "partially_paid",
    "Unpaid": "unpaid",
}

DEFAULT_CHIPS = {
    "sales": ("Paid", "Global Tech Inc."),
    "purchase": ("Paid", "ABC Supplies Ltd"),
}

STATUS_KEYS = {
    "completed": "returns.status.completed",
    "pending": "returns.status.pending",
    "refunded": "returns.status.refunded",
    "paid": "returns.status.paid",
    "partially_paid": "returns.status.partiallyPaid",
    "unpaid": "returns.status.unpaid",
}


def _check_type(return_type: str) -> None:
    if return_type not in RETURN_TYPES:
        raise ValueError(f"Unknown return type: {return_type}")


def filter_returns(returns: Iterable[ReturnRecord], query: str = "") -> list[ReturnRecord]:
    """Returns whose id, party name or original invoice contains the query."""
    query = query.strip()
    if not query:
        return list(returns)
    return [
        r
        for r in returns
        if contains_text(r.id, query)
        or contains_text(r.party_name, query)
        or contains_text(r.original_invoice, query)
    ]


def filter_return_candidates(
    invoices: Iterable[InvoiceSummary],
    query: str = "",
    chips: Sequence[str] = (),
) -> list[InvoiceSummary]:
    """
    Invoices offered for a return.

    The search matches id and party name. Every active chip then narrows
    the result further: status chips by payment status, other chips by
    exact party name.
    """
    query = query.strip()
    result = [
        invoice
        for invoice in invoices
        if not query
        or contains_text(invoice.id, query)
        or contains_text(invoice.party_name, query)
    ]
    for chip in chips:
        status = STATUS_CHIPS.get(chip)
        if status is not None:
            result = [invoice for invoice in result if invoice.status == status]
        else:
            result = [invoice for invoice in result if invoice.party_name == chip]
    return result


def remove_chip(chips: Sequence[str], chip: str) -> list[str]:
    return [c for c in chips if c != chip]


def default_chips(return_type: str) -> list[str]:
    _check_type(return_type)
    return list(DEFAULT_CHIPS[return_type])


def original_invoice_params(record: ReturnRecord, return_type: str) -> dict:
    """invoice-detail parameters for a return's original invoice link."""
    _check_type(return_type)
    return {
        "invoice_id": record.original_invoice,
        "invoice_type": return_type,
        "return_data": {
            "id": record.id,
            "party_name": record.party_name,
            "amount": record.amount,
            "return_date": record.return_date,
        },
    }


def candidate_params(invoice: InvoiceSummary, return_type: str) -> dict:
    """invoice-detail parameters for an invoice picked for a return."""
    _check_type(return_type)
    return {
        "invoice_id": invoice.id,
        "invoice_type": return_type,
        "invoice_data": {
            "id": invoice.id,
            "party_name": invoice.party_name,
            "amount": invoice.amount,
            "status": invoice.status,
            "date": invoice.date,
            "currency": invoice.currency,
        },
    }
