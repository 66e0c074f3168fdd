"""
Data models for the Storefront UI.

This package provides:
- Commerce records (products, orders, customers, returns, transactions)
- Navigation state (screens, checkout context, router snapshot)

All models are Python dataclasses; Reflex-facing variants live in
reflex_models and are imported only by the UI layer.
"""

from storefront_ui.models.commerce import (
    Contact,
    Customer,
    InvoiceDocument,
    InvoiceLine,
    InvoiceSummary,
    KpiSummary,
    LineItem,
    OrderTotals,
    Product,
    ReturnRecord,
    TradeRecord,
    Transaction,
    serialize_record,
)
from storefront_ui.models.navigation import (
    AddProductSource,
    CheckoutContext,
    Flow,
    NavigationState,
    OrderCallback,
    ScreenId,
)

__all__ = [
    "AddProductSource",
    "CheckoutContext",
    "Contact",
    "Customer",
    "Flow",
    "InvoiceDocument",
    "InvoiceLine",
    "InvoiceSummary",
    "KpiSummary",
    "LineItem",
    "NavigationState",
    "OrderCallback",
    "OrderTotals",
    "Product",
    "ReturnRecord",
    "ScreenId",
    "TradeRecord",
    "Transaction",
    "serialize_record",
]
