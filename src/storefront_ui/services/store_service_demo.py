"""
Demo implementation of StoreService using static in-memory data.

This service is useful for:
- Local development without a backend
- Testing screen logic with realistic data
"""

import copy
from dataclasses import replace
from typing import Any, Mapping, Sequence

from storefront_ui.data import demo_records
from storefront_ui.lib import logs
from storefront_ui.models.commerce import InvoiceDocument, KpiSummary
from storefront_ui.services.store_service import (
    Collection,
    StoreService,
    Where,
    matches_where,
)
from storefront_ui.treasury import TreasurySummary

LOG = logs.logger(__file__)

_DEMO_COLLECTIONS: dict[Collection, Sequence[Any]] = {
    Collection.ORDERS: demo_records.DEMO_ORDERS,
    Collection.PURCHASES: demo_records.DEMO_PURCHASES,
    Collection.INVENTORY: demo_records.DEMO_INVENTORY,
    Collection.SALES_CATALOG: demo_records.DEMO_SALES_CATALOG,
    Collection.PURCHASE_CATALOG: demo_records.DEMO_PURCHASE_CATALOG,
    Collection.CUSTOMERS: demo_records.DEMO_CUSTOMERS,
    Collection.TRANSACTIONS: demo_records.DEMO_TRANSACTIONS,
    Collection.SALES_RETURNS: demo_records.DEMO_SALES_RETURNS,
    Collection.PURCHASE_RETURNS: demo_records.DEMO_PURCHASE_RETURNS,
    Collection.SALES_INVOICES: demo_records.DEMO_SALES_INVOICES,
    Collection.PURCHASE_INVOICES: demo_records.DEMO_PURCHASE_INVOICES,
}

_DEMO_KPIS = {
    Collection.ORDERS: demo_records.ORDERS_KPI,
    Collection.PURCHASES: demo_records.PURCHASES_KPI,
}

_DEMO_CATEGORIES = {
    Collection.SALES_CATALOG: demo_records.SALES_CATEGORIES,
    Collection.PURCHASE_CATALOG: demo_records.PURCHASE_CATEGORIES,
}


def _collection(collection: Collection | str) -> Collection:
    try:
        return Collection(collection)
    except ValueError as exc:
        raise ValueError(f"Unknown collection: {collection}") from exc


class DemoStoreService(StoreService):
    """
    In-memory store service backed by static demo data.

    Each instance works on its own copy of the records, so callers may
    mutate what they receive without affecting other sessions.
    """

    def __init__(self, records: Mapping[Collection, Sequence[Any]] | None = None) -> None:
        """
        Initialize with record data.

        Args:
            records: Custom records per collection, or None for the demo data.
        """
        source = records if records is not None else _DEMO_COLLECTIONS
        self._records = {_collection(name): copy.deepcopy(list(rows)) for name, rows in source.items()}

    def list(self, collection: Collection | str, where: Where = None) -> list[Any]:
        rows = self._records.get(_collection(collection), [])
        return [record for record in rows if matches_where(record, where)]

    def kpis(self, collection: Collection | str) -> KpiSummary | None:
        return _DEMO_KPIS.get(_collection(collection))

    def treasury_summary(self) -> TreasurySummary:
        return TreasurySummary(**demo_records.TREASURY_FIGURES)

    def categories(self, collection: Collection | str) -> tuple[str, ...]:
        return _DEMO_CATEGORIES.get(_collection(collection), ("all",))

    def invoice_document(self, params: Mapping[str, Any]) -> InvoiceDocument:
        """
        Build the invoice for the detail screen.

        Header fields come from the pressed record (or the matching order
        or purchase); line items and amounts come from the sample invoice.
        """
        template = demo_records.SAMPLE_INVOICE
        invoice_id = str(params.get("invoice_id") or template.number)
        invoice_type = params.get("invoice_type") or "sales"
        data = params.get("invoice_data") or {}

        source = Collection.PURCHASES if invoice_type == "purchase" else Collection.ORDERS
        record = self.get(source, invoice_id)
        LOG.debug("invoice_document - id:%s type:%s found:%s", invoice_id, invoice_type, bool(record))

        def pick(key: str, attr: str, default: Any) -> Any:
            if data.get(key):
                return data[key]
            if record is not None:
                return getattr(record, attr)
            return default

        return replace(
            template,
            number=invoice_id,
            invoice_type=invoice_type,
            party_name=pick("party_name", "party_name", template.party_name),
            invoice_date=pick("date", "date", template.invoice_date),
            order_status=pick("status", "status", template.order_status),
            currency=pick("currency", "currency", template.currency),
        )
