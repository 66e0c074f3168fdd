"""
Abstract base class defining the store data access contract.

Screens read every record through a StoreService, so the mock data can be
replaced without touching screen logic. Records are addressed by
collection; ``list`` filters with field equality or a predicate and
``get`` looks a record up by id.

Implementations:
- DemoStoreService: Static in-memory data for development/testing
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Mapping

from storefront_ui.models.commerce import InvoiceDocument, KpiSummary
from storefront_ui.treasury import TreasurySummary

Where = Mapping[str, Any] | Callable[[Any], bool] | None


class Collection(str, Enum):
    """Record collections a StoreService serves."""

    ORDERS = "orders"
    PURCHASES = "purchases"
    INVENTORY = "inventory"
    SALES_CATALOG = "sales-catalog"
    PURCHASE_CATALOG = "purchase-catalog"
    CUSTOMERS = "customers"
    TRANSACTIONS = "transactions"
    SALES_RETURNS = "sales-returns"
    PURCHASE_RETURNS = "purchase-returns"
    SALES_INVOICES = "sales-invoices"
    PURCHASE_INVOICES = "purchase-invoices"


class StoreService(ABC):
    """
    Abstract base class for store data access.

    Subclasses implement list(); get() and the summary lookups have
    defaults built on top of it.
    """

    @abstractmethod
    def list(self, collection: Collection | str, where: Where = None) -> list[Any]:
        """
        Return the records of a collection in source order.

        Args:
            collection: Collection to read.
            where: Field/value pairs every record must equal, or a
                predicate called with each record.

        Raises:
            ValueError: for an unknown collection.
        """

    def get(self, collection: Collection | str, record_id: Any) -> Any | None:
        """
        Return the record with the given id, or None.

        Ids are compared on their string form so '10521' finds 10521.
        """
        wanted = str(record_id)
        for record in self.list(collection):
            if str(getattr(record, "id", None)) == wanted:
                return record
        return None

    def kpis(self, collection: Collection | str) -> KpiSummary | None:
        """KPI figures for a listing, when the collection has them."""
        return None

    @abstractmethod
    def treasury_summary(self) -> TreasurySummary:
        """Figures for the treasury overview card."""

    @abstractmethod
    def invoice_document(self, params: Mapping[str, Any]) -> InvoiceDocument:
        """
        Resolve invoice-detail parameters into a full invoice.

        Args:
            params: ``invoice_id`` and ``invoice_type``, optionally
                ``invoice_data`` with the pressed record.
        """

    @abstractmethod
    def categories(self, collection: Collection | str) -> tuple[str, ...]:
        """Category chips of a catalog collection, 'all' first."""


def matches_where(record: Any, where: Where) -> bool:
    """Apply a ``where`` filter to a single record."""
    if where is None:
        return True
    if callable(where):
        return bool(where(record))
    return all(getattr(record, name, None) == value for name, value in where.items())
