"""
Generic list/filter logic behind the management screens.

A ListingConfig describes one listing (orders, purchases, products): which
translation keys it uses, which fields are searched and which statuses the
filter chips offer. filter_records applies the status chip AND the search
box to a sequence of records while keeping their order.

The smaller lists of the customers and catalog screens live here as well.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

from storefront_ui.models.commerce import Customer, KpiSummary, Product, serialize_record
from storefront_ui.models.navigation import Flow
from storefront_ui.utils import contains_text, format_currency

T = TypeVar("T")

ALL_STATUSES = "all"
ALL_CATEGORIES = "all"


@dataclass(frozen=True, slots=True)
class ListingTranslations:
    """Translation keys a listing screen renders."""

    title_key: str
    search_placeholder_key: str
    entity_prefix: str
    status_prefix: str
    kpi_prefix: str
    empty_title_key: str
    no_search_results_key: str
    end_of_list_key: str


@dataclass(frozen=True)
class ListingConfig(Generic[T]):
    """
    Typed description of a management listing.

    Attributes:
        collection: StoreService collection the records come from.
        translations: Keys for titles, chips and empty states.
        statuses: Status values the filter chips offer (besides 'all').
        label_field: Field shown as the record's headline.
        value_field: Field shown as the record's amount.
        id_field: Record identifier field.
        status_field: Field compared with the selected status.
        search_fields: Fields searched; defaults to label, id and value.
        invoice_type: 'sales' or 'purchase' when pressing a record opens
            the invoice detail screen.
    """

    collection: str
    translations: ListingTranslations
    statuses: tuple[str, ...]
    label_field: str = "name"
    value_field: str = "value"
    id_field: str = "id"
    status_field: str = "status"
    search_fields: tuple[str, ...] | None = None
    invoice_type: str | None = None

    @property
    def fields(self) -> tuple[str, ...]:
        return self.search_fields or (self.label_field, self.id_field, self.value_field)

    @property
    def status_options(self) -> tuple[str, ...]:
        """Filter chips in display order, 'all' first."""
        return (ALL_STATUSES, *self.statuses)

    @property
    def is_invoice_related(self) -> bool:
        return self.invoice_type is not None

    def status_key(self, status: str) -> str:
        """Translation key of a status chip or badge."""
        return f"{self.translations.status_prefix}.{status}"


@dataclass(frozen=True, slots=True)
class EmptyState:
    title_key: str
    message_key: str


@dataclass(frozen=True, slots=True)
class KpiRow:
    """One metric row of the expanded KPI card."""

    label_key: str
    value: str
    tone: str = "neutral"


def field_value(record: Any, name: str) -> Any:
    """Read a field from a dataclass, object or mapping record."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def matches_search(record: Any, fields: Iterable[str], query: str) -> bool:
    """True when any field contains the query; an empty query matches all."""
    if not query:
        return True
    return any(contains_text(field_value(record, name), query) for name in fields)


def filter_records(
    records: Iterable[T],
    config: ListingConfig[T],
    status: str = ALL_STATUSES,
    query: str = "",
) -> list[T]:
    """
    Apply the status chip and the search box to a listing.

    Args:
        records: Records in source order.
        config: Listing description.
        status: 'all' or one of config.statuses.
        query: Search box text.

    Returns:
        Matching records in source order.

    Raises:
        ValueError: if the status is not offered by the listing.
    """
    if status != ALL_STATUSES and status not in config.statuses:
        raise ValueError(f"Unknown status for {config.collection}: {status}")
    return [
        record
        for record in records
        if (status == ALL_STATUSES or field_value(record, config.status_field) == status)
        and matches_search(record, config.fields, query)
    ]


def empty_state(config: ListingConfig, query: str = "") -> EmptyState:
    """Message shown when a filtered listing has nothing to display."""
    keys = config.translations
    return EmptyState(
        title_key=keys.empty_title_key,
        message_key=keys.no_search_results_key if query else keys.end_of_list_key,
    )


def invoice_detail_params(config: ListingConfig, record: Any) -> dict[str, Any]:
    """
    Build the invoice-detail parameters for a pressed record.

    Raises:
        ValueError: if the listing does not open invoices.
    """
    if not config.is_invoice_related:
        raise ValueError(f"{config.collection} records do not open an invoice")
    data = record if isinstance(record, Mapping) else serialize_record(record)
    return {
        "invoice_id": field_value(record, config.id_field),
        "invoice_type": config.invoice_type,
        "invoice_data": dict(data),
    }


def kpi_rows(kpi: KpiSummary, prefix: str) -> list[KpiRow]:
    """
    Rows of the expanded KPI card, skipping metrics the summary lacks.

    Args:
        kpi: KPI figures.
        prefix: Translation prefix of the listing's KPI labels.
    """
    currency = kpi.currency
    rows = [KpiRow(f"{prefix}.totalSales", f"{kpi.total_sales} {currency}".strip())]
    if kpi.average_invoice_value is not None:
        rows.append(
            KpiRow(
                f"{prefix}.averageInvoiceValue",
                f"{kpi.average_invoice_value} {currency}".strip(),
            )
        )
    if kpi.total_invoices is not None:
        rows.append(KpiRow(f"{prefix}.totalInvoices", kpi.total_invoices))
    if kpi.top_product is not None:
        rows.append(KpiRow(f"{prefix}.topProduct", kpi.top_product))
    if kpi.sales_growth is not None:
        tone = "positive" if kpi.growth_positive else "negative"
        rows.append(KpiRow(f"{prefix}.salesGrowth", kpi.sales_growth, tone))
    if kpi.outstanding_receivables is not None:
        rows.append(
            KpiRow(
                f"{prefix}.outstandingReceivables",
                f"{kpi.outstanding_receivables} {currency}".strip(),
                "negative",
            )
        )
    return rows


ORDERS_LISTING: ListingConfig = ListingConfig(
    collection="orders",
    translations=ListingTranslations(
        title_key="orders.title",
        search_placeholder_key="orders.searchPlaceholder",
        entity_prefix="orders.order",
        status_prefix="orders",
        kpi_prefix="orders",
        empty_title_key="orders.noMoreOrders",
        no_search_results_key="orders.noSearchResults",
        end_of_list_key="orders.endOfOrderList",
    ),
    statuses=("pending", "processing", "shipped", "delivered", "cancelled"),
    label_field="party_name",
    value_field="total",
    invoice_type="sales",
)

PURCHASES_LISTING: ListingConfig = ListingConfig(
    collection="purchases",
    translations=ListingTranslations(
        title_key="purchases.title",
        search_placeholder_key="purchases.searchPlaceholder",
        entity_prefix="purchases.purchase",
        status_prefix="purchases",
        kpi_prefix="purchases",
        empty_title_key="purchases.noMorePurchases",
        no_search_results_key="purchases.noSearchResults",
        end_of_list_key="purchases.endOfPurchaseList",
    ),
    statuses=("pending", "approved", "received", "cancelled"),
    label_field="party_name",
    value_field="total",
    invoice_type="purchase",
)

PRODUCTS_LISTING: ListingConfig = ListingConfig(
    collection="inventory",
    translations=ListingTranslations(
        title_key="products.screenTitle",
        search_placeholder_key="products.search.placeholder",
        entity_prefix="products.product",
        status_prefix="products.filters",
        kpi_prefix="products.inventory",
        empty_title_key="products.emptyState.title",
        no_search_results_key="products.emptyState.subtitle",
        end_of_list_key="products.emptyState.subtitle",
    ),
    statuses=("inStock", "lowStock", "outOfStock"),
    label_field="name",
    value_field="sku",
    search_fields=("name", "sku"),
)

LISTINGS = {
    config.collection: config
    for config in (ORDERS_LISTING, PURCHASES_LISTING, PRODUCTS_LISTING)
}


def filter_customers(customers: Iterable[Customer], query: str = "") -> list[Customer]:
    """Customers whose name or email contains the query."""
    return [c for c in customers if matches_search(c, ("name", "email"), query)]


def filter_catalog(
    products: Iterable[Product],
    category: str = ALL_CATEGORIES,
    query: str = "",
    flow: Flow | str = Flow.SALES,
) -> list[Product]:
    """
    Products shown on the sales or purchase screen.

    The sales catalog matches a category chip against the product name;
    the purchase catalog compares it with the product's category.
    """
    flow = Flow(flow)

    def in_category(product: Product) -> bool:
        if category == ALL_CATEGORIES:
            return True
        if flow is Flow.PURCHASE:
            return product.category == category
        return category.lower() in product.name.lower()

    return [
        p for p in products if in_category(p) and matches_search(p, ("name", "sku"), query)
    ]


def inventory_counts(products: Sequence[Product]) -> dict[str, int]:
    """Low-stock and out-of-stock counts for the purchase screen banner."""
    return {
        "low_stock": sum(1 for p in products if p.is_low_stock),
        "out_of_stock": sum(1 for p in products if p.stock == 0),
    }


def inventory_value(products: Iterable[Product], currency: str = "SAR") -> str:
    """Total stock value shown on the inventory card."""
    return format_currency(sum(p.price * p.stock for p in products), currency)
