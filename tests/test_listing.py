"""Tests for listing filters, empty states and KPI rows."""

from __future__ import annotations

import pytest

from storefront_ui.data import demo_records
from storefront_ui.listing import (
    ORDERS_LISTING,
    PRODUCTS_LISTING,
    PURCHASES_LISTING,
    ListingConfig,
    empty_state,
    filter_catalog,
    filter_customers,
    filter_records,
    inventory_counts,
    inventory_value,
    invoice_detail_params,
    kpi_rows,
)
from storefront_ui.models.commerce import KpiSummary

ORDERS = demo_records.DEMO_ORDERS


def _ids(records):
    return [record.id for record in records]


# ---------------------------------------------------------------------------
# Management listings
# ---------------------------------------------------------------------------


def test_all_status_and_blank_query_keep_source_order():
    assert _ids(filter_records(ORDERS, ORDERS_LISTING)) == ["10521", "10520", "10519", "10518"]


def test_status_filter():
    assert _ids(filter_records(ORDERS, ORDERS_LISTING, "shipped")) == ["10521"]
    assert filter_records(ORDERS, ORDERS_LISTING, "pending") == []


def test_search_is_case_insensitive_on_party_name():
    assert _ids(filter_records(ORDERS, ORDERS_LISTING, query="jane")) == ["10520"]


def test_search_matches_amount_as_typed():
    assert _ids(filter_records(ORDERS, ORDERS_LISTING, query="250")) == ["10519"]


def test_status_and_search_combine():
    assert filter_records(ORDERS, ORDERS_LISTING, "shipped", "jane") == []


def test_unknown_status_is_rejected():
    with pytest.raises(ValueError):
        filter_records(ORDERS, ORDERS_LISTING, "lost")


def test_filter_accepts_mapping_records():
    rows = [{"id": "1", "party_name": "Acme", "status": "pending", "total": 5.0}]
    assert filter_records(rows, ORDERS_LISTING, "pending", "acme") == rows


def test_status_and_search_intersect():
    invoices = ListingConfig(
        collection="invoices",
        translations=ORDERS_LISTING.translations,
        statuses=("paid", "unpaid"),
        label_field="party_name",
        value_field="total",
    )
    rows = [
        {"id": "1", "party_name": "Acme", "status": "paid", "total": 10.0},
        {"id": "2", "party_name": "Acme", "status": "unpaid", "total": 20.0},
        {"id": "3", "party_name": "Globex", "status": "paid", "total": 30.0},
    ]
    assert filter_records(rows, invoices, "paid", "acme") == [rows[0]]


def test_products_listing_filters_stock_status():
    products = filter_records(demo_records.DEMO_INVENTORY, PRODUCTS_LISTING, "lowStock")
    assert [p.name for p in products] == ["Wireless Mechanical Keyboard"]
    by_sku = filter_records(demo_records.DEMO_INVENTORY, PRODUCTS_LISTING, query="mon-4k")
    assert [p.id for p in by_sku] == [4]


def test_status_options_start_with_all():
    assert PURCHASES_LISTING.status_options[0] == "all"
    assert ORDERS_LISTING.status_key("shipped") == "orders.shipped"


def test_empty_state_depends_on_query():
    assert empty_state(ORDERS_LISTING, "zzz").message_key == "orders.noSearchResults"
    idle = empty_state(ORDERS_LISTING)
    assert idle.title_key == "orders.noMoreOrders"
    assert idle.message_key == "orders.endOfOrderList"


def test_empty_state_keys_exist(translator):
    for config in (ORDERS_LISTING, PURCHASES_LISTING, PRODUCTS_LISTING):
        keys = config.translations
        for key in (keys.title_key, keys.empty_title_key, keys.no_search_results_key):
            assert translator.has(key), key


def test_invoice_detail_params_for_orders():
    params = invoice_detail_params(ORDERS_LISTING, ORDERS[0])
    assert params["invoice_id"] == "10521"
    assert params["invoice_type"] == "sales"
    assert params["invoice_data"]["party_name"] == "John Doe"


def test_invoice_detail_params_for_purchases():
    record = demo_records.DEMO_PURCHASES[1]
    assert invoice_detail_params(PURCHASES_LISTING, record)["invoice_type"] == "purchase"


def test_products_do_not_open_invoices():
    with pytest.raises(ValueError):
        invoice_detail_params(PRODUCTS_LISTING, demo_records.DEMO_INVENTORY[0])


# ---------------------------------------------------------------------------
# KPI card
# ---------------------------------------------------------------------------


def test_kpi_rows_for_full_summary():
    rows = kpi_rows(demo_records.ORDERS_KPI, "orders")
    assert len(rows) == 6
    assert rows[0].label_key == "orders.totalSales"
    assert rows[0].value == "125,430.00 SAR"
    assert rows[-1].tone == "negative"


def test_kpi_rows_skip_missing_metrics():
    summary = KpiSummary(total_sales="10", sales_growth="-2%", growth_positive=False)
    rows = kpi_rows(summary, "purchases")
    assert [row.label_key for row in rows] == ["purchases.totalSales", "purchases.salesGrowth"]
    assert rows[1].tone == "negative"


# ---------------------------------------------------------------------------
# Customers and catalogs
# ---------------------------------------------------------------------------


def test_filter_customers_by_name_and_email():
    customers = demo_records.DEMO_CUSTOMERS
    assert [c.name for c in filter_customers(customers, "clara")] == ["Clara Oswald"]
    assert len(filter_customers(customers, "@email.com")) == 4
    assert filter_customers(customers, "nobody") == []


def test_sales_catalog_category_matches_product_name(make_product):
    products = [
        make_product(1, "Electronics Bundle", category="electronics"),
        make_product(2, "Phone Case", category="electronics"),
    ]
    result = filter_catalog(products, "electronics", flow="sales")
    assert [p.name for p in result] == ["Electronics Bundle"]


def test_purchase_catalog_category_is_exact():
    result = filter_catalog(demo_records.DEMO_PURCHASE_CATALOG, "office", flow="purchase")
    assert [p.name for p in result] == ["Office Supplies Bulk Pack"]


def test_catalog_search_by_name_or_sku():
    catalog = demo_records.DEMO_SALES_CATALOG
    assert [p.id for p in filter_catalog(catalog, query="std-002")] == [2]
    assert [p.id for p in filter_catalog(catalog, query="product")] == [1, 2, 3]


def test_inventory_banner_counts():
    counts = inventory_counts(demo_records.DEMO_PURCHASE_CATALOG)
    assert counts == {"low_stock": 3, "out_of_stock": 1}
    assert inventory_counts(demo_records.DEMO_INVENTORY) == {"low_stock": 1, "out_of_stock": 1}


def test_inventory_value():
    assert inventory_value(demo_records.DEMO_INVENTORY) == "28,211.48 SAR"
