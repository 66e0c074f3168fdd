"""Tests for the store service registry and the demo implementation."""

from __future__ import annotations

import pytest

from storefront_ui.services import DemoStoreService, get_store_service
from storefront_ui.services.store_service import Collection


def test_registry_returns_demo_service():
    assert isinstance(get_store_service("demo"), DemoStoreService)
    assert get_store_service("demo") is get_store_service("demo")


def test_registry_rejects_unknown_kind():
    with pytest.raises(ValueError):
        get_store_service("databricks")


def test_list_and_where(service):
    assert [o.id for o in service.list("orders")] == ["10521", "10520", "10519", "10518"]
    assert [o.id for o in service.list(Collection.ORDERS, {"status": "shipped"})] == ["10521"]
    expensive = service.list("purchases", lambda record: record.total > 800)
    assert [p.id for p in expensive] == ["20521", "20519"]


def test_unknown_collection(service):
    with pytest.raises(ValueError):
        service.list("suppliers")


def test_get_compares_ids_as_strings(service):
    assert service.get("orders", 10521).party_name == "John Doe"
    assert service.get("inventory", "3").name == "Adjustable Standing Desk"
    assert service.get("orders", "99999") is None


def test_instances_do_not_share_records(service):
    service.list("orders")[0].status = "delivered"
    assert DemoStoreService().list("orders")[0].status == "shipped"


def test_kpis_and_categories(service):
    assert service.kpis("orders").total_sales == "125,430.00"
    assert service.kpis("customers") is None
    assert service.categories("purchase-catalog")[0] == "all"
    assert service.categories("orders") == ("all",)


def test_treasury_summary(service):
    assert service.treasury_summary().current_balance == "15,230.50"


def test_invoice_document_defaults(service):
    invoice = service.invoice_document({})
    assert invoice.number == "10521"
    assert invoice.total == pytest.approx(149.99)
    assert invoice.unpaid_amount == pytest.approx(99.99)
    assert len(invoice.line_items) == 2


def test_invoice_document_uses_matching_purchase(service):
    invoice = service.invoice_document({"invoice_id": "20520", "invoice_type": "purchase"})
    assert invoice.number == "20520"
    assert invoice.invoice_type == "purchase"
    assert invoice.party_name == "Tech Materials Co."
    assert invoice.invoice_date == "2023-10-22"
    assert invoice.order_status == "approved"


def test_invoice_document_prefers_pressed_record(service):
    params = {
        "invoice_id": "INV-2024-057",
        "invoice_type": "sales",
        "invoice_data": {"party_name": "Innovate Solutions", "status": "partially_paid"},
    }
    invoice = service.invoice_document(params)
    assert invoice.number == "INV-2024-057"
    assert invoice.party_name == "Innovate Solutions"
    assert invoice.order_status == "partially_paid"
    assert invoice.currency == "SAR"
