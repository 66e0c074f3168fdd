"""Tests for the returns list and the select-invoice-for-return list."""

from __future__ import annotations

import pytest

from storefront_ui.data import demo_records
from storefront_ui.returns import (
    candidate_params,
    default_chips,
    filter_return_candidates,
    filter_returns,
    original_invoice_params,
    remove_chip,
)

SALES_RETURNS = demo_records.DEMO_SALES_RETURNS
SALES_INVOICES = demo_records.DEMO_SALES_INVOICES


def _ids(records):
    return [record.id for record in records]


def test_blank_query_returns_everything():
    assert _ids(filter_returns(SALES_RETURNS, "  ")) == ["RI-00123", "RI-00122", "RI-00121"]


@pytest.mark.parametrize(
    "query, expected",
    [("ri-00121", ["RI-00121"]), ("jane", ["RI-00122"]), ("INV-54321", ["RI-00123"])],
)
def test_filter_returns(query, expected):
    assert _ids(filter_returns(SALES_RETURNS, query)) == expected


def test_default_chips_narrow_candidates():
    chips = default_chips("sales")
    assert chips == ["Paid", "Global Tech Inc."]
    assert _ids(filter_return_candidates(SALES_INVOICES, chips=chips)) == ["INV-2024-058"]


def test_removing_party_chip_leaves_status_filter():
    chips = remove_chip(default_chips("sales"), "Global Tech Inc.")
    assert chips == ["Paid"]
    assert _ids(filter_return_candidates(SALES_INVOICES, chips=chips)) == [
        "INV-2024-058",
        "INV-2024-055",
        "INV-2024-053",
        "INV-2024-051",
        "INV-2024-049",
    ]


def test_candidate_search_without_chips():
    assert _ids(filter_return_candidates(SALES_INVOICES, "quantum")) == ["INV-2024-056"]
    assert len(filter_return_candidates(SALES_INVOICES)) == 10


def test_purchase_defaults():
    chips = default_chips("purchase")
    result = filter_return_candidates(demo_records.DEMO_PURCHASE_INVOICES, chips=chips)
    assert _ids(result) == ["PO-2024-058"]


def test_unknown_return_type():
    with pytest.raises(ValueError):
        default_chips("exchange")
    with pytest.raises(ValueError):
        candidate_params(SALES_INVOICES[0], "exchange")


def test_original_invoice_params():
    params = original_invoice_params(SALES_RETURNS[1], "sales")
    assert params["invoice_id"] == "INV-54310"
    assert params["invoice_type"] == "sales"
    assert params["return_data"]["id"] == "RI-00122"


def test_candidate_params():
    params = candidate_params(SALES_INVOICES[0], "sales")
    assert params["invoice_id"] == "INV-2024-058"
    assert params["invoice_data"]["party_name"] == "Global Tech Inc."
    assert params["invoice_data"]["status"] == "paid"
