"""Tests for value parsing and formatting helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from storefront_ui.utils import (
    contains_text,
    format_currency,
    format_date,
    parse_date,
    parse_number,
)


def test_format_currency():
    assert format_currency(1234.5, "SAR") == "1,234.50 SAR"
    assert format_currency(0, "") == "0.00"


def test_parse_date_formats():
    assert parse_date("2023-10-23") == datetime(2023, 10, 23)
    assert parse_date("10/23/2023") == datetime(2023, 10, 23)
    assert parse_date("   ") is None
    assert parse_date("yesterday") is None


def test_format_date_by_language():
    assert format_date("2023-10-23") == "Oct 23, 2023"
    assert format_date("2023-10-23", "ar") == "23 أكتوبر 2023"
    assert format_date("soon") == "soon"
    assert format_date(None) == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12.5", 12.5),
        (" 1,000 ", 1000.0),
        ("", None),
        (None, None),
        ("x", None),
        ("nan", None),
        ("inf", None),
        ("-Infinity", None),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_contains_text():
    assert contains_text("Jane Smith", "jane")
    assert contains_text(250.0, "250")
    assert contains_text(149.99, "149.9")
    assert not contains_text(True, "true")
    assert not contains_text(None, "")
