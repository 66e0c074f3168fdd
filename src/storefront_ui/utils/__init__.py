"""Utility functions shared across the storefront UI package."""

from storefront_ui.utils.formatting import (
    contains_text,
    format_currency,
    format_date,
    parse_date,
    parse_number,
)

__all__ = [
    "contains_text",
    "format_currency",
    "format_date",
    "parse_date",
    "parse_number",
]
