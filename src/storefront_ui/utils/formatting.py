"""Helper functions for parsing and formatting user-facing values."""

from __future__ import annotations

import math
from datetime import datetime

_ARABIC_MONTHS = (
    "يناير",
    "فبراير",
    "مارس",
    "أبريل",
    "مايو",
    "يونيو",
    "يوليو",
    "أغسطس",
    "سبتمبر",
    "أكتوبر",
    "نوفمبر",
    "ديسمبر",
)


def format_currency(value: float, currency: str) -> str:
    """Format an amount followed by its currency code, e.g. '1,234.50 SAR'."""
    return f"{value:,.2f} {currency}".strip()


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse an ISO (2023-10-23) or m/d/Y date string.

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        return datetime.strptime(date_str, "%m/%d/%Y")
    except ValueError:
        return None


def format_date(date_str: str | None, language: str = "en") -> str:
    """
    Format a date for display in the given language.

    English renders as 'Oct 23, 2023', Arabic as '23 أكتوبر 2023'.
    Unparseable input is returned unchanged.
    """
    date = parse_date(date_str)
    if date is None:
        return date_str or ""
    if language == "ar":
        return f"{date.day} {_ARABIC_MONTHS[date.month - 1]} {date.year}"
    return date.strftime("%b %d, %Y")


def parse_number(text: str | None) -> float | None:
    """
    Leniently parse a numeric form field.

    Accepts surrounding whitespace and thousands separators. Returns None
    for blank or unparseable input, including "nan" and "inf".
    """
    if text is None:
        return None
    cleaned = str(text).strip().replace(",", "")
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def contains_text(value: object, query: str) -> bool:
    """
    Case-insensitive substring test used by every search box.

    Strings are compared lowercased; numbers match on their string form.
    Other values never match.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return query.lower() in value.lower()
    if isinstance(value, (int, float)):
        return query in _number_text(value)
    return False


def _number_text(value: int | float) -> str:
    """Render numbers the way they are typed: 250.0 becomes '250'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
