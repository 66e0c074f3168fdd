"""Storefront UI: bilingual small-business storefront built with Reflex."""

__version__ = "0.1.0"
