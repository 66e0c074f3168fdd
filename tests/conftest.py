"""Shared fixtures for the storefront_ui test suite."""

from __future__ import annotations

import pytest

from storefront_ui.i18n import Translator, load_translations
from storefront_ui.models.commerce import LineItem, Product
from storefront_ui.services import DemoStoreService


@pytest.fixture(scope="session")
def resources():
    return load_translations()


@pytest.fixture
def translator(resources):
    return Translator(resources, "en")


@pytest.fixture
def arabic(resources):
    return Translator(resources, "ar")


@pytest.fixture
def service():
    return DemoStoreService()


@pytest.fixture
def cart():
    """The worked checkout example: 2 x 100 plus 1 x 50."""
    return [
        LineItem(product_id=1, name="Widget", price=100.0, quantity=2, sku="W-1"),
        LineItem(product_id=2, name="Gadget", price=50.0, quantity=1, sku="G-2"),
    ]


@pytest.fixture
def make_product():
    def _make(product_id: int = 1, name: str = "Widget", price: float = 10.0, stock: int = 10, **extra):
        return Product(product_id, name, f"SKU-{product_id}", price, stock, **extra)

    return _make


class MemoryStore:
    """In-memory preference store."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


class FailingStore(MemoryStore):
    """Store whose writes always fail."""

    def set(self, key, value):
        raise OSError("disk full")


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def failing_store():
    return FailingStore()
