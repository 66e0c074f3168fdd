"""
Navigation models for the Storefront UI.

The app shows exactly one screen at a time. NavigationState captures that
screen together with the small amount of context some screens need:

    NavigationState
    ├── current_screen (ScreenId)
    ├── checkout (CheckoutContext | None)   only while on checkout
    ├── invoice_detail_params (Mapping | None)   only while on invoice-detail
    ├── previous_screen (ScreenId)   return target of invoice-detail
    └── add_product_source (AddProductSource)   return target of add-product
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping

from storefront_ui.models.commerce import LineItem


class ScreenId(str, Enum):
    """Closed set of screens the router can show."""

    DASHBOARD = "dashboard"
    CUSTOMERS = "customers"
    ORDERS = "orders"
    PURCHASES = "purchases"
    PRODUCT_MANAGEMENT = "product-management"
    ADD_PRODUCT = "add-product"
    SALES = "sales"
    PURCHASE_PRODUCT = "purchase-product"
    TREASURY = "treasury"
    RETURNS = "returns"
    SELECT_INVOICE = "select-invoice"
    INVOICE_DETAIL = "invoice-detail"
    CHECKOUT = "checkout"


class Flow(str, Enum):
    """Origin of a checkout."""

    SALES = "sales"
    PURCHASE = "purchase"

    @property
    def home_screen(self) -> ScreenId:
        """Screen the flow returns to once checkout ends."""
        return ScreenId.SALES if self is Flow.SALES else ScreenId.PURCHASE_PRODUCT


class AddProductSource(str, Enum):
    """Screen that opened the add-product form."""

    SALES = "sales"
    PURCHASE = "purchase"
    PRODUCT_MANAGEMENT = "product-management"

    @property
    def return_screen(self) -> ScreenId:
        """Screen add-product goes back to."""
        if self is AddProductSource.SALES:
            return ScreenId.SALES
        if self is AddProductSource.PURCHASE:
            return ScreenId.PURCHASE_PRODUCT
        return ScreenId.PRODUCT_MANAGEMENT


OrderCallback = Callable[[dict[str, Any]], None]


@dataclass(frozen=True, slots=True)
class CheckoutContext:
    """Cart handed to the checkout screen and where it came from."""

    cart: tuple[LineItem, ...]
    flow: Flow = Flow.SALES
    on_complete: OrderCallback | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Immutable snapshot of the router."""

    current_screen: ScreenId = ScreenId.DASHBOARD
    checkout: CheckoutContext | None = None
    invoice_detail_params: Mapping[str, Any] | None = None
    previous_screen: ScreenId = ScreenId.DASHBOARD
    add_product_source: AddProductSource = AddProductSource.PRODUCT_MANAGEMENT

    @property
    def is_home(self) -> bool:
        """True when the dashboard is showing."""
        return self.current_screen is ScreenId.DASHBOARD
