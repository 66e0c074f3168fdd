"""
Reflex UI components for the Storefront application.

Each module builds one screen (or a family of screens) as plain functions
returning rx.Component:
- common: header, search box, chips, KPI rows, global dialogs
- dashboard: greeting, cards, sales goal, recent activity
- management: orders, purchases and products listings
- customers, catalog, checkout, treasury, returns, invoice_detail,
  add_product: the remaining screens
"""

from storefront_ui.components.add_product import add_product_screen
from storefront_ui.components.catalog import purchase_screen, sales_screen
from storefront_ui.components.checkout import checkout_screen
from storefront_ui.components.common import alert_dialog, confirm_dialog, loading_overlay
from storefront_ui.components.customers import customers_screen
from storefront_ui.components.dashboard import dashboard_screen
from storefront_ui.components.invoice_detail import invoice_detail_screen
from storefront_ui.components.management import (
    orders_screen,
    products_screen,
    purchases_screen,
)
from storefront_ui.components.returns import returns_screen, select_invoice_screen
from storefront_ui.components.treasury import treasury_screen

__all__ = [
    "add_product_screen",
    "alert_dialog",
    "checkout_screen",
    "confirm_dialog",
    "customers_screen",
    "dashboard_screen",
    "invoice_detail_screen",
    "loading_overlay",
    "orders_screen",
    "products_screen",
    "purchase_screen",
    "purchases_screen",
    "returns_screen",
    "sales_screen",
    "select_invoice_screen",
    "treasury_screen",
]
