"""
Management listings: sales orders, purchase orders and products.

All three share the same layout (search, status chips, KPI card and the
record list); StoreState picks the listing from the current screen.
"""

import reflex as rx

from storefront_ui.components.common import (
    chip_row,
    empty_message,
    kpi_line,
    screen_header,
    search_box,
    status_badge,
    t,
)
from storefront_ui.models.reflex_models import ProductModel, RecordModel
from storefront_ui.state import StoreState


def management_screen(add_label_key: str, add_action, summary: rx.Component) -> rx.Component:
    """
    Build a management listing screen.

    Args:
        add_label_key: Translation key of the add button.
        add_action: Event fired by the add button.
        summary: Card shown above the records (KPIs or inventory).
    """
    return rx.box(
        screen_header(StoreState.listing_title),
        search_box(
            StoreState.listing_search_placeholder,
            StoreState.listing_query,
            StoreState.set_listing_query,
        ),
        chip_row(
            StoreState.listing_status_options,
            StoreState.listing_status,
            StoreState.set_listing_status,
        ),
        summary,
        rx.cond(
            StoreState.listing_is_empty,
            empty_message(StoreState.listing_empty_title, StoreState.listing_empty_message),
            rx.box(
                rx.foreach(StoreState.listing_rows, _record_row),
                rx.foreach(StoreState.product_rows, _product_row),
                class_name="record-list",
            ),
        ),
        rx.button(
            rx.icon("plus", size=18),
            t(add_label_key),
            on_click=add_action,
            class_name="fab",
        ),
        class_name="screen management",
    )


def orders_screen() -> rx.Component:
    return management_screen("orders.addNew", StoreState.navigate_to("sales"), _kpi_card())


def purchases_screen() -> rx.Component:
    return management_screen(
        "purchases.addNew", StoreState.navigate_to("purchase-product"), _kpi_card()
    )


def products_screen() -> rx.Component:
    return management_screen(
        "products.addNew",
        StoreState.open_add_product("product-management"),
        _inventory_card(),
    )


def _kpi_card() -> rx.Component:
    """Collapsible KPI card; the first row is always visible."""
    headline = StoreState.listing_kpi_headline
    return rx.box(
        rx.box(
            rx.box(
                rx.text(headline.label, class_name="muted"),
                rx.text(headline.value, class_name="card-value"),
                rx.text(StoreState.listing_kpi_period, class_name="muted"),
            ),
            rx.cond(
                StoreState.kpi_expanded,
                rx.icon("chevron-up", size=20),
                rx.icon("chevron-down", size=20),
            ),
            on_click=StoreState.toggle_kpi,
            class_name="row-between clickable",
        ),
        rx.cond(
            StoreState.kpi_expanded,
            rx.box(
                rx.foreach(StoreState.listing_kpi_details, kpi_line),
                class_name="kpi-details",
            ),
        ),
        class_name="card kpi-card",
    )


def _record_row(record: RecordModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(record.party_name, class_name="record-title"),
            rx.text(record.id, class_name="muted"),
            rx.text(record.date, class_name="muted"),
        ),
        rx.box(
            rx.text(record.total_display, class_name="record-amount"),
            status_badge(record.status, record.status_label),
            class_name="record-side",
        ),
        on_click=StoreState.open_invoice(record.id),
        class_name="card record-row clickable",
    )


def _product_row(product: ProductModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(product.name, class_name="record-title"),
            rx.text(t("products.product.sku"), ": ", product.sku, class_name="muted"),
        ),
        rx.box(
            rx.text(product.price_display, class_name="record-amount"),
            rx.text(product.stock, " ", t("products.product.inStock"), class_name="muted"),
            status_badge(product.status, product.status_label),
            class_name="record-side",
        ),
        class_name="card record-row",
    )


def _inventory_card() -> rx.Component:
    return rx.box(
        rx.text(t("products.inventory.title"), class_name="section-title"),
        rx.box(
            rx.box(
                rx.text(t("products.inventory.totalValue"), class_name="muted"),
                rx.text(StoreState.inventory_total_value, class_name="card-value"),
            ),
            rx.box(
                rx.text(t("products.inventory.totalItems"), class_name="muted"),
                rx.text(StoreState.inventory_total_items, class_name="card-value"),
            ),
            class_name="row-between",
        ),
        rx.text(t("products.inventory.topSelling"), class_name="section-title"),
        rx.text(t("products.inventory.last30Days"), class_name="muted"),
        rx.foreach(StoreState.top_selling, kpi_line),
        class_name="card inventory-card",
    )
