"""
Sales and purchase catalog screens.

Both screens list catalog products with a quantity stepper and keep their
own cart; the purchase screen adds the stock alert banner.
"""

import reflex as rx

from storefront_ui.components.common import chip_row, screen_header, search_box, t
from storefront_ui.models.reflex_models import ProductModel
from storefront_ui.state import StoreState


def sales_screen() -> rx.Component:
    return _catalog_screen("sales", "sales.addToCart")


def purchase_screen() -> rx.Component:
    return _catalog_screen("purchase", "purchase.addToOrder", _stock_banner())


def _catalog_screen(source: str, add_label_key: str, *extra: rx.Component) -> rx.Component:
    """
    Build a catalog screen.

    Args:
        source: Add-product source for the "new product" button.
        add_label_key: Translation key of the per-product add button.
        extra: Components shown above the search box.
    """

    def _product_card(product: ProductModel) -> rx.Component:
        return rx.box(
            rx.box(
                rx.text(product.name, class_name="record-title"),
                rx.text(t("products.product.sku"), ": ", product.sku, class_name="muted"),
                rx.box(
                    rx.cond(
                        product.grade != "",
                        rx.text(t("sales.grade"), ": ", product.grade, class_name="badge"),
                    ),
                    rx.text(t("sales.stock"), ": ", product.stock, class_name="muted"),
                    class_name="meta-row",
                ),
            ),
            rx.box(
                rx.text(product.price_display, class_name="record-amount"),
                _stepper(product),
                rx.button(
                    t(add_label_key),
                    on_click=StoreState.add_to_cart(product.id),
                    size="2",
                ),
                class_name="record-side",
            ),
            class_name=rx.cond(product.low_stock, "card product-card low-stock", "card product-card"),
        )

    return rx.box(
        screen_header(StoreState.catalog_title),
        *extra,
        search_box(
            t("sales.searchPlaceholder"),
            StoreState.catalog_query,
            StoreState.set_catalog_query,
        ),
        chip_row(
            StoreState.catalog_category_options,
            StoreState.catalog_category,
            StoreState.set_catalog_category,
        ),
        rx.cond(
            StoreState.catalog_rows.length() > 0,
            rx.box(rx.foreach(StoreState.catalog_rows, _product_card), class_name="record-list"),
            rx.text(t("sales.noProducts"), class_name="muted empty-inline"),
        ),
        rx.button(
            rx.icon("plus", size=18),
            t("sales.addProduct"),
            variant="soft",
            on_click=StoreState.open_add_product(source),
        ),
        _cart_bar(),
        class_name="screen catalog",
    )


def _stepper(product: ProductModel) -> rx.Component:
    return rx.box(
        rx.button(
            rx.icon("minus", size=14),
            on_click=StoreState.step_catalog_quantity(product.id, -1),
            class_name="icon-button small",
        ),
        rx.text(product.quantity, class_name="stepper-value"),
        rx.button(
            rx.icon("plus", size=14),
            on_click=StoreState.step_catalog_quantity(product.id, 1),
            class_name="icon-button small",
        ),
        class_name="stepper",
    )


def _cart_bar() -> rx.Component:
    return rx.box(
        rx.box(
            rx.icon("shopping-cart", size=20),
            rx.text(StoreState.cart_count_label),
            class_name="meta-row",
        ),
        rx.button(
            t("sales.checkout"),
            on_click=StoreState.navigate_to_checkout,
        ),
        class_name="cart-bar",
    )


def _stock_banner() -> rx.Component:
    return rx.box(
        rx.box(
            rx.icon("triangle-alert", size=18),
            rx.text(StoreState.low_stock_message),
            class_name="meta-row warning",
        ),
        rx.box(
            rx.icon("circle-x", size=18),
            rx.text(StoreState.out_of_stock_message),
            class_name="meta-row danger",
        ),
        class_name="card stock-banner",
    )
