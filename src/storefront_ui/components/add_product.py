"""
Add-product form with the new-category dialog.
"""

import reflex as rx

from storefront_ui.components.common import field, screen_header, t
from storefront_ui.state import StoreState


def _text_input(value, on_change, placeholder="", input_mode: str = "text") -> rx.Component:
    return rx.input(
        value=value,
        on_change=on_change,
        placeholder=placeholder,
        input_mode=input_mode,
    )


def add_product_screen() -> rx.Component:
    return rx.box(
        screen_header(t("products.addProduct.title")),
        rx.box(
            field(
                t("products.addProduct.name.label"),
                _text_input(
                    StoreState.product_name,
                    StoreState.set_product_name,
                    t("products.addProduct.name.placeholder"),
                ),
            ),
            field(
                t("products.addProduct.description.label"),
                rx.text_area(
                    value=StoreState.product_description,
                    on_change=StoreState.set_product_description,
                    placeholder=t("products.addProduct.description.placeholder"),
                ),
            ),
            rx.box(
                field(
                    t("products.addProduct.costPrice.label"),
                    _text_input(StoreState.product_cost, StoreState.set_product_cost, input_mode="decimal"),
                ),
                field(
                    t("products.addProduct.salePrice.label"),
                    _text_input(StoreState.product_sale, StoreState.set_product_sale, input_mode="decimal"),
                ),
                class_name="form-row",
            ),
            rx.box(
                field(
                    t("products.addProduct.lowestSellPrice.label"),
                    _text_input(StoreState.product_lowest, StoreState.set_product_lowest, input_mode="decimal"),
                ),
                field(
                    t("products.addProduct.openingQuantity.label"),
                    _text_input(
                        StoreState.product_quantity, StoreState.set_product_quantity, input_mode="numeric"
                    ),
                ),
                class_name="form-row",
            ),
            field(
                t("products.addProduct.barcode.label"),
                rx.box(
                    _text_input(StoreState.product_barcode, StoreState.set_product_barcode),
                    rx.button(
                        rx.icon("barcode", size=16),
                        t("products.addProduct.barcode.generate"),
                        variant="soft",
                        on_click=StoreState.generate_product_barcode,
                    ),
                    class_name="input-with-action",
                ),
            ),
            field(
                t("products.addProduct.category.label"),
                rx.box(
                    rx.select(
                        StoreState.product_category_options,
                        value=StoreState.product_category,
                        on_change=StoreState.set_product_category,
                        placeholder=t("products.addProduct.category.placeholder"),
                    ),
                    rx.button(
                        rx.icon("plus", size=16),
                        t("products.addProduct.category.createNew"),
                        variant="ghost",
                        on_click=StoreState.open_category_dialog,
                    ),
                    class_name="input-with-action",
                ),
            ),
            class_name="card form",
        ),
        rx.button(
            t("products.addProduct.save"),
            on_click=StoreState.save_product,
            size="3",
            class_name="primary-action",
        ),
        _category_dialog(),
        class_name="screen add-product",
    )


def _category_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(t("products.addProduct.category.newTitle")),
            rx.input(
                value=StoreState.new_category_name,
                on_change=StoreState.set_new_category_name,
                placeholder=t("products.addProduct.category.newPlaceholder"),
            ),
            rx.box(
                rx.button(
                    t("common.cancel"), variant="soft", on_click=StoreState.close_category_dialog
                ),
                rx.button(t("common.add"), on_click=StoreState.save_new_category),
                class_name="dialog-actions",
            ),
        ),
        open=StoreState.category_dialog_open,
    )
