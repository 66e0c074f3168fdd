"""
Checkout screen: cart lines, payment fields and the order summary.
"""

import reflex as rx

from storefront_ui.components.common import chip_row, field, screen_header, t
from storefront_ui.models.reflex_models import LineItemModel
from storefront_ui.state import StoreState


def checkout_screen() -> rx.Component:
    return rx.box(
        screen_header(t("checkout.title")),
        rx.box(
            rx.text(t("checkout.items"), class_name="section-title"),
            rx.cond(
                StoreState.checkout_items.length() > 0,
                rx.foreach(StoreState.checkout_items, _line),
                rx.text(t("checkout.emptyCart"), class_name="muted empty-inline"),
            ),
            class_name="card",
        ),
        rx.box(
            field(
                t("checkout.paymentMethod"),
                chip_row(
                    StoreState.payment_method_options,
                    StoreState.checkout_payment_method,
                    StoreState.select_payment_method,
                ),
            ),
            field(
                t("checkout.discount"),
                rx.input(
                    placeholder=t("checkout.discountPlaceholder"),
                    value=StoreState.checkout_discount,
                    on_change=StoreState.set_checkout_discount,
                ),
            ),
            field(
                t("checkout.paidAmount"),
                rx.input(
                    value=StoreState.checkout_paid,
                    on_change=StoreState.set_checkout_paid,
                    input_mode="decimal",
                ),
            ),
            field(
                t("checkout.notes"),
                rx.text_area(
                    value=StoreState.checkout_notes,
                    on_change=StoreState.set_checkout_notes,
                ),
            ),
            class_name="card",
        ),
        _summary(),
        rx.button(
            t("checkout.placeOrder"),
            on_click=StoreState.place_order,
            size="3",
            class_name="primary-action",
        ),
        class_name="screen checkout",
    )


def _line(item: LineItemModel, index: int) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(item.name, class_name="record-title"),
            rx.text(item.price_display, class_name="muted"),
        ),
        rx.box(
            rx.button(
                rx.icon("minus", size=14),
                on_click=StoreState.change_checkout_quantity(index, -1),
                class_name="icon-button small",
            ),
            rx.text(item.quantity, class_name="stepper-value"),
            rx.button(
                rx.icon("plus", size=14),
                on_click=StoreState.change_checkout_quantity(index, 1),
                class_name="icon-button small",
            ),
            class_name="stepper",
        ),
        rx.text(item.total_display, class_name="record-amount"),
        rx.button(
            rx.icon("trash-2", size=16),
            on_click=StoreState.request_remove_item(index),
            class_name="icon-button danger",
            title=t("common.remove"),
        ),
        class_name="line-row",
    )


def _summary_row(label, value, class_name: str = "summary-row") -> rx.Component:
    return rx.box(rx.text(label), rx.text(value), class_name=class_name)


def _summary() -> rx.Component:
    summary = StoreState.checkout_summary
    return rx.box(
        _summary_row(t("checkout.subtotal"), summary["subtotal"]),
        _summary_row(t("checkout.discount"), summary["discount"]),
        _summary_row(summary["tax_label"], summary["tax"]),
        _summary_row(t("checkout.total"), summary["total"], "summary-row total"),
        class_name="card summary",
    )
