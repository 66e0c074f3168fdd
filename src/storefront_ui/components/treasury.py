"""
Treasury screen: balance overview, transaction tabs and the
payment/receipt dialog.
"""

import reflex as rx

from storefront_ui.components.common import (
    chip_row,
    field,
    option_select,
    screen_header,
    search_box,
    t,
)
from storefront_ui.models.reflex_models import TransactionModel
from storefront_ui.state import StoreState


def treasury_screen() -> rx.Component:
    return rx.box(
        screen_header(t("treasury.title")),
        _balance_card(),
        rx.box(
            rx.button(
                rx.icon("arrow-down-left", size=18),
                t("treasury.actions.addReceipt"),
                on_click=StoreState.open_payment_dialog("receipt"),
            ),
            rx.button(
                rx.icon("arrow-up-right", size=18),
                t("treasury.actions.addPayment"),
                variant="soft",
                on_click=StoreState.open_payment_dialog("payment"),
            ),
            class_name="action-row",
        ),
        rx.text(t("treasury.transactions.title"), class_name="section-title"),
        chip_row(
            StoreState.treasury_tab_options,
            StoreState.treasury_tab,
            StoreState.set_treasury_tab,
        ),
        search_box(
            t("treasury.searchPlaceholder"),
            StoreState.treasury_query,
            StoreState.set_treasury_query,
        ),
        rx.cond(
            StoreState.transaction_rows.length() > 0,
            rx.box(rx.foreach(StoreState.transaction_rows, _transaction_row), class_name="record-list"),
            rx.text(t("treasury.transactions.empty"), class_name="muted empty-inline"),
        ),
        _payment_dialog(),
        class_name="screen treasury",
    )


def _figure(label_key: str, key: str) -> rx.Component:
    return rx.box(
        rx.text(t(label_key), class_name="muted"),
        rx.text(StoreState.treasury_figures[key], class_name="kpi-value"),
        class_name="kpi-line",
    )


def _balance_card() -> rx.Component:
    return rx.box(
        rx.box(
            option_select(
                StoreState.treasury_period_options,
                StoreState.treasury_period,
                StoreState.set_treasury_period,
            ),
            class_name="row-between",
        ),
        rx.text(t("treasury.currentBalance"), class_name="muted"),
        rx.text(StoreState.treasury_figures["current_balance"], class_name="card-value"),
        _figure("treasury.todayNetFlow", "today_net_flow"),
        _figure("treasury.todayReceipts", "today_receipts"),
        _figure("treasury.todayPayments", "today_payments"),
        rx.cond(
            StoreState.treasury_expanded,
            rx.box(
                _figure("treasury.totalReceipts", "total_receipts"),
                _figure("treasury.totalPayments", "total_payments"),
                _figure("treasury.totalReceivables", "total_receivables"),
                _figure("treasury.totalPayables", "total_payables"),
                class_name="kpi-details",
            ),
        ),
        rx.button(
            rx.cond(
                StoreState.treasury_expanded,
                rx.icon("chevron-up", size=18),
                rx.icon("chevron-down", size=18),
            ),
            on_click=StoreState.toggle_treasury_details,
            variant="ghost",
        ),
        class_name="card balance-card",
    )


def _transaction_row(transaction: TransactionModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.cond(
                transaction.is_positive,
                rx.icon("arrow-down-left", size=18, class_name="positive"),
                rx.icon("arrow-up-right", size=18, class_name="negative"),
            ),
            rx.box(
                rx.text(transaction.title, class_name="record-title"),
                rx.text(transaction.subtitle, class_name="muted"),
            ),
            class_name="meta-row",
        ),
        rx.text(
            transaction.amount_display,
            class_name=rx.cond(transaction.is_positive, "record-amount positive", "record-amount negative"),
        ),
        class_name="card record-row",
    )


def _payment_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(
                rx.cond(
                    StoreState.payment_type == "payment",
                    t("treasury.dialog.paymentTitle"),
                    t("treasury.dialog.receiptTitle"),
                )
            ),
            field(
                t("treasury.dialog.partyName"),
                rx.input(value=StoreState.payment_party, on_change=StoreState.set_payment_party),
            ),
            field(
                t("treasury.dialog.amount"),
                rx.input(
                    value=StoreState.payment_amount,
                    on_change=StoreState.set_payment_amount,
                    input_mode="decimal",
                ),
            ),
            field(
                t("treasury.dialog.method"),
                chip_row(
                    StoreState.payment_method_options,
                    StoreState.payment_method,
                    StoreState.set_payment_method,
                ),
            ),
            field(
                t("treasury.dialog.notes"),
                rx.text_area(value=StoreState.payment_notes, on_change=StoreState.set_payment_notes),
            ),
            rx.box(
                rx.button(
                    t("common.cancel"), variant="soft", on_click=StoreState.close_payment_dialog
                ),
                rx.button(t("common.save"), on_click=StoreState.save_payment),
                class_name="dialog-actions",
            ),
        ),
        open=StoreState.payment_dialog_open,
    )
