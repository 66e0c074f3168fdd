"""
Returns list and the select-invoice-for-return screen.
"""

import reflex as rx

from storefront_ui.components.common import (
    chip_row,
    screen_header,
    search_box,
    status_badge,
    t,
)
from storefront_ui.models.reflex_models import InvoiceSummaryModel, ReturnModel
from storefront_ui.state import StoreState


def returns_screen() -> rx.Component:
    return rx.box(
        screen_header(t("returns.title")),
        chip_row(
            StoreState.returns_tab_options,
            StoreState.returns_tab,
            StoreState.set_returns_tab,
        ),
        search_box(
            t("returns.searchPlaceholder"),
            StoreState.returns_query,
            StoreState.set_returns_query,
        ),
        rx.cond(
            StoreState.return_rows.length() > 0,
            rx.box(rx.foreach(StoreState.return_rows, _return_card), class_name="record-list"),
            rx.text(t("returns.noResults"), class_name="muted empty-inline"),
        ),
        rx.button(
            rx.icon("plus", size=18),
            t("returns.newReturn"),
            on_click=StoreState.start_return,
            class_name="fab",
        ),
        class_name="screen returns",
    )


def _detail(label_key: str, value) -> rx.Component:
    return rx.box(
        rx.text(t(label_key), class_name="muted"),
        rx.text(value),
        class_name="kpi-line",
    )


def _return_card(record: ReturnModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.box(
                rx.text(record.id, class_name="record-title"),
                rx.text(record.party_name, class_name="muted"),
            ),
            status_badge(record.status, record.status_label),
            class_name="row-between",
        ),
        _detail("returns.returnDate", record.return_date),
        _detail("returns.amount", record.amount_display),
        _detail("returns.originalDate", record.original_date),
        rx.box(
            rx.text(t("returns.originalInvoice"), class_name="muted"),
            rx.link(
                record.original_invoice,
                on_click=StoreState.open_return_invoice(record.id),
                class_name="link",
            ),
            class_name="kpi-line",
        ),
        rx.cond(
            record.notes != "",
            _detail("returns.notes", record.notes),
        ),
        class_name="card return-card",
    )


def select_invoice_screen() -> rx.Component:
    return rx.box(
        screen_header(t("returns.selectInvoice")),
        search_box(
            t("returns.selectSearchPlaceholder"),
            StoreState.select_query,
            StoreState.set_select_query,
        ),
        rx.box(
            rx.foreach(StoreState.select_chips, _removable_chip),
            class_name="chip-row",
        ),
        rx.cond(
            StoreState.candidate_rows.length() > 0,
            rx.box(rx.foreach(StoreState.candidate_rows, _candidate_row), class_name="record-list"),
            rx.text(t("returns.noResults"), class_name="muted empty-inline"),
        ),
        class_name="screen select-invoice",
    )


def _removable_chip(chip: str) -> rx.Component:
    return rx.box(
        rx.text(chip),
        rx.icon("x", size=14, on_click=StoreState.remove_select_chip(chip), class_name="clickable"),
        class_name="chip active",
    )


def _candidate_row(invoice: InvoiceSummaryModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(invoice.id, class_name="record-title"),
            rx.text(invoice.party_name, class_name="muted"),
            rx.text(invoice.date, class_name="muted"),
        ),
        rx.box(
            rx.text(invoice.amount_display, class_name="record-amount"),
            status_badge(invoice.status, invoice.status_label),
            class_name="record-side",
        ),
        on_click=StoreState.open_return_candidate(invoice.id),
        class_name="card record-row clickable",
    )
