"""
Invoice detail screen.
"""

import reflex as rx

from storefront_ui.components.common import screen_header, t
from storefront_ui.models.reflex_models import InvoiceLineModel
from storefront_ui.state import StoreState


def invoice_detail_screen() -> rx.Component:
    invoice = StoreState.invoice
    return rx.box(
        screen_header(StoreState.invoice_title),
        rx.box(
            rx.box(
                rx.icon("file-text", class_name="title-icon"),
                rx.heading("#", invoice.number, size="4", as_="h2"),
                class_name="title-row",
            ),
            _row(StoreState.invoice_party_label, invoice.party_name),
            _row(t("invoice.invoiceDate"), invoice.invoice_date),
            _row(t("invoice.dueDate"), invoice.due_date),
            _row(t("invoice.orderStatus"), invoice.order_status),
            _row(t("invoice.paymentStatus"), invoice.payment_status),
            class_name="card",
        ),
        rx.box(
            rx.text(t("invoice.lineItems"), class_name="section-title"),
            rx.foreach(invoice.line_items, _line),
            class_name="card",
        ),
        rx.box(
            _row(t("invoice.subtotal"), invoice.subtotal),
            _row(t("invoice.discount"), invoice.discount),
            _row(t("invoice.returns"), invoice.returns),
            _row(t("invoice.total"), invoice.total, "summary-row total"),
            _row(t("invoice.paidAmount"), invoice.paid_amount),
            _row(t("invoice.unpaidAmount"), invoice.unpaid_amount, "summary-row negative"),
            class_name="card summary",
        ),
        rx.cond(
            invoice.notes != "",
            rx.box(
                rx.text(t("invoice.notes"), class_name="section-title"),
                rx.text(invoice.notes, class_name="muted"),
                class_name="card",
            ),
        ),
        class_name="screen invoice-detail",
    )


def _row(label, value, class_name: str = "summary-row") -> rx.Component:
    return rx.box(rx.text(label, class_name="muted"), rx.text(value), class_name=class_name)


def _line(line: InvoiceLineModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(line.name, class_name="record-title"),
            rx.text(line.sku, class_name="muted"),
        ),
        rx.text(line.quantity, " x ", line.unit_price_display, class_name="muted"),
        rx.text(line.total_display, class_name="record-amount"),
        class_name="line-row",
    )
