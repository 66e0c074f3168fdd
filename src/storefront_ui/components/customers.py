"""
Customers screen with the add-contact dialog.
"""

import reflex as rx

from storefront_ui.components.common import field, kpi_line, screen_header, search_box, t
from storefront_ui.models.reflex_models import ContactModel, CustomerModel
from storefront_ui.state import StoreState


def customers_screen() -> rx.Component:
    return rx.box(
        screen_header(t("customer.title")),
        rx.box(
            rx.foreach(StoreState.customer_kpis, kpi_line),
            rx.box(
                rx.text(t("customer.newCustomers"), class_name="muted"),
                rx.text("+", StoreState.new_customers_count, class_name="change positive"),
                class_name="kpi-line",
            ),
            class_name="card kpi-card",
        ),
        search_box(
            t("customer.searchPlaceholder"),
            StoreState.customer_query,
            StoreState.set_customer_query,
        ),
        rx.foreach(StoreState.new_contacts, _contact_row),
        rx.cond(
            StoreState.customer_rows.length() > 0,
            rx.box(rx.foreach(StoreState.customer_rows, _customer_row), class_name="record-list"),
            rx.text(t("customer.noResults"), class_name="muted empty-inline"),
        ),
        rx.box(
            rx.button(
                rx.icon("user-plus", size=18),
                t("customer.addCustomer"),
                on_click=StoreState.open_contact_dialog("customer"),
            ),
            rx.button(
                rx.icon("truck", size=18),
                t("customer.addVendor"),
                variant="soft",
                on_click=StoreState.open_contact_dialog("vendor"),
            ),
            class_name="action-row",
        ),
        _contact_dialog(),
        class_name="screen customers",
    )


def _customer_row(customer: CustomerModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(customer.name, class_name="record-title"),
            rx.text(customer.email, class_name="muted"),
        ),
        rx.box(
            rx.text(t("customer.totalSales"), ": ", customer.total_sales, class_name="muted"),
            rx.text(customer.tier_label, class_name=f"badge tier-{customer.tier}"),
            class_name="record-side",
        ),
        class_name="card record-row",
    )


def _contact_row(contact: ContactModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(contact.name, class_name="record-title"),
            rx.text(contact.phone, class_name="muted"),
        ),
        rx.text(
            rx.cond(contact.type == "vendor", t("common.vendor"), t("common.customer")),
            class_name="badge",
        ),
        class_name="card record-row new-contact",
    )


def _contact_dialog() -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(
                rx.cond(
                    StoreState.contact_type == "vendor",
                    t("customer.addVendor"),
                    t("customer.addCustomer"),
                )
            ),
            field(
                t("customer.name"),
                rx.input(value=StoreState.contact_name, on_change=StoreState.set_contact_name),
            ),
            field(
                t("customer.phone"),
                rx.input(value=StoreState.contact_phone, on_change=StoreState.set_contact_phone),
            ),
            field(
                t("customer.email"),
                rx.input(value=StoreState.contact_email, on_change=StoreState.set_contact_email),
            ),
            field(
                t("customer.address"),
                rx.text_area(
                    value=StoreState.contact_address, on_change=StoreState.set_contact_address
                ),
            ),
            rx.box(
                rx.button(
                    t("common.cancel"), variant="soft", on_click=StoreState.close_contact_dialog
                ),
                rx.button(t("common.save"), on_click=StoreState.save_contact),
                class_name="dialog-actions",
            ),
        ),
        open=StoreState.contact_dialog_open,
    )
