"""
Shared building blocks used by every screen: header, search box, chips,
KPI rows and the global alert/confirm dialogs.
"""

import reflex as rx

from storefront_ui.models.reflex_models import KpiRowModel, OptionModel
from storefront_ui.state import StoreState


def t(key: str) -> rx.Var:
    """Translated static label for the active language."""
    return StoreState.texts[key]


def screen_header(title, show_back: bool = True) -> rx.Component:
    """
    Build the top bar of a screen.

    Args:
        title: Heading text (string or Var).
        show_back: Whether to show the back arrow.
    """
    return rx.box(
        rx.button(
            rx.icon("arrow-left", size=20, class_name="flip-rtl"),
            on_click=StoreState.on_back,
            class_name="icon-button",
            title=t("common.back"),
        )
        if show_back
        else rx.box(),
        rx.heading(title, size="5", as_="h1", class_name="screen-title"),
        rx.box(
            language_toggle(),
            rx.button(
                rx.icon("menu", size=20),
                on_click=StoreState.handle_menu_press,
                class_name="icon-button",
                title=t("common.menu"),
            ),
            class_name="header-actions",
        ),
        class_name="screen-header",
    )


def language_toggle() -> rx.Component:
    return rx.button(
        rx.icon("languages", size=18),
        rx.cond(StoreState.language == "en", t("language.ar"), t("language.en")),
        on_click=StoreState.toggle_language,
        loading=StoreState.language_loading,
        class_name="language-toggle",
    )


def search_box(placeholder, value, on_change) -> rx.Component:
    """Search input with the leading icon."""
    return rx.box(
        rx.icon("search", class_name="input-icon"),
        rx.input(
            placeholder=placeholder,
            value=value,
            on_change=on_change,
            class_name="search-input",
            debounce=300,
        ),
        class_name="input-with-icon",
    )


def chip_row(options, selected, on_select) -> rx.Component:
    """
    Horizontal row of filter chips.

    Args:
        options: Var list of OptionModel.
        selected: Var holding the selected key.
        on_select: Event handler taking the chosen key.
    """

    def _chip(option: OptionModel) -> rx.Component:
        return rx.button(
            option.label,
            on_click=on_select(option.key),
            class_name=rx.cond(selected == option.key, "chip active", "chip"),
        )

    return rx.box(rx.foreach(options, _chip), class_name="chip-row")


def option_select(options, value, on_change) -> rx.Component:
    """Dropdown over OptionModel values."""
    return rx.select.root(
        rx.select.trigger(class_name="select-trigger"),
        rx.select.content(
            rx.foreach(
                options,
                lambda option: rx.select.item(option.label, value=option.key),
            ),
        ),
        value=value,
        on_change=on_change,
    )


def kpi_line(row: KpiRowModel) -> rx.Component:
    return rx.box(
        rx.text(row.label, class_name="muted"),
        rx.text(
            row.value,
            class_name=rx.match(
                row.tone,
                ("negative", "kpi-value negative"),
                ("positive", "kpi-value positive"),
                "kpi-value",
            ),
        ),
        class_name="kpi-line",
    )


def empty_message(title, message, icon: str = "inbox") -> rx.Component:
    return rx.box(
        rx.icon(icon, class_name="empty-icon", size=48),
        rx.heading(title, size="3", as_="h3"),
        rx.text(message, class_name="muted"),
        class_name="card empty-state",
    )


def status_badge(status, label) -> rx.Component:
    return rx.text(label, class_name=f"badge status-{status}")


def field(label, control: rx.Component) -> rx.Component:
    """Labelled form control."""
    return rx.box(
        rx.text(label, class_name="field-label"),
        control,
        class_name="form-field",
    )


def alert_dialog() -> rx.Component:
    """Global message dialog driven by StoreState.alert_*."""
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title(StoreState.alert_title),
            rx.alert_dialog.description(StoreState.alert_message),
            rx.box(
                rx.alert_dialog.action(
                    rx.button(t("common.ok"), on_click=StoreState.close_alert),
                ),
                class_name="dialog-actions",
            ),
        ),
        open=StoreState.alert_open,
    )


def confirm_dialog() -> rx.Component:
    """Cart line removal confirmation."""
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title(t("common.confirm")),
            rx.alert_dialog.description(StoreState.confirm_message),
            rx.box(
                rx.alert_dialog.cancel(
                    rx.button(
                        t("common.cancel"),
                        variant="soft",
                        on_click=StoreState.cancel_remove_item,
                    ),
                ),
                rx.alert_dialog.action(
                    rx.button(
                        t("common.remove"),
                        color_scheme="red",
                        on_click=StoreState.confirm_remove_item,
                    ),
                ),
                class_name="dialog-actions",
            ),
        ),
        open=StoreState.confirm_open,
    )


def loading_overlay() -> rx.Component:
    """Shown while the language switches."""
    return rx.cond(
        StoreState.language_loading,
        rx.box(
            rx.box(class_name="spinner"),
            rx.text(t("language.changing"), class_name="muted"),
            class_name="loading-overlay",
        ),
    )
