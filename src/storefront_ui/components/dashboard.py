"""
Dashboard screen: greeting, period selector, summary cards, sales goal and
recent activity.
"""

import reflex as rx

from storefront_ui.components.common import language_toggle, option_select, t
from storefront_ui.models.reflex_models import ActivityModel, CardModel
from storefront_ui.state import StoreState

# Icon names must be static for rx.icon.
_ICONS = (
    "chart-line",
    "shopping-cart",
    "package",
    "users",
    "wallet",
    "chart-bar",
    "undo-2",
    "globe",
    "receipt",
    "triangle-alert",
    "banknote",
)


def _icon(name) -> rx.Component:
    return rx.match(
        name,
        *[(icon, rx.icon(icon, size=22)) for icon in _ICONS],
        rx.icon("circle", size=22),
    )


def dashboard_screen() -> rx.Component:
    return rx.box(
        _header(),
        option_select(
            StoreState.period_options,
            StoreState.selected_period,
            StoreState.set_selected_period,
        ),
        rx.box(
            rx.foreach(StoreState.dashboard_cards, _card),
            class_name="card-grid",
        ),
        _sales_goal(),
        _sales_trend(),
        _recent_activity(),
        class_name="screen dashboard",
    )


def _header() -> rx.Component:
    return rx.box(
        rx.heading(StoreState.greeting, size="6", as_="h1"),
        rx.box(
            language_toggle(),
            rx.button(
                rx.icon("menu", size=20),
                on_click=StoreState.handle_menu_press,
                class_name="icon-button",
            ),
            class_name="header-actions",
        ),
        class_name="screen-header",
    )


def _card(card: CardModel) -> rx.Component:
    """A dashboard tile; metric cards show a value and change."""
    return rx.box(
        rx.box(_icon(card.icon), class_name="card-icon"),
        rx.text(card.title, class_name="card-title"),
        rx.cond(
            card.is_metric,
            rx.box(
                rx.text(card.value, class_name="card-value"),
                rx.text(
                    card.change,
                    class_name=rx.cond(
                        card.change_type == "negative", "change negative", "change positive"
                    ),
                ),
                rx.text(card.subtitle, class_name="muted"),
            ),
            rx.text(card.subtitle, class_name="muted"),
        ),
        on_click=StoreState.handle_card_press(card.title),
        class_name="card dashboard-card",
    )


def _sales_goal() -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(t("dashboard.monthlySalesGoal"), class_name="section-title"),
            rx.text(StoreState.goal_percentage.to_string() + "%", class_name="muted"),
            class_name="row-between",
        ),
        rx.progress(value=StoreState.goal_percentage, max=100),
        rx.text(StoreState.goal_text, class_name="muted"),
        class_name="card",
    )


def _sales_trend() -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(t("dashboard.salesTrend"), class_name="section-title"),
            option_select(
                StoreState.trend_period_options,
                StoreState.trend_period,
                StoreState.set_trend_period,
            ),
            class_name="row-between",
        ),
        rx.text(StoreState.sales_trend_value, class_name="card-value"),
        rx.text(t("common.vsLastWeek"), class_name="change positive"),
        class_name="card",
    )


def _activity(activity: ActivityModel) -> rx.Component:
    return rx.box(
        rx.box(_icon(activity.icon), class_name=f"activity-icon {activity.type}"),
        rx.box(
            rx.text(activity.title),
            rx.text(activity.time, class_name="muted"),
        ),
        class_name="activity-row",
    )


def _recent_activity() -> rx.Component:
    return rx.box(
        rx.text(t("dashboard.recentActivity"), class_name="section-title"),
        rx.foreach(StoreState.recent_activities, _activity),
        class_name="card",
    )
