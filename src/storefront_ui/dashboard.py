"""
Dashboard content: summary cards, recent activity, period selectors and
the monthly sales goal.

Text is kept as translation keys (with interpolation parameters) and
rendered with the active locale, so switching language re-renders every
card without rebuilding the data.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

Translate = Callable[..., str]

PERIOD_KEYS = ("time.today", "time.thisWeek", "time.thisMonth")
TREND_PERIOD_KEYS = ("time.daily", "time.weekly", "time.monthly")
DEFAULT_TREND_PERIOD = TREND_PERIOD_KEYS[1]


@dataclass(frozen=True, slots=True)
class DashboardCard:
    """A dashboard tile. Metric cards carry a value and change."""

    icon: str
    title_key: str
    subtitle_key: str
    value: str = ""
    change: str = ""
    change_type: str = "positive"

    @property
    def is_metric(self) -> bool:
        return bool(self.value)


@dataclass(frozen=True, slots=True)
class Activity:
    icon: str
    title_key: str
    time_key: str
    type: str
    title_params: dict[str, Any] = field(default_factory=dict)
    time_params: dict[str, Any] = field(default_factory=dict)

    def render(self, t: Translate) -> dict[str, str]:
        """Translated title and time for display."""
        return {
            "icon": self.icon,
            "title": t(self.title_key, **self.title_params),
            "time": t(self.time_key, **self.time_params),
            "type": self.type,
        }


@dataclass(frozen=True, slots=True)
class SalesGoal:
    current: float
    target: float

    @property
    def percentage(self) -> int:
        """Progress towards the target, capped at 100."""
        if self.target <= 0:
            return 0
        return min(100, round(self.current / self.target * 100))


DASHBOARD_CARDS: tuple[DashboardCard, ...] = (
    DashboardCard("chart-line", "dashboard.sales", "dashboard.totalSales", "$1,450.75", "+12.5%"),
    DashboardCard(
        "shopping-cart", "dashboard.purchase", "dashboard.newOrders", "32", "-3.1%", "negative"
    ),
    DashboardCard("package", "dashboard.inventory", "dashboard.inventoryValue", "$28,300", "+1.2%"),
    DashboardCard("users", "dashboard.customers", "common.manageViewCustomerInfo"),
    DashboardCard("wallet", "dashboard.treasury", "common.trackCashFlow"),
    DashboardCard("chart-bar", "dashboard.reports", "common.generateReports"),
    DashboardCard("undo-2", "dashboard.returns", "common.manageReturns"),
    DashboardCard("globe", "dashboard.buildWebsite", "common.createOnlineStore"),
)

RECENT_ACTIVITIES: tuple[Activity, ...] = (
    Activity(
        "receipt",
        "dashboard.newOrder",
        "common.minutesAgo",
        "positive",
        {"orderNumber": "1024"},
        {"count": 2},
    ),
    Activity(
        "triangle-alert",
        "dashboard.lowStock",
        "common.hourAgo",
        "negative",
        {"productName": "Product X", "quantity": 3},
    ),
    Activity(
        "banknote",
        "dashboard.payment",
        "common.yesterday",
        "primary",
        {"orderNumber": "1021"},
    ),
)

SALES_GOAL = SalesGoal(current=15000, target=20000)
SALES_TREND_VALUE = "$1,450.75"
USER_NAME = "Alex"


def render_cards(t: Translate) -> list[dict[str, Any]]:
    """Cards with translated titles, ready for the UI."""
    return [
        {
            "icon": card.icon,
            "title": t(card.title_key),
            "subtitle": t(card.subtitle_key),
            "value": card.value,
            "change": card.change,
            "change_type": card.change_type,
            "is_metric": card.is_metric,
        }
        for card in DASHBOARD_CARDS
    ]


def render_activities(t: Translate) -> list[dict[str, str]]:
    return [activity.render(t) for activity in RECENT_ACTIVITIES]
