"""Tests for dashboard content."""

from __future__ import annotations

from storefront_ui.dashboard import (
    DASHBOARD_CARDS,
    PERIOD_KEYS,
    TREND_PERIOD_KEYS,
    SalesGoal,
    render_activities,
    render_cards,
)
from storefront_ui.router import Router


def test_sales_goal_percentage():
    assert SalesGoal(15000, 20000).percentage == 75
    assert SalesGoal(30000, 20000).percentage == 100
    assert SalesGoal(10, 0).percentage == 0


def test_render_cards(translator):
    cards = render_cards(translator.t)
    assert len(cards) == 8
    assert cards[0]["title"] == translator.t("dashboard.sales")
    assert cards[0]["is_metric"] is True
    assert cards[3]["is_metric"] is False


def test_card_labels_are_translated(arabic):
    cards = render_cards(arabic.t)
    assert all(not card["title"].startswith("dashboard.") for card in cards)


def test_every_navigating_card_opens_a_screen(translator):
    opened = 0
    for card in render_cards(translator.t):
        router = Router(translate=translator.t)
        if router.handle_card_press(card["title"]):
            opened += 1
    # reports and build-website have no screen
    assert opened == len(DASHBOARD_CARDS) - 2


def test_render_activities_interpolates(translator):
    activities = render_activities(translator.t)
    assert activities[0]["title"] == "New Order #1024 received"
    assert activities[0]["time"] == "2 minutes ago"
    assert activities[1]["title"] == "Low stock: 'Product X' (3 left)"


def test_period_keys_are_translated(translator, arabic):
    for key in PERIOD_KEYS + TREND_PERIOD_KEYS:
        assert translator.has(key)
        assert arabic.t(key) != key
