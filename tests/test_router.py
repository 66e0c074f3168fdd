"""Tests for the navigation reducer and the Router facade."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from storefront_ui.checkout import CheckoutSession, EmptyCartError
from storefront_ui.models.navigation import (
    AddProductSource,
    Flow,
    NavigationState,
    ScreenId,
)
from storefront_ui.router import (
    Back,
    CancelCheckout,
    CompleteCheckout,
    GoHome,
    NavigateTo,
    NavigationError,
    OpenCheckout,
    Router,
    UnknownScreenError,
    back_target,
    coerce_screen,
    reduce,
)


@pytest.fixture
def router(translator):
    return Router(translate=translator.t)


def _assert_invariants(state: NavigationState) -> None:
    assert (state.checkout is not None) == (state.current_screen is ScreenId.CHECKOUT)
    if state.current_screen is not ScreenId.INVOICE_DETAIL:
        assert state.invoice_detail_params is None


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def test_initial_state_is_dashboard():
    state = NavigationState()
    assert state.current_screen is ScreenId.DASHBOARD
    assert state.is_home
    assert state.checkout is None
    assert state.invoice_detail_params is None


def test_reduce_returns_new_state_without_mutating_input():
    state = NavigationState()
    next_state = reduce(state, NavigateTo(ScreenId.ORDERS))
    assert state.current_screen is ScreenId.DASHBOARD
    assert next_state.current_screen is ScreenId.ORDERS


def test_reduce_rejects_unknown_action():
    with pytest.raises(TypeError):
        reduce(NavigationState(), "orders")


def test_navigate_to_checkout_directly_is_rejected():
    with pytest.raises(NavigationError):
        reduce(NavigationState(), NavigateTo(ScreenId.CHECKOUT))


def test_complete_outside_checkout_is_rejected():
    with pytest.raises(NavigationError):
        reduce(NavigationState(), CompleteCheckout())
    with pytest.raises(NavigationError):
        reduce(NavigationState(), CancelCheckout())


def test_invariants_hold_across_action_sequence(cart):
    actions = [
        NavigateTo(ScreenId.ORDERS),
        NavigateTo(ScreenId.INVOICE_DETAIL, {"invoice_id": "10521"}),
        Back(),
        NavigateTo(ScreenId.SALES),
        OpenCheckout(tuple(cart), Flow.SALES),
        NavigateTo(ScreenId.INVOICE_DETAIL, {"invoice_id": "1"}),
        Back(),
        OpenCheckout(tuple(cart), Flow.PURCHASE),
        CompleteCheckout(),
        NavigateTo(ScreenId.ADD_PRODUCT, source=AddProductSource.PURCHASE),
        Back(),
        GoHome(),
    ]
    state = NavigationState()
    for action in actions:
        state = reduce(state, action)
        _assert_invariants(state)
    assert state.current_screen is ScreenId.DASHBOARD


@pytest.mark.parametrize(
    "screen, expected",
    [
        (ScreenId.ORDERS, ScreenId.DASHBOARD),
        (ScreenId.PURCHASES, ScreenId.DASHBOARD),
        (ScreenId.PRODUCT_MANAGEMENT, ScreenId.DASHBOARD),
        (ScreenId.CUSTOMERS, ScreenId.DASHBOARD),
        (ScreenId.SALES, ScreenId.DASHBOARD),
        (ScreenId.PURCHASE_PRODUCT, ScreenId.DASHBOARD),
        (ScreenId.TREASURY, ScreenId.DASHBOARD),
        (ScreenId.RETURNS, ScreenId.DASHBOARD),
        (ScreenId.SELECT_INVOICE, ScreenId.RETURNS),
    ],
)
def test_back_targets(screen, expected):
    state = reduce(NavigationState(), NavigateTo(screen))
    assert back_target(state) is expected
    assert reduce(state, Back()).current_screen is expected


def test_coerce_screen_accepts_tags_and_enums():
    assert coerce_screen("treasury") is ScreenId.TREASURY
    assert coerce_screen(ScreenId.RETURNS) is ScreenId.RETURNS


def test_coerce_screen_unknown_fails_fast():
    with pytest.raises(UnknownScreenError):
        coerce_screen("settings")


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------


def test_unknown_screen_is_a_value_error(router):
    with pytest.raises(ValueError):
        router.navigate_to("nowhere")
    assert router.current_screen is ScreenId.DASHBOARD


def test_invoice_detail_remembers_previous_screen(router):
    router.navigate_to("purchases")
    router.navigate_to("invoice-detail", {"invoice_id": "20521"})

    assert router.state.previous_screen is ScreenId.PURCHASES
    assert router.state.invoice_detail_params == {"invoice_id": "20521"}

    router.on_back()
    assert router.current_screen is ScreenId.PURCHASES
    assert router.state.invoice_detail_params is None


@pytest.mark.parametrize(
    "screen",
    [s for s in ScreenId if s not in (ScreenId.INVOICE_DETAIL, ScreenId.CHECKOUT)],
)
def test_invoice_detail_back_returns_to_origin(router, screen):
    router.navigate_to(screen)
    router.navigate_to("invoice-detail", {"invoice_id": "1"})
    router.on_back()
    assert router.current_screen is screen


def test_invoice_detail_params_are_copied(router):
    params = {"invoice_id": "10521"}
    router.navigate_to("invoice-detail", params)
    params["invoice_id"] = "changed"
    assert router.state.invoice_detail_params == {"invoice_id": "10521"}


def test_invoice_detail_to_invoice_detail_keeps_return_target(router):
    router.navigate_to("returns")
    router.navigate_to("invoice-detail", {"invoice_id": "INV-1"})
    router.navigate_to("invoice-detail", {"invoice_id": "INV-2"})

    assert router.state.invoice_detail_params == {"invoice_id": "INV-2"}
    router.on_back()
    assert router.current_screen is ScreenId.RETURNS


def test_invoice_detail_from_checkout_returns_to_flow_screen(router, cart):
    router.navigate_to_checkout(cart, "purchase")
    router.navigate_to("invoice-detail", {"invoice_id": "X"})

    assert router.state.checkout is None
    router.on_back()
    assert router.current_screen is ScreenId.PURCHASE_PRODUCT


def test_checkout_complete_routes_then_calls_back(router, cart):
    seen = []

    def on_complete(order):
        seen.append((order, router.current_screen, router.state.checkout))

    router.navigate_to("sales")
    router.navigate_to_checkout(cart, "sales", on_complete)
    assert router.current_screen is ScreenId.CHECKOUT
    assert router.state.checkout.cart == tuple(cart)

    order = router.complete_checkout({"total": 237.5})

    assert order == {"total": 237.5, "flow": "sales"}
    assert router.current_screen is ScreenId.SALES
    assert router.state.checkout is None
    assert seen == [(order, ScreenId.SALES, None)]


def test_purchase_checkout_completes_to_purchase_screen(router, cart):
    router.navigate_to_checkout(cart, Flow.PURCHASE)
    order = router.complete_checkout({})
    assert order["flow"] == "purchase"
    assert router.current_screen is ScreenId.PURCHASE_PRODUCT


def test_complete_checkout_without_checkout_fails(router):
    with pytest.raises(NavigationError):
        router.complete_checkout({"total": 1})


def test_empty_cart_may_enter_checkout(router):
    router.navigate_to_checkout([], "sales")
    assert router.current_screen is ScreenId.CHECKOUT
    assert router.state.checkout.cart == ()


def test_empty_cart_never_completes_checkout(router):
    completed = []
    router.navigate_to_checkout([], "sales", completed.append)

    session = CheckoutSession(router.state.checkout.cart)
    with pytest.raises(EmptyCartError):
        router.complete_checkout(session.place_order())

    assert completed == []
    assert router.current_screen is ScreenId.CHECKOUT


def test_cancel_and_back_leave_checkout_for_flow_screen(router, cart):
    router.navigate_to_checkout(cart, "purchase")
    router.cancel_checkout()
    assert router.current_screen is ScreenId.PURCHASE_PRODUCT
    assert router.state.checkout is None

    router.navigate_to_checkout(cart, "sales")
    router.on_back()
    assert router.current_screen is ScreenId.SALES
    assert router.state.checkout is None


@pytest.mark.parametrize(
    "source, expected",
    [
        ("sales", ScreenId.SALES),
        ("purchase", ScreenId.PURCHASE_PRODUCT),
        ("product-management", ScreenId.PRODUCT_MANAGEMENT),
    ],
)
def test_add_product_returns_to_source(router, source, expected):
    router.open_add_product(source)
    assert router.current_screen is ScreenId.ADD_PRODUCT
    router.on_back()
    assert router.current_screen is expected


def test_add_product_default_source_is_product_management(router):
    router.navigate_to("add-product")
    assert router.state.add_product_source is AddProductSource.PRODUCT_MANAGEMENT


def test_go_home_and_go_back_always_reach_dashboard(router, cart):
    router.navigate_to("orders")
    router.navigate_to("invoice-detail", {"invoice_id": "1"})
    router.go_back()
    assert router.current_screen is ScreenId.DASHBOARD
    assert router.state.invoice_detail_params is None

    router.navigate_to_checkout(cart)
    router.go_home()
    assert router.current_screen is ScreenId.DASHBOARD
    assert router.state.checkout is None


def test_menu_press_goes_home_except_on_dashboard(router):
    before = router.state
    router.handle_menu_press()
    assert router.state is before

    router.navigate_to("treasury")
    router.handle_menu_press()
    assert router.current_screen is ScreenId.DASHBOARD


@pytest.mark.parametrize(
    "label_key, expected",
    [
        ("dashboard.customers", ScreenId.CUSTOMERS),
        ("dashboard.sales", ScreenId.ORDERS),
        ("dashboard.purchase", ScreenId.PURCHASES),
        ("dashboard.inventory", ScreenId.PRODUCT_MANAGEMENT),
        ("dashboard.treasury", ScreenId.TREASURY),
        ("dashboard.returns", ScreenId.RETURNS),
    ],
)
def test_card_press_opens_screen(router, translator, label_key, expected):
    assert router.handle_card_press(translator.t(label_key)) is True
    assert router.current_screen is expected


def test_card_press_matches_translated_titles(arabic):
    router = Router(translate=arabic.t)
    card = SimpleNamespace(title=arabic.t("dashboard.treasury"))
    assert router.handle_card_press(card) is True
    assert router.current_screen is ScreenId.TREASURY


def test_card_press_unknown_title_is_ignored(router, translator):
    assert router.handle_card_press(translator.t("dashboard.reports")) is False
    assert router.handle_card_press("Build Your Website") is False
    assert router.current_screen is ScreenId.DASHBOARD
