"""
Screen router for the Storefront UI.

Navigation is a single reducer, ``reduce(state, action) -> state``, over
the immutable NavigationState. Router wraps the reducer with the
collaborator contract screens call into (navigate_to, navigate_to_checkout,
on_back, ...) and runs checkout completion callbacks.

Back is never history based: every screen has one explicit back target.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Mapping

from storefront_ui.lib import logs
from storefront_ui.models.commerce import LineItem
from storefront_ui.models.navigation import (
    AddProductSource,
    CheckoutContext,
    Flow,
    NavigationState,
    OrderCallback,
    ScreenId,
)

LOG = logs.logger(__file__)

Translate = Callable[[str], str]


class NavigationError(Exception):
    """Raised for transitions the router does not allow."""


class UnknownScreenError(NavigationError, ValueError):
    """Raised when a screen id is not part of the ScreenId enum."""


# Dashboard card label keys and the screen each opens, in match order.
CARD_TARGETS: tuple[tuple[str, ScreenId], ...] = (
    ("dashboard.customers", ScreenId.CUSTOMERS),
    ("dashboard.sales", ScreenId.ORDERS),
    ("dashboard.purchase", ScreenId.PURCHASES),
    ("dashboard.inventory", ScreenId.PRODUCT_MANAGEMENT),
    ("dashboard.treasury", ScreenId.TREASURY),
    ("dashboard.returns", ScreenId.RETURNS),
)

# Screens whose back target never changes.
_STATIC_BACK_TARGETS: dict[ScreenId, ScreenId] = {
    ScreenId.SELECT_INVOICE: ScreenId.RETURNS,
}


@dataclass(frozen=True, slots=True)
class NavigateTo:
    screen: ScreenId
    params: Mapping[str, Any] | None = None
    source: AddProductSource | None = None


@dataclass(frozen=True, slots=True)
class OpenCheckout:
    cart: tuple[LineItem, ...]
    flow: Flow = Flow.SALES
    on_complete: OrderCallback | None = None


@dataclass(frozen=True, slots=True)
class CompleteCheckout:
    pass


@dataclass(frozen=True, slots=True)
class CancelCheckout:
    pass


@dataclass(frozen=True, slots=True)
class GoHome:
    pass


@dataclass(frozen=True, slots=True)
class Back:
    pass


Action = NavigateTo | OpenCheckout | CompleteCheckout | CancelCheckout | GoHome | Back


def coerce_screen(screen_id: ScreenId | str) -> ScreenId:
    """
    Convert a screen tag into a ScreenId.

    Raises:
        UnknownScreenError: if the tag is not a known screen.
    """
    if isinstance(screen_id, ScreenId):
        return screen_id
    try:
        return ScreenId(screen_id)
    except ValueError as exc:
        raise UnknownScreenError(f"Unknown screen: {screen_id!r}") from exc


def back_target(state: NavigationState) -> ScreenId:
    """Return the screen the back action leads to from the current screen."""
    screen = state.current_screen
    if screen is ScreenId.INVOICE_DETAIL:
        return state.previous_screen
    if screen is ScreenId.ADD_PRODUCT:
        return state.add_product_source.return_screen
    if screen is ScreenId.CHECKOUT and state.checkout is not None:
        return state.checkout.flow.home_screen
    return _STATIC_BACK_TARGETS.get(screen, ScreenId.DASHBOARD)


def reduce(state: NavigationState, action: Action) -> NavigationState:
    """
    Apply a navigation action and return the next state.

    Raises:
        NavigationError: for transitions that would break the
            checkout/invoice-detail invariants.
    """
    if isinstance(action, NavigateTo):
        return _enter(state, action.screen, action.params, action.source)
    if isinstance(action, OpenCheckout):
        return replace(
            state,
            current_screen=ScreenId.CHECKOUT,
            checkout=CheckoutContext(
                cart=tuple(action.cart), flow=action.flow, on_complete=action.on_complete
            ),
            invoice_detail_params=None,
        )
    if isinstance(action, (CompleteCheckout, CancelCheckout)):
        if state.current_screen is not ScreenId.CHECKOUT or state.checkout is None:
            raise NavigationError("No checkout in progress")
        return replace(
            state,
            current_screen=state.checkout.flow.home_screen,
            checkout=None,
        )
    if isinstance(action, GoHome):
        return replace(
            state,
            current_screen=ScreenId.DASHBOARD,
            checkout=None,
            invoice_detail_params=None,
        )
    if isinstance(action, Back):
        if state.current_screen is ScreenId.CHECKOUT:
            return reduce(state, CancelCheckout())
        return _enter(state, back_target(state))
    raise TypeError(f"Unsupported navigation action: {action!r}")


def _enter(
    state: NavigationState,
    target: ScreenId,
    params: Mapping[str, Any] | None = None,
    source: AddProductSource | None = None,
) -> NavigationState:
    if target is ScreenId.CHECKOUT:
        raise NavigationError("Checkout needs a cart; use navigate_to_checkout")

    previous = state.previous_screen
    invoice_params = None
    if target is ScreenId.INVOICE_DETAIL:
        invoice_params = dict(params or {})
        if state.current_screen is ScreenId.CHECKOUT and state.checkout is not None:
            previous = state.checkout.flow.home_screen
        elif state.current_screen is not ScreenId.INVOICE_DETAIL:
            previous = state.current_screen

    add_source = state.add_product_source
    if target is ScreenId.ADD_PRODUCT:
        add_source = source or AddProductSource.PRODUCT_MANAGEMENT

    return replace(
        state,
        current_screen=target,
        checkout=None,
        invoice_detail_params=invoice_params,
        previous_screen=previous,
        add_product_source=add_source,
    )


class Router:
    """
    Owns the navigation state and exposes the screen-facing contract.

    Attributes:
        state: Current NavigationState snapshot.
    """

    def __init__(
        self,
        state: NavigationState | None = None,
        translate: Translate | None = None,
    ) -> None:
        self.state = state or NavigationState()
        self._translate = translate or _identity

    @property
    def current_screen(self) -> ScreenId:
        return self.state.current_screen

    def dispatch(self, action: Action) -> NavigationState:
        """Run an action through the reducer and keep the result."""
        before = self.state.current_screen
        self.state = reduce(self.state, action)
        LOG.debug(
            "%s: %s -> %s",
            type(action).__name__,
            before.value,
            self.state.current_screen.value,
        )
        return self.state

    def navigate_to(
        self, screen_id: ScreenId | str, params: Mapping[str, Any] | None = None
    ) -> NavigationState:
        """Show a screen; invoice-detail remembers the screen being left."""
        return self.dispatch(NavigateTo(coerce_screen(screen_id), params))

    def open_add_product(
        self, source: AddProductSource | str = AddProductSource.PRODUCT_MANAGEMENT
    ) -> NavigationState:
        """Show the add-product form, remembering which screen asked for it."""
        return self.dispatch(
            NavigateTo(ScreenId.ADD_PRODUCT, source=AddProductSource(source))
        )

    def navigate_to_checkout(
        self,
        cart: Iterable[LineItem],
        flow: Flow | str = Flow.SALES,
        on_complete: OrderCallback | None = None,
    ) -> NavigationState:
        """Enter checkout with a cart. Empty carts are blocked at order placement."""
        return self.dispatch(OpenCheckout(tuple(cart), Flow(flow), on_complete))

    def complete_checkout(self, order_data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Finish checkout with the placed order.

        The flow is merged into the order, the checkout context is
        cleared and the flow's screen shown before on_complete runs.

        Returns:
            The order data including its flow.
        """
        context = self.state.checkout
        if self.state.current_screen is not ScreenId.CHECKOUT or context is None:
            raise NavigationError("No checkout in progress")
        order = {**order_data, "flow": context.flow.value}
        self.dispatch(CompleteCheckout())
        if context.on_complete is not None:
            context.on_complete(order)
        return order

    def cancel_checkout(self) -> NavigationState:
        """Leave checkout without placing the order."""
        return self.dispatch(CancelCheckout())

    def go_home(self) -> NavigationState:
        """Show the dashboard and drop any screen-specific parameters."""
        return self.dispatch(GoHome())

    go_back = go_home

    def on_back(self) -> NavigationState:
        """Follow the current screen's explicit back target."""
        return self.dispatch(Back())

    def handle_menu_press(self) -> NavigationState:
        """The header menu goes home from any screen but the dashboard."""
        if self.state.is_home:
            LOG.info("Menu pressed")
            return self.state
        return self.go_home()

    def handle_card_press(self, card: Any, translate: Translate | None = None) -> bool:
        """
        Open the screen behind a dashboard card.

        The card's title is translated and compared with the translated
        labels in CARD_TARGETS. Cards without a screen are ignored.

        Args:
            card: A card with a ``title`` attribute, or the title itself.
            translate: Translation function; defaults to the router's.

        Returns:
            True when navigation happened.
        """
        t = translate or self._translate
        title = card if isinstance(card, str) else card.title
        translated = t(title)
        for label_key, screen in CARD_TARGETS:
            if translated == t(label_key):
                self.navigate_to(screen)
                return True
        LOG.info("Card pressed: %s", translated)
        return False


def _identity(key: str) -> str:
    return key
