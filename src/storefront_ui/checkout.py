"""
Cart and checkout arithmetic.

    subtotal = sum(price * quantity)
    discount = literal amount, or "<n>%" of the subtotal
    tax      = subtotal * tax_rate   (on the pre-discount subtotal)
    total    = subtotal - discount + tax

Cart is the basket built on the sales and purchase screens. CheckoutSession
is the checkout screen's working copy of that basket plus the payment
fields, and builds the order payload handed to the router.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from storefront_ui.config import DEFAULT_TAX_RATE
from storefront_ui.lib import logs
from storefront_ui.models.commerce import LineItem, OrderTotals, Product, serialize_record
from storefront_ui.utils import parse_number
from storefront_ui.validation import ValidationError

LOG = logs.logger(__file__)

PAYMENT_METHODS = ("cash", "card", "bank")

Confirm = Callable[[LineItem], bool]


class EmptyCartError(ValidationError):
    """An order cannot be placed without items."""

    def __init__(self) -> None:
        super().__init__("checkout.emptyCart")


def cart_subtotal(cart: Iterable[LineItem]) -> float:
    return sum(item.price * item.quantity for item in cart)


def parse_discount(text: str | None, subtotal: float) -> float:
    """
    Interpret the discount field.

    "10%" is a percentage of the subtotal, "25" a literal amount. Blank or
    unparseable input is zero.
    """
    if text is None or not str(text).strip():
        return 0.0
    text = str(text).strip()
    if "%" in text:
        percent = parse_number(text.replace("%", ""))
        return subtotal * percent / 100 if percent is not None else 0.0
    return parse_number(text) or 0.0


def compute_totals(
    cart: Iterable[LineItem],
    discount: str | None = "",
    tax_rate: float = DEFAULT_TAX_RATE,
) -> OrderTotals:
    """
    Compute subtotal, discount, tax and total for a cart.

    Args:
        cart: Line items to total.
        discount: Raw discount field text.
        tax_rate: Fractional tax rate (0.05 for 5%).

    Returns:
        OrderTotals for the cart.
    """
    subtotal = cart_subtotal(cart)
    discount_amount = parse_discount(discount, subtotal)
    tax = subtotal * tax_rate
    return OrderTotals(
        subtotal=subtotal,
        discount=discount_amount,
        tax=tax,
        total=subtotal - discount_amount + tax,
    )


@dataclass(slots=True)
class Cart:
    """Basket on the sales and purchase screens."""

    items: list[LineItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int = 1) -> LineItem:
        """Add a product; a product already in the cart has its quantity raised."""
        quantity = max(1, int(quantity))
        for item in self.items:
            if item.product_id == product.id:
                item.quantity += quantity
                return item
        item = LineItem.from_product(product, quantity)
        self.items.append(item)
        return item

    def clear(self) -> None:
        self.items.clear()

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total(self) -> float:
        return cart_subtotal(self.items)

    def __len__(self) -> int:
        return len(self.items)


def step_quantity(quantity: int, delta: int) -> int:
    """Quantity stepper that never drops below one."""
    return max(1, quantity + delta)


class CheckoutSession:
    """
    Working state of the checkout screen.

    The session copies the cart it is given so edits here never touch the
    basket on the screen that opened checkout.
    """

    def __init__(
        self, cart: Iterable[LineItem], tax_rate: float = DEFAULT_TAX_RATE
    ) -> None:
        self.items = [
            LineItem(item.product_id, item.name, item.price, item.quantity, item.sku)
            for item in cart
        ]
        self.tax_rate = tax_rate
        self.customer: Any = None
        self.payment_method = PAYMENT_METHODS[0]
        self.discount = ""
        self.paid_amount = ""
        self.notes = ""

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def totals(self) -> OrderTotals:
        return compute_totals(self.items, self.discount, self.tax_rate)

    def update_quantity(self, index: int, quantity: int) -> bool:
        """Set a line's quantity. Values below one are ignored."""
        if quantity < 1 or not 0 <= index < len(self.items):
            return False
        self.items[index].quantity = quantity
        return True

    def remove_item(self, index: int, confirm: Confirm) -> bool:
        """
        Remove a line after the user confirms.

        Args:
            index: Position of the line.
            confirm: Asked with the line; the line stays unless it returns True.
        """
        if not 0 <= index < len(self.items):
            return False
        item = self.items[index]
        if not confirm(item):
            return False
        del self.items[index]
        LOG.info("Removed %s from cart", item.name)
        return True

    def select_payment_method(self, method: str) -> None:
        if method not in PAYMENT_METHODS:
            raise ValueError(f"Unknown payment method: {method}")
        self.payment_method = method

    def place_order(self) -> dict[str, Any]:
        """
        Build the order payload.

        Raises:
            EmptyCartError: if the cart has no items.
        """
        if self.is_empty:
            raise EmptyCartError()
        totals = self.totals
        return {
            "customer": self.customer,
            "cart": [serialize_record(item) for item in self.items],
            "payment_method": self.payment_method,
            "discount": totals.discount,
            "paid_amount": parse_number(self.paid_amount) or 0.0,
            "notes": self.notes,
            "subtotal": totals.subtotal,
            "tax": totals.tax,
            "total": totals.total,
        }
