"""
Form validation for dialogs and the add-product screen.

Validators take the raw text the user typed and either return a typed
draft or raise ValidationError carrying the translation key of the
message the UI shows in a blocking alert.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from storefront_ui.lib import logs
from storefront_ui.models.commerce import Contact
from storefront_ui.utils import parse_number

LOG = logs.logger(__file__)

BARCODE_LENGTH = 13
CONTACT_TYPES = ("customer", "vendor")
TRANSACTION_TYPES = ("receipt", "payment")


class ValidationError(ValueError):
    """
    User input was rejected.

    Attributes:
        message_key: Translation key of the message to show.
        params: Interpolation values for the message.
    """

    def __init__(self, message_key: str, **params: Any) -> None:
        super().__init__(message_key)
        self.message_key = message_key
        self.params = params

    def message(self, translate: Callable[..., str]) -> str:
        """Render the message with a translation function."""
        return translate(self.message_key, **self.params)


@dataclass(slots=True)
class ProductDraft:
    """A validated add-product form."""

    name: str
    description: str
    category: str
    cost_price: float
    sale_price: float
    lowest_sell_price: float = 0.0
    opening_quantity: int = 0
    barcode: str = ""


@dataclass(slots=True)
class PaymentDraft:
    """A validated payment or receipt dialog."""

    type: str
    party_name: str
    amount: float
    payment_method: str = "cash"
    notes: str = ""


def _text(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    return "" if value is None else str(value).strip()


def validate_product_form(form: Mapping[str, Any]) -> ProductDraft:
    """
    Validate the add-product form.

    Checks run in screen order and the first failure is raised.

    Raises:
        ValidationError: with a ``products.addProduct.validation.*`` key.
    """
    name = _text(form, "name")
    if not name:
        raise ValidationError("products.addProduct.validation.nameRequired")
    description = _text(form, "description")
    if not description:
        raise ValidationError("products.addProduct.validation.descriptionRequired")
    cost_price = parse_number(_text(form, "cost_price"))
    if cost_price is None or cost_price <= 0:
        raise ValidationError("products.addProduct.validation.costPriceRequired")
    sale_price = parse_number(_text(form, "sale_price"))
    if sale_price is None or sale_price <= 0:
        raise ValidationError("products.addProduct.validation.salePriceRequired")
    category = _text(form, "category")
    if not category:
        raise ValidationError("products.addProduct.validation.categoryRequired")

    return ProductDraft(
        name=name,
        description=description,
        category=category,
        cost_price=cost_price,
        sale_price=sale_price,
        lowest_sell_price=parse_number(_text(form, "lowest_sell_price")) or 0.0,
        opening_quantity=int(parse_number(_text(form, "opening_quantity")) or 0),
        barcode=_text(form, "barcode"),
    )


def generate_barcode(rng: random.Random | None = None) -> str:
    """Return a random 13-digit barcode."""
    rng = rng or random.Random()
    return "".join(str(rng.randrange(10)) for _ in range(BARCODE_LENGTH))


@dataclass(slots=True)
class CategoryCatalog:
    """Product categories offered by the add-product form."""

    categories: list[str] = field(default_factory=list)

    def exists(self, name: str) -> bool:
        wanted = name.strip().lower()
        return any(category.strip().lower() == wanted for category in self.categories)

    def add_category(self, name: str) -> str:
        """
        Add a new category and return its trimmed name.

        Raises:
            ValidationError: if the name is blank or already present
                (compared case-insensitively).
        """
        category = (name or "").strip()
        if not category:
            raise ValidationError("products.addProduct.category.categoryRequired")
        if self.exists(category):
            raise ValidationError("products.addProduct.category.categoryExists")
        self.categories.append(category)
        LOG.info("Category added: %s", category)
        return category

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "CategoryCatalog":
        return cls(list(names))


def validate_contact(form: Mapping[str, Any]) -> Contact:
    """
    Validate the add-contact dialog.

    Raises:
        ValidationError: when the name is blank.
    """
    name = _text(form, "name")
    if not name:
        raise ValidationError("customer.nameRequired")
    contact_type = _text(form, "type") or "customer"
    if contact_type not in CONTACT_TYPES:
        raise ValueError(f"Unknown contact type: {contact_type}")
    return Contact(
        name=name,
        type=contact_type,
        phone=_text(form, "phone"),
        email=_text(form, "email"),
        address=_text(form, "address"),
    )


def validate_payment_receipt(form: Mapping[str, Any]) -> PaymentDraft:
    """
    Validate the payment/receipt dialog.

    Raises:
        ValidationError: when the party name is blank or the amount is
            not a positive number.
    """
    party_name = _text(form, "party_name")
    if not party_name:
        raise ValidationError("customer.nameRequired")
    amount = parse_number(_text(form, "amount"))
    if amount is None or amount <= 0:
        raise ValidationError("validation.required")
    transaction_type = _text(form, "type") or "receipt"
    if transaction_type not in TRANSACTION_TYPES:
        raise ValueError(f"Unknown transaction type: {transaction_type}")
    return PaymentDraft(
        type=transaction_type,
        party_name=party_name,
        amount=amount,
        payment_method=_text(form, "payment_method") or "cash",
        notes=_text(form, "notes"),
    )
