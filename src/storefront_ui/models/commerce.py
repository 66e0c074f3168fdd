"""
Commerce domain models for the Storefront UI.

Records shown by the back-office screens:

    Product          catalog and inventory entries
    LineItem         a product placed in a cart with a quantity
    TradeRecord      sales orders and purchase orders
    Customer         customer directory entries
    Contact          customers or vendors added from the UI
    ReturnRecord     sales and purchase returns
    InvoiceSummary   invoices that can be selected for a return
    Transaction      treasury receipts and payments
    KpiSummary       figures for the expandable KPI card
    OrderTotals      checkout arithmetic result

All models are plain dataclasses; serialize_record converts any of them
into a JSON-compatible dictionary for Reflex state and order payloads.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Sequence

from storefront_ui.utils import format_currency


@dataclass(slots=True)
class Product:
    """A product that can be sold, purchased or managed."""

    id: int
    name: str
    sku: str
    price: float
    stock: int
    grade: str = ""
    category: str = ""
    status: str = ""
    description: str = ""

    @property
    def is_low_stock(self) -> bool:
        """True when five or fewer units are left."""
        return self.stock <= 5


@dataclass(slots=True)
class LineItem:
    """A product in a cart."""

    product_id: int
    name: str
    price: float
    quantity: int
    sku: str = ""

    @property
    def line_total(self) -> float:
        """Price multiplied by quantity."""
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "LineItem":
        """Build a cart line for the given product."""
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            sku=product.sku,
        )


@dataclass(slots=True)
class TradeRecord:
    """A sales order (party is the customer) or purchase order (the supplier)."""

    id: str
    party_name: str
    status: str
    date: str
    total: float
    currency: str = "SAR"

    def formatted_total(self) -> str:
        """Return the total formatted with its currency."""
        return format_currency(self.total, self.currency)


@dataclass(slots=True)
class Customer:
    """Customer directory entry."""

    id: int
    name: str
    email: str
    total_sales: float
    tier: str = "bronze"


@dataclass(slots=True)
class Contact:
    """A customer or vendor created from the add-contact dialog."""

    name: str
    type: str = "customer"
    phone: str = ""
    email: str = ""
    address: str = ""


@dataclass(slots=True)
class ReturnRecord:
    """A processed or pending return against an original invoice."""

    id: str
    party_name: str
    status: str
    return_date: str
    amount: float
    original_date: str
    original_invoice: str
    notes: str = ""
    currency: str = "USD"


@dataclass(slots=True)
class InvoiceSummary:
    """An invoice listed on the select-invoice-for-return screen."""

    id: str
    party_name: str
    amount: float
    status: str
    date: str
    currency: str = "USD"


@dataclass(slots=True)
class Transaction:
    """A treasury receipt (money in) or payment (money out)."""

    id: str
    type: str
    title: str
    subtitle: str
    amount: float
    payment_method: str = "cash"
    notes: str = ""

    @property
    def is_positive(self) -> bool:
        """Receipts increase the balance."""
        return self.type == "receipt"


@dataclass(slots=True)
class KpiSummary:
    """Aggregate figures shown in a listing's expandable KPI card."""

    total_sales: str = "0"
    currency: str = ""
    period: str = ""
    average_invoice_value: str | None = None
    total_invoices: str | None = None
    top_product: str | None = None
    sales_growth: str | None = None
    growth_positive: bool = True
    outstanding_receivables: str | None = None


@dataclass(slots=True)
class OrderTotals:
    """Checkout arithmetic: total = subtotal - discount + tax."""

    subtotal: float
    discount: float
    tax: float
    total: float


@dataclass(slots=True)
class InvoiceLine:
    """A line on the invoice detail screen."""

    name: str
    sku: str
    quantity: int
    unit_price: float

    @property
    def total(self) -> float:
        """Unit price multiplied by quantity."""
        return self.unit_price * self.quantity


@dataclass(slots=True)
class InvoiceDocument:
    """Everything the invoice detail screen displays."""

    number: str
    invoice_type: str
    party_name: str
    invoice_date: str
    due_date: str
    order_status: str
    payment_status: str
    subtotal: float
    discount: float
    paid_amount: float
    currency: str = "SAR"
    returns: float = 0.0
    notes: str = ""
    line_items: Sequence[InvoiceLine] = field(default_factory=list)

    @property
    def total(self) -> float:
        """Subtotal less discount and returns."""
        return self.subtotal - self.discount - self.returns

    @property
    def unpaid_amount(self) -> float:
        """Amount still owed, never negative."""
        return max(self.total - self.paid_amount, 0.0)


def serialize_record(record: Any) -> dict:
    """Convert a model dataclass into a JSON serializable dictionary."""
    return asdict(record)
