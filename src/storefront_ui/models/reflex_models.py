"""
Reflex-compatible models for the Storefront UI.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. Display strings (formatted amounts and
dates) are computed when converting, since the UI layer only renders.
"""

import reflex as rx

from storefront_ui.models.commerce import (
    Customer,
    InvoiceDocument,
    InvoiceSummary,
    LineItem,
    Product,
    ReturnRecord,
    TradeRecord,
    Transaction,
)
from storefront_ui.utils import format_currency, format_date


class ProductModel(rx.Base):
    """Catalog or inventory product."""

    id: int = 0
    name: str = ""
    sku: str = ""
    price: float = 0.0
    price_display: str = ""
    stock: int = 0
    grade: str = ""
    status: str = ""
    status_label: str = ""
    low_stock: bool = False
    quantity: int = 1


class LineItemModel(rx.Base):
    """Cart line."""

    product_id: int = 0
    name: str = ""
    sku: str = ""
    price: float = 0.0
    quantity: int = 1
    price_display: str = ""
    total_display: str = ""


class RecordModel(rx.Base):
    """Sales order or purchase order row."""

    id: str = ""
    party_name: str = ""
    status: str = ""
    status_label: str = ""
    date: str = ""
    total: float = 0.0
    total_display: str = ""


class CustomerModel(rx.Base):
    id: int = 0
    name: str = ""
    email: str = ""
    total_sales: str = ""
    tier: str = ""
    tier_label: str = ""


class ContactModel(rx.Base):
    name: str = ""
    type: str = "customer"
    phone: str = ""
    email: str = ""
    address: str = ""


class TransactionModel(rx.Base):
    """Treasury transaction row."""

    id: str = ""
    type: str = ""
    title: str = ""
    subtitle: str = ""
    amount: float = 0.0
    amount_display: str = ""
    is_positive: bool = True
    payment_method: str = "cash"
    notes: str = ""


class ReturnModel(rx.Base):
    id: str = ""
    party_name: str = ""
    status: str = ""
    status_label: str = ""
    return_date: str = ""
    amount_display: str = ""
    original_date: str = ""
    original_invoice: str = ""
    notes: str = ""


class InvoiceSummaryModel(rx.Base):
    """Invoice offered for a return."""

    id: str = ""
    party_name: str = ""
    status: str = ""
    status_label: str = ""
    date: str = ""
    amount_display: str = ""


class InvoiceLineModel(rx.Base):
    name: str = ""
    sku: str = ""
    quantity: int = 0
    unit_price_display: str = ""
    total_display: str = ""


class InvoiceModel(rx.Base):
    """Invoice shown on the detail screen."""

    number: str = ""
    invoice_type: str = "sales"
    party_name: str = ""
    invoice_date: str = ""
    due_date: str = ""
    order_status: str = ""
    payment_status: str = ""
    subtotal: str = ""
    discount: str = ""
    returns: str = ""
    total: str = ""
    paid_amount: str = ""
    unpaid_amount: str = ""
    notes: str = ""
    line_items: list[InvoiceLineModel] = []


class KpiRowModel(rx.Base):
    label: str = ""
    value: str = ""
    tone: str = "neutral"


class OptionModel(rx.Base):
    """A filter chip, tab or select option."""

    key: str = ""
    label: str = ""


class CardModel(rx.Base):
    """Dashboard card."""

    icon: str = ""
    title: str = ""
    subtitle: str = ""
    value: str = ""
    change: str = ""
    change_type: str = "positive"
    is_metric: bool = False


class ActivityModel(rx.Base):
    icon: str = ""
    title: str = ""
    time: str = ""
    type: str = ""


def product_to_model(product: Product, currency: str = "SAR") -> ProductModel:
    return ProductModel(
        id=product.id,
        name=product.name,
        sku=product.sku,
        price=product.price,
        price_display=format_currency(product.price, currency),
        stock=product.stock,
        grade=product.grade,
        status=product.status,
        low_stock=product.is_low_stock,
    )


def line_item_to_model(item: LineItem, currency: str = "SAR") -> LineItemModel:
    return LineItemModel(
        product_id=item.product_id,
        name=item.name,
        sku=item.sku,
        price=item.price,
        quantity=item.quantity,
        price_display=format_currency(item.price, currency),
        total_display=format_currency(item.line_total, currency),
    )


def model_to_line_item(model: LineItemModel) -> LineItem:
    """Convert a cart row back into the domain LineItem."""
    return LineItem(
        product_id=model.product_id,
        name=model.name,
        price=model.price,
        quantity=model.quantity,
        sku=model.sku,
    )


def record_to_model(record: TradeRecord, language: str = "en") -> RecordModel:
    return RecordModel(
        id=record.id,
        party_name=record.party_name,
        status=record.status,
        date=format_date(record.date, language),
        total=record.total,
        total_display=record.formatted_total(),
    )


def customer_to_model(customer: Customer) -> CustomerModel:
    return CustomerModel(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        total_sales=format_currency(customer.total_sales, "$"),
        tier=customer.tier,
    )


def transaction_to_model(transaction: Transaction, title: str) -> TransactionModel:
    """
    Convert a transaction, using an already translated title.

    Args:
        transaction: Domain transaction.
        title: Display title (demo titles are translation keys).
    """
    sign = "+" if transaction.is_positive else "-"
    return TransactionModel(
        id=transaction.id,
        type=transaction.type,
        title=title,
        subtitle=transaction.subtitle,
        amount=transaction.amount,
        amount_display=f"{sign}{format_currency(transaction.amount, 'SAR')}",
        is_positive=transaction.is_positive,
        payment_method=transaction.payment_method,
        notes=transaction.notes,
    )


def model_to_transaction(model: TransactionModel) -> Transaction:
    """Rebuild a session-recorded transaction from its model."""
    return Transaction(
        id=model.id,
        type=model.type,
        title=model.title,
        subtitle=model.subtitle,
        amount=model.amount,
        payment_method=model.payment_method,
        notes=model.notes,
    )


def return_to_model(record: ReturnRecord, language: str = "en") -> ReturnModel:
    return ReturnModel(
        id=record.id,
        party_name=record.party_name,
        status=record.status,
        return_date=format_date(record.return_date, language),
        amount_display=format_currency(record.amount, record.currency),
        original_date=format_date(record.original_date, language),
        original_invoice=record.original_invoice,
        notes=record.notes,
    )


def invoice_summary_to_model(invoice: InvoiceSummary, language: str = "en") -> InvoiceSummaryModel:
    return InvoiceSummaryModel(
        id=invoice.id,
        party_name=invoice.party_name,
        status=invoice.status,
        date=format_date(invoice.date, language),
        amount_display=format_currency(invoice.amount, invoice.currency),
    )


def invoice_to_model(document: InvoiceDocument, language: str = "en") -> InvoiceModel:
    """
    Convert an InvoiceDocument into display strings.

    Args:
        document: Invoice to show.
        language: Language used for dates.
    """
    currency = document.currency
    return InvoiceModel(
        number=document.number,
        invoice_type=document.invoice_type,
        party_name=document.party_name,
        invoice_date=format_date(document.invoice_date, language),
        due_date=format_date(document.due_date, language),
        order_status=document.order_status,
        payment_status=document.payment_status,
        subtotal=format_currency(document.subtotal, currency),
        discount=f"-{format_currency(document.discount, currency)}",
        returns=format_currency(document.returns, currency),
        total=format_currency(document.total, currency),
        paid_amount=format_currency(document.paid_amount, currency),
        unpaid_amount=format_currency(document.unpaid_amount, currency),
        notes=document.notes,
        line_items=[
            InvoiceLineModel(
                name=line.name,
                sku=line.sku,
                quantity=line.quantity,
                unit_price_display=format_currency(line.unit_price, currency),
                total_display=format_currency(line.total, currency),
            )
            for line in document.line_items
        ],
    )
