"""
Treasury screen logic: transaction tabs, search and recording
payments/receipts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable

from storefront_ui.lib import logs
from storefront_ui.models.commerce import Transaction
from storefront_ui.validation import PaymentDraft

LOG = logs.logger(__file__)

TABS = ("all", "receipts", "payments")
PERIODS = (
    "treasury.filter.thisMonth",
    "treasury.filter.lastMonth",
    "treasury.filter.thisQuarter",
    "treasury.filter.thisYear",
)

_TAB_TYPES = {"receipts": "receipt", "payments": "payment"}


@dataclass(slots=True)
class TreasurySummary:
    """Balance figures of the treasury overview card (preformatted)."""

    current_balance: str
    today_net_flow: str
    today_receipts: str
    today_payments: str
    total_receipts: str
    total_payments: str
    total_receivables: str
    total_payables: str


def filter_transactions(
    transactions: Iterable[Transaction],
    tab: str = "all",
    query: str = "",
    translate: Callable[[str], str] | None = None,
) -> list[Transaction]:
    """
    Transactions for a tab whose title or id contains the query.

    Titles may be translation keys; ``translate`` renders them before
    searching so users match the text they see.

    Raises:
        ValueError: for an unknown tab.
    """
    if tab not in TABS:
        raise ValueError(f"Unknown treasury tab: {tab}")
    wanted_type = _TAB_TYPES.get(tab)
    needle = query.lower()
    result = []
    for transaction in transactions:
        if wanted_type and transaction.type != wanted_type:
            continue
        title = translate(transaction.title) if translate else transaction.title
        if needle and needle not in title.lower() and needle not in transaction.id.lower():
            continue
        result.append(transaction)
    return result


@dataclass(slots=True)
class TreasuryLedger:
    """Transactions recorded during the session, newest first."""

    transactions: list[Transaction] = field(default_factory=list)

    def record(self, draft: PaymentDraft, now: datetime | None = None) -> Transaction:
        """Prepend a validated payment or receipt and return it."""
        now = now or datetime.now()
        transaction = Transaction(
            id=f"TXN{int(now.timestamp() * 1000)}",
            type=draft.type,
            title=draft.party_name,
            subtitle=now.strftime("%b %d, %I:%M %p"),
            amount=draft.amount,
            payment_method=draft.payment_method,
            notes=draft.notes,
        )
        self.transactions.insert(0, transaction)
        LOG.info("Recorded %s %s: %.2f", transaction.type, transaction.id, transaction.amount)
        return transaction
