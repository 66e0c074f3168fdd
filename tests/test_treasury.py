"""Tests for treasury filtering and the session ledger."""

from __future__ import annotations

from datetime import datetime

import pytest

from storefront_ui.data import demo_records
from storefront_ui.treasury import TreasuryLedger, filter_transactions
from storefront_ui.validation import PaymentDraft, validate_payment_receipt

TRANSACTIONS = demo_records.DEMO_TRANSACTIONS


def _ids(transactions):
    return [t.id for t in transactions]


def test_all_tab_keeps_order():
    assert _ids(filter_transactions(TRANSACTIONS)) == [
        "TXN73829",
        "TXN73828",
        "TXN73827",
        "TXN73826",
    ]


def test_tabs_filter_by_type():
    assert _ids(filter_transactions(TRANSACTIONS, "receipts")) == ["TXN73829", "TXN73827"]
    assert _ids(filter_transactions(TRANSACTIONS, "payments")) == ["TXN73828", "TXN73826"]


def test_unknown_tab_is_rejected():
    with pytest.raises(ValueError):
        filter_transactions(TRANSACTIONS, "transfers")


def test_search_uses_translated_title(translator, arabic):
    assert _ids(filter_transactions(TRANSACTIONS, query="acme", translate=translator.t)) == [
        "TXN73829"
    ]
    assert _ids(filter_transactions(TRANSACTIONS, query="أكمي", translate=arabic.t)) == [
        "TXN73829"
    ]


def test_search_matches_id():
    assert _ids(filter_transactions(TRANSACTIONS, "payments", query="txn73826")) == ["TXN73826"]


def test_ledger_records_newest_first():
    ledger = TreasuryLedger(list(TRANSACTIONS))
    draft = validate_payment_receipt(
        {"party_name": "ABC Supplies", "amount": "75.5", "type": "payment", "notes": "Invoice 7"}
    )
    now = datetime(2024, 1, 2, 15, 4, 5)

    transaction = ledger.record(draft, now)

    assert ledger.transactions[0] is transaction
    assert len(ledger.transactions) == len(TRANSACTIONS) + 1
    assert transaction.id == f"TXN{int(now.timestamp() * 1000)}"
    assert transaction.title == "ABC Supplies"
    assert transaction.subtitle == "Jan 02, 03:04 PM"
    assert transaction.amount == pytest.approx(75.5)
    assert transaction.is_positive is False


def test_recorded_receipt_shows_in_receipts_tab():
    ledger = TreasuryLedger()
    ledger.record(PaymentDraft("receipt", "Walk-in", 20.0), datetime(2024, 5, 1, 9, 0))
    assert len(filter_transactions(ledger.transactions, "receipts")) == 1
    assert filter_transactions(ledger.transactions, "payments") == []
