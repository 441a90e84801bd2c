"""
Tests for the transaction reason tag.
"""

import pytest

from bank_ledger.models.enums import TransactionReason


@pytest.mark.parametrize("text, expected", [
    ("Deposit", TransactionReason.DEPOSIT),
    ("Withdrawal", TransactionReason.WITHDRAWAL),
    ("Transfer", TransactionReason.TRANSFER),
    ("transfer", TransactionReason.OTHER),
    ("Refund", TransactionReason.OTHER),
    ("", TransactionReason.OTHER),
    (None, TransactionReason.OTHER),
])
def test_classify(text, expected):
    assert TransactionReason.classify(text) is expected


def test_tags_compare_equal_to_stored_text():
    assert TransactionReason.TRANSFER == "Transfer"
    assert TransactionReason.TRANSFER.value == "Transfer"
