"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bank_ledger.models.base import Base
from bank_ledger.models.enums import TransactionReason, FeeStrategy
from bank_ledger.models.bank import Bank
from bank_ledger.models.account import Account
from bank_ledger.models.transaction import Transaction

__all__ = [
    "Base",
    "TransactionReason",
    "FeeStrategy",
    "Bank",
    "Account",
    "Transaction",
]
