"""Business logic services."""

from bank_ledger.services.fees import FeePolicy
from bank_ledger.services.account_service import AccountService
from bank_ledger.services.bank_service import BankService
from bank_ledger.services.transaction_service import TransactionService

__all__ = ["FeePolicy", "AccountService", "BankService", "TransactionService"]
