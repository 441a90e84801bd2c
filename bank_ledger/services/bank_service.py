"""
Bank service: CRUD for banks plus reporting.

The reporting figures are recomputed from every recorded
transaction on each call. Nothing is cached between calls,
so the result always reflects the current transaction set.
"""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from bank_ledger.exceptions import NotFoundError
from bank_ledger.models.account import Account
from bank_ledger.models.bank import Bank
from bank_ledger.models.enums import TransactionReason
from bank_ledger.models.transaction import Transaction
from bank_ledger.repositories import (
    AccountRepository,
    BankRepository,
    TransactionRepository,
)
from bank_ledger.schemas.bank import BankCreate, BankUpdate, BankSummaryResponse
from bank_ledger.services.fees import FeePolicy

logger = logging.getLogger(__name__)


class BankService:

    def __init__(self, db: Session, fee_policy: FeePolicy | None = None):
        self.db = db
        self.banks = BankRepository(db)
        self.accounts = AccountRepository(db)
        self.transactions = TransactionRepository(db)
        self.fee_policy = fee_policy or FeePolicy.from_settings()

    def find_one(self, bank_id: int) -> Bank | None:
        logger.debug("Request to find bank by ID: %s", bank_id)
        return self.banks.find_by_id(bank_id)

    def find_all(self) -> list[Bank]:
        logger.debug("Request to find all banks")
        return self.banks.find_all()

    def create_bank(self, request: BankCreate) -> Bank:
        logger.debug("Request to create bank: %s", request)
        bank = Bank(
            bank_name=request.bank_name,
            total_transaction_fee_amount=request.total_transaction_fee_amount,
            total_transfer_amount=request.total_transfer_amount,
            transaction_flat_fee_amount=request.transaction_flat_fee_amount,
            transaction_percent_fee_value=request.transaction_percent_fee_value,
        )
        return self.banks.save(bank)

    def update_bank(self, bank_id: int, request: BankUpdate) -> Bank:
        """Replace all five mutable fields of a bank."""
        logger.debug("Request to update bank with ID: %s", bank_id)
        bank = self.banks.find_by_id(bank_id)
        if not bank:
            raise NotFoundError("Bank not found")

        bank.bank_name = request.bank_name
        bank.total_transaction_fee_amount = request.total_transaction_fee_amount
        bank.total_transfer_amount = request.total_transfer_amount
        bank.transaction_flat_fee_amount = request.transaction_flat_fee_amount
        bank.transaction_percent_fee_value = request.transaction_percent_fee_value

        logger.debug("Updated bank: %r", bank)
        return self.banks.save(bank)

    def delete(self, bank_id: int) -> None:
        """Delete a bank together with its accounts and their transactions."""
        logger.debug("Request to delete bank with ID: %s", bank_id)
        if not self.banks.exists_by_id(bank_id):
            raise NotFoundError("Bank not found")
        self.banks.delete_by_id(bank_id)

    def get_all_accounts(self) -> list[Account]:
        """Every account in the system, regardless of bank."""
        return self.accounts.find_all()

    # --- Reporting ---

    def _total_fee(self, transactions: list[Transaction]) -> Decimal:
        return sum(
            (self.fee_policy.reported_fee(t.amount) for t in transactions),
            Decimal("0"),
        )

    def _total_transfer(self, transactions: list[Transaction]) -> Decimal:
        return sum(
            (
                abs(t.amount) for t in transactions
                if t.reason == TransactionReason.TRANSFER
            ),
            Decimal("0"),
        )

    def calculate_total_transaction_fee_amount(self) -> Decimal:
        """
        Sum of per-transaction fees over all transactions.

        Each transaction contributes flat fee + amount * rate using
        its signed amount. An empty ledger yields zero.
        """
        return self._total_fee(self.transactions.find_all())

    def calculate_total_transfer_amount(self) -> Decimal:
        """Sum of absolute amounts of all transfer transactions."""
        return self._total_transfer(self.transactions.find_all())

    def get_reporting_summary(self) -> BankSummaryResponse:
        """Both aggregates computed from a single scan."""
        transactions = self.transactions.find_all()
        return BankSummaryResponse(
            transaction_count=len(transactions),
            total_transaction_fee_amount=self._total_fee(transactions),
            total_transfer_amount=self._total_transfer(transactions),
        )
