"""
Transaction service: deposits, withdrawals, and transfers.

Each money movement:
1. Loads the account(s) involved
2. Checks available funds (withdrawals and transfers)
3. Computes the fee through the configured FeePolicy
4. Updates and saves the account balance(s)
5. Records a Transaction row and returns it

Every check happens before the first balance is touched.
The caller controls the commit, so a failure anywhere leaves
the database unchanged once the session is rolled back.
"""

import logging

from sqlalchemy.orm import Session

from bank_ledger.exceptions import InvalidOperationError, NotFoundError
from bank_ledger.models.account import Account
from bank_ledger.models.enums import TransactionReason
from bank_ledger.models.transaction import Transaction
from bank_ledger.repositories import AccountRepository, TransactionRepository
from bank_ledger.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    TransactionCreate,
    TransactionUpdate,
)
from bank_ledger.services.fees import FeePolicy

logger = logging.getLogger(__name__)


class TransactionService:

    def __init__(self, db: Session, fee_policy: FeePolicy | None = None):
        self.db = db
        self.accounts = AccountRepository(db)
        self.transactions = TransactionRepository(db)
        self.fee_policy = fee_policy or FeePolicy.from_settings()

    def _load_account(
        self, account_id: int, message: str = "Account not found"
    ) -> Account:
        account = self.accounts.find_by_id(account_id)
        if not account:
            raise NotFoundError(message)
        return account

    # --- CRUD ---

    def find_one(self, transaction_id: int) -> Transaction | None:
        logger.debug("Request to find transaction by ID: %s", transaction_id)
        return self.transactions.find_by_id(transaction_id)

    def find_all(self) -> list[Transaction]:
        logger.debug("Request to find all transactions")
        return self.transactions.find_all()

    def create_transaction(self, request: TransactionCreate) -> Transaction:
        """Record a transaction directly, without touching balances."""
        logger.debug("Request to create transaction: %s", request)
        self._load_account(request.originating_account_id)
        if request.resulting_account_id is not None:
            self._load_account(request.resulting_account_id)

        txn = Transaction(
            amount=request.amount,
            originating_account_id=request.originating_account_id,
            resulting_account_id=request.resulting_account_id,
            transaction_reason=request.transaction_reason,
        )
        return self.transactions.save(txn)

    def update_transaction(
        self, transaction_id: int, request: TransactionUpdate
    ) -> Transaction:
        logger.debug("Request to update transaction with ID: %s", transaction_id)
        txn = self.transactions.find_by_id(transaction_id)
        if not txn:
            raise NotFoundError("Transaction not found")
        self._load_account(request.originating_account_id)
        if request.resulting_account_id is not None:
            self._load_account(request.resulting_account_id)

        txn.amount = request.amount
        txn.originating_account_id = request.originating_account_id
        txn.resulting_account_id = request.resulting_account_id
        txn.transaction_reason = request.transaction_reason

        logger.debug("Updated transaction: %r", txn)
        return self.transactions.save(txn)

    def delete(self, transaction_id: int) -> None:
        logger.debug("Request to delete transaction with ID: %s", transaction_id)
        if not self.transactions.exists_by_id(transaction_id):
            raise NotFoundError("Transaction not found")
        self.transactions.delete_by_id(transaction_id)

    # --- Money movements ---

    def process_deposit(self, request: DepositRequest) -> Transaction:
        """
        Deposit into an account.

        The balance grows by the fee-adjusted credit; the stored
        transaction amount is the amount requested.
        """
        logger.debug("Request to process deposit: %s", request)
        account = self._load_account(request.account_id)

        credited = self.fee_policy.deposit_credit(request.amount)
        account.balance = account.balance + credited
        self.accounts.save(account)

        txn = self.transactions.save(Transaction(
            amount=request.amount,
            originating_account_id=account.account_id,
            transaction_reason=TransactionReason.DEPOSIT.value,
        ))
        logger.info(
            "Deposit processed",
            extra={
                "transaction_id": txn.transaction_id,
                "account_id": account.account_id,
                "amount": str(request.amount),
                "credited": str(credited),
            },
        )
        return txn

    def process_withdrawal(self, request: WithdrawalRequest) -> Transaction:
        """
        Withdraw from an account.

        Raises InvalidOperationError if the balance cannot cover
        the amount the fee policy requires.
        """
        logger.debug("Request to process withdrawal: %s", request)
        account = self._load_account(request.account_id)

        required = self.fee_policy.withdrawal_required_funds(request.amount)
        if account.balance < required:
            raise InvalidOperationError("Insufficient funds")

        debited = self.fee_policy.debit_total(request.amount)
        account.balance = account.balance - debited
        self.accounts.save(account)

        txn = self.transactions.save(Transaction(
            amount=-request.amount,
            originating_account_id=account.account_id,
            transaction_reason=TransactionReason.WITHDRAWAL.value,
        ))
        logger.info(
            "Withdrawal processed",
            extra={
                "transaction_id": txn.transaction_id,
                "account_id": account.account_id,
                "amount": str(request.amount),
                "debited": str(debited),
            },
        )
        return txn

    def process_transfer(self, request: TransferRequest) -> Transaction:
        """
        Move money between two accounts.

        The source pays the whole fee; the destination receives
        exactly the requested amount.
        """
        logger.debug("Request to process transfer: %s", request)
        source = self._load_account(
            request.source_account_id, "Source account not found"
        )
        target = self._load_account(
            request.destination_account_id, "Target account not found"
        )

        debited = self.fee_policy.debit_total(request.amount)
        required = self.fee_policy.transfer_required_funds(request.amount)
        if source.balance < required:
            raise InvalidOperationError("Insufficient funds")

        source.balance = source.balance - debited
        target.balance = target.balance + request.amount
        self.accounts.save(source)
        self.accounts.save(target)

        txn = self.transactions.save(Transaction(
            amount=-request.amount,
            originating_account_id=source.account_id,
            resulting_account_id=target.account_id,
            transaction_reason=TransactionReason.TRANSFER.value,
        ))
        logger.info(
            "Transfer processed",
            extra={
                "transaction_id": txn.transaction_id,
                "source_account_id": source.account_id,
                "destination_account_id": target.account_id,
                "amount": str(request.amount),
                "debited": str(debited),
            },
        )
        return txn
