"""
Account service: CRUD for customer accounts.

Balances are only set here through explicit create/update
calls. Money movements go through TransactionService.
"""

import logging

from sqlalchemy.orm import Session

from bank_ledger.exceptions import NotFoundError
from bank_ledger.models.account import Account
from bank_ledger.repositories import AccountRepository, BankRepository
from bank_ledger.schemas.account import AccountCreate, AccountUpdate

logger = logging.getLogger(__name__)


class AccountService:

    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountRepository(db)
        self.banks = BankRepository(db)

    def _require_bank(self, bank_id: int) -> None:
        if not self.banks.exists_by_id(bank_id):
            raise NotFoundError("Bank not found")

    def find_one(self, account_id: int) -> Account | None:
        logger.debug("Request to find account by ID: %s", account_id)
        return self.accounts.find_by_id(account_id)

    def find_all(self) -> list[Account]:
        logger.debug("Request to find all accounts")
        return self.accounts.find_all()

    def create_account(self, request: AccountCreate) -> Account:
        """Create an account under an existing bank."""
        logger.debug("Request to create account: %s", request)
        self._require_bank(request.bank_id)

        account = Account(
            user_name=request.user_name,
            balance=request.balance,
            bank_id=request.bank_id,
        )
        return self.accounts.save(account)

    def update_account(
        self, account_id: int, request: AccountUpdate
    ) -> Account:
        """
        Replace an account's user name, balance and bank.

        Raises NotFoundError before any write if the account
        or the new bank does not exist.
        """
        logger.debug("Request to update account with ID: %s", account_id)
        account = self.accounts.find_by_id(account_id)
        if not account:
            raise NotFoundError("Account not found")
        self._require_bank(request.bank_id)

        account.user_name = request.user_name
        account.balance = request.balance
        account.bank_id = request.bank_id

        logger.debug("Updated account: %r", account)
        return self.accounts.save(account)

    def delete(self, account_id: int) -> None:
        """Delete an account and, by cascade, its transactions."""
        logger.debug("Request to delete account with ID: %s", account_id)
        if not self.accounts.exists_by_id(account_id):
            raise NotFoundError("Account not found")
        self.accounts.delete_by_id(account_id)
