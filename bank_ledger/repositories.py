"""
Ledger store: data access for banks, accounts and transactions.

Each repository wraps the request's session and offers the same
small set of operations. Repositories only flush; the caller
decides when the unit of work is committed.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from bank_ledger.models.account import Account
from bank_ledger.models.bank import Bank
from bank_ledger.models.base import Base
from bank_ledger.models.transaction import Transaction

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Generic repository keyed by primary key."""

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        return list(self.db.execute(select(self.model)).scalars().all())

    def save(self, entity: ModelT) -> ModelT:
        """Insert or update an entity. New entities get their id here."""
        self.db.add(entity)
        self.db.flush()
        return entity

    def exists_by_id(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None

    def delete_by_id(self, entity_id: int) -> None:
        """Delete an entity; dependent rows are removed by cascade."""
        entity = self.find_by_id(entity_id)
        if entity is not None:
            self.db.delete(entity)
            self.db.flush()


class BankRepository(Repository[Bank]):
    model = Bank


class AccountRepository(Repository[Account]):
    model = Account


class TransactionRepository(Repository[Transaction]):
    model = Transaction
