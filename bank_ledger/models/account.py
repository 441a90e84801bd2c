"""
Customer account model.

An account belongs to exactly one bank and holds its balance
directly. The balance is only changed by explicit updates and
by the transaction service.
"""

from decimal import Decimal

from sqlalchemy import String, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_ledger.models.base import Base


class Account(Base):
    __tablename__ = "accounts"

    account_id: Mapped[int] = mapped_column(primary_key=True)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    bank_id: Mapped[int] = mapped_column(
        ForeignKey("banks.bank_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    bank: Mapped["Bank"] = relationship(back_populates="accounts")
    originated_transactions: Mapped[list["Transaction"]] = relationship(
        foreign_keys="Transaction.originating_account_id",
        back_populates="originating_account",
        cascade="all, delete",
    )
    received_transactions: Mapped[list["Transaction"]] = relationship(
        foreign_keys="Transaction.resulting_account_id",
        back_populates="resulting_account",
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        return f"<Account {self.account_id} {self.user_name} ({self.balance})>"
