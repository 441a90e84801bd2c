"""
Transaction model.

One row per deposit, withdrawal or transfer. The amount is
signed from the point of view of the originating account:
positive for deposits, negative for withdrawals and transfers.
Fees are never reflected in the stored amount.
"""

from decimal import Decimal

from sqlalchemy import String, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_ledger.models.base import Base
from bank_ledger.models.enums import TransactionReason


class Transaction(Base):
    __tablename__ = "transactions"

    transaction_id: Mapped[int] = mapped_column(primary_key=True)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    originating_account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.account_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Only transfers have a resulting account
    resulting_account_id: Mapped[int | None] = mapped_column(
        ForeignKey("accounts.account_id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    transaction_reason: Mapped[str] = mapped_column(
        String(255), nullable=False
    )

    # Relationships
    originating_account: Mapped["Account"] = relationship(
        foreign_keys=[originating_account_id],
        back_populates="originated_transactions",
    )
    resulting_account: Mapped["Account | None"] = relationship(
        foreign_keys=[resulting_account_id],
        back_populates="received_transactions",
    )

    @property
    def reason(self) -> TransactionReason:
        """The classified reason tag."""
        return TransactionReason.classify(self.transaction_reason)

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.transaction_id} "
            f"{self.transaction_reason} {self.amount}>"
        )
