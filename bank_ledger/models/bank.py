"""
Bank model.

A bank owns accounts. Deleting a bank deletes its accounts,
and through them every transaction those accounts took part in.
"""

from decimal import Decimal

from sqlalchemy import String, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bank_ledger.models.base import Base


class Bank(Base):
    """
    A bank and its fee bookkeeping fields.

    The flat and percent fee fields are stored for reference only;
    fee calculation uses the configured fee policy.
    """

    __tablename__ = "banks"

    bank_id: Mapped[int] = mapped_column(primary_key=True)
    bank_name: Mapped[str] = mapped_column(String(255), nullable=False)
    total_transaction_fee_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    total_transfer_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    transaction_flat_fee_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    transaction_percent_fee_value: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )

    accounts: Mapped[list["Account"]] = relationship(
        back_populates="bank",
        cascade="all, delete",
    )

    def __repr__(self) -> str:
        return f"<Bank {self.bank_id} {self.bank_name}>"
