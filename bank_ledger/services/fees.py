"""
Fee policy for money movements.

Two fee strategies exist:

flat_plus_percent (default)
    A flat fee is applied first and a percentage fee is charged
    on the result. Deposits credit (amount - flat) * (1 + rate).
    Withdrawals and transfers debit (amount + flat) * (1 + rate).
    Withdrawals check funds against the requested amount only;
    transfers check against the fee-inclusive total.

flat
    A single fee of amount * rate. Deposits credit amount - fee,
    withdrawals and transfers debit amount + fee and both check
    funds against that total.
"""

from decimal import Decimal

from bank_ledger.config import Settings, get_settings
from bank_ledger.models.enums import FeeStrategy


DEFAULT_FLAT_FEE = Decimal("10.00")
DEFAULT_PERCENT_FEE = Decimal("0.05")


class FeePolicy:

    def __init__(
        self,
        strategy: FeeStrategy = FeeStrategy.FLAT_PLUS_PERCENT,
        flat_fee: Decimal = DEFAULT_FLAT_FEE,
        percent_fee: Decimal = DEFAULT_PERCENT_FEE,
    ):
        self.strategy = FeeStrategy(strategy)
        self.flat_fee = flat_fee
        self.percent_fee = percent_fee

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FeePolicy":
        settings = settings or get_settings()
        return cls(
            strategy=FeeStrategy(settings.FEE_STRATEGY),
            flat_fee=settings.TRANSACTION_FLAT_FEE,
            percent_fee=settings.TRANSACTION_PERCENT_FEE,
        )

    def deposit_credit(self, amount: Decimal) -> Decimal:
        """Amount actually added to the balance for a deposit."""
        if self.strategy == FeeStrategy.FLAT:
            return amount - amount * self.percent_fee

        net_of_flat = amount - self.flat_fee
        percentage_fee = net_of_flat * self.percent_fee
        return net_of_flat + percentage_fee

    def debit_total(self, amount: Decimal) -> Decimal:
        """Amount taken from the balance for a withdrawal or transfer."""
        if self.strategy == FeeStrategy.FLAT:
            return amount + amount * self.percent_fee

        gross = amount + self.flat_fee
        percentage_fee = gross * self.percent_fee
        return gross + percentage_fee

    def withdrawal_required_funds(self, amount: Decimal) -> Decimal:
        """Balance needed before a withdrawal is allowed."""
        if self.strategy == FeeStrategy.FLAT:
            return self.debit_total(amount)
        return amount

    def transfer_required_funds(self, amount: Decimal) -> Decimal:
        """Balance needed on the source account before a transfer."""
        return self.debit_total(amount)

    def reported_fee(self, amount: Decimal) -> Decimal:
        """
        Fee attributed to a recorded transaction in bank reports.

        Uses the signed stored amount, so withdrawals and transfers
        reduce the running total.
        """
        return self.flat_fee + amount * self.percent_fee

    def __repr__(self) -> str:
        return (
            f"<FeePolicy {self.strategy.value} "
            f"flat={self.flat_fee} rate={self.percent_fee}>"
        )
