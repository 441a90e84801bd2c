"""
Shared enumerations.
"""

import enum


class TransactionReason(str, enum.Enum):
    """
    Tag describing why a transaction was recorded.

    Generated transactions always carry one of DEPOSIT, WITHDRAWAL
    or TRANSFER. Manually created rows may hold any text; such text
    classifies as OTHER while the raw value stays in the database.
    """
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    TRANSFER = "Transfer"
    OTHER = "Other"

    @classmethod
    def classify(cls, text: str | None) -> "TransactionReason":
        """Map free text onto a tag. Matching is exact."""
        for member in (cls.DEPOSIT, cls.WITHDRAWAL, cls.TRANSFER):
            if text == member.value:
                return member
        return cls.OTHER


class FeeStrategy(str, enum.Enum):
    """How fees are computed for money movements."""
    FLAT = "flat"
    FLAT_PLUS_PERCENT = "flat_plus_percent"
