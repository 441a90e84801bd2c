"""
Pydantic schemas for transaction operations.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from bank_ledger.models.enums import TransactionReason


class DepositRequest(BaseModel):
    account_id: int
    amount: Decimal


class WithdrawalRequest(BaseModel):
    account_id: int
    amount: Decimal


class TransferRequest(BaseModel):
    source_account_id: int
    destination_account_id: int
    amount: Decimal


class TransactionCreate(BaseModel):
    """Manually recorded transaction. The reason may be any text."""
    amount: Decimal
    originating_account_id: int
    resulting_account_id: int | None = None
    transaction_reason: str = Field(min_length=1, max_length=255)


class TransactionUpdate(TransactionCreate):
    pass


class TransactionResponse(BaseModel):
    transaction_id: int
    amount: Decimal
    originating_account_id: int
    resulting_account_id: int | None
    transaction_reason: str
    reason: TransactionReason

    model_config = {"from_attributes": True}
