"""
Pydantic schemas for bank operations.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class BankCreate(BaseModel):
    bank_name: str = Field(min_length=1, max_length=255)
    total_transaction_fee_amount: Decimal = Decimal("0")
    total_transfer_amount: Decimal = Decimal("0")
    transaction_flat_fee_amount: Decimal = Decimal("0")
    transaction_percent_fee_value: Decimal = Decimal("0")


class BankUpdate(BaseModel):
    """Full replacement of every mutable bank field."""
    bank_name: str = Field(min_length=1, max_length=255)
    total_transaction_fee_amount: Decimal
    total_transfer_amount: Decimal
    transaction_flat_fee_amount: Decimal
    transaction_percent_fee_value: Decimal


class BankResponse(BaseModel):
    bank_id: int
    bank_name: str
    total_transaction_fee_amount: Decimal
    total_transfer_amount: Decimal
    transaction_flat_fee_amount: Decimal
    transaction_percent_fee_value: Decimal

    model_config = {"from_attributes": True}


class BankSummaryResponse(BaseModel):
    """Aggregates computed over every recorded transaction."""
    transaction_count: int
    total_transaction_fee_amount: Decimal
    total_transfer_amount: Decimal


class AmountResponse(BaseModel):
    amount: Decimal
