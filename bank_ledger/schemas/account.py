"""
Pydantic schemas for account operations.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    user_name: str = Field(min_length=1, max_length=255)
    balance: Decimal = Decimal("0")
    bank_id: int


class AccountUpdate(BaseModel):
    """Replaces user name, balance and owning bank."""
    user_name: str = Field(min_length=1, max_length=255)
    balance: Decimal
    bank_id: int


class AccountResponse(BaseModel):
    account_id: int
    user_name: str
    balance: Decimal
    bank_id: int

    model_config = {"from_attributes": True}
