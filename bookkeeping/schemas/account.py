"""
Pydantic schemas for the chart of accounts.
"""

from pydantic import BaseModel, Field

from bookkeeping.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request to create a new account."""
    code: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    type: AccountType


class AccountResponse(BaseModel):
    id: int
    code: str
    name: str
    type: AccountType

    model_config = {"from_attributes": True}
