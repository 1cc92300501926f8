"""
Pydantic schemas for journal posting and the trial balance.

These define the API contract. Optional fields carry their
documented defaults here so the services never see a
half-filled payload.
"""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.models.enums import AccountType
from bookkeeping.schemas.money import Money


# --- Request Schemas ---

class JournalLineCreate(BaseModel):
    """A single line of a journal entry. Omitted amounts are zero."""
    account_id: int
    debit: Decimal = Field(default=Decimal("0"), ge=0)
    credit: Decimal = Field(default=Decimal("0"), ge=0)


class JournalEntryCreate(BaseModel):
    """
    A complete journal entry.

    date defaults to today and description to an empty string.
    The non-empty and debit/credit balance rules are checked by
    LedgerService, not here, so direct service callers get the
    same errors as HTTP clients.
    """
    date: datetime.date | None = None
    description: str = Field(default="", max_length=255)
    lines: list[JournalLineCreate] = Field(default_factory=list)


# --- Response Schemas ---

class JournalLineResponse(BaseModel):
    """A posted line with its account's code and name joined in."""
    id: int
    entry_id: int
    account_id: int
    debit: Money
    credit: Money
    code: str | None
    name: str | None

    model_config = {"from_attributes": True}


class JournalEntryResponse(BaseModel):
    id: int
    date: datetime.date
    description: str
    created_at: datetime.datetime
    lines: list[JournalLineResponse]

    model_config = {"from_attributes": True}


class PostEntryResponse(BaseModel):
    """Acknowledgement of a posted entry."""
    ok: bool = True
    entry_id: int = Field(alias="entryId")

    model_config = {"populate_by_name": True}


class TrialBalanceRow(BaseModel):
    id: int
    code: str
    name: str
    type: AccountType
    total_debit: Money
    total_credit: Money

    model_config = {"from_attributes": True}


class TrialBalanceResponse(BaseModel):
    """Per-account totals ordered by code, plus grand totals."""
    rows: list[TrialBalanceRow]
    total_debit: Money = Field(alias="totalDebit")
    total_credit: Money = Field(alias="totalCredit")

    model_config = {"from_attributes": True, "populate_by_name": True}
