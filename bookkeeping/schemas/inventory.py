"""
Pydantic schemas for items and inventory transactions.
"""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.models.enums import InventoryTxnType
from bookkeeping.schemas.journal import JournalLineCreate
from bookkeeping.schemas.money import Money


# --- Item Schemas ---

class ItemCreate(BaseModel):
    """Request to add an item. Opening qty and avg_cost default to zero."""
    sku: str | None = Field(default=None, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    qty: Decimal = Decimal("0")
    avg_cost: Decimal = Field(default=Decimal("0"), ge=0)


class ItemResponse(BaseModel):
    id: int
    sku: str | None
    name: str
    qty: Money
    avg_cost: Money

    model_config = {"from_attributes": True}


class ItemCreatedResponse(BaseModel):
    id: int


# --- Transaction Schemas ---

class InventoryTxnCreate(BaseModel):
    """
    A purchase or sale of an item.

    journal_lines may be omitted, in which case the service
    derives them from the transaction (see InventoryService).
    unit_cost defaults to zero and date to today.
    """
    item_id: int
    type: InventoryTxnType
    qty: Decimal = Field(gt=0)
    unit_cost: Decimal = Field(default=Decimal("0"), ge=0)
    date: datetime.date | None = None
    journal_lines: list[JournalLineCreate] | None = None


class InventoryTxnResponse(BaseModel):
    id: int
    item_id: int
    type: InventoryTxnType
    qty: Money
    unit_cost: Money
    date: datetime.date
    journal_id: int

    model_config = {"from_attributes": True}


class InventoryTxnPostedResponse(BaseModel):
    ok: bool = True
    entry_id: int = Field(alias="entryId")

    model_config = {"populate_by_name": True}
