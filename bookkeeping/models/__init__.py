"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bookkeeping.models.base import Base
from bookkeeping.models.enums import AccountType, InventoryTxnType
from bookkeeping.models.account import Account
from bookkeeping.models.journal import JournalEntry, JournalLine
from bookkeeping.models.item import Item, InventoryTxn

__all__ = [
    "Base",
    "AccountType",
    "InventoryTxnType",
    "Account",
    "JournalEntry",
    "JournalLine",
    "Item",
    "InventoryTxn",
]
