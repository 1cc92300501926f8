"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored.
"""

import enum


class AccountType(str, enum.Enum):
    """Chart of accounts classification."""
    ASSET = "asset"
    CONTRA_ASSET = "contra_asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"


class InventoryTxnType(str, enum.Enum):
    """Direction of an inventory movement."""
    PURCHASE = "purchase"
    SALE = "sale"
