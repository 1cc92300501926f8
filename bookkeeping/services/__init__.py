"""Business logic services."""

from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.inventory_service import InventoryService
from bookkeeping.services.depreciation import straight_line_schedule

__all__ = [
    "LedgerService",
    "AccountService",
    "InventoryService",
    "straight_line_schedule",
]
