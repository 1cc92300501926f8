"""
Inventory service — items and perpetual weighted-average costing.

Recording a transaction does three things in the caller's
unit of work:
1. Writes a journal entry for the financial effect
2. Inserts the InventoryTxn row linked to that entry
3. Updates the item's quantity and average cost

Nothing is committed here; either all three land or none do.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookkeeping.config import Settings, get_settings
from bookkeeping.errors import (
    InsufficientStockError,
    InvalidTxnError,
    NotFoundError,
)
from bookkeeping.models.enums import InventoryTxnType
from bookkeeping.models.item import Item, InventoryTxn
from bookkeeping.schemas.inventory import ItemCreate, InventoryTxnCreate
from bookkeeping.schemas.journal import JournalLineCreate
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

# Matches the scale of Item.avg_cost
COST_QUANT = Decimal("0.000001")


def weighted_average_cost(
    old_qty: Decimal,
    old_avg: Decimal,
    qty: Decimal,
    unit_cost: Decimal,
) -> tuple[Decimal, Decimal]:
    """
    Return (new_qty, new_avg) after receiving qty units at unit_cost.

    The average is zero when the resulting quantity is zero.
    """
    new_qty = old_qty + qty
    if new_qty == 0:
        return new_qty, Decimal("0")
    new_avg = (old_qty * old_avg + qty * unit_cost) / new_qty
    return new_qty, new_avg.quantize(COST_QUANT, rounding=ROUND_HALF_UP)


class InventoryService:

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()
        self.ledger_service = LedgerService(db)
        self.account_service = AccountService(db)

    # --- Items ---

    def list_items(self) -> list[Item]:
        items = self.db.execute(select(Item).order_by(Item.id)).scalars().all()
        return list(items)

    def get_item(self, item_id: int) -> Item:
        item = self.db.get(Item, item_id)
        if not item:
            raise NotFoundError(f"Item {item_id} not found")
        return item

    def create_item(self, request: ItemCreate) -> Item:
        """Add an item with an optional opening quantity and cost."""
        item = Item(
            sku=request.sku,
            name=request.name,
            qty=request.qty,
            avg_cost=request.avg_cost,
        )
        self.db.add(item)
        self.db.flush()
        logger.info("Created item %s (%s)", item.id, item.name)
        return item

    def get_transactions(self, item_id: int) -> list[InventoryTxn]:
        """Return an item's transactions, oldest first."""
        self.get_item(item_id)
        txns = self.db.execute(
            select(InventoryTxn)
            .where(InventoryTxn.item_id == item_id)
            .order_by(InventoryTxn.id)
        ).scalars().all()
        return list(txns)

    # --- Transactions ---

    def record_txn(self, request: InventoryTxnCreate) -> InventoryTxn:
        """
        Record a purchase or sale and its journal entry.

        Supplied journal lines are trusted: they are posted without
        a debit/credit balance check unless VALIDATE_INVENTORY_LINES
        is set. When no lines are supplied they are derived from the
        transaction. The caller commits.
        """
        if not request.item_id or not request.type or not request.qty:
            raise InvalidTxnError("item_id, type, qty required")

        txn_type = InventoryTxnType(request.type)
        qty = Decimal(request.qty)
        unit_cost = Decimal(request.unit_cost or 0)
        if qty <= 0:
            raise InvalidTxnError("qty must be positive")
        if unit_cost < 0:
            raise InvalidTxnError("unit_cost cannot be negative")

        # Lock the item row for the read-modify-write below so two
        # concurrent postings cannot both start from the same average.
        item = self.db.execute(
            select(Item).where(Item.id == request.item_id).with_for_update()
        ).scalar_one_or_none()
        if not item:
            raise InvalidTxnError(f"Item {request.item_id} not found")

        old_qty = Decimal(item.qty or 0)
        if (
            txn_type == InventoryTxnType.SALE
            and not self.settings.ALLOW_NEGATIVE_STOCK
            and old_qty < qty
        ):
            raise InsufficientStockError(
                f"Insufficient stock for item {item.id}: "
                f"on hand={old_qty}, requested={qty}"
            )

        lines = request.journal_lines or self._derive_lines(
            txn_type, qty, unit_cost
        )
        if self.settings.VALIDATE_INVENTORY_LINES:
            self.ledger_service.check_balance(lines)

        txn_date = request.date or date.today()
        entry = self.ledger_service.write_entry(
            entry_date=txn_date,
            description=f"Inventory {txn_type.value} for item {item.id}",
            lines=lines,
        )

        txn = InventoryTxn(
            item_id=item.id,
            type=txn_type,
            qty=qty,
            unit_cost=unit_cost,
            date=txn_date,
            journal_id=entry.id,
        )
        self.db.add(txn)

        if txn_type == InventoryTxnType.PURCHASE:
            item.qty, item.avg_cost = weighted_average_cost(
                old_qty, Decimal(item.avg_cost or 0), qty, unit_cost
            )
        else:
            # Sales leave the average cost untouched
            item.qty = old_qty - qty

        self.db.flush()
        logger.info(
            "Recorded %s of %s x item %s @ %s (entry %s); qty now %s",
            txn_type.value, qty, item.id, unit_cost, entry.id, item.qty,
        )
        return txn

    def _derive_lines(
        self,
        txn_type: InventoryTxnType,
        qty: Decimal,
        unit_cost: Decimal,
    ) -> list[JournalLineCreate]:
        """
        Build the default two-line entry for a transaction.

        Purchase on credit: Dr purchases / Cr suppliers.
        Cash sale:          Dr cash      / Cr sales.
        """
        if txn_type == InventoryTxnType.PURCHASE:
            debit_code = self.settings.PURCHASES_ACCOUNT_CODE
            credit_code = self.settings.SUPPLIERS_ACCOUNT_CODE
        else:
            debit_code = self.settings.CASH_ACCOUNT_CODE
            credit_code = self.settings.SALES_ACCOUNT_CODE

        debit_account = self.account_service.get_by_code(debit_code)
        credit_account = self.account_service.get_by_code(credit_code)
        if not debit_account or not credit_account:
            raise InvalidTxnError(
                f"Cannot derive journal lines: accounts "
                f"{debit_code}/{credit_code} are not in the chart of accounts"
            )

        amount = qty * unit_cost
        return [
            JournalLineCreate(account_id=debit_account.id, debit=amount),
            JournalLineCreate(account_id=credit_account.id, credit=amount),
        ]
