"""
Inventory models.

An Item carries its quantity on hand and weighted-average unit
cost. Both are changed only by InventoryService while recording
an InventoryTxn; each transaction is paired with exactly one
journal entry holding its financial effect.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    String, Date, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base
from bookkeeping.models.enums import InventoryTxnType


class Item(Base):
    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True)
    sku: Mapped[str | None] = mapped_column(String(50), nullable=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    qty: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    avg_cost: Mapped[Decimal] = mapped_column(
        Numeric(19, 6), nullable=False, default=Decimal("0")
    )

    transactions: Mapped[list["InventoryTxn"]] = relationship(
        back_populates="item",
        order_by="InventoryTxn.id",
    )

    def __repr__(self) -> str:
        return f"<Item {self.sku or self.id} qty={self.qty} avg={self.avg_cost}>"


class InventoryTxn(Base):
    __tablename__ = "inventory_txns"

    id: Mapped[int] = mapped_column(primary_key=True)
    item_id: Mapped[int] = mapped_column(
        ForeignKey("items.id"), nullable=False, index=True
    )
    type: Mapped[InventoryTxnType] = mapped_column(
        SAEnum(
            InventoryTxnType,
            name="inventory_txn_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    qty: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    unit_cost: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)
    journal_id: Mapped[int] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False, unique=True
    )

    item: Mapped["Item"] = relationship(back_populates="transactions")
    journal_entry: Mapped["JournalEntry"] = relationship()

    def __repr__(self) -> str:
        return (
            f"<InventoryTxn {self.type.value} item={self.item_id} "
            f"qty={self.qty} @ {self.unit_cost}>"
        )
