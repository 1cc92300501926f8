"""
Journal entry and journal line models.

An entry groups the lines of one double-entry posting. Within
an entry the sum of debits equals the sum of credits; that rule
is enforced by LedgerService when the entry is posted, never
by the model. Entries are immutable once posted.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import String, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default=""
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    # An entry owns its lines: they are written with it and
    # cannot be moved to another entry.
    lines: Mapped[list["JournalLine"]] = relationship(
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="JournalLine.id",
    )

    def __repr__(self) -> str:
        return f"<JournalEntry {self.id} {self.date}>"


class JournalLine(Base):
    """One debit and/or credit amount against a single account."""

    __tablename__ = "journal_lines"

    id: Mapped[int] = mapped_column(primary_key=True)
    entry_id: Mapped[int] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    debit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    credit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )

    entry: Mapped["JournalEntry"] = relationship(back_populates="lines")
    account: Mapped["Account"] = relationship(back_populates="lines")

    # Account fields joined onto each line for listings
    @property
    def code(self) -> str | None:
        return self.account.code if self.account else None

    @property
    def name(self) -> str | None:
        return self.account.name if self.account else None

    def __repr__(self) -> str:
        return (
            f"<JournalLine account={self.account_id} "
            f"Dr {self.debit} Cr {self.credit}>"
        )
