"""
Ledger service — journal posting and the trial balance.

This service enforces the posting rules:
1. An entry has at least one line
2. Every line references an existing account
3. Total debits equal total credits (within BALANCE_TOLERANCE)
4. Entries are immutable (append-only)

Other services that need a journal entry (inventory) go
through write_entry() so the entry/lines pairing is built
in one place.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from bookkeeping.errors import ImbalancedEntryError, NotFoundError, ValidationError
from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType
from bookkeeping.models.journal import JournalEntry, JournalLine
from bookkeeping.schemas.journal import JournalEntryCreate, JournalLineCreate

logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = Decimal("0.001")

# Line amounts are stored as Numeric(19, 4); sums are brought
# back to that scale so float-backed stores (SQLite) do not leak
# binary noise into the report.
AMOUNT_QUANT = Decimal("0.0001")


def _to_amount(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(AMOUNT_QUANT)


@dataclass
class TrialBalanceRow:
    id: int
    code: str
    name: str
    type: AccountType
    total_debit: Decimal
    total_credit: Decimal


@dataclass
class TrialBalance:
    rows: list[TrialBalanceRow]
    total_debit: Decimal
    total_credit: Decimal

    @property
    def is_balanced(self) -> bool:
        return abs(self.total_debit - self.total_credit) <= BALANCE_TOLERANCE


class LedgerService:
    """
    All journal operations pass through this service.

    The service takes a database session as a constructor
    argument. The caller controls the transaction boundary:
    methods only add and flush, the caller commits or rolls back.
    """

    def __init__(self, db: Session):
        self.db = db

    def post_entry(self, request: JournalEntryCreate) -> JournalEntry:
        """
        Post a balanced journal entry.

        If any check fails, nothing is added to the session.
        The caller is responsible for calling db.commit() after
        this method returns successfully.
        """
        if not request.lines:
            raise ValidationError("Lines required")

        self.check_balance(request.lines)

        entry = self.write_entry(
            entry_date=request.date,
            description=request.description,
            lines=request.lines,
        )
        logger.info(
            "Posted journal entry %s with %d lines",
            entry.id, len(entry.lines),
        )
        return entry

    def check_balance(self, lines: list[JournalLineCreate]) -> None:
        """Raise ImbalancedEntryError unless debits equal credits."""
        total_debits = sum((line.debit for line in lines), Decimal("0"))
        total_credits = sum((line.credit for line in lines), Decimal("0"))

        if abs(total_debits - total_credits) > BALANCE_TOLERANCE:
            logger.warning(
                "Rejected imbalanced entry: debits=%s credits=%s",
                total_debits, total_credits,
            )
            raise ImbalancedEntryError(
                f"Entry does not balance: "
                f"debits={total_debits}, credits={total_credits}"
            )

    def write_entry(
        self,
        entry_date: date | None,
        description: str,
        lines: list[JournalLineCreate],
    ) -> JournalEntry:
        """
        Add an entry and its lines to the session without a balance check.

        Account references are still verified. Used by post_entry()
        after it has checked the balance, and by callers that are
        trusted to supply their own lines.
        """
        self._require_accounts({line.account_id for line in lines})

        entry = JournalEntry(
            date=entry_date or date.today(),
            description=description or "",
        )
        for line in lines:
            entry.lines.append(JournalLine(
                account_id=line.account_id,
                debit=line.debit,
                credit=line.credit,
            ))

        self.db.add(entry)
        self.db.flush()
        return entry

    def _require_accounts(self, account_ids: set[int]) -> None:
        if not account_ids:
            return
        found = set(self.db.execute(
            select(Account.id).where(Account.id.in_(account_ids))
        ).scalars().all())

        missing = account_ids - found
        if missing:
            raise ValidationError(f"Accounts not found: {sorted(missing)}")

    def get_entries(self) -> list[JournalEntry]:
        """Return all entries with their lines, newest first."""
        entries = self.db.execute(
            select(JournalEntry)
            .options(
                selectinload(JournalEntry.lines)
                .selectinload(JournalLine.account)
            )
            .order_by(JournalEntry.date.desc(), JournalEntry.id.desc())
        ).scalars().all()
        return list(entries)

    def get_entry(self, entry_id: int) -> JournalEntry:
        entry = self.db.execute(
            select(JournalEntry)
            .options(
                selectinload(JournalEntry.lines)
                .selectinload(JournalLine.account)
            )
            .where(JournalEntry.id == entry_id)
        ).scalar_one_or_none()

        if not entry:
            raise NotFoundError(f"Journal entry {entry_id} not found")
        return entry

    def compute_trial_balance(self) -> TrialBalance:
        """
        Sum debits and credits per account.

        Every account appears, including accounts with no lines,
        which report zero totals. Rows are ordered by code.
        """
        result = self.db.execute(
            select(
                Account.id,
                Account.code,
                Account.name,
                Account.type,
                func.coalesce(func.sum(JournalLine.debit), 0),
                func.coalesce(func.sum(JournalLine.credit), 0),
            )
            .outerjoin(JournalLine, JournalLine.account_id == Account.id)
            .group_by(Account.id, Account.code, Account.name, Account.type)
            .order_by(Account.id)
        ).all()

        rows = [
            TrialBalanceRow(
                id=account_id,
                code=code,
                name=name,
                type=account_type,
                total_debit=_to_amount(debit),
                total_credit=_to_amount(credit),
            )
            for account_id, code, name, account_type, debit, credit in result
        ]
        # Plain string order, independent of the store's collation
        rows.sort(key=lambda r: r.code)

        return TrialBalance(
            rows=rows,
            total_debit=sum((r.total_debit for r in rows), Decimal("0")),
            total_credit=sum((r.total_credit for r in rows), Decimal("0")),
        )
