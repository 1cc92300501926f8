"""
Tests for the LedgerService.

Tests cover:
- Balanced entry posting and defaults
- Imbalance, empty-lines and unknown-account rejection
- Journal listing order and account join
- Trial balance totals, ordering and zero rows
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select, func

from bookkeeping.errors import ImbalancedEntryError, NotFoundError, ValidationError
from bookkeeping.models.journal import JournalEntry, JournalLine
from bookkeeping.schemas.journal import JournalEntryCreate, JournalLineCreate
from bookkeeping.services.ledger_service import LedgerService


def count_rows(db_session, model):
    return db_session.execute(select(func.count(model.id))).scalar()


# --- Posting Tests ---

class TestPostEntry:

    def test_balanced_entry_succeeds(self, db_session, accounts):
        service = LedgerService(db_session)

        entry = service.post_entry(JournalEntryCreate(
            date=date(2024, 1, 15),
            description="Owner investment",
            lines=[
                JournalLineCreate(
                    account_id=accounts["1000"].id, debit=Decimal("10000"),
                ),
                JournalLineCreate(
                    account_id=accounts["3000"].id, credit=Decimal("10000"),
                ),
            ],
        ))
        db_session.commit()

        assert entry.id is not None
        assert entry.date == date(2024, 1, 15)
        assert len(entry.lines) == 2
        assert count_rows(db_session, JournalLine) == 2

    def test_multi_line_entry_succeeds(self, db_session, accounts):
        service = LedgerService(db_session)

        entry = service.post_entry(JournalEntryCreate(
            description="Sale with discount",
            lines=[
                JournalLineCreate(account_id=accounts["1000"].id, debit=Decimal("950")),
                JournalLineCreate(account_id=accounts["5200"].id, debit=Decimal("50")),
                JournalLineCreate(account_id=accounts["4000"].id, credit=Decimal("1000")),
            ],
        ))
        db_session.commit()

        assert len(entry.lines) == 3

    def test_defaults_date_and_description(self, db_session, accounts):
        service = LedgerService(db_session)

        entry = service.post_entry(JournalEntryCreate(
            lines=[
                JournalLineCreate(account_id=accounts["1000"].id, debit=Decimal("1")),
                JournalLineCreate(account_id=accounts["3000"].id, credit=Decimal("1")),
            ],
        ))

        assert entry.date == date.today()
        assert entry.description == ""

    def test_imbalanced_entry_rejected_without_rows(self, db_session, accounts):
        service = LedgerService(db_session)

        with pytest.raises(ImbalancedEntryError, match="does not balance"):
            service.post_entry(JournalEntryCreate(
                lines=[
                    JournalLineCreate(account_id=accounts["1000"].id, debit=Decimal("100")),
                    JournalLineCreate(account_id=accounts["3000"].id, credit=Decimal("50")),
                ],
            ))
        db_session.rollback()

        assert count_rows(db_session, JournalEntry) == 0
        assert count_rows(db_session, JournalLine) == 0

    def test_difference_within_tolerance_accepted(self, db_session, accounts):
        service = LedgerService(db_session)

        entry = service.post_entry(JournalEntryCreate(
            lines=[
                JournalLineCreate(account_id=accounts["1000"].id, debit=Decimal("100.0005")),
                JournalLineCreate(account_id=accounts["3000"].id, credit=Decimal("100")),
            ],
        ))

        assert entry.id is not None

    def test_difference_above_tolerance_rejected(self, db_session, accounts):
        service = LedgerService(db_session)

        with pytest.raises(ImbalancedEntryError):
            service.post_entry(JournalEntryCreate(
                lines=[
                    JournalLineCreate(account_id=accounts["1000"].id, debit=Decimal("100.002")),
                    JournalLineCreate(account_id=accounts["3000"].id, credit=Decimal("100")),
                ],
            ))

    def test_empty_lines_rejected(self, db_session, accounts):
        service = LedgerService(db_session)

        with pytest.raises(ValidationError, match="Lines required"):
            service.post_entry(JournalEntryCreate(description="Nothing", lines=[]))

    def test_nonexistent_account_rejected(self, db_session, accounts):
        service = LedgerService(db_session)

        with pytest.raises(ValidationError, match="not found"):
            service.post_entry(JournalEntryCreate(
                lines=[
                    JournalLineCreate(account_id=999, debit=Decimal("100")),
                    JournalLineCreate(account_id=accounts["3000"].id, credit=Decimal("100")),
                ],
            ))
        db_session.rollback()

        assert count_rows(db_session, JournalEntry) == 0

    def test_negative_amounts_rejected_by_schema(self):
        with pytest.raises(ValueError):
            JournalLineCreate(account_id=1, debit=Decimal("-5"))


# --- Listing Tests ---

class TestGetEntries:

    def test_newest_first(self, db_session, accounts):
        service = LedgerService(db_session)
        for day in (1, 3, 2):
            service.post_entry(JournalEntryCreate(
                date=date(2024, 5, day),
                description=f"Day {day}",
                lines=[
                    JournalLineCreate(account_id=accounts["1000"].id, debit=Decimal("10")),
                    JournalLineCreate(account_id=accounts["4000"].id, credit=Decimal("10")),
                ],
            ))
        db_session.commit()

        descriptions = [e.description for e in service.get_entries()]
        assert descriptions == ["Day 3", "Day 2", "Day 1"]

    def test_lines_carry_account_code_and_name(self, db_session, accounts, post_entry):
        post_entry(accounts["1000"], accounts["3000"], "500")

        entry = LedgerService(db_session).get_entries()[0]

        assert [(l.code, l.name) for l in entry.lines] == [
            ("1000", "Cash"),
            ("3000", "Capital"),
        ]

    def test_get_entry_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            LedgerService(db_session).get_entry(42)


# --- Trial Balance Tests ---

class TestTrialBalance:

    def test_every_account_listed_with_zero_totals(self, db_session, accounts):
        tb = LedgerService(db_session).compute_trial_balance()

        assert len(tb.rows) == len(accounts)
        assert all(r.total_debit == 0 and r.total_credit == 0 for r in tb.rows)
        assert tb.total_debit == Decimal("0")
        assert tb.total_credit == Decimal("0")

    def test_rows_sorted_by_code(self, db_session, accounts):
        tb = LedgerService(db_session).compute_trial_balance()

        codes = [r.code for r in tb.rows]
        assert codes == sorted(codes)
        # String order puts 1201 between 1200 and 2000
        assert codes.index("1201") == codes.index("1200") + 1

    def test_totals_per_account(self, db_session, accounts, post_entry):
        post_entry(accounts["1000"], accounts["3000"], "10000")
        post_entry(accounts["5000"], accounts["1000"], "2500.50")
        post_entry(accounts["1000"], accounts["4000"], "1200.25")

        tb = LedgerService(db_session).compute_trial_balance()
        rows = {r.code: r for r in tb.rows}

        assert rows["1000"].total_debit == Decimal("11200.25")
        assert rows["1000"].total_credit == Decimal("2500.50")
        assert rows["3000"].total_credit == Decimal("10000")
        assert rows["5000"].total_debit == Decimal("2500.50")
        assert rows["2000"].total_debit == Decimal("0")

    def test_grand_totals_equal_for_balanced_ledger(self, db_session, accounts, post_entry):
        for amount in ("0.10", "0.20", "1000", "333.33"):
            post_entry(accounts["1000"], accounts["4000"], amount)

        tb = LedgerService(db_session).compute_trial_balance()

        assert tb.total_debit == tb.total_credit == Decimal("1333.63")
        assert tb.is_balanced

    def test_repeated_reads_identical(self, db_session, accounts, post_entry):
        post_entry(accounts["1000"], accounts["3000"], "75")
        service = LedgerService(db_session)

        assert service.compute_trial_balance() == service.compute_trial_balance()
