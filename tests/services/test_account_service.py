"""
Tests for the AccountService.
"""

import pytest

from bookkeeping.errors import NotFoundError, ValidationError
from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType
from bookkeeping.schemas.account import AccountCreate
from bookkeeping.services.account_service import AccountService, DEFAULT_ACCOUNTS
from bookkeeping.services.ledger_service import LedgerService


class TestSeedDefaultAccounts:

    def test_seeds_empty_chart(self, db_session):
        service = AccountService(db_session)

        inserted = service.seed_default_accounts()
        db_session.commit()

        assert inserted == 10
        assert len(service.list_accounts()) == len(DEFAULT_ACCOUNTS)

    def test_second_seed_is_noop(self, db_session):
        service = AccountService(db_session)
        service.seed_default_accounts()
        db_session.commit()

        assert service.seed_default_accounts() == 0
        assert len(service.list_accounts()) == 10

    def test_skips_when_chart_already_has_rows(self, db_session):
        service = AccountService(db_session)
        service.create_account(AccountCreate(
            code="9000", name="Suspense", type=AccountType.EQUITY,
        ))
        db_session.commit()

        assert service.seed_default_accounts() == 0

    def test_seeded_types(self, db_session, accounts):
        assert accounts["1201"].type == AccountType.CONTRA_ASSET
        assert accounts["2000"].type == AccountType.LIABILITY
        assert accounts["4000"].type == AccountType.REVENUE


class TestCreateAccount:

    def test_create_account_succeeds(self, db_session):
        service = AccountService(db_session)

        account = service.create_account(AccountCreate(
            code="1300", name="Prepaid Rent", type=AccountType.ASSET,
        ))
        db_session.commit()

        assert account.id is not None
        assert account.code == "1300"
        assert account.type == AccountType.ASSET

    def test_duplicate_code_rejected(self, db_session, accounts):
        service = AccountService(db_session)

        with pytest.raises(ValidationError, match="already exists"):
            service.create_account(AccountCreate(
                code="1000", name="Cash Again", type=AccountType.ASSET,
            ))


class TestListAccounts:

    def test_ordered_by_code(self, db_session, accounts):
        codes = [a.code for a in AccountService(db_session).list_accounts()]
        assert codes == sorted(codes)

    def test_shared_code_keeps_insertion_order(self, db_session):
        # codes are not unique in the table, only in create_account
        first = Account(code="1000", name="Cash", type=AccountType.ASSET)
        second = Account(code="1000", name="Petty Cash", type=AccountType.ASSET)
        other = Account(code="0900", name="Bank", type=AccountType.ASSET)
        db_session.add_all([first, second, other])
        db_session.flush()

        listed = AccountService(db_session).list_accounts()

        assert [a.name for a in listed] == ["Bank", "Cash", "Petty Cash"]

    def test_same_order_as_trial_balance(self, db_session, accounts):
        listed = [a.id for a in AccountService(db_session).list_accounts()]
        rows = LedgerService(db_session).compute_trial_balance().rows
        assert listed == [r.id for r in rows]

    def test_get_missing_account(self, db_session):
        with pytest.raises(NotFoundError):
            AccountService(db_session).get_account(404)
