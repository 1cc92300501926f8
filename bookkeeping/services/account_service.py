"""
Account service — the chart of accounts.

Accounts are read by every other part of the system but only
created here: either by the first-run seed or on explicit
request.
"""

import logging

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from bookkeeping.errors import NotFoundError, ValidationError
from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType
from bookkeeping.schemas.account import AccountCreate

logger = logging.getLogger(__name__)


# Standard chart of accounts installed on an empty database.
DEFAULT_ACCOUNTS: list[tuple[str, str, AccountType]] = [
    ("1000", "Cash", AccountType.ASSET),
    ("1100", "Inventory", AccountType.ASSET),
    ("1200", "Notes Receivable", AccountType.ASSET),
    ("2000", "Suppliers", AccountType.LIABILITY),
    ("3000", "Capital", AccountType.EQUITY),
    ("4000", "Sales", AccountType.REVENUE),
    ("5000", "Purchases", AccountType.EXPENSE),
    ("5100", "Depreciation Expense", AccountType.EXPENSE),
    ("1201", "Accumulated Depreciation", AccountType.CONTRA_ASSET),
    ("5200", "Discount Allowed", AccountType.EXPENSE),
]


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def list_accounts(self) -> list[Account]:
        """Return all accounts ordered by code, then id."""
        accounts = list(
            self.db.execute(select(Account).order_by(Account.id)).scalars().all()
        )
        # Plain string order, same as the trial balance
        accounts.sort(key=lambda a: a.code)
        return accounts

    def get_account(self, account_id: int) -> Account:
        account = self.db.get(Account, account_id)
        if not account:
            raise NotFoundError(f"Account {account_id} not found")
        return account

    def get_by_code(self, code: str) -> Account | None:
        return self.db.execute(
            select(Account).where(Account.code == code).order_by(Account.id)
        ).scalars().first()

    def create_account(self, request: AccountCreate) -> Account:
        """
        Create a new account.

        Raises ValidationError if the code is already taken.
        """
        if self.get_by_code(request.code):
            raise ValidationError(
                f"Account with code '{request.code}' already exists"
            )

        account = Account(
            code=request.code,
            name=request.name,
            type=request.type,
        )
        self.db.add(account)
        self.db.flush()
        logger.info("Created account %s %s", account.code, account.name)
        return account

    def seed_default_accounts(self) -> int:
        """
        Install DEFAULT_ACCOUNTS when the accounts table is empty.

        Returns the number of accounts inserted (0 if the chart
        already had rows). The caller commits.
        """
        count = self.db.execute(select(func.count(Account.id))).scalar()
        if count:
            return 0

        for code, name, account_type in DEFAULT_ACCOUNTS:
            self.db.add(Account(code=code, name=name, type=account_type))
        self.db.flush()

        logger.info("Seeded %d default accounts", len(DEFAULT_ACCOUNTS))
        return len(DEFAULT_ACCOUNTS)
