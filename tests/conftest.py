"""
Shared test fixtures.

Sets up an isolated SQLite test database so tests never touch
the real database. Tables are created before each test and
dropped after it.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bookkeeping.main import app
from bookkeeping.models.base import Base, get_db
from bookkeeping.schemas.journal import JournalEntryCreate, JournalLineCreate
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.ledger_service import LedgerService


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def accounts(db_session):
    """Seed the default chart of accounts; return accounts keyed by code."""
    service = AccountService(db_session)
    service.seed_default_accounts()
    db_session.commit()
    return {a.code: a for a in service.list_accounts()}


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    The get_db dependency is overridden so the app uses the
    test session instead of the real database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def post_entry(db_session):
    """Return a helper that posts and commits a two-line entry."""
    def _post(debit_account, credit_account, amount, description="Test entry"):
        amount = Decimal(str(amount))
        entry = LedgerService(db_session).post_entry(JournalEntryCreate(
            description=description,
            lines=[
                JournalLineCreate(account_id=debit_account.id, debit=amount),
                JournalLineCreate(account_id=credit_account.id, credit=amount),
            ],
        ))
        db_session.commit()
        return entry
    return _post
