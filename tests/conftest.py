"""
Shared test fixtures.

Sets up an isolated SQLite test database so tests never touch
the real database. Tables are created before each test and
dropped after it.
"""

import os

# Must be set before the application modules create their engine
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from bank_ledger.main import app
from bank_ledger.models.base import Base, get_db
from bank_ledger.services.account_service import AccountService
from bank_ledger.services.bank_service import BankService
from bank_ledger.schemas.account import AccountCreate
from bank_ledger.schemas.bank import BankCreate


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)


@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Every test starts with empty tables."""
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
def client(db_session):
    """
    Provide a test client bound to the test database.

    The get_db dependency is overridden so the app uses
    the test session instead of the real database.
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
def bank(db_session):
    """A committed bank with default fee fields."""
    bank = BankService(db_session).create_bank(BankCreate(bank_name="Test Bank"))
    db_session.commit()
    return bank


@pytest.fixture
def make_account(db_session, bank):
    """Factory: create and commit an account at the test bank."""
    def _make(balance="1000.00", user_name="alice"):
        account = AccountService(db_session).create_account(AccountCreate(
            user_name=user_name,
            balance=Decimal(balance),
            bank_id=bank.bank_id,
        ))
        db_session.commit()
        return account
    return _make
