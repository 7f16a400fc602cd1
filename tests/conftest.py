"""Pytest fixtures for testing"""

import os

# Point the app at SQLite before any oasis_forecast module reads settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from oasis_forecast.api.dependencies import get_alert_client
from oasis_forecast.api.main import create_app
from oasis_forecast.infrastructure.database.models import Base
from oasis_forecast.infrastructure.database.session import get_db
from oasis_forecast.domain.models import BenefitAccount, EntryKind, LedgerEntry


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Day 0 of most forecasts: four days before the 12th (rent day)
ANCHOR = date(2025, 11, 8)


class RecordingAlertClient:
    """Stands in for AlertClient so background tasks never hit the network"""

    def __init__(self):
        self.events: List[Dict[str, Any]] = []

    async def send_crisis_alert(self, payload: Dict[str, Any]) -> None:
        self.events.append(payload)


def entry(category: str, amount: str, kind: str, day: date = date(2025, 10, 15), tag: str | None = None) -> LedgerEntry:
    return LedgerEntry(
        category=category,
        amount=Decimal(amount),
        kind=EntryKind(kind),
        date=day,
        tag=tag,
    )


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def alert_client() -> RecordingAlertClient:
    return RecordingAlertClient()


@pytest.fixture
def client(db: Session, alert_client: RecordingAlertClient) -> TestClient:
    """Create FastAPI test client with test database and a recording alert client"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_alert_client] = lambda: alert_client
    return TestClient(app)


@pytest.fixture
def anchor() -> date:
    return ANCHOR


@pytest.fixture
def make_entry():
    """Factory for LedgerEntry rows: make_entry("Rent", "850", "expense")"""
    return entry


@pytest.fixture
def rent_crunch_entries() -> List[LedgerEntry]:
    """
    Income $2400, expenses $2263 with $850 rent.

    Starting balance $137, daily baseline (2263 - 850) / 30 = $47.10.
    """
    return [
        entry("Paycheck", "1200.00", "income", date(2025, 10, 1)),
        entry("Rent", "850.00", "expense", date(2025, 10, 12)),
        entry("Groceries", "420.00", "expense", date(2025, 10, 14)),
        entry("Paycheck", "1200.00", "income", date(2025, 10, 15)),
        entry("Utilities", "180.00", "expense", date(2025, 10, 18)),
        entry("Transport", "160.00", "expense", date(2025, 10, 20)),
        entry("Childcare", "400.00", "expense", date(2025, 10, 22)),
        entry("Medical", "188.00", "expense", date(2025, 10, 25)),
        entry("Phone", "65.00", "expense", date(2025, 10, 28)),
    ]


@pytest.fixture
def ebt_account() -> BenefitAccount:
    return BenefitAccount(current_balance=Decimal("296.55"), refill_date=date(2025, 11, 20))
