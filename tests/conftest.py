"""Pytest fixtures for testing"""

import copy
import random
import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from creditbridge.api.dependencies import get_rng
from creditbridge.api.main import create_app
from creditbridge.infrastructure.database.models import Base
from creditbridge.infrastructure.database.session import get_db


# Test database: a single shared in-memory connection
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def _payments(on_time: int, late: int = 0, missed: int = 0, amount: float = 100.0) -> list[dict]:
    statuses = ["on-time"] * on_time + ["late"] * late + ["missed"] * missed
    return [
        {"date": f"2026-{(i % 12) + 1:02d}-01", "amount": amount, "status": status}
        for i, status in enumerate(statuses)
    ]


SAMPLE_USER = {
    "userId": "user_good",
    "email": "jane@example.com",
    "personalInfo": {"firstName": "Jane", "lastName": "Doe"},
    "traditionalCredit": {"hasCredit": "no"},
    "financialData": {
        "employment": {
            "employerName": "Acme Corp",
            "jobTitle": "Engineer",
            "annualSalary": 82000,
            "startDate": "2019-03-01",
            "employmentType": "full-time",
        },
        "housing": {
            "housingType": "rent",
            "monthlyRent": 1500,
            "rentPaymentHistory": _payments(on_time=9, late=1, amount=1500),
        },
        "utilities": [
            {"provider": "City Power", "type": "electric", "monthlyAmount": 90, "paymentHistory": _payments(4)},
            {"provider": "FastNet", "type": "internet", "monthlyAmount": 60, "paymentHistory": _payments(3, late=1)},
        ],
        "banking": {
            "bankName": "Chase Bank",
            "accountType": "checking",
            "monthlyIncome": 5000,
            "monthlyExpenses": 3000,
            "averageBalance": 10000,
        },
    },
}


@pytest.fixture
def sample_user() -> dict:
    """
    Renter with no bureau file and strong alternative data.

    Factors: rent 90, utilities 88 (7 of 8 pooled), cash flow 104, employment 100
    -> final score 768.
    """
    return copy.deepcopy(SAMPLE_USER)


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
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a seeded random source"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    return TestClient(app)
