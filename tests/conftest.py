"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from savings_planner.api.main import create_app
from savings_planner.domain.models import FinancialSnapshot


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_expenses() -> dict[str, float]:
    """Monthly expenses totalling 31,000"""
    return {
        "rent": 15000,
        "food": 8000,
        "transport": 3000,
        "utilities": 2000,
        "entertainment": 2000,
        "other": 1000,
    }


@pytest.fixture
def sample_snapshot(sample_expenses: dict[str, float]) -> FinancialSnapshot:
    """50,000 income with a 19,000 monthly surplus saving towards 100,000"""
    return FinancialSnapshot(
        monthly_income=50000,
        expenses=sample_expenses,
        savings_goal=100000,
        current_savings=0,
        age=30,
    )
