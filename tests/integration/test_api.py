"""Integration tests for API endpoints"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from savings_planner.api.dependencies import get_rate_table
from savings_planner.api.main import create_app
from savings_planner.domain.exceptions import InvalidProjectionError
from savings_planner.domain.models import RateTableEntry
from savings_planner.domain.rates import RateTable


def calculation_count(operation: str, outcome: str) -> float:
    """Current value of the calculation counter for one operation and outcome"""
    value = REGISTRY.get_sample_value(
        "savings_planner_calculation_total", {"operation": operation, "outcome": outcome}
    )
    return value or 0.0


@pytest.fixture
def profile(sample_expenses):
    """Request body fields shared by the savings and advisory endpoints"""
    return {"income": 50000, "expenses": sample_expenses}


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "savings-planner"}


def test_metrics_endpoint(client: TestClient, profile):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/savings/timeline", json={**profile, "goal": 100000})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "savings_planner_calculation_total" in response.text


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_savings_timeline(client: TestClient, profile):
    """Test POST /v1/savings/timeline"""
    response = client.post("/v1/savings/timeline", json={**profile, "goal": 100000})

    assert response.status_code == 200
    data = response.json()
    assert data["total_expenses"] == 31000
    assert data["savings_per_month"] == 19000
    assert data["savings_per_week"] == 4385
    assert data["savings_per_day"] == 625
    assert data["months_to_goal"] == 6
    assert data["goal_status"] == "reached"
    assert data["days_to_goal"] == 180
    assert data["expense_breakdown"]["rent"] == 15000
    assert data["message"] is None


def test_savings_timeline_without_surplus(client: TestClient):
    """A negative surplus is a valid response, not an error"""
    response = client.post(
        "/v1/savings/timeline",
        json={"income": 20000, "expenses": {"rent": 25000}, "goal": 100000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["months_to_goal"] == -1
    assert data["goal_status"] == "unreachable"
    assert data["savings_per_month"] == 0
    assert "No surplus" in data["message"]


def test_savings_timeline_missing_fields(client: TestClient):
    response = client.post("/v1/savings/timeline", json={"expenses": {}})

    assert response.status_code == 400
    data = response.json()
    assert set(data["fields"]) == {"income", "goal"}
    assert data["error"].startswith("Missing or invalid required fields")


def test_savings_timeline_rejects_zero_income(client: TestClient):
    response = client.post("/v1/savings/timeline", json={"income": 0, "expenses": {}, "goal": 1000})

    assert response.status_code == 400
    assert response.json()["fields"] == ["income"]


def test_savings_timeline_rejects_negative_expense(client: TestClient):
    response = client.post(
        "/v1/savings/timeline",
        json={"income": 1000, "expenses": {"rent": -5}, "goal": 1000},
    )

    assert response.status_code == 400
    assert response.json()["fields"] == ["expenses.rent"]


def test_improvement_tips(client: TestClient, profile):
    """Test POST /v1/savings/improvement-tips"""
    response = client.post("/v1/savings/improvement-tips", json={**profile, "savings_goal": 100000})

    assert response.status_code == 200
    data = response.json()
    assert data["current_surplus"] == 19000
    assert data["current_time_to_goal_months"] == 6
    assert data["total_tips"] == 10
    assert len(data["tips"]) == 10
    assert data["tips"][0]["type"] == "income_increase"
    assert data["tips"][3]["suggestion"] == "Reduce rent by ₹1,000"


def test_improvement_tips_with_investment(client: TestClient):
    response = client.post(
        "/v1/savings/improvement-tips",
        json={"income": 30000, "expenses": {"rent": 10000, "food": 10000}, "savings_goal": 1000000},
    )

    assert response.status_code == 200
    tips = response.json()["tips"]
    investment = [tip for tip in tips if tip["type"] == "investment"]
    assert len(investment) == 1
    assert investment[0]["expected_return"] == 11.0
    assert investment[0]["impact"] == "high"


def test_compare_investments(client: TestClient):
    """Test POST /v1/investments/compare"""
    response = client.post(
        "/v1/investments/compare",
        json={"monthly_contribution": 10000, "goal": 1000000},
    )

    assert response.status_code == 200
    data = response.json()
    assert len(data["results"]) == 7
    assert data["savings_only"]["months_to_goal"] == 100
    assert data["savings_only"]["instrument_key"] == "savings_only"

    best = data["ranked"][0]
    assert best["instrument_key"] == "mutual_funds"
    assert best["months_to_goal"] == 72
    assert best["time_saved_months"] == 28
    assert best["time_saved_percentage"] == 28

    assert set(data["projections"]) == {"6", "12", "24", "36", "60", "120"}
    assert data["projections"]["12"]["savings_only"] == 120000


def test_compare_investments_custom_rates(client: TestClient):
    response = client.post(
        "/v1/investments/compare",
        json={"monthly_contribution": 10000, "goal": 1000000, "custom_rates": {"ppf": 12}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["ranked"][0]["instrument_key"] == "ppf"
    assert data["ranked"][0]["annual_rate"] == 12


def test_compare_investments_missing_fields(client: TestClient):
    response = client.post("/v1/investments/compare", json={"goal": 1000000})

    assert response.status_code == 400
    assert response.json()["fields"] == ["monthly_contribution"]


def test_compare_investments_rejects_zero_goal(client: TestClient):
    response = client.post("/v1/investments/compare", json={"monthly_contribution": 1000, "goal": 0})

    assert response.status_code == 400
    assert response.json()["fields"] == ["goal"]


@pytest.mark.parametrize("rate", [1_000_000, 100.5, -1])
def test_compare_investments_rejects_out_of_range_custom_rate(client: TestClient, rate):
    response = client.post(
        "/v1/investments/compare",
        json={"monthly_contribution": 10000, "goal": 1000000, "custom_rates": {"ppf": rate}},
    )

    assert response.status_code == 400
    assert response.json()["fields"] == ["custom_rates.ppf"]


@pytest.mark.parametrize("literal", ["NaN", "Infinity"])
def test_compare_investments_rejects_non_finite_custom_rate(client: TestClient, literal):
    body = '{"monthly_contribution": 10000, "goal": 1000000, "custom_rates": {"ppf": %s}}' % literal
    response = client.post(
        "/v1/investments/compare",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["fields"] == ["custom_rates.ppf"]


def test_compare_investments_accepts_full_rate_range(client: TestClient):
    response = client.post(
        "/v1/investments/compare",
        json={"monthly_contribution": 10000, "goal": 1000000, "custom_rates": {"ppf": 100, "fd": 0}},
    )

    assert response.status_code == 200
    rates = {r["instrument_key"]: r["annual_rate"] for r in response.json()["results"]}
    assert rates["ppf"] == 100
    assert rates["fd"] == 6.5


def test_investment_options(client: TestClient):
    """Test GET /v1/investments/options"""
    response = client.get("/v1/investments/options")

    assert response.status_code == 200
    instruments = response.json()["instruments"]
    assert len(instruments) == 7
    assert instruments[0] == {
        "key": "ppf",
        "display_name": "PPF",
        "default_rate": 7.5,
        "min_rate": 7.0,
        "max_rate": 8.0,
    }


def test_rate_table_dependency_override():
    app = create_app()
    table = RateTable([RateTableEntry("cash", "Cash", default_rate=0, min_rate=0, max_rate=0)])
    app.dependency_overrides[get_rate_table] = lambda: table

    client = TestClient(app)
    options = client.get("/v1/investments/options").json()["instruments"]
    comparison = client.post(
        "/v1/investments/compare",
        json={"monthly_contribution": 1000, "goal": 10000},
    ).json()

    assert [i["key"] for i in options] == ["cash"]
    assert [r["instrument_key"] for r in comparison["results"]] == ["cash"]
    assert comparison["results"][0]["months_to_goal"] == 10


def test_recommendations(client: TestClient, profile):
    """Test POST /v1/advisory/recommendations"""
    response = client.post(
        "/v1/advisory/recommendations",
        json={**profile, "monthly_surplus": 19000, "goal": 100000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["recommendations"][0]["priority"] == "low"
    assert data["portfolio_suggestion"]["type"] == "medium_term"
    assert len(data["examples"]) == 2


def test_recommendations_with_short_timeframe(client: TestClient, profile):
    response = client.post(
        "/v1/advisory/recommendations",
        json={**profile, "monthly_surplus": 19000, "goal": 100000, "goal_timeframe_years": 1},
    )

    assert response.status_code == 200
    assert response.json()["portfolio_suggestion"]["allocation"] == {"fd": 70, "rd": 30}


def test_health_score(client: TestClient, profile):
    """Test POST /v1/advisory/health-score"""
    response = client.post(
        "/v1/advisory/health-score",
        json={**profile, "monthly_surplus": 19000, "goal": 100000, "current_savings": 0},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["savings_score"]["score"] == 40
    assert data["debt_score"]["score"] == 30
    assert data["goal_score"]["score"] == 5
    assert data["total_score"] == 75
    assert data["message"].startswith("Good:")


def test_health_score_missing_fields(client: TestClient, profile):
    response = client.post("/v1/advisory/health-score", json={**profile, "goal": 100000})

    assert response.status_code == 400
    assert set(response.json()["fields"]) == {"monthly_surplus", "current_savings"}


def test_wealth_gap(client: TestClient):
    """Test POST /v1/advisory/wealth-gap"""
    response = client.post(
        "/v1/advisory/wealth-gap",
        json={"age": 45, "annual_income": 1200000, "current_savings": 2000000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["recommended_savings"] == 3600000
    assert data["gap"] == -1600000
    assert data["gap_percentage"] == -44.4
    assert data["status"] == "behind"


def test_fire(client: TestClient):
    """Test POST /v1/advisory/fire"""
    response = client.post(
        "/v1/advisory/fire",
        json={"annual_expenses": 600000, "current_savings": 600000, "annual_savings": 228000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["fire_number"] == 15000000
    assert data["growth_rate"] == 7.0
    assert data["years_to_fire"] == 23.0
    assert data["achievable"] is True


def test_fire_unreachable(client: TestClient):
    response = client.post(
        "/v1/advisory/fire",
        json={"annual_expenses": 600000, "current_savings": 0, "annual_savings": 0},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["years_to_fire"] == -1
    assert data["achievable"] is False


def test_learn(client: TestClient):
    """Test GET /v1/learn"""
    response = client.get("/v1/learn")

    assert response.status_code == 200
    data = response.json()
    assert data["total_articles"] == 10
    assert len(data["content"]) == 10
    assert data["categories"][0] == "Basics"
    assert data["content"][0]["learn_more"]


FIRE_BODY = {"annual_expenses": 600000, "current_savings": 600000, "annual_savings": 228000}


@patch("savings_planner.api.v1.advisory.calculate_fire")
def test_domain_error_maps_to_422(mock_fire: MagicMock, client: TestClient):
    """A rejected calculation returns the reason and counts as rejected"""
    mock_fire.side_effect = InvalidProjectionError("Cannot project over -1 months")
    rejected_before = calculation_count("fire", "rejected")

    response = client.post("/v1/advisory/fire", json=FIRE_BODY)

    assert response.status_code == 422
    assert response.json() == {"detail": "Cannot project over -1 months"}
    assert calculation_count("fire", "rejected") == rejected_before + 1


@patch("savings_planner.api.v1.savings.compute_savings_timeline")
def test_unexpected_error_maps_to_500(mock_timeline: MagicMock, client: TestClient, profile):
    """An unexpected failure hides its details and counts as an error"""
    mock_timeline.side_effect = RuntimeError("boom")
    errors_before = calculation_count("savings_timeline", "error")

    response = client.post("/v1/savings/timeline", json={**profile, "goal": 100000})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert calculation_count("savings_timeline", "error") == errors_before + 1


@patch("savings_planner.api.v1.investments.compare_investments")
def test_error_responses_keep_request_id(mock_compare: MagicMock, client: TestClient):
    mock_compare.side_effect = RuntimeError("boom")

    response = client.post(
        "/v1/investments/compare",
        json={"monthly_contribution": 10000, "goal": 1000000},
        headers={"X-Request-ID": "req-500"},
    )

    assert response.status_code == 500
    assert response.headers["X-Request-ID"] == "req-500"
