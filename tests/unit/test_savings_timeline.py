"""Unit tests for the plain-savings timeline"""

from savings_planner.domain.models import FinancialSnapshot, GoalStatus
from savings_planner.domain.savings import NO_SURPLUS_MESSAGE, compute_savings_timeline


def test_snapshot_derived_totals(sample_snapshot: FinancialSnapshot):
    assert sample_snapshot.total_expenses == 31000
    assert sample_snapshot.monthly_surplus == 19000


def test_snapshot_ignores_empty_expense_values():
    snapshot = FinancialSnapshot(monthly_income=1000, expenses={"rent": 400, "misc": None}, savings_goal=5000)

    assert snapshot.total_expenses == 400


def test_timeline_with_surplus(sample_snapshot: FinancialSnapshot):
    timeline = compute_savings_timeline(sample_snapshot)

    assert timeline.savings_per_month == 19000
    assert timeline.savings_per_week == 4385  # 228,000 / 52
    assert timeline.savings_per_day == 625  # 228,000 / 365
    assert timeline.months_to_goal == 6
    assert timeline.goal_time.status is GoalStatus.REACHED
    assert timeline.days_to_goal == 180
    assert timeline.expense_breakdown["rent"] == 15000
    assert timeline.message is None


def test_timeline_without_surplus():
    snapshot = FinancialSnapshot(monthly_income=30000, expenses={"rent": 20000, "food": 15000}, savings_goal=100000)
    timeline = compute_savings_timeline(snapshot)

    assert timeline.total_expenses == 35000
    assert timeline.savings_per_month == 0
    assert timeline.savings_per_week == 0
    assert timeline.savings_per_day == 0
    assert timeline.months_to_goal == -1
    assert timeline.days_to_goal == -1
    assert timeline.goal_time.status is GoalStatus.UNREACHABLE
    assert timeline.message == NO_SURPLUS_MESSAGE


def test_timeline_zero_surplus_is_unreachable():
    snapshot = FinancialSnapshot(monthly_income=30000, expenses={"rent": 30000}, savings_goal=100000)

    assert compute_savings_timeline(snapshot).months_to_goal == -1


def test_timeline_beyond_search_cap():
    snapshot = FinancialSnapshot(monthly_income=1000, expenses={"rent": 999}, savings_goal=10_000_000)
    timeline = compute_savings_timeline(snapshot, max_months=1200)

    assert timeline.goal_time.status is GoalStatus.EXCEEDS_CAP
    assert timeline.months_to_goal == 1200
    assert timeline.days_to_goal == 36000
