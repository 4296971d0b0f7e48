"""Plain-savings timeline for a monthly surplus"""

from savings_planner.domain.models import FinancialSnapshot, GoalStatus, GoalTime, SavingsTimeline
from savings_planner.domain.projection import MAX_SEARCH_MONTHS, months_to_goal
from savings_planner.utils.money import round_half_up

NO_SURPLUS_MESSAGE = "No surplus available for savings. Consider reducing expenses."


def compute_savings_timeline(snapshot: FinancialSnapshot, max_months: int = MAX_SEARCH_MONTHS) -> SavingsTimeline:
    """
    Split the monthly surplus into weekly/daily figures and time the goal without interest.

    A surplus of zero or less is a valid outcome, not an error: every figure
    is zeroed, months and days are -1 and the message explains why.
    """
    surplus = snapshot.monthly_surplus

    if surplus <= 0:
        return SavingsTimeline(
            income=snapshot.monthly_income,
            total_expenses=snapshot.total_expenses,
            savings_per_month=0,
            savings_per_week=0,
            savings_per_day=0,
            goal_time=GoalTime(GoalStatus.UNREACHABLE, -1),
            days_to_goal=-1,
            expense_breakdown=snapshot.expenses,
            message=NO_SURPLUS_MESSAGE,
        )

    goal_time = months_to_goal(surplus, snapshot.savings_goal, 0, max_months)

    return SavingsTimeline(
        income=snapshot.monthly_income,
        total_expenses=snapshot.total_expenses,
        savings_per_month=surplus,
        savings_per_week=round_half_up(surplus * 12 / 52),
        savings_per_day=round_half_up(surplus * 12 / 365),
        goal_time=goal_time,
        days_to_goal=goal_time.months * 30,  # 30-day months
        expense_breakdown=snapshot.expenses,
    )
