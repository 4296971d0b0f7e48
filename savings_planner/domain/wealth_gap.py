"""Wealth gap benchmark - savings against an age-based multiple of annual income"""

from savings_planner.domain.models import WealthGapResult
from savings_planner.utils.money import format_inr
from savings_planner.utils.thresholds import FLOOR, select_bracket

# Recommended savings as a multiple of annual income, by age
AGE_MULTIPLIERS = [
    (FLOOR, 0.5),
    (30, 1),
    (40, 3),
    (50, 6),
    (60, 8),
    (65, 10),
]


def analyze_wealth_gap(age: int, annual_income: float, current_savings: float) -> WealthGapResult:
    """
    Compare current savings with the benchmark for the user's age bracket.

    A non-negative gap means the user is ahead of the benchmark.

    Example:
        age 45, income 1,200,000 -> 3x -> 3,600,000 recommended;
        2,000,000 saved -> gap -1,600,000, behind
    """
    multiplier = select_bracket(AGE_MULTIPLIERS, age)
    recommended_savings = annual_income * multiplier
    gap = current_savings - recommended_savings
    gap_percentage = round(gap / recommended_savings * 100, 1) if recommended_savings else 0.0

    if gap >= 0:
        status = "ahead"
        message = f"You're ahead of schedule by {format_inr(abs(gap))}! Keep up the good work."
    else:
        status = "behind"
        message = f"You're behind schedule by {format_inr(abs(gap))}. Consider increasing your savings rate."

    return WealthGapResult(
        age=age,
        annual_income=annual_income,
        current_savings=current_savings,
        recommended_savings=recommended_savings,
        gap=gap,
        gap_percentage=gap_percentage,
        status=status,
        message=message,
    )
