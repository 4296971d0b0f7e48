"""Financial health scoring engine - 0 to 100 from savings, debt and goal progress"""

from typing import Mapping

from savings_planner.domain.models import ScoreBreakdown, ScoreComponent
from savings_planner.utils.thresholds import FLOOR, select_bracket

SAVINGS_MAX = 40
DEBT_MAX = 30
GOAL_MAX = 30

# Points by savings rate (% of income)
SAVINGS_POINTS = [(FLOOR, 0), (5, 10), (10, 20), (20, 30), (30, SAVINGS_MAX)]

# Points by debt-to-income (% of income); more debt scores lower
DEBT_POINTS = [(FLOOR, DEBT_MAX), (20, 20), (30, 15), (40, 10), (50, 0)]

# Points by progress towards the goal (% of goal already saved)
GOAL_POINTS = [(FLOOR, 5), (25, 15), (50, 20), (75, 25), (100, GOAL_MAX)]

# Messages are keyed by the awarded points, not by the raw metric
SAVINGS_MESSAGES = [
    (0, "Critical: Your savings rate is too low. Immediate action needed."),
    (10, "Poor: Your savings rate needs significant improvement."),
    (20, "Fair: You are saving, but could do better to reach your goals faster."),
    (30, "Good: Your savings rate is solid. Keep it up!"),
    (40, "Excellent: Your high savings rate will accelerate your financial goals."),
]
DEBT_MESSAGES = [
    (0, "Critical: Your debt burden is very high. Focus on reducing debt."),
    (10, "Poor: Your debt-to-income ratio needs improvement."),
    (15, "Fair: Your debt level is manageable but could be better."),
    (20, "Good: Your debt level is well-controlled."),
    (30, "Excellent: Your low debt level gives you financial flexibility."),
]
GOAL_MESSAGES = [
    (5, "Just starting: You are at the beginning of your journey."),
    (15, "Making progress: You are building momentum toward your goal."),
    (20, "Halfway there: You have made significant progress!"),
    (25, "Almost there: Your goal is within reach!"),
    (30, "Goal achieved: Congratulations on reaching your target!"),
]
TOTAL_MESSAGES = [
    (FLOOR, "Needs attention: Start with your savings rate and debt to build a stronger base."),
    (40, "Fair: Your finances are stable, with clear room to improve."),
    (60, "Good: You are in solid financial shape."),
    (80, "Excellent: Your finances are in great health."),
]


def score_component(value: float, points_table, messages_table, max_score: int) -> ScoreComponent:
    """Bucket a metric into points and pick the message for those points"""
    score = select_bracket(points_table, value)
    return ScoreComponent(
        score=score,
        max_score=max_score,
        percentage=round(value, 1),
        message=select_bracket(messages_table, score),
    )


def score_financial_health(
    income: float,
    expenses: Mapping[str, float],
    monthly_surplus: float,
    goal: float,
    current_savings: float,
) -> ScoreBreakdown:
    """
    Calculate financial health from 0 (critical) to 100 (excellent).

    Components:
    - 40 points: savings rate (surplus / income)
    - 30 points: debt-to-income, using the "loans" expense as monthly debt payments
    - 30 points: goal progress (current savings / goal)

    The total is always the sum of the three components, so it stays within [0, 100].
    """
    savings_rate = monthly_surplus / income * 100
    dti = (expenses.get("loans") or 0) / income * 100
    goal_progress = current_savings / goal * 100

    savings = score_component(savings_rate, SAVINGS_POINTS, SAVINGS_MESSAGES, SAVINGS_MAX)
    debt = score_component(dti, DEBT_POINTS, DEBT_MESSAGES, DEBT_MAX)
    progress = score_component(goal_progress, GOAL_POINTS, GOAL_MESSAGES, GOAL_MAX)

    total = savings.score + debt.score + progress.score

    return ScoreBreakdown(
        savings_score=savings,
        debt_score=debt,
        goal_score=progress,
        message=select_bracket(TOTAL_MESSAGES, total),
    )
