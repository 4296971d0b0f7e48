"""Compound growth projection and time-to-goal search"""

import math

from savings_planner.domain.exceptions import InvalidProjectionError
from savings_planner.domain.models import GoalStatus, GoalTime
from savings_planner.utils.money import round_half_up

MAX_SEARCH_MONTHS = 1200  # 100 years


def project(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    months: int,
) -> int:
    """
    Balance after `months` of monthly compounding with a contribution each month.

    Interest accrues on the running balance first, then the month's
    contribution is added (contribution at end of period):

        balance = balance * (1 + annual_rate_percent / 100 / 12) + monthly_contribution

    Zero or negative rates and contributions are accepted. The result is
    rounded to the nearest whole currency unit.

    Example:
        project(0, 1000, 0, 12) -> 12000
    """
    if months < 0:
        raise InvalidProjectionError(f"Cannot project over {months} months")

    monthly_rate = annual_rate_percent / 100 / 12
    balance = principal

    for _ in range(months):
        balance = balance * (1 + monthly_rate) + monthly_contribution

    return round_half_up(balance)


def months_to_goal(
    monthly_contribution: float,
    goal: float,
    annual_rate_percent: float = 0.0,
    max_months: int = MAX_SEARCH_MONTHS,
) -> GoalTime:
    """
    Number of monthly contributions needed for the balance to reach `goal`.

    Outcomes:
    - contribution <= 0: UNREACHABLE (months = -1)
    - goal reached within max_months: REACHED with the month count
    - otherwise: EXCEEDS_CAP with months = max_months

    A zero rate uses the closed form ceil(goal / contribution); any other rate
    is simulated month by month with the same convention as `project`.
    """
    if monthly_contribution <= 0:
        return GoalTime(GoalStatus.UNREACHABLE, -1)

    if annual_rate_percent == 0:
        months = max(math.ceil(goal / monthly_contribution), 0)
        if months > max_months:
            return GoalTime(GoalStatus.EXCEEDS_CAP, max_months)
        return GoalTime(GoalStatus.REACHED, months)

    monthly_rate = annual_rate_percent / 100 / 12
    balance = 0.0
    months = 0

    while balance < goal and months < max_months:
        balance = balance * (1 + monthly_rate) + monthly_contribution
        months += 1

    # Reaching the goal in the final capped month still counts as reached
    if balance < goal:
        return GoalTime(GoalStatus.EXCEEDS_CAP, max_months)

    return GoalTime(GoalStatus.REACHED, months)
