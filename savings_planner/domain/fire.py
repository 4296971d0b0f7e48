"""FIRE (Financial Independence, Retire Early) calculator"""

import math
from typing import Optional

from savings_planner.domain.models import FIREResult
from savings_planner.utils.thresholds import FLOOR, above, select_bracket

SAFE_WITHDRAWAL_RATE = 0.04  # 4% rule: 25x annual expenses
MIN_REPORTED_YEARS = 0.1

ACHIEVED_MESSAGE = "Congratulations! You have already achieved financial independence!"
UNREACHABLE_MESSAGE = (
    "With your current savings rate, FIRE is not achievable. "
    "Try increasing your savings or reducing expenses."
)
TIMELINE_MESSAGES = [
    (FLOOR, "Great! You're on track to achieve FIRE in {years:.1f} years."),
    (above(20), "You can achieve FIRE in {years:.1f} years. Increasing your savings rate will accelerate your timeline."),
    (above(50), "FIRE will take {years:.1f} years at your current rate. Consider increasing your savings rate significantly."),
]


def years_to_target(
    target: float, current_savings: float, annual_savings: float, growth_rate_percent: float
) -> Optional[float]:
    """
    Years until savings growing at `growth_rate_percent` plus yearly contributions reach `target`.

    Solves current * (1 + r)^n + annual_savings * ((1 + r)^n - 1) / r = target for n:

        n = ln((target * r + annual_savings) / (current * r + annual_savings)) / ln(1 + r)

    The target includes growth on current savings, not only on the yearly
    contributions. This differs from the older expression
    ln(S(1 + r) / (S + (T - C)r)) / ln(1 + r), which goes negative whenever
    the remaining gap T - C exceeds one year of savings S.

    A zero rate reduces to (target - current) / annual_savings. Returns None
    when no non-negative finite solution exists.
    """
    r = growth_rate_percent / 100

    if r == 0:
        years = (target - current_savings) / annual_savings
    elif r <= -1:
        return None
    else:
        numerator = target * r + annual_savings
        denominator = current_savings * r + annual_savings
        if numerator <= 0 or denominator <= 0:
            return None
        years = math.log(numerator / denominator) / math.log(1 + r)

    if years < 0 or not math.isfinite(years):
        return None
    return years


def calculate_fire(
    annual_expenses: float,
    current_savings: float,
    annual_savings: float,
    growth_rate_percent: float = 7.0,
) -> FIREResult:
    """
    Main entry point: FIRE number and years to reach it.

    An unreachable target (no savings, or no finite solution) is reported as
    years_to_fire = -1.0 with achievable False, never as an error.
    """
    fire_number = annual_expenses / SAFE_WITHDRAWAL_RATE

    if current_savings >= fire_number:
        years: Optional[float] = 0.0
    elif annual_savings <= 0:
        years = None
    else:
        years = years_to_target(fire_number, current_savings, annual_savings, growth_rate_percent)

    if years is None:
        reported_years = -1.0
        message = UNREACHABLE_MESSAGE
    elif years == 0:
        reported_years = 0.0
        message = ACHIEVED_MESSAGE
    else:
        # A target still ahead never reports as 0.0 years
        reported_years = max(round(years, 1), MIN_REPORTED_YEARS)
        message = select_bracket(TIMELINE_MESSAGES, reported_years).format(years=reported_years)

    return FIREResult(
        annual_expenses=annual_expenses,
        fire_number=fire_number,
        current_savings=current_savings,
        annual_savings=annual_savings,
        growth_rate=growth_rate_percent,
        years_to_fire=reported_years,
        achievable=years is not None,
        message=message,
    )
