"""Improvement tips - what-if scenarios that shorten the time to a savings goal"""

from typing import List

from savings_planner.domain.models import FinancialSnapshot, ImprovementReport, ImprovementTip
from savings_planner.domain.projection import MAX_SEARCH_MONTHS, months_to_goal
from savings_planner.domain.rates import RateTable
from savings_planner.utils.money import format_inr, round_half_up
from savings_planner.utils.thresholds import FLOOR, above, select_bracket

FIXED_REDUCTIONS = (500, 1000)
PROPORTIONAL_REDUCTIONS = (0.1, 0.2)
INCOME_INCREASES = (5000, 10000, 15000, 20000)

# Impact tier by months saved: expense cuts are judged more generously than raises
EXPENSE_IMPACT = [(FLOOR, "low"), (above(2), "medium"), (above(6), "high")]
INCOME_IMPACT = [(FLOOR, "low"), (above(6), "medium"), (above(12), "high")]
IMPACT_RANK = {"low": 1, "medium": 2, "high": 3}


def expense_reduction_tips(
    snapshot: FinancialSnapshot, current_months: int, max_months: int = MAX_SEARCH_MONTHS
) -> List[ImprovementTip]:
    """Cut each expense by a fixed or proportional amount and keep the cuts that save time"""
    tips = []
    surplus = snapshot.monthly_surplus

    for category, amount in snapshot.expenses.items():
        if not amount or amount <= 0:
            continue

        reductions = list(FIXED_REDUCTIONS) + [round_half_up(amount * f) for f in PROPORTIONAL_REDUCTIONS]
        for reduction in reductions:
            if not 0 < reduction < amount:
                continue

            new_months = months_to_goal(surplus + reduction, snapshot.savings_goal, 0, max_months).as_months()
            time_saved = current_months - new_months
            if time_saved <= 0:
                continue

            tips.append(
                ImprovementTip(
                    type="expense_reduction",
                    suggestion=f"Reduce {category} by {format_inr(reduction)}",
                    time_saved_months=time_saved,
                    new_time_to_goal_months=new_months,
                    impact=select_bracket(EXPENSE_IMPACT, time_saved),
                    category=category,
                    current_amount=amount,
                    new_amount=amount - reduction,
                    monthly_savings_increase=reduction,
                )
            )

    return tips


def investment_tip(
    snapshot: FinancialSnapshot,
    current_months: int,
    rate_table: RateTable,
    max_months: int = MAX_SEARCH_MONTHS,
) -> List[ImprovementTip]:
    """Suggest the fastest instrument at its default rate, if investing saves time"""
    surplus = snapshot.monthly_surplus
    if surplus <= 0 or len(rate_table) == 0:
        return []

    best_entry = None
    best_months = None
    for entry in rate_table:
        months = months_to_goal(surplus, snapshot.savings_goal, entry.default_rate, max_months).as_months()
        # Strictly faster only: the earlier instrument wins a tie
        if best_months is None or months < best_months:
            best_entry, best_months = entry, months

    time_saved = current_months - best_months
    if time_saved <= 0:
        return []

    return [
        ImprovementTip(
            type="investment",
            suggestion=f"Start investing in {best_entry.display_name}",
            time_saved_months=time_saved,
            new_time_to_goal_months=best_months,
            impact="high",
            expected_return=best_entry.default_rate,
        )
    ]


def income_increase_tips(
    snapshot: FinancialSnapshot, current_months: int, max_months: int = MAX_SEARCH_MONTHS
) -> List[ImprovementTip]:
    tips = []
    for increase in INCOME_INCREASES:
        new_months = months_to_goal(snapshot.monthly_surplus + increase, snapshot.savings_goal, 0, max_months).as_months()
        time_saved = current_months - new_months
        if time_saved <= 0:
            continue

        tips.append(
            ImprovementTip(
                type="income_increase",
                suggestion=f"Increase monthly income by {format_inr(increase)}",
                time_saved_months=time_saved,
                new_time_to_goal_months=new_months,
                impact=select_bracket(INCOME_IMPACT, time_saved),
                income_increase=increase,
            )
        )
    return tips


def generate_improvement_tips(
    snapshot: FinancialSnapshot,
    rate_table: RateTable,
    limit: int = 10,
    max_months: int = MAX_SEARCH_MONTHS,
) -> ImprovementReport:
    """
    Main entry point: collect expense, investment and income tips and keep the best.

    Tips are ordered by impact tier, then by months saved, both descending.
    Equal tips keep the order they were generated in. A surplus of zero or
    less yields no tips, since no single change makes the goal reachable
    under the plain-savings timeline.
    """
    surplus = snapshot.monthly_surplus
    current_months = (
        months_to_goal(surplus, snapshot.savings_goal, 0, max_months).as_months() if surplus > 0 else -1
    )

    tips = (
        expense_reduction_tips(snapshot, current_months, max_months)
        + investment_tip(snapshot, current_months, rate_table, max_months)
        + income_increase_tips(snapshot, current_months, max_months)
    )
    ranked = sorted(tips, key=lambda tip: (IMPACT_RANK[tip.impact], tip.time_saved_months), reverse=True)

    return ImprovementReport(
        current_surplus=surplus,
        current_time_to_goal_months=current_months,
        tips=ranked[:limit],
    )
