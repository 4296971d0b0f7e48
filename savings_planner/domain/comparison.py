"""Side-by-side comparison of investment instruments against plain savings"""

from typing import Dict, List, Mapping, Optional, Sequence

from savings_planner.domain.models import InvestmentComparison, ProjectionResult, RankedInstrument
from savings_planner.domain.projection import MAX_SEARCH_MONTHS, months_to_goal, project
from savings_planner.domain.rates import RateTable
from savings_planner.utils.money import round_half_up

SAVINGS_ONLY_KEY = "savings_only"
DEFAULT_HORIZONS = (6, 12, 24, 36, 60, 120)


def project_to_goal(
    instrument_key: str,
    name: str,
    annual_rate: float,
    monthly_contribution: float,
    goal: float,
    max_months: int = MAX_SEARCH_MONTHS,
) -> ProjectionResult:
    """Time to goal for one rate, with contributions and gain over that period"""
    goal_time = months_to_goal(monthly_contribution, goal, annual_rate, max_months)
    total_contributed = monthly_contribution * max(goal_time.as_months(), 0)
    gain = goal - total_contributed
    gain_percentage = round_half_up(gain / total_contributed * 100) if total_contributed > 0 else 0

    return ProjectionResult(
        instrument_key=instrument_key,
        name=name,
        annual_rate=annual_rate,
        goal_time=goal_time,
        final_amount=goal,
        total_contributed=total_contributed,
        gain=gain,
        gain_percentage=gain_percentage,
    )


def rank_by_time_saved(
    results: Sequence[ProjectionResult], savings_only: ProjectionResult
) -> List[RankedInstrument]:
    """
    Rank instruments by the share of the savings-only timeline they save.

    Sorted descending by time_saved_percentage. The sort is stable, so
    instruments with equal percentages keep their rate table order.
    """
    baseline_months = savings_only.months_to_goal
    ranked = []

    for result in results:
        time_saved = baseline_months - result.months_to_goal
        percentage = round_half_up(time_saved / baseline_months * 100) if baseline_months > 0 else 0
        ranked.append(
            RankedInstrument(result=result, time_saved_months=time_saved, time_saved_percentage=percentage)
        )

    return sorted(ranked, key=lambda item: item.time_saved_percentage, reverse=True)


def project_horizons(
    monthly_contribution: float,
    rate_table: RateTable,
    custom_rates: Optional[Mapping[str, float]] = None,
    horizons: Sequence[int] = DEFAULT_HORIZONS,
) -> Dict[int, Dict[str, float]]:
    """Balance after each horizon (in months) for plain savings and every instrument"""
    projections: Dict[int, Dict[str, float]] = {}

    for months in horizons:
        row: Dict[str, float] = {SAVINGS_ONLY_KEY: monthly_contribution * months}
        for entry in rate_table:
            rate = rate_table.effective_rate(entry.key, custom_rates)
            row[entry.key] = project(0, monthly_contribution, rate, months)
        projections[months] = row

    return projections


def compare_investments(
    monthly_contribution: float,
    goal: float,
    rate_table: RateTable,
    custom_rates: Optional[Mapping[str, float]] = None,
    horizons: Sequence[int] = DEFAULT_HORIZONS,
    max_months: int = MAX_SEARCH_MONTHS,
) -> InvestmentComparison:
    """
    Main entry point: project every instrument in the rate table towards `goal`.

    Callers must reject non-positive contributions and goals beforehand;
    the comparison assumes both are valid.
    """
    results = [
        project_to_goal(
            entry.key,
            entry.display_name,
            rate_table.effective_rate(entry.key, custom_rates),
            monthly_contribution,
            goal,
            max_months,
        )
        for entry in rate_table
    ]
    savings_only = project_to_goal(SAVINGS_ONLY_KEY, "Savings Only", 0.0, monthly_contribution, goal, max_months)

    return InvestmentComparison(
        monthly_contribution=monthly_contribution,
        goal=goal,
        results=results,
        savings_only=savings_only,
        ranked=rank_by_time_saved(results, savings_only),
        projections=project_horizons(monthly_contribution, rate_table, custom_rates, horizons),
    )
