"""Personalized recommendations, portfolio split by horizon and illustrative examples"""

from dataclasses import replace
from typing import List, Mapping

from savings_planner.domain.models import ExampleMessage, PortfolioSuggestion, Recommendation, RecommendationReport
from savings_planner.domain.projection import project
from savings_planner.utils.money import format_inr, format_lakh
from savings_planner.utils.thresholds import FLOOR, above, select_bracket

HOUSING_LIMIT_PERCENT = 30

# (priority, message template) by savings rate
SAVINGS_RATE_BANDS = [
    (FLOOR, ("high", "Since your savings rate is only {rate:.1f}%, you should improve savings before going into Mutual Funds.")),
    (20, ("medium", "Your savings rate of {rate:.1f}% is good, but aim for 30% to accelerate your financial goals.")),
    (30, ("low", "Excellent savings rate of {rate:.1f}%! You are on track to achieve your financial goals faster.")),
]

SHORT_TERM = PortfolioSuggestion(
    type="short_term",
    message="For goals less than 2 years away, focus on RD/FD to preserve capital.",
    allocation={"fd": 70, "rd": 30},
    explanation=(
        "Short-term goals require capital preservation. Fixed and Recurring Deposits "
        "offer guaranteed returns without market risk."
    ),
)
MEDIUM_TERM = PortfolioSuggestion(
    type="medium_term",
    message="For goals 2-5 years away, consider a mix of Debt and Balanced Mutual Funds.",
    allocation={"debt_funds": 60, "balanced_funds": 30, "fd": 10},
    explanation=(
        "Medium-term goals allow for some market exposure while maintaining stability. "
        "A mix of debt and balanced funds provides moderate growth with managed risk."
    ),
)
LONG_TERM = PortfolioSuggestion(
    type="long_term",
    message="For goals more than 5 years away, focus on Mutual Funds/Nifty 50 with some Gold allocation.",
    allocation={"equity_funds": 70, "nifty_etf": 20, "gold": 10},
    explanation=(
        "Long-term goals benefit from equity exposure. The stock market historically "
        "outperforms other asset classes over long periods, while gold provides diversification."
    ),
)

# <2 years short, 2 to 5 years inclusive medium, beyond 5 long
HORIZON_BANDS = [(FLOOR, SHORT_TERM), (2, MEDIUM_TERM), (above(5), LONG_TERM)]

EXAMPLE_YEARS = 5
FD_RATE = 6.5
MUTUAL_FUND_RATE = 11.0
INFLATION_RATE = 6.0


def generate_recommendations(
    income: float, expenses: Mapping[str, float], monthly_surplus: float, goal: float
) -> List[Recommendation]:
    """
    Savings-rate advice, plus a housing warning when rent exceeds 30% of income.

    Exactly one savings-rate recommendation is always returned first.
    """
    savings_rate = monthly_surplus / income * 100
    priority, template = select_bracket(SAVINGS_RATE_BANDS, savings_rate)
    recommendations = [Recommendation(type="savings_rate", message=template.format(rate=savings_rate), priority=priority)]

    rent_percentage = (expenses.get("rent") or 0) / income * 100
    if rent_percentage > HOUSING_LIMIT_PERCENT:
        recommendations.append(
            Recommendation(
                type="expense_pattern",
                message=(
                    f"Your housing cost is {rent_percentage:.1f}% of income, which is high. "
                    f"The recommended is below {HOUSING_LIMIT_PERCENT}%."
                ),
                priority="high",
            )
        )

    return recommendations


def suggest_portfolio(goal_timeframe_years: float) -> PortfolioSuggestion:
    suggestion = select_bracket(HORIZON_BANDS, goal_timeframe_years)
    return replace(suggestion, allocation=dict(suggestion.allocation))


def generate_examples(monthly_surplus: float) -> List[ExampleMessage]:
    """FD vs mutual fund outcome after five years, and what inflation leaves of an FD return"""
    months = EXAMPLE_YEARS * 12
    fd_amount = project(0, monthly_surplus, FD_RATE, months)
    mf_amount = project(0, monthly_surplus, MUTUAL_FUND_RATE, months)
    difference = mf_amount - fd_amount

    inflation_share = INFLATION_RATE / FD_RATE * 100
    real_return = FD_RATE - INFLATION_RATE

    return [
        ExampleMessage(
            type="comparison",
            message=(
                f"Your money in FD gives {format_lakh(fd_amount)} in {EXAMPLE_YEARS} years, "
                f"but Mutual Funds could give {format_lakh(mf_amount)}, a difference of "
                f"{format_inr(difference)}, enough for a significant purchase."
            ),
        ),
        ExampleMessage(
            type="inflation",
            message=(
                f"Inflation will eat {inflation_share:.0f}% of your FD return, "
                f"so real profit is only {real_return:.1f}%."
            ),
        ),
    ]


def build_recommendation_report(
    income: float,
    expenses: Mapping[str, float],
    monthly_surplus: float,
    goal: float,
    goal_timeframe_years: float = 5,
) -> RecommendationReport:
    return RecommendationReport(
        recommendations=generate_recommendations(income, expenses, monthly_surplus, goal),
        portfolio_suggestion=suggest_portfolio(goal_timeframe_years),
        examples=generate_examples(monthly_surplus),
    )
