"""Domain models - immutable dataclasses computed fresh for every calculation"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional

from savings_planner.domain.exceptions import InvalidRateTableError


@dataclass(frozen=True)
class FinancialSnapshot:
    """User's monthly cash flow and savings position"""

    monthly_income: float
    expenses: Mapping[str, float]
    savings_goal: float
    current_savings: float = 0.0
    age: Optional[int] = None

    @property
    def total_expenses(self) -> float:
        return sum(amount or 0 for amount in self.expenses.values())

    @property
    def monthly_surplus(self) -> float:
        # Zero or negative means the goal cannot be reached by saving alone
        return self.monthly_income - self.total_expenses


@dataclass(frozen=True)
class RateTableEntry:
    """Investment instrument with its assumed annual return range"""

    key: str
    display_name: str
    default_rate: float
    min_rate: float
    max_rate: float

    def __post_init__(self):
        if not 0 <= self.default_rate <= 100:
            raise InvalidRateTableError(
                f"{self.key}: default rate {self.default_rate} is outside [0, 100]"
            )
        if not self.min_rate <= self.default_rate <= self.max_rate:
            raise InvalidRateTableError(
                f"{self.key}: default rate {self.default_rate} is outside "
                f"[{self.min_rate}, {self.max_rate}]"
            )


class GoalStatus(str, Enum):
    REACHED = "reached"
    UNREACHABLE = "unreachable"  # no positive monthly contribution
    EXCEEDS_CAP = "exceeds_cap"  # not reached within the search cap


@dataclass(frozen=True)
class GoalTime:
    """Outcome of a time-to-goal search"""

    status: GoalStatus
    months: int

    @property
    def reached(self) -> bool:
        return self.status is GoalStatus.REACHED

    def as_months(self) -> int:
        """Month count with -1 standing in for an unreachable goal"""
        return -1 if self.status is GoalStatus.UNREACHABLE else self.months


@dataclass(frozen=True)
class ProjectionResult:
    """Time to goal and gain for one instrument (or the savings-only baseline)"""

    instrument_key: str
    name: str
    annual_rate: float
    goal_time: GoalTime
    final_amount: float
    total_contributed: float
    gain: float
    gain_percentage: int

    @property
    def months_to_goal(self) -> int:
        return self.goal_time.as_months()


@dataclass(frozen=True)
class RankedInstrument:
    """Instrument result measured against the savings-only baseline"""

    result: ProjectionResult
    time_saved_months: int
    time_saved_percentage: int


@dataclass(frozen=True)
class InvestmentComparison:
    """Every instrument projected towards the same goal"""

    monthly_contribution: float
    goal: float
    results: List[ProjectionResult]
    savings_only: ProjectionResult
    ranked: List[RankedInstrument]
    projections: Dict[int, Dict[str, float]]


@dataclass(frozen=True)
class SavingsTimeline:
    """Plain-savings breakdown of a monthly surplus"""

    income: float
    total_expenses: float
    savings_per_month: float
    savings_per_week: int
    savings_per_day: int
    goal_time: GoalTime
    days_to_goal: int
    expense_breakdown: Mapping[str, float]
    message: Optional[str] = None

    @property
    def months_to_goal(self) -> int:
        return self.goal_time.as_months()


@dataclass(frozen=True)
class ImprovementTip:
    """Single suggestion for reaching the goal sooner"""

    type: str  # expense_reduction | investment | income_increase
    suggestion: str
    time_saved_months: int
    new_time_to_goal_months: int
    impact: str  # low | medium | high
    category: Optional[str] = None
    current_amount: Optional[float] = None
    new_amount: Optional[float] = None
    monthly_savings_increase: Optional[float] = None
    income_increase: Optional[float] = None
    expected_return: Optional[float] = None


@dataclass(frozen=True)
class ImprovementReport:
    current_surplus: float
    current_time_to_goal_months: int
    tips: List[ImprovementTip]

    @property
    def total_tips(self) -> int:
        return len(self.tips)


@dataclass(frozen=True)
class Recommendation:
    type: str
    message: str
    priority: str  # low | medium | high


@dataclass(frozen=True)
class PortfolioSuggestion:
    """Asset allocation (percent per asset) for a goal horizon"""

    type: str  # short_term | medium_term | long_term
    message: str
    allocation: Dict[str, int]
    explanation: str


@dataclass(frozen=True)
class ExampleMessage:
    type: str
    message: str


@dataclass(frozen=True)
class RecommendationReport:
    recommendations: List[Recommendation]
    portfolio_suggestion: PortfolioSuggestion
    examples: List[ExampleMessage]


@dataclass(frozen=True)
class ScoreComponent:
    """One bucketed part of the health score"""

    score: int
    max_score: int
    percentage: float  # savings rate, DTI or goal progress
    message: str


@dataclass(frozen=True)
class ScoreBreakdown:
    """Financial health score out of 100"""

    savings_score: ScoreComponent
    debt_score: ScoreComponent
    goal_score: ScoreComponent
    message: str

    @property
    def total_score(self) -> int:
        return self.savings_score.score + self.debt_score.score + self.goal_score.score


@dataclass(frozen=True)
class WealthGapResult:
    """Savings measured against an age-based multiple of annual income"""

    age: int
    annual_income: float
    current_savings: float
    recommended_savings: float
    gap: float
    gap_percentage: float
    status: str  # ahead | behind
    message: str


@dataclass(frozen=True)
class FIREResult:
    """Financial independence target and time to reach it"""

    annual_expenses: float
    fire_number: float
    current_savings: float
    annual_savings: float
    growth_rate: float
    years_to_fire: float  # -1.0 when unreachable
    achievable: bool
    message: str


@dataclass(frozen=True)
class LearningArticle:
    id: int
    title: str
    category: str
    summary: str
    content: str
    learn_more: str
