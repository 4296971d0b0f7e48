"""Pydantic schemas for API request/response validation"""

from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat

Expenses = Dict[str, NonNegativeFloat]

# Same [0, 100] range a rate table entry accepts
AnnualRate = Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]


# Requests


class SavingsTimelineRequest(BaseModel):
    """Request body for POST /v1/savings/timeline"""

    income: float = Field(..., gt=0, description="Monthly income")
    expenses: Expenses = Field(..., description="Monthly expense by category")
    goal: float = Field(..., gt=0, description="Savings goal amount")


class ImprovementTipsRequest(BaseModel):
    """Request body for POST /v1/savings/improvement-tips"""

    income: float = Field(..., gt=0, description="Monthly income")
    expenses: Expenses = Field(..., description="Monthly expense by category")
    savings_goal: float = Field(..., gt=0, description="Savings goal amount")


class InvestmentComparisonRequest(BaseModel):
    """Request body for POST /v1/investments/compare"""

    monthly_contribution: float = Field(..., gt=0, description="Amount invested every month")
    goal: float = Field(..., gt=0, description="Target amount")
    custom_rates: Optional[Dict[str, AnnualRate]] = Field(None, description="Instrument key -> annual rate override")


class RecommendationRequest(BaseModel):
    """Request body for POST /v1/advisory/recommendations"""

    income: float = Field(..., gt=0)
    expenses: Expenses
    monthly_surplus: float = Field(..., gt=0)
    goal: float = Field(..., gt=0)
    goal_timeframe_years: Optional[float] = Field(None, gt=0, description="Defaults to the configured horizon")


class HealthScoreRequest(BaseModel):
    """Request body for POST /v1/advisory/health-score"""

    income: float = Field(..., gt=0)
    expenses: Expenses
    monthly_surplus: float = Field(..., gt=0)
    goal: float = Field(..., gt=0)
    current_savings: float = Field(..., ge=0)


class WealthGapRequest(BaseModel):
    """Request body for POST /v1/advisory/wealth-gap"""

    age: int = Field(..., gt=0)
    annual_income: float = Field(..., gt=0)
    current_savings: float = Field(..., ge=0)


class FIRERequest(BaseModel):
    """Request body for POST /v1/advisory/fire"""

    annual_expenses: float = Field(..., gt=0)
    current_savings: float = Field(..., ge=0)
    annual_savings: float = Field(..., description="Zero or negative savings make FIRE unreachable")
    growth_rate_percent: Optional[float] = Field(
        None, gt=-100, le=100, allow_inf_nan=False, description="Defaults to the configured rate"
    )


# Responses


class SavingsTimelineResponse(BaseModel):
    """Response for POST /v1/savings/timeline"""

    income: float
    total_expenses: float
    savings_per_month: float
    savings_per_week: int
    savings_per_day: int
    months_to_goal: int
    goal_status: str
    days_to_goal: int
    expense_breakdown: Dict[str, float]
    message: Optional[str] = None


class ImprovementTipSchema(BaseModel):
    """Single what-if tip"""

    model_config = ConfigDict(from_attributes=True)

    type: str
    suggestion: str
    time_saved_months: int
    new_time_to_goal_months: int
    impact: str
    category: Optional[str] = None
    current_amount: Optional[float] = None
    new_amount: Optional[float] = None
    monthly_savings_increase: Optional[float] = None
    income_increase: Optional[float] = None
    expected_return: Optional[float] = None


class ImprovementTipsResponse(BaseModel):
    """Response for POST /v1/savings/improvement-tips"""

    model_config = ConfigDict(from_attributes=True)

    current_surplus: float
    current_time_to_goal_months: int
    total_tips: int
    tips: List[ImprovementTipSchema]


class ProjectionResultSchema(BaseModel):
    """Time to goal for one instrument"""

    instrument_key: str
    name: str
    annual_rate: float
    months_to_goal: int
    goal_status: str
    final_amount: float
    total_contributed: float
    gain: float
    gain_percentage: int


class RankedInstrumentSchema(ProjectionResultSchema):
    """Instrument result compared with plain savings"""

    time_saved_months: int
    time_saved_percentage: int


class InvestmentComparisonResponse(BaseModel):
    """Response for POST /v1/investments/compare"""

    monthly_contribution: float
    goal: float
    results: List[ProjectionResultSchema]
    savings_only: ProjectionResultSchema
    ranked: List[RankedInstrumentSchema]
    projections: Dict[int, Dict[str, float]]


class InstrumentSchema(BaseModel):
    """Rate table entry"""

    model_config = ConfigDict(from_attributes=True)

    key: str
    display_name: str
    default_rate: float
    min_rate: float
    max_rate: float


class InstrumentListResponse(BaseModel):
    """Response for GET /v1/investments/options"""

    instruments: List[InstrumentSchema]
    message: str = "Available investment options with default rates"


class RecommendationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    message: str
    priority: str


class PortfolioSuggestionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    message: str
    allocation: Dict[str, int]
    explanation: str


class ExampleMessageSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    message: str


class RecommendationResponse(BaseModel):
    """Response for POST /v1/advisory/recommendations"""

    model_config = ConfigDict(from_attributes=True)

    recommendations: List[RecommendationSchema]
    portfolio_suggestion: PortfolioSuggestionSchema
    examples: List[ExampleMessageSchema]


class ScoreComponentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    score: int
    max_score: int
    percentage: float
    message: str


class HealthScoreResponse(BaseModel):
    """Response for POST /v1/advisory/health-score"""

    model_config = ConfigDict(from_attributes=True)

    savings_score: ScoreComponentSchema
    debt_score: ScoreComponentSchema
    goal_score: ScoreComponentSchema
    total_score: int
    message: str


class WealthGapResponse(BaseModel):
    """Response for POST /v1/advisory/wealth-gap"""

    model_config = ConfigDict(from_attributes=True)

    age: int
    annual_income: float
    current_savings: float
    recommended_savings: float
    gap: float
    gap_percentage: float
    status: str
    message: str


class FIREResponse(BaseModel):
    """Response for POST /v1/advisory/fire"""

    model_config = ConfigDict(from_attributes=True)

    annual_expenses: float
    fire_number: float
    current_savings: float
    annual_savings: float
    growth_rate: float
    years_to_fire: float
    achievable: bool
    message: str


class LearningArticleSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    category: str
    summary: str
    content: str
    learn_more: str


class LearningResponse(BaseModel):
    """Response for GET /v1/learn"""

    total_articles: int
    categories: List[str]
    content: List[LearningArticleSchema]
