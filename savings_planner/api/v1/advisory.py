"""POST /v1/advisory/* - recommendations, health score, wealth gap and FIRE"""

import time

from fastapi import APIRouter, Request

from savings_planner.api.dependencies import get_request_id
from savings_planner.api.v1.schemas import (
    FIRERequest,
    FIREResponse,
    HealthScoreRequest,
    HealthScoreResponse,
    RecommendationRequest,
    RecommendationResponse,
    WealthGapRequest,
    WealthGapResponse,
)
from savings_planner.api.v1.tracking import calculation_failed, complete_calculation
from savings_planner.config import settings
from savings_planner.domain.fire import calculate_fire
from savings_planner.domain.health import score_financial_health
from savings_planner.domain.recommendations import build_recommendation_report
from savings_planner.domain.wealth_gap import analyze_wealth_gap

router = APIRouter()


@router.post("/advisory/recommendations", response_model=RecommendationResponse)
def recommendations(request_body: RecommendationRequest, request: Request):
    """Savings-rate advice, portfolio split for the goal horizon and worked examples"""
    start_time = time.time()
    request_id = get_request_id(request)

    timeframe = request_body.goal_timeframe_years or settings.default_goal_timeframe_years

    try:
        report = build_recommendation_report(
            request_body.income,
            request_body.expenses,
            request_body.monthly_surplus,
            request_body.goal,
            goal_timeframe_years=timeframe,
        )
    except Exception as e:
        raise calculation_failed("recommendations", request_id, e, start_time)

    complete_calculation("recommendations", request_id, "ok", start_time)
    return RecommendationResponse.model_validate(report)


@router.post("/advisory/health-score", response_model=HealthScoreResponse)
def health_score(request_body: HealthScoreRequest, request: Request):
    """
    Financial health score out of 100.

    Returns:
        Savings (40), debt (30) and goal progress (30) components with messages
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        breakdown = score_financial_health(
            request_body.income,
            request_body.expenses,
            request_body.monthly_surplus,
            request_body.goal,
            request_body.current_savings,
        )
    except Exception as e:
        raise calculation_failed("health_score", request_id, e, start_time)

    complete_calculation("health_score", request_id, "ok", start_time)
    return HealthScoreResponse.model_validate(breakdown)


@router.post("/advisory/wealth-gap", response_model=WealthGapResponse)
def wealth_gap(request_body: WealthGapRequest, request: Request):
    """Current savings against the benchmark multiple of income for the user's age"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = analyze_wealth_gap(request_body.age, request_body.annual_income, request_body.current_savings)
    except Exception as e:
        raise calculation_failed("wealth_gap", request_id, e, start_time)

    complete_calculation("wealth_gap", request_id, "ok", start_time)
    return WealthGapResponse.model_validate(result)


@router.post("/advisory/fire", response_model=FIREResponse)
def fire(request_body: FIRERequest, request: Request):
    """
    FIRE number (25x annual expenses) and years to reach it.

    An unreachable target is a normal response with years_to_fire = -1.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    growth_rate = (
        request_body.growth_rate_percent
        if request_body.growth_rate_percent is not None
        else settings.default_fire_growth_rate
    )

    try:
        result = calculate_fire(
            request_body.annual_expenses,
            request_body.current_savings,
            request_body.annual_savings,
            growth_rate,
        )
    except Exception as e:
        raise calculation_failed("fire", request_id, e, start_time)

    complete_calculation("fire", request_id, "ok" if result.achievable else "unreachable", start_time)
    return FIREResponse.model_validate(result)
