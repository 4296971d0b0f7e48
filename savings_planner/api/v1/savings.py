"""POST /v1/savings/* - plain-savings timeline and improvement tips"""

import time

from fastapi import APIRouter, Depends, Request

from savings_planner.api.dependencies import get_rate_table, get_request_id
from savings_planner.api.v1.schemas import (
    ImprovementTipsRequest,
    ImprovementTipsResponse,
    SavingsTimelineRequest,
    SavingsTimelineResponse,
)
from savings_planner.api.v1.tracking import calculation_failed, complete_calculation
from savings_planner.config import settings
from savings_planner.domain.models import FinancialSnapshot
from savings_planner.domain.rates import RateTable
from savings_planner.domain.savings import compute_savings_timeline
from savings_planner.domain.tips import generate_improvement_tips

router = APIRouter()


@router.post("/savings/timeline", response_model=SavingsTimelineResponse)
def savings_timeline(request_body: SavingsTimelineRequest, request: Request):
    """
    Monthly, weekly and daily savings and time to goal without investing.

    A surplus of zero or less is not an error: the response carries
    months_to_goal = -1 and an explanatory message.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    snapshot = FinancialSnapshot(
        monthly_income=request_body.income,
        expenses=request_body.expenses,
        savings_goal=request_body.goal,
    )

    try:
        timeline = compute_savings_timeline(snapshot, settings.goal_search_cap_months)
    except Exception as e:
        raise calculation_failed("savings_timeline", request_id, e, start_time)

    complete_calculation("savings_timeline", request_id, "ok" if timeline.goal_time.reached else "unreachable", start_time)

    return SavingsTimelineResponse(
        income=timeline.income,
        total_expenses=timeline.total_expenses,
        savings_per_month=timeline.savings_per_month,
        savings_per_week=timeline.savings_per_week,
        savings_per_day=timeline.savings_per_day,
        months_to_goal=timeline.months_to_goal,
        goal_status=timeline.goal_time.status.value,
        days_to_goal=timeline.days_to_goal,
        expense_breakdown=dict(timeline.expense_breakdown),
        message=timeline.message,
    )


@router.post("/savings/improvement-tips", response_model=ImprovementTipsResponse)
def improvement_tips(
    request_body: ImprovementTipsRequest,
    request: Request,
    rate_table: RateTable = Depends(get_rate_table),
):
    """
    Ranked what-if tips: cut an expense, invest the surplus, or earn more.

    Returns at most the configured number of tips, highest impact first.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    snapshot = FinancialSnapshot(
        monthly_income=request_body.income,
        expenses=request_body.expenses,
        savings_goal=request_body.savings_goal,
    )

    try:
        report = generate_improvement_tips(
            snapshot,
            rate_table,
            limit=settings.max_improvement_tips,
            max_months=settings.goal_search_cap_months,
        )
    except Exception as e:
        raise calculation_failed("improvement_tips", request_id, e, start_time)

    outcome = "ok" if report.current_time_to_goal_months >= 0 else "unreachable"
    complete_calculation("improvement_tips", request_id, outcome, start_time)

    return ImprovementTipsResponse.model_validate(report)
