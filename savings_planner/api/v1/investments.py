"""Investment comparison and rate table endpoints"""

import time

from fastapi import APIRouter, Depends, Request

from savings_planner.api.dependencies import get_rate_table, get_request_id
from savings_planner.api.v1.schemas import (
    InstrumentListResponse,
    InstrumentSchema,
    InvestmentComparisonRequest,
    InvestmentComparisonResponse,
    ProjectionResultSchema,
    RankedInstrumentSchema,
)
from savings_planner.api.v1.tracking import calculation_failed, complete_calculation
from savings_planner.config import settings
from savings_planner.domain.comparison import compare_investments
from savings_planner.domain.models import ProjectionResult
from savings_planner.domain.rates import RateTable

router = APIRouter()


def projection_fields(result: ProjectionResult) -> dict:
    return {
        "instrument_key": result.instrument_key,
        "name": result.name,
        "annual_rate": result.annual_rate,
        "months_to_goal": result.months_to_goal,
        "goal_status": result.goal_time.status.value,
        "final_amount": result.final_amount,
        "total_contributed": result.total_contributed,
        "gain": result.gain,
        "gain_percentage": result.gain_percentage,
    }


@router.post("/investments/compare", response_model=InvestmentComparisonResponse)
def compare(
    request_body: InvestmentComparisonRequest,
    request: Request,
    rate_table: RateTable = Depends(get_rate_table),
):
    """
    Time to goal for every instrument against plain savings.

    custom_rates overrides an instrument's rate for this request only;
    unknown keys are ignored.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        comparison = compare_investments(
            request_body.monthly_contribution,
            request_body.goal,
            rate_table,
            custom_rates=request_body.custom_rates,
            max_months=settings.goal_search_cap_months,
        )
    except Exception as e:
        raise calculation_failed("investment_comparison", request_id, e, start_time)

    complete_calculation("investment_comparison", request_id, "ok", start_time)

    return InvestmentComparisonResponse(
        monthly_contribution=comparison.monthly_contribution,
        goal=comparison.goal,
        results=[ProjectionResultSchema(**projection_fields(r)) for r in comparison.results],
        savings_only=ProjectionResultSchema(**projection_fields(comparison.savings_only)),
        ranked=[
            RankedInstrumentSchema(
                **projection_fields(item.result),
                time_saved_months=item.time_saved_months,
                time_saved_percentage=item.time_saved_percentage,
            )
            for item in comparison.ranked
        ],
        projections=comparison.projections,
    )


@router.get("/investments/options", response_model=InstrumentListResponse)
def list_instruments(rate_table: RateTable = Depends(get_rate_table)):
    """Available instruments with their default, minimum and maximum annual rates"""
    return InstrumentListResponse(instruments=[InstrumentSchema.model_validate(entry) for entry in rate_table])
