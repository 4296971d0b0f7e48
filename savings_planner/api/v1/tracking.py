"""Shared logging, metrics and error mapping for calculation endpoints"""

import logging
import time

from fastapi import HTTPException

from savings_planner.domain.exceptions import DomainException
from savings_planner.infrastructure.observability.logging import log_calculation
from savings_planner.infrastructure.observability.metrics import record_calculation


def complete_calculation(operation: str, request_id: str, outcome: str, start_time: float) -> None:
    """Record metrics and logs for a finished calculation"""
    duration = time.time() - start_time
    record_calculation(operation, outcome, duration)
    log_calculation(request_id, operation, outcome, duration * 1000)


def calculation_failed(operation: str, request_id: str, error: Exception, start_time: float) -> HTTPException:
    """
    Map a failure inside the engine to an HTTP error.

    DomainException -> 422 with the reason; anything else -> 500 without details.
    """
    duration = time.time() - start_time

    if isinstance(error, DomainException):
        record_calculation(operation, "rejected", duration)
        logging.warning(f"Calculation rejected: {error}", extra={"request_id": request_id, "operation": operation})
        return HTTPException(status_code=422, detail=str(error))

    record_calculation(operation, "error", duration)
    logging.error(f"Unexpected error: {error}", extra={"request_id": request_id, "operation": operation})
    return HTTPException(status_code=500, detail="Internal server error")
