"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from savings_planner.config import settings
from savings_planner.domain.rates import DEFAULT_RATE_TABLE, RateTable


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_rate_table() -> RateTable:
    """Provide the instrument rate table with configured default overrides"""
    return DEFAULT_RATE_TABLE.with_defaults(settings.rate_overrides)
