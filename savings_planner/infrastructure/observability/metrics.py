"""Prometheus metrics for calculation volume, outcomes and latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "savings_planner_calculation_total",
    "Total calculations served",
    ["operation", "outcome"],  # outcome: ok | unreachable | rejected | error
)

unreachable_goal_counter = Counter(
    "savings_planner_unreachable_goal_total",
    "Calculations where the goal cannot be reached",
    ["operation"],
)

calculation_duration_histogram = Histogram(
    "savings_planner_calculation_duration_seconds",
    "Time spent in the projection engine",
    ["operation"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str, outcome: str, duration_seconds: float) -> None:
    """Record calculation metrics for monitoring usage and unreachable goals"""
    calculation_counter.labels(operation=operation, outcome=outcome).inc()
    calculation_duration_histogram.labels(operation=operation).observe(duration_seconds)

    if outcome == "unreachable":
        unreachable_goal_counter.labels(operation=operation).inc()
