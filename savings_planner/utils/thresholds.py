"""Threshold table lookups shared by score, bracket and horizon tables"""

import math
from bisect import bisect_right
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")

# Lower bound for the first row of a table that must match every input
FLOOR = -math.inf


def select_bracket(table: Sequence[Tuple[float, T]], value: float) -> T:
    """
    Return the value of the row with the highest lower bound <= value.

    Rows must be sorted ascending by bound. Inputs below the first bound fall
    back to the first row, so tables that start at FLOOR always match.

    Example:
        table = [(FLOOR, 0), (5, 10), (10, 20)]
        select_bracket(table, 7.5) -> 10
        select_bracket(table, 10)  -> 20
    """
    if not table:
        raise ValueError("Threshold table is empty")

    bounds = [bound for bound, _ in table]
    index = bisect_right(bounds, value) - 1
    return table[max(index, 0)][1]


def above(bound: float) -> float:
    """Smallest float strictly greater than bound, for '> bound' table rows"""
    return math.nextafter(bound, math.inf)
