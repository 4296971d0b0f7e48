"""Currency rounding and display helpers"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves away from negative infinity (2.5 -> 3, -2.5 -> -2)"""
    return int(math.floor(value + 0.5))


def format_inr(amount: float) -> str:
    """Format an amount in rupees with thousands separators, e.g. ₹1,600,000"""
    if float(amount).is_integer():
        return f"₹{amount:,.0f}"
    return f"₹{amount:,.2f}"


def format_lakh(amount: float) -> str:
    """Format an amount in lakhs (100,000), e.g. ₹12.6L"""
    return f"₹{amount / 100_000:.1f}L"
