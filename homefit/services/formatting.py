# This project was developed with assistance from AI tools.
"""INR display formatting (Lakh / Crore) for headline text."""

import math

_CRORE = 10_000_000
_LAKH = 100_000


def group_indian(value: int) -> str:
    """Group digits the Indian way: last three, then pairs (12,34,567)."""
    sign = "-" if value < 0 else ""
    digits = str(abs(value))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return sign + ",".join(pairs + [tail])


def format_currency(value: float) -> str:
    """Compact rupee string: ₹1.22 Cr, ₹68.0 Lakh, ₹85,000, or ₹0."""
    if not math.isfinite(value) or value <= 0:
        return "₹0"
    if value >= _CRORE:
        return f"₹{value / _CRORE:.2f} Cr"
    if value >= _LAKH:
        return f"₹{value / _LAKH:.1f} Lakh"
    return f"₹{group_indian(round(value))}"


def format_number(value: float) -> str:
    """Rounded number with Indian digit grouping; 0 for non-finite."""
    if not math.isfinite(value):
        return "0"
    return group_indian(round(value))
