# This project was developed with assistance from AI tools.
"""Amortization math.

Pure functions converting between principal, monthly installment (EMI),
annual interest rate and tenure. Rates are annual nominal percentages
(8.5 means 8.5%). Every function returns 0 instead of NaN/Infinity.
"""

import math


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual nominal percentage to a monthly decimal rate."""
    return max(annual_rate_percent, 0.0) / 12 / 100


def finite_or_zero(value: float) -> float:
    """Return value when finite, else 0."""
    return value if math.isfinite(value) else 0.0


def loan_from_emi(emi: float, annual_rate_percent: float, tenure_years: float) -> float:
    """Principal serviceable by a fixed EMI over the tenure.

    Present value of an annuity: P = EMI * (1 - (1+r)^-n) / r.
    Straight-line (EMI * n) when the rate is zero.
    """
    if emi <= 0 or tenure_years <= 0:
        return 0.0

    r = monthly_rate(annual_rate_percent)
    n = tenure_years * 12
    if r == 0:
        return finite_or_zero(emi * n)

    factor = (1 - (1 + r) ** -n) / r
    return finite_or_zero(emi * factor)


def emi_from_loan(principal: float, annual_rate_percent: float, tenure_years: float) -> float:
    """Monthly installment that repays principal over the tenure.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1), evaluated as P * r / (1 - (1+r)^-n)
    so large n underflows to P * r instead of overflowing.
    """
    if principal <= 0 or tenure_years <= 0:
        return 0.0

    r = monthly_rate(annual_rate_percent)
    n = tenure_years * 12
    if r == 0:
        return finite_or_zero(principal / n)

    denominator = 1 - (1 + r) ** -n
    if denominator <= 0:
        return 0.0
    return finite_or_zero(principal * r / denominator)
