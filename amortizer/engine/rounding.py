"""Decimal precision and rounding policy for loan quantities.

Each quantity has a fixed number of decimal places and a rounding mode.
"""

from decimal import Decimal, ROUND_CEILING, ROUND_HALF_DOWN, ROUND_HALF_UP

PRINCIPAL_PLACES = Decimal("0.01")
PRINCIPAL_ROUNDING = ROUND_HALF_DOWN

APR_PLACES = Decimal("0.000001")
APR_ROUNDING = ROUND_HALF_DOWN

PAYMENT_PLACES = Decimal("0.01")
PAYMENT_ROUNDING = ROUND_HALF_UP

MONTHLY_RATE_PLACES = Decimal("0.000000000001")
MONTHLY_RATE_ROUNDING = ROUND_HALF_DOWN

# Per-period interest accrual
INTEREST_PLACES = Decimal("0.01")
INTEREST_ROUNDING = ROUND_HALF_UP

# Schedule entries and projected balances
ENTRY_PLACES = Decimal("0.01")
ENTRY_ROUNDING = ROUND_HALF_DOWN

# Closed-form payment count
COUNT_PLACES = Decimal("0.01")
COUNT_ROUNDING = ROUND_HALF_UP
WHOLE_PERIOD_ROUNDING = ROUND_CEILING

MONTHS_PER_YEAR = 12


def to_decimal(value: Decimal | int | str | float) -> Decimal:
    """Convert a number to Decimal. Floats keep their exact binary value."""
    if isinstance(value, Decimal):
        return value
    return Decimal(value)


def monthly_rate(apr: Decimal) -> Decimal:
    return (apr / MONTHS_PER_YEAR).quantize(MONTHLY_RATE_PLACES, MONTHLY_RATE_ROUNDING)


def entry(value: Decimal) -> Decimal:
    return value.quantize(ENTRY_PLACES, ENTRY_ROUNDING)
