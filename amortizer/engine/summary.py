"""Schedule aggregation: totals, running balances and yearly roll-up.

Pure functions over a list of Payment. No I/O.
"""

from decimal import Decimal

from amortizer.engine.rounding import MONTHS_PER_YEAR
from amortizer.models.payment import Payment


def schedule_totals(schedule: list[Payment]) -> dict[str, Decimal]:
    principal = sum((p.principal for p in schedule), Decimal("0"))
    interest = sum((p.interest for p in schedule), Decimal("0"))
    return {
        "principal": principal,
        "interest": interest,
        "debt_service": principal + interest,
    }


def running_balances(schedule: list[Payment], starting_balance: Decimal) -> list[Decimal]:
    """Balance after each period, starting from a negative balance."""
    balances: list[Decimal] = []
    balance = starting_balance
    for p in schedule:
        balance += p.principal
        balances.append(balance)
    return balances


def yearly_summary(schedule: list[Payment], starting_balance: Decimal) -> list[dict[str, Decimal]]:
    """Aggregate a schedule by year of 12 payments.

    Returns list of dicts with keys: year, principal, interest, debt_service, ending_balance
    """
    yearly: list[dict[str, Decimal]] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    balance = starting_balance

    for period, p in enumerate(schedule, start=1):
        year_principal += p.principal
        year_interest += p.interest
        balance += p.principal

        if period % MONTHS_PER_YEAR == 0 or period == len(schedule):
            yearly.append({
                "year": Decimal((period - 1) // MONTHS_PER_YEAR + 1),
                "principal": year_principal,
                "interest": year_interest,
                "debt_service": year_principal + year_interest,
                "ending_balance": balance,
            })
            year_principal = Decimal("0")
            year_interest = Decimal("0")

    return yearly
