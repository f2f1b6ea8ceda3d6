"""Fixed-payment installment loan engine.

Pure functions of an immutable Loan: Decimal in, Payment list out. No I/O.

Balances are negative while debt is outstanding; the schedule runs until the
balance reaches zero. APR carries the same sign, so per-period interest and
principal portions come out positive.

Formulas based on http://hughcalc.org/formula.php
"""

import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal

from amortizer.config import settings
from amortizer.engine.rounding import (
    APR_PLACES,
    APR_ROUNDING,
    COUNT_PLACES,
    COUNT_ROUNDING,
    ENTRY_PLACES,
    ENTRY_ROUNDING,
    INTEREST_PLACES,
    INTEREST_ROUNDING,
    PAYMENT_PLACES,
    PAYMENT_ROUNDING,
    PRINCIPAL_PLACES,
    PRINCIPAL_ROUNDING,
    WHOLE_PERIOD_ROUNDING,
    entry,
    monthly_rate,
    to_decimal,
)
from amortizer.models.payment import Payment

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class NonConvergentScheduleError(ValueError):
    """The fixed payment never retires the balance."""

    def __init__(self, message: str, period: int | None = None, balance: Decimal | None = None):
        super().__init__(message)
        self.period = period
        self.balance = balance


@dataclass(frozen=True)
class Loan:
    principal: Decimal
    apr: Decimal
    payment: Decimal
    max_periods: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "principal",
            to_decimal(self.principal).quantize(PRINCIPAL_PLACES, PRINCIPAL_ROUNDING),
        )
        object.__setattr__(
            self, "apr", to_decimal(self.apr).quantize(APR_PLACES, APR_ROUNDING),
        )
        object.__setattr__(
            self, "payment",
            to_decimal(self.payment).quantize(PAYMENT_PLACES, PAYMENT_ROUNDING),
        )
        if self.max_periods is None:
            object.__setattr__(self, "max_periods", settings.max_schedule_periods)

    @property
    def balance(self) -> Decimal:
        """Starting balance (the normalized principal)."""
        return self.principal

    def amortization_schedule(self) -> list[Payment]:
        """Simulate payments until the balance reaches zero.

        The last payment is clamped so the balance lands on exactly zero.

        Raises NonConvergentScheduleError if a payment does not cover the
        period's interest or the schedule runs past max_periods.
        """
        rate = monthly_rate(self.apr)
        schedule: list[Payment] = []
        balance = self.principal

        while balance < ZERO:
            period = len(schedule) + 1
            if period > self.max_periods:
                raise NonConvergentScheduleError(
                    f"Schedule exceeds {self.max_periods} periods with balance {balance} remaining",
                    period=period,
                    balance=balance,
                )

            interest = (balance * rate).quantize(INTEREST_PLACES, INTEREST_ROUNDING)
            principal = self.payment - interest
            if principal <= ZERO:
                raise NonConvergentScheduleError(
                    f"Payment {self.payment} does not cover interest {interest} in period {period}",
                    period=period,
                    balance=balance,
                )

            # Final payment
            if abs(balance) < principal:
                principal = abs(balance)

            principal = entry(principal)
            schedule.append(Payment(principal=principal, interest=entry(interest)))

            next_balance = balance + principal
            balance = next_balance if next_balance < ZERO else ZERO

        logger.debug("Amortized %s over %d periods", self.principal, len(schedule))
        return schedule

    def number_of_payments(self) -> Decimal:
        """Closed-form payment count.

        n = ln(1 - (B/m) * r) / ln(1 + r)

        B = principal, m = payment, r = monthly rate. Evaluated in float,
        so it can differ from the simulated count by a fraction of a period.
        """
        rate = monthly_rate(self.apr)
        pv_month = (self.principal / self.payment).quantize(ENTRY_PLACES, ENTRY_ROUNDING)

        if rate == ZERO:
            return abs(pv_month).quantize(COUNT_PLACES, COUNT_ROUNDING)

        remaining = 1.0 - float(pv_month) * float(rate)
        if remaining <= 0:
            raise NonConvergentScheduleError(
                f"Payment {self.payment} does not cover interest on {self.principal}",
                balance=self.principal,
            )

        # Convert to Decimal for the exact division
        part1 = Decimal(math.log(remaining))
        part2 = Decimal(math.log(1.0 + float(rate)))
        return (part1 / part2).quantize(COUNT_PLACES, COUNT_ROUNDING)

    def payment_count(self) -> int:
        """number_of_payments() rounded up to a whole period."""
        return int(self.number_of_payments().quantize(Decimal("1"), WHOLE_PERIOD_ROUNDING))

    def future_value(self, periods: int) -> Decimal:
        """Balance remaining after the first `periods` scheduled payments."""
        if periods < 0:
            raise ValueError(f"periods must be non-negative, got {periods}")

        schedule = self.amortization_schedule()
        if periods > len(schedule):
            raise IndexError(
                f"Loan is retired after {len(schedule)} payments, cannot project {periods}"
            )

        paid = sum((p.principal for p in schedule[:periods]), ZERO)
        return entry(self.balance + paid)

    def __str__(self) -> str:
        lines = [
            f"Principle:{self.principal}",
            f"Interest Rate:{self.apr}",
            f"Payment:{self.payment}",
        ]
        lines.extend(str(p) for p in self.amortization_schedule())
        return "\n".join(lines) + "\n"
