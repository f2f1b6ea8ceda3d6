"""Pydantic schemas for the JSON schedule report."""

from decimal import Decimal

from pydantic import BaseModel, Field

from amortizer.engine.loan import Loan
from amortizer.engine.summary import running_balances, schedule_totals


class PaymentOut(BaseModel):
    period: int
    principal: Decimal
    interest: Decimal
    balance: Decimal = Field(..., description="Balance after this payment (negative while owed)")


class ScheduleReport(BaseModel):
    principal: Decimal
    apr: Decimal
    payment: Decimal

    # Payment counts
    payment_count: int = Field(..., description="Simulated number of payments")
    calculated_payments: Decimal = Field(..., description="Closed-form payment count estimate")

    total_principal: Decimal
    total_interest: Decimal

    future_value: Decimal | None = None
    future_value_periods: int | None = None

    payments: list[PaymentOut] = []

    @classmethod
    def from_loan(cls, loan: Loan, periods: int | None = None) -> "ScheduleReport":
        schedule = loan.amortization_schedule()
        totals = schedule_totals(schedule)
        balances = running_balances(schedule, loan.balance)

        return cls(
            principal=loan.principal,
            apr=loan.apr,
            payment=loan.payment,
            payment_count=len(schedule),
            calculated_payments=loan.number_of_payments(),
            total_principal=totals["principal"],
            total_interest=totals["interest"],
            future_value=loan.future_value(periods) if periods is not None else None,
            future_value_periods=periods,
            payments=[
                PaymentOut(period=i, principal=p.principal, interest=p.interest, balance=b)
                for i, (p, b) in enumerate(zip(schedule, balances), start=1)
            ],
        )
