"""Canonical test fixtures used across all engine tests.

Fixture: $15,226.29 balance at 3.5% APR, $562.08/mo (102.87 + 459.21).
Balances and rates are negative while the debt is outstanding.
"""

import pytest
from decimal import Decimal

from amortizer.engine.loan import Loan


@pytest.fixture
def reference_loan() -> Loan:
    """Built from floats, as the values arrive from a console caller."""
    return Loan(-15226.29, -0.035, 102.87 + 459.21)


@pytest.fixture
def zero_rate_loan() -> Loan:
    """$1,000 at 0% with $100 payments."""
    return Loan(Decimal("-1000"), Decimal("0"), Decimal("100"))
