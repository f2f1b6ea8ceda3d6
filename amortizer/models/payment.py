from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Payment:
    """One period of an amortization schedule."""

    principal: Decimal  # Applied to principal
    interest: Decimal

    def __str__(self) -> str:
        return f"Principle:{self.principal} Interest:{self.interest}"
