"""Console demo for the loan engine.

Usage:
    python -m amortizer.cli
    python -m amortizer.cli --principal -15226.29 --apr -0.035 --payment 562.08 --future-value 12
    python -m amortizer.cli --json
"""

import argparse
import logging
import sys
from decimal import Decimal

from amortizer.config import settings
from amortizer.engine.loan import Loan
from amortizer.schemas import ScheduleReport

logger = logging.getLogger(__name__)

# Reference loan: negative balance and rate, payment of 102.87 + 459.21
DEFAULT_PRINCIPAL = Decimal("-15226.29")
DEFAULT_APR = Decimal("-0.035")
DEFAULT_PAYMENT = Decimal("562.08")


def print_report(loan: Loan, periods: int) -> None:
    print(f"Loan: {loan}")
    print(f"Count Payments:{len(loan.amortization_schedule())} Calc Payments:{loan.payment_count()}")
    print(f"Future Value after {periods} payments:{loan.future_value(periods)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixed-payment loan amortization schedule")
    parser.add_argument("--principal", type=Decimal, default=DEFAULT_PRINCIPAL,
                        help=f"Starting balance, negative while owed (default: {DEFAULT_PRINCIPAL})")
    parser.add_argument("--apr", type=Decimal, default=DEFAULT_APR,
                        help=f"Annual rate, same sign as principal (default: {DEFAULT_APR})")
    parser.add_argument("--payment", type=Decimal, default=DEFAULT_PAYMENT,
                        help=f"Fixed monthly payment (default: {DEFAULT_PAYMENT})")
    parser.add_argument("--future-value", type=int, default=settings.future_value_periods,
                        dest="periods", help="Payments to project the balance over")
    parser.add_argument("--json", action="store_true", help="Print the schedule report as JSON")
    parser.add_argument("--log-level", type=str.upper, default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    loan = Loan(args.principal, args.apr, args.payment)
    logger.debug("Loan: principal=%s apr=%s payment=%s", loan.principal, loan.apr, loan.payment)

    try:
        if args.json:
            print(ScheduleReport.from_loan(loan, args.periods).model_dump_json(indent=2))
        else:
            print_report(loan, args.periods)
    except (ArithmeticError, IndexError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
