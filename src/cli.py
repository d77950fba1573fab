"""Командная строка калькулятора заработка.

Пример:
    earnings-ticker --salary 30000 --currency INR --once
    earnings-ticker --salary 120000 --yearly --currency USD --export earnings.csv
    earnings-ticker --prefs ~/.earnings.json          # live, Ctrl+C для выхода
"""

import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from src.core.domain.currency import CURRENCIES
from src.core.domain.earnings import EarningsBreakdown
from src.core.domain.salary import SalaryPeriod
from src.core.math.numerical_safeguards import is_valid_float
from src.gatekeeper.salary_gate import parse_amount
from src.presentation.formatting import render_breakdown
from src.presentation.preferences import InMemoryStorage, JsonFileStorage, PreferencesStore
from src.presentation.session import EarningsSession
from src.ticker.scheduler import TickerConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False) -> None:
    """Логирование в stderr: WARNING по умолчанию, DEBUG с --debug."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
    )


def positive_float(raw: str) -> float:
    """Тип argparse: конечное число > 0."""
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
    if not is_valid_float(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {raw}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="earnings-ticker",
        description="Real-time earnings breakdown from a monthly or yearly salary.",
    )
    parser.add_argument("--salary", help="Salary amount (monthly unless --yearly)")
    parser.add_argument("--yearly", action="store_true", help="Treat the salary as yearly")
    parser.add_argument("--monthly", action="store_true", help="Treat the salary as monthly")
    parser.add_argument("--currency", choices=list(CURRENCIES), help="Currency code")
    parser.add_argument("--once", action="store_true", help="Print one breakdown and exit")
    parser.add_argument("--export", metavar="PATH", help="Write the breakdown as CSV to PATH")
    parser.add_argument("--prefs", metavar="PATH", help="JSON file for saved preferences")
    parser.add_argument(
        "--interval", type=positive_float, default=1.0, help="Refresh interval, seconds"
    )
    parser.add_argument("--reset", action="store_true", help="Reset saved preferences first")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def format_rows(breakdown: EarningsBreakdown, currency_code: str) -> str:
    rows = render_breakdown(breakdown, currency_code)
    width = max(len(row.label) for row in rows)
    return "\n".join(f"{row.label:<{width}}  {row.text}" for row in rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    storage = JsonFileStorage(args.prefs) if args.prefs else InMemoryStorage()
    session = EarningsSession(store=PreferencesStore(storage))

    if args.reset:
        session.reset()
    period = None
    if args.yearly:
        period = SalaryPeriod.YEARLY
    elif args.monthly:
        period = SalaryPeriod.MONTHLY
    amount = parse_amount(args.salary) if args.salary is not None else None
    if amount is not None or period is not None or args.currency:
        session.set_input(amount=amount, period=period, currency_code=args.currency)

    if session.error:
        print(f"Invalid salary: {session.error}", file=sys.stderr)
        return 2

    breakdown = session.refresh()
    if args.export:
        path = session.export_to_file(args.export)
        print(f"Exported earnings breakdown to {path}")

    if args.once or args.export:
        print(format_rows(breakdown, session.currency_code))
        return 0

    def _redraw(current: Optional[EarningsBreakdown]) -> None:
        if current is not None:
            print("\033[2J\033[H" + format_rows(current, session.currency_code), flush=True)

    handle = session.start_ticking(_redraw, TickerConfig(interval_sec=args.interval))
    with handle:
        try:
            while handle.is_alive():
                time.sleep(0.2)
        except KeyboardInterrupt:
            logger.debug("Interrupted, stopping ticker")
    return 0


if __name__ == "__main__":
    sys.exit(main())
