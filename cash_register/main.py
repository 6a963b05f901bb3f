"""Command-line cash register.

Scans the given items against a JSON product catalog, prints the receipt
to stdout and finalizes the transaction.

    cash-register --catalog data/products.json 9234@+1 1234 1234 7687@2026-10-20
"""

import argparse
import sys
from datetime import date, timedelta
from typing import Optional

import structlog

from .adapters import ConsoleDisplay, InMemoryCatalog, RecordingSalesService, StreamPrinter
from .clock import FixedClock, SystemClock
from .config import RegisterConfig
from .errors import CatalogError, RegisterError, errmsg
from .logs import LOG_FORMATS, LOG_LEVELS, configure_logging
from .register import CashRegister

logger = structlog.get_logger()


def parse_item(item: str, today: date) -> tuple:
    """Parse BARCODE[@BEST_BEFORE] into (barcode, best_before or None).

    BEST_BEFORE is an ISO date or a signed day offset from today.
    """
    barcode_text, sep, best_before_text = item.partition("@")
    try:
        barcode = int(barcode_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{errmsg.INVALID_ITEM}: {item}") from None

    if not sep:
        return barcode, None

    try:
        if best_before_text.lstrip("+-").isdigit():
            return barcode, today + timedelta(days=int(best_before_text))
        return barcode, date.fromisoformat(best_before_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{errmsg.INVALID_ITEM}: {item}") from None


def build_parser(config: RegisterConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cash-register",
        description="Scan items, print the receipt and finalize the sale.",
    )
    parser.add_argument(
        "--catalog",
        default=config.catalog_path,
        required=config.catalog_path is None,
        help="JSON product catalog (env: REGISTER_CATALOG)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=config.today,
        help="Pin the register date, YYYY-MM-DD (env: REGISTER_TODAY)",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=config.log_level)
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=config.log_format)
    parser.add_argument("items", nargs="*", metavar="BARCODE[@BEST_BEFORE]")
    return parser


def run(argv: Optional[list] = None, config: Optional[RegisterConfig] = None) -> int:
    if config is None:
        try:
            config = RegisterConfig.from_env()
        except ValueError as e:
            build_parser(RegisterConfig()).error(str(e))

    parser = build_parser(config)
    args = parser.parse_args(argv)

    # argparse only checks choices for values given on the command line
    if args.log_level not in LOG_LEVELS:
        parser.error(f"{errmsg.INVALID_SETTING}: log level {args.log_level!r}")
    if args.log_format not in LOG_FORMATS:
        parser.error(f"{errmsg.INVALID_SETTING}: log format {args.log_format!r}")

    configure_logging(args.log_level, args.log_format)

    clock = FixedClock(args.today) if args.today else SystemClock()
    today = clock.today()
    try:
        items = [parse_item(item, today) for item in args.items]
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        catalog = InMemoryCatalog.load(args.catalog)
    except CatalogError as e:
        logger.error("catalog_failed", path=args.catalog, reason=str(e))
        return 1

    sales_service = RecordingSalesService()
    register = CashRegister(
        clock=clock,
        printer=StreamPrinter(sys.stdout),
        display=ConsoleDisplay(sys.stderr),
        sales_service=sales_service,
        catalog=catalog,
    )

    try:
        for barcode, best_before in items:
            product = register.scan(barcode)
            if product.perishable and best_before is not None:
                register.correct_sales_price(best_before)
    except RegisterError as e:
        logger.error("transaction_aborted", reason=str(e))
        return 1

    register.print_receipt()
    register.finalize_sales_transaction()
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
