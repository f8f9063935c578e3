"""Print a priced receipt for a basket file.

Usage:
    supermarket-receipt basket.json
    supermarket-receipt basket.json --columns 32 --log-level DEBUG
"""

import argparse
import sys
from typing import Optional, Sequence

import structlog

from .config import configure_logging, load_settings
from .errors import ReceiptError
from .loader import load_basket
from .pricing import check_out
from .receipt_printer import ReceiptPrinter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="supermarket-receipt",
        description="Price a shopping cart against a catalog and its special offers",
    )
    parser.add_argument("basket", help="Path to a basket JSON file (products, offers, cart)")
    parser.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Receipt width in characters (default: RECEIPT_COLUMNS or 40)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level written to stderr (default: LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    columns = args.columns if args.columns is not None else settings.receipt_columns
    if columns <= 0:
        print("Error: --columns must be positive", file=sys.stderr)
        return 2

    try:
        configure_logging(args.log_level or settings.log_level, settings.log_format)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log = structlog.get_logger(__name__).bind(basket=args.basket)

    try:
        basket = load_basket(args.basket)
        receipt = check_out(basket.cart, basket.catalog, basket.offers)
    except ReceiptError as e:
        log.error("checkout_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(ReceiptPrinter(columns).print_receipt(receipt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
