"""Demo driver: price a basket from the command line.

    python -m verticals.supermarket            # the built-in demo basket
    python -m verticals.supermarket A A A B    # your own scans
"""

import argparse
import sys

from core.observability.logging_setup import configure_logging
from core.pricing import Checkout, UnknownItem
from verticals.supermarket.config import catalog, config

DEMO_BASKET = ["A", "B", "A", "C", "D", "B", "A"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m verticals.supermarket",
        description="Scan items and print the basket total.",
    )
    parser.add_argument(
        "items",
        nargs="*",
        help="Item identifiers to scan, in order (default: %s)" % " ".join(DEMO_BASKET),
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(config.log_level)

    checkout = Checkout(catalog)
    for item in args.items or DEMO_BASKET:
        checkout.scan(item)

    try:
        total = checkout.calculate_total_price()
    except UnknownItem as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Total Price: {total} {config.pricing.currency_unit}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
