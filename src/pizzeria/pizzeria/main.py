"""CLI entry point: print receipts for the orders in an order book.

Usage:
    python -m pizzeria.main
    python -m pizzeria.main --order "Meal Deal" --orders path/to/orders.json
"""

import argparse

from loguru import logger

from .config import get_settings
from .logging import setup_logging
from .orders import OrderBook
from .receipt import render_receipt


def main(argv: list[str] | None = None) -> int:
    """Print one receipt per order. Returns the process exit code."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Print pizza order receipts")
    parser.add_argument(
        "--orders",
        default=settings.orders_json_path,
        help="Path to an order book JSON file",
    )
    parser.add_argument("--order", help="Only print the order with this name")
    args = parser.parse_args(argv)

    setup_logging(level=settings.log_level, log_to_file=settings.log_to_file)

    book = OrderBook.from_json_file(args.orders)
    logger.info("Order book loaded: {} ({} orders)", args.orders, len(book.orders))

    if args.order is None:
        specs = book.orders
    else:
        try:
            specs = [book.get(args.order)]
        except KeyError:
            logger.error("Unknown order {!r}; available: {}", args.order, ", ".join(book.names()))
            return 1

    print("🍕 WELCOME TO PIZZA ORDERING SYSTEM")
    for spec in specs:
        pizza = spec.build()
        print()
        print(f"Order: {spec.name}")
        print(render_receipt(pizza))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
