"""
main.py
-------
Command-line entry point for the LightBnB data layer.

Usage:
    python main.py init-db
    python main.py search --city van --min-price 50 --max-price 150 --limit 5
    python main.py reservations 1
"""

import argparse
import sys

from db.connection import init_pool, close_pool
from db.init_db import create_tables
from services.property_service import PropertyService
from services.reservation_service import ReservationService
from utils.exceptions import RepositoryError
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LightBnB database tools")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the schema if it does not exist")

    search = sub.add_parser("search", help="Search properties, cheapest first")
    search.add_argument("--city")
    search.add_argument("--owner-id", dest="owner_id")
    search.add_argument("--min-price", dest="minimum_price_per_night", help="Dollars per night")
    search.add_argument("--max-price", dest="maximum_price_per_night", help="Dollars per night")
    search.add_argument("--min-rating", dest="minimum_rating")
    search.add_argument("--limit", type=int)

    reservations = sub.add_parser("reservations", help="List a guest's reservations")
    reservations.add_argument("guest_id", type=int)
    reservations.add_argument("--limit", type=int)

    return parser


def run(args: argparse.Namespace) -> None:
    if args.command == "init-db":
        create_tables()
        return

    if args.command == "search":
        query = {
            key: value for key, value in vars(args).items()
            if key not in ("command", "limit") and value is not None
        }
        for prop in PropertyService().search(query, args.limit):
            print(prop)
        return

    if args.command == "reservations":
        for reservation in ReservationService().for_guest(args.guest_id, args.limit):
            print(reservation)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the command, and return the exit code."""
    args = build_parser().parse_args(argv)

    init_pool()
    try:
        run(args)
    except RepositoryError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        close_pool()
    return 0


if __name__ == "__main__":
    sys.exit(main())
