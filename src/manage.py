"""Storefront database management CLI.

Provides commands to create and drop the database schema and to load
sample catalogue data.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load sample categories and products
"""

import argparse
import sys


def _storefront():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    """Create the database schema for every SQL-backed aggregate."""
    from storefront.utils.db import setup_db

    storefront = _storefront()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("Done.")


def drop_database():
    """Drop the database schema."""
    from storefront.utils.db import drop_db

    storefront = _storefront()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("Done.")


def seed_database(products_per_category):
    from storefront.utils.seed import seed

    storefront = _storefront()
    with storefront.domain_context():
        counts = seed(products_per_category)
    print(f"Seeded {counts['categories']} categories and {counts['products']} products.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load sample categories and products")
    seed_parser.add_argument(
        "--products-per-category",
        type=int,
        default=5,
        help="Number of products to create in each leaf category (default: 5)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database(args.products_per_category)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
