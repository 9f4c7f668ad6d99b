"""
CLI runner for table-search.

Usage:
    python -m table_search.run [OPTIONS] [QUERY ...]

    # Search the sample catalog
    python -m table_search.run gladiolus 2001

    # Narrow to one category
    python -m table_search.run --scope funerals red

    # Show the sectioned list with per-category counts
    python -m table_search.run --sections
"""

import argparse
import contextlib
import locale
import logging
import sys
from pathlib import Path

import yaml

from .catalog import CatalogError, load_catalog
from .config import SearchConfig
from .matcher import match, partition_by_category, results_summary
from .models import Item, Scope

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("table-search")


def format_row(item: Item) -> str:
    return f"{item.name}  {item.detail_text()}"


def print_sections(catalog: list[Item]) -> None:
    """Print the catalog grouped by category, one header per section."""
    for category, items in partition_by_category(catalog).items():
        print(f"{category.display_name} ({len(items)})")
        for item in items:
            print(f"  {format_row(item)}")


def print_results(results: list[Item]) -> None:
    print(results_summary(results))
    for item in results:
        print(f"  {format_row(item)}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="table-search: Filter a product catalog by text and category",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Every item named like "rose"
    python -m table_search.run rose

    # Items introduced in 2007 or priced at 2007
    python -m table_search.run 2007

    # Use a catalog file
    python -m table_search.run --catalog flowers.yaml --scope weddings
        """,
    )

    parser.add_argument(
        "query",
        nargs="*",
        help="Search words; every word must match an item's name, year, or price",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("table_search.yaml"),
        help="Path to config file (default: table_search.yaml)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Override catalog file from config",
    )
    parser.add_argument(
        "--scope",
        choices=[scope.value for scope in Scope],
        help="Restrict results to one category (default: from config, else all)",
    )
    parser.add_argument(
        "--sections",
        action="store_true",
        help="List the catalog grouped by category instead of searching",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Numeric tokens follow the user's locale
    with contextlib.suppress(locale.Error):
        locale.setlocale(locale.LC_NUMERIC, "")

    try:
        config = SearchConfig.from_yaml(args.config)
        number_format = config.number_format.to_number_format()
    except (ValueError, OSError, yaml.YAMLError) as e:
        logger.error(f"Could not load config {args.config}: {e}")
        return 1
    logger.debug(f"Config: {config.to_dict()}")

    try:
        catalog = load_catalog(args.catalog) if args.catalog else config.load_catalog()
    except FileNotFoundError as e:
        logger.error(f"Catalog not found: {e.filename}")
        return 1
    except CatalogError as e:
        logger.error(f"Invalid catalog: {e}")
        return 1

    if args.sections:
        print_sections(catalog)
        return 0

    scope = Scope(args.scope) if args.scope else config.default_scope
    query = " ".join(args.query)
    results = match(catalog, query, scope, number_format)
    print_results(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
