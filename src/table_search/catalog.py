"""
Catalog data for table-search.

Provides the built-in sample catalog, section/row lookup over the
category-grouped list, and YAML loading so a catalog can be supplied
from configuration instead.
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml

from .matcher import partition_by_category
from .models import Category, Item

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """A catalog file could not be turned into items."""


def sample_catalog() -> list[Item]:
    """The flower catalog shipped with the app, grouped by category."""
    return [
        Item("Ginger", Category.BIRTHDAYS, 2007, "49.98"),
        Item("Gladiolus", Category.BIRTHDAYS, 2001, "51.99"),
        Item("Orchid", Category.BIRTHDAYS, 2007, "16.99"),
        Item("Geranium", Category.BIRTHDAYS, 2006, "16.99"),
        Item("Daisy", Category.BIRTHDAYS, 2006, "16.99"),
        Item("Tulip", Category.WEDDINGS, 1997, "39.99"),
        Item("Carnation Red", Category.WEDDINGS, 2006, "23.99"),
        Item("Carnation White", Category.WEDDINGS, 2007, "23.99"),
        Item("Sunflower", Category.WEDDINGS, 2008, "25.00"),
        Item("Gardenia", Category.WEDDINGS, 2006, "25.00"),
        Item("Daffodil", Category.WEDDINGS, 2008, "24.99"),
        Item("Poinsettia Red", Category.FUNERALS, 2010, "31.99"),
        Item("Poinsettia Pink", Category.FUNERALS, 2011, "31.99"),
        Item("Red Rose", Category.FUNERALS, 2010, "24.99"),
        Item("White Rose", Category.FUNERALS, 2012, "24.99"),
    ]


def section_titles() -> list[str]:
    """Section headers of the grouped list, in category order."""
    return [category.display_name for category in Category]


def quantity(catalog: Sequence[Item], category: Category) -> int:
    """Number of items in a category."""
    return sum(1 for item in catalog if item.category == category)


def item_at(catalog: Sequence[Item], section: int, row: int) -> Item:
    """
    Resolve a position in the sectioned list to an item.

    Sections follow category order; rows follow catalog order within the
    section.

    Raises:
        IndexError: If the section or row does not exist
    """
    categories = list(Category)
    if not 0 <= section < len(categories):
        raise IndexError(f"No section {section} (have {len(categories)})")

    rows = partition_by_category(catalog)[categories[section]]
    if not 0 <= row < len(rows):
        raise IndexError(f"No row {row} in section {section} (have {len(rows)})")
    return rows[row]


# =============================================================================
# YAML catalog files
# =============================================================================


def _parse_items(entries: Any) -> list[Item]:
    if not isinstance(entries, list):
        raise CatalogError("Catalog 'items' must be a list")

    items = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog entry {index} is not a mapping")
        try:
            items.append(Item.from_dict(entry))
        except KeyError as e:
            raise CatalogError(f"Catalog entry {index} is missing field {e.args[0]!r}") from e
        except ValueError as e:
            raise CatalogError(f"Catalog entry {index}: {e}") from e
    return items


def load_catalog(path: Path) -> list[Item]:
    """
    Load a catalog from a YAML file.

    Expected format:

        items:
          - name: Ginger
            category: birthdays
            year_introduced: 2007
            price: "49.98"
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog file {path} must contain a mapping")

    items = _parse_items(data.get("items", []))
    logger.info(f"Loaded {len(items)} item(s) from {path}")
    return items


def dump_catalog(catalog: Sequence[Item], path: Path) -> None:
    """Write a catalog in the format read by load_catalog()."""
    data = {"items": [item.to_dict() for item in catalog]}
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)
