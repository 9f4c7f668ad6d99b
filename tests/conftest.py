"""Shared pytest fixtures for table-search tests."""

import pytest

from table_search.catalog import sample_catalog
from table_search.matcher import NumberFormat
from table_search.models import Category, Item


@pytest.fixture
def catalog():
    """The built-in flower catalog."""
    return sample_catalog()


@pytest.fixture
def ginger():
    return Item("Ginger", Category.BIRTHDAYS, 2007, "49.98")


@pytest.fixture
def gladiolus():
    return Item("Gladiolus", Category.BIRTHDAYS, 2001, "51.99")


@pytest.fixture
def dot_format():
    """Period decimals, no grouping, independent of the test machine's locale."""
    return NumberFormat(decimal_point=".", thousands_sep="")


@pytest.fixture
def comma_format():
    """Comma decimals with period grouping, as in de_DE."""
    return NumberFormat(decimal_point=",", thousands_sep=".")
