"""Tests for table-search data models."""

from decimal import Decimal

import pytest

from table_search.models import Category, Item, Scope, scope_titles


class TestItem:
    """Test Item construction and validation."""

    def test_price_is_exact_decimal(self):
        """Float prices should become their literal decimal value."""
        item = Item("Gladiolus", Category.BIRTHDAYS, 2001, 51.99)
        assert item.price == Decimal("51.99")

    def test_category_string_is_coerced(self):
        """A category value string should become the enum member."""
        item = Item("Tulip", "weddings", 1997, "39.99")
        assert item.category is Category.WEDDINGS

    def test_items_are_immutable(self):
        """Items should reject attribute assignment."""
        item = Item("Tulip", Category.WEDDINGS, 1997, "39.99")
        with pytest.raises(AttributeError):
            item.name = "Rose"

    def test_structural_equality(self):
        """Items with the same fields should compare equal."""
        a = Item("Tulip", Category.WEDDINGS, 1997, "39.99")
        b = Item("Tulip", Category.WEDDINGS, 1997, Decimal("39.99"))
        assert a == b
        assert hash(a) == hash(b)

    def test_missing_category_rejected(self):
        """An item without a category is a contract violation."""
        with pytest.raises(ValueError, match="category"):
            Item("Tulip", None, 1997, "39.99")

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError, match="category"):
            Item("Tulip", "graduations", 1997, "39.99")

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Item("Tulip", Category.WEDDINGS, 1997, "-1")

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValueError, match="Invalid price"):
            Item("Tulip", Category.WEDDINGS, 1997, "cheap")

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="name"):
            Item("", Category.WEDDINGS, 1997, "39.99")

    def test_non_int_year_rejected(self):
        with pytest.raises(ValueError, match="year_introduced"):
            Item("Tulip", Category.WEDDINGS, "1997", "39.99")

    def test_detail_text(self):
        """Row subtitle should show price then year."""
        item = Item("Sunflower", Category.WEDDINGS, 2008, "25")
        assert item.formatted_price() == "$25.00"
        assert item.detail_text() == "$25.00 | 2008"

    def test_from_dict(self):
        item = Item.from_dict(
            {"name": "Daisy", "category": "birthdays", "year_introduced": 2006, "price": 16.99}
        )
        assert item == Item("Daisy", Category.BIRTHDAYS, 2006, "16.99")

    def test_to_dict(self):
        data = Item("Daisy", Category.BIRTHDAYS, 2006, "16.99").to_dict()
        assert data == {
            "name": "Daisy",
            "category": "birthdays",
            "year_introduced": 2006,
            "price": "16.99",
        }


class TestScope:
    """Test Scope and its relation to Category."""

    def test_all_has_no_category(self):
        assert Scope.ALL.category is None

    def test_category_scopes(self):
        """Every non-ALL scope should map to the category of the same name."""
        assert Scope.BIRTHDAYS.category is Category.BIRTHDAYS
        assert Scope.WEDDINGS.category is Category.WEDDINGS
        assert Scope.FUNERALS.category is Category.FUNERALS

    def test_parse_case_insensitive(self):
        assert Scope.parse(" Funerals ") is Scope.FUNERALS

    def test_parse_unknown(self):
        """Should list valid choices in the error."""
        with pytest.raises(ValueError, match="birthdays"):
            Scope.parse("holidays")

    def test_scope_titles_derived_from_enums(self):
        assert scope_titles() == ["All", "Birthdays", "Weddings", "Funerals"]
