"""
Data models for table-search.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Occasion a product is sold for. Member order is section order."""

    BIRTHDAYS = "birthdays"
    WEDDINGS = "weddings"
    FUNERALS = "funerals"

    @property
    def display_name(self) -> str:
        """Display title for section headers and scope buttons."""
        return self.value.capitalize()


class Scope(str, Enum):
    """Category filter selectable alongside a text search."""

    ALL = "all"
    BIRTHDAYS = "birthdays"
    WEDDINGS = "weddings"
    FUNERALS = "funerals"

    @property
    def category(self) -> Category | None:
        """The category this scope restricts to, or None for ALL."""
        if self is Scope.ALL:
            return None
        return Category(self.value)

    @property
    def display_name(self) -> str:
        """Label shown on the scope bar button."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> "Scope":
        """Parse a scope name case-insensitively."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown scope {text!r} (expected one of: {choices})") from None


def scope_titles() -> list[str]:
    """Scope bar labels: All first, then one per category."""
    return [Scope.ALL.display_name] + [c.display_name for c in Category]


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        # str() first so float literals such as 51.99 stay exact
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid price: {value!r}") from None


@dataclass(frozen=True)
class Item:
    """A product in the catalog."""

    name: str
    category: Category
    year_introduced: int
    price: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Item name must be a non-empty string, got {self.name!r}")

        if not isinstance(self.category, Category):
            try:
                category = Category(self.category)
            except ValueError:
                raise ValueError(
                    f"Item {self.name!r} has no valid category: {self.category!r}"
                ) from None
            object.__setattr__(self, "category", category)

        if isinstance(self.year_introduced, bool) or not isinstance(self.year_introduced, int):
            raise ValueError(
                f"Item {self.name!r} year_introduced must be an int, got {self.year_introduced!r}"
            )

        price = _to_decimal(self.price)
        if not price.is_finite() or price < 0:
            raise ValueError(f"Item {self.name!r} price must be non-negative, got {price}")
        object.__setattr__(self, "price", price)

    def formatted_price(self) -> str:
        """Price as shown in list rows, e.g. ``$51.99``."""
        return f"${self.price:.2f}"

    def detail_text(self) -> str:
        """Row subtitle: price and year introduced."""
        return f"{self.formatted_price()} | {self.year_introduced}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for YAML serialization."""
        return {
            "name": self.name,
            "category": self.category.value,
            "year_introduced": self.year_introduced,
            "price": str(self.price),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            category=data["category"],
            year_introduced=data["year_introduced"],
            price=data["price"],
        )
