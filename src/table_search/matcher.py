"""
Query matching for table-search.

Builds an item predicate from a free-text query and a scope, then filters
a catalog with it. Each space-separated token must match the item by name
(case and diacritic insensitive substring), year introduced, or price.
Tokens are ANDed together; the three clauses inside a token are ORed.

    match(catalog, "Gladiolus 2001")        -> [Gladiolus]
    match(catalog, "red", Scope.FUNERALS)   -> [Poinsettia Red, Red Rose]
"""

import locale
import logging
import re
import unicodedata
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .models import Category, Item, Scope

logger = logging.getLogger(__name__)

Predicate = Callable[[Item], bool]

# Plain decimal literal once locale separators are normalized. No exponents,
# no nan/inf.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

# Lower-case letters that NFD does not decompose, applied after casefold.
_STROKE_LETTERS = str.maketrans(
    {"ø": "o", "ł": "l", "đ": "d", "ħ": "h", "ŧ": "t", "ƀ": "b", "ɨ": "i", "ı": "i"}
)


@dataclass(frozen=True)
class NumberFormat:
    """Decimal and grouping separators used to read numeric tokens."""

    decimal_point: str = "."
    thousands_sep: str = ""

    def __post_init__(self) -> None:
        if not self.decimal_point:
            raise ValueError("decimal_point must not be empty")
        if self.decimal_point == self.thousands_sep:
            raise ValueError(f"decimal_point and thousands_sep are both {self.decimal_point!r}")

    @classmethod
    def from_locale(cls) -> "NumberFormat":
        """Separators of the current process LC_NUMERIC locale."""
        conv = locale.localeconv()
        return cls(
            decimal_point=conv.get("decimal_point") or ".",
            thousands_sep=conv.get("thousands_sep") or "",
        )


# =============================================================================
# Normalization
# =============================================================================


def fold(text: str) -> str:
    """
    Fold text for case- and diacritic-insensitive comparison.

    Decomposes to NFD, drops combining marks, then casefolds, so "Café"
    and "CAFE" both become "cafe". Letters with a stroke rather than a
    combining mark (ø, ł, đ, ...) are mapped to their base letter.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold().translate(_STROKE_LETTERS)


def tokenize(query: str) -> list[str]:
    """Split a query into tokens on single spaces after trimming."""
    stripped = query.strip()
    if not stripped:
        return []
    return [token for token in stripped.split(" ") if token]


def parse_number(token: str, number_format: NumberFormat | None = None) -> Decimal | None:
    """
    Parse a token as a number using locale separators.

    Returns None when the token is not a plain decimal number, which
    disables the year and price clauses for that token.
    """
    fmt = number_format or NumberFormat.from_locale()

    text = token.strip()
    if fmt.thousands_sep:
        text = text.replace(fmt.thousands_sep, "")
    if fmt.decimal_point != ".":
        text = text.replace(fmt.decimal_point, ".")

    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


# =============================================================================
# Predicates
# =============================================================================


def name_contains(token: str) -> Predicate:
    """Item name contains the token, ignoring case and diacritics."""
    needle = fold(token)

    def predicate(item: Item) -> bool:
        return needle in fold(item.name)

    return predicate


def year_equals(number: Decimal) -> Predicate:
    def predicate(item: Item) -> bool:
        return item.year_introduced == number

    return predicate


def price_equals(number: Decimal) -> Predicate:
    def predicate(item: Item) -> bool:
        return item.price == number

    return predicate


def in_category(category: Category) -> Predicate:
    def predicate(item: Item) -> bool:
        return item.category == category

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """True if at least one predicate holds. False when given none."""

    def predicate(item: Item) -> bool:
        return any(p(item) for p in predicates)

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """True if every predicate holds. True when given none."""

    def predicate(item: Item) -> bool:
        return all(p(item) for p in predicates)

    return predicate


def token_predicate(token: str, number_format: NumberFormat | None = None) -> Predicate:
    """Name, year, or price match for a single token."""
    clauses = [name_contains(token)]

    number = parse_number(token, number_format)
    if number is not None:
        clauses.append(year_equals(number))
        clauses.append(price_equals(number))

    return any_of(*clauses)


def build_predicate(
    query: str,
    scope: Scope = Scope.ALL,
    number_format: NumberFormat | None = None,
) -> Predicate:
    """Combine every token predicate and the scope restriction with AND."""
    fmt = number_format or NumberFormat.from_locale()

    parts = [token_predicate(token, fmt) for token in tokenize(query)]
    if scope.category is not None:
        parts.append(in_category(scope.category))

    return all_of(*parts)


# =============================================================================
# Public API
# =============================================================================


def match(
    catalog: Iterable[Item],
    query: str,
    scope: Scope = Scope.ALL,
    number_format: NumberFormat | None = None,
) -> list[Item]:
    """
    Filter a catalog by query and scope, preserving catalog order.

    Args:
        catalog: Items to search
        query: Raw text typed by the user
        scope: Category restriction, ALL for none
        number_format: Separators for numeric tokens (default: current locale)
    """
    predicate = build_predicate(query, scope, number_format)
    results = [item for item in catalog if predicate(item)]

    logger.debug(
        f"Query {query!r} scope={scope.value}: "
        f"{len(tokenize(query))} token(s), {len(results)} match(es)"
    )
    return results


def partition_by_category(catalog: Iterable[Item]) -> dict[Category, list[Item]]:
    """
    Group items by category.

    Every category is present as a key, in section order, even when empty.
    Items keep their catalog order within each group.
    """
    groups: dict[Category, list[Item]] = {category: [] for category in Category}
    for item in catalog:
        groups[item.category].append(item)
    return groups


def results_summary(results: Sequence[Item]) -> str:
    """Header line shown above search results."""
    if not results:
        return "No items found"
    return f"Items found: {len(results)}"
