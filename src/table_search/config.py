"""
Configuration for table-search.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .catalog import load_catalog, sample_catalog
from .matcher import NumberFormat
from .models import Item, Scope


def _require_mapping(value: Any, key: str) -> dict[str, Any]:
    """Return a YAML node as a dict, or raise if it has another shape."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section {key!r} must be a mapping, got {type(value).__name__}")
    return value


@dataclass
class NumberFormatConfig:
    """Separators for numeric search tokens. None means use the locale."""

    decimal_point: str | None = None
    thousands_sep: str | None = None

    def __post_init__(self) -> None:
        for name in ("decimal_point", "thousands_sep"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"number_format.{name} must be a string, got {value!r}")
        if self.decimal_point == "":
            raise ValueError("number_format.decimal_point must not be empty")
        if self.decimal_point is not None and self.decimal_point == self.thousands_sep:
            raise ValueError("number_format.decimal_point and thousands_sep must differ")

    def to_number_format(self) -> NumberFormat:
        """Build a NumberFormat, filling unset separators from the locale."""
        from_locale = NumberFormat.from_locale()
        return NumberFormat(
            decimal_point=(
                self.decimal_point if self.decimal_point is not None else from_locale.decimal_point
            ),
            thousands_sep=(
                self.thousands_sep if self.thousands_sep is not None else from_locale.thousands_sep
            ),
        )


@dataclass
class SearchConfig:
    """Complete table-search configuration."""

    catalog_path: Path | None = None  # None: built-in sample catalog
    default_scope: Scope = Scope.ALL
    number_format: NumberFormatConfig = field(default_factory=NumberFormatConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchConfig":
        """Create config from a dictionary (e.g., from YAML)."""
        config = cls()
        data = _require_mapping(data, "table_search")

        if data.get("catalog_path"):
            config.catalog_path = Path(data["catalog_path"])
        if "default_scope" in data:
            config.default_scope = Scope.parse(str(data["default_scope"]))

        if "number_format" in data:
            nf = _require_mapping(data["number_format"], "number_format")
            config.number_format = NumberFormatConfig(
                decimal_point=nf.get("decimal_point"),
                thousands_sep=nf.get("thousands_sep"),
            )

        return config

    @classmethod
    def from_yaml(cls, path: Path) -> "SearchConfig":
        """Load config from the ``table_search`` section of a YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        data = _require_mapping(data, "<root>")
        config = cls.from_dict(_require_mapping(data.get("table_search"), "table_search"))

        # Relative catalog paths are resolved against the config file
        if config.catalog_path and not config.catalog_path.is_absolute():
            config.catalog_path = path.parent / config.catalog_path

        return config

    def load_catalog(self) -> list[Item]:
        """The configured catalog, or the sample catalog if none is set."""
        if self.catalog_path is None:
            return sample_catalog()
        return load_catalog(self.catalog_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "catalog_path": str(self.catalog_path) if self.catalog_path else None,
            "default_scope": self.default_scope.value,
            "number_format": {
                "decimal_point": self.number_format.decimal_point,
                "thousands_sep": self.number_format.thousands_sep,
            },
        }
