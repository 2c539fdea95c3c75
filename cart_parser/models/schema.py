from __future__ import annotations

from dataclasses import dataclass

"""Column schema for cart CSV files.

The expected header is fixed (name, price, quantity) but validation functions
receive the schema as an argument instead of reading module state, so a
differently shaped cart only needs another CartSchema instance.
"""

__all__ = [
    "KIND_STRING",
    "KIND_POSITIVE_NUMBER",
    "SchemaColumn",
    "CartSchema",
    "CART_SCHEMA",
]

KIND_STRING = "string"
KIND_POSITIVE_NUMBER = "positive_number"


@dataclass(frozen=True)
class SchemaColumn:
    """A single expected column of the cart file."""
    name: str  # Header text expected at this position
    kind: str = KIND_STRING  # Cell rule applied to data rows


@dataclass(frozen=True)
class CartSchema:
    """Ordered set of expected columns.

    Column order matters: the header row is compared position by position.
    """
    columns: tuple[SchemaColumn, ...]

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def names(self) -> list[str]:
        return [c.name for c in self.columns]


CART_SCHEMA = CartSchema(
    columns=(
        SchemaColumn("Product name", KIND_STRING),
        SchemaColumn("Price", KIND_POSITIVE_NUMBER),
        SchemaColumn("Quantity", KIND_POSITIVE_NUMBER),
    )
)
