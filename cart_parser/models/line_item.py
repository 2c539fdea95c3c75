from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

"""LineItem model.

One LineItem is produced per validated data row of the cart file.
"""

__all__ = [
    "LineItem",
]


@dataclass(frozen=True)
class LineItem:
    """Typed representation of a single cart row."""
    id: str  # Unique per item, format is opaque
    name: str
    price: float  # > 0, finite
    quantity: float  # > 0, finite

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
