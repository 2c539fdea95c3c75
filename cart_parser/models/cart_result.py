from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .line_item import LineItem

"""CartResult model: terminal output of the parsing pipeline."""

__all__ = [
    "CartResult",
]


@dataclass(frozen=True)
class CartResult:
    """Parsed cart with its order total.

    items keeps the source row order; total is the sum of price * quantity.
    """
    items: list[LineItem] = field(default_factory=list)
    total: float = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
        }
