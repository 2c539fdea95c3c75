from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

"""Order total computation."""


def _field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item[key]
    return getattr(item, key)


def calc_total(items: Iterable[Any]) -> float:
    """Sum of price * quantity over all items (0 for no items).

    Items may be LineItem instances or mappings with "price" and "quantity".
    """
    return sum((_field(i, "price") * _field(i, "quantity") for i in items), 0)
