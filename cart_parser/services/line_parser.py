from __future__ import annotations

import uuid
from collections.abc import Callable, Sequence

from ..models.line_item import LineItem
from ..table.reader import split_cells

"""Line parsing: one validated data row -> LineItem."""

IdFactory = Callable[[], str]


def new_item_id() -> str:
    """Default identifier source for line items."""
    return str(uuid.uuid4())


def parse_line(line: str | Sequence[str], id_factory: IdFactory = new_item_id) -> LineItem:
    """Convert a data row into a LineItem.

    Args:
        line: Raw CSV line ("Name,13.90,1") or an already split row of 3 cells
        id_factory: Zero-argument callable returning a fresh unique id

    The row is assumed to have passed validation; it is not checked again.
    """
    cells = split_cells(line) if isinstance(line, str) else [c.strip() for c in line]
    name, price, quantity = cells
    return LineItem(
        id=id_factory(),
        name=name,
        price=float(price),
        quantity=float(quantity),
    )
