from __future__ import annotations

from cart_parser.models.line_item import LineItem
from cart_parser.services.line_parser import new_item_id, parse_line


def test_parse_line_returns_item_with_id_price_quantity_and_name():
    item = parse_line("Condimentum aliquet,13.90,1")

    assert item.id
    assert item.price == 13.9
    assert item.quantity == 1
    assert item.name == "Condimentum aliquet"


def test_parse_line_uses_injected_id_factory():
    item = parse_line("Condimentum aliquet,13.90,1", id_factory=lambda: "fixed-id")
    assert item == LineItem(id="fixed-id", name="Condimentum aliquet", price=13.9, quantity=1.0)


def test_parse_line_accepts_split_row_and_trims():
    item = parse_line(["  Mollis consequat ", " 9.00", "2 "], id_factory=lambda: "x")
    assert item.name == "Mollis consequat"
    assert item.price == 9.0
    assert item.quantity == 2.0


def test_parse_line_generates_fresh_ids():
    first = parse_line("A,1,1")
    second = parse_line("A,1,1")
    assert first.id != second.id


def test_new_item_id_is_unique_string():
    ids = {new_item_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(isinstance(i, str) and i for i in ids)
