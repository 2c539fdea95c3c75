from __future__ import annotations

import json

import pytest

from cart_parser.models.validation_error import ErrorType, ValidationError
from cart_parser.services.pipeline import CartParser

"""Unit tests for the ValidationError model and its factory."""


def test_create_row_scoped_error_uses_minus_one_column():
    err = ValidationError.create(
        type="row",
        row=3,
        column=-1,
        message="Expected row to have 3 cells but received 2.",
    )

    assert err.type == "row"
    assert err.row == 3
    assert err.column == -1
    assert err.message == "Expected row to have 3 cells but received 2."


def test_create_accepts_error_type_member():
    err = ValidationError.create(ErrorType.HEADER, 0, 1, "msg")
    assert err.type == "header"
    assert err == ValidationError(type="header", row=0, column=1, message="msg")


def test_create_rejects_unknown_type():
    with pytest.raises(ValueError):
        ValidationError.create("sheet", 1, 1, "msg")


def test_to_json_line_has_fixed_keys():
    err = ValidationError.create("cell", 1, 2, 'Expected cell to be a positive number but received "-3".')
    data = json.loads(err.to_json_line())
    assert set(data.keys()) == {"type", "row", "column", "message"}
    assert data["column"] == 2
    assert data["message"].endswith('"-3".')


def test_to_json_line_puts_context_first():
    err = ValidationError.create("row", 2, -1, "Expected row to have 3 cells but received 4.")
    line = err.to_json_line(timestamp="2026-10-19T10:12:33Z", file="cart.csv")
    assert list(json.loads(line).keys()) == ["timestamp", "file", "type", "row", "column", "message"]


def test_validation_error_immutability():
    err = ValidationError.create("cell", 1, 0, "msg")
    with pytest.raises(AttributeError):
        err.row = 2
    with pytest.raises(AttributeError):
        err.message = "other"


def test_create_error_on_parser_describes_error():
    err = CartParser.create_error(
        "header", 1, 1, 'Expected header to be named "Quantity" but received undefined.'
    )
    for attr in ("type", "row", "column", "message"):
        assert hasattr(err, attr)
