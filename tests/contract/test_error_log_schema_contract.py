from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from cart_parser.logging.error_log import SCHEMA_PATH, ErrorLogBuffer
from cart_parser.models.validation_error import ValidationError

"""Error log JSON Lines schema contract."""


@pytest.fixture()
def schema() -> dict:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def test_error_log_schema_valid_example(schema):
    record = {
        "timestamp": "2026-10-19T10:12:33Z",
        "file": "cart.csv",
        "type": "cell",
        "row": 1,
        "column": 2,
        "message": 'Expected cell to be a positive number but received "-3".',
    }
    jsonschema.validate(record, schema)


def test_error_log_schema_rejects_extra_key(schema):
    record = {
        "timestamp": "2026-10-19T10:12:33Z",
        "file": "cart.csv",
        "type": "row",
        "row": 1,
        "column": -1,
        "message": "Expected row to have 3 cells but received 2.",
        "extra": "not allowed",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


def test_error_log_schema_rejects_unknown_type(schema):
    record = {
        "timestamp": "2026-10-19T10:12:33Z",
        "file": "cart.csv",
        "type": "sheet",
        "row": 1,
        "column": 0,
        "message": "x",
    }
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(record, schema)


def test_flushed_lines_conform_to_schema(temp_workdir: Path, schema):
    buf = ErrorLogBuffer()
    buf.extend(
        [
            ValidationError.create("header", 0, 2, 'Expected header to be named "Quantity" but received undefined.'),
            ValidationError.create("row", 3, -1, "Expected row to have 3 cells but received 4."),
            ValidationError.create("cell", 1, 0, 'Expected cell to be a nonempty string but received "".'),
        ],
        file="data/cart.csv",
    )
    path = buf.flush()
    for raw in path.read_text(encoding="utf-8").splitlines():
        jsonschema.validate(json.loads(raw), schema)
