from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..models.cart_result import CartResult
from ..models.line_item import LineItem
from ..models.schema import CART_SCHEMA, CartSchema
from ..models.validation_error import ValidationError
from ..table.reader import read_cart_file, split_table
from .aggregator import calc_total
from .line_parser import IdFactory, new_item_id, parse_line
from .validation import validate, validate_table

"""Cart parsing pipeline.

read -> validate (collect every error) -> guard -> parse lines -> total

The guard is the only place a validation problem turns into an exception:
a non-empty error list is logged at ERROR level, one line per error, and
then raised as a single ValidationFailed. No partial result is
returned.
"""

logger = logging.getLogger(__name__)


class ValidationFailed(Exception):
    """Aggregate failure carrying every ValidationError of the input."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__("Validation failed!")


def raise_if_invalid(errors: list[ValidationError]) -> None:
    """Report and raise when errors is non-empty; otherwise do nothing."""
    if not errors:
        return
    for error in errors:
        logger.error(f"{error.type} row={error.row} column={error.column}: {error.message}")
    raise ValidationFailed(errors)


def parse_text(
    text: str, schema: CartSchema = CART_SCHEMA, id_factory: IdFactory = new_item_id
) -> CartResult:
    """Validate and parse cart file text.

    Raises:
        ValidationFailed: when any header, row or cell error is found
    """
    table = split_table(text)
    raise_if_invalid(validate_table(table, schema))

    items = [parse_line(row, id_factory) for row in table[1:]]
    total = calc_total(items)
    logger.debug(f"parsed items={len(items)} total={total}")
    return CartResult(items=items, total=total)


def parse_file(
    path: Path | str, schema: CartSchema = CART_SCHEMA, id_factory: IdFactory = new_item_id
) -> CartResult:
    """Read, validate and parse the cart file at path.

    Raises:
        CartFileError: file cannot be read (raised before validation)
        ValidationFailed: file content is invalid
    """
    text = read_cart_file(path)
    logger.debug(f"read cart file: {path}")
    return parse_text(text, schema, id_factory)


class CartParser:
    """Facade bundling a schema and an id source.

    calc_total and create_error do not depend on instance state and are
    exposed as static methods.
    """

    calc_total = staticmethod(calc_total)
    create_error = staticmethod(ValidationError.create)

    def __init__(self, schema: CartSchema = CART_SCHEMA, id_factory: IdFactory = new_item_id) -> None:
        self.schema = schema
        self.id_factory = id_factory

    def parse(self, path: Path | str) -> CartResult:
        return parse_file(path, self.schema, self.id_factory)

    def parse_text(self, text: str) -> CartResult:
        return parse_text(text, self.schema, self.id_factory)

    def validate(self, text: str) -> list[ValidationError]:
        return validate(text, self.schema)

    def parse_line(self, line: str | Sequence[str]) -> LineItem:
        return parse_line(line, self.id_factory)
