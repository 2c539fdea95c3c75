from __future__ import annotations

import logging

from ..models.schema import CART_SCHEMA, KIND_POSITIVE_NUMBER, KIND_STRING, CartSchema
from ..models.validation_error import ErrorType, ValidationError
from ..table.reader import RawTable, split_table
from .cell_rules import is_nonempty_string, is_positive_number

"""Cart file validation.

Validation is a pure collection pass: every problem in the file is gathered
into a list and nothing is raised here. Order of the result:

1. header errors, in column order
2. row shape errors, in row order
3. cell errors of well-shaped rows, row by row then column by column

Rows with the wrong number of cells are skipped during cell validation.
"""

logger = logging.getLogger(__name__)

# A missing header cell is rendered bare, unlike data cells which are quoted.
MISSING_HEADER_CELL = "undefined"

_CELL_RULES = {
    KIND_STRING: (is_nonempty_string, "a nonempty string"),
    KIND_POSITIVE_NUMBER: (is_positive_number, "a positive number"),
}


def header_error(column: int, expected: str, received: str) -> ValidationError:
    return ValidationError.create(
        ErrorType.HEADER,
        0,
        column,
        f'Expected header to be named "{expected}" but received {received}.',
    )


def row_error(row: int, expected_cells: int, received_cells: int) -> ValidationError:
    return ValidationError.create(
        ErrorType.ROW,
        row,
        -1,
        f"Expected row to have {expected_cells} cells but received {received_cells}.",
    )


def cell_error(row: int, column: int, description: str, received: str) -> ValidationError:
    return ValidationError.create(
        ErrorType.CELL,
        row,
        column,
        f'Expected cell to be {description} but received "{received}".',
    )


def validate_header(header: list[str], schema: CartSchema = CART_SCHEMA) -> list[ValidationError]:
    """Compare the header row with the schema column names, position by position.

    Cells beyond the schema width are not inspected.
    """
    errors: list[ValidationError] = []
    for i, column in enumerate(schema.columns):
        actual = header[i].strip() if i < len(header) else None
        if actual != column.name:
            received = actual if actual is not None else MISSING_HEADER_CELL
            errors.append(header_error(i, column.name, received))
    return errors


def validate_row_shape(
    row: list[str], row_index: int, schema: CartSchema = CART_SCHEMA
) -> ValidationError | None:
    if len(row) != schema.width:
        return row_error(row_index, schema.width, len(row))
    return None


def validate_cells(
    row: list[str], row_index: int, schema: CartSchema = CART_SCHEMA
) -> list[ValidationError]:
    """Apply each column's cell rule to a row already known to have the right width."""
    errors: list[ValidationError] = []
    for i, (column, raw) in enumerate(zip(schema.columns, row, strict=True)):
        try:
            check, description = _CELL_RULES[column.kind]
        except KeyError as e:
            raise ValueError(f"unknown column kind '{column.kind}' for column '{column.name}'") from e
        cell = raw.strip()
        if not check(cell):
            errors.append(cell_error(row_index, i, description, cell))
    return errors


def validate_table(table: RawTable, schema: CartSchema = CART_SCHEMA) -> list[ValidationError]:
    header = table[0] if table else []
    errors = validate_header(header, schema)

    well_shaped: list[tuple[int, list[str]]] = []
    for row_index, row in enumerate(table[1:], start=1):
        shape_error = validate_row_shape(row, row_index, schema)
        if shape_error is not None:
            errors.append(shape_error)
        else:
            well_shaped.append((row_index, row))

    for row_index, row in well_shaped:
        errors.extend(validate_cells(row, row_index, schema))

    logger.debug(f"validated rows={max(len(table) - 1, 0)} errors={len(errors)}")
    return errors


def validate(text: str, schema: CartSchema = CART_SCHEMA) -> list[ValidationError]:
    """Validate cart file text. Returns an empty list for conformant input."""
    return validate_table(split_table(text), schema)
