from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum

"""ValidationError model for cart validation.

A ValidationError describes one problem found in the cart file. Errors are
collected into a list during validation and never raised one by one; the
pipeline turns a non-empty list into a single ValidationFailed exception.

column=-1 is used for row-scoped errors (wrong cell count) where no single
cell is at fault.
"""

__all__ = [
    "ErrorType",
    "ValidationError",
]


class ErrorType(str, Enum):
    """Error classification. Values are the wire strings used in error logs."""
    HEADER = "header"
    ROW = "row"
    CELL = "cell"


@dataclass(frozen=True)
class ValidationError:
    """Structured validation error.

    Attributes:
        type: "header", "row" or "cell"
        row: Index into the raw table (0 = header, 1.. = data rows)
        column: Column index. -1 when the error concerns the whole row
        message: Human readable description
    """
    type: str
    row: int
    column: int  # 行単位のエラーは -1
    message: str

    @staticmethod
    def create(type: str | ErrorType, row: int, column: int, message: str) -> ValidationError:
        """Create a new ValidationError.

        Parameters:
            type: Error classification (ErrorType member or its string value)
            row: Raw table row index
            column: Column index, or -1 for row-level errors
            message: Description shown to the user

        Returns:
            New ValidationError instance
        """
        kind = type.value if isinstance(type, ErrorType) else ErrorType(type).value
        return ValidationError(type=kind, row=row, column=column, message=message)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)

    def to_json_line(self, **context: object) -> str:
        """Serialize to a single JSON line.

        context keys (e.g. timestamp, file) are written first, followed by
        the four error fields. No other keys are added.
        """
        return json.dumps({**context, **asdict(self)}, ensure_ascii=False)
