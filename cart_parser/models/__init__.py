"""Domain models for the cart parser.

This package contains the value objects passed between the validation,
parsing and aggregation stages.
"""

from .cart_result import CartResult
from .line_item import LineItem
from .schema import CART_SCHEMA, KIND_POSITIVE_NUMBER, KIND_STRING, CartSchema, SchemaColumn
from .validation_error import ErrorType, ValidationError

__all__ = [
    # Schema
    "CART_SCHEMA",
    "KIND_POSITIVE_NUMBER",
    "KIND_STRING",
    "CartSchema",
    "SchemaColumn",
    # Validation
    "ErrorType",
    "ValidationError",
    # Parsing output
    "CartResult",
    "LineItem",
]
