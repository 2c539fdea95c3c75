"""Shopping cart CSV validator and parser."""

from .models import CART_SCHEMA, CartResult, CartSchema, LineItem, SchemaColumn, ValidationError
from .services.pipeline import CartParser, ValidationFailed, parse_file, parse_text
from .table.reader import CartFileError

__all__ = [
    "CART_SCHEMA",
    "CartFileError",
    "CartParser",
    "CartResult",
    "CartSchema",
    "LineItem",
    "SchemaColumn",
    "ValidationError",
    "ValidationFailed",
    "parse_file",
    "parse_text",
]
