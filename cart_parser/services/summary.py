from __future__ import annotations

from ..models.cart_result import CartResult
from ..models.validation_error import ValidationError

"""SUMMARY line rendering.

Formats:
    SUMMARY items={count} total={total:.2f}
    SUMMARY items=0 errors={count}
"""


def render_summary_line(result: CartResult) -> str:
    """Render the SUMMARY line for a parsed cart.

    Examples:
        >>> from cart_parser.models.line_item import LineItem
        >>> render_summary_line(CartResult(items=[LineItem("a", "x", 2.5, 2)], total=5.0))
        'SUMMARY items=1 total=5.00'
    """
    return f"SUMMARY items={len(result.items)} total={result.total:.2f}"


def render_failure_line(errors: list[ValidationError]) -> str:
    return f"SUMMARY items=0 errors={len(errors)}"
