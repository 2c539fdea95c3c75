"""Validation, parsing and aggregation services."""
