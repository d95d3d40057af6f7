"""Utility modules for loan agreement auditing."""

from .parsing import (
    clamp,
    parse_boolean,
    parse_integer,
    parse_number,
)

__all__ = [
    "clamp",
    "parse_boolean",
    "parse_integer",
    "parse_number",
]
