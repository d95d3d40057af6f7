"""Lenient parsing of user and model supplied scalar values.

Slack inputs are free-form text typed by an analyst and payload scalars
come from a probabilistic model, so these helpers accept the common
spellings of numbers and booleans and report failure instead of raising
where the caller needs a neutral state.
"""

import math
import re
from typing import Any, Optional

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_GROUPED_RE = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$")


def parse_number(value: Any) -> Optional[float]:
    """Parse a decimal number, returning None when it is not one.

    Accepts ints and floats, and strings with surrounding whitespace,
    comma thousands separators in groups of three and a trailing
    multiple marker ("3.5x").
    Booleans, empty strings and non-finite values are rejected.
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None

    cleaned = str(value).strip().replace(" ", "")
    if cleaned[-1:] in ("x", "X"):
        cleaned = cleaned[:-1]

    if "," in cleaned:
        # Commas only as thousands separators: "1,250,000" but not "3,5"
        if not _GROUPED_RE.match(cleaned):
            return None
        cleaned = cleaned.replace(",", "")

    if not _NUMBER_RE.match(cleaned):
        return None
    number = float(cleaned)
    return number if math.isfinite(number) else None


def parse_integer(value: Any) -> Optional[int]:
    """Parse an integral score such as ``82``, ``82.0`` or ``"82"``."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value

    number = parse_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_boolean(value: Any) -> Optional[bool]:
    """Parse a boolean value, returning None when unrecognised."""
    if isinstance(value, bool):
        return value

    str_val = str(value).lower().strip()
    truthy = {"true", "yes", "y", "1"}
    falsy = {"false", "no", "n", "0"}

    if str_val in truthy:
        return True
    if str_val in falsy:
        return False
    return None


def clamp(value: int, low: int, high: int) -> int:
    """Clamp an integer into [low, high]."""
    return max(low, min(high, value))
