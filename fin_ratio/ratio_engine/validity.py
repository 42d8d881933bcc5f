# Path: fin_ratio/ratio_engine/validity.py
"""
Validity Predicate

One shared check deciding whether a raw input can take part in a
formula. A value is valid iff it is present, not an empty string, and
converts to a finite number. Booleans are not numbers here.
"""

import math
from typing import Any, List, Optional

from constants import LIST_SEPARATOR


def to_number(value: Any) -> Optional[float]:
    """
    Convert a raw input to a finite float.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        The float value, or None if the input is not a usable number
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number):
        return None
    return number


def is_valid(value: Any) -> bool:
    """Return True if value converts to a finite number."""
    return to_number(value) is not None


def parse_number_list(value: Any) -> List[float]:
    """
    Parse a comma-separated list of numbers.

    Non-numeric tokens are dropped: "100, 200, bad, 300" gives
    [100.0, 200.0, 300.0]. Lists and tuples are filtered the same way,
    and a single number becomes a one-element list.

    Args:
        value: String, sequence of raw values, number, or None

    Returns:
        List of finite floats (possibly empty)
    """
    if value is None:
        return []

    if isinstance(value, str):
        tokens = value.split(LIST_SEPARATOR)
    elif isinstance(value, (list, tuple)):
        tokens = value
    else:
        tokens = [value]

    numbers = []
    for token in tokens:
        number = to_number(token)
        if number is not None:
            numbers.append(number)
    return numbers


__all__ = ['to_number', 'is_valid', 'parse_number_list']
