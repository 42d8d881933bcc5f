# Path: fin_ratio/ratio_engine/number_format.py
"""
Number Formatting

Display formatting for computed ratio values, shared by the table,
the chart labels and every report formatter.
"""

from typing import Optional

from constants import (
    SMALL_VALUE_THRESHOLD,
    SIGNIFICANT_DIGITS,
    MAX_FRACTION_DIGITS,
    MISSING_VALUE_DISPLAY,
)


def format_ratio_value(value: Optional[float]) -> str:
    """
    Format a ratio value for display.

    Rules:
        None                 -> '-'
        0 < |v| < 0.0001     -> 4 significant digits  (0.00005 -> '5.000e-05')
        0 < |v| < 1          -> 4 fixed decimals      (0.5 -> '0.5000')
        otherwise            -> comma grouped, at most 4 decimals
                                (1234.5 -> '1,234.5')

    Args:
        value: Computed value or None

    Returns:
        Display string
    """
    if value is None:
        return MISSING_VALUE_DISPLAY

    magnitude = abs(value)

    if 0 < magnitude < SMALL_VALUE_THRESHOLD:
        return f"{value:#.{SIGNIFICANT_DIGITS}g}"

    if 0 < magnitude < 1:
        return f"{value:.{MAX_FRACTION_DIGITS}f}"

    text = f"{value:,.{MAX_FRACTION_DIGITS}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


__all__ = ['format_ratio_value']
