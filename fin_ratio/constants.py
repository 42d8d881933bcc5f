# Path: fin_ratio/constants.py
"""
System-Wide Constants for fin_ratio

Central repository for constant values used across the system.
Module code reads thresholds, tags and labels from here.

Constants are organized by category:
- Field Kinds
- Calculation Constants
- Display Formatting
- Output Formats
- Console Display
- Log Categories
"""

from enum import Enum
from typing import Final


# ==============================================================================
# FIELD KINDS
# ==============================================================================

class FieldKind(str, Enum):
    """
    Input field kinds.

    NUMERIC fields hold a single number. NUMBER_LIST fields hold free text
    parsed as a comma-separated sequence of numbers.
    """
    NUMERIC = 'numeric'
    NUMBER_LIST = 'number_list'


# ==============================================================================
# CALCULATION CONSTANTS
# ==============================================================================

DAYS_PER_YEAR: Final[int] = 365

# Separator for free-text number lists (e.g. "100, 200, 300")
LIST_SEPARATOR: Final[str] = ','

# Prefix marking a reference to an already computed ratio
RATIO_REFERENCE_PREFIX: Final[str] = '@'

# Skip reason for a ratio whose operands are valid but whose result is
# infinite or NaN
NON_FINITE_ERROR: Final[str] = 'Result is not finite'


# ==============================================================================
# DISPLAY FORMATTING
# ==============================================================================

SMALL_VALUE_THRESHOLD: Final[float] = 0.0001
SIGNIFICANT_DIGITS: Final[int] = 4
MAX_FRACTION_DIGITS: Final[int] = 4
MISSING_VALUE_DISPLAY: Final[str] = '-'


# ==============================================================================
# OUTPUT FORMATS
# ==============================================================================

class OutputFormat(str, Enum):
    """Supported report output formats."""
    TEXT = 'text'
    JSON = 'json'
    CSV = 'csv'


# ==============================================================================
# CONSOLE DISPLAY
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'

EMPTY_RESULT_WARNING: Final[str] = (
    'No ratios could be computed. '
    'Please fill the required fields with valid numbers.'
)


# ==============================================================================
# LOG CATEGORIES
# ==============================================================================

class LogCategory(str, Enum):
    """IPO logging layers."""
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


__all__ = [
    'FieldKind',
    'DAYS_PER_YEAR',
    'LIST_SEPARATOR',
    'RATIO_REFERENCE_PREFIX',
    'NON_FINITE_ERROR',
    'SMALL_VALUE_THRESHOLD',
    'SIGNIFICANT_DIGITS',
    'MAX_FRACTION_DIGITS',
    'MISSING_VALUE_DISPLAY',
    'OutputFormat',
    'MENU_WIDTH',
    'MENU_SEPARATOR',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
    'EMPTY_RESULT_WARNING',
    'LogCategory',
]
