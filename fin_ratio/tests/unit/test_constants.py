# Path: fin_ratio/tests/unit/test_constants.py
"""
Unit Tests for Constants Module
"""

import sys
from pathlib import Path

# Add fin_ratio to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from constants import (
    FieldKind,
    OutputFormat,
    LogCategory,
    DAYS_PER_YEAR,
    SMALL_VALUE_THRESHOLD,
    SIGNIFICANT_DIGITS,
    MAX_FRACTION_DIGITS,
    MENU_HEADER,
    MENU_SEPARATOR,
    MENU_WIDTH,
    STATUS_OK,
    STATUS_FAIL,
    STATUS_WARN,
    STATUS_INFO,
    EMPTY_RESULT_WARNING,
)


class TestEnums:
    """Test enum values."""

    def test_field_kinds(self):
        assert FieldKind.NUMERIC.value == 'numeric'
        assert FieldKind.NUMBER_LIST.value == 'number_list'

    def test_output_formats(self):
        assert [f.value for f in OutputFormat] == ['text', 'json', 'csv']

    def test_log_categories(self):
        assert {c.value for c in LogCategory} == {'input', 'process', 'output'}

    def test_str_enum_compares_to_value(self):
        assert OutputFormat.JSON == 'json'


class TestCalculationConstants:
    """Test calculation and formatting constants."""

    def test_days_per_year(self):
        assert DAYS_PER_YEAR == 365

    def test_formatting_thresholds(self):
        assert SMALL_VALUE_THRESHOLD == 0.0001
        assert SIGNIFICANT_DIGITS == 4
        assert MAX_FRACTION_DIGITS == 4


class TestDisplayConstants:
    """Test console display constants."""

    def test_menu_rules(self):
        assert len(MENU_HEADER) == MENU_WIDTH
        assert len(MENU_SEPARATOR) == MENU_WIDTH

    def test_status_tags_ascii(self):
        for tag in (STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO):
            assert tag.isascii()
            assert tag.startswith('[') and tag.endswith(']')

    def test_empty_result_warning(self):
        assert EMPTY_RESULT_WARNING == (
            'No ratios could be computed. '
            'Please fill the required fields with valid numbers.'
        )
