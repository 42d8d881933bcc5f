# Path: fin_ratio/tests/unit/test_validity.py
"""
Unit Tests for the Validity Predicate

Tests the shared number check and the comma-separated list parser.
"""

import sys
from pathlib import Path

import pytest

# Add fin_ratio to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from ratio_engine.validity import to_number, is_valid, parse_number_list


class TestToNumber:
    """Test conversion of raw inputs to finite floats."""

    @pytest.mark.parametrize('raw, expected', [
        (5, 5.0),
        (2.5, 2.5),
        ('12.5', 12.5),
        ('  7 ', 7.0),
        ('-3', -3.0),
        ('1e3', 1000.0),
        (0, 0.0),
        ('0', 0.0),
    ])
    def test_numeric_values_convert(self, raw, expected):
        """Numbers and numeric strings should convert to float."""
        assert to_number(raw) == expected

    @pytest.mark.parametrize('raw', [
        None,
        '',
        '   ',
        'abc',
        '12abc',
        'inf',
        '-inf',
        'nan',
        float('inf'),
        float('nan'),
        [],
        {},
    ])
    def test_unusable_values_give_none(self, raw):
        """Absent, empty, non-numeric and non-finite values are not numbers."""
        assert to_number(raw) is None

    def test_booleans_are_not_numbers(self):
        """True/False should not count as 1/0."""
        assert to_number(True) is None
        assert to_number(False) is None

    def test_returns_float_type(self):
        """Integers should come back as floats."""
        assert isinstance(to_number(3), float)


class TestIsValid:
    """Test the boolean predicate."""

    def test_valid_values(self):
        assert is_valid(0)
        assert is_valid('0.5')
        assert is_valid(-100)

    def test_invalid_values(self):
        assert not is_valid(None)
        assert not is_valid('')
        assert not is_valid('x')
        assert not is_valid(True)
        assert not is_valid(float('inf'))


class TestParseNumberList:
    """Test comma-separated number list parsing."""

    def test_drops_non_numeric_tokens(self):
        """Invalid tokens should be dropped, valid ones kept in order."""
        assert parse_number_list('100, 200, bad, 300') == [100.0, 200.0, 300.0]

    def test_empty_tokens_dropped(self):
        assert parse_number_list('1,,2, ') == [1.0, 2.0]

    def test_empty_and_none(self):
        assert parse_number_list('') == []
        assert parse_number_list(None) == []
        assert parse_number_list('bad, worse') == []

    def test_sequence_input_filtered(self):
        """Lists and tuples should be filtered with the same predicate."""
        assert parse_number_list([1, '2', 'x', None, True]) == [1.0, 2.0]
        assert parse_number_list((3, 4)) == [3.0, 4.0]

    def test_single_number(self):
        assert parse_number_list(5) == [5.0]

    def test_negative_values_kept(self):
        assert parse_number_list('-10, 20') == [-10.0, 20.0]
