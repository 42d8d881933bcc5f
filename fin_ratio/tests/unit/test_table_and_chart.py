# Path: fin_ratio/tests/unit/test_table_and_chart.py
"""
Unit Tests for Results Table Rows and Bar Chart Series
"""

import sys
from pathlib import Path

# Add fin_ratio to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from output.table import build_table_rows
from output.chart_data import ChartSeries, build_chart_series


class TestBuildTableRows:
    """Test (name, formatted value) rows."""

    def test_rows_in_derivation_order(self):
        rows = build_table_rows({'P/E': 10.0, 'Earnings Yield': 0.1})
        assert rows == [('P/E', '10'), ('Earnings Yield', '0.1000')]

    def test_grouping_applied(self):
        rows = build_table_rows({'Free Cash Flow (FCF)': 1234567.5})
        assert rows == [('Free Cash Flow (FCF)', '1,234,567.5')]

    def test_empty(self):
        assert build_table_rows({}) == []


class TestBuildChartSeries:
    """Test bar chart series preparation."""

    def test_parallel_arrays(self):
        series = build_chart_series({'A': 1.5, 'B': -2.0}, title='Test')

        assert series.title == 'Test'
        assert series.labels == ['A', 'B']
        assert series.values == [1.5, -2.0]
        assert not series.is_empty

    def test_non_finite_drawn_as_zero(self):
        series = build_chart_series({
            'A': 1.0,
            'B': float('inf'),
            'C': float('nan'),
            'D': None,
        })
        assert series.values == [1.0, 0.0, 0.0, 0.0]

    def test_substitution_does_not_touch_input(self):
        ratios = {'B': float('inf')}
        build_chart_series(ratios)
        assert ratios['B'] == float('inf')

    def test_tooltips_formatted(self):
        series = build_chart_series({'A': 1234.5, 'B': 0.5})
        assert series.tooltips == ['1,234.5', '0.5000']

    def test_empty_series(self):
        series = build_chart_series({})
        assert series.is_empty
        assert isinstance(series, ChartSeries)
