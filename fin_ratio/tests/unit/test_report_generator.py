# Path: fin_ratio/tests/unit/test_report_generator.py
"""
Unit Tests for Report Generation

Tests section producers, formatters and the ReportGenerator including:
- Section layout for complete and empty results
- Text rendering of the ratio table and the ASCII bar chart
- JSON and CSV rendering
- Writing report files
"""

import csv
import io
import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add fin_ratio to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from output import (
    ReportGenerator,
    FormatterRegistry,
    SectionRegistry,
    TextFormatter,
    JsonFormatter,
)
from output.formatters.text_formatter import EMPTY_TABLE_MESSAGE
from output.report_models import ReportData, ReportSection, SectionItem
from ratio_engine import analyze


@pytest.fixture
def generator(mock_config):
    return ReportGenerator(mock_config)


@pytest.fixture
def liquidity_report(generator, liquidity_inputs):
    return generator.generate(analyze('liquidity', liquidity_inputs))


@pytest.fixture
def empty_report(generator):
    return generator.generate(analyze('liquidity', {}))


class TestRegistries:
    """Test default registrations."""

    def test_default_sections_in_order(self):
        assert SectionRegistry.get_registered() == [
            'overview', 'inputs', 'ratios', 'chart',
        ]

    def test_default_formatters(self):
        assert set(FormatterRegistry.get_available()) >= {'text', 'json', 'csv'}

    def test_register_is_idempotent(self):
        from output.sections import RatiosSection
        SectionRegistry.register(RatiosSection)
        assert SectionRegistry.get_registered().count('ratios') == 1

    def test_formatter_options(self):
        formatter = FormatterRegistry.get('json', indent=4)
        assert isinstance(formatter, JsonFormatter)
        assert formatter.indent == 4

    def test_unknown_formatter(self):
        assert FormatterRegistry.get('xml') is None


class TestSections:
    """Test section producers through the generator."""

    def test_section_layout(self, liquidity_report):
        ids = [s.section_id for s in liquidity_report.sections]
        assert ids == ['overview', 'inputs', 'ratios', 'chart']

    def test_report_metadata(self, liquidity_report):
        assert liquidity_report.category == 'liquidity'
        assert liquidity_report.title == 'Liquidity Ratios'
        assert liquidity_report.generated_at
        assert liquidity_report.summary['valid_ratios'] == 4

    def test_overview_counts(self, liquidity_report):
        overview = liquidity_report.get_section('overview')
        items = {i.key: i for i in overview.items}

        assert items['inputs_supplied'].details['display'] == '5/5'
        assert items['ratio_completion'].details['display'] == '4/4'
        assert items['ratio_completion'].status == 'ok'

    def test_inputs_section_lists_supplied_only(self, generator):
        report = generator.generate(analyze('liquidity', {'currentAssets': '1500'}))
        inputs = report.get_section('inputs')

        assert [i.key for i in inputs.items] == ['currentAssets']
        assert inputs.items[0].details['display'] == '1,500'
        assert inputs.metadata == {'supplied_count': 1, 'total_count': 5}

    def test_inputs_section_list_without_numbers(self, generator):
        report = generator.generate(analyze('intrinsic', {'cfSeries': 'n/a', 'discountRate': 0.1}))
        items = {i.key: i for i in report.get_section('inputs').items}

        assert items['cfSeries'].value == []
        assert items['cfSeries'].details['display'] == '(no numbers)'

    def test_ratio_rows(self, liquidity_report):
        ratios = liquidity_report.get_section('ratios')

        assert ratios.title == 'Liquidity Ratios'
        assert [i.label for i in ratios.items] == [
            'Current Ratio', 'Quick Ratio', 'Cash Ratio', 'Operating Cash Flow Ratio',
        ]
        assert ratios.items[0].details['display'] == '2'
        assert ratios.items[2].details['display'] == '0.3000'
        assert ratios.items[0].details['formula'] == 'Current Assets / Current Liabilities'

    def test_chart_width_from_config(self, liquidity_report):
        chart = liquidity_report.get_section('chart')

        assert chart.section_type == 'bar_chart'
        assert chart.metadata['width'] == 20
        assert [i.value for i in chart.items] == pytest.approx([2.0, 1.5, 0.3, 0.8])

    def test_empty_result_has_no_chart(self, empty_report):
        assert empty_report.get_section('chart') is None
        assert empty_report.get_section('ratios').items == []
        assert empty_report.get_sections_by_type('ratio_group')

    def test_empty_result_overview_warns(self, empty_report):
        overview = empty_report.get_section('overview')
        completion = [i for i in overview.items if i.key == 'ratio_completion'][0]
        assert completion.status == 'warning'


class TestTextFormatter:
    """Test ASCII rendering."""

    def test_header_and_table(self, generator, liquidity_report):
        text = generator.to_console(liquidity_report)

        assert 'RATIO ANALYSIS: Liquidity Ratios' in text
        assert 'Current Ratio' in text
        assert '(4/4 calculated)' in text
        assert 'Generated:' in text

    def test_bars_scaled_to_largest(self, generator, liquidity_report):
        text = generator.to_console(liquidity_report)
        bar_lines = [l for l in text.splitlines() if '|' in l]

        assert len(bar_lines) == 4
        current = [l for l in bar_lines if 'Current Ratio' in l][0]
        quick = [l for l in bar_lines if 'Quick Ratio' in l][0]
        assert '#' * 20 in current
        assert '#' * 15 in quick
        assert '#' * 16 not in quick

    def test_negative_bars(self, generator):
        report = generator.generate(analyze('cashflow', {
            'operatingCashFlow': 100, 'capitalExpenditures': 300, 'marketCap': 1000,
        }))
        text = generator.to_console(report)
        fcf = [l for l in text.splitlines() if '|' in l and 'Free Cash Flow' in l][0]

        assert '|' + '-' * 20 + '|' in fcf
        assert '#' not in fcf

    def test_all_zero_bars(self):
        section = ReportSection(
            section_id='chart', title='Zero', section_type='bar_chart',
            items=[SectionItem(key='a', label='A', value=0.0, details={'display': '0'})],
            metadata={'width': 10},
        )
        report = ReportData(category='x', title='X', sections=[section])
        text = TextFormatter().format_report(report)

        assert '|' + ' ' * 10 + '|' in text

    def test_empty_table_message(self, generator, empty_report):
        text = generator.to_console(empty_report)

        assert EMPTY_TABLE_MESSAGE in text
        assert '(0/4 calculated)' in text

    def test_generic_section(self):
        section = ReportSection(
            section_id='notes', title='Notes', section_type='notes',
            items=[SectionItem(key='n', label='Note', value='hello', status='ok')],
        )
        text = TextFormatter().format_report(
            ReportData(category='x', title='X', sections=[section]),
        )
        assert '[OK] Note' in text
        assert 'hello' in text


class TestJsonAndCsv:
    """Test machine-readable formats."""

    def test_json_structure(self, generator, liquidity_report):
        data = json.loads(generator.to_json(liquidity_report))

        assert data['category'] == 'liquidity'
        assert [s['section_id'] for s in data['sections']] == [
            'overview', 'inputs', 'ratios', 'chart',
        ]
        ratios = data['sections'][2]['items']
        assert ratios[0]['label'] == 'Current Ratio'
        assert ratios[0]['value'] == pytest.approx(2.0)

    def test_json_flat_ratio_mapping(self, generator, liquidity_report):
        data = json.loads(generator.to_json(liquidity_report))

        assert list(data['ratios']) == [
            'Current Ratio', 'Quick Ratio', 'Cash Ratio', 'Operating Cash Flow Ratio',
        ]
        assert data['ratios']['Current Ratio'] == pytest.approx(2.0)

    def test_json_keeps_unicode_names(self, generator):
        report = generator.generate(analyze('market', {'covariance': 1, 'varianceMarket': 2}))
        assert 'Beta (β)' in generator.to_json(report)

    def test_csv_rows(self, generator, liquidity_report):
        text = generator.to_console(liquidity_report, 'csv')
        rows = list(csv.reader(io.StringIO(text)))

        assert rows[0] == [
            'section', 'key', 'label', 'value', 'display', 'status', 'formula',
        ]
        ratio_rows = [r for r in rows if r[0] == 'ratios']
        assert [r[1] for r in ratio_rows] == [
            'current_ratio', 'quick_ratio', 'cash_ratio', 'operating_cash_flow_ratio',
        ]
        assert float(ratio_rows[0][3]) == pytest.approx(2.0)

    def test_csv_list_inputs(self, generator):
        report = generator.generate(analyze('intrinsic', {'cfSeries': '1, 2', 'discountRate': 0}))
        rows = list(csv.reader(io.StringIO(generator.to_console(report, 'csv'))))
        cf_row = [r for r in rows if r[1] == 'cfSeries'][0]

        assert cf_row[3] == '1.0 2.0'
        assert cf_row[4] == '1, 2'


class TestWrite:
    """Test writing report files."""

    def test_writes_enabled_formats(self, generator, liquidity_report, temp_dir):
        written = generator.write(liquidity_report, output_dir=temp_dir)

        assert set(written) == {'json', 'text', 'csv'}
        for path in written.values():
            assert path.exists()
            assert path.parent == temp_dir
            assert path.name.startswith('ratios_liquidity_')
        assert written['json'].suffix == '.json'
        assert written['text'].suffix == '.txt'

    def test_requested_formats_only(self, generator, liquidity_report, temp_dir):
        written = generator.write(liquidity_report, output_dir=temp_dir, formats=['json'])

        assert list(written) == ['json']
        data = json.loads(written['json'].read_text(encoding='utf-8'))
        assert data['title'] == 'Liquidity Ratios'

    def test_unknown_format_skipped(self, generator, liquidity_report, temp_dir):
        written = generator.write(liquidity_report, output_dir=temp_dir, formats=['xml', 'text'])
        assert list(written) == ['text']

    def test_configured_output_dir(self, generator, liquidity_report, temp_dir):
        written = generator.write(liquidity_report, formats=['text'])
        assert written['text'].parent == temp_dir / 'output'

    def test_missing_output_dir_raises(self, liquidity_report):
        config = MagicMock()
        config.get.side_effect = lambda key, default=None: default
        generator = ReportGenerator(config)

        with pytest.raises(ValueError):
            generator.write(liquidity_report)

    def test_disabled_formats_from_config(self, liquidity_report, temp_dir):
        config = MagicMock()
        config.get.side_effect = lambda key, default=None: {
            'output_json': False,
            'output_csv': False,
        }.get(key, default)
        generator = ReportGenerator(config)

        written = generator.write(liquidity_report, output_dir=temp_dir)
        assert list(written) == ['text']
