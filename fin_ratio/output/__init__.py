# Path: fin_ratio/output/__init__.py
"""
Output Module for fin_ratio

Generates human-readable and machine-readable outputs from
ratio analysis results.

Architecture:
    table.py          - (name, formatted value) rows for the results table
    chart_data.py     - Label/value series for the bar chart
    ReportGenerator   - Main entry point for report generation
    SectionRegistry   - Register new report blocks
    FormatterRegistry - Register new output formats

Report generation flow:
    AnalysisResult -> [Section Producers] -> ReportData -> [Formatters] -> Files

Usage:
    from output import ReportGenerator

    generator = ReportGenerator(config)
    report = generator.generate(analysis_result)
    paths = generator.write(report)
    print(generator.to_console(report))
"""

from .table import build_table_rows
from .chart_data import ChartSeries, build_chart_series

from .report_models import ReportData, ReportSection, SectionItem

from .report_generator import ReportGenerator

from .sections import (
    BaseSection,
    SectionRegistry,
    OverviewSection,
    InputsSection,
    RatiosSection,
    ChartSection,
)

from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
    CsvFormatter,
)


__all__ = [
    # Table and chart
    'build_table_rows',
    'ChartSeries',
    'build_chart_series',
    # Report models
    'ReportData',
    'ReportSection',
    'SectionItem',
    # Generator
    'ReportGenerator',
    # Sections
    'BaseSection',
    'SectionRegistry',
    'OverviewSection',
    'InputsSection',
    'RatiosSection',
    'ChartSection',
    # Formatters
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
    'CsvFormatter',
]
