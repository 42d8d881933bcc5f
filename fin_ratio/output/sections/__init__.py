# Path: fin_ratio/output/sections/__init__.py
"""
Report Sections

Each section producer converts part of an AnalysisResult into
ReportSection instances. New report blocks add new producers
here without changing formatters or the generator.
"""

from .base_section import BaseSection
from .section_registry import SectionRegistry
from .overview import OverviewSection
from .inputs import InputsSection
from .ratios import RatiosSection
from .chart import ChartSection

__all__ = [
    'BaseSection',
    'SectionRegistry',
    'OverviewSection',
    'InputsSection',
    'RatiosSection',
    'ChartSection',
]
