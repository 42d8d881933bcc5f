# Path: fin_ratio/output/sections/chart.py
"""
Chart Section Producer

Creates the bar chart section from the computed ratios. No section is
produced when nothing was computed.
"""

from typing import List

from config_loader import DEFAULT_CHART_WIDTH

from ..chart_data import build_chart_series
from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection


class ChartSection(BaseSection):
    """Produces the bar chart section."""

    section_type = 'chart'

    def produce(self, analysis_result, **kwargs) -> List[ReportSection]:
        """Build one bar chart section, or none for an empty result."""
        series = build_chart_series(
            analysis_result.ratios, title=analysis_result.title,
        )
        if series.is_empty:
            return []

        items = [
            SectionItem(
                key=label,
                label=label,
                value=value,
                details={'display': tooltip},
            )
            for label, value, tooltip in zip(
                series.labels, series.values, series.tooltips,
            )
        ]

        return [ReportSection(
            section_id='chart',
            title=f"{series.title} Chart",
            section_type='bar_chart',
            items=items,
            metadata={
                'chart_title': series.title,
                'width': kwargs.get('chart_width') or DEFAULT_CHART_WIDTH,
            },
        )]


__all__ = ['ChartSection']
