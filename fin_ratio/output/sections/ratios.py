# Path: fin_ratio/output/sections/ratios.py
"""
Ratios Section Producer

Creates the results table for the analyzed category: one row per
computed ratio, in derivation order. Skipped ratios do not appear;
only the count of them does.
"""

from typing import List

from ..report_models import ReportSection, SectionItem
from ..table import build_table_rows
from .base_section import BaseSection


class RatiosSection(BaseSection):
    """Produces the computed ratio table."""

    section_type = 'ratios'

    def produce(self, analysis_result, **kwargs) -> List[ReportSection]:
        """Build the ratio section for the analyzed category."""
        displays = dict(build_table_rows(analysis_result.ratios))

        items = []
        for r in analysis_result.ratio_results:
            if not r.valid:
                continue
            items.append(SectionItem(
                key=r.ratio_id,
                label=r.ratio_name,
                value=r.value,
                status='ok',
                details={
                    'display': displays.get(r.ratio_name, ''),
                    'formula': r.formula,
                    'numerator': r.numerator,
                    'denominator': r.denominator,
                    'numerator_value': r.numerator_value,
                    'denominator_value': r.denominator_value,
                },
            ))

        return [ReportSection(
            section_id='ratios',
            title=analysis_result.title,
            section_type='ratio_group',
            items=items,
            metadata={
                'category': analysis_result.category,
                'valid_count': len(items),
                'total_count': len(analysis_result.ratio_results),
            },
        )]


__all__ = ['RatiosSection']
