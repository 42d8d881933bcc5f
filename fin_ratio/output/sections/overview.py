# Path: fin_ratio/output/sections/overview.py
"""
Overview Section Producer

Creates the report header section: which category was analyzed and
how many inputs and ratios made it through.
"""

from typing import List

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection


class OverviewSection(BaseSection):
    """Produces the analysis overview / header section."""

    section_type = 'overview'

    def produce(self, analysis_result, **kwargs) -> List[ReportSection]:
        """Build overview section from analysis result."""
        r = analysis_result
        s = r.summary

        si = s.get('supplied_inputs', 0)
        ti = s.get('total_inputs', 0)
        vr = s.get('valid_ratios', 0)
        tr = s.get('total_ratios', 0)

        items = [
            SectionItem(key='category', label='Category', value=r.category),
            SectionItem(key='title', label='Title', value=r.title),
            SectionItem(
                key='inputs_supplied', label='Inputs Supplied', value=si,
                details={'supplied': si, 'total': ti, 'display': f"{si}/{ti}"},
            ),
            SectionItem(
                key='ratio_completion', label='Ratios Computed', value=vr,
                status='ok' if vr else 'warning',
                details={'valid': vr, 'total': tr, 'display': f"{vr}/{tr}"},
            ),
        ]

        return [ReportSection(
            section_id='overview',
            title='Analysis Overview',
            section_type='overview',
            items=items,
            metadata={'summary': s},
        )]


__all__ = ['OverviewSection']
