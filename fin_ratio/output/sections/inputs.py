# Path: fin_ratio/output/sections/inputs.py
"""
Inputs Section Producer

Lists the inputs that survived coercion, in field order, so a report
shows exactly which numbers the ratios were computed from.
"""

from typing import List

from ratio_engine.categories import get_category
from ratio_engine.number_format import format_ratio_value

from ..report_models import ReportSection, SectionItem
from .base_section import BaseSection


class InputsSection(BaseSection):
    """Produces the table of supplied inputs."""

    section_type = 'inputs'

    def produce(self, analysis_result, **kwargs) -> List[ReportSection]:
        """Build one section listing every supplied input."""
        category = get_category(analysis_result.category)

        items = []
        for field_def in category.fields:
            value = analysis_result.inputs.get(field_def.key)
            if value is None:
                continue
            if isinstance(value, list):
                display = ', '.join(format_ratio_value(v) for v in value) or '(no numbers)'
            else:
                display = format_ratio_value(value)
            items.append(SectionItem(
                key=field_def.key,
                label=field_def.label,
                value=value,
                status='ok',
                details={'display': display, 'kind': field_def.kind.value},
            ))

        return [ReportSection(
            section_id='inputs',
            title='Inputs',
            section_type='input_table',
            items=items,
            metadata={
                'supplied_count': len(items),
                'total_count': len(category.fields),
            },
        )]


__all__ = ['InputsSection']
