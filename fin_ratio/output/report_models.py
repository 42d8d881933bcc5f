# Path: fin_ratio/output/report_models.py
"""
Report Data Models

Sections fill these in from an AnalysisResult; formatters read them.
Nothing here knows about a particular output format.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SectionItem:
    """
    One row of a section: an input, a ratio or a chart bar.

    status is 'ok', 'skip' or 'info'. details carries the formatted
    'display' string and, for ratios, the 'formula'.
    """
    key: str
    label: str
    value: Any = None
    status: str = 'info'
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ReportSection:
    """A titled block of rows; section_type selects the text renderer."""
    section_id: str
    title: str
    section_type: str
    items: List[SectionItem] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ReportData:
    """Everything needed to render one category's ratio report."""
    category: str
    title: str
    generated_at: str = ''
    sections: List[ReportSection] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def get_section(self, section_id: str) -> Optional[ReportSection]:
        return next((s for s in self.sections if s.section_id == section_id), None)

    def get_sections_by_type(self, section_type: str) -> List[ReportSection]:
        return [s for s in self.sections if s.section_type == section_type]


__all__ = ['SectionItem', 'ReportSection', 'ReportData']
