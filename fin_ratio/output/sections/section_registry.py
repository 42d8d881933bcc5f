# Path: fin_ratio/output/sections/section_registry.py
"""
Section Registry

Holds the section producers of a ratio report in the order their
sections appear: overview, inputs, ratio table, chart.
"""

from typing import Dict, List, Type

from ..report_models import ReportSection
from .base_section import BaseSection


class SectionRegistry:
    """Ordered, class-level map of section_type to producer class."""

    _producers: Dict[str, Type[BaseSection]] = {}

    @classmethod
    def register(cls, producer_class: Type[BaseSection]) -> None:
        """Add a producer; registering the same section_type twice is a no-op."""
        cls._producers.setdefault(producer_class.section_type, producer_class)

    @classmethod
    def build_all(cls, analysis_result, **kwargs) -> List[ReportSection]:
        """Run every producer in registration order and collect the sections."""
        sections: List[ReportSection] = []
        for producer_class in cls._producers.values():
            sections.extend(producer_class().produce(analysis_result, **kwargs))
        return sections

    @classmethod
    def get_registered(cls) -> List[str]:
        return list(cls._producers)


__all__ = ['SectionRegistry']
