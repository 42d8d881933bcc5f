# Path: fin_ratio/output/sections/base_section.py
"""
Base class for report section producers.

A producer reads an AnalysisResult and returns the ReportSection
blocks it is responsible for (overview, inputs, ratio table, chart).
"""

from abc import ABC, abstractmethod
from typing import List

from ..report_models import ReportSection


class BaseSection(ABC):
    """Builds report sections from one category's analysis."""

    # Registry key; unique per producer
    section_type: str = ''

    @abstractmethod
    def produce(self, analysis_result, **kwargs) -> List[ReportSection]:
        """
        Build this producer's sections.

        Args:
            analysis_result: AnalysisResult from ratio_engine.analyze
            **kwargs: Rendering options such as chart_width

        Returns:
            Sections to append to the report; empty when there is
            nothing to show
        """


__all__ = ['BaseSection']
