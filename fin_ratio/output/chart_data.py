# Path: fin_ratio/output/chart_data.py
"""
Bar Chart Series

Prepares computed ratios for a bar chart: parallel label and value
arrays in derivation order. Non-finite values are drawn as zero; the
substitution is for display only and never feeds back into results.
"""

import math
from dataclasses import dataclass, field
from typing import List, Mapping

from ratio_engine.number_format import format_ratio_value


@dataclass
class ChartSeries:
    """
    Data for one bar chart.

    Attributes:
        title: Chart title (category title)
        labels: Bar labels (ratio display names)
        values: Bar heights, always finite
    """
    title: str
    labels: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    @property
    def tooltips(self) -> List[str]:
        """Formatted value per bar."""
        return [format_ratio_value(v) for v in self.values]

    @property
    def is_empty(self) -> bool:
        return not self.labels


def _chart_value(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def build_chart_series(ratios: Mapping[str, float], title: str = '') -> ChartSeries:
    """
    Build a bar chart series from computed ratios.

    Args:
        ratios: Ordered mapping of ratio display name to value
        title: Chart title

    Returns:
        ChartSeries with one bar per ratio
    """
    labels = list(ratios.keys())
    values = [_chart_value(ratios[name]) for name in labels]
    return ChartSeries(title=title, labels=labels, values=values)


__all__ = ['ChartSeries', 'build_chart_series']
