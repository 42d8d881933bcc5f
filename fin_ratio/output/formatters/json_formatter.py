# Path: fin_ratio/output/formatters/json_formatter.py
"""
JSON Formatter

Dumps the whole report, plus a flat name -> value mapping of the
computed ratios under 'ratios' for scripts that only need the numbers.
"""

import json
from dataclasses import asdict

from ..report_models import ReportData
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders report as JSON."""

    format_name = 'json'
    file_extension = '.json'

    def __init__(self, indent: int = 2):
        self.indent = indent

    def format_report(self, report: ReportData) -> str:
        data = asdict(report)

        ratio_section = report.get_section('ratios')
        data['ratios'] = {
            item.label: item.value for item in ratio_section.items
        } if ratio_section else {}

        return json.dumps(data, indent=self.indent, default=str, ensure_ascii=False)


__all__ = ['JsonFormatter']
