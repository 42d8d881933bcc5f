# Path: fin_ratio/output/formatters/csv_formatter.py
"""
CSV Formatter

Renders ReportData as CSV for spreadsheet import.
Each row is a data item tagged with its section.
"""

import csv
import io

from ..report_models import ReportData, ReportSection
from .base_formatter import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Renders report as CSV."""

    format_name = 'csv'
    file_extension = '.csv'

    def format_report(self, report: ReportData) -> str:
        """Render report as CSV string."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator='\n')

        writer.writerow([
            'section', 'key', 'label', 'value', 'display',
            'status', 'formula',
        ])

        writer.writerow(['metadata', 'category', report.category, '', '', '', ''])
        writer.writerow(['metadata', 'title', report.title, '', '', '', ''])
        writer.writerow(['metadata', 'generated_at', report.generated_at, '', '', '', ''])

        for section in report.sections:
            self._write_section(writer, section)

        return output.getvalue()

    def _write_section(self, writer, section: ReportSection) -> None:
        """Write one section's items as CSV rows."""
        for item in section.items:
            d = item.details
            writer.writerow([
                section.section_id,
                item.key,
                item.label,
                self._format_value(item.value),
                d.get('display', ''),
                item.status,
                d.get('formula', ''),
            ])

    def _format_value(self, value) -> str:
        """Raw value for CSV; full precision keeps the file machine-readable."""
        if value is None:
            return ''
        if isinstance(value, list):
            return ' '.join(repr(v) for v in value)
        if isinstance(value, float):
            return repr(value)
        return str(value)


__all__ = ['CsvFormatter']
