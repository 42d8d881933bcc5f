# Path: fin_ratio/output/formatters/text_formatter.py
"""
Text Formatter

Renders ReportData as ASCII text suitable for console display
and plain-text file output. Handles all section types generically
with type-specific rendering hints, including an ASCII bar chart.
"""

from typing import List

from config_loader import DEFAULT_CHART_WIDTH

from ..report_models import ReportData, ReportSection, SectionItem
from .base_formatter import BaseFormatter

LINE_WIDTH = 70
DIVIDER = '=' * LINE_WIDTH
SUB_DIVIDER = '-' * LINE_WIDTH

POSITIVE_BAR = '#'
NEGATIVE_BAR = '-'

EMPTY_TABLE_MESSAGE = 'No ratios available. Provide inputs and run the analysis.'


class TextFormatter(BaseFormatter):
    """Renders report as ASCII text."""

    format_name = 'text'
    file_extension = '.txt'

    def format_report(self, report: ReportData) -> str:
        """Render full report as text."""
        lines = []
        lines.append('')
        lines.append(DIVIDER)
        lines.append(f"  RATIO ANALYSIS: {report.title}")
        lines.append(f"  Category: {report.category}")
        lines.append(DIVIDER)

        for section in report.sections:
            lines.extend(self._render_section(section))

        lines.append('')
        lines.append(DIVIDER)
        if report.generated_at:
            lines.append(f"  Generated: {report.generated_at}")
        lines.append('')
        return '\n'.join(lines)

    def _render_section(self, section: ReportSection) -> List[str]:
        """Dispatch to type-specific renderer."""
        renderers = {
            'overview': self._render_overview,
            'input_table': self._render_inputs,
            'ratio_group': self._render_ratio_group,
            'bar_chart': self._render_bar_chart,
        }
        renderer = renderers.get(
            section.section_type, self._render_generic,
        )
        return renderer(section)

    def _render_overview(self, section: ReportSection) -> List[str]:
        """Render overview section."""
        lines = ['', f"  {section.title.upper()}:", SUB_DIVIDER]
        for item in section.items:
            display = item.details.get('display', item.value)
            lines.append(f"    {item.label:25s}  {display}")
        return lines

    def _render_inputs(self, section: ReportSection) -> List[str]:
        """Render the supplied inputs table."""
        meta = section.metadata
        sc = meta.get('supplied_count', len(section.items))
        tc = meta.get('total_count', sc)

        lines = ['', f"  {section.title.upper()} ({sc}/{tc}):", SUB_DIVIDER]
        if not section.items:
            lines.append('    (none supplied)')
            return lines

        for item in section.items:
            display = item.details.get('display', item.value)
            lines.append(f"    {item.label[:45]:45s}  {display}")
        return lines

    def _render_ratio_group(self, section: ReportSection) -> List[str]:
        """Render the computed ratio table."""
        lines = ['', f"  {section.title.upper()}:", SUB_DIVIDER]

        if not section.items:
            lines.append(f"    {EMPTY_TABLE_MESSAGE}")
        for item in section.items:
            lines.extend(self._render_ratio_item(item))

        meta = section.metadata
        vc = meta.get('valid_count', 0)
        tc = meta.get('total_count', 0)
        lines.append(f"    ({vc}/{tc} calculated)")
        return lines

    def _render_ratio_item(self, item: SectionItem) -> List[str]:
        """Render a single ratio row with its formula."""
        d = item.details
        display = d.get('display', item.value)
        lines = [f"    [OK] {item.label:32s} {display:>16}"]
        if d.get('formula'):
            lines.append(f"         {d['formula']}")
        return lines

    def _render_bar_chart(self, section: ReportSection) -> List[str]:
        """Render a horizontal ASCII bar chart scaled to the largest bar."""
        width = section.metadata.get('width') or DEFAULT_CHART_WIDTH
        lines = ['', f"  {section.title.upper()}:", SUB_DIVIDER]

        max_abs = max((abs(item.value) for item in section.items), default=0)
        for item in section.items:
            lines.append(
                f"    {item.label[:28]:28s} |"
                f"{self._bar(item.value, max_abs, width):{width}s}"
                f"| {item.details.get('display', item.value)}"
            )
        return lines

    def _bar(self, value: float, max_abs: float, width: int) -> str:
        """Build one bar; '#' for positive values, '-' for negative."""
        if max_abs == 0:
            return ''
        length = int(round(abs(value) / max_abs * width))
        char = NEGATIVE_BAR if value < 0 else POSITIVE_BAR
        return char * length

    def _render_generic(self, section: ReportSection) -> List[str]:
        """Fallback renderer for unknown section types."""
        lines = ['', f"  {section.title.upper()}:", SUB_DIVIDER]

        status_tag = {'ok': '[OK]', 'error': '[--]', 'warning': '[!!]'}
        for item in section.items:
            tag = status_tag.get(item.status, '[  ]')
            if item.value is not None:
                lines.append(f"    {tag} {item.label:30s}  {item.value}")
            else:
                lines.append(f"    {tag} {item.label}")

        return lines


__all__ = ['TextFormatter', 'EMPTY_TABLE_MESSAGE']
