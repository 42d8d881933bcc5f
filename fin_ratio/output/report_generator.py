# Path: fin_ratio/output/report_generator.py
"""
Report Generator

Main orchestrator for output generation. Converts an AnalysisResult
into ReportData via registered section producers, then writes output
files via registered formatters.

Architecture:
    AnalysisResult  ->  [Section Producers]  ->  ReportData  ->  [Formatters]  ->  Files

Usage:
    from output import ReportGenerator

    generator = ReportGenerator(config)
    report = generator.generate(analysis_result)
    paths = generator.write(report)
    print(generator.to_console(report))
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from config_loader import ConfigLoader, DEFAULT_CHART_WIDTH, DEFAULT_JSON_INDENT
from core.logger.ipo_logging import get_output_logger

from .report_models import ReportData
from .sections import (
    SectionRegistry,
    OverviewSection,
    InputsSection,
    RatiosSection,
    ChartSection,
)
from .formatters import (
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
    CsvFormatter,
)


def register_defaults() -> None:
    """Register built-in section producers and formatters."""
    # Section producers (order matters for report layout)
    SectionRegistry.register(OverviewSection)
    SectionRegistry.register(InputsSection)
    SectionRegistry.register(RatiosSection)
    SectionRegistry.register(ChartSection)

    # Formatters
    FormatterRegistry.register(JsonFormatter)
    FormatterRegistry.register(TextFormatter)
    FormatterRegistry.register(CsvFormatter)


# Auto-register on module import
register_defaults()


class ReportGenerator:
    """
    Generates ratio reports from an AnalysisResult.

    Coordinates section producers and formatters to create
    console output and multi-format output files.

    Example:
        generator = ReportGenerator(config)
        report = generator.generate(analyze('liquidity', inputs))
        paths = generator.write(report)
        console_text = generator.to_console(report)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize report generator.

        Args:
            config: ConfigLoader instance (creates one if not provided)
        """
        self.config = config or ConfigLoader()
        self.logger = get_output_logger('report_generator')

    def generate(self, analysis_result, **kwargs) -> ReportData:
        """
        Build ReportData from an AnalysisResult.

        Args:
            analysis_result: AnalysisResult from the ratio engine
            **kwargs: Extra context passed to section producers

        Returns:
            ReportData ready for formatting
        """
        kwargs.setdefault(
            'chart_width',
            self.config.get('chart_width', DEFAULT_CHART_WIDTH),
        )
        sections = SectionRegistry.build_all(analysis_result, **kwargs)

        report = ReportData(
            category=analysis_result.category,
            title=analysis_result.title,
            generated_at=datetime.now().isoformat(timespec='seconds'),
            sections=sections,
            summary=dict(analysis_result.summary),
        )

        self.logger.info(
            f"Generated report: {len(sections)} sections "
            f"for {analysis_result.category}"
        )
        return report

    def write(
        self,
        report: ReportData,
        output_dir: Optional[Path] = None,
        formats: Optional[List[str]] = None,
    ) -> Dict[str, Path]:
        """
        Write report to files in requested formats.

        Args:
            report: ReportData to write
            output_dir: Override output directory (default from config)
            formats: List of format names (default: from config flags)

        Returns:
            Dict mapping format name to written file path

        Raises:
            ValueError: If no output directory is given or configured
        """
        if output_dir is None:
            output_dir = self.config.get('output_dir')
            if not output_dir:
                raise ValueError("output_dir not configured in .env")

        if formats is None:
            formats = self._get_enabled_formats()

        written = {}
        for fmt_name in formats:
            formatter = self._get_formatter(fmt_name)
            if formatter is None:
                self.logger.warning(f"No formatter for: {fmt_name}")
                continue

            filepath = formatter.write_report(report, Path(output_dir))
            written[fmt_name] = filepath
            self.logger.info(f"Wrote {fmt_name}: {filepath}")

        return written

    def to_console(self, report: ReportData, fmt: str = 'text') -> str:
        """
        Render report for console display.

        Args:
            report: ReportData to render
            fmt: Format name ('text', 'json' or 'csv')

        Returns:
            Rendered string
        """
        formatter = self._get_formatter(fmt)
        if formatter is None:
            return f"[No {fmt} formatter available for {report.category}]"
        return formatter.format_report(report)

    def to_json(self, report: ReportData) -> str:
        """Render report as JSON string."""
        formatter = self._get_formatter('json')
        if formatter is None:
            return '{}'
        return formatter.format_report(report)

    def _get_formatter(self, fmt_name: str):
        """Look up a formatter, passing format-specific config options."""
        if fmt_name == 'json':
            return FormatterRegistry.get(
                fmt_name,
                indent=self.config.get('json_indent', DEFAULT_JSON_INDENT),
            )
        return FormatterRegistry.get(fmt_name)

    def _get_enabled_formats(self) -> List[str]:
        """Read enabled format flags from config."""
        format_flags = {
            'json': self.config.get('output_json', True),
            'text': self.config.get('output_text', True),
            'csv': self.config.get('output_csv', True),
        }
        return [name for name, enabled in format_flags.items() if enabled]


__all__ = ['ReportGenerator', 'register_defaults']
