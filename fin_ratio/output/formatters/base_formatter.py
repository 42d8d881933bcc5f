# Path: fin_ratio/output/formatters/base_formatter.py
"""
Formatter base class and registry.

A formatter turns ReportData into one output format. Subclasses set
format_name and file_extension, implement format_report(), and are
registered with FormatterRegistry.register().
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from ..report_models import ReportData


class BaseFormatter(ABC):
    """Renders a ratio report into a single output format."""

    format_name: str = ''
    file_extension: str = ''

    @abstractmethod
    def format_report(self, report: ReportData) -> str:
        """Return the rendered report."""

    def write_report(self, report: ReportData, output_path: Path) -> Path:
        """
        Render the report into output_path, creating it if needed.

        Files are named ratios_<category>_<timestamp><ext> so repeated
        runs over the same category do not overwrite each other.

        Returns:
            Path to the written file
        """
        output_path.mkdir(parents=True, exist_ok=True)
        stamp = ''.join(ch for ch in report.generated_at if ch.isalnum())
        stem = f"ratios_{report.category}_{stamp}" if stamp else f"ratios_{report.category}"

        filepath = output_path / f"{stem}{self.file_extension}"
        filepath.write_text(self.format_report(report), encoding='utf-8')
        return filepath


class FormatterRegistry:
    """Formatter classes keyed by format_name."""

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        cls._formatters[formatter_class.format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str, **options: Any) -> Optional[BaseFormatter]:
        """Instantiate the formatter for format_name, or None if unknown."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class is None:
            return None
        return formatter_class(**options)

    @classmethod
    def get_available(cls) -> List[str]:
        return list(cls._formatters)


__all__ = ['BaseFormatter', 'FormatterRegistry']
