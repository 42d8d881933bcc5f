# Path: fin_ratio/core/logger/__init__.py
"""
fin_ratio Logger Package

IPO-aware logging for the ratio analysis tool.

Provides separate log streams for:
- INPUT layer (CLI, input files, prompts)
- PROCESS layer (coercion, ratio engine)
- OUTPUT layer (reports, exports)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
