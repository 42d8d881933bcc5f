# Path: fin_ratio/ratio_engine/__init__.py
"""
Ratio Engine Module

Computes financial ratios for one category at a time from user inputs.

Architecture:
    ratio_models.py       - Field, category and result data classes
    validity.py           - Shared "is this a finite number" predicate
    ratio_definitions.py  - Declarative ratio definitions per category
    categories.py         - Static category registry
    ratio_engine.py       - Coercion, division ratios and orchestration
    ratio_composites.py   - Non-division calculators (DCF, EVA, WACC)
    number_format.py      - Display formatting of computed values

Usage:
    from ratio_engine import compute_ratios

    ratios = compute_ratios('valuation', {'marketPrice': 50, 'eps': 5})
    # {'P/E': 10.0, 'Earnings Yield': 0.1}

Logging:
    Uses the PROCESS layer of the IPO logging system. Skipped ratios
    are logged at DEBUG with the reason.
"""

from .ratio_models import FieldDefinition, Category, RatioResult, AnalysisResult
from .validity import to_number, is_valid, parse_number_list
from .number_format import format_ratio_value
from .categories import (
    CATEGORIES,
    UnknownCategoryError,
    get_category,
    list_categories,
)
from .ratio_engine import coerce_inputs, calculate_ratios, analyze, compute_ratios


__all__ = [
    # Models
    'FieldDefinition',
    'Category',
    'RatioResult',
    'AnalysisResult',
    # Validity
    'to_number',
    'is_valid',
    'parse_number_list',
    # Formatting
    'format_ratio_value',
    # Registry
    'CATEGORIES',
    'UnknownCategoryError',
    'get_category',
    'list_categories',
    # Engine
    'coerce_inputs',
    'calculate_ratios',
    'analyze',
    'compute_ratios',
]
