# Path: fin_ratio/ratio_engine/ratio_models.py
"""
Ratio Models

Data classes for the category registry and for ratio calculation results.
Used by the ratio engine and consumed by display/reporting modules.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from constants import FieldKind


@dataclass(frozen=True)
class FieldDefinition:
    """
    One input field of a category.

    Attributes:
        key: Field key, unique within its category (e.g., 'marketPrice')
        label: Human-readable label shown when prompting
        kind: NUMERIC for a single number, NUMBER_LIST for a
              comma-separated sequence of numbers
        step: Optional numeric step hint for input widgets
    """
    key: str
    label: str
    kind: FieldKind = FieldKind.NUMERIC
    step: Optional[float] = None

    @property
    def is_list(self) -> bool:
        return self.kind is FieldKind.NUMBER_LIST


@dataclass(frozen=True)
class Category:
    """
    A ratio category: input schema plus ordered ratio definitions.

    Attributes:
        key: Category key (e.g., 'valuation')
        title: Display title (e.g., 'Valuation Ratios')
        description: Short summary of the ratios offered
        fields: Ordered input field definitions
        ratios: Ordered ratio definitions (see ratio_definitions)
    """
    key: str
    title: str
    description: str
    fields: Tuple[FieldDefinition, ...]
    ratios: Tuple[Dict[str, Any], ...]

    @property
    def field_keys(self) -> List[str]:
        return [f.key for f in self.fields]

    @property
    def ratio_names(self) -> List[str]:
        return [r['name'] for r in self.ratios]

    def get_field(self, key: str) -> Optional[FieldDefinition]:
        """Find a field definition by key."""
        for field_def in self.fields:
            if field_def.key == key:
                return field_def
        return None


@dataclass
class RatioResult:
    """
    Result of a ratio calculation.

    Attributes:
        ratio_id: Machine identifier of the ratio
        ratio_name: Display name of the ratio
        value: Calculated ratio value
        formula: Formula description
        numerator: Numerator expression
        denominator: Denominator expression
        numerator_value: Numerator value used
        denominator_value: Denominator value used
        valid: Whether calculation was successful
        error: Reason the ratio was skipped
    """
    ratio_id: str
    ratio_name: str
    value: Optional[float] = None
    formula: str = ''
    numerator: str = ''
    denominator: str = ''
    numerator_value: Optional[float] = None
    denominator_value: Optional[float] = None
    valid: bool = False
    error: Optional[str] = None


@dataclass
class AnalysisResult:
    """
    Complete analysis result for one category.

    Attributes:
        category: Category key
        title: Category title
        inputs: Coerced input values (float, list of floats, or None)
        ratio_results: Every ratio attempted, valid or not, in order
        ratios: Ordered mapping of display name to value (valid only)
        summary: Summary statistics
    """
    category: str
    title: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    ratio_results: List[RatioResult] = field(default_factory=list)
    ratios: Dict[str, float] = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when no ratio could be computed."""
        return not self.ratios


__all__ = ['FieldDefinition', 'Category', 'RatioResult', 'AnalysisResult']
