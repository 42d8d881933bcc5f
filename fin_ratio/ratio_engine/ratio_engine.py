# Path: fin_ratio/ratio_engine/ratio_engine.py
"""
Ratio Engine

Calculates financial ratios for one category from raw user inputs.
Handles both simple (single component) and complex (multi-component)
numerator/denominator definitions, plus references to ratios computed
earlier in the same category.

Missing inputs and zero divisors never raise: the ratio is skipped and
the reason is kept on its RatioResult.
"""

import math
from typing import Any, Dict, List, Mapping, Optional, Set

from constants import FieldKind, NON_FINITE_ERROR, RATIO_REFERENCE_PREFIX
from core.logger.ipo_logging import get_process_logger

from .categories import get_category
from .ratio_models import AnalysisResult, Category, RatioResult
from .validity import parse_number_list, to_number


logger = get_process_logger('ratio_engine')


def coerce_inputs(
    category: Category,
    raw_values: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Convert raw inputs into engine values.

    Numeric fields become a finite float or None. Number-list fields
    become a list of floats, or None when left blank. A non-blank list
    with no numeric token becomes an empty list.
    Keys that are not fields of the category are ignored.

    Args:
        category: Category whose field schema drives the coercion
        raw_values: Mapping of field key to raw value

    Returns:
        Dict with one entry per category field
    """
    raw_values = raw_values or {}

    unknown = [k for k in raw_values if category.get_field(k) is None]
    if unknown:
        logger.debug(
            f"Ignoring inputs not used by '{category.key}': "
            f"{', '.join(sorted(unknown))}"
        )

    values: Dict[str, Any] = {}
    for field_def in category.fields:
        raw = raw_values.get(field_def.key)
        if field_def.kind is FieldKind.NUMBER_LIST:
            values[field_def.key] = None if _is_blank(raw) else parse_number_list(raw)
        else:
            values[field_def.key] = to_number(raw)
    return values


def _is_blank(raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip()
    if isinstance(raw, (list, tuple)):
        return not raw
    return False


def calculate_ratios(
    category: Category,
    values: Mapping[str, Any],
) -> List[RatioResult]:
    """
    Calculate every ratio of a category from coerced values.

    Ratios are evaluated in definition order so later ratios can refer
    to earlier ones ('@ratio_id').

    Args:
        category: Category to calculate
        values: Coerced inputs (see coerce_inputs)

    Returns:
        List of RatioResult, one per definition
    """
    computed: Dict[str, float] = {}
    # Ratios whose operands were all valid, even if the result was not finite
    resolved: Set[str] = set()
    results = []

    for ratio_def in category.ratios:
        ratio = _calculate_single_ratio(ratio_def, values, computed, resolved)
        if ratio.valid:
            computed[ratio_def['ratio_id']] = ratio.value
        else:
            logger.debug(f"Skipped {ratio.ratio_name}: {ratio.error}")
        if ratio.valid or ratio.error == NON_FINITE_ERROR:
            resolved.add(ratio_def['ratio_id'])
        results.append(ratio)

    return results


def analyze(
    category_key: str,
    raw_values: Optional[Mapping[str, Any]] = None,
) -> AnalysisResult:
    """
    Run a complete analysis for one category.

    Args:
        category_key: Registry key (e.g., 'valuation')
        raw_values: Mapping of field key to raw value

    Returns:
        AnalysisResult with coerced inputs, every attempted ratio and
        the ordered mapping of computed ratios

    Raises:
        UnknownCategoryError: If the category key is not registered
    """
    category = get_category(category_key)
    values = coerce_inputs(category, raw_values)
    ratio_results = calculate_ratios(category, values)

    ratios = {r.ratio_name: r.value for r in ratio_results if r.valid}

    supplied = sum(1 for v in values.values() if v is not None)
    result = AnalysisResult(
        category=category.key,
        title=category.title,
        inputs=values,
        ratio_results=ratio_results,
        ratios=ratios,
        summary={
            'supplied_inputs': supplied,
            'total_inputs': len(category.fields),
            'valid_ratios': len(ratios),
            'total_ratios': len(ratio_results),
        },
    )

    logger.info(
        f"{category.title}: {len(ratios)}/{len(ratio_results)} ratios "
        f"from {supplied}/{len(category.fields)} inputs"
    )
    return result


def compute_ratios(
    category_key: str,
    raw_values: Optional[Mapping[str, Any]] = None,
) -> Dict[str, float]:
    """
    Compute the ordered mapping of ratio display name to value.

    Example:
        >>> compute_ratios('valuation', {'marketPrice': 50, 'eps': 5})
        {'P/E': 10.0, 'Earnings Yield': 0.1}
    """
    return analyze(category_key, raw_values).ratios


def _calculate_single_ratio(
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
    resolved: Set[str],
) -> RatioResult:
    """Calculate a single ratio from its definition."""
    superseded_by = ratio_def.get('unless')
    if superseded_by and superseded_by in resolved:
        ratio = _new_result(ratio_def)
        ratio.error = f"Superseded by {superseded_by}"
        return ratio

    calc_type = ratio_def.get('calculation_type', 'division')
    if calc_type == 'division':
        ratio = _calculate_division(ratio_def, values, computed)
    else:
        ratio = _dispatch_composite(calc_type, ratio_def, values, computed)

    if ratio.valid and not math.isfinite(ratio.value):
        ratio.value = None
        ratio.valid = False
        ratio.error = NON_FINITE_ERROR
    return ratio


def _new_result(ratio_def: Dict[str, Any]) -> RatioResult:
    return RatioResult(
        ratio_id=ratio_def['ratio_id'],
        ratio_name=ratio_def['name'],
        formula=ratio_def.get('formula', ''),
    )


def _dispatch_composite(
    calc_type: str,
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> RatioResult:
    """Dispatch to composite calculator by type."""
    from .ratio_composites import COMPOSITE_CALCULATORS
    calculator = COMPOSITE_CALCULATORS.get(calc_type)
    if calculator is None:
        ratio = _new_result(ratio_def)
        ratio.error = f"Unknown calculation_type: {calc_type}"
        return ratio
    return calculator(ratio_def, values, computed)


def _calculate_division(
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> RatioResult:
    """Standard numerator / denominator calculation."""
    ratio = _new_result(ratio_def)

    num_result = _resolve_component_value(
        ratio_def['numerator'], values, computed,
    )
    ratio.numerator = num_result['formula']
    if num_result['error']:
        ratio.error = num_result['error']
        return ratio
    ratio.numerator_value = num_result['value']

    den_result = _resolve_component_value(
        ratio_def['denominator'], values, computed,
    )
    fallback = ratio_def.get('denominator_fallback')
    if den_result['error'] and fallback:
        den_result = _resolve_component_value(fallback, values, computed)

    ratio.denominator = den_result['formula']
    if den_result['error']:
        ratio.error = den_result['error']
        return ratio
    ratio.denominator_value = den_result['value']

    if ratio.denominator_value == 0:
        ratio.error = "Division by zero"
        return ratio

    scale = ratio_def.get('scale_factor', 1)
    ratio.value = (ratio.numerator_value / ratio.denominator_value) * scale
    ratio.valid = True
    return ratio


def _resolve_component_value(
    component_def: Any,
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> Dict[str, Any]:
    """
    Resolve a component definition to its numeric value.

    Simple: 'currentAssets' -> single input lookup
    Reference: '@beta' -> ratio computed earlier
    Complex: ['currentAssets', '-inventory'] -> currentAssets - inventory
    """
    if isinstance(component_def, str):
        return _resolve_simple(component_def, values, computed)
    elif isinstance(component_def, list):
        return _resolve_complex(component_def, values, computed)
    else:
        return {
            'value': None,
            'formula': str(component_def),
            'error': f"Invalid component type: {type(component_def)}",
        }


def _lookup(
    name: str,
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> Optional[float]:
    """Return a finite number for an input or ratio reference, or None."""
    if name.startswith(RATIO_REFERENCE_PREFIX):
        return computed.get(name[len(RATIO_REFERENCE_PREFIX):])
    value = values.get(name)
    if isinstance(value, list):
        return None
    return value


def _resolve_simple(
    name: str,
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> Dict[str, Any]:
    """Resolve a single input or ratio reference to its value."""
    value = _lookup(name, values, computed)
    if value is None:
        return {
            'value': None,
            'formula': name,
            'error': f"Missing: {name}",
        }
    return {'value': value, 'formula': name, 'error': None}


def _resolve_complex(
    component_list: List[str],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> Dict[str, Any]:
    """Resolve a signed sum of components to its value."""
    total_value = 0.0
    formula_parts = []
    missing = []

    for item in component_list:
        if item.startswith('-'):
            operator = -1
            name = item[1:]
            formula_parts.append(f"- {name}")
        elif item.startswith('+'):
            operator = 1
            name = item[1:]
            formula_parts.append(f"+ {name}")
        else:
            operator = 1
            name = item
            if formula_parts:
                formula_parts.append(f"+ {name}")
            else:
                formula_parts.append(name)

        value = _lookup(name, values, computed)
        if value is None:
            missing.append(name)
        else:
            total_value += operator * value

    formula = ' '.join(formula_parts)

    if missing:
        return {
            'value': None,
            'formula': formula,
            'error': f"Missing: {', '.join(missing)}",
        }

    return {'value': total_value, 'formula': formula, 'error': None}


__all__ = [
    'coerce_inputs',
    'calculate_ratios',
    'analyze',
    'compute_ratios',
]
