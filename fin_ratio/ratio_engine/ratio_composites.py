# Path: fin_ratio/ratio_engine/ratio_composites.py
"""
Composite Ratio Calculators

Handles calculations that go beyond numerator/denominator division:
plain signed sums, discounted cash flow, economic value added and the
weighted average cost of capital.

Each calculator takes (ratio_def, values, computed) and returns a
RatioResult matching the standard interface.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from constants import NON_FINITE_ERROR

from .ratio_models import RatioResult


def _new_result(ratio_def: Dict[str, Any]) -> RatioResult:
    return RatioResult(
        ratio_id=ratio_def['ratio_id'],
        ratio_name=ratio_def['name'],
        formula=ratio_def.get('formula', ''),
    )


def _get_value(name: str, values: Mapping[str, Any]) -> Optional[float]:
    """Get a numeric input value, or None."""
    value = values.get(name)
    if value is None or isinstance(value, list):
        return None
    return value


def _missing_components(
    names: List[str],
    values: Mapping[str, Any],
) -> List[str]:
    """Return names of numeric inputs that are missing."""
    return [n for n in names if _get_value(n, values) is None]


def calculate_absolute(
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> RatioResult:
    """Evaluate numerator expression only (no division)."""
    from .ratio_engine import _resolve_component_value
    ratio = _new_result(ratio_def)
    num_result = _resolve_component_value(
        ratio_def['numerator'], values, computed,
    )
    ratio.numerator = num_result['formula']
    if num_result['error']:
        ratio.error = num_result['error']
        return ratio
    ratio.numerator_value = num_result['value']
    ratio.value = num_result['value']
    ratio.valid = True
    return ratio


def calculate_present_value(
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> RatioResult:
    """
    Discounted cash flow.

    DCF = sum of CF_t / (1 + r)^t for t = 1..n
    """
    ratio = _new_result(ratio_def)
    series_key, rate_key = ratio_def['components']

    cash_flows = values.get(series_key)
    rate = _get_value(rate_key, values)

    missing = []
    if cash_flows is None:
        missing.append(series_key)
    if rate is None:
        missing.append(rate_key)
    if missing:
        ratio.error = f"Missing: {', '.join(missing)}"
        return ratio

    growth = 1.0 + rate
    ratio.numerator = f"{len(cash_flows)} cash flows"
    ratio.denominator = f"(1 + {rate})^t"

    total = 0.0
    for t, cf in enumerate(cash_flows, start=1):
        try:
            discount = growth ** t
        except OverflowError:
            ratio.error = NON_FINITE_ERROR
            return ratio
        # (1 + r)^t underflows to zero for r close to -1
        if discount == 0:
            ratio.error = "Division by zero"
            return ratio
        total += cf / discount

    ratio.value = total
    ratio.valid = True
    return ratio


def calculate_economic_value_added(
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> RatioResult:
    """
    Economic Value Added.

    EVA = NOPAT - (WACC x Invested Capital)
    """
    ratio = _new_result(ratio_def)
    nopat_key, wacc_key, capital_key = ratio_def['components']

    missing = _missing_components(ratio_def['components'], values)
    if missing:
        ratio.error = f"Missing: {', '.join(missing)}"
        return ratio

    nopat = _get_value(nopat_key, values)
    capital_charge = _get_value(wacc_key, values) * _get_value(capital_key, values)

    ratio.numerator = nopat_key
    ratio.numerator_value = nopat
    ratio.denominator = f"{wacc_key} x {capital_key}"
    ratio.denominator_value = capital_charge
    ratio.value = nopat - capital_charge
    ratio.valid = True
    return ratio


def calculate_wacc(
    ratio_def: Dict[str, Any],
    values: Mapping[str, Any],
    computed: Mapping[str, float],
) -> RatioResult:
    """
    Weighted average cost of capital.

    WACC = (E/V x Re) + (D/V x Rd x (1 - Tax Rate))
    """
    ratio = _new_result(ratio_def)

    missing = _missing_components(ratio_def['components'], values)
    if missing:
        ratio.error = f"Missing: {', '.join(missing)}"
        return ratio

    equity, total, cost_equity, debt, cost_debt, tax_rate = (
        _get_value(name, values) for name in ratio_def['components']
    )

    if total == 0:
        ratio.error = "Division by zero"
        return ratio

    equity_term = equity / total * cost_equity
    debt_term = debt / total * cost_debt * (1 - tax_rate)

    ratio.numerator = f"E/V x Re = {equity_term:.6f}"
    ratio.denominator = f"D/V x Rd x (1 - t) = {debt_term:.6f}"
    ratio.value = equity_term + debt_term
    ratio.valid = True
    return ratio


# Registry mapping calculation_type -> calculator function
COMPOSITE_CALCULATORS: Dict[str, Callable[..., RatioResult]] = {
    'absolute': calculate_absolute,
    'present_value': calculate_present_value,
    'economic_value_added': calculate_economic_value_added,
    'wacc': calculate_wacc,
}


__all__ = ['COMPOSITE_CALCULATORS']
