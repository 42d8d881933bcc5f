# Path: fin_ratio/output/table.py
"""
Results Table

Turns the computed ratio mapping into display rows of
(ratio name, formatted value), preserving derivation order.
"""

from typing import List, Mapping, Tuple

from ratio_engine.number_format import format_ratio_value


def build_table_rows(ratios: Mapping[str, float]) -> List[Tuple[str, str]]:
    """
    Build table rows from computed ratios.

    Args:
        ratios: Ordered mapping of ratio display name to value

    Returns:
        List of (name, formatted value) tuples
    """
    return [(name, format_ratio_value(value)) for name, value in ratios.items()]


__all__ = ['build_table_rows']
