# Path: fin_ratio/core/ui/__init__.py
"""
fin_ratio UI Package

User interface components for interactive ratio analysis.

Provides:
- Category selection menu
- Field-by-field input prompts
- Yes/no confirmation
"""

from .user_input import (
    CategorySelector,
    FieldPrompter,
    display_menu,
    get_user_selection,
    confirm_action,
)

__all__ = [
    'CategorySelector',
    'FieldPrompter',
    'display_menu',
    'get_user_selection',
    'confirm_action',
]
