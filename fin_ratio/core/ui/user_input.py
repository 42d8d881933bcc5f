# Path: fin_ratio/core/ui/user_input.py
"""
User Input Module for fin_ratio

Handles user interaction for:
- Choosing a ratio category from a numbered menu
- Entering the input fields of the chosen category
- Confirming follow-up actions (saving reports, another run)

Values entered here stay raw strings; coercion to numbers happens in
the ratio engine so CLI, file and prompt input all share one path.
"""

from typing import Dict, List, Optional

from constants import MENU_HEADER, MENU_SEPARATOR
from core.logger import get_input_logger
from ratio_engine.categories import list_categories
from ratio_engine.ratio_models import Category, FieldDefinition
from ratio_engine.validity import parse_number_list, to_number

logger = get_input_logger('user_input')


class CategorySelector:
    """
    Interactive selector for ratio categories.

    Example:
        selector = CategorySelector()
        category = selector.select_category()
    """

    def __init__(self, categories: Optional[List[Category]] = None):
        """
        Initialize category selector.

        Args:
            categories: Categories to offer (default: whole registry)
        """
        self.categories = categories if categories is not None else list_categories()

    def select_category(self) -> Optional[Category]:
        """
        Interactive category selection.

        Returns:
            Selected Category or None if cancelled
        """
        options = [f"{c.title:38s} {c.description}"[:70] for c in self.categories]
        display_menu('  Ratio Categories:', options, show_all=False)

        selection = get_user_selection(len(self.categories), allow_all=False)
        if selection <= 0:
            logger.info("Category selection cancelled")
            return None

        category = self.categories[selection - 1]
        logger.info(f"Selected category: {category.key}")
        return category


class FieldPrompter:
    """
    Prompts for every input field of a category.

    Blank answers leave the field empty. Numeric fields re-prompt until
    they get a number or a blank; list fields accept comma-separated
    numbers.

    Example:
        prompter = FieldPrompter(get_category('liquidity'))
        raw_values = prompter.prompt_all()
    """

    def __init__(self, category: Category):
        self.category = category

    def prompt_all(self) -> Dict[str, str]:
        """
        Prompt for each field in order.

        Returns:
            Dict of field key to raw text for every non-blank answer
        """
        print(f"\n{self.category.title}")
        print("(press Enter to skip a field)")

        values = {}
        for field_def in self.category.fields:
            answer = self.prompt_field(field_def)
            if answer is not None:
                values[field_def.key] = answer

        logger.info(
            f"Collected {len(values)}/{len(self.category.fields)} inputs "
            f"for {self.category.key}"
        )
        return values

    def prompt_field(self, field_def: FieldDefinition) -> Optional[str]:
        """
        Prompt for one field until the answer is blank or usable.

        Args:
            field_def: Field to ask for

        Returns:
            Raw answer text, or None when skipped
        """
        hint = " [comma-separated]" if field_def.is_list else ''
        while True:
            answer = input(f"  {field_def.label}{hint}: ").strip()
            if not answer:
                return None

            if field_def.is_list:
                if parse_number_list(answer):
                    return answer
                print("Please enter numbers separated by commas.")
            elif to_number(answer) is not None:
                return answer
            else:
                print("Please enter a valid number.")


def display_menu(title: str, options: List[str], show_all: bool = True) -> None:
    """
    Display a numbered menu.

    Args:
        title: Menu title
        options: List of option strings
        show_all: Whether to show the "ALL" option
    """
    print("\n" + MENU_HEADER)
    print(title)
    print(MENU_SEPARATOR)

    for i, option in enumerate(options, 1):
        print(f"  {i:3d}. {option}")

    print(MENU_SEPARATOR)
    print("    0. Exit")
    if show_all:
        print("   -1. Process ALL")
    print(MENU_HEADER)


def get_user_selection(max_value: int, allow_all: bool = True) -> int:
    """
    Get numeric selection from user.

    Args:
        max_value: Maximum valid selection
        allow_all: Whether -1 (all) is accepted

    Returns:
        User selection (0=exit, -1=all, 1 to max_value=specific)
    """
    while True:
        try:
            choice = input("\nEnter selection: ").strip()
            if not choice:
                continue

            value = int(choice)

            if value == 0:
                return 0
            elif value == -1 and allow_all:
                return -1
            elif 1 <= value <= max_value:
                return value
            elif allow_all:
                print(f"Invalid selection. Enter 1-{max_value}, 0 to exit, or -1 for all.")
            else:
                print(f"Invalid selection. Enter 1-{max_value}, or 0 to exit.")

        except ValueError:
            print("Please enter a valid number.")
        except KeyboardInterrupt:
            print("\n[Cancelled]")
            return 0


def confirm_action(prompt: str, default: bool = False) -> bool:
    """
    Prompt user for yes/no confirmation.

    Args:
        prompt: Question to display
        default: Default answer if user just presses Enter

    Returns:
        True for yes, False for no
    """
    suffix = " [Y/n]: " if default else " [y/N]: "

    while True:
        try:
            response = input(prompt + suffix).strip().lower()

            if not response:
                return default

            if response in ('y', 'yes'):
                return True
            elif response in ('n', 'no'):
                return False
            else:
                print("Please enter 'y' or 'n'.")

        except KeyboardInterrupt:
            print("\n[Cancelled]")
            return False


__all__ = [
    'CategorySelector',
    'FieldPrompter',
    'display_menu',
    'get_user_selection',
    'confirm_action',
]
