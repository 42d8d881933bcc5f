#!/usr/bin/env python3
# Path: fin_ratio/main.py
"""
fin_ratio - Main Entry Point

Financial ratio calculator. Computes the ratios of one category from
whatever inputs are supplied and renders them as a table and a bar chart.

Data Flow:
    INPUT:   --set key=value, --input-file, or interactive prompts
    PROCESS: Coercion and ratio calculation (ratio_engine)
    OUTPUT:  Console report, optional text/JSON/CSV files

Usage:
    python main.py                          # Interactive mode
    python main.py --list                   # List categories
    python main.py -c liquidity --fields    # Show a category's inputs
    python main.py -c valuation -s marketPrice=50 -s eps=5
"""

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional

# Ensure fin_ratio root is in path
sys.path.insert(0, str(Path(__file__).parent))

from config_loader import ConfigLoader
from core.logger import setup_ipo_logging, get_input_logger
from core.ui.user_input import CategorySelector, FieldPrompter, confirm_action
from output import ReportGenerator
from ratio_engine import UnknownCategoryError, analyze, get_category
from ratio_engine import list_categories as registered_categories
from constants import (
    STATUS_OK, STATUS_FAIL, STATUS_WARN, STATUS_INFO,
    MENU_HEADER, MENU_SEPARATOR,
    EMPTY_RESULT_WARNING,
    OutputFormat,
)


logger = get_input_logger('main')


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  FIN_RATIO - Financial Ratio Calculator")
    print("  Valuation, profitability, liquidity, leverage and more")
    print(MENU_HEADER)
    print()


def list_categories() -> None:
    """List all ratio categories with their descriptions."""
    categories = registered_categories()

    print(f"\n{STATUS_OK} {len(categories)} ratio categories:\n")
    print(f"  {'Key':<15} {'Title':<38} Ratios")
    print(f"  {MENU_SEPARATOR}")

    for category in categories:
        print(f"  {category.key:<15} {category.title:<38} {len(category.ratios)}")
        print(f"  {'':<15} {category.description}")

    print()


def list_fields(category_key: str) -> None:
    """
    Print the input fields of one category.

    Args:
        category_key: Registry key

    Raises:
        UnknownCategoryError: If the key is not registered
    """
    category = get_category(category_key)

    print(f"\n{STATUS_INFO} {category.title} inputs:\n")
    for field_def in category.fields:
        kind = ' (comma-separated list)' if field_def.is_list else ''
        print(f"  {field_def.key:<25} {field_def.label}{kind}")

    print(f"\n  Ratios: {', '.join(category.ratio_names)}")
    print()


def parse_set_arguments(assignments: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse repeated --set key=value arguments.

    Args:
        assignments: Raw 'key=value' strings

    Returns:
        Dict of key to raw value text; later keys override earlier ones

    Raises:
        ValueError: If an assignment has no '=' or an empty key
    """
    values = {}
    for assignment in assignments or []:
        key, sep, value = assignment.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected key=value, got: {assignment!r}")
        values[key] = value.strip()
    return values


def load_input_file(path: Path) -> Dict[str, Any]:
    """
    Load raw inputs from a JSON object file.

    Args:
        path: JSON file mapping field key to value

    Returns:
        Dict of raw values

    Raises:
        ValueError: If the file cannot be read or is not a JSON object
    """
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except OSError as e:
        raise ValueError(f"Cannot read input file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Input file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Input file {path} must contain a JSON object")

    logger.info(f"Loaded {len(data)} inputs from {path}")
    return data


def run_analysis(
    config: ConfigLoader,
    category_key: str,
    raw_values: Dict[str, Any],
    fmt: str = OutputFormat.TEXT.value,
    output_dir: Optional[Path] = None,
    save: bool = False,
) -> int:
    """
    Analyze one category and render the report.

    Args:
        config: Configuration loader
        category_key: Registry key
        raw_values: Raw inputs for the category
        fmt: Console output format
        output_dir: Directory to write report files to
        save: Write report files to the configured output directory

    Returns:
        Exit code (0 for success, including an empty result)
    """
    result = analyze(category_key, raw_values)

    generator = ReportGenerator(config)
    report = generator.generate(result)
    print(generator.to_console(report, fmt))

    if result.is_empty:
        logger.warning(f"No ratios computed for {result.category}")
        stream = sys.stdout if fmt == OutputFormat.TEXT.value else sys.stderr
        print(f"{STATUS_WARN} {EMPTY_RESULT_WARNING}", file=stream)

    if output_dir is not None or save:
        written = generator.write(report, output_dir=output_dir)
        for fmt_name, filepath in written.items():
            print(f"{STATUS_OK} Wrote {fmt_name}: {filepath}", file=sys.stderr)

    return 0


def run_interactive(
    config: ConfigLoader,
    fmt: str = OutputFormat.TEXT.value,
    output_dir: Optional[Path] = None,
    save: bool = False,
) -> int:
    """
    Run in interactive mode.

    Args:
        config: Configuration loader
        fmt: Console output format
        output_dir: Directory to write report files to
        save: Write report files to the configured output directory

    Returns:
        Exit code (0 for success)
    """
    logger.info("Starting interactive mode")
    selector = CategorySelector()

    while True:
        category = selector.select_category()
        if category is None:
            print("\n[Cancelled]")
            return 0

        raw_values = FieldPrompter(category).prompt_all()
        run_analysis(config, category.key, raw_values, fmt, output_dir, save)

        if not confirm_action("Analyze another category?"):
            return 0


def initialize_system() -> ConfigLoader:
    """
    Initialize fin_ratio system components.

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    log_level = 'DEBUG' if config.get('debug', False) else config.get('log_level', 'INFO')
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=log_level,
        console_output=config.get('log_console', False),
        max_bytes=config.get('log_max_size_mb', 10) * 1024 * 1024,
        backup_count=config.get('log_backup_count', 5),
    )

    return config


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description='fin_ratio - Financial Ratio Calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                               Interactive category selection
  python main.py --list                        List all categories
  python main.py -c liquidity --fields         Show liquidity inputs
  python main.py -c valuation -s marketPrice=50 -s eps=5
  python main.py -c intrinsic --input-file inputs.json -f json
        """
    )

    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help='List all ratio categories'
    )

    parser.add_argument(
        '--category', '-c',
        type=str,
        help='Category to analyze (e.g., valuation, liquidity)'
    )

    parser.add_argument(
        '--fields',
        action='store_true',
        help='Show the input fields of --category and exit'
    )

    parser.add_argument(
        '--set', '-s',
        action='append',
        metavar='KEY=VALUE',
        help='Set an input value (repeatable)'
    )

    parser.add_argument(
        '--input-file',
        type=Path,
        help='JSON file with input values (--set overrides it)'
    )

    parser.add_argument(
        '--format', '-f',
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help='Console output format (default: text)'
    )

    parser.add_argument(
        '--output-dir', '-o',
        type=Path,
        help='Also write report files to this directory'
    )

    parser.add_argument(
        '--save',
        action='store_true',
        help='Write report files to the configured output directory'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for fin_ratio.

    Args:
        argv: Command line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    if not args.quiet and args.format == OutputFormat.TEXT.value:
        print_banner()

    try:
        config = initialize_system()

        if args.list:
            list_categories()
            return 0

        category_key = args.category or config.get('default_category')

        if args.fields:
            if not category_key:
                raise ValueError("--fields requires --category")
            list_fields(category_key)
            return 0

        if not category_key:
            return run_interactive(config, args.format, args.output_dir, args.save)

        raw_values: Dict[str, Any] = {}
        if args.input_file:
            raw_values.update(load_input_file(args.input_file))
        raw_values.update(parse_set_arguments(args.set))

        return run_analysis(
            config, category_key, raw_values,
            args.format, args.output_dir, args.save,
        )

    except UnknownCategoryError as e:
        print(f"\n{STATUS_FAIL} {e}", file=sys.stderr)
        return 1

    except ValueError as e:
        print(f"\n{STATUS_FAIL} Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130

    except Exception as e:
        print(f"\n{STATUS_FAIL} Unexpected error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
