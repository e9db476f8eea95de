"""Main entry point for the roman converter package."""
import sys
import json
import argparse
from pathlib import Path

from .batch_convert import convert_csv_column
from .common.config import ROMAN_CONVERTER_DEBUG, VALIDATION_RULES
from .common.results import CONVERSION_RESULT_ADAPTER, ConversionResult
from .common.symbols import multiplier_legend, symbol_legend
from .common.validators import validate_file
from .converter import (
    convert,
    convert_decimal_to_roman,
    convert_roman_to_decimal,
    describe_tokens,
    is_decimal_input,
)
from .sanitizer import sanitize


def print_menu():
    """Print the main menu."""
    print("\n=== Roman Numeral Converter ===\n")
    print("1. Convert roman numeral to decimal")
    print("2. Convert decimal to roman numeral")
    print("3. Convert (detect direction)")
    print("4. Show symbol legend")
    print("5. Convert a CSV column")
    print("0. Exit")


def load_config(config_path: str) -> dict:
    """Load configuration from JSON file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    validate_file(config_path, "Config file")

    with open(config_path, 'r') as f:
        return json.load(f)


def read_roman_input(prompt: str) -> str:
    """Read a roman numeral, keeping only valid characters up to the length cap."""
    return sanitize(input(prompt))[:VALIDATION_RULES.max_length]


def print_result(result: ConversionResult, as_json: bool = False) -> None:
    """Print a conversion result as a success or an error line, or as JSON."""
    if as_json:
        print(CONVERSION_RESULT_ADAPTER.dump_json(result).decode("utf-8"))
        return
    if result.ok:
        print(f"Success! Result: {result.value}")
    else:
        print(f"Error: {result.error}")


def print_debug_tokens(roman: str) -> None:
    """Show the parsed tokens of a roman numeral when debug mode is on."""
    if not ROMAN_CONVERTER_DEBUG:
        return
    description = describe_tokens(roman)
    if description:
        print(f"  Tokens: {description}")


def main(argv=None):
    """Main menu for roman converter functions."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Roman Numeral Converter')
    parser.add_argument('config', nargs='?', help='Path to configuration JSON file (used for CSV conversion)')
    parser.add_argument('--json', action='store_true', help='Print conversion results as JSON')
    args = parser.parse_args(argv)

    # Load configuration
    config = {}
    if args.config:
        try:
            config = load_config(args.config)
            print(f"Loaded configuration from: {args.config}")
        except Exception as e:
            print(f"Error loading config: {e}")
            sys.exit(1)

    while True:
        print_menu()
        try:
            choice = input("\nEnter your choice (0-5): ").strip()
        except (KeyboardInterrupt, EOFError):
            sys.exit(0)

        if choice == "0":
            sys.exit(0)
        elif choice == "1":
            run_roman_to_decimal(args.json)
        elif choice == "2":
            run_decimal_to_roman(args.json)
        elif choice == "3":
            run_auto_convert(args.json)
        elif choice == "4":
            run_show_legend()
        elif choice == "5":
            run_convert_csv(config)
        else:
            print("Invalid choice. Please try again.")


def run_roman_to_decimal(as_json=False):
    """Run the roman to decimal conversion."""
    print("\n--- Convert roman numeral to decimal ---")

    try:
        roman = read_roman_input("Roman numeral (e.g. X·L·V·MMM): ")
        print_debug_tokens(roman)
        print_result(convert_roman_to_decimal(roman), as_json)
    except Exception as e:
        print(f"Error: {e}")


def run_decimal_to_roman(as_json=False):
    """Run the decimal to roman conversion."""
    print("\n--- Convert decimal to roman numeral ---")

    try:
        number = input("Decimal number (1 to 3,999,999,999): ")
        print_result(convert_decimal_to_roman(number), as_json)
    except Exception as e:
        print(f"Error: {e}")


def run_auto_convert(as_json=False):
    """Run the conversion, choosing the direction from the input."""
    print("\n--- Convert (detect direction) ---")

    try:
        raw = input("Roman numeral or decimal number: ").strip()
        if not is_decimal_input(raw):
            raw = sanitize(raw)[:VALIDATION_RULES.max_length]
            print_debug_tokens(raw)
        print_result(convert(raw), as_json)
    except Exception as e:
        print(f"Error: {e}")


def run_show_legend():
    """Print the symbol and multiplier tables."""
    print("\n--- Symbol legend ---")

    for symbol, value in symbol_legend():
        print(f"  {symbol} = {value:,}")
    for mark, multiplier in multiplier_legend():
        print(f"  {mark} after a symbol = x {multiplier:,}")


def run_convert_csv(config):
    """Run the CSV column conversion."""
    print("\n--- Convert a CSV column ---")

    try:
        input_csv = config['paths']['input_csv']
        output_csv = config['paths']['output_csv']
        column = config.get('column', 'input')
        direction = config.get('direction', 'auto')
        output_file = convert_csv_column(input_csv, output_csv, column, direction)
        print(f"Success! Created: {output_file}")
    except KeyError as e:
        print(f"Error: missing config entry {e}")
    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
