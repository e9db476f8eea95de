"""Convert a column of a CSV file between roman and decimal notation.

This module reads a CSV file, converts every cell of one column and writes a
copy of the file with two extra columns:
- value: the converted number, empty when the cell could not be converted
- error: the error message, empty when the conversion succeeded

Rows that fail to convert are kept, so the output always has one row per input
row and can be reviewed side by side with the original.
"""
import pandas as pd
from pathlib import Path
from typing import Any, Callable, Dict

from .common.progress import ProgressPrinter
from .common.results import ConversionResult
from .common.validators import validate_csv_file
from .converter import convert, convert_decimal_to_roman, convert_roman_to_decimal

# Conversion function used for each direction name
DIRECTIONS: Dict[str, Callable[[Any], ConversionResult]] = {
    "auto": convert,
    "roman": convert_roman_to_decimal,
    "decimal": convert_decimal_to_roman,
}


def _cell_to_input(cell: Any) -> Any:
    """Turn a pandas cell into converter input (NaN becomes None)."""
    if pd.isna(cell):
        return None
    return cell


def convert_csv_column(
    input_csv: str,
    output_csv: str,
    column: str = "input",
    direction: str = "auto",
) -> str:
    """Convert every cell of a CSV column and save the results.

    Args:
        input_csv: Path to the CSV file to read
        output_csv: Path where the converted CSV is written. Parent folders
                    are created if needed.
        column: Name of the column holding the numbers to convert
        direction: "roman" (roman to decimal), "decimal" (decimal to roman)
                   or "auto" (decided per cell)

    Returns:
        str: Path to the written CSV file

    Output format:
        The input columns unchanged, followed by "value" and "error".

    Example:
        Input column "input" with rows "XIV", "4000", "IIII" gives values
        14, "I·V·", "" and an error only on the third row.

    Raises:
        ValueError: If the input is not a CSV file, the column is missing or
                    the direction is unknown
    """
    input_path = Path(input_csv)
    output_path = Path(output_csv)

    # Validate inputs
    validate_csv_file(input_path, "Input CSV")
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {direction} (expected one of {', '.join(DIRECTIONS)})")

    # Read everything as text so "0012" or "XIV" reach the converter untouched
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False, na_values=[""])

    if column not in df.columns:
        raise ValueError(f"{column} column not found in {input_path.name}")

    if len(df) == 0:
        print("Warning: Input CSV has no rows. Writing an empty result file.")

    converter = DIRECTIONS[direction]
    values = []
    errors = []
    progress = ProgressPrinter("Converting rows", len(df))

    for cell in df[column]:
        progress.advance()
        result = converter(_cell_to_input(cell))
        if result.ok:
            values.append(result.value)
            errors.append("")
        else:
            values.append("")
            errors.append(result.error)

    progress.done()

    df["value"] = values
    df["error"] = errors

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    failed = sum(1 for error in errors if error)
    print(f"\nConversion completed! {len(df) - failed} converted, {failed} failed: {output_path}")
    return str(output_path)
