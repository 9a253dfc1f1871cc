"""
Batch evaluation of measurements held in a pandas DataFrame.

Each row is turned into a HumanBMI; rows that cannot be evaluated are
reported on a stairval Notepad instead of aborting the whole table.
"""

import logging
import typing

import pandas as pd
from stairval.notepad import Notepad

from .category import BMICategory
from .evaluator import HumanBMI

logger = logging.getLogger(__name__)

WEIGHT_COLUMN = "weight_in_kilograms"
HEIGHT_COLUMN = "height_in_meters"
BMI_COLUMN = "bmi"
CATEGORY_COLUMN = "category"


def _is_missing(value: typing.Any) -> bool:
    # None, NaN, pandas NA and empty/whitespace-only strings
    if value is None or (isinstance(value, str) and not value.strip()):
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _to_number(value: typing.Any) -> typing.Any:
    """
    Spreadsheet-ish cells often carry numbers as strings ("80", " 1.8 ").
    Strings are parsed as floats; anything else is handed to HumanBMI as is.
    """
    if isinstance(value, str):
        return float(value.strip())
    return value


def evaluate_row(
        index: typing.Any, row: pd.Series, notepad: Notepad,
        weight_column: str = WEIGHT_COLUMN, height_column: str = HEIGHT_COLUMN,
) -> typing.Optional[HumanBMI]:
    """
    Build a HumanBMI from one row, or return None and record why not.
    - missing weight/height -> warning
    - unparsable or non-positive values -> error
    """
    weight = row[weight_column]
    height = row[height_column]
    if _is_missing(weight) or _is_missing(height):
        notepad.add_warning(f"Row {index!r}: missing weight or height")
        return None

    try:
        return HumanBMI(
            weight_in_kilograms=_to_number(weight),
            height_in_meters=_to_number(height),
        )
    except ValueError as e:
        notepad.add_error(f"Row {index!r}: {e}")
        return None


def evaluate_table(
        df: pd.DataFrame, notepad: Notepad,
        weight_column: str = WEIGHT_COLUMN, height_column: str = HEIGHT_COLUMN,
) -> pd.DataFrame:
    """
    Return a copy of `df` with `bmi` and `category` columns added.
    Rows that cannot be evaluated get NaN / None and an issue on `notepad`.
    """
    result = df.copy()
    bmis: list[float] = []
    categories: list[typing.Optional[BMICategory]] = []

    missing = {weight_column, height_column} - set(df.columns)
    if missing:
        notepad.add_error(f"Table: missing required columns: {sorted(missing)}")
        bmis = [float("nan")] * len(df)
        categories = [None] * len(df)
    else:
        for index, row in df.iterrows():
            measurement = evaluate_row(index, row, notepad, weight_column, height_column)
            if measurement is None:
                bmis.append(float("nan"))
                categories.append(None)
                continue
            bmis.append(measurement.calculate_bmi())
            categories.append(measurement.get_bmi_category())

    result[BMI_COLUMN] = pd.Series(bmis, index=df.index, dtype=float)
    result[CATEGORY_COLUMN] = pd.Series(categories, index=df.index, dtype=object)
    logger.debug(
        "Evaluated %d rows, %d classified",
        len(df), sum(c is not None for c in categories),
    )
    return result


def summarize_categories(df: pd.DataFrame) -> dict[BMICategory, int]:
    """
    Count rows per category in a table produced by `evaluate_table`.
    Every category is present in the result, unclassified rows are skipped.
    """
    counts = {category: 0 for category in BMICategory}
    for category in df[CATEGORY_COLUMN]:
        if isinstance(category, BMICategory):
            counts[category] += 1
    return counts
