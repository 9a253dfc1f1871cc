"""
Command-line interface for the BMI toolkit.
Demonstrates evaluation of sample measurements and evaluates
measurements given on the command line.
"""

import logging
import sys
import typing

import click
import pandas as pd
from stairval.notepad import Notepad, create_notepad

from .batch import HEIGHT_COLUMN, WEIGHT_COLUMN, evaluate_table, summarize_categories
from .category import BMICategory
from .evaluator import HumanBMI

logger = logging.getLogger(__name__)

# (weight in kilograms, height in meters); the last one is deliberately invalid
DEMO_MEASUREMENTS = [
    (80, 1.80),
    (60, 1.75),
    (100, 1.90),
    (-70, 1.70),
]


@click.group()
@click.option(
    "--verbose-logging",
    is_flag=True,
    help="Emit debug logs to stderr",
)
@click.option(
    "--log-level",
    envvar="BMI_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for stderr logging (env: BMI_LOG_LEVEL)",
)
@click.option(
    "--log-file-path",
    type=click.Path(dir_okay=False, writable=True),
    help="Append timestamped logs to this file",
)
def main(verbose_logging: bool, log_level: str, log_file_path: typing.Optional[str]):
    """BMI: Body Mass Index evaluation from weight (kg) and height (m)."""
    _configure_logging(verbose_logging, log_level, log_file_path)


@main.command(name="demo")
def demo():
    """
    Print BMI and category for a few sample people,
    and show how an invalid measurement is reported.
    """
    for number, (weight, height) in enumerate(DEMO_MEASUREMENTS, start=1):
        try:
            person = HumanBMI(weight, height)
        except ValueError as e:
            logger.warning(f"Person {number}: invalid measurement {weight}/{height}")
            click.echo(f"Error creating HumanBMI: {e}", err=True)
            continue
        click.echo(
            f"Person {number} BMI: {person.calculate_bmi()}, "
            f"Category: {person.get_bmi_category().name}"
        )


@main.command(name="evaluate")
@click.argument("weight", type=float)
@click.argument("height", type=float)
def evaluate(weight: float, height: float):
    """
    Evaluate a single measurement: WEIGHT in kilograms, HEIGHT in meters.
    """
    try:
        person = HumanBMI(weight, height)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info(f"Evaluated weight={weight} height={height}")
    click.echo(f"BMI: {person.calculate_bmi()}")
    click.echo(f"Category: {person.get_bmi_category().label}")


@main.command(name="batch")
@click.option(
    "-m",
    "--measurement",
    "measurements",
    type=(float, float),
    multiple=True,
    metavar="WEIGHT HEIGHT",
    help="a weight (kg) and height (m) pair; repeat for more people",
)
def batch(measurements: typing.Tuple[typing.Tuple[float, float], ...]):
    """
    Evaluate several measurements at once, report invalid ones
    and summarize how many people fall into each category.
    """
    if not measurements:
        click.echo("No measurements specified.", err=True)
        sys.exit(1)

    table = _build_table(measurements)
    notepad = create_notepad("measurements")
    evaluated = evaluate_table(table, notepad)

    _report_issues(notepad)

    for index, row in evaluated.iterrows():
        if not isinstance(row["category"], BMICategory):
            continue
        click.echo(f"{index:>4}  BMI: {row['bmi']:.2f}  Category: {row['category'].label}")

    for category, count in summarize_categories(evaluated).items():
        click.echo(f"{category.label}: {count}")


def _configure_logging(
    verbose_logging: bool, log_level: str, log_file_path: typing.Optional[str] = None
) -> None:
    # — configure logging —
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"))
    # force: each invocation replaces the handlers of the previous one
    logging.basicConfig(
        level=logging.DEBUG if verbose_logging else getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _build_table(measurements: typing.Iterable[typing.Tuple[float, float]]) -> pd.DataFrame:
    # one row per person, numbered from 1 like the demo output
    rows = list(measurements)
    return pd.DataFrame(
        rows,
        columns=[WEIGHT_COLUMN, HEIGHT_COLUMN],
        index=range(1, len(rows) + 1),
    )


def _report_issues(notepad: Notepad):
    # errors are rows with bad values, warnings are rows with missing ones
    errors = list(notepad.errors())
    if errors:
        click.echo(f"Invalid measurements ({len(errors)}):")
        for err in errors:
            click.echo(f"- {err}")
    warnings = list(notepad.warnings())
    if warnings:
        click.echo(f"Incomplete measurements ({len(warnings)}):")
        for w in warnings:
            click.echo(f"- {w}")


if __name__ == "__main__":
    main()
