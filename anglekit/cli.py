"""Command line front end for angle conversion and trigonometry.

Angles are given as unit-suffixed literals (``90deg``, ``1.5rad``,
``300grad``); see :func:`anglekit.literals.parse_angle`. Results are rendered
as a Rich table.

Usage:
    $ anglekit convert 180deg --to rad
    $ anglekit normalize 450deg --abs
    $ anglekit trig sin 150deg
    $ anglekit inverse asin 0.5 --unit deg
    $ anglekit atan2 1 1 --unit grad

Negative angle literals must follow ``--`` so they are not read as options
(``anglekit normalize -- -270deg``).
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import trig
from .angle.basic_angle import BasicAngle, Degree, Gradian, Radian
from .angle.cast import angle_cast
from .exceptions import AngleError
from .literals import parse_angle
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

CONSOLE = Console()

UNIT_CHOICES: dict[str, type[BasicAngle]] = {
    "deg": Degree,
    "rad": Radian,
    "grad": Gradian,
}

FORWARD_FUNCTIONS = {"sin": trig.sin, "cos": trig.cos, "tan": trig.tan}
INVERSE_FUNCTIONS = {"asin": trig.asin, "acos": trig.acos, "atan": trig.atan}


def _describe(angle: BasicAngle) -> str:
    symbol = type(angle).conversion.SYMBOL
    return f"{angle} {symbol}".strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anglekit",
        description="Convert, normalize and evaluate unit-safe angles.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides the ANGLEKIT_LOG_LEVEL environment variable)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="Convert an angle to another unit")
    convert.add_argument("angle", help="Angle literal, e.g. 90deg")
    convert.add_argument("--to", choices=UNIT_CHOICES, required=True)

    normalize = commands.add_parser("normalize", help="Reduce an angle to a canonical range")
    normalize.add_argument("angle", help="Angle literal, e.g. 450deg")
    normalize.add_argument(
        "--abs",
        action="store_true",
        help="Use [0, full turn) instead of (-half turn, +half turn]",
    )

    forward = commands.add_parser("trig", help="Evaluate sin, cos or tan of an angle")
    forward.add_argument("function", choices=FORWARD_FUNCTIONS)
    forward.add_argument("angle", help="Angle literal, e.g. 150deg")

    inverse = commands.add_parser("inverse", help="Evaluate asin, acos or atan of a ratio")
    inverse.add_argument("function", choices=INVERSE_FUNCTIONS)
    inverse.add_argument("x", type=float)
    inverse.add_argument("--unit", choices=UNIT_CHOICES, default="rad")

    arctangent2 = commands.add_parser("atan2", help="Evaluate the angle of the point (x, y)")
    arctangent2.add_argument("y", type=float)
    arctangent2.add_argument("x", type=float)
    arctangent2.add_argument("--unit", choices=UNIT_CHOICES, default="rad")

    return parser


def run_command(args: argparse.Namespace) -> list[tuple[str, str]]:
    """Execute a parsed command and return the rows to display.

    Raises:
        AngleParseError: If an angle literal argument is malformed.
    """
    logger.info("Running %s", args.command)

    if args.command == "convert":
        angle = parse_angle(args.angle)
        result = angle_cast(UNIT_CHOICES[args.to], angle)
        return [("Input", _describe(angle)), ("Result", _describe(result))]

    if args.command == "normalize":
        angle = parse_angle(args.angle)
        result = angle.normalized_abs() if args.abs else angle.normalized()
        return [("Input", _describe(angle)), ("Result", _describe(result))]

    if args.command == "trig":
        angle = parse_angle(args.angle)
        value = FORWARD_FUNCTIONS[args.function](angle)
        return [("Input", _describe(angle)), (args.function, f"{value}")]

    if args.command == "inverse":
        result = INVERSE_FUNCTIONS[args.function](args.x, UNIT_CHOICES[args.unit])
        return [("Input", f"{args.x}"), (args.function, _describe(result))]

    result = trig.atan2(args.y, args.x, UNIT_CHOICES[args.unit])
    return [("Input", f"y={args.y}, x={args.x}"), ("atan2", _describe(result))]


def render(rows: list[tuple[str, str]], console: Console) -> None:
    table = Table(show_header=False)
    for label, value in rows:
        table.add_row(f"[b]{label}[/b]", value)
    console.print(table)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Entry point of the ``anglekit`` command.

    Returns:
        int: Process exit status, 0 on success and 2 on invalid input.
    """
    console = console or CONSOLE
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 2

    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        console.print("[red]error:[/red]", escape(str(exc)))
        return 2

    try:
        rows = run_command(args)
    except AngleError as exc:
        logger.error("Command %s failed: %s", args.command, exc)
        console.print("[red]error:[/red]", escape(str(exc)))
        return 2

    render(rows, console)
    return 0
