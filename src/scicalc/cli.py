"""Line-oriented command-line front-end for the calculator."""

from __future__ import annotations

import logging
import math

import click

from scicalc.config import AngleUnit
from scicalc.constants import E, PHI, PI, PRECISION_DIGITS
from scicalc.core import Calculator
from scicalc.exceptions import CalculatorError

logger = logging.getLogger(__name__)

CONSTANTS = {"pi": PI, "e": E, "phi": PHI}

# command -> Calculator method
BINARY_COMMANDS = {
    "add": "add",
    "+": "add",
    "sub": "subtract",
    "-": "subtract",
    "mul": "multiply",
    "*": "multiply",
    "div": "divide",
    "/": "divide",
    "mod": "modulo",
    "%": "modulo",
    "pow": "power",
    "^": "power",
    "root": "nth_root",
    "atan2": "atan2",
}

UNARY_COMMANDS = {
    "sqrt": "sqrt",
    "abs": "abs",
    "sign": "sign",
    "ceil": "ceil",
    "floor": "floor",
    "round": "round",
    "factorial": "factorial",
    "!": "factorial",
    "ln": "ln",
    "log10": "log10",
    "log": "log10",
    "log2": "log2",
    "exp": "exp",
    "sin": "sin",
    "cos": "cos",
    "tan": "tan",
    "asin": "asin",
    "acos": "acos",
    "atan": "atan",
    "sinh": "sinh",
    "cosh": "cosh",
    "tanh": "tanh",
    "asinh": "asinh",
    "acosh": "acosh",
    "atanh": "atanh",
    "deg2rad": "degrees_to_radians",
    "rad2deg": "radians_to_degrees",
}

HELP_TEXT = """\
Basic Operations:
  add <a> <b>        - Addition: a + b
  sub <a> <b>        - Subtraction: a - b
  mul <a> <b>        - Multiplication: a × b
  div <a> <b>        - Division: a ÷ b
  mod <a> <b>        - Modulo: a % b
  abs <a>            - Absolute value: |a|
  sign <a>           - Sign: -1, 0, or 1
  ceil <a>           - Ceiling: smallest integer ≥ a
  floor <a>          - Floor: largest integer ≤ a
  round <a>          - Round to nearest integer

Power & Root Operations:
  pow <base> <exp>   - Power: base^exp
  sqrt <a>           - Square root: √a
  root <a> <n>       - Nth root: a^(1/n)
  factorial <n>      - Factorial: n!

Logarithmic & Exponential:
  ln <a>             - Natural logarithm
  log10 <a>          - Base-10 logarithm
  log2 <a>           - Base-2 logarithm
  exp <a>            - Exponential: e^a

Trigonometric Functions:
  sin, cos, tan <angle>
  asin, acos, atan <value>
  atan2 <y> <x>      - Two-argument arctangent

Hyperbolic Functions:
  sinh, cosh, tanh, asinh, acosh, atanh <a>

Constants:
  pi, e, phi         - usable as commands or as arguments

Settings:
  mode <degrees|radians> - Set angle unit for trig functions
  precision <n>      - Set decimal precision (0-15)
  status             - Show current settings

Conversion:
  deg2rad <degrees>  - Convert degrees to radians
  rad2deg <radians>  - Convert radians to degrees

Other:
  help               - Show this help message
  clear              - Clear the screen
  exit, quit         - Exit the calculator
"""


class CommandError(Exception):
    """A command line that could not be understood."""


class QuitRequested(Exception):
    """Raised by the exit and quit commands."""


def parse_number(token: str) -> float:
    """
    Parse a numeric argument, accepting the names of the constants.

    Raises:
        CommandError: If the token is not a number
    """
    lower = token.lower()
    if lower in CONSTANTS:
        return CONSTANTS[lower]
    try:
        return float(token)
    except ValueError:
        raise CommandError(f"Invalid number: {token}") from None


def format_result(value: float) -> str:
    """Format a result without a trailing ``.0`` on integral values."""
    if value.is_integer() and math.fabs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_status(calculator: Calculator) -> str:
    return (
        "Current Settings:\n"
        f"  Angle Unit: {calculator.get_angle_unit()}\n"
        f"  Precision:  {calculator.get_precision()} decimal places"
    )


def _require(command: str, args: list[str], count: int) -> list[float]:
    if len(args) < count:
        plural = "argument" if count == 1 else "arguments"
        raise CommandError(f"{command} requires {count} {plural}")
    return [parse_number(arg) for arg in args[:count]]


def execute(calculator: Calculator, line: str) -> str | None:
    """
    Run one command line against a calculator.

    Returns:
        Text to display, or None when there is nothing to show

    Raises:
        QuitRequested: On exit or quit
        CommandError: If the line is malformed
        CalculatorError: If the operation itself fails
    """
    parts = line.split()
    if not parts:
        return None

    command, args = parts[0].lower(), parts[1:]

    if command in ("exit", "quit"):
        raise QuitRequested()

    if command in ("help", "?"):
        return HELP_TEXT

    # The REPL clears the screen itself; elsewhere there is nothing to clear.
    if command in ("clear", "cls"):
        return None

    if command == "status":
        return format_status(calculator)

    if command == "mode":
        if not args:
            return f"Current mode: {calculator.get_angle_unit()}"
        mode = args[0].lower()
        if mode not in (AngleUnit.RADIANS.value, AngleUnit.DEGREES.value):
            raise CommandError('Mode must be "radians" or "degrees"')
        calculator.set_angle_unit(mode)
        return f"Angle unit set to {mode}"

    if command == "precision":
        if not args:
            return f"Current precision: {calculator.get_precision()} decimal places"
        (precision,) = _require(command, args, 1)
        calculator.set_precision(precision)
        return f"Precision set to {calculator.get_precision()} decimal places"

    if command in CONSTANTS:
        return f"= {format_result(CONSTANTS[command])}"

    if command in BINARY_COMMANDS:
        operands = _require(command, args, 2)
        result = getattr(calculator, BINARY_COMMANDS[command])(*operands)
    elif command in UNARY_COMMANDS:
        operands = _require(command, args, 1)
        result = getattr(calculator, UNARY_COMMANDS[command])(*operands)
    else:
        raise CommandError(f'Unknown command: {command}. Type "help" for available commands.')

    logger.debug("%s%r = %r", command, tuple(operands), result)
    return f"= {format_result(result)}"


def run_line(calculator: Calculator, line: str) -> bool:
    """
    Execute a line and print its outcome.

    Returns:
        True if the command succeeded, False if it reported an error

    Raises:
        QuitRequested: On exit or quit
    """
    try:
        output = execute(calculator, line)
    except CalculatorError as e:
        click.secho(f"Error: {e.message}", fg="red")
        return False
    except CommandError as e:
        click.secho(str(e), fg="red")
        return False

    if output is not None:
        bold = output.startswith("=")
        click.secho(output, fg="green" if bold else None, bold=bold)
    return True


def print_welcome() -> None:
    click.secho("Scientific Calculator", fg="cyan", bold=True)
    click.echo('Type "help" for available commands')
    click.echo('Type "exit" or "quit" to close\n')


def repl(calculator: Calculator) -> None:
    """Read commands until exit, quit or end of input."""
    print_welcome()
    while True:
        try:
            line = click.prompt(
                click.style("calc>", fg="blue"),
                default="",
                show_default=False,
                prompt_suffix=" ",
            )
        except (click.Abort, EOFError):
            break

        if line.strip().lower() in ("clear", "cls"):
            click.clear()
            print_welcome()
            continue

        try:
            run_line(calculator, line)
        except QuitRequested:
            break

    click.secho("Goodbye!", fg="green")


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.option(
    "--angle-unit",
    type=click.Choice([unit.value for unit in AngleUnit], case_sensitive=False),
    default=AngleUnit.RADIANS.value,
    envvar="SCICALC_ANGLE_UNIT",
    show_default=True,
    help="Angle unit for trigonometric functions.",
)
@click.option(
    "--precision",
    type=click.IntRange(0, PRECISION_DIGITS),
    default=PRECISION_DIGITS,
    envvar="SCICALC_PRECISION",
    show_default=True,
    help="Decimal places results are rounded to (15 = unrounded).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.argument("command", nargs=-1)
def main(angle_unit: str, precision: int, verbose: bool, command: tuple[str, ...]) -> None:
    """Scientific calculator.

    With COMMAND, run it once and exit (e.g. `scicalc add 2 3`); otherwise
    start an interactive session. Type "help" inside the session for the
    list of commands.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()],
    )

    calculator = Calculator(angle_unit=angle_unit, precision=precision)

    if not command:
        repl(calculator)
        return

    try:
        ok = run_line(calculator, " ".join(command))
    except QuitRequested:
        return
    if not ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
