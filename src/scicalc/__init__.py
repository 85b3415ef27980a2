"""
Scientific calculator library.

Validated arithmetic, power, logarithmic, trigonometric and hyperbolic
operations, plus a stateful Calculator that applies an angle unit and a
result precision on top of them.

``abs`` and ``round`` are available as ``scicalc.abs`` / ``scicalc.round`` but
are left out of ``__all__`` so a star import does not shadow the builtins.
"""

from scicalc.config import AngleUnit, CalculatorConfig
from scicalc.constants import (
    E,
    EPSILON,
    LN2,
    LN10,
    LOG2E,
    LOG10E,
    MAX_FACTORIAL,
    MAX_SAFE_INTEGER,
    MAX_VALUE,
    MIN_SAFE_INTEGER,
    MIN_VALUE,
    PHI,
    PI,
    PRECISION_DIGITS,
    SQRT1_2,
    SQRT2,
)
from scicalc.core import Calculator
from scicalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    InvalidInputError,
    OverflowError,
    UnderflowError,
)
from scicalc.operations import (
    abs,
    add,
    ceil,
    divide,
    floor,
    modulo,
    multiply,
    round,
    round_to_decimal,
    sign,
    subtract,
)
from scicalc.scientific import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cos,
    cosh,
    degrees_to_radians,
    exp,
    factorial,
    ln,
    log2,
    log10,
    nth_root,
    power,
    radians_to_degrees,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)
from scicalc.validators import validate_number

__all__ = [
    "E",
    "EPSILON",
    "LN2",
    "LN10",
    "LOG2E",
    "LOG10E",
    "MAX_FACTORIAL",
    "MAX_SAFE_INTEGER",
    "MAX_VALUE",
    "MIN_SAFE_INTEGER",
    "MIN_VALUE",
    "PHI",
    "PI",
    "PRECISION_DIGITS",
    "SQRT1_2",
    "SQRT2",
    "AngleUnit",
    "Calculator",
    "CalculatorConfig",
    "CalculatorError",
    "DivisionByZeroError",
    "DomainError",
    "ErrorKind",
    "InvalidInputError",
    "OverflowError",
    "UnderflowError",
    "acos",
    "acosh",
    "add",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "ceil",
    "cos",
    "cosh",
    "degrees_to_radians",
    "divide",
    "exp",
    "factorial",
    "floor",
    "ln",
    "log2",
    "log10",
    "modulo",
    "multiply",
    "nth_root",
    "power",
    "radians_to_degrees",
    "round_to_decimal",
    "sign",
    "sin",
    "sinh",
    "sqrt",
    "subtract",
    "tan",
    "tanh",
    "validate_number",
]

__version__ = "0.1.0"
