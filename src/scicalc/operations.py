"""
Basic arithmetic operations with overflow protection.

All functions are pure. ``abs`` and ``round`` shadow the builtins within this
module; import the module rather than star-importing it.
"""

import logging
import math
import sys

from scicalc.exceptions import DivisionByZeroError, InvalidInputError, OverflowError
from scicalc.validators import validate_decimals, validate_number

logger = logging.getLogger(__name__)

# Doubles at or above this magnitude have no fractional part
_INTEGRAL_MAGNITUDE = 2.0**52


def _check_overflow(result: float, operation: str) -> float:
    """Reject a non-finite result produced from finite operands."""
    if math.isinf(result):
        logger.debug("overflow in %s", operation)
        raise OverflowError(operation)
    if math.isnan(result):
        raise InvalidInputError(f"{operation} resulted in NaN")
    return result


def _round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    if math.fabs(value) >= _INTEGRAL_MAGNITUDE:
        return value
    floored = math.floor(value)
    if value - floored >= 0.5:
        floored += 1
    return math.copysign(float(floored), value) if floored == 0 else float(floored)


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    a = validate_number(a, "add")
    b = validate_number(b, "add")
    return _check_overflow(a + b, "addition")


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    a = validate_number(a, "subtract")
    b = validate_number(b, "subtract")
    return _check_overflow(a - b, "subtraction")


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers with overflow protection.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If result would overflow
    """
    a = validate_number(a, "multiply")
    b = validate_number(b, "multiply")
    return _check_overflow(a * b, "multiplication")


def divide(a: float, b: float) -> float:
    """
    Divide a by b with zero and overflow protection.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        OverflowError: If result would overflow
    """
    a = validate_number(a, "divide")
    b = validate_number(b, "divide")

    if b == 0:
        raise DivisionByZeroError()

    return _check_overflow(a / b, "division")


def modulo(a: float, b: float) -> float:
    """
    Remainder of a divided by b, truncated toward zero.

    The result takes the sign of the dividend: modulo(-10, 3) == -1.
    Its magnitude is always below abs(b), so no overflow check applies.

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
    """
    a = validate_number(a, "modulo")
    b = validate_number(b, "modulo")

    if b == 0:
        raise DivisionByZeroError()

    return math.fmod(a, b)


def abs(a: float) -> float:
    """Absolute value."""
    return math.fabs(validate_number(a, "abs"))


def sign(a: float) -> float:
    """Return -1.0, 0.0 or 1.0 matching the sign of a (signed zero preserved)."""
    a = validate_number(a, "sign")
    if a == 0:
        return a
    return math.copysign(1.0, a)


def ceil(a: float) -> float:
    """Smallest integer >= a."""
    return float(math.ceil(validate_number(a, "ceil")))


def floor(a: float) -> float:
    """Largest integer <= a."""
    return float(math.floor(validate_number(a, "floor")))


def round(a: float) -> float:
    """
    Round to the nearest integer, halves toward positive infinity.

    Unlike the builtin this is not banker's rounding: round(2.5) == 3 and
    round(-3.5) == -3.
    """
    return _round_half_up(validate_number(a, "round"))


def round_to_decimal(value: float, decimals: int) -> float:
    """
    Round value to a number of decimal places.

    Args:
        value: The number to round
        decimals: Non-negative integer count of decimal places

    Returns:
        round(value * 10**decimals) / 10**decimals

    Raises:
        InvalidInputError: If value is invalid or decimals is negative or fractional
    """
    value = validate_number(value, "round_to_decimal")
    decimals = validate_decimals(decimals, "round_to_decimal")

    if math.fabs(value) >= _INTEGRAL_MAGNITUDE or decimals > sys.float_info.max_10_exp:
        return value

    multiplier = 10.0**decimals
    scaled = value * multiplier
    if math.isinf(scaled):
        return value
    return _round_half_up(scaled) / multiplier
