"""
Scientific operations: powers, roots, logarithms, trig and hyperbolic functions.

Every function validates its numeric arguments, enforces its domain, then
computes. Angle-aware functions take a ``unit`` that is applied only at the
boundary; internal math is always in radians.

Where the ``math`` module raises ``ValueError`` or the builtin
``OverflowError`` instead of returning NaN or infinity, the failure is
translated into a DomainError or OverflowError here.
"""

from __future__ import annotations

import builtins
import logging
import math

from scicalc.config import AngleUnit
from scicalc.constants import MAX_FACTORIAL, PI
from scicalc.exceptions import DomainError, OverflowError
from scicalc.validators import is_integral, validate_number

logger = logging.getLogger(__name__)

# Absolute tolerance for detecting the poles of tan
TAN_POLE_TOLERANCE = 1e-10

LOGARITHM_DOMAIN = "logarithm is only defined for positive numbers"


def _domain_error(operation: str, reason: str) -> DomainError:
    logger.debug("rejecting %s: %s", operation, reason)
    return DomainError(operation, reason)


def _overflow(operation: str) -> OverflowError:
    logger.debug("overflow in %s", operation)
    return OverflowError(operation)


def _to_radians(angle: float, unit: AngleUnit | str) -> float:
    if AngleUnit.parse(unit) is AngleUnit.DEGREES:
        return degrees_to_radians(angle)
    return angle


def _from_radians(radians: float, unit: AngleUnit | str) -> float:
    if AngleUnit.parse(unit) is AngleUnit.DEGREES:
        return radians_to_degrees(radians)
    return radians


def _real_pow(base: float, exponent: float, operation: str) -> float:
    """math.pow with JavaScript-style outcomes mapped onto calculator errors."""
    try:
        result = math.pow(base, exponent)
    except ValueError as e:
        if base == 0:
            # zero to a negative power is an infinite result
            raise _overflow(operation) from e
        raise _domain_error(operation, "result is not a real number") from e
    except builtins.OverflowError as e:
        raise _overflow(operation) from e

    if math.isinf(result):
        raise _overflow(operation)
    if math.isnan(result):
        raise _domain_error(operation, "result is not a real number")

    return result


def degrees_to_radians(degrees: float) -> float:
    """
    Convert degrees to radians.

    Angles large enough for ``degrees * PI`` to overflow are divided first,
    so every finite angle converts to a finite value.
    """
    degrees = validate_number(degrees, "degrees_to_radians")
    radians = (degrees * PI) / 180
    if math.isinf(radians):
        return degrees / 180 * PI
    return radians


def radians_to_degrees(radians: float) -> float:
    """
    Convert radians to degrees.

    Raises:
        OverflowError: If the angle in degrees exceeds the float range
    """
    radians = validate_number(radians, "radians_to_degrees")
    degrees = (radians * 180) / PI
    if math.isinf(degrees):
        degrees = radians / PI * 180
    if math.isinf(degrees):
        raise _overflow("radians_to_degrees")
    return degrees


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Raises:
        InvalidInputError: If inputs are invalid
        OverflowError: If the result is infinite
        DomainError: If the result is not real (negative base, fractional exponent)
    """
    base = validate_number(base, "power")
    exponent = validate_number(exponent, "power")
    return _real_pow(base, exponent, "power")


def sqrt(a: float) -> float:
    """
    Square root.

    Raises:
        DomainError: If a is negative
    """
    a = validate_number(a, "sqrt")

    if a < 0:
        raise _domain_error("sqrt", "cannot take square root of negative number")

    return math.sqrt(a)


def nth_root(value: float, n: float) -> float:
    """
    The n-th root of value, value ** (1 / n).

    Odd roots of negative numbers are real: nth_root(-8, 3) == -2.

    Raises:
        DomainError: If n is zero, or n is even and value is negative
    """
    value = validate_number(value, "nth_root")
    n = validate_number(n, "nth_root")

    if n == 0:
        raise _domain_error("nth_root", "root degree cannot be zero")

    even = math.fmod(n, 2) == 0
    if even and value < 0:
        raise _domain_error("nth_root", "even root of negative number is not real")

    if value < 0:
        return -_real_pow(-value, 1 / n, "nth_root")

    return _real_pow(value, 1 / n, "nth_root")


def factorial(n: float) -> float:
    """
    n! for integers 0 through MAX_FACTORIAL.

    Raises:
        DomainError: If n is negative or not an integer
        OverflowError: If n exceeds MAX_FACTORIAL
    """
    n = validate_number(n, "factorial")

    if n < 0:
        raise _domain_error("factorial", "factorial is not defined for negative numbers")

    if not is_integral(n):
        raise _domain_error("factorial", "factorial is only defined for integers")

    if n > MAX_FACTORIAL:
        raise _overflow("factorial")

    return float(math.factorial(int(n)))


def ln(a: float) -> float:
    """Natural logarithm."""
    a = validate_number(a, "ln")

    if a <= 0:
        raise _domain_error("ln", LOGARITHM_DOMAIN)

    return math.log(a)


def log10(a: float) -> float:
    """Base-10 logarithm."""
    a = validate_number(a, "log10")

    if a <= 0:
        raise _domain_error("log10", LOGARITHM_DOMAIN)

    return math.log10(a)


def log2(a: float) -> float:
    """Base-2 logarithm."""
    a = validate_number(a, "log2")

    if a <= 0:
        raise _domain_error("log2", LOGARITHM_DOMAIN)

    return math.log2(a)


def exp(a: float) -> float:
    """
    e ** a.

    Raises:
        OverflowError: If the result exceeds the double range
    """
    a = validate_number(a, "exp")

    try:
        return math.exp(a)
    except builtins.OverflowError as e:
        raise _overflow("exp") from e


def sin(angle: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """Sine of an angle given in ``unit``."""
    angle = validate_number(angle, "sin")
    return math.sin(_to_radians(angle, unit))


def cos(angle: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """Cosine of an angle given in ``unit``."""
    angle = validate_number(angle, "cos")
    return math.cos(_to_radians(angle, unit))


def tan(angle: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """
    Tangent of an angle given in ``unit``.

    The poles at odd multiples of pi/2 are detected after reducing the angle
    modulo pi, within TAN_POLE_TOLERANCE.

    Raises:
        DomainError: If the angle is at a pole
    """
    angle = validate_number(angle, "tan")
    radians = _to_radians(angle, unit)

    reduced = math.fmod(radians, PI)
    if math.fabs(math.fabs(reduced) - PI / 2) < TAN_POLE_TOLERANCE:
        raise _domain_error("tan", "tangent is undefined at odd multiples of π/2")

    return math.tan(radians)


def asin(value: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """Arcsine, expressed in ``unit``."""
    value = validate_number(value, "asin")

    if value < -1 or value > 1:
        raise _domain_error("asin", "arcsine is only defined for values in [-1, 1]")

    return _from_radians(math.asin(value), unit)


def acos(value: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """Arccosine, expressed in ``unit``."""
    value = validate_number(value, "acos")

    if value < -1 or value > 1:
        raise _domain_error("acos", "arccosine is only defined for values in [-1, 1]")

    return _from_radians(math.acos(value), unit)


def atan(value: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """Arctangent, expressed in ``unit``."""
    value = validate_number(value, "atan")
    return _from_radians(math.atan(value), unit)


def atan2(y: float, x: float, unit: AngleUnit | str = AngleUnit.RADIANS) -> float:
    """Angle of the point (x, y) from the positive x axis, expressed in ``unit``."""
    y = validate_number(y, "atan2")
    x = validate_number(x, "atan2")
    return _from_radians(math.atan2(y, x), unit)


def sinh(value: float) -> float:
    """Hyperbolic sine."""
    value = validate_number(value, "sinh")

    try:
        return math.sinh(value)
    except builtins.OverflowError as e:
        raise _overflow("sinh") from e


def cosh(value: float) -> float:
    """Hyperbolic cosine."""
    value = validate_number(value, "cosh")

    try:
        return math.cosh(value)
    except builtins.OverflowError as e:
        raise _overflow("cosh") from e


def tanh(value: float) -> float:
    """Hyperbolic tangent."""
    return math.tanh(validate_number(value, "tanh"))


def asinh(value: float) -> float:
    """Inverse hyperbolic sine."""
    return math.asinh(validate_number(value, "asinh"))


def acosh(value: float) -> float:
    """Inverse hyperbolic cosine, defined for value >= 1."""
    value = validate_number(value, "acosh")

    if value < 1:
        raise _domain_error(
            "acosh", "inverse hyperbolic cosine is only defined for values >= 1"
        )

    return math.acosh(value)


def atanh(value: float) -> float:
    """Inverse hyperbolic tangent, defined on the open interval (-1, 1)."""
    value = validate_number(value, "atanh")

    if value <= -1 or value >= 1:
        raise _domain_error(
            "atanh", "inverse hyperbolic tangent is only defined for values in (-1, 1)"
        )

    return math.atanh(value)
