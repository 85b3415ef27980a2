"""Input validation functions with strict type checking."""

import math
from numbers import Real

from scicalc.constants import PRECISION_DIGITS
from scicalc.exceptions import InvalidInputError


def validate_number(value: object, operation_name: str) -> float:
    """
    Validate that a value is a finite real number.

    Args:
        value: The value to validate
        operation_name: Name of the calling operation, used in the error message

    Returns:
        The value as a float

    Raises:
        InvalidInputError: If value is not a number, or is NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"{operation_name} requires a number, got {type(value).__name__}"
        )

    try:
        number = float(value)
    except OverflowError:
        # int too large for a double
        raise InvalidInputError(f"{operation_name} requires a finite number") from None

    if not math.isfinite(number):
        raise InvalidInputError(f"{operation_name} requires a finite number")

    return number


def is_integral(value: float) -> bool:
    """Return True if a validated number has no fractional part."""
    return float(value).is_integer()


def validate_range(
    value: object,
    operation_name: str,
    min_val: float | None = None,
    max_val: float | None = None,
    inclusive: bool = True,
    message: str | None = None,
) -> float:
    """
    Validate that a value is a finite number within a specified range.

    Args:
        value: The value to validate
        operation_name: Name of the calling operation
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)
        inclusive: Whether bounds are inclusive
        message: Error reason to report instead of the generic one

    Returns:
        The validated value as a float

    Raises:
        InvalidInputError: If value is invalid or outside the range
    """
    number = validate_number(value, operation_name)
    reason = message or f"{operation_name} requires a value in [{min_val}, {max_val}]"

    if min_val is not None:
        if inclusive and number < min_val:
            raise InvalidInputError(reason)
        if not inclusive and number <= min_val:
            raise InvalidInputError(reason)

    if max_val is not None:
        if inclusive and number > max_val:
            raise InvalidInputError(reason)
        if not inclusive and number >= max_val:
            raise InvalidInputError(reason)

    return number


def validate_decimals(decimals: object, operation_name: str) -> int:
    """
    Validate a decimal-places count.

    Raises:
        InvalidInputError: If decimals is not a non-negative integer
    """
    number = validate_number(decimals, operation_name)

    if number < 0 or not is_integral(number):
        raise InvalidInputError("decimals must be a non-negative integer")

    return int(number)


def validate_precision(precision: object) -> int:
    """
    Validate a calculator precision setting.

    Args:
        precision: Number of decimal places, 0 through PRECISION_DIGITS

    Returns:
        The precision as an int

    Raises:
        InvalidInputError: If precision is not a finite integer in range
    """
    number = validate_range(
        precision,
        "set_precision",
        min_val=0,
        max_val=PRECISION_DIGITS,
        message=f"Precision must be between 0 and {PRECISION_DIGITS}",
    )

    if not is_integral(number):
        raise InvalidInputError("precision must be an integer")

    return int(number)
