"""Calculator class applying angle-unit and precision settings to the operations."""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING

from scicalc import operations, scientific
from scicalc.config import AngleUnit, CalculatorConfig
from scicalc.constants import PRECISION_DIGITS
from scicalc.validators import validate_precision

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Calculator:
    """
    A stateful scientific calculator.

    Holds two settings: the angle unit used by the trig functions and the
    number of decimal places continuous results are rounded to. A precision
    of 15 means no rounding.

    Results that are integral or exact by construction (abs, sign, ceil,
    floor, round, factorial and the angle conversions) are never rounded.

    Example:
        >>> calc = Calculator(precision=2)
        >>> calc.add(1.234, 2.345)
        3.58
        >>> calc.set_angle_unit("degrees")
        >>> calc.sin(90)
        1.0
    """

    def __init__(
        self,
        config: CalculatorConfig | None = None,
        *,
        angle_unit: AngleUnit | str | None = None,
        precision: int | None = None,
    ) -> None:
        """
        Initialize calculator settings.

        Args:
            config: Complete settings; keyword overrides are applied on top
            angle_unit: Angle unit (default radians)
            precision: Decimal places 0-15 (default 15, unrounded)

        Raises:
            InvalidInputError: If a setting is invalid
        """
        if config is None:
            config = CalculatorConfig.from_options(angle_unit, precision)
        else:
            if angle_unit is not None:
                config = replace(config, angle_unit=angle_unit)
            if precision is not None:
                config = replace(config, precision=precision)

        self._config = config
        self._lock = threading.Lock()

    @property
    def config(self) -> CalculatorConfig:
        """Snapshot of the current settings."""
        with self._lock:
            return self._config

    @property
    def angle_unit(self) -> AngleUnit:
        return self.config.angle_unit

    @property
    def precision(self) -> int:
        return self.config.precision

    def get_angle_unit(self) -> AngleUnit:
        return self.angle_unit

    def set_angle_unit(self, unit: AngleUnit | str) -> None:
        """
        Set the angle unit used by trig functions.

        Raises:
            InvalidInputError: If unit is not radians or degrees
        """
        parsed = AngleUnit.parse(unit)
        with self._lock:
            self._config = replace(self._config, angle_unit=parsed)
        logger.debug("angle unit set to %s", parsed)

    def get_precision(self) -> int:
        return self.precision

    def set_precision(self, precision: int) -> None:
        """
        Set the number of decimal places results are rounded to.

        The previous precision is kept if validation fails.

        Raises:
            InvalidInputError: If precision is not an integer between 0 and 15
        """
        validated = validate_precision(precision)
        with self._lock:
            self._config = replace(self._config, precision=validated)
        logger.debug("precision set to %d", validated)

    @staticmethod
    def _round_result(value: float, precision: int) -> float:
        """Round to precision decimal places; PRECISION_DIGITS leaves the value as is."""
        if precision == PRECISION_DIGITS:
            return value
        return operations.round_to_decimal(value, precision)

    def _rounded(self, value: float) -> float:
        return self._round_result(value, self.precision)

    # Basic arithmetic

    def add(self, a: float, b: float) -> float:
        return self._rounded(operations.add(a, b))

    def subtract(self, a: float, b: float) -> float:
        return self._rounded(operations.subtract(a, b))

    def multiply(self, a: float, b: float) -> float:
        return self._rounded(operations.multiply(a, b))

    def divide(self, a: float, b: float) -> float:
        return self._rounded(operations.divide(a, b))

    def modulo(self, a: float, b: float) -> float:
        return self._rounded(operations.modulo(a, b))

    def abs(self, a: float) -> float:
        return operations.abs(a)

    def sign(self, a: float) -> float:
        return operations.sign(a)

    def ceil(self, a: float) -> float:
        return operations.ceil(a)

    def floor(self, a: float) -> float:
        return operations.floor(a)

    def round(self, a: float) -> float:
        return operations.round(a)

    # Powers and roots

    def power(self, base: float, exponent: float) -> float:
        return self._rounded(scientific.power(base, exponent))

    def sqrt(self, value: float) -> float:
        return self._rounded(scientific.sqrt(value))

    def nth_root(self, value: float, n: float) -> float:
        return self._rounded(scientific.nth_root(value, n))

    def factorial(self, n: float) -> float:
        return scientific.factorial(n)

    # Logarithms and exponential

    def ln(self, value: float) -> float:
        return self._rounded(scientific.ln(value))

    def log10(self, value: float) -> float:
        return self._rounded(scientific.log10(value))

    def log2(self, value: float) -> float:
        return self._rounded(scientific.log2(value))

    def exp(self, value: float) -> float:
        return self._rounded(scientific.exp(value))

    # Trigonometry, in the configured angle unit

    def _trig(self, function: Callable[..., float], *args: float) -> float:
        config = self.config
        result = function(*args, unit=config.angle_unit)
        return self._round_result(result, config.precision)

    def sin(self, angle: float) -> float:
        return self._trig(scientific.sin, angle)

    def cos(self, angle: float) -> float:
        return self._trig(scientific.cos, angle)

    def tan(self, angle: float) -> float:
        return self._trig(scientific.tan, angle)

    def asin(self, value: float) -> float:
        return self._trig(scientific.asin, value)

    def acos(self, value: float) -> float:
        return self._trig(scientific.acos, value)

    def atan(self, value: float) -> float:
        return self._trig(scientific.atan, value)

    def atan2(self, y: float, x: float) -> float:
        return self._trig(scientific.atan2, y, x)

    # Hyperbolic

    def sinh(self, value: float) -> float:
        return self._rounded(scientific.sinh(value))

    def cosh(self, value: float) -> float:
        return self._rounded(scientific.cosh(value))

    def tanh(self, value: float) -> float:
        return self._rounded(scientific.tanh(value))

    def asinh(self, value: float) -> float:
        return self._rounded(scientific.asinh(value))

    def acosh(self, value: float) -> float:
        return self._rounded(scientific.acosh(value))

    def atanh(self, value: float) -> float:
        return self._rounded(scientific.atanh(value))

    # Conversions

    def degrees_to_radians(self, degrees: float) -> float:
        return scientific.degrees_to_radians(degrees)

    def radians_to_degrees(self, radians: float) -> float:
        return scientific.radians_to_degrees(radians)

    def __repr__(self) -> str:
        config = self.config
        return f"Calculator(angle_unit={config.angle_unit.value!r}, precision={config.precision})"

