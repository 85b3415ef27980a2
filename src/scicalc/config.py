"""Configuration types for the stateful calculator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scicalc.constants import PRECISION_DIGITS
from scicalc.exceptions import InvalidInputError
from scicalc.validators import validate_precision


class AngleUnit(str, Enum):
    """Unit used to interpret trig arguments and express inverse-trig results."""

    RADIANS = "radians"
    DEGREES = "degrees"

    @classmethod
    def parse(cls, value: AngleUnit | str) -> AngleUnit:
        """
        Resolve an enum member or its string value.

        Raises:
            InvalidInputError: If value names no known unit
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidInputError(f'angle unit must be "radians" or "degrees", got {value!r}')

    def __str__(self) -> str:
        return self.value


DEFAULT_ANGLE_UNIT = AngleUnit.RADIANS
DEFAULT_PRECISION = PRECISION_DIGITS


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Immutable calculator settings.

    A precision of ``PRECISION_DIGITS`` (15) means results are returned unrounded.

    Example:
        >>> CalculatorConfig(precision=0)
        CalculatorConfig(angle_unit=<AngleUnit.RADIANS: 'radians'>, precision=0)
    """

    angle_unit: AngleUnit = DEFAULT_ANGLE_UNIT
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        object.__setattr__(self, "angle_unit", AngleUnit.parse(self.angle_unit))
        object.__setattr__(self, "precision", validate_precision(self.precision))

    @classmethod
    def from_options(
        cls, angle_unit: AngleUnit | str | None = None, precision: int | None = None
    ) -> CalculatorConfig:
        """Build a config, substituting the default only for options left as None."""
        return cls(
            angle_unit=angle_unit if angle_unit is not None else DEFAULT_ANGLE_UNIT,
            precision=precision if precision is not None else DEFAULT_PRECISION,
        )
