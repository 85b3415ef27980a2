"""
Property-based tests for the Calculator class.

Covers precision rounding over arbitrary inputs and uses Hypothesis
stateful testing to drive random sequences of configuration changes.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from scicalc import (
    AngleUnit,
    Calculator,
    InvalidInputError,
    add,
    divide,
    round_to_decimal,
)

small_floats = st.floats(
    min_value=-1e5,
    max_value=1e5,
    allow_nan=False,
    allow_infinity=False,
)

precisions = st.integers(min_value=0, max_value=15)

invalid_precisions = st.one_of(
    st.integers(max_value=-1),
    st.integers(min_value=16),
    st.floats(min_value=0.1, max_value=14.9).filter(lambda x: not x.is_integer()),
    st.sampled_from([float("nan"), float("inf"), "5", None]),
)


@pytest.mark.property
class TestCalculatorProperties:
    """Property-based tests for Calculator."""

    @given(a=small_floats, b=small_floats)
    def test_default_precision_matches_operations(self, a: float, b: float):
        """At precision 15 results are the raw operation results."""
        assert Calculator().add(a, b) == add(a, b)

    @given(a=small_floats, b=small_floats, precision=st.integers(min_value=0, max_value=8))
    def test_results_are_rounded(self, a: float, b: float, precision: int):
        """Continuous results equal the raw result rounded to the precision."""
        calc = Calculator(precision=precision)
        assert calc.add(a, b) == round_to_decimal(add(a, b), precision)

    @given(
        a=small_floats,
        b=small_floats.filter(lambda x: math.fabs(x) >= 1e-3),
        precision=st.integers(min_value=0, max_value=8),
    )
    def test_rounding_error_is_bounded(self, a: float, b: float, precision: int):
        calc = Calculator(precision=precision)
        raw = divide(a, b)
        assert math.fabs(calc.divide(a, b) - raw) <= 0.5 * 10.0**-precision + 1e-9 * max(
            math.fabs(raw), 1
        )

    @given(x=st.floats(min_value=-720, max_value=720))
    def test_degree_mode_matches_converted_radians(self, x: float):
        degrees = Calculator(angle_unit=AngleUnit.DEGREES)
        radians = Calculator()
        assert degrees.sin(x) == radians.sin(radians.degrees_to_radians(x))

    @given(precision=invalid_precisions)
    def test_invalid_precision_rejected(self, precision: object):
        calc = Calculator(precision=7)
        with pytest.raises(InvalidInputError):
            calc.set_precision(precision)  # type: ignore[arg-type]
        assert calc.get_precision() == 7


@pytest.mark.property
@pytest.mark.slow
class CalculatorConfigStateMachine(RuleBasedStateMachine):
    """
    Stateful testing of Calculator configuration.

    Random interleavings of valid and invalid setting changes must always
    leave the calculator with the last valid settings.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calc = Calculator()
        self.expected_unit = AngleUnit.RADIANS
        self.expected_precision = 15

    @invariant()
    def settings_match_model(self) -> None:
        assert self.calc.get_angle_unit() is self.expected_unit
        assert self.calc.get_precision() == self.expected_precision

    @invariant()
    def precision_in_range(self) -> None:
        assert 0 <= self.calc.get_precision() <= 15

    @rule(precision=precisions)
    def set_precision(self, precision: int) -> None:
        self.calc.set_precision(precision)
        self.expected_precision = precision

    @rule(precision=invalid_precisions)
    def set_invalid_precision(self, precision: object) -> None:
        with pytest.raises(InvalidInputError):
            self.calc.set_precision(precision)  # type: ignore[arg-type]

    @rule(unit=st.sampled_from(["radians", "degrees", "RADIANS", AngleUnit.DEGREES]))
    def set_angle_unit(self, unit: str) -> None:
        self.calc.set_angle_unit(unit)
        self.expected_unit = AngleUnit.parse(unit)

    @rule(unit=st.sampled_from(["gradians", "", "turns"]))
    def set_invalid_angle_unit(self, unit: str) -> None:
        with pytest.raises(InvalidInputError):
            self.calc.set_angle_unit(unit)

    @rule(a=small_floats, b=small_floats)
    def compute(self, a: float, b: float) -> None:
        result = self.calc.add(a, b)
        assert math.isfinite(result)


# Run the state machine as a pytest test
TestConfigStateMachine = CalculatorConfigStateMachine.TestCase
