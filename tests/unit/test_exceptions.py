"""Unit tests for the calculator error taxonomy."""

import builtins
import sys

import pytest

from scicalc import (
    Calculator,
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    InvalidInputError,
    OverflowError,
    UnderflowError,
    add,
    divide,
    exp,
    factorial,
    sqrt,
)


class TestMessages:
    """Error messages are part of the public contract."""

    def test_calculator_error(self):
        error = CalculatorError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"
        assert error.name == "CalculatorError"

    def test_division_by_zero(self):
        assert str(DivisionByZeroError()) == "Division by zero is undefined"

    def test_invalid_input(self):
        error = InvalidInputError("test input")
        assert str(error) == "Invalid input: test input"
        assert error.reason == "test input"

    def test_overflow(self):
        error = OverflowError("addition")
        assert str(error) == "Overflow occurred in addition operation"
        assert error.operation == "addition"

    def test_underflow(self):
        assert str(UnderflowError("division")) == "Underflow occurred in division operation"

    def test_domain(self):
        error = DomainError("sqrt", "negative number")
        assert str(error) == "Domain error in sqrt: negative number"
        assert error.operation == "sqrt"
        assert error.reason == "negative number"


class TestHierarchy:
    """Every error derives from CalculatorError and carries a kind."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (CalculatorError("x"), ErrorKind.GENERIC),
            (DivisionByZeroError(), ErrorKind.DIVISION_BY_ZERO),
            (InvalidInputError("x"), ErrorKind.INVALID_INPUT),
            (OverflowError("x"), ErrorKind.OVERFLOW),
            (UnderflowError("x"), ErrorKind.UNDERFLOW),
            (DomainError("x", "y"), ErrorKind.DOMAIN),
        ],
    )
    def test_kind_and_base(self, error, kind):
        assert isinstance(error, CalculatorError)
        assert isinstance(error, Exception)
        assert error.kind is kind

    def test_names(self):
        assert DomainError("x", "y").name == "DomainError"
        assert UnderflowError("x").name == "UnderflowError"

    def test_overflow_does_not_subclass_builtin(self):
        assert not issubclass(OverflowError, builtins.OverflowError)


class TestRaisedKinds:
    """Operations raise errors whose kind can be matched without isinstance."""

    def test_kinds_from_operations(self):
        cases = [
            (lambda: divide(10, 0), ErrorKind.DIVISION_BY_ZERO),
            (lambda: add(float("nan"), 5), ErrorKind.INVALID_INPUT),
            (lambda: add(sys.float_info.max, sys.float_info.max), ErrorKind.OVERFLOW),
            (lambda: sqrt(-1), ErrorKind.DOMAIN),
            (lambda: factorial(171), ErrorKind.OVERFLOW),
            (lambda: exp(1000), ErrorKind.OVERFLOW),
        ]
        for operation, kind in cases:
            with pytest.raises(CalculatorError) as exc_info:
                operation()
            assert exc_info.value.kind is kind

    def test_builtin_errors_never_leak(self):
        with pytest.raises(CalculatorError):
            exp(1e6)
        with pytest.raises(CalculatorError):
            factorial(1e6)


class TestPropagation:
    """The calculator propagates errors unchanged and keeps working."""

    def test_sequential_errors(self):
        calc = Calculator()

        with pytest.raises(DivisionByZeroError):
            calc.divide(10, 0)
        assert calc.add(5, 3) == 8

        with pytest.raises(DomainError):
            calc.sqrt(-1)
        assert calc.multiply(2, 3) == 6

    def test_propagated_types(self):
        calc = Calculator()
        with pytest.raises(DivisionByZeroError):
            calc.modulo(10, 0)
        with pytest.raises(DomainError):
            calc.asin(2)
        with pytest.raises(OverflowError):
            calc.factorial(171)
        with pytest.raises(InvalidInputError):
            calc.set_precision(float("nan"))
