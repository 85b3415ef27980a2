"""Custom exceptions for the scientific calculator."""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminant carried by every calculator error."""

    GENERIC = "generic"
    INVALID_INPUT = "invalid_input"
    DIVISION_BY_ZERO = "division_by_zero"
    DOMAIN = "domain"
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def name(self) -> str:
        """The error class name, e.g. ``"DomainError"``."""
        return type(self).__name__


class DivisionByZeroError(CalculatorError):
    """Raised when the divisor of a division or modulo is zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero is undefined")


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (NaN, Inf, wrong type, bad shape)."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid input: {reason}")
        self.reason = reason


class OverflowError(CalculatorError):
    """Raised when a result exceeds the range of a double."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, operation: str) -> None:
        super().__init__(f"Overflow occurred in {operation} operation")
        self.operation = operation


class UnderflowError(CalculatorError):
    """Reserved. No operation raises this yet."""

    kind = ErrorKind.UNDERFLOW

    def __init__(self, operation: str) -> None:
        super().__init__(f"Underflow occurred in {operation} operation")
        self.operation = operation


class DomainError(CalculatorError):
    """Raised when an argument lies outside the mathematical domain of an operation."""

    kind = ErrorKind.DOMAIN

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Domain error in {operation}: {reason}")
        self.operation = operation
        self.reason = reason
