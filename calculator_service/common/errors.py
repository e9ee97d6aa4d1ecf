"""Failure taxonomy shared by the validator, the evaluator and the HTTP layer."""
from enum import Enum


class FailureKind(str, Enum):
    """Category of a failed evaluation, switched on by callers instead of message text."""

    INVALID_EXPRESSION = "InvalidExpression"
    DIVISION_BY_ZERO = "DivisionByZero"
    INTERNAL_ERROR = "InternalError"


class EvaluationError(ValueError):
    """
    Base class for every failure raised while evaluating an expression.

    :param str message: Human readable reason, only used for logging
    """

    kind: FailureKind = FailureKind.INTERNAL_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind.value)


class InvalidExpressionError(EvaluationError):
    """Disallowed characters, unbalanced brackets or a malformed operand/operator layout."""

    kind = FailureKind.INVALID_EXPRESSION


class DivisionByZeroError(EvaluationError):
    """Right operand of a division evaluated to zero."""

    kind = FailureKind.DIVISION_BY_ZERO


class InternalEvaluationError(EvaluationError):
    """Stack underflow or unknown operator."""

    kind = FailureKind.INTERNAL_ERROR
