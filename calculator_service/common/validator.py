"""Sanitize raw expressions before they reach the evaluator."""
import re

from calculator_service.common.errors import InvalidExpressionError

# Digits, the four binary operators and parentheses, at least one character
ALLOWED_EXPRESSION = re.compile(r"[0-9+\-*/()]+")


def sanitize(expression: str) -> str:
    """
    Strip space characters and check the remaining characters against the allowed set.

    Only the plain space is removed. Tabs and other whitespace are rejected like any
    other foreign character.

    :param str expression: Raw expression as received from the caller

    :return: Cleaned expression, safe to hand to the evaluator
    :rtype: str
    :raises InvalidExpressionError: If the cleaned expression is empty or holds a disallowed character
    """
    cleaned: str = expression.replace(" ", "")
    if not ALLOWED_EXPRESSION.fullmatch(cleaned):
        raise InvalidExpressionError(f"Disallowed characters in expression: {expression!r}")
    return cleaned
