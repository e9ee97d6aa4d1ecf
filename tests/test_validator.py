"""Test function sanitize."""
import pytest

from calculator_service.common.errors import FailureKind, InvalidExpressionError
from calculator_service.common.validator import sanitize


@pytest.mark.parametrize("expr,expected", [
    ("1+2", "1+2"),
    ("1 + 2", "1+2"),
    ("  ( 3 * 4 ) / 2  ", "(3*4)/2"),
    ("()", "()"),
])
def test_sanitize_strips_spaces(expr, expected):
    """Spaces are removed and allowed characters are kept in order."""
    assert sanitize(expr) == expected


@pytest.mark.parametrize("expr", [
    "1+a",
    "x",
    "2^3",
    "1.5+2",
    "1\t+2",      # Only plain spaces are stripped
    "1+2\n",
    "%1",
    "1+٣",        # Non-ASCII digit
])
def test_sanitize_rejects_disallowed_characters(expr):
    """Any character outside digits, operators and brackets is rejected."""
    with pytest.raises(InvalidExpressionError) as exc_info:
        sanitize(expr)
    assert exc_info.value.kind is FailureKind.INVALID_EXPRESSION


@pytest.mark.parametrize("expr", ["", "   "])
def test_sanitize_rejects_empty_expression(expr):
    """An expression with nothing left after stripping is rejected."""
    with pytest.raises(InvalidExpressionError):
        sanitize(expr)


@pytest.mark.parametrize("position", [0, 2, 4])
def test_sanitize_rejects_regardless_of_position(position):
    """A foreign character is caught wherever it appears."""
    chars = list("1+2*3")
    chars.insert(position, "?")
    with pytest.raises(InvalidExpressionError):
        sanitize("".join(chars))
