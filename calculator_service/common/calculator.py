"""Entry point of the calculation core: sanitize, evaluate and format."""
from decimal import Decimal

from calculator_service.common.errors import EvaluationError
from calculator_service.common.evaluator import ExpressionEvaluator
from calculator_service.common.logger import logger
from calculator_service.common.models import EvaluationOutcome
from calculator_service.common.validator import sanitize


def evaluate(expression: str) -> EvaluationOutcome:
    """
    Sanitize and evaluate an expression, returning a tagged outcome.

    Failures never escape as exceptions: the first error stops evaluation and its
    kind is carried in the outcome. No partial result is kept.

    :param str expression: Raw arithmetic expression

    :return: Outcome holding either the result or the failure kind
    :rtype: EvaluationOutcome
    """
    try:
        cleaned: str = sanitize(expression)
        result: float = ExpressionEvaluator.calculate(cleaned)
    except EvaluationError as exc:
        logger.warning(f"🧮❌ Evaluation failed ({exc.kind.value}): {exc}")
        return EvaluationOutcome(expression=expression, failure=exc.kind)

    logger.debug(f"🧮✅ {expression!r} = {result}")
    return EvaluationOutcome(expression=expression, result=result)


def format_result(value: float) -> str:
    """
    Format a result with the shortest round-trip decimal digits, without exponent.

    Examples: 7.0 -> "7", 0.5 -> "0.5", 1e16 -> "10000000000000000"

    :param float value: Numeric result

    :return: Positional decimal representation
    :rtype: str
    """
    # repr() yields the shortest digits that round-trip, Decimal drops the exponent
    return format(Decimal(repr(value)).normalize(), "f")
