"""Evaluate cleaned arithmetic expressions with a two-stack precedence scan."""
from collections.abc import Callable as ABCCallable
import operator
import string
from typing import Callable, List, Tuple

from calculator_service.common.errors import (
    DivisionByZeroError,
    InternalEvaluationError,
    InvalidExpressionError,
)


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to (priority, function)
OPERATORS: dict[str, Tuple[int, OperatorFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, operator.truediv),
}

OPEN_BRACKET = "("
CLOSE_BRACKET = ")"


class ExpressionEvaluator:
    """
    Evaluate arithmetic expressions over single-digit operands.

    Design constraints:
        - No eval(), no dynamic code execution
        - No syntax tree, parsing and computing happen in the same pass
        - All state lives in the call, so evaluation is reentrant

    Algorithm:
        Operands and pending operators are kept on two stacks. Before a binary
        operator is pushed, every pending operator with a priority greater than or
        equal to its own is applied, which gives left-associative evaluation. An open
        bracket has priority 0, so nothing unwinds past it until the matching close
        bracket arrives.

    Limitation:
        Each digit is an independent operand, "12" is read as two operands and is
        rejected as malformed.

    Examples:
        - "1+2*3" -> 7.0
        - "(1+2)*3" -> 9.0
    """

    @staticmethod
    def priority(symbol: str) -> int:
        """
        Return the priority of an operator symbol.

        :param str symbol: Operator or bracket symbol

        :return: 2 for * and /, 1 for + and -, 0 for anything else
        :rtype: int
        """
        return OPERATORS.get(symbol, (0,))[0]

    @staticmethod
    def apply_operation(operands: List[float], operators: List[str]) -> None:
        """
        Pop the top operator and the top two operands, push the computed value back.

        :param List[float] operands: Operand stack, modified in place
        :param List[str] operators: Operator stack, modified in place

        :raises InternalEvaluationError: On stack underflow or unknown operator
        :raises DivisionByZeroError: If the right operand of a division is zero
        """
        if len(operands) < 2 or not operators:
            raise InternalEvaluationError("invalid operation")

        symbol: str = operators[-1]
        if symbol not in OPERATORS:
            raise InternalEvaluationError("unknown operation")

        a, b = operands[-2], operands[-1]
        if symbol == "/" and b == 0:
            raise DivisionByZeroError("division by zero")

        result: float = OPERATORS[symbol][1](a, b)
        del operands[-2:]
        operators.pop()
        operands.append(result)

    @staticmethod
    def calculate(expression: str) -> float:
        """
        Evaluate a cleaned expression.

        :param str expression: Expression made only of digits, + - * / and brackets

        :return: Computed result as float
        :rtype: float
        :raises InvalidExpressionError: On unbalanced brackets or a malformed operand/operator layout
        :raises DivisionByZeroError: If a division by zero occurs
        :raises InternalEvaluationError: On stack underflow or unknown operator
        """
        operands: List[float] = []
        operators: List[str] = []
        left_brackets: int = 0
        right_brackets: int = 0

        for char in expression:
            if char in string.digits:
                operands.append(float(char))

            elif char in OPERATORS:
                current: int = ExpressionEvaluator.priority(char)
                while operators and ExpressionEvaluator.priority(operators[-1]) >= current:
                    ExpressionEvaluator.apply_operation(operands, operators)
                operators.append(char)

            elif char == OPEN_BRACKET:
                operators.append(char)
                left_brackets += 1

            elif char == CLOSE_BRACKET:
                right_brackets += 1
                if left_brackets < right_brackets:
                    raise InvalidExpressionError(f"Closing bracket without opening bracket: {expression}")
                while operators and operators[-1] != OPEN_BRACKET:
                    ExpressionEvaluator.apply_operation(operands, operators)
                if not operators:
                    raise InternalEvaluationError("invalid operation")
                # Discard the matching open bracket
                operators.pop()
                left_brackets -= 1
                right_brackets -= 1

            else:
                raise InvalidExpressionError(f"Unexpected character {char!r} in expression: {expression}")

        if left_brackets != 0 or right_brackets != 0:
            raise InvalidExpressionError(f"Unbalanced brackets: {expression}")

        if len(operands) - 1 != len(operators):
            raise InvalidExpressionError(f"Invalid expression (operands do not match operators): {expression}")

        while operators:
            ExpressionEvaluator.apply_operation(operands, operators)

        return operands[0]
