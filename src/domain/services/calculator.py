"""
Arithmetic evaluator for comment results.

Called exactly once per comment, at creation time. The caller resolves the
previous number (parent's stored result, or the discussion's start number).
"""

import math

from src.domain.exceptions import DivisionByZeroError, DomainValidationError
from src.domain.value_objects.operation import Operation


def evaluate(previous: float, operation: Operation | str, operand: float) -> float:
    """
    Apply one operation to the previous number.

    Raises:
        InvalidOperationError: operation is not ADD, SUBTRACT, MULTIPLY or DIVIDE
        DivisionByZeroError: DIVIDE with a zero operand
        DomainValidationError: the result overflows to a non-finite value
    """
    operation = Operation.parse(operation)

    if operation is Operation.ADD:
        result = previous + operand
    elif operation is Operation.SUBTRACT:
        result = previous - operand
    elif operation is Operation.MULTIPLY:
        result = previous * operand
    else:
        if operand == 0:
            raise DivisionByZeroError()
        result = previous / operand

    if not math.isfinite(result):
        raise DomainValidationError(
            f"Result of {operation.value} {operand} on {previous} is not a finite number"
        )
    return result
