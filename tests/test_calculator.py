import math

import pytest

from src.domain.exceptions import (
    DivisionByZeroError,
    DomainValidationError,
    InvalidOperationError,
)
from src.domain.services.calculator import evaluate
from src.domain.value_objects import Operation


@pytest.mark.parametrize(
    "operation, expected",
    [
        (Operation.ADD, 15),
        (Operation.SUBTRACT, 5),
        (Operation.MULTIPLY, 50),
        (Operation.DIVIDE, 2),
    ],
)
def test_evaluate_each_operation(operation, expected):
    assert evaluate(10, operation, 5) == expected


def test_evaluate_accepts_wire_tokens():
    assert evaluate(10, "ADD", 5) == 15
    assert evaluate(10, "DIVIDE", 4) == 2.5


def test_divide_by_zero_fails():
    with pytest.raises(DivisionByZeroError):
        evaluate(10, Operation.DIVIDE, 0)


def test_divide_by_negative_zero_fails():
    with pytest.raises(DivisionByZeroError):
        evaluate(10, Operation.DIVIDE, -0.0)


@pytest.mark.parametrize("token", ["MOD", "add", "", "POW", None, 3])
def test_unknown_operation_fails(token):
    with pytest.raises(InvalidOperationError):
        evaluate(10, token, 5)


def test_invalid_operation_is_a_validation_error():
    with pytest.raises(DomainValidationError):
        evaluate(10, "MOD", 5)


def test_overflow_is_rejected():
    with pytest.raises(DomainValidationError):
        evaluate(1e308, Operation.MULTIPLY, 10)


def test_real_numbers():
    assert math.isclose(evaluate(0.1, Operation.ADD, 0.2), 0.3)
    assert evaluate(-3, Operation.MULTIPLY, -2.5) == 7.5


def test_chained_results_use_stored_parent_result():
    seed = 100
    a = evaluate(seed, Operation.SUBTRACT, 20)
    b = evaluate(a, Operation.MULTIPLY, 2)
    assert a == 80
    assert b == 160
    # Applying B's operand to the seed or to A's operand would give other values
    assert b != evaluate(seed, Operation.MULTIPLY, 2)
    assert b != evaluate(20, Operation.MULTIPLY, 2)
