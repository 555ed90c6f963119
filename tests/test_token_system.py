import math

import pytest

from calc_core import (
    Operand, Operator, Operation, OPERATOR_DEFINITIONS, StackUnderflowError, TokenType
)


def operands(*values):
    return [Operand(v) for v in values]


def test_token_is_exactly_one_kind():
    number = Operand(1)
    plus = Operator(Operation.PLUS)
    assert number.is_operand() and not number.is_operator()
    assert plus.is_operator() and not plus.is_operand()
    assert number.type is TokenType.OPERAND
    assert plus.type is TokenType.OPERATOR


def test_operand_is_immutable():
    number = Operand(3)
    with pytest.raises(AttributeError):
        number.value = 4
    assert number.value == 3.0


def test_precedence_order():
    rank = {op: OPERATOR_DEFINITIONS[op].precedence for op in OPERATOR_DEFINITIONS}
    assert rank[Operation.POWER] > rank[Operation.UMINUS] > rank[Operation.MUL] > rank[Operation.PLUS]
    assert rank[Operation.UMINUS] == rank[Operation.UPLUS]
    assert rank[Operation.MUL] == rank[Operation.DIV] == rank[Operation.MOD]
    assert rank[Operation.PLUS] == rank[Operation.MINUS]
    assert rank[Operation.LPAR] is None and rank[Operation.RPAR] is None


def test_only_power_and_unary_minus_are_right_associative():
    right = {op for op in Operation if Operator(op).right_associative}
    assert right == {Operation.POWER, Operation.UMINUS}


def test_binary_calc_pops_two_and_keeps_order():
    stack = operands(1, 10, 4)
    result = Operator(Operation.MINUS).calc(stack)
    assert result == Operand(6)
    assert stack == operands(1)


def test_unary_calc_pops_one():
    stack = operands(2, 5)
    assert Operator(Operation.UMINUS).calc(stack) == Operand(-5)
    assert stack == operands(2)


@pytest.mark.parametrize("operation, left, right, expected", [
    (Operation.PLUS, 2, 3, 5.0),
    (Operation.MUL, 2, 3, 6.0),
    (Operation.DIV, 7, 2, 3.5),
    (Operation.MOD, 7, 3, 1.0),
    (Operation.MOD, -7, 3, 2.0),
    (Operation.POWER, 2, 10, 1024.0),
    (Operation.POWER, 4, 0.5, 2.0),
])
def test_binary_arithmetic(operation, left, right, expected):
    assert Operator(operation).calc(operands(left, right)).value == pytest.approx(expected)


def test_division_by_zero_follows_ieee():
    assert Operator(Operation.DIV).calc(operands(1, 0)).value == math.inf
    assert Operator(Operation.DIV).calc(operands(-1, 0)).value == -math.inf
    assert math.isnan(Operator(Operation.DIV).calc(operands(0, 0)).value)


def test_power_overflow_is_inf():
    assert Operator(Operation.POWER).calc(operands(10, 400)).value == math.inf


def test_underflow_raises_and_leaves_stack():
    stack = operands(3)
    with pytest.raises(StackUnderflowError) as excinfo:
        Operator(Operation.PLUS).calc(stack)
    assert excinfo.value.available == 1
    assert stack == operands(3)


def test_parentheses_have_no_calculation():
    with pytest.raises(TypeError):
        Operator(Operation.LPAR).calc(operands(1, 2))
    assert Operator(Operation.RPAR).is_parenthesis()


def test_operator_equality_by_operation():
    assert Operator(Operation.POWER) == Operator(Operation.POWER)
    assert Operator(Operation.MINUS) != Operator(Operation.UMINUS)
    assert str(Operator(Operation.UMINUS)) == "u-"
    assert str(Operator(Operation.UPLUS)) == "u+"
    assert str(Operator(Operation.MINUS)) == "-"
