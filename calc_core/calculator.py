"""calc_core/calculator.py - 顶层入口"""
from calc_core.infix_converter import to_postfix
from calc_core.rpn_evaluator import evaluate_postfix


def evaluate(infix, reject_non_finite=None):
    """中缀表达式 -> Success(value) 或 Failure(message)，对任何输入都不抛异常"""
    converted = to_postfix(infix)
    if not converted.is_success:
        return converted
    return evaluate_postfix(converted.value, reject_non_finite=reject_non_finite)
