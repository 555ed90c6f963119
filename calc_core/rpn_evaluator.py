"""RPN表达式求值器 - 调用 Operator.calc"""
import logging
import math

from config.config import MESSAGES, CALC_CONFIG
from calc_core.result import Success, Failure
from calc_core.token_system import StackUnderflowError

logger = logging.getLogger(__name__)


def evaluate_postfix(tokens, reject_non_finite=None):
    """
    评估后缀 Token 序列
    Args:
        tokens: 后缀顺序的 Token 序列
        reject_non_finite: inf/nan 结果是否视为失败，默认取 CALC_CONFIG
    Returns:
        Success(float) 或 Failure(message)
    """
    tokens = list(tokens)
    if not tokens:
        return Failure(MESSAGES["empty_expression"])
    if reject_non_finite is None:
        reject_non_finite = CALC_CONFIG["reject_non_finite"]

    logger.debug(f"postfix={' '.join(str(t) for t in tokens)}")
    operands = []

    for tok in tokens:
        if tok.is_operand():
            operands.append(tok)
            continue

        # 未闭合的 '(' 会被转换器原样输出
        if tok.is_parenthesis():
            logger.warning(f"Parenthesis {tok.symbol!r} left in postfix sequence")
            return Failure(MESSAGES["bad_expression"])

        try:
            result = tok.calc(operands)
        except StackUnderflowError as e:
            logger.warning(f"Insufficient operands: {e}")
            return Failure(MESSAGES["bad_expression"])

        if result is not None:
            operands.append(result)

    if len(operands) != 1:
        logger.warning(f"Stack has {len(operands)} elements after evaluation, expected 1")
        return Failure(MESSAGES["bad_expression"])

    value = operands.pop().value
    if reject_non_finite and not math.isfinite(value):
        logger.warning(f"Non-finite result rejected: {value}")
        return Failure(MESSAGES["bad_expression"])
    return Success(value)
