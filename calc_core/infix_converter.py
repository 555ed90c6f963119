"""calc_core/infix_converter.py - 调度场算法：中缀 -> 后缀"""
import logging
from enum import Enum

from config.config import MESSAGES
from calc_core.result import Success, Failure
from calc_core.token_system import CalcError, Operator, Operation, UNARY_FORMS
from calc_core.tokenizer import Tokenizer, TokenizeError

logger = logging.getLogger(__name__)


class UnmatchedParenthesisError(CalcError):
    """')' 在操作符栈上找不到对应的 '('"""


class MissingOperatorError(CalcError):
    """两个操作数之间没有操作符，例如 '2 3'"""


class PreviousToken(Enum):
    """前一个 Token 的类别，用于一元/二元判定"""
    NONE = "none"  # 表达式开头
    VALUE = "value"  # 操作数或 ')'：后面应当跟二元操作符
    OPERATOR = "operator"  # 其他操作符：后面应当跟操作数


def classify_previous(token):
    if token is None:
        return PreviousToken.NONE
    if token.is_operand() or token.operation is Operation.RPAR:
        return PreviousToken.VALUE
    return PreviousToken.OPERATOR


def resolve_operation(operation, lexical_unary, previous):
    """
    一元/二元判定，唯一的判定点
    Args:
        operation: 词法分析得到的 Operation
        lexical_unary: 词法层面是否已标记为一元
        previous: PreviousToken
    Returns:
        (resolved_operation, unary_position)
        unary_position 为 True 时该操作符直接入栈，不弹出栈中的任何操作符
    """
    if operation in (Operation.LPAR, Operation.RPAR):
        return operation, False

    unary_position = lexical_unary or previous is not PreviousToken.VALUE
    if unary_position and operation in UNARY_FORMS:
        operation = UNARY_FORMS[operation]
    return operation, unary_position


def _should_pop(top, current):
    """栈顶操作符是否应先于当前操作符输出"""
    if top.operation is Operation.LPAR:
        return False
    if top.precedence > current.precedence:
        return True
    return top.precedence == current.precedence and not current.right_associative


def shunting_yard(tokens):
    """
    Args:
        tokens: Token 可迭代对象（中缀顺序）
    Returns:
        后缀顺序的 Token 列表；未闭合的 '(' 原样留在输出中
    Raises:
        UnmatchedParenthesisError: 多余的 ')'
        MissingOperatorError: 操作数紧跟在操作数或 ')' 之后
    """
    operator_stack = []
    postfix = []
    prev_tok = None

    for tok in tokens:
        if tok.is_operand():
            if classify_previous(prev_tok) is PreviousToken.VALUE:
                raise MissingOperatorError(f"Operand {tok} follows a value")
            postfix.append(tok)
            prev_tok = tok
            continue

        operation, unary_position = resolve_operation(
            tok.operation, tok.is_unary(), classify_previous(prev_tok)
        )
        if operation is not tok.operation:
            tok = Operator(operation)

        if unary_position:
            logger.debug(f"{tok!r} is in unary position, pushing")
            operator_stack.append(tok)
        elif operation is Operation.LPAR:
            operator_stack.append(tok)
        elif operation is Operation.RPAR:
            while True:
                if not operator_stack:
                    raise UnmatchedParenthesisError("Not matched parenthesis")
                top = operator_stack.pop()
                if top.operation is Operation.LPAR:
                    break
                postfix.append(top)
        else:
            while operator_stack and _should_pop(operator_stack[-1], tok):
                postfix.append(operator_stack.pop())
            operator_stack.append(tok)

        prev_tok = tok

    while operator_stack:
        postfix.append(operator_stack.pop())
    return postfix


def to_postfix(infix):
    """
    中缀表达式字符串 -> 后缀 Token 序列
    Returns:
        Success(list_of_tokens) 或 Failure(message)；空输入得到 Success([])
    """
    try:
        postfix = shunting_yard(Tokenizer(infix))
    except TokenizeError as e:
        logger.warning(f"Tokenize failed for {infix!r}: {e}")
        return Failure(MESSAGES["invalid_token"].format(lexeme=e.lexeme, position=e.position))
    except UnmatchedParenthesisError:
        logger.warning(f"Unmatched parenthesis in {infix!r}")
        return Failure(MESSAGES["unmatched_parenthesis"])
    except MissingOperatorError as e:
        logger.warning(f"Missing operator in {infix!r}: {e}")
        return Failure(MESSAGES["bad_expression"])

    logger.debug(f"postfix={[str(t) for t in postfix]}")
    return Success(postfix)
