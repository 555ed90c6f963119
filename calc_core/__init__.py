"""核心模块 - Token系统、词法分析、调度场转换和RPN评估器"""
from .token_system import (
    TokenType, Operation, Token, Operand, Operator, OPERATOR_DEFINITIONS,
    CalcError, StackUnderflowError
)
from .result import Success, Failure
from .operators import Operators
from .tokenizer import Tokenizer, TokenizeError, tokenize
from .infix_converter import (
    to_postfix, shunting_yard, resolve_operation, PreviousToken, UnmatchedParenthesisError,
    MissingOperatorError
)
from .rpn_evaluator import evaluate_postfix
from .calculator import evaluate

__all__ = [
    'TokenType', 'Operation', 'Token', 'Operand', 'Operator', 'OPERATOR_DEFINITIONS',
    'CalcError', 'StackUnderflowError', 'Success', 'Failure', 'Operators',
    'Tokenizer', 'TokenizeError', 'tokenize',
    'to_postfix', 'shunting_yard', 'resolve_operation', 'PreviousToken', 'UnmatchedParenthesisError',
    'MissingOperatorError',
    'evaluate_postfix', 'evaluate'
]
