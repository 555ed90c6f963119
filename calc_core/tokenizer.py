"""calc_core/tokenizer.py - 把表达式字符串切分为 Token 序列"""
import logging
import math
import re

from calc_core.token_system import (
    CalcError, Operand, Operator, Operation, SYMBOL_TO_OPERATION, UNARY_FORMS
)

logger = logging.getLogger(__name__)

# 十六进制必须在十进制之前尝试，否则 "0x1F" 会被切成 "0" 和 "x1F"
NUMBER_PATTERN = re.compile(r'0[xX][0-9a-fA-F]+|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
# 数字后面紧跟的这些字符说明词素是畸形的，例如 "1.2.3"、"12ab"
NUMBER_TAIL_PATTERN = re.compile(r'[\w.]+')
BAD_LEXEME_PATTERN = re.compile(r'[^\s+\-*/%^()]+')


class TokenizeError(CalcError):
    """无法识别的词素"""

    def __init__(self, lexeme, position):
        super().__init__(f"Invalid token '{lexeme}' at position {position}")
        self.lexeme = lexeme
        self.position = position


class Tokenizer:
    """
    惰性词法分析器：每次调用 next_token() 返回一个 Token，输入结束时返回 None。
    只能遍历一次。

    词法层面的一元标记：当没有前一个词素，或前一个词素是除 ')' 之外的操作符时，
    '+'/'-' 直接标记为 UPLUS/UMINUS。
    """

    def __init__(self, text):
        self.text = text or ""
        self.position = 0
        self._previous = None

    def _skip_whitespace(self):
        while self.position < len(self.text) and self.text[self.position].isspace():
            self.position += 1

    def _lexically_unary(self):
        prev = self._previous
        if prev is None:
            return True
        return prev.is_operator() and prev.operation is not Operation.RPAR

    def next_token(self):
        self._skip_whitespace()
        if self.position >= len(self.text):
            return None

        start = self.position
        ch = self.text[start]

        if ch in SYMBOL_TO_OPERATION:
            operation = SYMBOL_TO_OPERATION[ch]
            if operation in UNARY_FORMS and self._lexically_unary():
                operation = UNARY_FORMS[operation]
            token = Operator(operation)
            self.position += 1
        else:
            match = NUMBER_PATTERN.match(self.text, start)
            if match is None:
                bad = BAD_LEXEME_PATTERN.match(self.text, start)
                raise TokenizeError(bad.group(0) if bad else ch, start)

            end = match.end()
            tail = NUMBER_TAIL_PATTERN.match(self.text, end)
            if tail is not None:
                raise TokenizeError(self.text[start:tail.end()], start)

            lexeme = match.group(0)
            if lexeme[:2].lower() == '0x':
                try:
                    value = float(int(lexeme, 16))
                except OverflowError:
                    # 与 "1e400" 一致：超出双精度范围的字面量得到 inf
                    value = math.inf
                token = Operand(value)
            else:
                token = Operand(float(lexeme))
            self.position = end

        logger.debug(f"Token at {start}: {token!r}")
        self._previous = token
        return token

    def __iter__(self):
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def tokenize(text):
    """返回 text 的惰性 Token 迭代器"""
    return iter(Tokenizer(text))
