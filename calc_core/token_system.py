"""calc_core/token_system.py"""
from collections import namedtuple
from enum import Enum

from calc_core.operators import Operators


class CalcError(Exception):
    """计算器内部错误的基类；在评估边界处转换为 Failure"""


class StackUnderflowError(CalcError):
    """操作数栈中的操作数少于操作符的元数"""

    def __init__(self, operator, available):
        super().__init__(f"'{operator.symbol}' needs {operator.arity} operand(s), stack has {available}")
        self.operator = operator
        self.available = available


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


class Operation(Enum):
    PLUS = "plus"
    MINUS = "minus"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    POWER = "power"
    UMINUS = "uminus"
    UPLUS = "uplus"
    LPAR = "lpar"
    RPAR = "rpar"


# symbol: 显示符号, precedence: 优先级（括号为 None，不参与比较）,
# arity: 元数, right_assoc: 是否右结合, function: Operators 中的方法名
OperatorSpec = namedtuple('OperatorSpec', ['symbol', 'precedence', 'arity', 'right_assoc', 'function'])

# 操作符定义字典
OPERATOR_DEFINITIONS = {
    # 二元操作符
    Operation.PLUS: OperatorSpec('+', 1, 2, False, 'add'),
    Operation.MINUS: OperatorSpec('-', 1, 2, False, 'sub'),
    Operation.MUL: OperatorSpec('*', 2, 2, False, 'mul'),
    Operation.DIV: OperatorSpec('/', 2, 2, False, 'div'),
    Operation.MOD: OperatorSpec('%', 2, 2, False, 'mod'),
    Operation.POWER: OperatorSpec('^', 4, 2, True, 'power'),

    # 一元操作符
    Operation.UMINUS: OperatorSpec('-', 3, 1, True, 'neg'),
    Operation.UPLUS: OperatorSpec('+', 3, 1, False, 'pos'),

    # 括号：没有计算能力
    Operation.LPAR: OperatorSpec('(', None, 0, False, None),
    Operation.RPAR: OperatorSpec(')', None, 0, False, None),
}

# 二元符号 -> 操作，词法分析器使用
SYMBOL_TO_OPERATION = {
    '+': Operation.PLUS,
    '-': Operation.MINUS,
    '*': Operation.MUL,
    '/': Operation.DIV,
    '%': Operation.MOD,
    '^': Operation.POWER,
    '(': Operation.LPAR,
    ')': Operation.RPAR,
}

# 二元 +/- 在一元位置上对应的操作
UNARY_FORMS = {
    Operation.PLUS: Operation.UPLUS,
    Operation.MINUS: Operation.UMINUS,
}

PARENTHESES = (Operation.LPAR, Operation.RPAR)


class Token:
    """Token 基类：要么是 Operand，要么是 Operator"""
    __slots__ = ()

    type = None

    def is_operand(self):
        return self.type is TokenType.OPERAND

    def is_operator(self):
        return self.type is TokenType.OPERATOR


class Operand(Token):
    __slots__ = ('_value',)

    type = TokenType.OPERAND

    def __init__(self, value):
        self._value = float(value)

    @property
    def value(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Operand):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((TokenType.OPERAND, self._value))

    def __repr__(self):
        return f"Operand({self._value!r})"

    def __str__(self):
        return repr(self._value)


class Operator(Token):
    __slots__ = ('_operation',)

    type = TokenType.OPERATOR

    def __init__(self, operation):
        if operation not in OPERATOR_DEFINITIONS:
            raise ValueError(f"Unknown operation: {operation}")
        self._operation = operation

    @property
    def operation(self):
        return self._operation

    @property
    def spec(self):
        return OPERATOR_DEFINITIONS[self._operation]

    @property
    def symbol(self):
        return self.spec.symbol

    @property
    def precedence(self):
        return self.spec.precedence

    @property
    def arity(self):
        return self.spec.arity

    @property
    def right_associative(self):
        return self.spec.right_assoc

    def is_parenthesis(self):
        return self._operation in PARENTHESES

    def is_unary(self):
        return self.arity == 1

    def calc(self, stack):
        """
        从操作数栈弹出 arity 个操作数并计算
        Args:
            stack: Operand 列表（栈顶在末尾），会被原地修改
        Returns:
            新的 Operand
        Raises:
            StackUnderflowError: 栈中操作数不足
            TypeError: 括号没有计算能力
        """
        if self.spec.function is None:
            raise TypeError(f"'{self.symbol}' has no calculation")
        if len(stack) < self.arity:
            raise StackUnderflowError(self, len(stack))

        # 右操作数在栈顶
        operands = [stack.pop().value for _ in range(self.arity)][::-1]
        op_method = getattr(Operators, self.spec.function)
        return Operand(op_method(*operands))

    def __eq__(self, other):
        if not isinstance(other, Operator):
            return NotImplemented
        return self._operation is other._operation

    def __hash__(self):
        return hash((TokenType.OPERATOR, self._operation))

    def __repr__(self):
        return f"Operator({self._operation.name})"

    def __str__(self):
        # 一元操作符加前缀 u，与二元的 +/- 区分
        if self.is_unary():
            return f"u{self.symbol}"
        return self.symbol
