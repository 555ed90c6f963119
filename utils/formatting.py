"""utils/formatting.py"""
import math

from config.config import CALC_CONFIG


def format_postfix(tokens):
    """后缀序列 -> 空格分隔的文本，例如 '2.0 3.0 4.0 * +'"""
    return ' '.join(str(tok) for tok in tokens)


def format_value(value, precision=None):
    """整数值不带小数点，其余按有效数字显示"""
    precision = CALC_CONFIG["display_precision"] if precision is None else precision
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 10 ** precision:
        return str(int(value))
    return f"{value:.{precision}g}"


def format_result(expression, result, precision=None):
    """CLI 输出的一行"""
    if result.is_success:
        return f"{expression} = {format_value(result.value, precision)}"
    return f"{expression}: {result.message}"
