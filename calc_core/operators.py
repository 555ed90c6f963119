"""calc_core/operators.py"""
import logging

import numpy as np

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合（IEEE 双精度语义）"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """取负"""
        return float(np.negative(np.float64(operand)))

    @staticmethod
    def pos(operand):
        """取正（恒等）"""
        return float(np.positive(np.float64(operand)))

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.add(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.subtract(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return float(np.multiply(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def div(operand1, operand2):
        """浮点除法：除零得到 ±inf 或 nan，不抛异常"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            result = np.true_divide(np.float64(operand1), np.float64(operand2))
        if operand2 == 0:
            logger.debug(f"Division by zero: {operand1} / {operand2} -> {result}")
        return float(result)

    @staticmethod
    def mod(operand1, operand2):
        """取模（符号跟随除数，与 Python 浮点取模一致）；除数为零得到 nan"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.mod(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def power(operand1, operand2):
        """乘方：溢出得到 inf，负底数的非整数次幂得到 nan"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))
