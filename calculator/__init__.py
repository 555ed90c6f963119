"""计算器模块 - 带缓存的表达式评估与批量评估"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']
