import logging
from collections import OrderedDict
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from config.config import CALC_CONFIG, BATCH_CONFIG
from calc_core import evaluate, Success

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, reject_non_finite=None):
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = CALC_CONFIG["cache_size"] if cache_size is None else cache_size
        self.reject_non_finite = (CALC_CONFIG["reject_non_finite"]
                                  if reject_non_finite is None else reject_non_finite)
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def get_cache_stats(self):
        total = self._cache_hits + self._cache_misses
        return {
            'size': len(self._result_cache),
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'hit_rate': self._cache_hits / total if total else 0.0,
        }

    def evaluate(self, expression: str):
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            Success(value) 或 Failure(message)；结果不可变，可以直接缓存
        """
        # 结果只依赖表达式文本本身
        cache_key = expression

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {str(expression)[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = evaluate(expression, reject_non_finite=self.reject_non_finite)

        if self.cache_size > 0:
            self._result_cache[cache_key] = result
            self._manage_cache()
        return result

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量评估
        Returns:
            DataFrame，列为 expression / value / error；
            失败行 value 为 NaN，成功行 error 为 None
        """
        expressions = list(expressions)
        values = []
        errors = []
        for expression in expressions:
            result = self.evaluate(expression)
            if isinstance(result, Success):
                values.append(result.value)
                errors.append(None)
            else:
                values.append(np.nan)
                errors.append(result.message)

        # error 列保持 object dtype，成功行为 None
        frame = pd.DataFrame({
            BATCH_CONFIG["default_column"]: pd.Series(expressions, dtype=object),
            BATCH_CONFIG["value_column"]: pd.Series(values, dtype=float),
            BATCH_CONFIG["error_column"]: pd.Series(errors, dtype=object),
        })

        failed = int(frame[BATCH_CONFIG["error_column"]].notna().sum())
        if failed:
            logger.info(f"{failed}/{len(frame)} expressions failed")
        return frame

    def evaluate_frame(self, df: pd.DataFrame, column: Optional[str] = None) -> pd.DataFrame:
        """对 df 中的表达式列求值，返回追加了 value / error 列的副本"""
        column = column or BATCH_CONFIG["default_column"]
        if column not in df.columns:
            raise KeyError(f"Column '{column}' not found in data")

        # 缺失值按空表达式处理
        expressions = df[column].fillna("").astype(str)
        evaluated = self.evaluate_many(expressions.tolist())

        result = df.copy()
        result[BATCH_CONFIG["value_column"]] = evaluated[BATCH_CONFIG["value_column"]].to_numpy()
        result[BATCH_CONFIG["error_column"]] = pd.Series(
            evaluated[BATCH_CONFIG["error_column"]].to_numpy(), index=result.index, dtype=object
        )
        return result
