import math

import pandas as pd
import pytest

from calc_core import Failure, Success
from calculator import ExpressionEvaluator


def test_evaluate_returns_result():
    evaluator = ExpressionEvaluator()
    assert evaluator.evaluate("2 + 3 * 4") == Success(14.0)
    assert evaluator.evaluate("3 +") == Failure("Bad expression.")


def test_cache_hits_and_misses():
    evaluator = ExpressionEvaluator(cache_size=10)
    evaluator.evaluate("1 + 1")
    evaluator.evaluate("1 + 1")
    evaluator.evaluate("2 + 2")

    stats = evaluator.get_cache_stats()
    assert stats['hits'] == 1
    assert stats['misses'] == 2
    assert stats['size'] == 2


def test_cache_evicts_least_recently_used():
    evaluator = ExpressionEvaluator(cache_size=2)
    evaluator.evaluate("1")
    evaluator.evaluate("2")
    evaluator.evaluate("1")
    evaluator.evaluate("3")

    assert list(evaluator._result_cache) == ["1", "3"]


def test_zero_cache_size_disables_cache():
    evaluator = ExpressionEvaluator(cache_size=0)
    evaluator.evaluate("1 + 1")
    evaluator.evaluate("1 + 1")
    assert evaluator.get_cache_stats()['hits'] == 0
    assert evaluator.get_cache_stats()['size'] == 0


def test_clear_cache_resets_counters():
    evaluator = ExpressionEvaluator()
    evaluator.evaluate("1")
    evaluator.evaluate("1")
    evaluator.clear_cache()
    assert evaluator.get_cache_stats() == {'size': 0, 'hits': 0, 'misses': 0, 'hit_rate': 0.0}


def test_reject_non_finite_option():
    assert ExpressionEvaluator(reject_non_finite=True).evaluate("1 / 0") == Failure("Bad expression.")
    assert ExpressionEvaluator(reject_non_finite=False).evaluate("1 / 0").value == math.inf


def test_evaluate_many():
    frame = ExpressionEvaluator().evaluate_many(["2 ^ 3 ^ 2", "", "(1 + 2"])

    assert list(frame.columns) == ["expression", "value", "error"]
    assert frame.loc[0, "value"] == 512.0
    assert frame.loc[0, "error"] is None
    assert math.isnan(frame.loc[1, "value"])
    assert frame.loc[1, "error"] == "Please Enter an expression."
    assert frame.loc[2, "error"] == "Bad expression."


def test_evaluate_many_empty():
    frame = ExpressionEvaluator().evaluate_many([])
    assert frame.empty
    assert list(frame.columns) == ["expression", "value", "error"]


def test_evaluate_frame_appends_columns():
    df = pd.DataFrame({"id": [1, 2, 3], "formula": ["10 / 2 - 3", None, "-3 + 4"]})
    result = ExpressionEvaluator().evaluate_frame(df, column="formula")

    assert list(result.columns) == ["id", "formula", "value", "error"]
    assert result["value"].tolist()[0] == pytest.approx(2.0)
    assert result.loc[0, "error"] is None
    assert result.loc[1, "error"] == "Please Enter an expression."
    assert result.loc[2, "value"] == pytest.approx(1.0)
    # 原始 DataFrame 不被修改
    assert list(df.columns) == ["id", "formula"]


def test_evaluate_frame_missing_column():
    with pytest.raises(KeyError):
        ExpressionEvaluator().evaluate_frame(pd.DataFrame({"a": ["1"]}))
