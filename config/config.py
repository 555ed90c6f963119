"""配置文件"""

# 失败信息（固定文本，界面层直接显示）
MESSAGES = {
    "empty_expression": "Please Enter an expression.",
    "bad_expression": "Bad expression.",
    "unmatched_parenthesis": "Unmatched parenthesis.",
    "invalid_token": "Invalid token '{lexeme}' at position {position}.",
}

# 计算器参数
CALC_CONFIG = {
    "reject_non_finite": False,  # True 时 inf/nan 结果视为 Bad expression
    "display_precision": 12,  # 显示时的有效数字位数
    "cache_size": 1000,  # ExpressionEvaluator 的 LRU 缓存大小
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 批量评估配置
BATCH_CONFIG = {
    "default_column": "expression",
    "value_column": "value",
    "error_column": "error",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALC_CONFIG["display_precision"] > 0, "显示精度必须为正数"
    assert CALC_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), "未知的日志级别"
    assert len(set(BATCH_CONFIG.values())) == len(BATCH_CONFIG), "批量评估的列名不能重复"
    for key in ("empty_expression", "bad_expression", "unmatched_parenthesis", "invalid_token"):
        assert key in MESSAGES, f"缺少失败信息: {key}"
