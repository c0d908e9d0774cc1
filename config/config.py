"""配置文件"""

# 求值器参数
CALCULATOR_CONFIG = {
    "default_notation": "value",  # value / prefix / postfix
}

# 交互模式
REPL_CONFIG = {
    "prompt": ">> ",
    "failure_marker": "!",  # 出错行的前缀
    "exit_commands": ["exit", "quit"],
}

# 批量模式
BATCH_CONFIG = {
    "expression_column": "expression",  # CSV 中表达式所在的列
    "result_column": "result",
    "error_column": "error",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


def validate_config():
    """验证配置的合理性"""
    from core import RESULT_TYPES
    assert CALCULATOR_CONFIG["default_notation"] in RESULT_TYPES, "未知的默认输出形式"
    assert REPL_CONFIG["failure_marker"], "失败标记不能为空"
    columns = [BATCH_CONFIG["expression_column"], BATCH_CONFIG["result_column"],
               BATCH_CONFIG["error_column"]]
    assert len(set(columns)) == len(columns), "批量输出的列名必须互不相同"
