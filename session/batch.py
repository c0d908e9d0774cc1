"""批量模式 - session/batch.py"""
import logging
import sys

import pandas as pd

from config.config import BATCH_CONFIG, REPL_CONFIG
from core import Calculator, CalculatorError, get_result_type

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    读取待求值的表达式

    Parameters:
    - file_path: CSV 文件（需含表达式列）或纯文本文件（每行一个表达式）
    - expression_column: CSV 中表达式所在的列，默认取 BATCH_CONFIG

    Returns:
    - 表达式字符串列表，空行已跳过
    """
    logger.info(f"Loading expressions from {file_path}")
    expression_column = expression_column or BATCH_CONFIG["expression_column"]

    if str(file_path).endswith('.csv'):
        # dtype=str 避免 "12" 之类被读成数字
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if expression_column not in dataset.columns:
            raise ValueError(f"Expression column '{expression_column}' not found in {file_path}.")
        expressions = dataset[expression_column].tolist()
    else:
        with open(file_path, encoding='utf-8') as f:
            expressions = f.read().splitlines()

    expressions = [expr for expr in expressions if expr.strip()]
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, notation='value', calculator=None):
    """
    逐个求值，同一个 Calculator 反复使用，出错后 reset

    Returns:
    - DataFrame: expression / result / error 三列，成功时 error 为 None
    """
    if calculator is None:
        calculator = Calculator(get_result_type(notation))

    rows = []
    for expression in expressions:
        try:
            result, error = calculator.evaluate(expression), None
        except CalculatorError as e:
            logger.warning(f"Failed to evaluate {expression!r}: {e}")
            calculator.reset()
            result, error = None, str(e)
        except AssertionError as e:
            # 表达式结构有缺陷（如 "()"、"2(3)"），只记这一行失败
            logger.error(f"Malformed expression {expression!r}: {e}")
            calculator.reset()
            result, error = None, str(e)
        rows.append({
            BATCH_CONFIG["expression_column"]: expression,
            BATCH_CONFIG["result_column"]: result,
            BATCH_CONFIG["error_column"]: error,
        })

    columns = [BATCH_CONFIG["expression_column"], BATCH_CONFIG["result_column"],
               BATCH_CONFIG["error_column"]]
    return pd.DataFrame(rows, columns=columns)


def count_failures(results):
    """失败表达式的数量"""
    return int(results[BATCH_CONFIG["error_column"]].notna().sum())


def format_row(row):
    """单行输出：成功打印结果，失败打印标记和错误信息"""
    error = row[BATCH_CONFIG["error_column"]]
    if error is not None and not pd.isna(error):
        return f"{REPL_CONFIG['failure_marker']} {error}"
    return str(row[BATCH_CONFIG["result_column"]])


def save_results(results, output_path):
    logger.info(f"Saving results to {output_path}")
    results.to_csv(output_path, index=False)


def run_batch(expressions, notation='value', output=None, output_path=None):
    """
    批量求值并逐行打印

    Returns:
    - 失败数量（作为进程退出码，0 表示全部成功）
    """
    output = output or sys.stdout
    results = evaluate_expressions(expressions, notation)

    for _, row in results.iterrows():
        print(format_row(row), file=output)

    if output_path:
        save_results(results, output_path)

    failures = count_failures(results)
    if failures:
        logger.warning(f"{failures} of {len(results)} expressions failed")
    else:
        logger.info(f"All {len(results)} expressions evaluated successfully")
    return failures
