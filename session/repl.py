"""交互模式 - session/repl.py"""
import logging
import sys

from config.config import REPL_CONFIG
from core import CalculatorError

logger = logging.getLogger(__name__)


def format_failure(error):
    return f"{REPL_CONFIG['failure_marker']} {error}"


def run_repl(calculator, input_stream=None, output=None, prompt=None):
    """
    逐行读取表达式并打印结果，直到 EOF 或退出命令

    Args:
        calculator: Calculator 实例，出错后在此处 reset
        input_stream: 输入流，默认 stdin
        output: 输出流，默认 stdout
        prompt: 提示符，None 时取 REPL_CONFIG；非交互输入可传 ''
    Returns:
        出错的行数
    """
    input_stream = input_stream or sys.stdin
    output = output or sys.stdout
    prompt = REPL_CONFIG["prompt"] if prompt is None else prompt
    failures = 0

    while True:
        if prompt:
            output.write(prompt)
            output.flush()
        line = input_stream.readline()
        if not line:  # EOF
            break
        line = line.strip()
        if not line:
            continue
        if line in REPL_CONFIG["exit_commands"]:
            break

        try:
            print(calculator.evaluate(line), file=output)
        except CalculatorError as e:
            failures += 1
            logger.warning(f"Evaluation failed ({e.kind.value}): {line!r}")
            print(format_failure(e), file=output)
            calculator.reset()
        except AssertionError as e:
            failures += 1
            logger.error(f"Malformed expression {line!r}: {e}")
            print(format_failure(e), file=output)
            calculator.reset()

    logger.info(f"REPL finished with {failures} failed lines")
    return failures
