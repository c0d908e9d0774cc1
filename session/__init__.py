"""会话模块 - 交互模式与批量模式"""
from .repl import run_repl
from .batch import load_expressions, evaluate_expressions, count_failures, save_results, run_batch

__all__ = ['run_repl', 'load_expressions', 'evaluate_expressions', 'count_failures',
           'save_results', 'run_batch']
