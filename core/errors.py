"""core/errors.py - 计算器错误类型"""
from enum import Enum


class ErrorKind(Enum):
    UNKNOWN_SYMBOL = "unknown_symbol"  # 无法解析为数字的符号
    TOO_MANY_RIGHT_PAREN = "too_many_right_paren"
    TOO_MANY_LEFT_PAREN = "too_many_left_paren"
    INSUFFICIENT_OPERANDS = "insufficient_operands"


class CalculatorError(Exception):
    """所有可恢复错误的基类；出错后需调用 Calculator.reset()"""

    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class UnknownSymbolError(CalculatorError):
    kind = ErrorKind.UNKNOWN_SYMBOL

    def __init__(self, symbol):
        super().__init__(f"Unknown symbol: '{symbol}'")
        self.symbol = symbol


class TooManyRightParenError(CalculatorError):
    kind = ErrorKind.TOO_MANY_RIGHT_PAREN

    def __init__(self):
        super().__init__("Too many right parentheses")


class TooManyLeftParenError(CalculatorError):
    kind = ErrorKind.TOO_MANY_LEFT_PAREN

    def __init__(self):
        super().__init__("Too many left parentheses")


class InsufficientOperandsError(CalculatorError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, operator=None):
        if operator is None:
            message = "Insufficient operands"
        else:
            message = f"Insufficient operands for '{operator}'"
        super().__init__(message)
        self.operator = operator
