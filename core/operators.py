"""core/operators.py - 结果类型：两个子结果在操作符下如何组合"""
from abc import ABC, abstractmethod

import numpy as np

from core.token_system import Operator


def format_literal(value):
    """数字字面量的文本形式：1.0 -> '1'，2.50 -> '2.5'"""
    return np.format_float_positional(np.float64(value), trim='-')


class Result(ABC):
    """部分计算结果。一个 Calculator 在生命周期内只使用一种具体形式。"""

    notation = None

    @classmethod
    @abstractmethod
    def from_literal(cls, value):
        """由数字字面量构造"""

    @classmethod
    @abstractmethod
    def combine(cls, op, left, right):
        """在 op 下组合 left 与 right，返回同一形式的新结果"""

    @property
    @abstractmethod
    def output(self):
        """返回给调用者的最终值"""

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.output == other.output

    def __hash__(self):
        return hash((type(self), self.output))

    def __repr__(self):
        return f"{type(self).__name__}({self.output!r})"


def _check_binary(op):
    if op.is_paren:
        raise AssertionError(f"Parenthesis '{op.char}' cannot be applied as a binary operator")


class NumericResult(Result):
    """数值结果，遵循 IEEE 浮点语义（除零得 inf/nan，不抛异常）"""

    notation = 'value'

    def __init__(self, value):
        self.value = np.float64(value)

    @classmethod
    def from_literal(cls, value):
        return cls(value)

    @classmethod
    def combine(cls, op, left, right):
        _check_binary(op)
        x, y = left.value, right.value
        with np.errstate(all='ignore'):
            if op == Operator.ADD:
                result = np.add(x, y)
            elif op == Operator.SUB:
                result = np.subtract(x, y)
            elif op == Operator.MUL:
                result = np.multiply(x, y)
            elif op == Operator.DIV:
                result = np.divide(x, y)
            else:
                result = np.power(x, y)
        return cls(result)

    @property
    def output(self):
        return float(self.value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        # nan 与自身相等，方便比较
        if np.isnan(self.value) and np.isnan(other.value):
            return True
        return self.value == other.value

    __hash__ = Result.__hash__


class _TextResult(Result):

    def __init__(self, text):
        self.text = text

    @classmethod
    def from_literal(cls, value):
        return cls(format_literal(value))

    @property
    def output(self):
        return self.text


class PrefixResult(_TextResult):
    """前缀表示：(<op> <left> <right>)"""

    notation = 'prefix'

    @classmethod
    def combine(cls, op, left, right):
        _check_binary(op)
        return cls(f"({op.char} {left.text} {right.text})")


class PostfixResult(_TextResult):
    """后缀表示：(<left> <right> <op>)"""

    notation = 'postfix'

    @classmethod
    def combine(cls, op, left, right):
        _check_binary(op)
        return cls(f"({left.text} {right.text} {op.char})")


RESULT_TYPES = {
    NumericResult.notation: NumericResult,
    PrefixResult.notation: PrefixResult,
    PostfixResult.notation: PostfixResult,
}


def get_result_type(notation):
    """按名称取结果类型：'value' / 'prefix' / 'postfix'"""
    if notation not in RESULT_TYPES:
        raise ValueError(
            f"Unknown notation '{notation}', expected one of {sorted(RESULT_TYPES)}"
        )
    return RESULT_TYPES[notation]
