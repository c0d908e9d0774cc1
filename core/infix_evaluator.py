"""中缀表达式求值器 - 操作数栈 + 操作符栈的归约算法"""
import logging

from core.errors import (
    InsufficientOperandsError,
    TooManyLeftParenError,
    TooManyRightParenError,
)
from core.operators import NumericResult, get_result_type
from core.token_system import Operator, Tokenizer

logger = logging.getLogger(__name__)


class Calculator:
    """
    可重复使用的中缀表达式求值器。

    操作符栈初始只有一个哨兵 (，代表整个表达式的外层边界；
    输入结束时相当于补上与之匹配的 )。求值成功后哨兵会被放回，
    实例可以直接再用；出错后栈状态不确定，必须先调用 reset()。
    """

    def __init__(self, result_type=NumericResult):
        self.result_type = result_type
        self.operand_stack = []
        self.operator_stack = [Operator.LEFT_PAREN]

    @property
    def notation(self):
        return self.result_type.notation

    def reset(self):
        """清空两个栈并重新放入哨兵"""
        self.operand_stack.clear()
        self.operator_stack.clear()
        self.operator_stack.append(Operator.LEFT_PAREN)

    def evaluate(self, text):
        """
        Args:
            text: 中缀表达式，如 "1*2+3/1-2^2"
        Returns:
            float（value）或 str（prefix/postfix）
        Raises:
            CalculatorError 的子类
        """
        logger.debug(f"Evaluating {text!r} as {self.notation}")
        tokenizer = Tokenizer(text)
        token = tokenizer.next_token()
        while token is not None:
            self.process_token(token)
            token = tokenizer.next_token()

        # 输入结束，相当于哨兵的右括号
        self.reduce_until_left_paren()

        if self.operator_stack:
            raise TooManyLeftParenError()
        if len(self.operand_stack) != 1:
            raise AssertionError(
                f"Expected exactly one operand after evaluation, found {len(self.operand_stack)}"
            )

        result = self.operand_stack.pop()
        self.operator_stack.append(Operator.LEFT_PAREN)
        return result.output

    def process_token(self, token):
        if token.is_operand:
            self.operand_stack.append(self.result_type.from_literal(token.value))
        else:
            self.process_operator(token.value)

    def process_operator(self, op):
        if not self.operator_stack:
            raise TooManyRightParenError()
        top = self.operator_stack[-1]

        if op == Operator.RIGHT_PAREN:
            self.reduce_until_left_paren()
        elif op.out_priority > top.in_priority:
            self.operator_stack.append(op)
        elif op.out_priority < top.in_priority:
            # 归约会把当前分组的 ( 一起弹出，分组的 ) 还没到，要补回去
            self.reduce_until_left_paren()
            self.operator_stack.append(Operator.LEFT_PAREN)
            self.operator_stack.append(op)
        else:
            # 同优先级，左结合
            self.reduce_once()
            self.operator_stack.append(op)

    def reduce_once(self):
        """
        弹出一个操作符并归约

        Returns:
            True 表示弹出的是 (，即已到达分组边界
        """
        if not self.operator_stack:
            raise TooManyRightParenError()
        op = self.operator_stack.pop()
        if op == Operator.LEFT_PAREN:
            return True

        if len(self.operand_stack) < 2:
            raise InsufficientOperandsError(op.char)
        right = self.operand_stack.pop()
        left = self.operand_stack.pop()
        result = self.result_type.combine(op, left, right)
        logger.debug(f"Reduced {left!r} {op.char} {right!r} -> {result!r}")
        self.operand_stack.append(result)
        return False

    def reduce_until_left_paren(self):
        while not self.reduce_once():
            pass


def evaluate(text, notation='value'):
    """用新的 Calculator 求值一次"""
    return Calculator(get_result_type(notation)).evaluate(text)
