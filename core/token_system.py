"""core/token_system.py"""
import re
from enum import Enum

from core.errors import UnknownSymbolError


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'

    @classmethod
    def from_char(cls, ch):
        """字符 -> Operator，不识别时返回 None"""
        return _CHAR_TO_OPERATOR.get(ch)

    @property
    def char(self):
        return self.value

    @property
    def in_priority(self):
        return IN_STACK_PRIORITY[self]

    @property
    def out_priority(self):
        return OUT_STACK_PRIORITY[self]

    @property
    def is_paren(self):
        return self in (Operator.LEFT_PAREN, Operator.RIGHT_PAREN)


# 栈内优先级：操作符已经在操作符栈中时使用
IN_STACK_PRIORITY = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.POW: 3,
    Operator.LEFT_PAREN: 0,  # 任何后来的操作符都能压在 ( 之上
    Operator.RIGHT_PAREN: -1,  # ) 从不入栈
}

# 栈外优先级：操作符刚从输入读入时使用
OUT_STACK_PRIORITY = {
    Operator.ADD: 1,
    Operator.SUB: 1,
    Operator.MUL: 2,
    Operator.DIV: 2,
    Operator.POW: 3,
    Operator.LEFT_PAREN: 99,  # ( 总是直接入栈
    Operator.RIGHT_PAREN: -1,
}

_CHAR_TO_OPERATOR = {op.value: op for op in Operator}
OPERATOR_SYMBOLS = frozenset(_CHAR_TO_OPERATOR)

# 十进制字面量：数字，最多一个小数点
_NUMBER_PATTERN = re.compile(r'[0-9]+(\.[0-9]*)?|\.[0-9]+')


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符（含括号）


class Token:
    def __init__(self, token_type, value):
        self.type = token_type
        self.value = value  # OPERAND: float, OPERATOR: Operator

    @classmethod
    def operand(cls, number):
        return cls(TokenType.OPERAND, float(number))

    @classmethod
    def operator(cls, op):
        return cls(TokenType.OPERATOR, op)

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.type == TokenType.OPERATOR:
            return f"Token(operator, '{self.value.char}')"
        return f"Token(operand, {self.value!r})"


class TokenizerState(Enum):
    EMPTY = "empty"  # 缓冲区为空
    ACCUMULATING = "accumulating"  # 正在累积数字字符
    PENDING_OPERATOR = "pending_operator"  # 数字已输出，终止它的操作符等待下一次拉取


class Tokenizer:
    """
    把输入文本拆成 Token 的拉取式序列。

    数字后紧跟的操作符不能和数字同一次输出：先输出数字，
    操作符暂存在 pending 槽中，下一次 next_token() 再输出。
    每次 iter() 都从头重新扫描，同一文本可以重复切分。
    """

    def __init__(self, text):
        self.text = text
        self.restart()

    def restart(self):
        """回到文本开头，清空缓冲区"""
        self.position = 0
        self.buffer = []
        self.pending = None
        self.state = TokenizerState.EMPTY

    def __iter__(self):
        return iter(Tokenizer(self.text).next_token, None)

    def next_token(self):
        """
        拉取下一个 Token

        Returns:
            Token，输入结束时返回 None
        Raises:
            UnknownSymbolError: 累积的字符无法解析为数字
        """
        if self.state == TokenizerState.PENDING_OPERATOR:
            op = self.pending
            self.pending = None
            self.state = TokenizerState.EMPTY
            return Token.operator(op)

        text = self.text
        while self.position < len(text) and text[self.position].isspace():
            self.position += 1

        while self.position < len(text):
            ch = text[self.position]
            self.position += 1
            op = Operator.from_char(ch)

            if op is None:
                self.buffer.append(ch)
                self.state = TokenizerState.ACCUMULATING
                continue

            if self.state == TokenizerState.ACCUMULATING:
                self.pending = op
                token = self._flush_buffer()
                self.state = TokenizerState.PENDING_OPERATOR
                return token

            return Token.operator(op)

        if self.state == TokenizerState.ACCUMULATING:
            token = self._flush_buffer()
            self.state = TokenizerState.EMPTY
            return token

        return None

    def _flush_buffer(self):
        literal = ''.join(self.buffer).strip()
        self.buffer = []
        if not _NUMBER_PATTERN.fullmatch(literal):
            raise UnknownSymbolError(literal)
        return Token.operand(literal)


def tokenize(text):
    """一次性切分整段文本"""
    return list(Tokenizer(text))
