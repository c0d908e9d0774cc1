"""核心模块 - Token系统、结果类型和中缀求值器"""
from .errors import (
    ErrorKind, CalculatorError, UnknownSymbolError, TooManyRightParenError,
    TooManyLeftParenError, InsufficientOperandsError
)
from .token_system import (
    Operator, IN_STACK_PRIORITY, OUT_STACK_PRIORITY, OPERATOR_SYMBOLS,
    TokenType, Token, TokenizerState, Tokenizer, tokenize
)
from .operators import (
    Result, NumericResult, PrefixResult, PostfixResult,
    RESULT_TYPES, get_result_type
)
from .infix_evaluator import Calculator, evaluate

__all__ = [
    'ErrorKind', 'CalculatorError', 'UnknownSymbolError', 'TooManyRightParenError',
    'TooManyLeftParenError', 'InsufficientOperandsError',
    'Operator', 'IN_STACK_PRIORITY', 'OUT_STACK_PRIORITY', 'OPERATOR_SYMBOLS',
    'TokenType', 'Token', 'TokenizerState', 'Tokenizer', 'tokenize',
    'Result', 'NumericResult', 'PrefixResult', 'PostfixResult',
    'RESULT_TYPES', 'get_result_type',
    'Calculator', 'evaluate'
]
