"""
Arithmetic expression interpreter.

Parses expressions built from numbers, + - * / %, parentheses and the
functions cos, acos, sin, asin, tan, atan, sqrt and pow into a tree and
evaluates it with a self-contained numeric library.
"""

from .tokenizer import Tokenizer
from .parser import Parser
from .evaluator import Evaluator
from .utils import evaluate
from .errors import (
    ExpressionError,
    ExpressionSyntaxError,
    UnexpectedTokenError,
    MissingParenthesisError,
    UnsupportedFunctionError,
    UnsupportedOperatorError,
    ExpressionTooDeepError,
)

__all__ = [
    'Tokenizer', 'Parser', 'Evaluator', 'evaluate',
    'ExpressionError', 'ExpressionSyntaxError', 'UnexpectedTokenError',
    'MissingParenthesisError', 'UnsupportedFunctionError', 'UnsupportedOperatorError',
    'ExpressionTooDeepError',
]
