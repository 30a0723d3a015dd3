"""
Pipeline entry point: expression text in, number out.
"""
import logging

from .tokenizer import Tokenizer
from .parser import Parser
from .evaluator import Evaluator
from .errors import ExpressionTooDeepError

logger = logging.getLogger(__name__)


def evaluate(expression: str) -> float:
    """
    Tokenize, parse and evaluate a single arithmetic expression.

    Args:
        expression: The raw expression text, e.g. "pow(2, 3) + sqrt(9)"

    Returns:
        The numeric result. Domain problems such as acos(2) give NaN
        rather than an error.

    Raises:
        ExpressionError: If the expression is malformed or uses an
            unsupported function or operator, or is nested
            too deeply to walk.
    """
    tokens = Tokenizer(expression).generate_tokens()
    logger.debug("Tokenized expression into %d tokens", len(tokens) - 1)
    try:
        ast = Parser(tokens).parse()
        return Evaluator().eval(ast)
    except RecursionError as e:
        raise ExpressionTooDeepError() from e
