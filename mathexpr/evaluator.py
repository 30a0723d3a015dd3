import math

from .ast_nodes import NumberNode, UnaryOpNode, BinaryOpNode
from .functions import SUPPORTED_FUNCTIONS, NAN, INF
from .errors import ExpressionError, UnsupportedFunctionError, UnsupportedOperatorError


def _divide(left, right):
    # IEEE results instead of ZeroDivisionError, so bad input stays a NaN/inf
    if right == 0:
        if left == 0 or left != left:
            return NAN
        return math.copysign(1, left) * math.copysign(INF, right)
    return left / right


def _modulo(left, right):
    # truncated remainder, the result takes the dividend's sign
    if right == 0 or math.isinf(left):
        return NAN
    return math.fmod(left, right)


OPERATORS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
    "%": _modulo,
}


class Evaluator:
    def __init__(self, functions=None):
        self.functions = SUPPORTED_FUNCTIONS if functions is None else functions

    def eval(self, node):
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, UnaryOpNode):
            return self.call(node.op, [self.eval(node.operand)])

        if isinstance(node, BinaryOpNode):
            if node.op in OPERATORS:
                return self.eval_chain(node)

            left = self.eval(node.left)
            right = self.eval(node.right)
            if node.op in SUPPORTED_FUNCTIONS or node.op in self.functions:
                return self.call(node.op, [left, right])

            raise UnsupportedOperatorError(node.op)

        raise ExpressionError("Invalid AST node")

    def eval_chain(self, node):
        """Operator chains are left-deep, so walk the left spine without recursing."""
        spine = []
        while isinstance(node, BinaryOpNode) and node.op in OPERATORS:
            spine.append(node)
            node = node.left

        result = self.eval(node)
        for parent in reversed(spine):
            result = float(OPERATORS[parent.op](result, self.eval(parent.right)))
        return result

    def call(self, name, args):
        if name not in self.functions:
            raise UnsupportedFunctionError(name)

        arity, func = self.functions[name]
        if len(args) != arity:
            raise UnsupportedFunctionError(name)
        try:
            return float(func(*args))
        except (TypeError, ValueError, ArithmeticError) as e:
            raise UnsupportedFunctionError(name) from e
