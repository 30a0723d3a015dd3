class ExpressionError(Exception):
    """Base class for everything the evaluator raises."""


class ExpressionSyntaxError(ExpressionError):
    pass


class UnexpectedTokenError(ExpressionSyntaxError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Unexpected token: {token.text or 'end of input'}")


class MissingParenthesisError(ExpressionSyntaxError):
    pass


class UnsupportedFunctionError(ExpressionError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unsupported function: {name}")


class UnsupportedOperatorError(ExpressionError):
    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"Unsupported operator: {operator}")


class ExpressionTooDeepError(ExpressionError):
    def __init__(self):
        super().__init__("Expression is nested too deeply")
