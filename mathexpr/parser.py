import logging

from .tokens import TokenType
from .ast_nodes import NumberNode, UnaryOpNode, BinaryOpNode
from .errors import UnexpectedTokenError, MissingParenthesisError

logger = logging.getLogger(__name__)

MISSING_CLOSING_PAREN = "Expected closing parenthesis ')'"
MISSING_CALL_OPENING_PAREN = "The provided expression is malformed! An opening parenthesis is missing!"
MISSING_CALL_CLOSING_PAREN = "The expression provided is malformed! A closing parenthesis is missing!"


class Parser:
    """
    Recursive descent parser, lowest binding first:

        expression := term (('+' | '-') term)*
        term       := factor (('*' | '/' | '%') factor)*
        factor     := '(' expression ')'
                    | number
                    | function '(' expression (',' expression)? ')'
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.index = 0
        self.current = tokens[0]

    def eat(self, type_):
        if self.current.type == type_:
            self.index += 1
            self.current = self.tokens[self.index]
        else:
            raise UnexpectedTokenError(self.current)

    def expect(self, type_, message):
        if self.current.type != type_:
            raise MissingParenthesisError(message)
        self.eat(type_)

    def parse(self):
        result = self.expression()
        if self.current.type != TokenType.EOF:
            raise UnexpectedTokenError(self.current)
        logger.debug("Parsed %d tokens", len(self.tokens) - 1)
        return result

    def expression(self):
        node = self.term()

        while self.current.type in (TokenType.PLUS, TokenType.MINUS):
            op = self.current
            self.eat(op.type)
            node = BinaryOpNode(node, op.text, self.term())

        return node

    def term(self):
        node = self.factor()

        while self.current.type in (TokenType.MUL, TokenType.DIV, TokenType.MOD):
            op = self.current
            self.eat(op.type)
            node = BinaryOpNode(node, op.text, self.factor())

        return node

    def factor(self):
        token = self.current

        if token.type == TokenType.LPAREN:
            self.eat(TokenType.LPAREN)
            expr = self.expression()
            self.expect(TokenType.RPAREN, MISSING_CLOSING_PAREN)
            return expr

        if token.type == TokenType.NUMBER:
            self.eat(TokenType.NUMBER)
            return NumberNode(token.value)

        if token.type == TokenType.FUNCTION:
            name = token.text
            self.eat(TokenType.FUNCTION)
            self.expect(TokenType.LPAREN, MISSING_CALL_OPENING_PAREN)

            argument = self.expression()
            if self.current.type == TokenType.COMMA:
                self.eat(TokenType.COMMA)
                second = self.expression()
                self.expect(TokenType.RPAREN, MISSING_CALL_CLOSING_PAREN)
                return BinaryOpNode(argument, name, second)

            self.expect(TokenType.RPAREN, MISSING_CALL_CLOSING_PAREN)
            return UnaryOpNode(name, argument)

        raise UnexpectedTokenError(token)
