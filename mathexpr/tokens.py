from enum import Enum, auto

class TokenType(Enum):
    NUMBER = auto()
    FUNCTION = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    CARET = auto()
    UNKNOWN = auto()
    EOF = auto()

SYMBOLS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    ',': TokenType.COMMA,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MUL,
    '/': TokenType.DIV,
    '%': TokenType.MOD,
    '^': TokenType.CARET,
}

class Token:
    def __init__(self, type_, text='', value=None):
        self.type = type_
        self.text = text
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text, self.value) == (other.type, other.text, other.value)

    def __repr__(self):
        return f"Token({self.type}, {self.text!r})"
