import re

from .tokens import Token, TokenType, SYMBOLS
from .functions import SUPPORTED_FUNCTIONS

NUMBER_RE = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")

_function_names = "|".join(
    re.escape(name) for name in sorted(SUPPORTED_FUNCTIONS, key=len, reverse=True)
)
# whitespace separates, symbols and whole-word function names are kept
SPLIT_RE = re.compile(
    r"\s+|([" + re.escape("".join(SYMBOLS)) + r"])|\b(" + _function_names + r")\b"
)


class Tokenizer:
    def __init__(self, text):
        self.text = text or ""

    def split(self):
        """Break the text into raw fragments, dropping whitespace."""
        return [fragment for fragment in SPLIT_RE.split(self.text) if fragment]

    def classify(self, fragment):
        if fragment in SYMBOLS:
            return Token(SYMBOLS[fragment], fragment)
        if fragment in SUPPORTED_FUNCTIONS:
            return Token(TokenType.FUNCTION, fragment)
        if NUMBER_RE.fullmatch(fragment):
            return Token(TokenType.NUMBER, fragment, float(fragment))
        return Token(TokenType.UNKNOWN, fragment)

    def generate_tokens(self):
        tokens = [self.classify(fragment) for fragment in self.split()]
        tokens.append(Token(TokenType.EOF))
        return tokens
