import pytest

from mathexpr.ast_nodes import NumberNode, UnaryOpNode, BinaryOpNode
from mathexpr.errors import MissingParenthesisError, UnexpectedTokenError
from mathexpr.parser import Parser
from mathexpr.tokenizer import Tokenizer


def parse(expression):
    return Parser(Tokenizer(expression).generate_tokens()).parse()


def test_number_leaf():
    node = parse("42")
    assert isinstance(node, NumberNode)
    assert node.value == 42.0


def test_multiplication_binds_tighter_than_addition():
    node = parse("2 + 3 * 4")
    assert isinstance(node, BinaryOpNode)
    assert node.op == "+"
    assert node.left.value == 2.0
    assert node.right.op == "*"


def test_parentheses_override_precedence():
    node = parse("(2 + 3) * 4")
    assert node.op == "*"
    assert node.left.op == "+"


def test_operators_are_left_associative():
    node = parse("10 - 2 - 3")
    assert node.op == "-"
    assert isinstance(node.left, BinaryOpNode)
    assert node.left.op == "-"
    assert node.right.value == 3.0

    node = parse("20 / 2 % 3")
    assert node.op == "%"
    assert node.left.op == "/"


def test_single_argument_call_is_unary():
    node = parse("sqrt(9)")
    assert isinstance(node, UnaryOpNode)
    assert node.op == "sqrt"
    assert node.operand.value == 9.0


def test_two_argument_call_is_binary_for_any_function():
    node = parse("pow(2, 3 + 1)")
    assert isinstance(node, BinaryOpNode)
    assert node.op == "pow"
    assert node.right.op == "+"

    node = parse("sin(1, 2)")
    assert isinstance(node, BinaryOpNode)
    assert node.op == "sin"


def test_missing_closing_parenthesis():
    with pytest.raises(MissingParenthesisError, match=r"Expected closing parenthesis '\)'"):
        parse("(2 + 3")


def test_missing_opening_parenthesis_after_function():
    with pytest.raises(MissingParenthesisError, match="opening parenthesis is missing"):
        parse("sqrt 9")


@pytest.mark.parametrize("expression", ["sqrt(9", "pow(2, 3", "cos(1 2)"])
def test_missing_closing_parenthesis_after_call(expression):
    with pytest.raises(MissingParenthesisError, match="closing parenthesis is missing"):
        parse(expression)


def test_unknown_name_is_unexpected_token():
    with pytest.raises(UnexpectedTokenError, match="Unexpected token: foo") as info:
        parse("foo(1)")
    assert info.value.token.text == "foo"


def test_trailing_tokens_are_rejected():
    with pytest.raises(UnexpectedTokenError, match="Unexpected token: 2"):
        parse("1 + 1 2")


def test_caret_is_rejected():
    with pytest.raises(UnexpectedTokenError, match=r"Unexpected token: \^"):
        parse("2 ^ 3")


@pytest.mark.parametrize("expression", ["", "2 +", "(", "pow(2,"])
def test_premature_end_of_input(expression):
    with pytest.raises(UnexpectedTokenError, match="end of input"):
        parse(expression)


def test_leading_minus_is_not_a_factor():
    with pytest.raises(UnexpectedTokenError, match="Unexpected token: -"):
        parse("-5")
