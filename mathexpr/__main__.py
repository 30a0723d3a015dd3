"""
Command-line wrapper: read one expression, print one result.
"""
import argparse
import logging
import sys

from .errors import ExpressionError
from .utils import evaluate

PROMPT = "Enter your math expression: "


def format_result(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return str(value)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="mathexpr", description="Evaluate an arithmetic expression.")
    parser.add_argument("expression", nargs="?", help="expression to evaluate; prompts when omitted")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each pipeline stage")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    expression = args.expression
    if expression is None:
        try:
            expression = input(PROMPT)
        except EOFError:
            expression = ""

    try:
        result = evaluate(expression)
    except ExpressionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
