"""Infix to postfix conversion and integer postfix evaluation."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Iterator, Sequence

_OPERATORS = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_OPERANDS = frozenset(string.ascii_letters + string.digits)


def _precedence(token: str) -> int:
    return _OPERATORS.get(token, 0)


def _shunt(tokens: Iterator[tuple[str, bool]]) -> Iterator[str]:
    """Reorder (token, is_operand) pairs into postfix; all operators are left-associative."""
    pending: list[str] = []
    for token, is_operand in tokens:
        if is_operand:
            yield token
        elif token == "(":
            pending.append(token)
        elif token == ")":
            while pending and pending[-1] != "(":
                yield pending.pop()
            if not pending:
                raise ValueError("unbalanced ')' in expression")
            pending.pop()
        elif token in _OPERATORS:
            while pending and _precedence(pending[-1]) >= _precedence(token):
                yield pending.pop()
            pending.append(token)
    while pending:
        token = pending.pop()
        if token == "(":
            raise ValueError("unbalanced '(' in expression")
        yield token


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are ASCII letters and digits; other characters are ignored.
    """
    tokens = ((char, char in _OPERANDS) for char in infix)
    return "".join(_shunt(tokens))


def _numeric_tokens(infix: str) -> Iterator[tuple[str, bool]]:
    position = 0
    while position < len(infix):
        char = infix[position]
        if char in string.digits:
            end = position
            while end < len(infix) and infix[end] in string.digits:
                end += 1
            yield infix[position:end], True
            position = end
        else:
            yield char, False
            position += 1


def infix_to_numeric_postfix(infix: str) -> str:
    """Convert an infix expression of non-negative integers to space-separated postfix."""
    return " ".join(_shunt(_numeric_tokens(infix)))


def _divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _divide(left, right)
    return left**right if right > 0 else 1


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of non-negative integers with integer arithmetic.

    Division truncates toward zero; a non-positive exponent gives 1.
    """
    operands: list[int] = []
    for token, is_operand in _numeric_tokens(postfix):
        if is_operand:
            operands.append(int(token))
        elif token in _OPERATORS:
            if len(operands) < 2:
                raise ValueError(f"operator {token!r} lacks operands")
            right = operands.pop()
            left = operands.pop()
            operands.append(_apply(token, left, right))
    if len(operands) != 1:
        raise ValueError("malformed postfix expression")
    return operands[0]


def evaluate_infix(infix: str) -> int:
    """Evaluate an infix expression of non-negative integers."""
    return evaluate_postfix(infix_to_numeric_postfix(infix))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the postfix form and the value of an infix expression."""
    parser = argparse.ArgumentParser(
        description="Convert an integer infix expression to postfix and evaluate it."
    )
    parser.add_argument("expression", nargs="*", help="infix expression; read from stdin if omitted")
    args = parser.parse_args(argv)
    if args.expression:
        infix = " ".join(args.expression)
    else:
        print("Enter infix expression: ", end="", flush=True)
        infix = sys.stdin.readline().rstrip("\n")
    try:
        postfix = infix_to_numeric_postfix(infix)
        print(f"Postfix expression: {postfix}")
        result = evaluate_postfix(postfix)
    except (ValueError, ZeroDivisionError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result of evaluation: {result}")
    return 0