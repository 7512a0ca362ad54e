"""
Standard Calculator Expressions

Evaluates what the keypad produces: numbers, + - * / %, unary signs
and parentheses. The expression is parsed with `ast` and walked node
by node; nothing is ever passed to eval().
"""

import ast
import math
import operator
from typing import Optional

from calcsuite.models.calculation import ExpressionResult


# Keypad glyphs and their Python operators
_GLYPHS = {
    "×": "*",
    "÷": "/",
    "−": "-",
}

_BINARY_OPERATORS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: operator.mod,
}

_UNARY_OPERATORS = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

MAX_EXPRESSION_LENGTH = 256


class _UnsupportedExpression(Exception):
    pass


def normalize_expression(expression: str) -> str:
    for glyph, symbol in _GLYPHS.items():
        expression = expression.replace(glyph, symbol)
    return expression.strip()


def evaluate_expression(expression: str) -> Optional[ExpressionResult]:
    """
    Evaluate a keypad expression.

    Returns None for an empty, malformed or unsupported expression,
    a division by zero, or a non-finite result.
    """
    source = normalize_expression(expression or "")
    if not source or len(source) > MAX_EXPRESSION_LENGTH:
        return None

    try:
        tree = ast.parse(source, mode="eval")
        value = _evaluate(tree.body)
    except (SyntaxError, ZeroDivisionError, OverflowError, _UnsupportedExpression):
        return None

    if not math.isfinite(value):
        return None
    return ExpressionResult(expression=source, value=value)


def _evaluate(node: ast.AST) -> float:
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise _UnsupportedExpression(repr(node.value))
        return float(node.value)

    if isinstance(node, ast.BinOp):
        op = _BINARY_OPERATORS.get(type(node.op))
        if op is None:
            raise _UnsupportedExpression(type(node.op).__name__)
        return op(_evaluate(node.left), _evaluate(node.right))

    if isinstance(node, ast.UnaryOp):
        op = _UNARY_OPERATORS.get(type(node.op))
        if op is None:
            raise _UnsupportedExpression(type(node.op).__name__)
        return op(_evaluate(node.operand))

    raise _UnsupportedExpression(type(node).__name__)
