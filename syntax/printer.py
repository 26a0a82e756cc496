# syntax/printer.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Rendering expression trees back to text

"""Renders expression trees as infix or prefix strings under a notation.

Infix output parenthesizes every binary node, so reading it back never
depends on operator precedence and ``parse(infix(t, n), n)`` rebuilds ``t``
exactly. Tokens containing letters (``v``, ``and``, ``implies``) are set off
by spaces so they stay readable next to variable names.
"""

from typing import Optional

from logic import nodes as ast
from logic.operator import Operator
from .notation import OperatorNotation

TRUE_LITERAL = "TRUE"
FALSE_LITERAL = "FALSE"


def _is_wordlike(token: str) -> bool:
    return any(ch.isalpha() for ch in token)


class InfixPrinter(ast.Visitor):
    """Fully parenthesized infix rendering."""

    def __init__(self, notation: OperatorNotation):
        self._notation = notation

    def render(self, root: ast.Expr) -> str:
        return root.accept(self)

    def visit_constant(self, n: ast.Constant) -> str:
        return TRUE_LITERAL if n.value else FALSE_LITERAL

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_not(self, n: ast.Not, operand: str) -> str:
        token = self._notation.get(Operator.NOT)
        sep = " " if _is_wordlike(token) else ""
        return f"{token}{sep}{operand}"

    def visit_binary(self, n: ast.Binary, left: str, right: str) -> str:
        token = self._notation.get(n.op)
        if _is_wordlike(token):
            token = f" {token} "
        return f"({left}{token}{right})"


class PrefixPrinter(ast.Visitor):
    """Polish notation: every operator precedes its operands, space separated."""

    def __init__(self, notation: OperatorNotation):
        self._notation = notation

    def render(self, root: ast.Expr) -> str:
        return root.accept(self)

    def visit_constant(self, n: ast.Constant) -> str:
        return TRUE_LITERAL if n.value else FALSE_LITERAL

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_not(self, n: ast.Not, operand: str) -> str:
        return f"{self._notation.get(Operator.NOT)} {operand}"

    def visit_binary(self, n: ast.Binary, left: str, right: str) -> str:
        return f"{self._notation.get(n.op)} {left} {right}"


def infix(root: ast.Expr, notation: Optional[OperatorNotation] = None) -> str:
    return InfixPrinter(notation or OperatorNotation.default()).render(root)


def prefix(root: ast.Expr, notation: Optional[OperatorNotation] = None) -> str:
    return PrefixPrinter(notation or OperatorNotation.default()).render(root)
