# logic/substitution.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Variable and subtree substitution

"""Substitution of variables and subtrees.

Replacements are spliced in as-is and never rescanned, so a replacement that
mentions the variable being replaced does not loop. No simplification is
performed afterwards.
"""

from __future__ import annotations
from typing import Mapping

from . import nodes as ast
from .rules import Transformer


class VariableReplacer(Transformer):
    """Replaces every variable leaf whose name is in ``replacements``.

    All names are substituted simultaneously: ``{A: B, B: A}`` swaps the
    two variables.
    """

    def __init__(self, replacements: Mapping[str, ast.Expr]):
        self._replacements = dict(replacements)

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return self._replacements.get(n.name, n)


class ExpressionReplacer(Transformer):
    """Replacement of every subtree literally equal to ``old``.

    Matching is decided on the subtrees of the input, so a matched subtree
    is swapped out whole and whatever was rebuilt beneath it is discarded.
    """

    def __init__(self, old: ast.Expr, new: ast.Expr):
        self._old = old
        self._new = new

    def _match(self, node: ast.Expr, rebuilt: ast.Expr) -> ast.Expr:
        return self._new if node == self._old else rebuilt

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return self._match(n, n)

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return self._match(n, n)

    def visit_not(self, n: ast.Not, operand: ast.Expr) -> ast.Expr:
        return self._match(n, super().visit_not(n, operand))

    def visit_binary(self, n: ast.Binary, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        return self._match(n, super().visit_binary(n, left, right))


def replace_variables(root: ast.Expr, replacements: Mapping[str, ast.Expr]) -> ast.Expr:
    if not replacements:
        return root
    return VariableReplacer(replacements).transform(root)


def replace_expression(root: ast.Expr, old: ast.Expr, new: ast.Expr) -> ast.Expr:
    return ExpressionReplacer(old, new).transform(root)
