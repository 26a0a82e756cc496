# logic/evaluator.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Truth-value evaluation of expression trees

"""Reduces an expression tree to a single truth value.

The evaluator never mutates the tree. Variable values are looked up in a
mapping supplied by the caller: the tree's own assignment table for
``ExpressionTree.evaluate`` or an ad-hoc mapping for ``evaluate_with_vars``
and for exhaustive enumeration.
"""

from __future__ import annotations
from typing import Mapping, Optional

from . import nodes as ast
from .exceptions import UnassignedVariableError


class Evaluator(ast.Visitor):
    """Visitor computing the truth value of a tree under an assignment.

    Attributes:
        _values: Variable name to truth value; ``None`` or absent means unassigned
    """

    def __init__(self, values: Mapping[str, Optional[bool]]):
        self._values = values

    def evaluate(self, root: ast.Expr) -> bool:
        """Evaluate the tree rooted at ``root``.

        Operands are evaluated left to right, so the error names the first
        unassigned variable in reading order.

        Raises:
            UnassignedVariableError: A reachable variable has no value
        """
        return root.accept(self)

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_variable(self, n: ast.Variable) -> bool:
        value = self._values.get(n.name)
        if value is None:
            raise UnassignedVariableError(n.name)
        return bool(value)

    def visit_not(self, n: ast.Not, operand: bool) -> bool:
        return not operand

    def visit_binary(self, n: ast.Binary, left: bool, right: bool) -> bool:
        # No short-circuiting: both operands were already evaluated.
        return n.op.apply(left, right)


def evaluate(root: ast.Expr, values: Mapping[str, Optional[bool]]) -> bool:
    """Convenience wrapper around ``Evaluator``."""
    return Evaluator(values).evaluate(root)
