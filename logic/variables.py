# logic/variables.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Named variable handles for composing formulas in code

"""
Convenience handles for building formulas from Python expressions.

An ``ExpressionVar`` remembers a validated variable name and hands out a
fresh single-variable tree whenever one is needed, so the same handle can
appear many times in one formula:

    >>> a, b = ExpressionVar("A"), ExpressionVar("B")
    >>> ((~a | b) >> a).infix()
    '((~A v B)->A)'

``ExpressionVars`` is an indexed family of such handles sharing a prefix
(``A1``, ``A2``, ``A3``...).
"""

from __future__ import annotations
from typing import Iterator, List, Union

from .nodes import Variable
from .tree import ExpressionTree

Operand = Union["ExpressionVar", ExpressionTree]


def _as_tree(operand):
    if isinstance(operand, ExpressionVar):
        return operand.tree()
    if isinstance(operand, ExpressionTree):
        return operand
    return NotImplemented


class ExpressionVar:
    """A single named variable."""

    __slots__ = ("_node",)

    def __init__(self, name: str):
        """
        Raises:
            VariableNameError: ``name`` does not match ``[A-Z][0-9]*``
        """
        self._node = Variable(name)

    @property
    def name(self) -> str:
        return self._node.name

    def tree(self) -> ExpressionTree:
        return ExpressionTree(self._node)

    def _binary(self, other, method: str, reflected: bool = False):
        other_tree = _as_tree(other)
        if other_tree is NotImplemented:
            return NotImplemented
        left, right = (other_tree, self.tree()) if reflected else (self.tree(), other_tree)
        return getattr(left, method)(right)

    def __invert__(self) -> ExpressionTree:
        return ~self.tree()

    def __and__(self, other):
        return self._binary(other, "__and__")

    def __rand__(self, other):
        return self._binary(other, "__and__", reflected=True)

    def __or__(self, other):
        return self._binary(other, "__or__")

    def __ror__(self, other):
        return self._binary(other, "__or__", reflected=True)

    def __rshift__(self, other):
        return self._binary(other, "__rshift__")

    def __rrshift__(self, other):
        return self._binary(other, "__rshift__", reflected=True)

    def __lshift__(self, other):
        return self._binary(other, "__lshift__")

    def __rlshift__(self, other):
        return self._binary(other, "__lshift__", reflected=True)

    def __xor__(self, other):
        return self._binary(other, "__xor__")

    def __rxor__(self, other):
        return self._binary(other, "__xor__", reflected=True)

    def bicon(self, other: Operand) -> ExpressionTree:
        return self.tree().bicon(_as_tree(other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionVar):
            return NotImplemented
        return self._node == other._node

    def __hash__(self) -> int:
        return hash(self._node)

    def __repr__(self) -> str:
        return f"ExpressionVar({self.name!r})"


class ExpressionVars:
    """Indexed family of variables named ``<prefix><index>``.

    The prefix must be a single uppercase letter and the index range must
    be non-empty and non-negative. Position ``i`` of the family holds the
    variable for ``indices[i]``.
    """

    def __init__(self, prefix: str, indices: range):
        if len(indices) == 0:
            raise ValueError(f"Index range {indices!r} is empty")
        if min(indices) < 0:
            raise ValueError(f"Index range {indices!r} contains negative indices")
        self._vars: List[ExpressionVar] = [ExpressionVar(f"{prefix}{i}") for i in indices]

    def __len__(self) -> int:
        return len(self._vars)

    def __getitem__(self, position: int) -> ExpressionVar:
        return self._vars[position]

    def __iter__(self) -> Iterator[ExpressionVar]:
        return iter(self._vars)

    def names(self) -> List[str]:
        return [var.name for var in self._vars]
