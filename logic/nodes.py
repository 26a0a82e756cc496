# logic/nodes.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Node classes for sentential logic expression trees

"""Node classes for representing sentential logic formulas.

This module defines immutable and hashable node classes used to build tree
representations of propositional formulas. Equality is literal
(node-for-node) equality, and since every node is frozen, subtrees may be
referenced from several trees without any risk of one tree mutating another.

Node Types:
    Constant: Fixed truth value (TRUE / FALSE)
    Variable: Propositional variable named ``[A-Z][0-9]*``
    Not: Negation of a single operand
    Binary: Conjunction, disjunction, conditional or biconditional

All nodes support the visitor design pattern for traversal and transformation.
Traversal, equality and hashing use explicit stacks, so formulas nested far
deeper than the interpreter's recursion limit are handled like any other.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Protocol, Tuple

from .exceptions import VariableNameError
from .operator import Operator

VARIABLE_NAME_PATTERN = r"[A-Z][0-9]*"
_VARIABLE_NAME_RE = re.compile(VARIABLE_NAME_PATTERN)


def is_valid_variable_name(name: str) -> bool:
    return isinstance(name, str) and _VARIABLE_NAME_RE.fullmatch(name) is not None


class Visitor(Protocol):
    """Interface for node visitors implementing the visitor design pattern.

    Visitors are driven bottom-up by ``walk``: the methods for inner nodes
    receive the node together with the results already computed for its
    children.
    """

    def visit_constant(self, n: Constant): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not, operand): ...

    def visit_binary(self, n: Binary, left, right): ...


@dataclass(frozen=True, slots=True, eq=False)
class Expr:
    """Base class for all expression tree nodes."""

    def accept(self, v: Visitor):
        """Run a visitor over the subtree rooted at this node."""
        return walk(self, v)

    def __eq__(self, other):
        if not isinstance(other, Expr):
            return NotImplemented
        return _same_structure(self, other)

    def __hash__(self):
        return hash(tuple(_signature(self)))


@dataclass(frozen=True, slots=True, eq=False)
class Constant(Expr):
    """Fixed truth value.

    Attributes:
        value: The constant's truth value
    """

    value: bool


@dataclass(frozen=True, slots=True, eq=False)
class Variable(Expr):
    """Propositional variable leaf.

    The name is validated on construction; the variable's value lives in the
    owning tree's assignment table, never on the node.

    Attributes:
        name: Identifier such as ``A``, ``B1`` or ``D42``
    """

    name: str

    def __post_init__(self):
        if not is_valid_variable_name(self.name):
            raise VariableNameError(self.name)


@dataclass(frozen=True, slots=True, eq=False)
class Not(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr


@dataclass(frozen=True, slots=True, eq=False)
class Binary(Expr):
    """Binary connective node.

    Attributes:
        op: One of AND, OR, CON, BICON
        left: Left operand (antecedent for CON)
        right: Right operand (consequent for CON)
    """

    op: Operator
    left: Expr
    right: Expr

    def __post_init__(self):
        if self.op.is_unary:
            raise ValueError("Binary nodes cannot carry the NOT operator")


def walk(root: Expr, v: Visitor) -> Any:
    """Fold a tree bottom-up with a visitor.

    Children are visited left before right, and each child before its
    parent. A node object reached more than once (a shared subtree) is
    visited once and its result reused.

    Returns:
        The visitor's result for ``root``
    """
    results: Dict[int, Any] = {}
    stack: List[Tuple[Expr, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        key = id(node)
        if key in results:
            continue

        if isinstance(node, Not):
            if not expanded:
                stack.append((node, True))
                stack.append((node.operand, False))
                continue
            results[key] = v.visit_not(node, results[id(node.operand)])
        elif isinstance(node, Binary):
            if not expanded:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue
            results[key] = v.visit_binary(node, results[id(node.left)], results[id(node.right)])
        elif isinstance(node, Variable):
            results[key] = v.visit_variable(node)
        else:
            results[key] = v.visit_constant(node)
    return results[id(root)]


def _same_structure(first: Expr, second: Expr) -> bool:
    stack: List[Tuple[Expr, Expr]] = [(first, second)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Binary):
            if a.op is not b.op:
                return False
            stack.append((a.right, b.right))
            stack.append((a.left, b.left))
        elif isinstance(a, Not):
            stack.append((a.operand, b.operand))
        elif isinstance(a, Variable):
            if a.name != b.name:
                return False
        elif a.value != b.value:
            return False
    return True


def _signature(root: Expr) -> Iterator[object]:
    """Yield a pre-order description of the tree; equal trees yield equal sequences."""
    stack: List[Expr] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Binary):
            yield node.op
            stack.append(node.right)
            stack.append(node.left)
        elif isinstance(node, Not):
            yield Operator.NOT
            stack.append(node.operand)
        elif isinstance(node, Variable):
            yield node.name
        else:
            yield node.value


def free_variables(root: Expr) -> List[str]:
    """Return distinct variable names in first-occurrence order.

    Traversal is depth-first, left operand before right operand, so the
    order matches a left-to-right reading of the infix formula.
    """
    seen: Dict[str, None] = {}
    stack: List[Expr] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Variable):
            seen.setdefault(node.name, None)
        elif isinstance(node, Not):
            stack.append(node.operand)
        elif isinstance(node, Binary):
            stack.append(node.right)
            stack.append(node.left)
    return list(seen)


def contains_operator(root: Expr, op: Operator) -> bool:
    """Check whether any node of the tree uses the given connective."""
    stack: List[Expr] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Not):
            if op is Operator.NOT:
                return True
            stack.append(node.operand)
        elif isinstance(node, Binary):
            if node.op is op:
                return True
            stack.extend((node.left, node.right))
    return False
