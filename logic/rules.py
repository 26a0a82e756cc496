# logic/rules.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Structural rewrite rules of sentential logic

"""Tree-to-tree rewrite rules.

Every function in this module takes a root node and returns the root of the
rewritten tree; the input is never modified. Rules come in two shapes:

* Global rules (material equivalence, implication, double negation) rewrite
  every matching node found by a bottom-up traversal.
* Root rules (De Morgan, negated conditional) inspect only the main
  connective and hand the tree back unchanged when it does not match, so
  that callers can chain rules without checking applicability first.

All rules preserve logical equivalence except ``deny``, which produces the
complement of the formula.
"""

from __future__ import annotations
from typing import Tuple

from . import nodes as ast
from .operator import Operator


class Transformer(ast.Visitor):
    """Base visitor that rebuilds a tree bottom-up.

    Subclasses override the visit methods for the nodes they rewrite; each
    receives the node and its already rewritten children. Nodes whose
    children come back unchanged are reused as-is, and a subtree shared by
    several parents is rewritten once.
    """

    def transform(self, root: ast.Expr) -> ast.Expr:
        return root.accept(self)

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return n

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return n

    def visit_not(self, n: ast.Not, operand: ast.Expr) -> ast.Expr:
        if operand is n.operand:
            return n
        return ast.Not(operand)

    def visit_binary(self, n: ast.Binary, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        if left is n.left and right is n.right:
            return n
        return ast.Binary(n.op, left, right)


class MaterialEquivalence(Transformer):
    """A <-> B  =>  (A -> B) & (B -> A), at every biconditional."""

    def visit_binary(self, n: ast.Binary, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        if n.op is not Operator.BICON:
            return super().visit_binary(n, left, right)
        return ast.Binary(
            Operator.AND,
            ast.Binary(Operator.CON, left, right),
            ast.Binary(Operator.CON, right, left),
        )


class MonotoneMaterialEquivalence(Transformer):
    """A <-> B  =>  (A & B) v (~A & ~B), at every biconditional."""

    def visit_binary(self, n: ast.Binary, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        if n.op is not Operator.BICON:
            return super().visit_binary(n, left, right)
        return ast.Binary(
            Operator.OR,
            ast.Binary(Operator.AND, left, right),
            ast.Binary(Operator.AND, ast.Not(left), ast.Not(right)),
        )


class Implication(Transformer):
    """A -> B  =>  ~A v B, at every conditional."""

    def visit_binary(self, n: ast.Binary, left: ast.Expr, right: ast.Expr) -> ast.Expr:
        if n.op is not Operator.CON:
            return super().visit_binary(n, left, right)
        return ast.Binary(Operator.OR, ast.Not(left), right)


class DoubleNegation(Transformer):
    """~~A  =>  A, everywhere."""

    def visit_not(self, n: ast.Not, operand: ast.Expr) -> ast.Expr:
        if isinstance(operand, ast.Not):
            return operand.operand
        return super().visit_not(n, operand)


def mat_eq(root: ast.Expr) -> ast.Expr:
    if not ast.contains_operator(root, Operator.BICON):
        return root
    return MaterialEquivalence().transform(root)


def mat_eq_mono(root: ast.Expr) -> ast.Expr:
    if not ast.contains_operator(root, Operator.BICON):
        return root
    return MonotoneMaterialEquivalence().transform(root)


def implication(root: ast.Expr) -> ast.Expr:
    if not ast.contains_operator(root, Operator.CON):
        return root
    return Implication().transform(root)


def double_negation(root: ast.Expr) -> ast.Expr:
    return DoubleNegation().transform(root)


def demorgans(root: ast.Expr) -> ast.Expr:
    """De Morgan's law on the main connective.

    ~(A & B)  =>  ~A v ~B
    ~(A v B)  =>  ~A & ~B

    Any other root is returned unchanged.
    """
    if not isinstance(root, ast.Not):
        return root
    inner = root.operand
    if not isinstance(inner, ast.Binary) or inner.op not in (Operator.AND, Operator.OR):
        return root
    return ast.Binary(inner.op.dual(), ast.Not(inner.left), ast.Not(inner.right))


def ncon(root: ast.Expr) -> ast.Expr:
    """Negated conditional on the main connective.

    ~(A -> B)  =>  A & ~B

    Any other root is returned unchanged.
    """
    if not isinstance(root, ast.Not):
        return root
    inner = root.operand
    if not isinstance(inner, ast.Binary) or inner.op is not Operator.CON:
        return root
    return ast.Binary(Operator.AND, inner.left, ast.Not(inner.right))


def deny(root: ast.Expr) -> ast.Expr:
    """Negate the whole formula. Not equivalence-preserving."""
    return ast.Not(root)


def monotenize(root: ast.Expr) -> ast.Expr:
    """Rewrite into conjunctions and disjunctions with negation only on leaves.

    Conditionals are removed with implication / negated conditional,
    biconditionals with monotone material equivalence, and negations are
    pushed inward with De Morgan's law and double negation.
    """
    positive, _ = NegationNormalForm().transform(root)
    return positive


class NegationNormalForm(ast.Visitor):
    """Computes, for every node, the normal form of the node and of its negation.

    Results are ``(positive, negated)`` pairs, so a negation only has to swap
    the pair of its operand.
    """

    def transform(self, root: ast.Expr) -> Tuple[ast.Expr, ast.Expr]:
        return root.accept(self)

    def visit_constant(self, n: ast.Constant) -> Tuple[ast.Expr, ast.Expr]:
        return n, ast.Not(n)

    def visit_variable(self, n: ast.Variable) -> Tuple[ast.Expr, ast.Expr]:
        return n, ast.Not(n)

    def visit_not(self, n: ast.Not, operand) -> Tuple[ast.Expr, ast.Expr]:
        positive, negated = operand
        return negated, positive

    def visit_binary(self, n: ast.Binary, left, right) -> Tuple[ast.Expr, ast.Expr]:
        left_pos, left_neg = left
        right_pos, right_neg = right

        if n.op in (Operator.AND, Operator.OR):
            return (
                ast.Binary(n.op, left_pos, right_pos),
                ast.Binary(n.op.dual(), left_neg, right_neg),
            )

        if n.op is Operator.CON:
            return (
                ast.Binary(Operator.OR, left_neg, right_pos),
                ast.Binary(Operator.AND, left_pos, right_neg),
            )

        # Biconditional: (A & B) v (~A & ~B), or (A & ~B) v (~A & B) when negated
        return (
            ast.Binary(
                Operator.OR,
                ast.Binary(Operator.AND, left_pos, right_pos),
                ast.Binary(Operator.AND, left_neg, right_neg),
            ),
            ast.Binary(
                Operator.OR,
                ast.Binary(Operator.AND, left_pos, right_neg),
                ast.Binary(Operator.AND, left_neg, right_pos),
            ),
        )
