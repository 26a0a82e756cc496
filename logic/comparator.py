# logic/comparator.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Equality relations between formulas

"""
Three ways of comparing two formulas, from strongest to weakest:

  •  literal: identical trees, node for node.
  •  syntactic: logically equal and built from the same variables.
  •  logical: same truth value under every assignment over the union of
     both formulas' variables.

literal ⇒ syntactic ⇒ logical, and neither implication reverses:
``A & B`` / ``B & A`` are syntactically but not literally equal, while
``A v ~A`` / ``B v ~B`` are logically but not syntactically equal.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List

from .analyzer import iter_assignments
from .evaluator import Evaluator

if TYPE_CHECKING:
    from .tree import ExpressionTree


def lit_eq(first: ExpressionTree, second: ExpressionTree) -> bool:
    return first.root == second.root


def log_eq(first: ExpressionTree, second: ExpressionTree) -> bool:
    """
    Compare truth tables over the joint variable universe.
    A variable absent from one formula cannot affect that formula's value.
    """
    universe: Dict[str, None] = dict.fromkeys(first.variables())
    universe.update(dict.fromkeys(second.variables()))
    names: List[str] = list(universe)

    for assignment in iter_assignments(names):
        evaluator = Evaluator(assignment)
        if evaluator.evaluate(first.root) != evaluator.evaluate(second.root):
            return False
    return True


def syn_eq(first: ExpressionTree, second: ExpressionTree) -> bool:
    if set(first.variables()) != set(second.variables()):
        return False
    return log_eq(first, second)
