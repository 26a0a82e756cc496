# logic/__init__.py

"""Sentential logic expression trees.

This package provides:
  • ExpressionTree: formula with its own variable assignments, rewrite
    rules, substitution, evaluation, exhaustive analysis and comparison
  • Operator: the five connectives and their truth tables
  • ExpressionVar / ExpressionVars: named handles for composing formulas
  • VariableNameError, UnassignedVariableError, AnalysisLimitError
"""

from .operator import Operator
from .nodes import Binary, Constant, Expr, Not, Variable
from .exceptions import AnalysisLimitError, UnassignedVariableError, VariableNameError
from .tree import ExpressionTree
from .variables import ExpressionVar, ExpressionVars

__all__ = [
    "ExpressionTree",
    "ExpressionVar",
    "ExpressionVars",
    "Operator",
    "Expr",
    "Constant",
    "Variable",
    "Not",
    "Binary",
    "VariableNameError",
    "UnassignedVariableError",
    "AnalysisLimitError",
]
