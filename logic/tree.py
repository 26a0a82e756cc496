# logic/tree.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Expression tree facade: construction, rewriting, evaluation and analysis

"""The ``ExpressionTree`` type.

An expression tree owns an immutable root node and a table of variable
assignments with one entry per distinct free variable, in first-occurrence
order. Rewrite rules, substitutions and assignments change the tree in
place (the root is swapped for a rewritten one) and return the tree itself,
so calls can be chained:

    >>> t = ExpressionTree.parse("~(A <-> B)")
    >>> t.demorgans().mat_eq().implication()

Two trees never share assignments, even when parsed from the same string,
and ``clone()`` produces a fully independent tree.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Tuple

from . import comparator
from . import nodes as ast
from . import rules
from . import substitution
from .analyzer import Assignment, SatisfactionAnalyzer
from .evaluator import Evaluator
from .operator import Operator
from utils.logger import get_logger


class ExpressionTree:
    """Sentential logic formula with its own variable assignments.

    Attributes:
        _root: Root node of the formula
        _values: Free variable name to assigned value (``None`` if unset)
    """

    def __init__(self, root: ast.Expr, values: Optional[Mapping[str, Optional[bool]]] = None):
        self._root = root
        self._values: Dict[str, Optional[bool]] = {}
        self._rebuild_values(values or {})

    # Construction

    @classmethod
    def parse(cls, source: str, notation=None) -> ExpressionTree:
        """Parse ``source`` written in ``notation`` (default notation if ``None``).

        Raises:
            ParseError: Malformed formula
        """
        from syntax import parse

        return parse(source, notation)

    @classmethod
    def constant(cls, value: bool) -> ExpressionTree:
        return cls(ast.Constant(bool(value)))

    @classmethod
    def variable(cls, name: str) -> ExpressionTree:
        """Single-variable tree.

        Raises:
            VariableNameError: ``name`` does not match ``[A-Z][0-9]*``
        """
        return cls(ast.Variable(name))

    @property
    def root(self) -> ast.Expr:
        return self._root

    def clone(self) -> ExpressionTree:
        return ExpressionTree(self._root, self._values)

    __copy__ = clone

    def __deepcopy__(self, memo) -> ExpressionTree:
        return self.clone()

    def _rebuild_values(self, *sources: Mapping[str, Optional[bool]]) -> None:
        """Recompute the assignment table after the root changed.

        Each surviving name takes the first non-``None`` value found in
        ``sources``.
        """
        values: Dict[str, Optional[bool]] = {}
        for name in ast.free_variables(self._root):
            value = None
            for source in sources:
                if source.get(name) is not None:
                    value = source[name]
                    break
            values[name] = value
        self._values = values

    def _replace_root(self, root: ast.Expr, *sources: Mapping[str, Optional[bool]]) -> None:
        self._root = root
        self._rebuild_values(self._values, *sources)

    # Combinators

    def _combine(self, op: Operator, other: ExpressionTree) -> ExpressionTree:
        return ExpressionTree(ast.Binary(op, self._root, other._root), _merged(self, other))

    def negation(self) -> ExpressionTree:
        return ExpressionTree(ast.Not(self._root), self._values)

    def and_(self, other: ExpressionTree) -> ExpressionTree:
        return self._combine(Operator.AND, other)

    def or_(self, other: ExpressionTree) -> ExpressionTree:
        return self._combine(Operator.OR, other)

    def con(self, consequent: ExpressionTree) -> ExpressionTree:
        return self._combine(Operator.CON, consequent)

    def bicon(self, other: ExpressionTree) -> ExpressionTree:
        return self._combine(Operator.BICON, other)

    def __invert__(self) -> ExpressionTree:
        return self.negation()

    def __and__(self, other):
        if not isinstance(other, ExpressionTree):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, ExpressionTree):
            return NotImplemented
        return self.or_(other)

    def __rshift__(self, other):
        """``a >> b`` is the conditional ``a -> b``."""
        if not isinstance(other, ExpressionTree):
            return NotImplemented
        return self.con(other)

    def __lshift__(self, other):
        """``a << b`` is the conditional ``b -> a``."""
        if not isinstance(other, ExpressionTree):
            return NotImplemented
        return other.con(self)

    def __xor__(self, other):
        """``a ^ b`` is exclusive or, built as ``~(a <-> b)``."""
        if not isinstance(other, ExpressionTree):
            return NotImplemented
        return self.bicon(other).negation()

    # Rewrite rules

    def _apply(self, name: str, rewritten: ast.Expr) -> ExpressionTree:
        logger = get_logger()
        if logger.is_debug_enabled():
            before = self.infix()
            self._replace_root(rewritten)
            logger.rule_applied(name, before, self.infix())
        else:
            self._replace_root(rewritten)
        return self

    def deny(self) -> ExpressionTree:
        """Negate the whole tree. Flips the truth value on every assignment."""
        return self._apply("deny", rules.deny(self._root))

    def demorgans(self) -> ExpressionTree:
        """De Morgan's law when the root is a negated conjunction or disjunction."""
        return self._apply("demorgans", rules.demorgans(self._root))

    def implication(self) -> ExpressionTree:
        """Rewrite every conditional ``A -> B`` as ``~A v B``."""
        return self._apply("implication", rules.implication(self._root))

    def ncon(self) -> ExpressionTree:
        """Negated conditional when the root is ``~(A -> B)``: ``A & ~B``."""
        return self._apply("ncon", rules.ncon(self._root))

    def mat_eq(self) -> ExpressionTree:
        """Rewrite every biconditional ``A <-> B`` as ``(A -> B) & (B -> A)``."""
        return self._apply("mat_eq", rules.mat_eq(self._root))

    def mat_eq_mono(self) -> ExpressionTree:
        """Rewrite every biconditional ``A <-> B`` as ``(A & B) v (~A & ~B)``."""
        return self._apply("mat_eq_mono", rules.mat_eq_mono(self._root))

    def double_negation(self) -> ExpressionTree:
        """Remove every pair of consecutive negations."""
        return self._apply("double_negation", rules.double_negation(self._root))

    def monotenize(self) -> ExpressionTree:
        """Convert to conjunctions and disjunctions with negations only on leaves."""
        return self._apply("monotenize", rules.monotenize(self._root))

    # Substitution

    def replace_variable(self, name: str, replacement: ExpressionTree) -> ExpressionTree:
        """Replace every occurrence of variable ``name`` with ``replacement``."""
        return self.replace_variables({name: replacement})

    def replace_variables(self, replacements: Mapping[str, ExpressionTree]) -> ExpressionTree:
        """Replace several variables at once.

        Variables that survive keep their values; variables introduced by a
        replacement take the values held by the replacement tree.
        """
        logger = get_logger()
        root = substitution.replace_variables(
            self._root, {name: tree._root for name, tree in replacements.items()}
        )
        self._replace_root(root, *(tree._values for tree in replacements.values()))
        if logger.is_debug_enabled():
            targets = ", ".join(replacements)
            shown = ", ".join(tree.infix() for tree in replacements.values())
            logger.substitution_applied(targets, shown, self.infix())
        return self

    def replace_expression(self, old: ExpressionTree, new: ExpressionTree) -> ExpressionTree:
        """Replace every subtree literally equal to ``old`` with ``new``.

        A matched subtree is replaced whole and a freshly inserted ``new`` is not rescanned.
        """
        root = substitution.replace_expression(self._root, old._root, new._root)
        self._replace_root(root, new._values)
        logger = get_logger()
        if logger.is_debug_enabled():
            logger.substitution_applied(old.infix(), new.infix(), self.infix())
        return self

    # Variables and evaluation

    def variables(self) -> Tuple[str, ...]:
        """Distinct free variable names in first-occurrence order."""
        return tuple(self._values)

    @property
    def values(self) -> Dict[str, Optional[bool]]:
        """Copy of the assignment table."""
        return dict(self._values)

    def set_variable(self, name: str, value: bool) -> ExpressionTree:
        """Assign ``value`` to every occurrence of ``name``; unknown names are ignored."""
        if name in self._values:
            self._values[name] = bool(value)
        return self

    def set_variables(self, values: Mapping[str, bool]) -> ExpressionTree:
        for name, value in values.items():
            self.set_variable(name, value)
        return self

    def clear_variables(self) -> ExpressionTree:
        for name in self._values:
            self._values[name] = None
        return self

    def evaluate(self) -> bool:
        """Evaluate using the stored assignments.

        Raises:
            UnassignedVariableError: A variable has no value
        """
        return Evaluator(self._values).evaluate(self._root)

    def evaluate_with_vars(self, values: Mapping[str, bool]) -> bool:
        """Evaluate under ``values`` without touching the stored assignments.

        Names in ``values`` that do not occur in the tree are ignored.

        Raises:
            UnassignedVariableError: A variable of the tree is missing from ``values``
        """
        return Evaluator(values).evaluate(self._root)

    # Analysis

    def _analyzer(self) -> SatisfactionAnalyzer:
        return SatisfactionAnalyzer(self._root, self.variables())

    def satisfy_count(self) -> int:
        """Number of assignments that make the formula true."""
        return self._analyzer().satisfy_count()

    def satisfy_all(self) -> List[Assignment]:
        return self._analyzer().satisfy_all()

    def satisfy_one(self) -> Optional[Assignment]:
        return self._analyzer().satisfy_one()

    def truth_table(self) -> List[Tuple[Assignment, bool]]:
        return self._analyzer().truth_table()

    def is_satisfiable(self) -> bool:
        return self._analyzer().is_satisfiable()

    def is_tautology(self) -> bool:
        return self._analyzer().is_tautology()

    def is_inconsistency(self) -> bool:
        return self._analyzer().is_inconsistency()

    def is_contingency(self) -> bool:
        return self._analyzer().is_contingency()

    # Comparison

    def lit_eq(self, other: ExpressionTree) -> bool:
        """Identical structure, node for node."""
        return comparator.lit_eq(self, other)

    def log_eq(self, other: ExpressionTree) -> bool:
        """Same truth value on every assignment of the joint variables."""
        return comparator.log_eq(self, other)

    def syn_eq(self, other: ExpressionTree) -> bool:
        """Logically equal and built from the same set of variables."""
        return comparator.syn_eq(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionTree):
            return NotImplemented
        return self.lit_eq(other)

    __hash__ = None  # mutable

    # Printing

    def infix(self, notation=None) -> str:
        """Fully parenthesized infix string (default notation if ``None``)."""
        from syntax.printer import infix

        return infix(self._root, notation)

    def prefix(self, notation=None) -> str:
        """Polish notation string (default notation if ``None``)."""
        from syntax.printer import prefix

        return prefix(self._root, notation)

    def __str__(self) -> str:
        return self.infix()

    def __repr__(self) -> str:
        return f"ExpressionTree({self.infix()!r})"


def _merged(first: ExpressionTree, second: ExpressionTree) -> Dict[str, Optional[bool]]:
    merged = dict(second._values)
    for name, value in first._values.items():
        if value is not None or name not in merged:
            merged[name] = value
    return merged
