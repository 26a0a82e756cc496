# logic/analyzer.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Exhaustive truth-table analysis

"""Satisfiability analysis by brute-force enumeration.

Every question answered here (tautology, inconsistency, contingency,
satisfying assignments) is decided by walking all 2^n assignments of the
formula's n free variables, with no SAT solving: the cost
is O(2^n * |tree|) and the practical limit is set by n.

Enumeration order is canonical: assignment index k gives the i-th variable
(in first-occurrence order) the value of bit i of k. Index 0 is therefore
all-false and index 2^n - 1 all-true.
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from . import nodes as ast
from .evaluator import Evaluator
from .exceptions import AnalysisLimitError
from utils.logger import get_logger

# Same ceiling as a 128-bit assignment counter
MAX_VARIABLES = 127

Assignment = Dict[str, bool]


def iter_assignments(names: Sequence[str]) -> Iterator[Assignment]:
    """Yield every assignment over ``names`` in canonical order.

    With no names a single empty assignment is produced.

    Raises:
        AnalysisLimitError: More than ``MAX_VARIABLES`` names
    """
    if len(names) > MAX_VARIABLES:
        raise AnalysisLimitError(
            f"Cannot enumerate {len(names)} variables (limit is {MAX_VARIABLES})"
        )
    for index in range(1 << len(names)):
        yield {name: bool(index >> bit & 1) for bit, name in enumerate(names)}


class SatisfactionAnalyzer:
    """Answers satisfiability questions about a single formula.

    Attributes:
        root: Root node of the formula
        names: Free variables, in first-occurrence order
    """

    def __init__(self, root: ast.Expr, names: Sequence[str]):
        self.root = root
        self.names = tuple(names)

    @property
    def assignment_count(self) -> int:
        return 1 << len(self.names)

    def rows(self) -> Iterator[Tuple[Assignment, bool]]:
        """Yield ``(assignment, truth value)`` pairs in canonical order."""
        for assignment in iter_assignments(self.names):
            yield assignment, Evaluator(assignment).evaluate(self.root)

    def truth_table(self) -> List[Tuple[Assignment, bool]]:
        return list(self.rows())

    def satisfy_count(self) -> int:
        count = sum(1 for _, value in self.rows() if value)
        get_logger().analysis_finished(self.names, count)
        return count

    def satisfy_all(self) -> List[Assignment]:
        return [assignment for assignment, value in self.rows() if value]

    def satisfy_one(self) -> Optional[Assignment]:
        for assignment, value in self.rows():
            if value:
                return assignment
        return None

    def is_satisfiable(self) -> bool:
        return any(value for _, value in self.rows())

    def is_tautology(self) -> bool:
        return all(value for _, value in self.rows())

    def is_inconsistency(self) -> bool:
        return not self.is_satisfiable()

    def is_contingency(self) -> bool:
        seen_true = seen_false = False
        for _, value in self.rows():
            if value:
                seen_true = True
            else:
                seen_false = True
            if seen_true and seen_false:
                return True
        return False
