# logic/operator.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Logical connectives of sentential logic

"""
The five connectives of sentential logic, with their binding strength and
truth tables. NOT is the only unary connective; the rest are binary infix.
"""

from enum import Enum


class Operator(Enum):
    """Closed set of logical connectives."""

    NOT = "not"
    AND = "and"
    OR = "or"
    CON = "con"  # conditional
    BICON = "bicon"  # biconditional

    @property
    def is_unary(self) -> bool:
        return self is Operator.NOT

    @property
    def precedence(self) -> int:
        """Binding strength, higher binds tighter."""
        return _PRECEDENCE[self]

    def apply(self, left: bool, right: bool) -> bool:
        """Evaluate a binary connective on two truth values.

        Raises:
            ValueError: When called on NOT, which takes a single operand.
        """
        if self is Operator.AND:
            return left and right
        if self is Operator.OR:
            return left or right
        if self is Operator.CON:
            return (not left) or right
        if self is Operator.BICON:
            return left == right
        raise ValueError("NOT is a unary connective and has no binary truth table")

    def dual(self) -> "Operator":
        """AND <-> OR, used by De Morgan's law."""
        if self is Operator.AND:
            return Operator.OR
        if self is Operator.OR:
            return Operator.AND
        raise ValueError(f"{self.name} has no De Morgan dual")


_PRECEDENCE = {
    Operator.BICON: 1,
    Operator.CON: 2,
    Operator.OR: 3,
    Operator.AND: 4,
    Operator.NOT: 5,
}
