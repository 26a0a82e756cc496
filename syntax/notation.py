# syntax/notation.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Operator notation tables used for parsing and printing

"""Operator notations.

An ``OperatorNotation`` maps each connective to the token that spells it,
both when reading formulas and when printing them. Notations are plain
values passed explicitly to ``parse``/``infix``/``prefix``; there is no
global notation.

Token rules:
- non-empty, no whitespace, no parentheses;
- no uppercase letters or digits, which belong to variable names and to
  the ``TRUE``/``FALSE`` constants;
- no token may be a prefix of another operator's token, otherwise the
  tokenizer could not tell them apart.

Presets (NOT, AND, OR, CON, BICON):
    ascii               ~  &  v  ->  <->   (the default)
    mathematical        ¬  ∧  ∨  ➞   ⟷
    mathematical_ascii  ~  ^  v  ->  <->
    bits                ¬  ⋅  +  ➞   ⟷
    bits_ascii          ~  *  +  ->  <->
    boolean             !  &  |  ➞   ⟷
    boolean_ascii       !  &  |  ->  <->
    words               not and or implies iff
"""

from __future__ import annotations
from typing import Dict, Iterator, Mapping, Optional, Tuple

from logic.operator import Operator
from utils.logger import get_logger
from .exceptions import NotationConflictError

OPERATOR_ORDER = (Operator.NOT, Operator.AND, Operator.OR, Operator.CON, Operator.BICON)


def _check_token(token: str) -> None:
    if not isinstance(token, str) or not token:
        raise ValueError("Operator tokens must be non-empty strings")
    for ch in token:
        if ch.isspace() or ch in "()":
            raise ValueError(f"Operator token {token!r} contains {ch!r}")
        if ch.isupper() or ch.isdigit():
            raise ValueError(
                f"Operator token {token!r} contains {ch!r}, which is reserved "
                f"for variable names and constants"
            )


def _find_conflict(tokens: Mapping[Operator, str], op: Operator, token: str) -> Optional[Operator]:
    for other in OPERATOR_ORDER:
        if other is op:
            continue
        current = tokens[other]
        if current.startswith(token) or token.startswith(current):
            return other
    return None


class OperatorNotation:
    """Mapping from connective to surface token.

    Attributes:
        _tokens: Current token for each of the five operators
    """

    def __init__(self, neg: str, and_: str, or_: str, con: str, bicon: str):
        """Build a notation, validating every token and the prefix rule.

        Raises:
            ValueError: A token is malformed
            NotationConflictError: Two tokens are prefix-ambiguous
        """
        proposed = dict(zip(OPERATOR_ORDER, (neg, and_, or_, con, bicon)))
        for op, token in proposed.items():
            _check_token(token)
            conflict = _find_conflict(proposed, op, token)
            if conflict is not None:
                raise NotationConflictError(conflict, token)
        self._tokens: Dict[Operator, str] = proposed

    # Presets

    @classmethod
    def default(cls) -> OperatorNotation:
        return cls.ascii()

    @classmethod
    def ascii(cls) -> OperatorNotation:
        return cls("~", "&", "v", "->", "<->")

    @classmethod
    def mathematical(cls) -> OperatorNotation:
        return cls("¬", "∧", "∨", "➞", "⟷")

    @classmethod
    def mathematical_ascii(cls) -> OperatorNotation:
        return cls("~", "^", "v", "->", "<->")

    @classmethod
    def bits(cls) -> OperatorNotation:
        return cls("¬", "⋅", "+", "➞", "⟷")

    @classmethod
    def bits_ascii(cls) -> OperatorNotation:
        return cls("~", "*", "+", "->", "<->")

    @classmethod
    def boolean(cls) -> OperatorNotation:
        return cls("!", "&", "|", "➞", "⟷")

    @classmethod
    def boolean_ascii(cls) -> OperatorNotation:
        return cls("!", "&", "|", "->", "<->")

    @classmethod
    def words(cls) -> OperatorNotation:
        return cls("not", "and", "or", "implies", "iff")

    # Access

    def get(self, op: Operator) -> str:
        return self._tokens[op]

    def set(self, op: Operator, token: str) -> None:
        """Change the token for ``op``.

        Raises:
            ValueError: The token is malformed
            NotationConflictError: The token is a prefix of another
                operator's token, or the other way round. The table is
                left unchanged.
        """
        _check_token(token)
        conflict = _find_conflict(self._tokens, op, token)
        if conflict is not None:
            get_logger().notation_rejected(op.name, token, conflict.name)
            raise NotationConflictError(conflict, token)
        self._tokens[op] = token

    def __getitem__(self, op: Operator) -> str:
        return self.get(op)

    def __setitem__(self, op: Operator, token: str) -> None:
        self.set(op, token)

    def items(self) -> Iterator[Tuple[Operator, str]]:
        for op in OPERATOR_ORDER:
            yield op, self._tokens[op]

    def key(self) -> Tuple[str, ...]:
        """Hashable snapshot of the current tokens, in operator order."""
        return tuple(self._tokens[op] for op in OPERATOR_ORDER)

    def copy(self) -> OperatorNotation:
        return OperatorNotation(*self.key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperatorNotation):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        pairs = ", ".join(f"{op.name}={token!r}" for op, token in self.items())
        return f"OperatorNotation({pairs})"
