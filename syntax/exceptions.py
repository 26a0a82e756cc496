# syntax/exceptions.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Custom exceptions for formula parsing and notation management

"""Domain-specific exceptions for formula parsing and notations.

Every parse failure is a ``ParseError``; the subclasses let callers tell the
kinds of malformed input apart. Where the failure can be located in the
source text, ``position`` holds the character offset and ``fragment`` the
offending text.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Indicates that the input formula does not conform to the grammar under
    the notation in use. Used throughout the parsing pipeline to provide
    consistent error handling.

    Attributes:
        position: Character offset of the problem, if known
        fragment: Offending text, if known
    """

    def __init__(self, message: str, position: Optional[int] = None, fragment: Optional[str] = None):
        super().__init__(message)
        self.position = position
        self.fragment = fragment


class EmptyFormulaError(ParseError):
    """The input contains no tokens."""

    pass


class UnknownSymbolError(ParseError):
    """A character sequence matches no operator, variable or parenthesis."""

    pass


class MalformedVariableError(ParseError):
    """A variable name starts with a lowercase letter or a digit."""

    pass


class UnbalancedParenthesisError(ParseError):
    """A parenthesis is never closed, or closes nothing."""

    pass


class MissingOperandError(ParseError):
    """An operator lacks an operand, e.g. ``A &`` or ``()``."""

    pass


class UnexpectedTokenError(ParseError):
    """Two operands follow each other with no operator between them."""

    pass


class NotationConflictError(ValueError):
    """Raised when a notation update would make two operator tokens ambiguous.

    A token conflicts with another operator's token when either one is a
    prefix of the other. The notation is left unchanged.

    Attributes:
        operator: The operator whose token clashes with the proposed one
        token: The rejected token
    """

    def __init__(self, operator, token: str):
        super().__init__(
            f"Token {token!r} is ambiguous with the {operator.name} token"
        )
        self.operator = operator
        self.token = token
