# syntax/__init__.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Formula parsing and printing under configurable operator notations

"""Sentential logic formula parsing under configurable operator notations.

This module turns notated formula strings into ``ExpressionTree`` objects.
The pipeline is: notation-specific SLY lexer -> parenthesis balance check ->
notation-independent LALR(1) parser -> expression tree. Parsing is
all-or-nothing: either a complete tree is returned or a ``ParseError``
subclass is raised.

Core Functions:
    parse: Converts formula strings into expression trees
    tokenize: Exposes the tokenizer for a given notation

Grammar Features:
    - Precedence BICON < CON < OR < AND < NOT
    - Left-associative binary operators, right-associative NOT
    - Parenthetical grouping support
    - TRUE / FALSE constants

Example:
    >>> from syntax import parse, OperatorNotation
    >>> tree = parse("~A&B1->Cv~(D42<->E)")
    >>> tree.infix(OperatorNotation.mathematical())
    '((¬A∧B1)➞(C∨¬(D42⟷E)))'
"""

from typing import List, Optional

from logic.tree import ExpressionTree
from utils.logger import get_logger
from .exceptions import (
    EmptyFormulaError,
    MalformedVariableError,
    MissingOperandError,
    NotationConflictError,
    ParseError,
    UnbalancedParenthesisError,
    UnexpectedTokenError,
    UnknownSymbolError,
)
from .grammar import _LogicParser
from .lexer import tokenize
from .notation import OperatorNotation
from .printer import infix, prefix


def _check_parentheses(tokens: List) -> None:
    open_positions: List[int] = []
    for token in tokens:
        if token.type == "LPAREN":
            open_positions.append(token.index)
        elif token.type == "RPAREN":
            if not open_positions:
                raise UnbalancedParenthesisError(
                    f"Unmatched ')' at position {token.index}",
                    position=token.index,
                    fragment=")",
                )
            open_positions.pop()
    if open_positions:
        position = open_positions[-1]
        raise UnbalancedParenthesisError(
            f"Unclosed '(' at position {position}",
            position=position,
            fragment="(",
        )


def parse(source: str, notation: Optional[OperatorNotation] = None) -> ExpressionTree:
    """Parse a formula string into an expression tree.

    Uses a fresh parser instance for each invocation; the lexer class for a
    notation is generated once and reused.

    Args:
        source: Formula written in ``notation``
        notation: Operator notation of the input; ``None`` means the default

    Returns:
        A new tree with every variable unassigned

    Raises:
        ParseError: Formula is malformed (see the subclasses in
            ``syntax.exceptions`` for the individual kinds)
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    notation = notation or OperatorNotation.default()

    try:
        tokens = tokenize(source, notation)
        if not tokens:
            raise EmptyFormulaError("Input formula is empty.")
        _check_parentheses(tokens)

        root = _LogicParser().parse(tokens)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc

    tree = ExpressionTree(root)
    if logger.is_debug_enabled():
        logger.formula_parsed(source, tree.infix(), len(tree.variables()))
    return tree


__all__ = [
    "parse",
    "tokenize",
    "infix",
    "prefix",
    "OperatorNotation",
    "ParseError",
    "EmptyFormulaError",
    "UnknownSymbolError",
    "MalformedVariableError",
    "UnbalancedParenthesisError",
    "MissingOperandError",
    "UnexpectedTokenError",
    "NotationConflictError",
]
