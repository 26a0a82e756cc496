# syntax/grammar.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# LALR(1) grammar and parser for sentential logic formulas using SLY

"""Sentential logic grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs expression trees from token streams
provided by a notation-specific lexer. Token types do not depend on the
notation, so one parser class serves every notation.

Operator Precedence (lowest to highest):
- BICON: left-associative
- CON: left-associative
- OR: left-associative
- AND: left-associative
- NOT: right-associative
- parentheses and atoms
"""

from typing import Iterable

from sly import Parser

from logic.nodes import Binary, Constant, Expr, Not, Variable
from logic.operator import Operator
from .exceptions import MissingOperandError, ParseError, UnexpectedTokenError
from .lexer import OPERATOR_TOKEN_TYPES
from .lexer import TOKEN_TYPES as _token_types

_OPERAND_MISSING_BEFORE = set(OPERATOR_TOKEN_TYPES) - {"NOT"} | {"RPAREN"}


class _LogicParser(Parser):
    """SLY-based LALR(1) parser for sentential logic formulas.

    Attributes:
        tokens: Token types shared by every notation lexer
        precedence: Operator precedence and associativity rules
    """

    tokens = _token_types

    precedence = (
        ("left", "BICON"),
        ("left", "CON"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("expr BICON expr")
    def expr(self, p) -> Expr:
        """Biconditional."""
        return Binary(Operator.BICON, p.expr0, p.expr1)

    @_("expr CON expr")
    def expr(self, p) -> Expr:
        """Conditional."""
        return Binary(Operator.CON, p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction."""
        return Binary(Operator.OR, p.expr0, p.expr1)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction."""
        return Binary(Operator.AND, p.expr0, p.expr1)

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation."""
        return Not(p.expr)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("VAR")
    def expr(self, p) -> Expr:
        return Variable(p.VAR)

    @_("TRUE")
    def expr(self, p) -> Expr:
        return Constant(True)

    @_("FALSE")
    def expr(self, p) -> Expr:
        return Constant(False)

    def parse(self, tokens: Iterable) -> Expr:
        """Parse a token stream into an expression tree.

        Raises:
            ParseError: The token stream is not a well-formed formula
        """
        result = super().parse(iter(tokens))
        if result is None:
            raise ParseError("Failed to parse formula (syntax error).")
        return result

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule.

        Raises:
            MissingOperandError: Input ended, or an infix operator or closing
                parenthesis arrived, where an operand was expected
            UnexpectedTokenError: An operand arrived where an operator was expected
        """
        if token is None:
            raise MissingOperandError("Syntax error: Unexpected end of formula, operand expected")

        if token.type in _OPERAND_MISSING_BEFORE:
            raise MissingOperandError(
                f"Syntax error near '{token.value}' at position {token.index}: operand expected",
                position=token.index,
                fragment=token.value,
            )

        raise UnexpectedTokenError(
            f"Syntax error near '{token.value}' at position {token.index}: operator expected",
            position=token.index,
            fragment=token.value,
        )
