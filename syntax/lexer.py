# syntax/lexer.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Lexical analyzer for notated formulas using SLY

"""Lexical analyzer for sentential logic formula strings.

Operator spellings are not fixed: they come from an ``OperatorNotation``.
SLY lexers are classes whose token rules are read from the class body, so a
lexer class is generated for each distinct notation (and cached). The token
types are the same for every notation, which lets a single grammar serve
them all.

Supported Tokens:
- Operators: NOT, AND, OR, CON, BICON (spelled by the notation)
- Keywords: TRUE, FALSE
- Variables: an uppercase letter followed by digits (A, B1, D42)
- Parentheses: (, )
- Whitespace: ignored during tokenization
"""

import re
import types
from functools import lru_cache
from typing import List, Tuple

from sly import Lexer

from logic.nodes import VARIABLE_NAME_PATTERN
from utils.logger import get_logger
from .exceptions import MalformedVariableError, UnknownSymbolError
from .notation import OPERATOR_ORDER, OperatorNotation

TOKEN_TYPES = {
    "NOT",
    "AND",
    "OR",
    "CON",
    "BICON",
    "TRUE",
    "FALSE",
    "VAR",
    "LPAREN",
    "RPAREN",
}

OPERATOR_TOKEN_TYPES = tuple(op.name for op in OPERATOR_ORDER)

_WORD_RE = re.compile(r"\w+")


def _lexer_error(self, t):
    """Handle illegal characters during tokenization.

    Lowercase letters and digits can only have been meant as (part of) a
    variable name, anything else is an unknown symbol.

    Raises:
        MalformedVariableError: Lowercase or digit-first name
        UnknownSymbolError: Any other unrecognised character
    """
    logger = get_logger()

    illegal_char = t.value[0]
    error_pos = self.index

    logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

    # Skip the illegal character
    self.index += 1

    if illegal_char.islower() or illegal_char.isdigit():
        fragment = _WORD_RE.match(t.value).group()
        raise MalformedVariableError(
            f"Malformed variable name '{fragment}' at position {error_pos}: "
            f"variables are an uppercase letter followed by digits",
            position=error_pos,
            fragment=fragment,
        )

    raise UnknownSymbolError(
        f"Unknown symbol '{illegal_char}' at position {error_pos}",
        position=error_pos,
        fragment=illegal_char,
    )


@lru_cache(maxsize=32)
def _lexer_class(tokens: Tuple[str, ...]) -> type:
    """Generate the SLY lexer class for one tuple of operator tokens."""
    operator_patterns = {
        name: re.escape(token) for name, token in zip(OPERATOR_TOKEN_TYPES, tokens)
    }

    def body(ns):
        # Assignments must go through the SLY class namespace one by one,
        # in rule order.
        ns["tokens"] = TOKEN_TYPES
        ns["ignore"] = " \t\r\n"
        for name, pattern in operator_patterns.items():
            ns[name] = pattern
        ns["TRUE"] = r"TRUE"
        ns["FALSE"] = r"FALSE"
        ns["VAR"] = VARIABLE_NAME_PATTERN
        ns["LPAREN"] = r"\("
        ns["RPAREN"] = r"\)"
        ns["error"] = _lexer_error

    get_logger().debug(f"Building lexer for operator tokens {tokens}")
    return types.new_class("NotationLexer", (Lexer,), {}, body)


def build_lexer(notation: OperatorNotation) -> Lexer:
    """Return a fresh lexer instance for ``notation``."""
    return _lexer_class(notation.key())()


def tokenize(text: str, notation: OperatorNotation) -> List:
    """Tokenize ``text`` completely.

    Raises:
        MalformedVariableError: Lowercase or digit-first name
        UnknownSymbolError: Unrecognised character
    """
    return list(build_lexer(notation).tokenize(text))
