# tests/syntax_tests/test_grammar.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Test suite for the generated parser class

"""Test suite for the SLY parser class itself.

These tests drive ``_LogicParser`` directly with lexer output, so a grammar
that fails to build, or that disagrees with the lexer about token types,
shows up here before any higher-level test runs.
"""

import pytest
from logic import Binary, Constant, Not, Operator, Variable
from syntax import OperatorNotation, tokenize
from syntax.grammar import _LogicParser
from syntax.lexer import TOKEN_TYPES
from utils.logger import get_logger


class TestGrammarBuild:
    """Test cases for the parser class built from the grammar rules."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_parser_declares_lexer_token_types(self):
        assert set(_LogicParser.tokens) == TOKEN_TYPES

    def test_parser_consumes_lexer_output(self):
        tokens = tokenize("~A&B1->C", OperatorNotation.ascii())
        root = _LogicParser().parse(tokens)

        expected = Binary(
            Operator.CON,
            Binary(Operator.AND, Not(Variable("A")), Variable("B1")),
            Variable("C"),
        )
        assert root == expected

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("TRUE", Constant(True)),
            ("(FALSE)", Constant(False)),
            ("A<->B", Binary(Operator.BICON, Variable("A"), Variable("B"))),
            ("AvB", Binary(Operator.OR, Variable("A"), Variable("B"))),
        ],
    )
    def test_every_rule_reduces(self, source, expected):
        assert _LogicParser().parse(tokenize(source, OperatorNotation.ascii())) == expected

    def test_parser_is_notation_independent(self):
        ascii_root = _LogicParser().parse(tokenize("~(A&B)", OperatorNotation.ascii()))
        words_root = _LogicParser().parse(tokenize("not (A and B)", OperatorNotation.words()))

        assert ascii_root == words_root

    def test_package_parse_goes_through_grammar(self):
        import syntax

        tree = syntax.parse("A&B")
        assert tree.root == Binary(Operator.AND, Variable("A"), Variable("B"))
