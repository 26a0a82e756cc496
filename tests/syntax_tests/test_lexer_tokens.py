# tests/syntax_tests/test_lexer_tokens.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Test suite for notation-driven tokenization and lexer errors

"""Test suite for the notation-driven lexer.

Verifies correct tokenization of valid syntax under several notations and
the error kinds raised for characters no rule recognises.
"""

import pytest
from logic import Operator
from syntax import OperatorNotation, tokenize
from syntax.exceptions import MalformedVariableError, ParseError, UnknownSymbolError
from syntax.lexer import build_lexer
from utils.logger import get_logger


class TestNotationLexer:
    """Test cases for lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str, notation=None) -> list[str]:
        notation = notation or OperatorNotation.ascii()
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in tokenize(text, notation)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        ("A", ["VAR"]),
        ("B1", ["VAR"]),
        ("D42", ["VAR"]),
        ("TRUE", ["TRUE"]),
        ("FALSE", ["FALSE"]),
        ("T1", ["VAR"]),
        ("F", ["VAR"]),
        ("~ & v -> <-> ( )", ["NOT", "AND", "OR", "CON", "BICON", "LPAREN", "RPAREN"]),
        ("AvB", ["VAR", "OR", "VAR"]),
        ("A1B2", ["VAR", "VAR"]),
        ("~~A", ["NOT", "NOT", "VAR"]),
        (" \t A \n & \r B ", ["VAR", "AND", "VAR"]),
        (
            "~A&B1->Cv~(D42<->E)",
            ["NOT", "VAR", "AND", "VAR", "CON", "VAR", "OR", "NOT",
             "LPAREN", "VAR", "BICON", "VAR", "RPAREN"],
        ),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_variable_values_are_preserved(self):
        tokens = tokenize("A1 & D42", OperatorNotation.ascii())
        assert [t.value for t in tokens] == ["A1", "&", "D42"]

    NOTATION_CASES = [
        ("mathematical", "¬A∧B∨C➞D⟷E"),
        ("mathematical_ascii", "~A^BvC->D<->E"),
        ("bits", "¬A⋅B+C➞D⟷E"),
        ("bits_ascii", "~A*B+C->D<->E"),
        ("boolean", "!A&B|C➞D⟷E"),
        ("boolean_ascii", "!A&B|C->D<->E"),
        ("words", "not A and B or C implies D iff E"),
    ]

    @pytest.mark.parametrize("preset, text", NOTATION_CASES)
    def test_preset_tokenization(self, preset, text):
        """Every preset spells the same formula with its own tokens."""
        notation = getattr(OperatorNotation, preset)()
        expected = ["NOT", "VAR", "AND", "VAR", "OR", "VAR", "CON", "VAR", "BICON", "VAR"]

        assert self._tokenize_to_types(text, notation) == expected

    def test_lexer_follows_notation_changes(self):
        notation = OperatorNotation.ascii()
        notation.set(Operator.AND, "^")

        assert self._tokenize_to_types("A^B", notation) == ["VAR", "AND", "VAR"]
        with pytest.raises(UnknownSymbolError):
            self._tokenize_to_types("A&B", notation)

    def test_lexer_class_is_reused_for_equal_notations(self):
        first = build_lexer(OperatorNotation.boolean())
        second = build_lexer(OperatorNotation.boolean())

        assert type(first) is type(second)
        assert first is not second

    ILLEGAL_CHARACTERS = ["@", "#", "$", "%", "?", ";", ".", "=", "[", "{"]

    @pytest.mark.parametrize("illegal_char", ILLEGAL_CHARACTERS)
    def test_unknown_symbols(self, illegal_char):
        with pytest.raises(UnknownSymbolError) as exc_info:
            self._tokenize_to_types(f"A {illegal_char} B")

        assert exc_info.value.position == 2
        assert exc_info.value.fragment == illegal_char
        assert isinstance(exc_info.value, ParseError)

    MALFORMED_VARIABLES = [
        ("a", "a", 0),
        ("A&b", "b", 2),
        ("A & 1B", "1B", 4),
        ("x1", "x1", 0),
        ("Ab", "b", 1),
    ]

    @pytest.mark.parametrize("text, fragment, position", MALFORMED_VARIABLES)
    def test_malformed_variable_names(self, text, fragment, position):
        with pytest.raises(MalformedVariableError) as exc_info:
            self._tokenize_to_types(text)

        assert exc_info.value.fragment == fragment
        assert exc_info.value.position == position

    def test_empty_input_has_no_tokens(self):
        assert self._tokenize_to_types("") == []
        assert self._tokenize_to_types("   \t\n") == []
