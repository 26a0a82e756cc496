# tests/syntax_tests/test_printing.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# Test suite for infix and prefix rendering

"""Test suite for infix and prefix rendering.

Infix output is fully parenthesized so it reads back to the same tree under
the notation it was printed with.
"""

import pytest
from logic import ExpressionTree
from syntax import OperatorNotation, infix, parse, prefix
from utils.logger import get_logger


class TestPrinting:
    """Test cases for rendering trees as text."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INFIX_CASES = [
        ("A", "A"),
        ("~A", "~A"),
        ("~~A", "~~A"),
        ("A&B", "(A&B)"),
        ("AvB", "(A v B)"),
        ("A&BvC", "((A&B) v C)"),
        ("A->B<->C", "((A->B)<->C)"),
        ("~(A&B)", "~(A&B)"),
        ("TRUE&~FALSE", "(TRUE&~FALSE)"),
        ("~A&B1->Cv~(D42<->E)", "((~A&B1)->(C v ~(D42<->E)))"),
    ]

    @pytest.mark.parametrize("source, expected", INFIX_CASES)
    def test_infix_default_notation(self, source, expected):
        rendered = parse(source).infix()
        self.logger.debug(f"{source} -> {rendered}")

        assert rendered == expected

    def test_infix_mathematical(self, complex_formula):
        tree = parse(complex_formula)

        assert tree.infix(OperatorNotation.mathematical()) == "((¬A∧B1)➞(C∨¬(D42⟷E)))"

    def test_infix_words(self, complex_formula):
        tree = parse(complex_formula)

        assert tree.infix(OperatorNotation.words()) == (
            "((not A and B1) implies (C or not (D42 iff E)))"
        )

    PREFIX_CASES = [
        ("A", "A"),
        ("~A", "~ A"),
        ("A&B", "& A B"),
        ("A&BvC", "v & A B C"),
        ("A->(B->C)", "-> A -> B C"),
        ("~(A<->FALSE)", "~ <-> A FALSE"),
        ("~A&B1->Cv~(D42<->E)", "-> & ~ A B1 v C ~ <-> D42 E"),
    ]

    @pytest.mark.parametrize("source, expected", PREFIX_CASES)
    def test_prefix_default_notation(self, source, expected):
        assert parse(source).prefix() == expected

    def test_prefix_under_notation(self):
        tree = parse("~A&B")

        assert tree.prefix(OperatorNotation.boolean()) == "& ! A B"
        assert prefix(tree.root, OperatorNotation.words()) == "and not A B"

    def test_module_functions_match_methods(self, complex_formula):
        tree = parse(complex_formula)

        assert infix(tree.root) == tree.infix()
        assert prefix(tree.root) == tree.prefix()
        assert str(tree) == tree.infix()

    ROUND_TRIP_FORMULAS = [
        "A",
        "TRUE",
        "~~A",
        "A&B&C",
        "A&(B&C)",
        "~A&B1->Cv~(D42<->E)",
        "(A<->B)<->(C->~D)",
        "~(TRUEvA)&FALSE",
    ]

    @pytest.mark.parametrize("formula", ROUND_TRIP_FORMULAS)
    def test_infix_reads_back_under_every_notation(self, formula, all_notations):
        tree = parse(formula)
        for name, notation in all_notations.items():
            text = tree.infix(notation)
            self.logger.debug(f"{name}: {text}")

            assert parse(text, notation) == tree, f"Round trip failed under {name}: {text}"

    def test_constant_trees(self):
        assert ExpressionTree.constant(True).infix() == "TRUE"
        assert ExpressionTree.constant(False).prefix() == "FALSE"
