# tests/integration_tests/test_end_to_end.py
# This file is part of Sentential - A Propositional Logic Expression Engine
#
# End-to-end scenarios across parsing, rewriting, evaluation and analysis

"""End-to-end scenarios exercising the public API as a user would."""

import logging

import pytest
from logic import ExpressionTree, ExpressionVars, Operator
from syntax import NotationConflictError, OperatorNotation, parse
from utils.logger import LogLevel, get_logger, set_log_level


class TestEndToEnd:
    """Complete workflows from text to verdict."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_parse_print_reparse(self, complex_formula):
        tree = parse(complex_formula)
        assert tree.root.op is Operator.CON

        printed = tree.infix()
        assert printed == "((~A&B1)->(C v ~(D42<->E)))"
        assert parse(printed) == tree

    def test_assign_and_evaluate(self):
        tree = parse("A&B->C").set_variables({"A": True, "B": True, "C": False})
        assert tree.evaluate() is False

        tree.set_variable("C", True)
        assert tree.evaluate() is True

    def test_tautology_solutions(self):
        tree = parse("Av~A")

        assert tree.is_tautology()
        assert tree.satisfy_count() == 2
        assert len(tree.satisfy_all()) == 2
        assert all(tree.evaluate_with_vars(row) for row in tree.satisfy_all())

    def test_commuted_operands_compare(self):
        first, second = parse("A&B"), parse("B&A")

        assert first.log_eq(second)
        assert not first.lit_eq(second)
        assert first.syn_eq(second)

    def test_different_tautologies_compare(self):
        first, second = parse("Av~A"), parse("Bv~B")

        assert first.log_eq(second)
        assert not first.syn_eq(second)

    def test_notation_conflict_leaves_notation_unchanged(self):
        notation = OperatorNotation.default()

        with pytest.raises(NotationConflictError) as exc_info:
            notation.set(Operator.AND, "<")

        assert exc_info.value.operator is Operator.BICON
        assert notation.get(Operator.AND) == "&"
        assert notation.get(Operator.BICON) == "<->"
        assert parse("A&B<->C", notation).root.op is Operator.BICON

    def test_translate_between_notations(self):
        source = "not (A1 and A2) iff not A1 or not A2"
        tree = parse(source, OperatorNotation.words())

        assert tree.infix(OperatorNotation.mathematical()) == "(¬(A1∧A2)⟷(¬A1∨¬A2))"
        assert tree.is_tautology()

    def test_custom_notation_workflow(self):
        notation = OperatorNotation.ascii()
        notation.set(Operator.CON, "=>")
        notation.set(Operator.BICON, "<=>")

        tree = parse("A => B <=> ~A v B", notation)
        assert tree.infix(notation) == "((A=>B)<=>(~A v B))"
        assert tree.is_tautology()

    def test_rewrite_pipeline_preserves_meaning(self, complex_formula):
        original = parse(complex_formula)
        rewritten = original.clone().mat_eq().implication().double_negation()

        assert rewritten.syn_eq(original)
        assert not rewritten.lit_eq(original)
        assert rewritten.monotenize().log_eq(original)

    def test_denial_complements_solutions(self, complex_formula):
        tree = parse(complex_formula)
        denied = tree.clone().deny()

        assert tree.satisfy_count() + denied.satisfy_count() == 2 ** len(tree.variables())
        assert not tree.log_eq(denied)
        assert (tree | denied).is_tautology()
        assert (tree & denied).is_inconsistency()

    def test_build_and_substitute(self):
        xs = ExpressionVars("X", range(3))
        chain = (xs[0] >> xs[1]) & (xs[1] >> xs[2])

        assert chain.clone().con(parse("X0->X2")).is_tautology()

        chain.replace_variable("X1", ExpressionTree.constant(True))
        assert chain.infix() == "((X0->TRUE)&(TRUE->X2))"
        assert chain.variables() == ("X0", "X2")
        assert chain.log_eq(parse("X2"))

    def test_debug_logging_of_rules(self):
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        self.logger.logger.addHandler(handler)
        set_log_level(LogLevel.DEBUG)
        try:
            parse("A->B").implication()
        finally:
            set_log_level(LogLevel.WARNING)
            self.logger.logger.removeHandler(handler)

        messages = [record.getMessage() for record in records]
        assert any("Parsed 'A->B'" in message for message in messages)
        assert any("implication: (A->B) => (~A v B)" in message for message in messages)
