"""Tests for deciding which lines are evaluated."""

import pytest

from linecalc_pkg.classifier import LineClass, classify_line
from linecalc_pkg.context import EvaluationContext


@pytest.mark.parametrize(
    "line,expected",
    [
        ("", LineClass.EMPTY),
        ("# groceries", LineClass.COMMENT),
        ("#1 + 1", LineClass.COMMENT),
        ("-", LineClass.SEPARATOR),
        ("----------", LineClass.SEPARATOR),
        ("==========", LineClass.SEPARATOR),
        ("~~~", LineClass.SEPARATOR),
        ("····", LineClass.SEPARATOR),
        ("*_*_.", LineClass.SEPARATOR),
        ("Shopping list", LineClass.PROSE),
        ("epic", LineClass.PROSE),
        ("房租", LineClass.PROSE),
        ("2 apples", LineClass.EVALUATE),
        ("a = b", LineClass.EVALUATE),
        ("price + tax", LineClass.EVALUATE),
        ("(x)", LineClass.EVALUATE),
        ("x^y", LineClass.EVALUATE),
        ("pi", LineClass.EVALUATE),
        ("PI", LineClass.EVALUATE),
        ("the e constant", LineClass.EVALUATE),
        ("ans", LineClass.EVALUATE),
        ("true", LineClass.EVALUATE),
        ("Infinity", LineClass.EVALUATE),
    ],
)
def test_classify_line(line, expected):
    assert classify_line(line, EvaluationContext()) is expected


class TestKnownNames:
    def test_scope_variable_is_evaluated(self):
        context = EvaluationContext()
        context.scope["total"] = 1
        assert classify_line("total", context) is LineClass.EVALUATE
        assert classify_line("subtotal", context) is LineClass.PROSE

    def test_aliased_name_is_evaluated(self):
        context = EvaluationContext()
        context.aliases.alias_for("房租")
        assert classify_line("房租", context) is LineClass.EVALUATE

    def test_comment_wins_over_known_name(self):
        context = EvaluationContext()
        context.scope["#x"] = 1
        assert classify_line("#x", context) is LineClass.COMMENT
