"""
Tests for tools/machine_inspect.py
"""

from simulator.machine_types import Direction, Symbol, Transition
from tools.machine_inspect import build_grid, latex_table


def rules():
    return [
        Transition("q0", Symbol.ONE, "q0", Symbol.ONE, Direction.RIGHT),
        Transition("q0", Symbol.BLANK, "qa", Symbol.ONE, Direction.RIGHT, has_breakpoint=True),
        Transition("q1", Symbol.ZERO, "q0", Symbol.BLANK, Direction.LEFT),
    ]


class TestBuildGrid:

    def test_rows_in_first_seen_order(self):
        grid = build_grid(rules())
        assert grid == [
            ["q0", "REJECT", "1Rq0", "1Rqa*"],
            ["q1", "_Lq0", "REJECT", "REJECT"],
        ]

    def test_empty(self):
        assert build_grid([]) == []


class TestLatex:

    def test_escapes_underscores(self):
        text = latex_table(build_grid(rules()))
        assert text.startswith(r"\begin{array}{c|ccc}")
        assert r"\_Lq0" in text
        assert text.endswith(r"\end{array}")
