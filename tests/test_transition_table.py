"""
Tests for simulator/transition_table.py
"""

import pytest
from simulator.machine_types import Direction, Symbol, Transition
from simulator.transition_table import TransitionTable


def make(state="q0", read=Symbol.BLANK, new_state="qa", write=Symbol.ONE, direction=Direction.RIGHT):
    return Transition(state, read, new_state, write, direction)


class TestAddAndFind:

    def test_find_by_key(self):
        table = TransitionTable()
        t = make()
        assert table.add(t)
        assert table.find("q0", Symbol.BLANK) is t
        assert table.find("q0", Symbol.ONE) is None
        assert table.find("q1", Symbol.BLANK) is None

    def test_duplicate_key_rejected_and_table_unchanged(self):
        table = TransitionTable()
        first = make(new_state="qa")
        table.add(first)
        assert not table.add(make(new_state="q9", write=Symbol.ZERO))
        assert len(table) == 1
        assert table[0] is first

    def test_same_state_other_symbol_is_allowed(self):
        table = TransitionTable()
        assert table.add(make(read=Symbol.ZERO))
        assert table.add(make(read=Symbol.ONE))
        assert len(table) == 2


class TestUpdateAndRemove:

    def test_update_replaces_in_place(self):
        table = TransitionTable()
        table.add(make(read=Symbol.ZERO))
        table.add(make(read=Symbol.ONE))
        replacement = make(read=Symbol.ONE, new_state="q5")
        assert table.update(1, replacement)
        assert table[1] is replacement
        assert table.find("q0", Symbol.ONE).new_state == "q5"

    def test_update_can_change_own_key(self):
        table = TransitionTable()
        table.add(make(read=Symbol.ZERO))
        assert table.update(0, make(read=Symbol.BLANK))
        assert table.find("q0", Symbol.ZERO) is None

    def test_update_refuses_key_of_another_rule(self):
        table = TransitionTable()
        table.add(make(read=Symbol.ZERO))
        table.add(make(read=Symbol.ONE))
        before = table.transitions()
        assert not table.update(1, make(read=Symbol.ZERO))
        assert table.transitions() == before

    def test_remove_shifts_indices(self):
        table = TransitionTable()
        a, b, c = make(read=Symbol.ZERO), make(read=Symbol.ONE), make(read=Symbol.BLANK)
        for t in (a, b, c):
            table.add(t)
        assert table.remove(1) is b
        assert table.transitions() == [a, c]

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_out_of_range_index_raises(self, index):
        table = TransitionTable()
        table.add(make())
        with pytest.raises(IndexError):
            table.remove(index)
        with pytest.raises(IndexError):
            table.update(index, make(read=Symbol.ONE))


class TestBreakpointFlag:

    def test_toggle_breakpoint(self):
        table = TransitionTable()
        table.add(make())
        assert table.toggle_breakpoint(0)
        assert table[0].has_breakpoint
        assert not table.toggle_breakpoint(0)
        assert not table[0].has_breakpoint

    def test_toggle_keeps_rule_contents(self):
        table = TransitionTable()
        table.add(make(new_state="q3"))
        table.toggle_breakpoint(0)
        assert table[0].new_state == "q3"
        assert table.find("q0", Symbol.BLANK).has_breakpoint
