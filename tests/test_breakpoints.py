"""
Tests for simulator/breakpoints.py
"""

from simulator.breakpoints import BreakpointRegistry


class TestBreakpointRegistry:

    def test_toggle_adds_then_removes(self):
        registry = BreakpointRegistry()
        assert registry.toggle_state("q1")
        assert registry.contains_state("q1")
        assert not registry.toggle_state("q1")
        assert not registry.contains_state("q1")

    def test_states_sorted_snapshot(self):
        registry = BreakpointRegistry()
        for name in ("q2", "q0", "q1"):
            registry.toggle_state(name)
        assert registry.states() == ["q0", "q1", "q2"]
        assert len(registry) == 3

    def test_unknown_state_not_contained(self):
        assert not BreakpointRegistry().contains_state("q0")
