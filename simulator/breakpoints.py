class BreakpointRegistry:
    """Pause-on-entry state names. Per-rule breakpoints live on Transition."""

    def __init__(self):
        self._states = set()

    def toggle_state(self, name):
        """Add the state if absent, remove it if present. Returns the new membership."""
        if name in self._states:
            self._states.remove(name)
            return False
        self._states.add(name)
        return True

    def contains_state(self, name):
        return name in self._states

    def states(self):
        return sorted(self._states)

    def __len__(self):
        return len(self._states)
