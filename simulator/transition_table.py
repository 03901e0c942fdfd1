from dataclasses import replace


class TransitionTable:
    """Ordered, deterministic rule set. Lookup is by (state, read symbol)."""

    def __init__(self):
        self._transitions = []

    def __len__(self):
        return len(self._transitions)

    def __iter__(self):
        return iter(self._transitions)

    def __getitem__(self, index):
        return self._transitions[self._check_index(index)]

    def _check_index(self, index):
        if not 0 <= index < len(self._transitions):
            raise IndexError(f"Transition index {index} out of range (0..{len(self._transitions) - 1})")
        return index

    def find(self, state, symbol):
        for transition in self._transitions:
            if transition.current_state == state and transition.read_symbol == symbol:
                return transition
        return None

    def index_of(self, state, symbol):
        for idx, transition in enumerate(self._transitions):
            if transition.current_state == state and transition.read_symbol == symbol:
                return idx
        return None

    def add(self, transition):
        """Append unless the key already exists. Returns False on duplicates."""
        if self.find(*transition.key) is not None:
            return False
        self._transitions.append(transition)
        return True

    def update(self, index, transition):
        """
        Replace the rule at `index`.
        Refuses (returns False) when the new key already belongs to another rule.
        """
        self._check_index(index)
        existing = self.index_of(*transition.key)
        if existing is not None and existing != index:
            return False
        self._transitions[index] = transition
        return True

    def remove(self, index):
        return self._transitions.pop(self._check_index(index))

    def toggle_breakpoint(self, index):
        current = self[index]
        self._transitions[index] = replace(current, has_breakpoint=not current.has_breakpoint)
        return self._transitions[index].has_breakpoint

    def transitions(self):
        return list(self._transitions)
