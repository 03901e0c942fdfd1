from simulator.breakpoints import BreakpointRegistry
from simulator.machine_types import Direction, RunStatus, Symbol
from simulator.tape import DEFAULT_TAPE_CELLS, Tape
from simulator.transition_table import TransitionTable

MIN_SPEED_MS = 50
MAX_SPEED_MS = 2000
DEFAULT_SPEED_MS = 500


class TuringMachine:
    """
    Deterministic single-tape machine over {0, 1, _}.

    step() returns the continuation signal; the outcome of the run is read
    from `status`. A breakpoint pause returns False but leaves `status` alone.
    """

    def __init__(self, start_state="q0", accept_state="qa", reject_state="qr",
                 initial_tape_cells=DEFAULT_TAPE_CELLS, speed_ms=DEFAULT_SPEED_MS):
        self.start_state = start_state
        self.accept_state = accept_state
        self.reject_state = reject_state
        self.transitions = TransitionTable()
        self.breakpoints = BreakpointRegistry()
        self.tape = Tape(initial_tape_cells)
        self.set_speed(speed_ms)
        self.reset()

    # === Run state ===
    def reset(self):
        self.tape.clear()
        self.head = 0
        self.current_state = self.start_state
        self.step_count = 0
        self.status = RunStatus.IDLE

    def redefine_states(self, start_state=None, accept_state=None, reject_state=None):
        if start_state is not None:
            self.start_state = start_state
        if accept_state is not None:
            self.accept_state = accept_state
        if reject_state is not None:
            self.reject_state = reject_state
        self.reset()

    def load_input(self, text):
        """Reset, then write `text` from position 0 rightward. Head stays at 0."""
        symbols = [Symbol.parse(ch) for ch in text.strip()]
        self.reset()
        for pos, symbol in enumerate(symbols):
            self.tape.write(pos, symbol)

    def mark_running(self):
        if not self.status.is_terminal:
            self.status = RunStatus.RUNNING

    def mark_idle(self):
        if not self.status.is_terminal:
            self.status = RunStatus.IDLE

    def set_speed(self, ms):
        self.speed_ms = max(MIN_SPEED_MS, min(MAX_SPEED_MS, int(ms)))
        return self.speed_ms

    def _check_halting_state(self):
        if self.current_state == self.accept_state:
            self.status = RunStatus.ACCEPTED
            return True
        if self.current_state == self.reject_state:
            self.status = RunStatus.REJECTED
            return True
        return False

    def step(self):
        if self.status.is_terminal:
            return False
        if self._check_halting_state():
            return False

        symbol = self.tape.read(self.head)
        transition = self.transitions.find(self.current_state, symbol)
        if transition is None:
            # No rule for (state, symbol) rejects the input
            self.status = RunStatus.REJECTED
            return False

        self.tape.write(self.head, transition.write_symbol)
        self.current_state = transition.new_state
        self.head += -1 if transition.direction is Direction.LEFT else 1
        self.step_count += 1

        if self._check_halting_state():
            return False

        if transition.has_breakpoint or self.breakpoints.contains_state(self.current_state):
            return False
        return True

    # === Table / breakpoint editing ===
    def add_transition(self, transition):
        return self.transitions.add(transition)

    def update_transition(self, index, transition):
        return self.transitions.update(index, transition)

    def delete_transition(self, index):
        return self.transitions.remove(index)

    def toggle_transition_breakpoint(self, index):
        return self.transitions.toggle_breakpoint(index)

    def toggle_state_breakpoint(self, name):
        return self.breakpoints.toggle_state(name)

    # === Observable state ===
    def tape_window(self, center, width):
        return self.tape.window(center, width, head=self.head)

    def snapshot(self):
        return {
            "state": self.current_state,
            "head": self.head,
            "steps": self.step_count,
            "status": self.status.display,
            "state_breakpoints": self.breakpoints.states(),
        }
