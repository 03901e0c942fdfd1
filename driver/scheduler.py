import time


class LoopTimer:
    """
    Cooperative periodic timer for a single-threaded host loop.
    The loop polls due(); nothing runs on another thread.
    """

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.interval_ms = None
        self.deadline = None

    @property
    def active(self):
        return self.deadline is not None

    def start(self, interval_ms):
        """Schedule ticks every interval_ms, replacing any pending schedule."""
        self.interval_ms = interval_ms
        self.deadline = self.clock() + interval_ms / 1000.0

    def cancel(self):
        self.deadline = None

    def due(self, now=None):
        """True once per elapsed interval; re-arms itself for the next tick."""
        if self.deadline is None:
            return False
        now = self.clock() if now is None else now
        if now < self.deadline:
            return False
        self.deadline = now + self.interval_ms / 1000.0
        return True

    def remaining(self):
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - self.clock())
