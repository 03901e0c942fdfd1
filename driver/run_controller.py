from driver.scheduler import LoopTimer


class RunController:
    """
    Host-side driver for a TuringMachine.

    Owns the tick timer and the Idle/Running bookkeeping. Every call into the
    machine goes through here so that steps are applied one at a time, in order.
    """

    def __init__(self, machine, timer=None, logger=None, log_steps=True):
        self.machine = machine
        self.timer = timer if timer is not None else LoopTimer()
        self.logger = logger
        self.log_steps = log_steps

    # === Logging ===
    def _event(self, kind, **fields):
        if self.logger is not None:
            self.logger.log_event(kind, **fields)

    def _after_step(self, continued, buffer=None):
        if self.logger is None:
            return
        snapshot = self.machine.snapshot()
        if self.log_steps:
            if buffer is None:
                self.logger.log_step(snapshot, continued)
            else:
                buffer.append(self.logger.step_entry(snapshot, continued))
        if self.machine.status.is_terminal and not continued:
            self.logger.log_outcome(snapshot)

    def _step(self, buffer=None):
        already_terminal = self.machine.status.is_terminal
        continued = self.machine.step()
        if not already_terminal:
            self._after_step(continued, buffer)
        return continued

    # === Run control ===
    def step_once(self):
        """Manual step. Ignored once the machine is Accepted/Rejected."""
        if self.machine.status.is_terminal:
            return False
        self.timer.cancel()
        self.machine.mark_idle()
        return self._step()

    def run(self):
        if self.machine.status.is_terminal:
            return False
        self.machine.mark_running()
        self.timer.start(self.machine.speed_ms)
        self._event("run", speed_ms=self.machine.speed_ms)
        return True

    def stop(self):
        self.timer.cancel()
        self.machine.mark_idle()
        self._event("stop", **self.machine.snapshot())

    def reset(self):
        self.timer.cancel()
        self.machine.reset()
        self._event("reset")

    def load_input(self, text):
        self.timer.cancel()
        self.machine.load_input(text)
        self._event("load_input", input=text)

    def set_speed(self, ms):
        speed = self.machine.set_speed(ms)
        if self.timer.active:
            self.timer.cancel()
            self.timer.start(speed)
        return speed

    def tick(self):
        """Timer callback: one step, and halt the schedule when the machine pauses or halts."""
        continued = self._step()
        if not continued:
            self.timer.cancel()
            self.machine.mark_idle()
        return continued

    def poll(self, now=None):
        """Run a tick if the timer is due. Returns True when a step was taken."""
        if self.timer.due(now):
            self.tick()
            return True
        return False

    @property
    def running(self):
        return self.timer.active

    def run_until_pause(self, max_steps=None, batch_size=4096):
        """
        Step synchronously (no waiting between ticks) until the machine pauses,
        halts or `max_steps` steps were taken. Returns the number of steps taken.
        Step records are written in bulk, once per `batch_size` steps.
        """
        self.machine.mark_running()
        taken = 0
        buffer = []
        while max_steps is None or taken < max_steps:
            before = self.machine.step_count
            continued = self._step(buffer)
            taken += self.machine.step_count - before
            if len(buffer) >= batch_size:
                self._flush(buffer)
            if not continued:
                break
        self._flush(buffer)
        self.machine.mark_idle()
        return taken

    def _flush(self, buffer):
        if self.logger is not None and buffer:
            self.logger.log_batch(buffer)
        buffer.clear()

    # === Editing ===
    def add_transition(self, transition):
        added = self.machine.add_transition(transition)
        self._event("transition_added" if added else "transition_duplicate", **transition.to_dict())
        return added

    def update_transition(self, index, transition):
        updated = self.machine.update_transition(index, transition)
        self._event("transition_updated" if updated else "transition_update_refused",
                    index=index, **transition.to_dict())
        return updated

    def delete_transition(self, index):
        removed = self.machine.delete_transition(index)
        self._event("transition_deleted", index=index, **removed.to_dict())
        return removed

    def toggle_transition_breakpoint(self, index):
        enabled = self.machine.toggle_transition_breakpoint(index)
        self._event("transition_breakpoint", index=index, enabled=enabled)
        return enabled

    def toggle_state_breakpoint(self, name):
        enabled = self.machine.toggle_state_breakpoint(name)
        self._event("state_breakpoint", state=name, enabled=enabled)
        return enabled
