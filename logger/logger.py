import json
import os
from datetime import datetime, timezone


def _utc_date():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_", enabled=True):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        self.enabled = enabled
        self.today = _utc_date()
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    @staticmethod
    def _stamp(entry):
        return {"timestamp": datetime.now(timezone.utc).isoformat(), **entry}

    @staticmethod
    def step_entry(snapshot: dict, continued: bool):
        return {"event": "step", "continued": continued, **snapshot}

    def _log_to_file(self, filename, entries):
        if not self.enabled:
            return
        os.makedirs(self.output_directory, exist_ok=True)
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(self._stamp(entry)) + "\n")

    def _main_log(self):
        # Long runs can cross midnight (UTC)
        if _utc_date() != self.today:
            self.rotate()
        return os.path.basename(self.current_log)

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        self._log_to_file(self._main_log(), [entry])

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        if entries:
            self._log_to_file(self._main_log(), entries)

    def rotate(self):
        """Start a new main log file for the current date."""
        self.today = _utc_date()
        self.current_log = self._get_log_filename()

    def log_event(self, kind, **fields):
        """Log an editing / control event (transition added, breakpoint toggled, reset...)."""
        self.log({"event": kind, **fields})

    def log_step(self, snapshot: dict, continued: bool):
        self.log(self.step_entry(snapshot, continued))

    def log_outcome(self, snapshot: dict):
        """Log the final snapshot of a run that reached Accepted or Rejected."""
        self._main_log()
        status = snapshot["status"].lower()
        self._log_to_file(f"{status}_{self.today}.jsonl", [snapshot])
