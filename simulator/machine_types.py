from dataclasses import dataclass
from enum import Enum


class Symbol(Enum):
    ZERO = 0
    ONE = 1
    BLANK = 2

    @property
    def display(self):
        return _SYMBOL_TEXT[self]

    @classmethod
    def parse(cls, text):
        """Parse a tape character ('0', '1', '_' or empty for blank)."""
        text = (text or "").strip()
        if text == "":
            return cls.BLANK
        for symbol, shown in _SYMBOL_TEXT.items():
            if shown == text:
                return symbol
        raise ValueError(f"Unknown tape symbol: {text!r}")


_SYMBOL_TEXT = {
    Symbol.ZERO: "0",
    Symbol.ONE: "1",
    Symbol.BLANK: "_",
}


class Direction(Enum):
    LEFT = -1
    RIGHT = 1

    @property
    def display(self):
        return "L" if self is Direction.LEFT else "R"

    @classmethod
    def parse(cls, text):
        text = (text or "").strip().upper()
        if text == "L":
            return cls.LEFT
        if text == "R":
            return cls.RIGHT
        raise ValueError(f"Unknown direction: {text!r}")


class RunStatus(Enum):
    IDLE = "Idle"
    RUNNING = "Running"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"

    @property
    def display(self):
        return self.value

    @property
    def is_terminal(self):
        return self in (RunStatus.ACCEPTED, RunStatus.REJECTED)


@dataclass
class Transition:
    current_state: str
    read_symbol: Symbol
    new_state: str
    write_symbol: Symbol
    direction: Direction
    has_breakpoint: bool = False

    @property
    def key(self):
        """Lookup identity of the rule."""
        return (self.current_state, self.read_symbol)

    def to_dict(self):
        return {
            "current_state": self.current_state,
            "read_symbol": self.read_symbol.display,
            "new_state": self.new_state,
            "write_symbol": self.write_symbol.display,
            "direction": self.direction.display,
            "has_breakpoint": self.has_breakpoint,
        }

    def compact(self):
        """Busy Beaver style action notation, e.g. 1Rq1."""
        return f"{self.write_symbol.display}{self.direction.display}{self.new_state}"
