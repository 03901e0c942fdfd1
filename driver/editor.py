"""
Marshal user input (text boxes, choice lists, CLI rule strings) into Transitions.
Choice ordinals exist only here; the machine always stores enum members.
"""

from simulator.machine_types import Direction, Symbol, Transition

SYMBOL_CHOICES = [Symbol.ZERO, Symbol.ONE, Symbol.BLANK]
DIRECTION_CHOICES = [Direction.LEFT, Direction.RIGHT]


class TransitionFormatError(ValueError):
    pass


def symbol_from_index(index):
    if not 0 <= index < len(SYMBOL_CHOICES):
        raise TransitionFormatError(f"No symbol at choice {index}")
    return SYMBOL_CHOICES[index]


def index_of_symbol(symbol):
    return SYMBOL_CHOICES.index(symbol)


def direction_from_index(index):
    if not 0 <= index < len(DIRECTION_CHOICES):
        raise TransitionFormatError(f"No direction at choice {index}")
    return DIRECTION_CHOICES[index]


def index_of_direction(direction):
    return DIRECTION_CHOICES.index(direction)


def parse_state_name(text):
    name = (text or "").strip()
    if not name:
        raise TransitionFormatError("State name must not be empty.")
    return name


def _coerce(value, parser, what):
    if isinstance(value, (Symbol, Direction)):
        return value
    try:
        return parser(value)
    except ValueError as e:
        raise TransitionFormatError(f"Invalid {what}: {e}") from e


def parse_transition(current_state, read, new_state, write, direction):
    """Build a Transition from editor fields. New rules never carry a breakpoint."""
    return Transition(
        current_state=parse_state_name(current_state),
        read_symbol=_coerce(read, Symbol.parse, "read symbol"),
        new_state=parse_state_name(new_state),
        write_symbol=_coerce(write, Symbol.parse, "write symbol"),
        direction=_coerce(direction, Direction.parse, "direction"),
    )


def parse_rule(rule):
    """Parse 'state,read,new_state,write,dir', e.g. 'q0,1,q0,1,R'."""
    parts = rule.split(",")
    if len(parts) != 5:
        raise TransitionFormatError(
            f"Rule {rule!r} must have 5 comma separated fields: state,read,new_state,write,dir"
        )
    return parse_transition(*parts)
