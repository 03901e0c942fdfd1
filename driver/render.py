from rich import box
from rich.console import Group
from rich.table import Table
from rich.text import Text

STATUS_COLORS = {
    "Idle": "white",
    "Running": "cyan",
    "Accepted": "green",
    "Rejected": "red",
}


def status_line(machine):
    text = (
        f"State: {machine.current_state}  |  Steps: {machine.step_count}  |  "
        f"Status: {machine.status.display}"
    )
    state_bps = machine.breakpoints.states()
    if state_bps:
        text += f"   State BPs: {', '.join(state_bps)}"
    return text


def render_status(machine):
    color = STATUS_COLORS.get(machine.status.display, "white")
    line = Text(status_line(machine))
    line.highlight_words([machine.status.display], style=f"bold {color}")
    return line


def render_tape(machine, width=28):
    """Tape strip centered on the head; head cell highlighted."""
    table = Table(show_header=False, box=box.SQUARE, padding=(0, 1))
    cells = machine.tape_window(machine.head, width)
    for _ in cells:
        table.add_column(justify="center", min_width=2)

    symbols = []
    positions = []
    for pos, symbol, is_head in cells:
        style = "bold black on yellow" if is_head else ""
        symbols.append(Text(symbol.display, style=style))
        positions.append(Text(str(pos), style="dim"))
    table.add_row(*symbols)
    table.add_row(*positions)
    return table


def render_transitions(machine):
    table = Table(title="Transitions", show_header=True, header_style="bold magenta")
    table.add_column("Index", justify="center")
    table.add_column("State", justify="center")
    table.add_column("Read", justify="center")
    table.add_column("New State", justify="center")
    table.add_column("Write", justify="center")
    table.add_column("Dir", justify="center")

    for idx, t in enumerate(machine.transitions):
        style = "bold red" if t.has_breakpoint else None
        table.add_row(
            str(idx),
            t.current_state,
            t.read_symbol.display,
            t.new_state,
            t.write_symbol.display,
            t.direction.display,
            style=style,
        )
    return table


def render_machine(machine, width=28):
    return Group(render_status(machine), render_tape(machine, width), render_transitions(machine))
