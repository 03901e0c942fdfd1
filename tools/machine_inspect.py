import argparse

from driver.editor import SYMBOL_CHOICES, parse_rule
from simulator.turing_machine import TuringMachine


def build_grid(transitions):
    """
    State x symbol grid of compact actions ('1Rq1'); 'REJECT' where no rule exists.
    States appear in first-seen order.
    """
    states = []
    for t in transitions:
        if t.current_state not in states:
            states.append(t.current_state)

    lookup = {t.key: t for t in transitions}
    grid = []
    for state in states:
        row = [state]
        for symbol in SYMBOL_CHOICES:
            t = lookup.get((state, symbol))
            if t is None:
                row.append("REJECT")
            else:
                row.append(t.compact() + ("*" if t.has_breakpoint else ""))
        grid.append(row)
    return grid


def latex_table(grid):
    lines = [r"\begin{array}{c|" + "c" * len(SYMBOL_CHOICES) + "}"]
    lines.append(
        "State/Symbol & " + " & ".join(f"\\text{{{s.display}}}".replace("_", r"\_") for s in SYMBOL_CHOICES) + r" \\ \hline"
    )
    for row in grid:
        escaped = [cell.replace("_", r"\_") for cell in row]
        lines.append(" & ".join(escaped) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def pretty_print_machine(machine):
    """Print the rule set as a state x symbol table, then as LaTeX."""
    grid = build_grid(machine.transitions)

    print("\n=== Transition Table ===")
    print(f"Start: {machine.start_state}  Accept: {machine.accept_state}  Reject: {machine.reject_state}")
    header = [" "] + [s.display for s in SYMBOL_CHOICES]
    print("\t".join(header))
    for row in grid:
        print("\t".join([f"State {row[0]}"] + row[1:]))

    print("\n=== LaTeX Table ===")
    print(latex_table(grid))


def main():
    parser = argparse.ArgumentParser(description="Turing Machine Rule Set Inspector")
    parser.add_argument("--rule", action="append", required=True,
                        help="Rule as state,read,new_state,write,dir (repeatable), e.g. q0,1,q0,1,R")
    parser.add_argument("--start", default="q0", help="Start state (default=q0)")
    parser.add_argument("--accept", default="qa", help="Accept state (default=qa)")
    parser.add_argument("--reject", default="qr", help="Reject state (default=qr)")
    args = parser.parse_args()

    machine = TuringMachine(args.start, args.accept, args.reject)
    for rule in args.rule:
        transition = parse_rule(rule)
        if not machine.add_transition(transition):
            print(f"[WARNING] Duplicate rule for {transition.key[0]}/{transition.key[1].display} ignored: {rule}")

    pretty_print_machine(machine)


if __name__ == "__main__":
    main()
