# app.py

import argparse
import sys
import time

from rich.console import Console
from rich.live import Live
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import DEFAULT_CONFIG_PATH, load_config, save_config
from driver.editor import (
    DIRECTION_CHOICES,
    SYMBOL_CHOICES,
    TransitionFormatError,
    direction_from_index,
    index_of_direction,
    index_of_symbol,
    parse_rule,
    parse_state_name,
    parse_transition,
    symbol_from_index,
)
from driver.render import render_machine, render_transitions, status_line
from driver.run_controller import RunController
from logger.logger import JSONLogger
from simulator.machine_types import Direction, Symbol
from simulator.turing_machine import MAX_SPEED_MS, MIN_SPEED_MS, TuringMachine

console = Console()


# === Utilities ===
def load_runtime_config(path):
    try:
        return load_config(path)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


def build_controller(config):
    machine = TuringMachine(
        start_state=config["start_state"],
        accept_state=config["accept_state"],
        reject_state=config["reject_state"],
        initial_tape_cells=config["initial_tape_cells"],
        speed_ms=config["speed_ms"],
    )
    logger = JSONLogger(config["output_directory"], config["log_file_prefix"], enabled=config["log_enabled"])
    return RunController(machine, logger=logger, log_steps=config["log_steps"])


def show_machine(controller, config):
    console.print(render_machine(controller.machine, config["tape_window_width"]))


def show_main_menu():
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")
    console.print("[1] Add Transition")
    console.print("[2] Update Transition")
    console.print("[3] Delete Transition")
    console.print("[4] Toggle Transition Breakpoint")
    console.print("[5] Toggle State Breakpoint")
    console.print("[6] Load Input")
    console.print("[7] Step")
    console.print("[8] Run")
    console.print("[9] Set Speed")
    console.print("[10] Reset")
    console.print("[11] Edit Config")
    console.print("[12] Exit")


def _choice_label(items):
    return " ".join(f"{idx}={item.display}" for idx, item in enumerate(items))


def ask_transition(current=None):
    """Prompt for a rule; symbol and direction are picked by choice index."""
    symbol_choices = [str(i) for i in range(len(SYMBOL_CHOICES))]
    direction_choices = [str(i) for i in range(len(DIRECTION_CHOICES))]

    current_state = Prompt.ask("Current state", default=current.current_state if current else "")
    read_idx = IntPrompt.ask(
        f"Read symbol ({_choice_label(SYMBOL_CHOICES)})", choices=symbol_choices,
        default=index_of_symbol(current.read_symbol if current else Symbol.BLANK),
    )
    new_state = Prompt.ask("New state", default=current.new_state if current else "")
    write_idx = IntPrompt.ask(
        f"Write symbol ({_choice_label(SYMBOL_CHOICES)})", choices=symbol_choices,
        default=index_of_symbol(current.write_symbol if current else Symbol.BLANK),
    )
    dir_idx = IntPrompt.ask(
        f"Direction ({_choice_label(DIRECTION_CHOICES)})", choices=direction_choices,
        default=index_of_direction(current.direction if current else Direction.RIGHT),
    )
    return parse_transition(
        current_state,
        symbol_from_index(read_idx),
        new_state,
        symbol_from_index(write_idx),
        direction_from_index(dir_idx),
    )


def ask_index(controller):
    count = len(controller.machine.transitions)
    if count == 0:
        console.print("[yellow]No transitions defined.[/yellow]")
        return None
    console.print(render_transitions(controller.machine))
    idx = IntPrompt.ask("Transition index")
    if idx < 0 or idx >= count:
        console.print("[red]Invalid index.[/red]")
        return None
    return idx


# === Menu handlers ===
def handle_add(controller):
    console.print("\n[bold]Add Transition[/bold]")
    try:
        transition = ask_transition()
    except TransitionFormatError as e:
        console.print(f"[red]{e}[/red]")
        return
    if controller.add_transition(transition):
        console.print("[green]Transition added.[/green]")
    else:
        console.print(
            f"[yellow]A rule for ({transition.current_state}, {transition.read_symbol.display}) "
            f"already exists; nothing added.[/yellow]"
        )


def handle_update(controller):
    console.print("\n[bold]Update Transition[/bold]")
    idx = ask_index(controller)
    if idx is None:
        return
    try:
        transition = ask_transition(controller.machine.transitions[idx])
    except TransitionFormatError as e:
        console.print(f"[red]{e}[/red]")
        return
    if controller.update_transition(idx, transition):
        console.print("[green]Transition updated.[/green]")
    else:
        console.print("[yellow]Another rule already uses that state/symbol pair; not updated.[/yellow]")


def handle_delete(controller):
    console.print("\n[bold]Delete Transition[/bold]")
    idx = ask_index(controller)
    if idx is None:
        return
    controller.delete_transition(idx)
    console.print("[green]Transition deleted.[/green]")


def handle_toggle_transition_bp(controller):
    console.print("\n[bold]Toggle Transition Breakpoint[/bold]")
    idx = ask_index(controller)
    if idx is None:
        return
    enabled = controller.toggle_transition_breakpoint(idx)
    console.print(f"[cyan]Breakpoint {'set' if enabled else 'cleared'} on transition {idx}.[/cyan]")


def handle_toggle_state_bp(controller):
    console.print("\n[bold]Toggle State Breakpoint[/bold]")
    try:
        name = parse_state_name(Prompt.ask("State name"))
    except TransitionFormatError as e:
        console.print(f"[red]{e}[/red]")
        return
    enabled = controller.toggle_state_breakpoint(name)
    console.print(f"[cyan]State breakpoint {'set' if enabled else 'cleared'} on {name}.[/cyan]")


def handle_load_input(controller):
    text = Prompt.ask("Tape input (0, 1, _)", default="")
    try:
        controller.load_input(text)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return
    console.print("[green]Input loaded, machine reset.[/green]")


def handle_step(controller, config):
    if controller.machine.status.is_terminal:
        console.print(f"[yellow]Machine already {controller.machine.status.display}. Reset to run again.[/yellow]")
        return
    controller.step_once()
    show_machine(controller, config)


def handle_run(controller, config):
    if not controller.run():
        console.print(f"[yellow]Machine already {controller.machine.status.display}. Reset to run again.[/yellow]")
        return

    console.print(f"[cyan]Running every {controller.machine.speed_ms} ms (Ctrl+C to stop)...[/cyan]")
    width = config["tape_window_width"]
    try:
        with Live(render_machine(controller.machine, width), console=console, refresh_per_second=20) as live:
            while controller.running:
                if controller.poll():
                    live.update(render_machine(controller.machine, width))
                else:
                    time.sleep(min(controller.timer.remaining() or 0.0, 0.05))
    except KeyboardInterrupt:
        controller.stop()
        console.print("[yellow]Stopped.[/yellow]")

    status = controller.machine.status
    if status.is_terminal:
        color = "green" if status.display == "Accepted" else "red"
        console.print(f"[bold {color}]{status.display}[/bold {color}] after {controller.machine.step_count} steps.")
    else:
        console.print(f"[yellow]Paused.[/yellow] {status_line(controller.machine)}")


def handle_speed(controller):
    ms = IntPrompt.ask(f"Speed in ms ({MIN_SPEED_MS}-{MAX_SPEED_MS})", default=controller.machine.speed_ms)
    speed = controller.set_speed(ms)
    console.print(f"[green]Speed set to {speed} ms.[/green]")


def handle_reset(controller):
    controller.reset()
    console.print("[green]Machine reset.[/green]")


def handle_edit_config(config, path):
    """Prompt for new settings and save them. Returns None when the save is refused."""
    console.print("\n[bold]Edit Configuration[/bold]")

    start_state = Prompt.ask("Start state", default=config["start_state"])
    accept_state = Prompt.ask("Accept state", default=config["accept_state"])
    reject_state = Prompt.ask("Reject state", default=config["reject_state"])
    speed_ms = IntPrompt.ask("Speed (ms)", default=config["speed_ms"])
    tape_window_width = IntPrompt.ask("Tape window width", default=config["tape_window_width"])
    log_enabled = Confirm.ask("Write run logs?", default=config["log_enabled"])
    log_steps = Confirm.ask("Log every step?", default=config["log_steps"])

    updated = dict(config)
    updated.update({
        "start_state": start_state.strip(),
        "accept_state": accept_state.strip(),
        "reject_state": reject_state.strip(),
        "speed_ms": speed_ms,
        "tape_window_width": tape_window_width,
        "log_enabled": log_enabled,
        "log_steps": log_steps,
    })

    try:
        save_config(updated, path)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Configuration not saved: {e}[/red]")
        return None
    console.print("[green]Configuration updated successfully.[/green]")
    return updated


def apply_config(controller, config):
    machine = controller.machine
    states = (config["start_state"], config["accept_state"], config["reject_state"])
    # Redefining the states resets the run; skip it when they are unchanged
    if states != (machine.start_state, machine.accept_state, machine.reject_state):
        machine.redefine_states(*states)
    controller.set_speed(config["speed_ms"])
    controller.log_steps = config["log_steps"]
    controller.logger.enabled = config["log_enabled"]


def handle_config_menu(controller, config, path):
    """Edit, save and apply the config. A refused save leaves the machine untouched."""
    updated = handle_edit_config(config, path)
    if updated is None:
        return config
    apply_config(controller, updated)
    return updated


def interactive_main(config_path):
    config = load_runtime_config(config_path)
    controller = build_controller(config)

    handlers = {
        "1": lambda: handle_add(controller),
        "2": lambda: handle_update(controller),
        "3": lambda: handle_delete(controller),
        "4": lambda: handle_toggle_transition_bp(controller),
        "5": lambda: handle_toggle_state_bp(controller),
        "6": lambda: handle_load_input(controller),
        "7": lambda: handle_step(controller, config),
        "8": lambda: handle_run(controller, config),
        "9": lambda: handle_speed(controller),
        "10": lambda: handle_reset(controller),
    }

    while True:
        show_machine(controller, config)
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=[str(i) for i in range(1, 13)], default="12")

        if choice in handlers:
            handlers[choice]()
        elif choice == "11":
            config = handle_config_menu(controller, config, config_path)
        elif choice == "12":
            console.print("[bold green]Goodbye![/bold green]")
            break


# === CLI Mode for Automation ===
def cli_main(args):
    config = load_runtime_config(args.config)
    controller = build_controller(config)

    try:
        for rule in args.rule or []:
            transition = parse_rule(rule)
            if not controller.add_transition(transition):
                console.print(f"[yellow]Duplicate rule ignored: {rule}[/yellow]")
        for name in args.breakpoint_state or []:
            controller.toggle_state_breakpoint(parse_state_name(name))
        if args.input:
            controller.load_input(args.input)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if args.run:
        taken = controller.run_until_pause(max_steps=args.max_steps)
        console.print(f"[cyan]Executed {taken} steps.[/cyan]")

    show_machine(controller, config)
    status = controller.machine.status
    if status.is_terminal:
        sys.exit(0 if status.display == "Accepted" else 2)


def main():
    parser = argparse.ArgumentParser(description="Single-tape Turing Machine Simulator")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime config JSON")
    parser.add_argument("--rule", action="append",
                        help="Transition as state,read,new_state,write,dir (repeatable), e.g. q0,1,q0,1,R")
    parser.add_argument("--input", help="Initial tape contents written from position 0, e.g. 11")
    parser.add_argument("--breakpoint-state", action="append", help="Pause on entry to this state (repeatable)")
    parser.add_argument("--run", action="store_true", help="Run until accept, reject or breakpoint")
    parser.add_argument("--max-steps", type=int, default=1000000, help="Step limit for --run")
    args = parser.parse_args()

    if args.rule or args.input or args.run:
        cli_main(args)
    else:
        interactive_main(args.config)


if __name__ == "__main__":
    main()
