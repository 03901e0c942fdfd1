import json
import os
from datetime import datetime

from rich.console import Console

console = Console()

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "start_state": "q0",
    "accept_state": "qa",
    "reject_state": "qr",
    "speed_ms": 500,
    "initial_tape_cells": 101,
    "tape_window_width": 28,
    "log_enabled": True,
    "log_steps": True,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "start_state": str,
    "accept_state": str,
    "reject_state": str,
    "speed_ms": int,
    "initial_tape_cells": int,
    "tape_window_width": int,
    "log_enabled": bool,
    "log_steps": bool,
    "output_directory": str,
    "log_file_prefix": str,
}

SPEED_RANGE = (50, 2000)


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; keep the two apart
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    for key in ("start_state", "accept_state", "reject_state"):
        if not config[key].strip():
            raise ValueError(f"Config key '{key}' must be a non-empty state name.")

    low, high = SPEED_RANGE
    if not low <= config["speed_ms"] <= high:
        raise ValueError(f"speed_ms must be within [{low}, {high}], got {config['speed_ms']}.")
    if config["tape_window_width"] <= 0:
        raise ValueError("tape_window_width must be positive.")
    if config["initial_tape_cells"] <= 0 or config["initial_tape_cells"] % 2 == 0:
        raise ValueError("initial_tape_cells must be a positive odd number.")


def load_config(path=DEFAULT_CONFIG_PATH, verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        console.print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            console.print(f"  {key}: {value}")

    return config


def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
