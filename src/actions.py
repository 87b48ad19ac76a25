#!/usr/bin/env python3
"""
GitHub Actions runner helpers: inputs, outputs and workflow commands
"""

import os
import uuid


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def warning(message: str) -> None:
    """Emit a warning annotation"""
    print(f"::warning::{_escape_data(message)}")


def debug(message: str) -> None:
    """Emit a debug line (only shown when step debug logging is on)"""
    print(f"::debug::{_escape_data(message)}")


def get_input(name: str, required: bool = False, default: str = "") -> str:
    """Read an action input the way the runner exposes it"""
    value = os.getenv(f"INPUT_{name.upper()}", "").strip()
    if not value:
        if required:
            raise ValueError(f"Input required and not supplied: {name}")
        return default
    return value


def set_output(name: str, value: str) -> None:
    """Set a step output for the GitHub Actions workflow"""
    output_file = os.getenv("GITHUB_OUTPUT")
    if not output_file:
        debug(f"GITHUB_OUTPUT not set, output {name} has {len(value)} characters")
        return

    with open(output_file, "a", encoding="utf-8") as f:
        delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
