"""Logging helpers.

Status lines are printed with a bracketed tag, e.g. ``[api] Sending request``.
Warnings and errors go to stderr so stdout stays usable for prompts.
"""

import sys


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_verbose(enabled: bool, tag: str, message: str) -> None:
    """Print a tagged status line when verbose output is on."""
    if enabled:
        print(f"[{tag}] {message}")


def log_warn(message: str) -> None:
    print(f"[warn] {message}", file=sys.stderr)


def log_error(message: str) -> None:
    print(f"[error] {message}", file=sys.stderr)
