"""Utility functions."""

from .terminal import (
    clear_screen,
    console,
    err_console,
    print_error,
    print_named_paths,
    print_warning,
    setup_logging,
)

__all__ = [
    "clear_screen",
    "console",
    "err_console",
    "print_error",
    "print_named_paths",
    "print_warning",
    "setup_logging",
]
