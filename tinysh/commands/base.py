"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Optional
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True):
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name
    """
    if prefix_command:
        process.error(f"{process.command}: {message}\n")
    else:
        process.error(f"{message}\n")


def validate_arg_count(process: Process, min_args: int = 0, max_args: Optional[int] = None,
                       usage: str = "") -> bool:
    """
    Validate the number of arguments.

    Args:
        process: The process object
        min_args: Minimum required arguments
        max_args: Maximum allowed arguments (None = unlimited)
        usage: Usage string to display on error

    Returns:
        True if valid, False if invalid (error already written to stderr)
    """
    arg_count = len(process.args)

    if arg_count < min_args:
        write_error(process, "missing operand")
        if usage:
            process.error(f"usage: {usage}\n")
        return False

    if max_args is not None and arg_count > max_args:
        write_error(process, "too many arguments")
        if usage:
            process.error(f"usage: {usage}\n")
        return False

    return True


__all__ = [
    'write_error',
    'validate_arg_count',
]
