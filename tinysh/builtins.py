"""
Built-in shell commands registry.

The set of builtin names is fixed by BuiltinKind. The implementations live
in the commands/ directory; this module loads them and exposes lookups.
"""

from enum import Enum
from typing import Callable, Optional

from .commands import load_all_commands


class BuiltinKind(Enum):
    """The reserved command names handled inside the shell"""

    EXIT = 'exit'
    ECHO = 'echo'
    TYPE = 'type'
    PWD = 'pwd'
    CD = 'cd'


def describe(name: str) -> Optional[BuiltinKind]:
    """
    Get the builtin kind for a name, without running anything.

    Matching is exact and case-sensitive.

    Example:
        >>> describe('cd')
        <BuiltinKind.CD: 'cd'>
        >>> describe('CD') is None
        True
    """
    try:
        return BuiltinKind(name)
    except ValueError:
        return None


def is_builtin(name: str) -> bool:
    """Check whether name is a shell builtin"""
    return describe(name) is not None


def get_builtin(command: str) -> Optional[Callable]:
    """
    Get a built-in command executor.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('echo')
        >>> if executor:
        ...     executor(process)
    """
    kind = describe(command)
    if kind is None:
        return None
    return BUILTINS.get(kind.value)


# Load all command modules to populate the registry
BUILTINS = load_all_commands()
