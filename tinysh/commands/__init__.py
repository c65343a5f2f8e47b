"""
Builtin command implementations.

Each module in this package defines one builtin and registers it with
the register_command decorator. load_all_commands() imports them all so
the BUILTINS registry is populated.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = (
    'cd',
    'echo',
    'exit_cmd',
    'pwd',
    'type_cmd',
)


def register_command(name: str):
    """
    Register a function as the builtin called name.

    Example:
        @register_command('pwd')
        def cmd_pwd(process: Process) -> int:
            ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module and return the populated registry"""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')
    return BUILTINS
