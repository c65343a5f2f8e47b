"""
TYPE command - describe how a name would be interpreted.
"""

from ..builtins import is_builtin
from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command('type')
def cmd_type(process: Process) -> int:
    """
    Report whether each NAME is a builtin or an executable on PATH

    Usage: type NAME [NAME ...]

    Examples:
        type echo  -> echo is a shell builtin
        type ls    -> ls is /bin/ls
        type nope  -> nope: not found
    """
    if not validate_arg_count(process, min_args=1, usage="type NAME [NAME ...]"):
        return 1

    exit_code = 0
    for name in process.args:
        if is_builtin(name):
            process.write(f"{name} is a shell builtin\n")
            continue

        resolved = process.resolver.resolve(name)
        if resolved is not None:
            process.write(f"{name} is {resolved.path}\n")
        else:
            process.write(f"{name}: not found\n")
            exit_code = 1

    return exit_code
