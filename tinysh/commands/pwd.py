"""
PWD command - print working directory.
"""

from ..process import Process
from . import register_command


@register_command('pwd')
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    Note:
        Reports process.context.cwd, the interpreter's own working directory.
    """
    process.write(f"{process.context.cwd}\n")
    return 0
