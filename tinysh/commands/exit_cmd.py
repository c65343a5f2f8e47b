"""
EXIT command - leave the shell.
"""

from ..exceptions import InvalidArgumentError, ShellExit
from ..process import Process
from . import register_command


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the shell

    Usage: exit [N]

    Raises ShellExit, which the read loop turns into the process exit
    status (0 unless N is given). Running children are not waited for.
    """
    if not process.args:
        raise ShellExit(0)

    try:
        code = int(process.args[0])
    except ValueError:
        error = InvalidArgumentError('exit', process.args[0], "numeric argument required")
        process.error(f"{error}\n")
        raise ShellExit(error.exit_code)

    raise ShellExit(code & 0xFF)
