"""
ECHO command - print arguments.
"""

from ..process import Process
from . import register_command


@register_command('echo')
def cmd_echo(process: Process) -> int:
    """
    Print arguments separated by single spaces

    Usage: echo [ARG ...]
    """
    process.write(' '.join(process.args) + '\n')
    return 0
