"""
CD command - change the working directory.
"""

from ..exceptions import DirectoryError
from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command('cd')
def cmd_cd(process: Process) -> int:
    """
    Change the working directory

    Usage: cd [DIR]

    A leading '~' is replaced with the home directory; with no DIR, go home.
    On failure the working directory is left unchanged.
    """
    if not validate_arg_count(process, max_args=1, usage="cd [DIR]"):
        return 1

    path = process.args[0] if process.args else '~'
    path = process.context.expand_home(path)

    try:
        process.context.change_directory(path)
    except DirectoryError as e:
        process.write(f"{e}\n")
        return e.exit_code

    return 0
