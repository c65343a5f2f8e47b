"""Process class for builtin command execution"""

import io
from typing import BinaryIO, Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CommandContext
    from .path_resolver import PathResolver

from .exceptions import ShellExit


class Process:
    """Represents a single builtin command invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
        executor: Optional[Callable] = None,
        context: Optional['CommandContext'] = None,
        resolver: Optional['PathResolver'] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments
            stdout: Binary output stream (an in-memory buffer by default)
            stderr: Binary error stream (an in-memory buffer by default)
            executor: Callable that executes the command
            context: CommandContext with the interpreter state
            resolver: PathResolver for commands that look up programs
        """
        self.command = command
        self.args = args
        self.stdout = stdout if stdout is not None else io.BytesIO()
        self.stderr = stderr if stderr is not None else io.BytesIO()
        self.executor = executor

        if context is None:
            from .context import CommandContext
            context = CommandContext()
        self.context = context

        if resolver is None:
            from .path_resolver import PathResolver
            resolver = PathResolver(self.context)
        self.resolver = resolver

        self.exit_code = 0

    def write(self, text: str) -> None:
        """Write text to stdout"""
        self.stdout.write(text.encode('utf-8'))

    def error(self, text: str) -> None:
        """Write text to stderr"""
        self.stderr.write(text.encode('utf-8'))

    def execute(self) -> int:
        """
        Execute the process

        Returns:
            Exit code (0 for success, non-zero for error)

        Raises:
            ShellExit: Propagated from the exit builtin
        """
        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except ShellExit:
            raise
        except Exception as e:
            self.error(f"Error executing '{self.command}': {str(e)}\n")
            self.exit_code = 1
        finally:
            self.stdout.flush()
            self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> bytes:
        """Get stdout contents (in-memory streams only)"""
        return self.stdout.getvalue()

    def get_stderr(self) -> bytes:
        """Get stderr contents (in-memory streams only)"""
        return self.stderr.getvalue()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
