"""Read-eval loop for tinysh"""

from typing import BinaryIO, Optional, TextIO
import logging
import sys

from .config import ShellConfig
from .context import CommandContext
from .dispatcher import Dispatcher
from .exceptions import ShellExit
from .launcher import ExternalLauncher
from .parser import parse_line

logger = logging.getLogger(__name__)


class Shell:
    """
    Interactive command interpreter.

    Reads one line at a time, dispatches it, and stops on end of input or
    on the exit builtin.

    Attributes:
        config: Session settings
        context: Interpreter state shared by all commands
        dispatcher: Routes each parsed line
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        context: Optional[CommandContext] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[BinaryIO] = None,
    ):
        self.config = config or ShellConfig()
        self.context = context or CommandContext()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout.buffer
        self.stderr = stderr or sys.stderr.buffer
        self.dispatcher = Dispatcher(
            self.context,
            self.stdout,
            self.stderr,
            launcher=ExternalLauncher(timeout=self.config.timeout),
        )
        self.last_exit_code = 0

    @property
    def interactive(self) -> bool:
        return self.stdin is sys.stdin and sys.stdin.isatty()

    def prompt(self) -> str:
        user = self.context.get_variable('USER') or ''
        return self.config.render_prompt(self.context.cwd, user)

    def execute(self, line: str) -> int:
        """
        Parse and run a single input line.

        Returns:
            Exit code of the command (0 for a blank line)

        Raises:
            ShellExit: When the line runs the exit builtin
        """
        invocation = parse_line(line)
        if invocation is None:
            return 0

        self.last_exit_code = self.dispatcher.dispatch(invocation)
        return self.last_exit_code

    def read_line(self) -> Optional[str]:
        """
        Show the prompt and read one line.

        Returns:
            The line, or None at end of input
        """
        if self.interactive:
            try:
                return input(self.prompt())
            except EOFError:
                return None

        self.stdout.write(self.prompt().encode('utf-8'))
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def run(self) -> int:
        """
        Run the read loop until end of input or exit.

        Returns:
            Exit status for the interpreter process
        """
        if self.interactive:
            enable_line_editing()

        while True:
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                # Discard the partial line and prompt again
                self.stdout.write(b'\n')
                self.stdout.flush()
                continue

            if line is None:
                logger.debug("end of input")
                if self.interactive:
                    self.stdout.write(b'\n')
                    self.stdout.flush()
                return self.last_exit_code

            try:
                self.execute(line)
            except ShellExit as e:
                return e.exit_code


def enable_line_editing() -> bool:
    """Load readline so input() gets line editing, where the platform has it"""
    try:
        import readline  # noqa: F401
    except ImportError:
        return False
    return True
