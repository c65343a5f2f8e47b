"""Routing of parsed commands to builtins or external programs"""

from typing import BinaryIO, Optional
import logging

from .builtins import get_builtin
from .context import CommandContext
from .exceptions import CommandNotFoundError
from .launcher import ExternalLauncher
from .parser import CommandInvocation
from .path_resolver import PathResolver
from .process import Process

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Decides, per invocation, between a builtin and an external program.

    Holds no state between invocations besides the shared context.

    Attributes:
        context: Interpreter state (cwd, env)
        stdout: Binary stream for command output
        stderr: Binary stream for command errors
        resolver: PathResolver used for lookups
        launcher: ExternalLauncher used to run programs
    """

    def __init__(
        self,
        context: CommandContext,
        stdout: BinaryIO,
        stderr: BinaryIO,
        resolver: Optional[PathResolver] = None,
        launcher: Optional[ExternalLauncher] = None,
    ):
        self.context = context
        self.stdout = stdout
        self.stderr = stderr
        self.resolver = resolver or PathResolver(context)
        self.launcher = launcher or ExternalLauncher()

    def dispatch(self, invocation: CommandInvocation) -> int:
        """
        Run one command.

        Args:
            invocation: Command name and arguments

        Returns:
            Exit code of the command

        Raises:
            ShellExit: When the exit builtin runs
        """
        if not invocation.name:
            return 0

        executor = get_builtin(invocation.name)
        if executor is not None:
            process = Process(
                command=invocation.name,
                args=invocation.args,
                stdout=self.stdout,
                stderr=self.stderr,
                executor=executor,
                context=self.context,
                resolver=self.resolver,
            )
            return process.execute()

        resolved = self.resolver.resolve(invocation.name)
        if resolved is None:
            error = CommandNotFoundError(invocation.name)
            self.stdout.write(f"{error}\n".encode('utf-8'))
            self.stdout.flush()
            return error.exit_code

        outcome = self.launcher.launch(resolved.real_path, invocation.argv(), self.context.cwd)
        return self.launcher.relay(outcome, self.stdout, self.stderr)
