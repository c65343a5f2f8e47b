"""External program execution.

Children run to completion with both output streams captured; nothing is
connected live to the terminal. A child that reads stdin therefore blocks
until a timeout, if one is configured, or forever.
"""

from dataclasses import dataclass
from typing import BinaryIO, List, Optional
import logging
import subprocess

from .exceptions import LaunchError, translate_os_error

logger = logging.getLogger(__name__)

EXIT_CODE_TIMEOUT = 124


@dataclass
class ProcessOutcome:
    """Result of one external program invocation"""

    stdout: bytes = b''
    stderr: bytes = b''
    exit_code: int = 0

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @classmethod
    def from_error(cls, error: LaunchError) -> 'ProcessOutcome':
        """Build a failed outcome for a child that never ran."""
        return cls(stderr=f"{error.message}\n".encode('utf-8'),
                   exit_code=error.exit_code)


class ExternalLauncher:
    """Spawns external programs and relays their captured output.

    Attributes:
        timeout: Seconds to wait for a child before killing it
            (None waits indefinitely)
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def launch(self, executable: str, argv: List[str], cwd: str) -> ProcessOutcome:
        """
        Run a program and wait for it to finish.

        Args:
            executable: Path of the program image to run
            argv: Argument vector; argv[0] is the name the child sees
            cwd: Working directory for the child

        Returns:
            ProcessOutcome with the captured streams and exit code.
            Spawn failures are returned as failed outcomes, never raised.
        """
        name = argv[0] if argv else executable
        logger.debug("spawning %s as %r in %s", executable, argv, cwd)

        try:
            completed = subprocess.run(
                argv,
                executable=executable,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.debug("%s killed after %ss", executable, self.timeout)
            return ProcessOutcome(
                stdout=e.stdout or b'',
                stderr=(e.stderr or b'') + f"{name}: timed out after {self.timeout:g}s\n".encode('utf-8'),
                exit_code=EXIT_CODE_TIMEOUT,
            )
        except OSError as e:
            error = translate_os_error(name, executable, e)
            logger.debug("spawn of %s failed: %s", executable, error)
            return ProcessOutcome.from_error(error)

        logger.debug("%s exited with %d", executable, completed.returncode)
        return ProcessOutcome(
            stdout=completed.stdout,
            stderr=completed.stderr,
            exit_code=completed.returncode,
        )

    @staticmethod
    def relay(outcome: ProcessOutcome, stdout: BinaryIO, stderr: BinaryIO) -> int:
        """
        Copy the relevant captured stream to the interpreter's output.

        Success relays stdout; failure relays stderr. Bytes are written
        verbatim.

        Returns:
            The outcome's exit code
        """
        if outcome.success:
            stdout.write(outcome.stdout)
            stdout.flush()
        else:
            stderr.write(outcome.stderr)
            stderr.flush()
        return outcome.exit_code
