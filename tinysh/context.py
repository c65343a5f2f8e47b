"""
CommandContext - Encapsulates the interpreter state needed for command execution.

This module provides the CommandContext dataclass that holds the working
directory and environment explicitly, so commands never touch the
process-wide working directory and can be tested without real chdir calls.
"""

from dataclasses import dataclass, field
from typing import MutableMapping, Optional
import logging
import os

from .exceptions import DirectoryError

logger = logging.getLogger(__name__)


def _process_cwd() -> str:
    return os.getcwd()


@dataclass
class CommandContext:
    """
    Encapsulates all state needed for command execution.

    This provides commands with access to:
    - Current working directory
    - Environment variables (a live mapping, read fresh on every lookup)

    Example:
        >>> from tinysh.context import CommandContext
        >>> ctx = CommandContext(cwd='/tmp', env={'HOME': '/home/alice'})
        >>> ctx.resolve_path('file.txt')
        '/tmp/file.txt'
        >>> ctx.expand_home('~/docs')
        '/home/alice/docs'
    """

    cwd: str = field(default_factory=_process_cwd)
    env: MutableMapping[str, str] = field(default_factory=lambda: os.environ)

    def resolve_path(self, path: str) -> str:
        """
        Resolve relative paths to absolute paths.

        Args:
            path: Path to resolve (relative or absolute)

        Returns:
            Absolute path normalized

        Examples:
            >>> ctx = CommandContext(cwd='/home/user')
            >>> ctx.resolve_path('file.txt')
            '/home/user/file.txt'
            >>> ctx.resolve_path('/tmp/file.txt')
            '/tmp/file.txt'
            >>> ctx.resolve_path('../data')
            '/home/data'
        """
        if not path:
            return self.cwd
        if path.startswith('/'):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.cwd, path))

    def get_variable(self, name: str) -> Optional[str]:
        """Get an environment variable, or None if unset."""
        return self.env.get(name)

    def home_directory(self) -> str:
        """
        Get the invoking user's home directory.

        HOME from the context environment wins; otherwise fall back to
        the password database via os.path.expanduser.
        """
        home = self.get_variable('HOME')
        if home:
            return home
        return os.path.expanduser('~')

    def expand_home(self, path: str) -> str:
        """
        Replace a literal leading '~' with the home directory.

        Only '~' on its own or followed by '/' is expanded; '~user'
        forms are returned unchanged.

        Examples:
            >>> ctx = CommandContext(env={'HOME': '/home/alice'})
            >>> ctx.expand_home('~')
            '/home/alice'
            >>> ctx.expand_home('~bob/x')
            '~bob/x'
        """
        if path == '~' or path.startswith('~/'):
            return self.home_directory() + path[1:]
        return path

    def change_directory(self, path: str) -> str:
        """
        Change the current working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Returns:
            The new working directory

        Raises:
            DirectoryError: If the target is not an accessible directory.
                The working directory is left unchanged.
        """
        target = self.resolve_path(path)
        if not os.path.isdir(target) or not os.access(target, os.X_OK):
            raise DirectoryError(path)

        logger.debug("cwd %s -> %s", self.cwd, target)
        self.cwd = target
        return self.cwd

    def __repr__(self):
        """String representation for debugging"""
        return f"CommandContext(cwd={self.cwd!r}, env_vars={len(self.env)})"
