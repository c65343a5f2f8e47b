"""
Custom exception hierarchy for tinysh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from tinysh.exceptions import DirectoryError

    try:
        context.change_directory(path)
    except DirectoryError as e:
        print(e)
        return e.exit_code
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class ShellExit(Exception):
    """
    Raised by the exit builtin to stop the read loop.

    Not a ShellError: it is control flow, and must pass through the
    generic error handling in Process.execute untouched.
    """

    def __init__(self, exit_code: int = 0):
        super().__init__(exit_code)
        self.exit_code = exit_code


class ConfigError(ShellError):
    """
    Raised when a TINYSH_* setting cannot be parsed.

    Example:
        raise ConfigError("TINYSH_TIMEOUT", "abc")
    """

    def __init__(self, variable: str, value: str, details: Optional[str] = None):
        message = f"{variable}: invalid value '{value}'"
        if details:
            message = f"{message} ({details})"
        super().__init__(message, exit_code=2)
        self.variable = variable
        self.value = value


# =============================================================================
# File System Errors
# =============================================================================

class DirectoryError(ShellError):
    """
    Raised when the working directory cannot be changed.

    Example:
        raise DirectoryError("/does/not/exist")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"cd: {path}: No such file or directory"
        super().__init__(message, exit_code=1)
        self.path = path


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is not found.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=127)


class InvalidArgumentError(CommandError):
    """
    Raised when invalid arguments are provided to a command.

    Example:
        raise InvalidArgumentError("exit", "abc", "numeric argument required")
    """

    def __init__(self, command: str, argument: str, message: Optional[str] = None):
        if message is None:
            message = f"{command}: {argument}: invalid argument"
        else:
            message = f"{command}: {argument}: {message}"
        super().__init__(command, message, exit_code=2)
        self.argument = argument


class LaunchError(CommandError):
    """
    Raised when the operating system refuses to start a child process.

    Exit codes follow the usual shell convention: 127 when the executable
    vanished, 126 when it exists but cannot be executed.

    Example:
        raise LaunchError("ls", "/bin/ls", "Permission denied", exit_code=126)
    """

    def __init__(self, command: str, path: str, reason: str, exit_code: int = 126):
        message = f"{command}: {reason}"
        super().__init__(command, message, exit_code=exit_code)
        self.path = path
        self.reason = reason


def translate_os_error(command: str, path: str, error: OSError) -> LaunchError:
    """
    Translate an OSError raised while spawning a child into a LaunchError.

    Args:
        command: Command name as typed by the user
        path: Executable path that was being spawned
        error: The OSError from the process creation call

    Returns:
        LaunchError carrying the matching exit code

    Example:
        try:
            subprocess.run([...])
        except OSError as e:
            raise translate_os_error(name, path, e)
    """
    reason = error.strerror or str(error)
    if isinstance(error, FileNotFoundError):
        return LaunchError(command, path, reason, exit_code=127)
    return LaunchError(command, path, reason, exit_code=126)
