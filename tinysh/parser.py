"""
Input line splitting.

No quoting, escaping or expansion: a line is cut on runs of whitespace,
the first word is the command name and the rest are its arguments.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CommandInvocation:
    """A command name and its arguments, as read from one input line"""

    name: str
    args: List[str] = field(default_factory=list)

    def argv(self) -> List[str]:
        """Argument vector for a child process, name first"""
        return [self.name] + list(self.args)


def parse_line(line: str) -> Optional[CommandInvocation]:
    """
    Split one input line into a CommandInvocation.

    Args:
        line: Raw input, trailing newline allowed

    Returns:
        The invocation, or None for a blank line

    Examples:
        >>> parse_line('echo  a   b\\n')
        CommandInvocation(name='echo', args=['a', 'b'])
        >>> parse_line('   ') is None
        True
    """
    words = line.rstrip('\r\n').split()
    if not words:
        return None
    return CommandInvocation(name=words[0], args=words[1:])
