"""Command lookup along the PATH search path.

This module provides the PathResolver class which handles:
- Splitting the search path read from the environment
- Probing each directory, in order, for an executable match
- Direct lookup of names that already contain a directory part
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional
import logging
import os
import stat

from .context import CommandContext

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True)
class ResolvedExecutable:
    """An executable found for a command name.

    Attributes:
        name: Command name as typed
        path: Candidate path as built from the search path entry (for display)
        real_path: Same file anchored at the interpreter's cwd (for spawning)
    """

    name: str
    path: str
    real_path: str


class PathResolver:
    """Resolves bare command names to executables.

    The search path is read from the context environment on every call,
    so a PATH change takes effect on the very next lookup. Results are
    never cached.

    Attributes:
        context: Interpreter state supplying env and cwd
    """

    def __init__(self, context: CommandContext):
        self.context = context

    def search_path(self) -> List[str]:
        """Get the ordered search path directories.

        Empty segments are dropped.

        Examples:
            PATH='/usr/bin::/bin' -> ['/usr/bin', '/bin']
            PATH unset -> []
        """
        value = self.context.get_variable('PATH') or ''
        return [d for d in value.split(os.pathsep) if d]

    def candidates(self, name: str) -> Iterator[str]:
        """Yield candidate paths for name in search order."""
        for directory in self.search_path():
            yield os.path.join(directory, name)

    def resolve(self, name: str) -> Optional[ResolvedExecutable]:
        """Find the executable that name refers to.

        Args:
            name: Command name

        Returns:
            The first accepted candidate, or None when nothing matches

        Note:
            A name containing '/' is not searched for: it is checked
            directly, relative to the interpreter's cwd.
        """
        if not name:
            return None

        if '/' in name:
            return self._check(name, name)

        for candidate in self.candidates(name):
            resolved = self._check(name, candidate)
            if resolved is not None:
                logger.debug("resolved %s -> %s", name, resolved.path)
                return resolved

        logger.debug("%s not found in search path", name)
        return None

    def _check(self, name: str, candidate: str) -> Optional[ResolvedExecutable]:
        real_path = self.context.resolve_path(candidate)
        if not os.path.exists(real_path):
            return None

        try:
            mode = os.stat(real_path).st_mode
        except OSError as e:
            logger.debug("skipping %s: %s", candidate, e)
            return None

        # Any execute bit counts, whichever class the caller falls in
        if not mode & EXECUTE_BITS:
            logger.debug("skipping %s: no execute permission", candidate)
            return None

        return ResolvedExecutable(name=name, path=candidate, real_path=real_path)
