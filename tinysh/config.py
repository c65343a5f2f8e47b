"""
Shell configuration read from TINYSH_* environment variables.

Variables:
    TINYSH_PROMPT     Prompt template; {cwd} and {user} are substituted
    TINYSH_TIMEOUT    Seconds before an external program is killed (unset: never)
    TINYSH_LOG_LEVEL  Logging level name (default WARNING)
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import math
import os

from .exceptions import ConfigError

DEFAULT_PROMPT = '{cwd} $ '
DEFAULT_LOG_LEVEL = 'WARNING'


@dataclass
class ShellConfig:
    """Settings for one shell session"""

    prompt: str = DEFAULT_PROMPT
    timeout: Optional[float] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'ShellConfig':
        """
        Build a config from environment variables.

        Raises:
            ConfigError: If a variable holds an unusable value
        """
        if env is None:
            env = os.environ

        timeout = None
        raw_timeout = env.get('TINYSH_TIMEOUT', '').strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError('TINYSH_TIMEOUT', raw_timeout, "expected seconds")
            if not math.isfinite(timeout) or timeout <= 0:
                raise ConfigError('TINYSH_TIMEOUT', raw_timeout, "must be a positive number")

        log_level = env.get('TINYSH_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError('TINYSH_LOG_LEVEL', log_level)

        return cls(
            prompt=env.get('TINYSH_PROMPT') or DEFAULT_PROMPT,
            timeout=timeout,
            log_level=log_level,
        )

    def render_prompt(self, cwd: str, user: str = '') -> str:
        """Fill in the prompt template"""
        return self.prompt.replace('{cwd}', cwd).replace('{user}', user)
