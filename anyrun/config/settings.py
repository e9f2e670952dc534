"""Library settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_SHELL_EXECUTABLE = "/bin/sh"


@dataclass
class Settings:
    """Settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Executors
    shell_executable: str = field(default=DEFAULT_SHELL_EXECUTABLE)
    ssh_port: int = field(default=22)

    # Security
    known_hosts: str | None = field(default=None)
    strict_host_key_checking: bool = field(default=True)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            shell_executable=os.getenv("ANYRUN_SHELL") or DEFAULT_SHELL_EXECUTABLE,
            ssh_port=cls._get_int("ANYRUN_SSH_PORT", 22),
            known_hosts=os.getenv("ANYRUN_KNOWN_HOSTS") or None,
            strict_host_key_checking=cls._get_bool(
                "ANYRUN_STRICT_HOST_KEY_CHECKING", True
            ),
            log_level=os.getenv("ANYRUN_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("ANYRUN_LOG_COLORS", True),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
