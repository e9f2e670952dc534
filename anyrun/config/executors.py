"""Executor configuration.

Stream fields left as None mean: stdin reads nothing, stdout and stderr
are captured and returned in the CommandResult.
"""

from dataclasses import dataclass, field
from typing import IO, Any

from anyrun.config.settings import DEFAULT_SHELL_EXECUTABLE, Settings
from anyrun.models import Credentials


@dataclass
class LocalConfig:
    """Configuration for Local.

    env holds "KEY=value" entries and replaces the inherited environment
    when set; for duplicated keys the last entry wins. cwd of None runs
    in the caller's working directory.
    """

    shell_executable: str = DEFAULT_SHELL_EXECUTABLE
    env: list[str] | None = None
    cwd: str | None = None
    stdin: IO[Any] | None = None
    stdout: IO[Any] | None = None
    stderr: IO[Any] | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> "LocalConfig":
        """Build config with defaults taken from settings.

        Args:
            settings: Settings to read, loaded from environment if omitted
            **overrides: Field values that take precedence

        Returns:
            LocalConfig instance
        """
        settings = settings or Settings.from_env()
        overrides.setdefault("shell_executable", settings.shell_executable)
        return cls(**overrides)


@dataclass
class RemoteConfig:
    """Configuration for Remote.

    known_hosts of None means ~/.ssh/known_hosts; "none" disables
    host key verification.
    """

    shell_executable: str = DEFAULT_SHELL_EXECUTABLE
    stdin: IO[Any] | None = None
    stdout: IO[Any] | None = None
    stderr: IO[Any] | None = None
    credentials: Credentials = field(default_factory=Credentials)
    known_hosts: str | None = None
    strict_host_key_checking: bool = True

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **overrides: Any) -> "RemoteConfig":
        """Build config with defaults taken from settings.

        Args:
            settings: Settings to read, loaded from environment if omitted
            **overrides: Field values that take precedence

        Returns:
            RemoteConfig instance
        """
        settings = settings or Settings.from_env()
        overrides.setdefault("shell_executable", settings.shell_executable)
        overrides.setdefault("credentials", Credentials(port=settings.ssh_port))
        overrides.setdefault("known_hosts", settings.known_hosts)
        overrides.setdefault("strict_host_key_checking", settings.strict_host_key_checking)
        return cls(**overrides)
