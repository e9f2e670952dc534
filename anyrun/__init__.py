"""Run commands locally or over SSH, capturing output and exit status.

    >>> import anyrun
    >>> anyrun.shell("exit 6").returncode
    6

The module-level helpers delegate to a standard Local runner; construct
Local or Remote directly for anything else.
"""

from anyrun.config import LocalConfig, RemoteConfig, Settings
from anyrun.exceptions import (
    AuthenticationError,
    CredentialsError,
    ExitStatusError,
    KeyFileError,
    RunError,
    SessionError,
    SpawnError,
    SSHConnectionError,
    StreamError,
)
from anyrun.models import CommandResult, Credentials
from anyrun.protocols import Runner
from anyrun.services import Local, Remote, get_standard, reset_standard, set_standard

__version__ = "0.1.0"


def run(command: str, *args: str) -> CommandResult:
    """Run a command like exec() using the standard runner."""
    return get_standard().run(command, *args)


def format_run(command: str, *args: str) -> str:
    """Render what run() would execute, for logging."""
    return get_standard().format_run(command, *args)


def shell(line: str) -> CommandResult:
    """Run a command line through the standard runner's shell."""
    return get_standard().shell(line)


def format_shell(line: str) -> str:
    """Render what shell() would execute, for logging."""
    return get_standard().format_shell(line)


__all__ = [
    "AuthenticationError",
    "CommandResult",
    "Credentials",
    "CredentialsError",
    "ExitStatusError",
    "KeyFileError",
    "Local",
    "LocalConfig",
    "Remote",
    "RemoteConfig",
    "RunError",
    "Runner",
    "SSHConnectionError",
    "SessionError",
    "Settings",
    "SpawnError",
    "StreamError",
    "format_run",
    "format_shell",
    "get_standard",
    "reset_standard",
    "run",
    "set_standard",
    "shell",
]
