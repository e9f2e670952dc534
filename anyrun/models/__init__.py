"""Data models for anyrun."""

from anyrun.models.command import CommandResult
from anyrun.models.ssh import DEFAULT_SSH_HOSTNAME, DEFAULT_SSH_PORT, Credentials

__all__ = [
    "CommandResult",
    "Credentials",
    "DEFAULT_SSH_HOSTNAME",
    "DEFAULT_SSH_PORT",
]
