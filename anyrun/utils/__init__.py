"""Utility modules for anyrun."""

from anyrun.utils.console import ColorfulFormatter, configure_logging
from anyrun.utils.format import command_line, shell_line, ssh_line

__all__ = [
    "ColorfulFormatter",
    "command_line",
    "configure_logging",
    "shell_line",
    "ssh_line",
]
