"""Configuration module for anyrun.

- LocalConfig / RemoteConfig: Per-executor configuration
- HostKeyVerifier: Manages SSH host key verification
- Settings: Environment variable configuration
"""

from anyrun.config.executors import LocalConfig, RemoteConfig
from anyrun.config.host_keys import HostKeyVerifier
from anyrun.config.settings import DEFAULT_SHELL_EXECUTABLE, Settings

__all__ = [
    "DEFAULT_SHELL_EXECUTABLE",
    "HostKeyVerifier",
    "LocalConfig",
    "RemoteConfig",
    "Settings",
]
