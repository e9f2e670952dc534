"""Tests for environment settings and executor configs."""

import pytest

from anyrun.config import LocalConfig, RemoteConfig, Settings
from anyrun.models import Credentials

ENV_KEYS = [
    "ANYRUN_SHELL",
    "ANYRUN_SSH_PORT",
    "ANYRUN_KNOWN_HOSTS",
    "ANYRUN_STRICT_HOST_KEY_CHECKING",
    "ANYRUN_LOG_LEVEL",
    "ANYRUN_LOG_COLORS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without ANYRUN_* variables."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    """Unset environment gives documented defaults."""
    settings = Settings.from_env()

    assert settings.shell_executable == "/bin/sh"
    assert settings.ssh_port == 22
    assert settings.known_hosts is None
    assert settings.strict_host_key_checking is True
    assert settings.log_level == "INFO"
    assert settings.log_colors is True


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Variables override defaults."""
    monkeypatch.setenv("ANYRUN_SHELL", "/bin/bash")
    monkeypatch.setenv("ANYRUN_SSH_PORT", "2222")
    monkeypatch.setenv("ANYRUN_KNOWN_HOSTS", "none")
    monkeypatch.setenv("ANYRUN_STRICT_HOST_KEY_CHECKING", "false")
    monkeypatch.setenv("ANYRUN_LOG_LEVEL", "debug")
    monkeypatch.setenv("ANYRUN_LOG_COLORS", "0")

    settings = Settings.from_env()

    assert settings.shell_executable == "/bin/bash"
    assert settings.ssh_port == 2222
    assert settings.known_hosts == "none"
    assert settings.strict_host_key_checking is False
    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False


def test_invalid_int_uses_default(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Malformed integers fall back with a warning."""
    monkeypatch.setenv("ANYRUN_SSH_PORT", "twenty-two")

    settings = Settings.from_env()

    assert settings.ssh_port == 22
    assert "ANYRUN_SSH_PORT" in caplog.text


@pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
def test_truthy_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    """Common truthy spellings are accepted."""
    monkeypatch.setenv("ANYRUN_STRICT_HOST_KEY_CHECKING", value)

    assert Settings.from_env().strict_host_key_checking is True


def test_local_config_from_settings() -> None:
    """LocalConfig takes its shell from settings unless overridden."""
    settings = Settings(shell_executable="/bin/zsh")

    assert LocalConfig.from_settings(settings).shell_executable == "/bin/zsh"
    assert (
        LocalConfig.from_settings(settings, shell_executable="/bin/dash").shell_executable
        == "/bin/dash"
    )
    assert LocalConfig.from_settings(settings, cwd="/tmp").cwd == "/tmp"


def test_remote_config_from_settings() -> None:
    """RemoteConfig takes port and host key policy from settings."""
    settings = Settings(ssh_port=2200, known_hosts="none", strict_host_key_checking=False)

    config = RemoteConfig.from_settings(settings)

    assert config.credentials.port == 2200
    assert config.known_hosts == "none"
    assert config.strict_host_key_checking is False


def test_remote_config_explicit_credentials() -> None:
    """Explicit credentials override settings."""
    creds = Credentials(hostname="db1", port=22, username="alice")

    config = RemoteConfig.from_settings(Settings(ssh_port=2200), credentials=creds)

    assert config.credentials is creds


def test_from_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings are loaded from the environment when omitted."""
    monkeypatch.setenv("ANYRUN_SHELL", "/bin/bash")

    assert LocalConfig.from_settings().shell_executable == "/bin/bash"
