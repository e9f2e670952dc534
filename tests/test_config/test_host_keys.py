"""Tests for HostKeyVerifier."""

from pathlib import Path

import pytest

from anyrun.config.host_keys import HostKeyVerifier


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a temporary path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


def test_verifier_uses_default_known_hosts_path(fake_home: Path) -> None:
    """Verifier defaults to ~/.ssh/known_hosts."""
    known_hosts = fake_home / ".ssh" / "known_hosts"
    known_hosts.parent.mkdir()
    known_hosts.touch()

    verifier = HostKeyVerifier()

    assert verifier.get_known_hosts_path() == str(known_hosts)
    assert verifier.is_enabled()


def test_verifier_missing_default_strict(fake_home: Path) -> None:
    """Missing default file fails closed in strict mode."""
    with pytest.raises(FileNotFoundError, match="known_hosts"):
        HostKeyVerifier()


def test_verifier_missing_default_non_strict(fake_home: Path) -> None:
    """Missing default file disables verification in non-strict mode."""
    verifier = HostKeyVerifier(strict_checking=False)

    assert verifier.get_known_hosts_path() is None
    assert not verifier.is_enabled()


def test_verifier_uses_custom_path(tmp_path: Path) -> None:
    """Verifier accepts custom known_hosts path."""
    custom = tmp_path / "my_known_hosts"
    custom.touch()

    verifier = HostKeyVerifier(known_hosts_path=str(custom))

    assert verifier.get_known_hosts_path() == str(custom)


def test_verifier_expands_user(fake_home: Path) -> None:
    """Custom path may start with ~."""
    (fake_home / "hosts").touch()

    verifier = HostKeyVerifier(known_hosts_path="~/hosts")

    assert verifier.get_known_hosts_path() == str(fake_home / "hosts")


@pytest.mark.parametrize("value", ["none", "NONE", "None"])
def test_verifier_disabled_with_none(value: str) -> None:
    """Verifier can be disabled with 'none' in any case."""
    verifier = HostKeyVerifier(known_hosts_path=value)

    assert verifier.get_known_hosts_path() is None
    assert not verifier.is_enabled()


def test_verifier_raises_on_missing_file_strict_mode(tmp_path: Path) -> None:
    """Verifier raises if file missing in strict mode."""
    missing = tmp_path / "nonexistent"

    with pytest.raises(FileNotFoundError, match="known_hosts file not found"):
        HostKeyVerifier(known_hosts_path=str(missing), strict_checking=True)


def test_verifier_allows_missing_file_non_strict(tmp_path: Path) -> None:
    """Verifier disables verification when file missing in non-strict mode."""
    missing = tmp_path / "nonexistent"

    verifier = HostKeyVerifier(known_hosts_path=str(missing), strict_checking=False)

    assert verifier.get_known_hosts_path() is None


def test_verifier_strict_checking_default_true(tmp_path: Path) -> None:
    """Strict checking defaults to True."""
    custom = tmp_path / "known_hosts"
    custom.touch()

    assert HostKeyVerifier(known_hosts_path=str(custom)).strict_checking is True
