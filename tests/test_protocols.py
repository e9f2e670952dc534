"""Tests for the Runner protocol.

Verifies that both executors satisfy the protocol contract.
"""

from typing import Protocol

from anyrun.config import LocalConfig, RemoteConfig
from anyrun.models import CommandResult, Credentials
from anyrun.protocols import Runner
from anyrun.services import Local, Remote


def test_local_implements_runner() -> None:
    """Local satisfies Runner."""
    assert isinstance(Local(LocalConfig()), Runner)


def test_remote_implements_runner() -> None:
    """Remote satisfies Runner."""
    remote = Remote(
        RemoteConfig(
            credentials=Credentials(hostname="db1", username="alice", password="pw"),
            known_hosts="none",
        )
    )

    assert isinstance(remote, Runner)


def test_protocol_runtime_checkable() -> None:
    """Runner is a runtime-checkable Protocol."""
    assert issubclass(Runner, Protocol)
    assert not isinstance(object(), Runner)


def test_generic_caller() -> None:
    """Code written against Runner works with any implementation."""

    class EchoRunner:
        def run(self, command: str, *args: str) -> CommandResult:
            return CommandResult(stdout=" ".join(args), stderr="", returncode=0)

        async def run_async(self, command: str, *args: str) -> CommandResult:
            return self.run(command, *args)

        def format_run(self, command: str, *args: str) -> str:
            return command

        def shell(self, line: str) -> CommandResult:
            return CommandResult(stdout=line, stderr="", returncode=0)

        async def shell_async(self, line: str) -> CommandResult:
            return self.shell(line)

        def format_shell(self, line: str) -> str:
            return line

    def greet(runner: Runner) -> str:
        return runner.run("echo", "hello").stdout

    assert isinstance(EchoRunner(), Runner)
    assert greet(EchoRunner()) == "hello"
    assert greet(Local()) == "hello\n"
