"""Protocol interface shared by the local and remote executors.

Usage Example:

    from anyrun.protocols import Runner

    def uptime(runner: Runner) -> str:
        '''Works the same against Local and Remote.'''
        result = runner.shell("uptime")
        return result.stdout

    uptime(Local())
    uptime(Remote(RemoteConfig(credentials=Credentials(hostname="db1"))))
"""

from typing import Protocol, runtime_checkable

from anyrun.models import CommandResult


@runtime_checkable
class Runner(Protocol):
    """Protocol for command runners.

    run() executes a program with arguments and no shell interpretation;
    shell() passes a whole command line to a shell's -c option. Both
    return a CommandResult when the command ran, whatever its exit
    status, and raise RunError when it could not be run at all.
    """

    def run(self, command: str, *args: str) -> CommandResult:
        """Run a command like exec() and wait for it to finish."""
        ...

    async def run_async(self, command: str, *args: str) -> CommandResult:
        """Coroutine version of run()."""
        ...

    def format_run(self, command: str, *args: str) -> str:
        """Render what run() would execute, for logging."""
        ...

    def shell(self, line: str) -> CommandResult:
        """Run a command line in a shell and wait for it to finish."""
        ...

    async def shell_async(self, line: str) -> CommandResult:
        """Coroutine version of shell()."""
        ...

    def format_shell(self, line: str) -> str:
        """Render what shell() would execute, for logging."""
        ...


__all__ = ["Runner"]
