"""Run commands as child processes of the calling process."""

import asyncio
import contextlib
import logging
import subprocess
from typing import IO, Any

from anyrun.config import DEFAULT_SHELL_EXECUTABLE, LocalConfig
from anyrun.exceptions import SpawnError
from anyrun.models import CommandResult
from anyrun.services.streams import drain, feed, fileno, read_input
from anyrun.utils.format import command_line, shell_line

logger = logging.getLogger(__name__)


class Local:
    """Runs commands on the local host.

    run() executes a program with an argument vector and never involves a
    shell; shell() hands a whole command line to the configured shell's
    -c option. Both block until the command exits and return its captured
    output and exit status. Failing to start the command raises SpawnError.
    """

    def __init__(self, config: LocalConfig | None = None) -> None:
        """Initialize from config.

        Args:
            config: Executor configuration, defaults used if omitted
        """
        config = config or LocalConfig()
        self.shell_executable = config.shell_executable or DEFAULT_SHELL_EXECUTABLE
        self.env = list(config.env) if config.env is not None else None
        self.cwd = config.cwd or None
        self.stdin: IO[Any] | None = config.stdin
        self.stdout: IO[Any] | None = config.stdout
        self.stderr: IO[Any] | None = config.stderr

    def __repr__(self) -> str:
        return f"Local(shell_executable={self.shell_executable!r}, cwd={self.cwd!r})"

    def run(self, command: str, *args: str) -> CommandResult:
        """Run a program directly, like exec(), and wait for it.

        Raises:
            SpawnError: If the program cannot be started
            StreamError: If its streams cannot be read or written
        """
        return asyncio.run(self.run_async(command, *args))

    async def run_async(self, command: str, *args: str) -> CommandResult:
        """Coroutine version of run()."""
        logger.debug("Running: %s", self.format_run(command, *args))
        return await self._execute(command, args)

    def format_run(self, command: str, *args: str) -> str:
        """Render what run() would execute, for logging."""
        return command_line(command, *args)

    def shell(self, line: str) -> CommandResult:
        """Run a command line through the shell and wait for it.

        Raises:
            SpawnError: If the shell cannot be started
            StreamError: If its streams cannot be read or written
        """
        return asyncio.run(self.shell_async(line))

    async def shell_async(self, line: str) -> CommandResult:
        """Coroutine version of shell()."""
        logger.debug("Running: %s", self.format_shell(line))
        return await self._execute(self.shell_executable, ("-c", line))

    def format_shell(self, line: str) -> str:
        """Render what shell() would execute, for logging."""
        return shell_line(self.shell_executable, line)

    def _environment(self) -> dict[str, str] | None:
        """Convert KEY=value entries to a mapping, last duplicate wins."""
        if self.env is None:
            return None
        env: dict[str, str] = {}
        for entry in self.env:
            key, sep, value = entry.partition("=")
            if not sep:
                logger.warning("Ignoring environment entry without '=': %r", entry)
                continue
            env.pop(key, None)
            env[key] = value
        return env

    @staticmethod
    def _output_target(sink: IO[Any] | None) -> int | IO[Any]:
        """Pick what the child's output descriptor is connected to."""
        fd = fileno(sink)
        if fd is None:
            return asyncio.subprocess.PIPE
        # Flush buffered writes so they land before the child's output
        sink.flush()  # type: ignore[union-attr]
        return fd

    async def _execute(self, command: str, args: tuple[str, ...]) -> CommandResult:
        """Spawn the command, pump its streams and collect its status."""
        input_data: bytes | None = None
        stdin_fd = fileno(self.stdin)
        stdin: int
        if self.stdin is None:
            stdin = asyncio.subprocess.DEVNULL
        elif stdin_fd is not None:
            stdin = stdin_fd
        else:
            input_data = read_input(self.stdin)
            stdin = asyncio.subprocess.PIPE

        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdin=stdin,
                stdout=self._output_target(self.stdout),
                stderr=self._output_target(self.stderr),
                env=self._environment(),
                cwd=self.cwd,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            logger.error("Cannot execute %s: %s", command, e)
            raise SpawnError(command, e) from e

        try:
            _, stdout, stderr = await asyncio.gather(
                feed(process.stdin, input_data, self._closer(process)),
                drain(process.stdout, self.stdout, "stdout"),
                drain(process.stderr, self.stderr, "stderr"),
            )
            returncode = await process.wait()
        except BaseException:
            if process.returncode is None:
                with contextlib.suppress(ProcessLookupError):
                    process.kill()
                await process.wait()
            raise

        logger.debug("%s finished (pid=%d, exit=%d)", command, process.pid, returncode)
        return CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)

    @staticmethod
    def _closer(process: asyncio.subprocess.Process) -> Any:
        """Return a callable that closes the child's stdin pipe."""

        def close() -> None:
            if process.stdin is not None:
                process.stdin.close()

        return close
