"""Run commands on a remote host over SSH.

Every call opens its own connection and session and closes both before
returning. Nothing is pooled, retried or shared between calls.
"""

import asyncio
import logging
from typing import IO, Any

import asyncssh

from anyrun.config import DEFAULT_SHELL_EXECUTABLE, HostKeyVerifier, RemoteConfig
from anyrun.exceptions import ExitStatusError, SessionError, SSHConnectionError
from anyrun.models import CommandResult
from anyrun.services.auth import AuthMethod, resolve_credentials, select_auth
from anyrun.services.streams import drain, feed, read_input
from anyrun.utils.format import command_line, shell_line, ssh_line

logger = logging.getLogger(__name__)


class Remote:
    """Runs commands on a remote host over SSH.

    The command line is sent as one string and interpreted by the remote
    account's login shell, so run() does not quote its arguments.
    shell() wraps the line in `shell -c "..."` before sending it.
    """

    def __init__(self, config: RemoteConfig | None = None) -> None:
        """Initialize from config, resolving credential defaults.

        Args:
            config: Executor configuration, defaults used if omitted

        Raises:
            CredentialsError: If the default user or key path cannot be resolved
            FileNotFoundError: If host key checking is strict and the
                known_hosts file is missing
        """
        config = config or RemoteConfig()
        self.shell_executable = config.shell_executable or DEFAULT_SHELL_EXECUTABLE
        self.stdin: IO[Any] | None = config.stdin
        self.stdout: IO[Any] | None = config.stdout
        self.stderr: IO[Any] | None = config.stderr
        self.credentials = resolve_credentials(config.credentials)
        self.host_keys = HostKeyVerifier(
            known_hosts_path=config.known_hosts,
            strict_checking=config.strict_host_key_checking,
        )

    def __repr__(self) -> str:
        return (
            f"Remote(target={self.credentials.target!r}, "
            f"port={self.credentials.port}, shell_executable={self.shell_executable!r})"
        )

    def run(self, command: str, *args: str) -> CommandResult:
        """Run a command with arguments on the remote host and wait for it.

        Raises:
            RunError: If the command could not be run or its status collected
        """
        return asyncio.run(self.run_async(command, *args))

    async def run_async(self, command: str, *args: str) -> CommandResult:
        """Coroutine version of run()."""
        logger.debug("Running: %s", self.format_run(command, *args))
        return await self._execute(command_line(command, *args))

    def format_run(self, command: str, *args: str) -> str:
        """Render what run() would execute, for logging."""
        return ssh_line(self.credentials.target, command_line(command, *args))

    def shell(self, line: str) -> CommandResult:
        """Run a command line through the remote shell and wait for it.

        Raises:
            RunError: If the command could not be run or its status collected
        """
        return asyncio.run(self.shell_async(line))

    async def shell_async(self, line: str) -> CommandResult:
        """Coroutine version of shell()."""
        logger.debug("Running: %s", self.format_shell(line))
        return await self._execute(shell_line(self.shell_executable, line))

    def format_shell(self, line: str) -> str:
        """Render what shell() would execute, for logging."""
        return ssh_line(self.credentials.target, shell_line(self.shell_executable, line))

    async def _execute(self, line: str) -> CommandResult:
        """Authenticate, connect, run one session and tear everything down."""
        input_data = read_input(self.stdin) if self.stdin is not None else None

        auth = await select_auth(self.credentials)
        try:
            conn = await self._connect(auth)
            try:
                return await self._run_session(conn, line, input_data)
            finally:
                conn.close()
                await conn.wait_closed()
                logger.debug("Closed SSH connection to %s", self.credentials.target)
        finally:
            auth.close()

    async def _connect(self, auth: AuthMethod) -> asyncssh.SSHClientConnection:
        """Open a connection to the remote host.

        Raises:
            SSHConnectionError: If the connection or login fails
        """
        creds = self.credentials
        logger.info(
            "Opening SSH connection (%s@%s:%d, auth=%s)",
            creds.username,
            creds.hostname,
            creds.port,
            auth.name,
        )
        try:
            return await asyncssh.connect(
                creds.hostname,
                port=creds.port,
                username=creds.username,
                known_hosts=self.host_keys.get_known_hosts_path(),
                config=None,
                **auth.options,
            )
        except (OSError, asyncssh.Error) as e:
            logger.error(
                "SSH connection to %s@%s:%d failed: %s",
                creds.username,
                creds.hostname,
                creds.port,
                e,
            )
            raise SSHConnectionError(creds.username, creds.hostname, e) from e

    async def _run_session(
        self,
        conn: asyncssh.SSHClientConnection,
        line: str,
        input_data: bytes | None,
    ) -> CommandResult:
        """Run one command line in a new session on conn."""
        target = self.credentials.target
        try:
            process = await conn.create_process(
                line,
                encoding=None,
                stdin=asyncssh.PIPE if input_data is not None else asyncssh.DEVNULL,
            )
        except (OSError, asyncssh.Error) as e:
            logger.error("Cannot open session on %s: %s", target, e)
            raise SessionError(target, e) from e

        try:
            _, stdout, stderr = await asyncio.gather(
                feed(process.stdin, input_data, process.stdin.write_eof),
                drain(process.stdout, self.stdout, "stdout"),
                drain(process.stderr, self.stderr, "stderr"),
            )
            completed = await process.wait(check=False)
        except asyncssh.Error as e:
            logger.error("Session on %s failed: %s", target, e)
            raise SessionError(target, e) from e
        finally:
            process.close()

        if completed.returncode is None:
            raise ExitStatusError(f"{target} closed the session without an exit status")

        logger.debug("Command on %s finished (exit=%d)", target, completed.returncode)
        return CommandResult(stdout=stdout, stderr=stderr, returncode=completed.returncode)
