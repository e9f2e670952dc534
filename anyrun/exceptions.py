"""Exceptions raised when a command cannot be run.

A command that runs and exits nonzero is not an error: its status is
returned in a CommandResult. Everything here means the command could not
be run at all, or its outcome could not be collected.
"""


class RunError(Exception):
    """Base class for infrastructure failures."""

    def __init__(self, message: str, original_error: BaseException | None = None):
        """Initialize run error.

        Args:
            message: Human-readable description of the failure
            original_error: Underlying exception, if any
        """
        self.original_error = original_error
        super().__init__(message)


class SpawnError(RunError):
    """Local process could not be started."""

    def __init__(self, command: str, original_error: BaseException):
        self.command = command
        super().__init__(f"Cannot execute {command}: {original_error}", original_error)


class StreamError(RunError):
    """Copying data to or from a command's standard streams failed."""

    def __init__(self, stream: str, original_error: BaseException):
        self.stream = stream
        super().__init__(f"I/O on {stream} failed: {original_error}", original_error)


class CredentialsError(RunError):
    """Default SSH credentials could not be resolved from the OS."""


class KeyFileError(RunError):
    """Private key file could not be read or parsed."""

    def __init__(self, path: str, original_error: BaseException, action: str = "read"):
        self.path = path
        super().__init__(
            f"Could not {action} private key file '{path}': {original_error}",
            original_error,
        )


class AuthenticationError(RunError):
    """SSH agent identities could not be obtained."""


class SSHConnectionError(RunError):
    """Failed to establish an SSH connection."""

    def __init__(self, username: str, hostname: str, original_error: BaseException):
        """Initialize connection error.

        Args:
            username: Account used to log in
            hostname: Remote host name or address
            original_error: Original exception that caused the failure
        """
        self.username = username
        self.hostname = hostname
        super().__init__(
            f"Connection to {username}@{hostname} failed: {original_error}",
            original_error,
        )


class SessionError(RunError):
    """SSH connection succeeded but no command session could be opened."""

    def __init__(self, target: str, original_error: BaseException):
        self.target = target
        super().__init__(
            f"Cannot open session on {target}: {original_error}", original_error
        )


class ExitStatusError(RunError):
    """Command finished without reporting an exit status."""
