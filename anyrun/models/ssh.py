"""SSH-related data models."""

from dataclasses import dataclass

DEFAULT_SSH_HOSTNAME = "localhost"
DEFAULT_SSH_PORT = 22


@dataclass(frozen=True)
class Credentials:
    """Credentials used to log in to a remote host.

    Only one of password or private_key_path is used. When both are
    empty, the key path is defaulted from the user's home directory.
    Keys protected by a passphrase must be served through ssh-agent.
    """

    hostname: str = DEFAULT_SSH_HOSTNAME
    port: int = DEFAULT_SSH_PORT
    username: str = ""
    password: str = ""
    private_key_path: str = ""

    @property
    def target(self) -> str:
        """Render as user@host."""
        return f"{self.username}@{self.hostname}"

    def __repr__(self) -> str:
        password = "***" if self.password else "''"
        return (
            f"Credentials(hostname={self.hostname!r}, port={self.port}, "
            f"username={self.username!r}, password={password}, "
            f"private_key_path={self.private_key_path!r})"
        )
