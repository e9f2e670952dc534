"""SSH host key verification.

Resolves the known_hosts file remote executors check server keys against.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DISABLED = "none"


class HostKeyVerifier:
    """Resolves which known_hosts file, if any, verifies remote hosts."""

    def __init__(
        self,
        known_hosts_path: str | None = None,
        strict_checking: bool = True,
    ):
        """Initialize host key verifier.

        Args:
            known_hosts_path: Path to known_hosts file, 'none' to disable,
                or None for ~/.ssh/known_hosts
            strict_checking: Fail when the known_hosts file is missing

        Raises:
            FileNotFoundError: If strict mode and file missing
        """
        self.strict_checking = strict_checking
        self._known_hosts = self._resolve(known_hosts_path)

    def _resolve(self, value: str | None) -> str | None:
        """Resolve known_hosts path, failing closed in strict mode.

        Returns:
            Path to known_hosts file or None to disable verification

        Raises:
            FileNotFoundError: If strict mode and file missing
        """
        if value and value.lower() == DISABLED:
            logger.warning(
                "SSH host key verification disabled; "
                "connections are open to man-in-the-middle attacks"
            )
            return None

        path = Path(os.path.expanduser(value)) if value else Path.home() / ".ssh" / "known_hosts"
        if path.exists():
            return str(path)

        if self.strict_checking:
            raise FileNotFoundError(
                f"SSH host key verification required but known_hosts "
                f"file not found: {path}\n\n"
                f"To fix this:\n"
                f"1. Add host keys: ssh-keyscan <hostname> >> {path}\n"
                f"2. Or point ANYRUN_KNOWN_HOSTS at another file\n"
                f"3. Or disable verification (NOT RECOMMENDED): "
                f"ANYRUN_KNOWN_HOSTS=none"
            )

        logger.warning(
            "known_hosts not found at %s, verification disabled. This is insecure!",
            path,
        )
        return None

    def get_known_hosts_path(self) -> str | None:
        """Get path to known_hosts file.

        Returns:
            Path string or None if verification disabled
        """
        return self._known_hosts

    def is_enabled(self) -> bool:
        """Check if host key verification is enabled."""
        return self._known_hosts is not None
