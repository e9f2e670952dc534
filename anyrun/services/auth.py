"""SSH credential defaults and authentication strategy selection."""

import logging
import os
import pwd
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import asyncssh

from anyrun.exceptions import AuthenticationError, CredentialsError, KeyFileError
from anyrun.models import DEFAULT_SSH_HOSTNAME, DEFAULT_SSH_PORT, Credentials

logger = logging.getLogger(__name__)

DEFAULT_KEY_FILENAME = "id_rsa"
AGENT_SOCKET_ENV = "SSH_AUTH_SOCK"


def current_username() -> str:
    """Return the account name of the calling process.

    Raises:
        CredentialsError: If the uid has no passwd entry
    """
    uid = os.getuid()
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError as e:
        raise CredentialsError(f"Cannot resolve user name for uid {uid}", e) from e


def default_private_key_path(username: str) -> str:
    """Return ~username/.ssh/id_rsa.

    Raises:
        CredentialsError: If the user has no passwd entry
    """
    try:
        home = pwd.getpwnam(username).pw_dir
    except KeyError as e:
        raise CredentialsError(f"Cannot resolve home directory of {username}", e) from e
    return os.path.join(home, ".ssh", DEFAULT_KEY_FILENAME)


def resolve_credentials(credentials: Credentials) -> Credentials:
    """Fill in defaults for unset credential fields.

    Returns:
        Copy of credentials with host, port, user and (when no password
        is set) key path populated

    Raises:
        CredentialsError: If the current user or its home cannot be resolved
    """
    username = credentials.username or current_username()
    private_key_path = credentials.private_key_path
    if not credentials.password and not private_key_path:
        private_key_path = default_private_key_path(username)

    return replace(
        credentials,
        hostname=credentials.hostname or DEFAULT_SSH_HOSTNAME,
        port=credentials.port or DEFAULT_SSH_PORT,
        username=username,
        private_key_path=private_key_path,
    )


@dataclass
class AuthMethod:
    """One chosen way to authenticate, as asyncssh.connect() options."""

    name: str
    options: dict[str, Any] = field(default_factory=dict)
    agent: Any = None

    def close(self) -> None:
        """Release the agent connection, if one was opened."""
        if self.agent is not None:
            self.agent.close()
            self.agent = None


async def select_auth(credentials: Credentials) -> AuthMethod:
    """Choose exactly one authentication strategy.

    Order: password if set, else every identity of the agent named by
    SSH_AUTH_SOCK, else the private key file. Other strategies are
    disabled so asyncssh never falls back to default keys.

    Raises:
        AuthenticationError: If the agent cannot be used
        KeyFileError: If the key file cannot be read or parsed
    """
    if credentials.password:
        logger.debug("Using password authentication for %s", credentials.target)
        return AuthMethod(
            "password",
            {"password": credentials.password, "client_keys": None, "agent_path": None},
        )

    agent_path = os.getenv(AGENT_SOCKET_ENV)
    if agent_path:
        return await _agent_auth(agent_path)

    return _key_file_auth(credentials.private_key_path)


async def _agent_auth(agent_path: str) -> AuthMethod:
    """Authenticate with every key the ssh-agent offers."""
    agent = None
    try:
        agent = await asyncssh.connect_agent(agent_path)
        if agent is None:
            raise OSError(f"cannot connect to agent socket {agent_path}")
        keys = await agent.get_keys()
    except (OSError, asyncssh.Error) as e:
        if agent is not None:
            agent.close()
        logger.error("SSH agent at %s unusable: %s", agent_path, e)
        raise AuthenticationError(f"Could not use ssh-agent at {agent_path}: {e}", e) from e

    if not keys:
        agent.close()
        raise AuthenticationError(f"ssh-agent at {agent_path} offered no identities")

    logger.debug("Using %d identities from ssh-agent at %s", len(keys), agent_path)
    return AuthMethod(
        "agent",
        {"client_keys": list(keys), "agent_path": None},
        agent=agent,
    )


def _key_file_auth(path: str) -> AuthMethod:
    """Authenticate with a private key read from a file."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error("Cannot read private key file %s: %s", path, e)
        raise KeyFileError(path, e) from e

    try:
        key = asyncssh.import_private_key(data)
    except (asyncssh.KeyImportError, ValueError) as e:
        logger.error("Cannot parse private key file %s: %s", path, e)
        raise KeyFileError(path, e, action="use") from e

    logger.debug("Using private key %s", path)
    return AuthMethod("publickey", {"client_keys": [key], "agent_path": None})
