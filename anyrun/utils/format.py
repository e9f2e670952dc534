"""Command line rendering for logging and remote execution.

Nothing here quotes arguments: the strings are meant for people reading
logs, and for remote login shells that already expect a single line.
"""


def command_line(command: str, *args: str) -> str:
    """Join a command and its arguments with spaces.

    Args:
        command: Program name or path
        *args: Program arguments

    Returns:
        Space-joined command line, stripped
    """
    return " ".join((command, *args)).strip()


def shell_line(shell_executable: str, line: str) -> str:
    """Render the invocation of a shell running a command line.

    Args:
        shell_executable: Path to the shell
        line: Command line passed to the shell's -c option

    Returns:
        String of the form `shell -c "line"`, stripped
    """
    return f'{shell_executable} -c "{line}"'.strip()


def ssh_line(target: str, line: str) -> str:
    """Render a command line as run over ssh.

    Args:
        target: user@host of the remote account
        line: Command line run on the remote host

    Returns:
        String of the form `ssh user@host line`, stripped
    """
    return f"ssh {target} {line}".strip()
