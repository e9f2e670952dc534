"""Standard local runner shared by the package-level helpers."""

from anyrun.config import LocalConfig
from anyrun.protocols import Runner
from anyrun.services.local import Local

# Initialized on first access
_standard: Runner | None = None


def get_standard() -> Runner:
    """Get or create the standard runner.

    Unless replaced with set_standard(), this is a Local with default
    configuration (shell taken from ANYRUN_SHELL).
    """
    global _standard
    if _standard is None:
        _standard = Local(LocalConfig.from_settings())
    return _standard


def set_standard(runner: Runner) -> None:
    """Replace the standard runner.

    Lets an application hand its own runner to code that uses the
    package-level helpers.

    Args:
        runner: Runner instance to use globally.
    """
    global _standard
    _standard = runner


def reset_standard() -> None:
    """Drop the standard runner so the next access creates a fresh one.

    Should only be used in test fixtures.
    """
    global _standard
    _standard = None
