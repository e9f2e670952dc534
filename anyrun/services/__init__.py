"""Command executors for anyrun."""

from anyrun.services.auth import resolve_credentials, select_auth
from anyrun.services.local import Local
from anyrun.services.remote import Remote
from anyrun.services.state import get_standard, reset_standard, set_standard

__all__ = [
    "Local",
    "Remote",
    "get_standard",
    "reset_standard",
    "resolve_credentials",
    "select_auth",
    "set_standard",
]
