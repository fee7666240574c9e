"""Resolution of the remote a command talks to.

Combines explicit command-line values with the saved default remote and
the credentials file.
"""
# Created: 2026-10-14

import sys
import logging
from typing import Dict, List, Optional

from rich.console import Console

from .auth import Machine
from .config.settings import RemoteSettings
from .models import ExplicitRemote, ResolvedRemote


logger = logging.getLogger(__name__)

EXIT_MISSING_REMOTE = -1


class RemoteResolutionError(Exception):
    """Raised when required remote fields have no source to fall back on."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            "Missing required remote fields: " + ", ".join(missing)
        )

    def diagnostics(self) -> List[str]:
        """One message per missing field."""
        return [f"--{name} field is required." for name in self.missing]


def resolve_remote(explicit: ExplicitRemote,
                   settings: RemoteSettings,
                   credentials: Dict[str, Machine]) -> ResolvedRemote:
    """Work out url, username and password for a command.

    Explicit values always win. Missing ones come from the default remote
    and then from the credentials stored for the resulting URL; they stay
    ``None`` when neither source has them.

    Args:
        explicit: Values given on the command line
        settings: Saved remotes
        credentials: Credentials keyed by instance URL

    Returns:
        ResolvedRemote

    Raises:
        RemoteResolutionError: If something is missing and there are no
            saved remotes or no stored credentials
    """
    if explicit.is_complete():
        return ResolvedRemote(
            url=explicit.url,
            username=explicit.username,
            password=explicit.password
        )

    if not settings.remotes or not credentials:
        raise RemoteResolutionError(explicit.missing_fields())

    url = explicit.url
    username = explicit.username
    password = explicit.password

    if not url and settings.default != -1:
        url = settings.remotes[settings.default]
        logger.debug(f"Using default remote {url}")

    machine = credentials.get(url) if url else None
    if machine is None:
        logger.debug(f"No stored credentials for {url}")

    if not username and machine:
        username = machine.login
    if not password and machine:
        password = machine.password

    return ResolvedRemote(url=url, username=username, password=password)


def get_remote_or_die(explicit: ExplicitRemote,
                      settings: RemoteSettings,
                      credentials: Dict[str, Machine],
                      console: Optional[Console] = None) -> ResolvedRemote:
    """Resolve the remote, exiting the process if that is impossible.

    Prints one line per missing field to stderr before exiting with
    status -1.
    """
    try:
        return resolve_remote(explicit, settings, credentials)
    except RemoteResolutionError as e:
        console = console or Console(stderr=True)
        for line in e.diagnostics():
            console.print(line, highlight=False, soft_wrap=True)
        sys.exit(EXIT_MISSING_REMOTE)
