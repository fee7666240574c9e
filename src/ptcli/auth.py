"""Credential storage for remote instances.

Reads and updates a netrc file whose machine entries are keyed by the
instance URL.
"""
# Created: 2026-10-12

import os
import netrc
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .config.settings import get_netrc_path


logger = logging.getLogger(__name__)


def _quote(value: str) -> str:
    """Quote a netrc token when it would not read back as one word."""
    if value and not any(char.isspace() or char in '"#\\' for char in value):
        return value
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def _format_netrc(parsed: netrc.netrc) -> str:
    """Serialize parsed entries back to netrc syntax."""
    lines = []
    for host, (login, account, password) in parsed.hosts.items():
        lines.append('default' if host == 'default' else f"machine {_quote(host)}")
        if login:
            lines.append(f"\tlogin {_quote(login)}")
        if account:
            lines.append(f"\taccount {_quote(account)}")
        if password:
            lines.append(f"\tpassword {_quote(password)}")

    # A macro body ends at the first empty line
    for name, body in parsed.macros.items():
        lines.append(f"macdef {name}")
        lines.extend(line.rstrip('\n') for line in body)
        lines.append('')

    return '\n'.join(lines) + '\n' if lines else ''


class CredentialsError(Exception):
    """Raised when the credentials file cannot be parsed."""
    pass


@dataclass
class Machine:
    """Login and password stored for one instance (None when missing)."""
    login: Optional[str] = None
    password: Optional[str] = None


class NetrcCredentials:
    """Handle the netrc credentials file."""

    FILE_MODE = 0o600

    def __init__(self, path: Optional[Path] = None):
        """Initialize the credentials handler.

        Args:
            path: Path to the netrc file (default: resolved from the environment)
        """
        self.path = Path(path) if path is not None else get_netrc_path()

    def _parse(self) -> netrc.netrc:
        """Parse the file, creating it first if it does not exist."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(mode=self.FILE_MODE)

        try:
            return netrc.netrc(str(self.path))
        except netrc.NetrcParseError as e:
            logger.error(f"Failed to parse credentials file {self.path}: {e}")
            raise CredentialsError(f"Invalid credentials file {self.path}: {e}") from e

    def _save(self, parsed: netrc.netrc) -> None:
        """Write parsed entries back, restricting the file to its owner."""
        self.path.write_text(_format_netrc(parsed))
        os.chmod(self.path, self.FILE_MODE)

    def load(self) -> Dict[str, Machine]:
        """Load all machine entries.

        Returns:
            Mapping of instance URL to its credentials (empty if no file)
        """
        if not self.path.exists():
            logger.debug(f"No credentials file at {self.path}")
            return {}

        parsed = self._parse()
        machines = {
            host: Machine(login=login or None, password=password or None)
            for host, (login, _account, password) in parsed.hosts.items()
        }
        logger.debug(f"Loaded {len(machines)} machine(s) from {self.path}")
        return machines

    def add(self, url: str, login: str, password: str) -> None:
        """Store credentials for an instance, replacing existing ones."""
        parsed = self._parse()
        parsed.hosts[url] = (login, '', password)
        self._save(parsed)
        logger.info(f"Saved credentials for {url}")

    def remove(self, url: str) -> None:
        """Remove credentials for an instance.

        Raises:
            KeyError: If no credentials are stored for the URL
        """
        parsed = self._parse()
        if url not in parsed.hosts:
            raise KeyError(url)

        del parsed.hosts[url]
        self._save(parsed)
        logger.info(f"Removed credentials for {url}")
