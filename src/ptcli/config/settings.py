"""Settings management for ptcli.

Persists the list of known remotes and the default one, and resolves
where configuration and credentials live on disk.
"""
# Created: 2026-10-12

import os
import logging
from pathlib import Path
from typing import Dict, Any, List, Mapping, Optional
import yaml
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

APP_NAME = "ptcli"
SETTINGS_FILE = "config.yaml"

# Environment overrides
ENV_CONFIG_DIR = "PTCLI_CONFIG_DIR"
ENV_NETRC = "NETRC"
ENV_MODE = "PTCLI_ENV"
ENV_APP_INSTANCE = "PTCLI_APP_INSTANCE"


class SettingsError(Exception):
    """Raised when the settings store cannot be read."""
    pass


@dataclass
class RemoteSettings:
    """Known remotes and the index of the default one (-1 for none)."""
    remotes: List[str] = field(default_factory=list)
    default: int = -1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RemoteSettings':
        """Create RemoteSettings from a stored dictionary.

        An out-of-range default is reset to -1.
        """
        remotes = [str(url) for url in data.get('remotes') or []]
        default = data.get('default', -1)

        if (isinstance(default, bool) or not isinstance(default, int)
                or not -1 <= default < len(remotes)):
            logger.warning(f"Ignoring invalid default remote index: {default!r}")
            default = -1

        return cls(remotes=remotes, default=default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for storage."""
        return {'remotes': list(self.remotes), 'default': self.default}

    @property
    def default_remote(self) -> Optional[str]:
        """URL of the default remote, if one is set."""
        if self.default == -1:
            return None
        return self.remotes[self.default]

    def add_remote(self, url: str, make_default: bool = False) -> None:
        """Remember a remote.

        The remote becomes the default when asked to, or when no default
        exists yet.
        """
        if url not in self.remotes:
            self.remotes.append(url)

        if make_default or self.default == -1:
            self.default = self.remotes.index(url)

    def remove_remote(self, url: str) -> None:
        """Forget a remote, keeping the default index consistent.

        Raises:
            KeyError: If the remote is unknown
        """
        if url not in self.remotes:
            raise KeyError(url)

        index = self.remotes.index(url)
        del self.remotes[index]

        if self.default == index:
            self.default = -1
        elif self.default > index:
            self.default -= 1

    def set_default(self, url: str) -> None:
        """Make a known remote the default.

        Raises:
            KeyError: If the remote is unknown
        """
        if url not in self.remotes:
            raise KeyError(url)
        self.default = self.remotes.index(url)


def is_test_instance(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether we run as a test instance."""
    environ = os.environ if environ is None else environ
    return environ.get(ENV_MODE) == 'test'


def get_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Determine the configuration directory.

    Order of precedence:
    1. ``PTCLI_CONFIG_DIR``
    2. ``~/.config/ptcli``, suffixed with the app instance for test runs

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Configuration directory path
    """
    environ = os.environ if environ is None else environ

    if config_dir := environ.get(ENV_CONFIG_DIR):
        return Path(config_dir).expanduser()

    name = APP_NAME
    if is_test_instance(environ):
        name += f"-{environ.get(ENV_APP_INSTANCE, '1')}"

    return Path.home() / ".config" / name


def get_netrc_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Determine the credentials file location.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Path to the netrc file (it may not exist yet)
    """
    environ = os.environ if environ is None else environ

    if netrc_path := environ.get(ENV_NETRC):
        return Path(netrc_path).expanduser()

    if is_test_instance(environ):
        return get_config_dir(environ) / "netrc"

    return Path.home() / ".netrc"


class SettingsStore:
    """YAML-backed store for RemoteSettings."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the store.

        Args:
            config_dir: Optional config directory override
        """
        if config_dir is None:
            config_dir = get_config_dir()
        self.config_dir = Path(config_dir)
        self.path = self.config_dir / SETTINGS_FILE

    def read(self) -> RemoteSettings:
        """Load settings, falling back to empty defaults.

        Raises:
            SettingsError: If the file exists but cannot be parsed
        """
        if not self.path.exists():
            return RemoteSettings()

        try:
            with open(self.path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to read settings from {self.path}: {e}")
            raise SettingsError(f"Cannot read settings file {self.path}: {e}") from e

        if not data:
            return RemoteSettings()
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must contain a mapping")

        return RemoteSettings.from_dict(data)

    def write(self, settings: RemoteSettings) -> None:
        """Save settings to the store."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.path, 'w') as f:
            yaml.safe_dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.debug(f"Saved {len(settings.remotes)} remote(s) to {self.path}")

    def erase(self) -> None:
        """Delete the stored settings."""
        if self.path.exists():
            self.path.unlink()
            logger.info(f"Removed settings file {self.path}")
