"""Configuration management for ptcli."""
# Created: 2026-10-12

from .settings import (
    RemoteSettings,
    SettingsError,
    SettingsStore,
    get_config_dir,
    get_netrc_path,
)

__all__ = [
    'RemoteSettings',
    'SettingsError',
    'SettingsStore',
    'get_config_dir',
    'get_netrc_path',
]
