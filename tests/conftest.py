"""Shared pytest fixtures for ptcli tests.

Provides common fixtures and test utilities.
"""
# Created: 2026-10-16

import pytest
from pathlib import Path
from unittest.mock import Mock

# Import models from ptcli package
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ptcli.auth import Machine, NetrcCredentials
from ptcli.config.settings import RemoteSettings, SettingsStore
from ptcli.models import VideoChannel


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Provide a temporary configuration directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


@pytest.fixture
def settings_store(tmp_config_dir):
    """Provide a SettingsStore writing to the temporary directory."""
    return SettingsStore(tmp_config_dir)


@pytest.fixture
def netrc_path(tmp_path):
    """Provide a path for a credentials file (not created)."""
    return tmp_path / "netrc"


@pytest.fixture
def credentials_file(netrc_path):
    """Provide a NetrcCredentials handler on the temporary path."""
    return NetrcCredentials(netrc_path)


@pytest.fixture
def sample_settings():
    """Three remotes with the second one as default."""
    return RemoteSettings(
        remotes=["https://a.example", "https://b.example", "https://c.example"],
        default=1
    )


@pytest.fixture
def sample_credentials():
    """Credentials for the default remote of sample_settings."""
    return {
        "https://b.example": Machine(login="bob", password="hunter2"),
        "https://c.example": Machine(login="carol", password="s3cret"),
    }


@pytest.fixture
def sample_channel():
    """Provide a VideoChannel as returned by a lookup."""
    return VideoChannel(
        id=42,
        name="my_channel",
        display_name="My Channel",
        support="Support me on example.org"
    )


@pytest.fixture
def channel_lookup(sample_channel):
    """Provide a mock channel lookup returning sample_channel."""
    return Mock(return_value=sample_channel)
