"""HTTP client for a remote video instance.

Provides the channel lookup used when building video attributes.
"""
# Created: 2026-10-14

from typing import Optional
from urllib.parse import quote
import logging

import requests

from .models import VideoChannel


logger = logging.getLogger(__name__)


class RemoteAPIError(Exception):
    """Raised when the instance answers with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ChannelNotFoundError(RemoteAPIError):
    """Raised when a video channel does not exist on the instance."""
    pass


class RemoteAPIClient:
    """Minimal client for the instance REST API."""

    API_PREFIX = '/api/v1'

    def __init__(self, base_url: str,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """Initialize the API client.

        Args:
            base_url: Instance URL, e.g. https://videos.example.org
            session: Optional requests session to reuse
            timeout: Request timeout in seconds (default: none)
        """
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{self.API_PREFIX}{path}"

    def get_video_channel(self, name: str) -> VideoChannel:
        """Fetch a video channel by its handle.

        Args:
            name: Channel name (``name`` or ``name@host``)

        Returns:
            VideoChannel

        Raises:
            ChannelNotFoundError: If the instance has no such channel
            RemoteAPIError: On any other error status
        """
        url = self._url(f"/video-channels/{quote(name, safe='@')}")
        logger.debug(f"GET {url}")

        response = self.session.get(url, timeout=self.timeout)

        if response.status_code == 404:
            logger.error(f"Video channel {name!r} not found on {self.base_url}")
            raise ChannelNotFoundError(
                f"Video channel {name!r} not found on {self.base_url}",
                status_code=404
            )

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"Error fetching video channel {name!r}: {e}")
            raise RemoteAPIError(
                f"Failed to fetch video channel {name!r}: {e}",
                status_code=response.status_code
            ) from e

        return VideoChannel.from_api_response(response.json())


def get_video_channel(url: str, name: str) -> VideoChannel:
    """Look up a video channel on the instance at ``url``."""
    return RemoteAPIClient(url).get_video_channel(name)
