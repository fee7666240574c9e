"""Data models for remotes, channels and video attributes.

Defines the core data structures used throughout the application.
"""
# Created: 2026-10-12

from dataclasses import dataclass, fields
from typing import Optional, List, Dict, Any
from enum import IntEnum


class VideoPrivacy(IntEnum):
    """Video privacy level as understood by the remote instance."""
    PUBLIC = 1
    UNLISTED = 2
    PRIVATE = 3
    INTERNAL = 4


@dataclass
class ExplicitRemote:
    """Remote identity given on the command line. Any field may be absent."""
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def is_complete(self) -> bool:
        """Check whether url, username and password were all supplied."""
        return bool(self.url and self.username and self.password)

    def missing_fields(self) -> List[str]:
        """Names of the fields that were not supplied, in flag order."""
        return [name for name in ('url', 'username', 'password')
                if not getattr(self, name)]


@dataclass
class ResolvedRemote:
    """Remote identity after falling back to settings and credentials.

    Fields stay ``None`` when no source could supply them.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass
class VideoChannel:
    """A video channel on the remote instance."""
    id: int
    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    support: Optional[str] = None

    @classmethod
    def from_api_response(cls, item: Dict[str, Any]) -> 'VideoChannel':
        """Create a VideoChannel from a ``/video-channels/{name}`` response.

        Args:
            item: Decoded JSON body

        Returns:
            VideoChannel instance
        """
        return cls(
            id=item['id'],
            name=item.get('name', ''),
            display_name=item.get('displayName'),
            description=item.get('description'),
            support=item.get('support')
        )


@dataclass
class VideoCommandFlags:
    """Video flags as parsed from the command line.

    ``None`` means the flag was not given.
    """
    video_name: Optional[str] = None
    category: Optional[int] = None
    licence: Optional[int] = None
    language: Optional[str] = None
    tags: Optional[List[str]] = None
    nsfw: Optional[bool] = None
    video_description: Optional[str] = None
    privacy: Optional[VideoPrivacy] = None
    channel_name: Optional[str] = None
    comments_enabled: Optional[bool] = None
    download_enabled: Optional[bool] = None
    support: Optional[str] = None
    wait_transcoding: Optional[bool] = None

    @classmethod
    def from_options(cls, **options: Any) -> 'VideoCommandFlags':
        """Build flags from click keyword arguments, ignoring unrelated ones."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in options.items() if key in known}

        if values.get('privacy') is not None:
            values['privacy'] = VideoPrivacy(values['privacy'])

        return cls(**values)


@dataclass
class DefaultVideoAttributes:
    """Fallback attribute values used when a flag is absent."""
    name: Optional[str] = None
    category: Optional[int] = None
    licence: Optional[int] = None
    language: Optional[str] = None
    privacy: Optional[VideoPrivacy] = None
    support: Optional[str] = None
    nsfw: Optional[bool] = None
    comments_enabled: Optional[bool] = None
    download_enabled: Optional[bool] = None
    wait_transcoding: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DefaultVideoAttributes':
        """Create defaults from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}

        if values.get('privacy') is not None:
            values['privacy'] = VideoPrivacy(values['privacy'])

        return cls(**values)


@dataclass
class VideoAttributes:
    """Normalized video metadata ready to be sent to the instance."""
    name: Optional[str] = None
    category: Optional[int] = None
    licence: Optional[int] = None
    language: Optional[str] = None
    privacy: VideoPrivacy = VideoPrivacy.PUBLIC
    support: Optional[str] = None
    nsfw: bool = False
    comments_enabled: bool = False
    download_enabled: bool = False
    wait_transcoding: bool = False
    channel_id: Optional[int] = None

    # Payload key for each attribute
    API_KEYS = {
        'name': 'name',
        'category': 'category',
        'licence': 'licence',
        'language': 'language',
        'privacy': 'privacy',
        'support': 'support',
        'nsfw': 'nsfw',
        'comments_enabled': 'commentsEnabled',
        'download_enabled': 'downloadEnabled',
        'wait_transcoding': 'waitTranscoding',
        'channel_id': 'channelId',
    }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the instance's JSON payload, dropping unset fields."""
        payload: Dict[str, Any] = {}
        for attr, key in self.API_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, VideoPrivacy):
                value = int(value)
            payload[key] = value
        return payload
