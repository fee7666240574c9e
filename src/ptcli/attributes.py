"""Video attribute building from command-line flags.

Merges explicit flags over default values and, when a channel is named,
over the channel's own settings on the instance.
"""
# Created: 2026-10-15

import logging
from typing import Callable, List, Optional

import click

from .api_client import get_video_channel
from .models import (
    DefaultVideoAttributes,
    VideoAttributes,
    VideoChannel,
    VideoCommandFlags,
    VideoPrivacy,
)


logger = logging.getLogger(__name__)

ChannelLookup = Callable[[str, str], VideoChannel]

BOOLEAN_ATTRIBUTES = ('nsfw', 'comments_enabled', 'download_enabled', 'wait_transcoding')


def _split_list(ctx: click.Context, param: click.Parameter,
                value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated option value."""
    if value is None:
        return None
    return value.split(',')


def common_video_options(command: Callable) -> Callable:
    """Register the flags shared by commands that create or edit videos.

    Boolean flags default to None so an absent flag can fall back to
    stored defaults.
    """
    options = [
        click.option('-n', '--video-name', help='Video name'),
        click.option('-c', '--category', type=int, help='Category number'),
        click.option('-l', '--licence', type=int, help='Licence number'),
        click.option('-L', '--language', help='Language ISO 639 code (fr or en...)'),
        click.option('-t', '--tags', callback=_split_list, help='Video tags'),
        click.option('-N', '--nsfw', is_flag=True, default=None,
                     help='Video is Not Safe For Work'),
        click.option('-d', '--video-description', help='Video description'),
        click.option('-P', '--privacy',
                     type=click.IntRange(int(min(VideoPrivacy)), int(max(VideoPrivacy))),
                     help='Privacy'),
        click.option('-C', '--channel-name', help='Channel name'),
        click.option('-m', '--comments-enabled', is_flag=True, default=None,
                     help='Enable comments'),
        click.option('-s', '--support', help='Video support text'),
        click.option('-w', '--wait-transcoding', is_flag=True, default=None,
                     help='Wait transcoding before publishing the video'),
    ]
    # Applied in reverse so --help lists them in declaration order
    for option in reversed(options):
        command = option(command)
    return command


def build_video_attributes(url: str,
                           flags: VideoCommandFlags,
                           defaults: Optional[DefaultVideoAttributes] = None,
                           channel_lookup: Optional[ChannelLookup] = None) -> VideoAttributes:
    """Build the attributes of a video from flags and defaults.

    Booleans take the flag, then the default, then False. Other values
    take the flag, then the default; empty values count as absent and
    privacy ends up public when neither is set.

    If a channel name is given, the channel is fetched from ``url``. Its id
    is used as the channel, and its support text fills in a support value
    that is still missing. Lookup errors are not caught.

    Args:
        url: Instance URL used for the channel lookup
        flags: Explicit command-line flags
        defaults: Fallback values (default: none)
        channel_lookup: Callable fetching a channel (default: HTTP lookup)

    Returns:
        VideoAttributes
    """
    defaults = defaults or DefaultVideoAttributes()
    channel_lookup = channel_lookup or get_video_channel

    booleans = {}
    for key in BOOLEAN_ATTRIBUTES:
        if getattr(flags, key) is not None:
            booleans[key] = getattr(flags, key)
        elif getattr(defaults, key) is not None:
            booleans[key] = getattr(defaults, key)
        else:
            booleans[key] = False

    attributes = VideoAttributes(
        name=flags.video_name or defaults.name,
        category=flags.category or defaults.category or None,
        licence=flags.licence or defaults.licence or None,
        language=flags.language or defaults.language or None,
        privacy=VideoPrivacy(flags.privacy or defaults.privacy or VideoPrivacy.PUBLIC),
        support=flags.support or defaults.support or None,
        **booleans
    )

    if flags.channel_name:
        channel = channel_lookup(url, flags.channel_name)
        attributes.channel_id = channel.id
        logger.debug(f"Using channel {channel.name!r} (id {channel.id})")

        if not attributes.support and channel.support:
            attributes.support = channel.support
            logger.debug("Using support text from channel")

    return attributes
