"""Tests for video attribute building.

Tests flag/default precedence, privacy fallback, channel lookup handling
and the shared click options.
"""
# Created: 2026-10-17

import pytest
import click
from click.testing import CliRunner
from unittest.mock import Mock, patch

from ptcli.api_client import ChannelNotFoundError
from ptcli.attributes import (
    BOOLEAN_ATTRIBUTES,
    build_video_attributes,
    common_video_options,
)
from ptcli.models import (
    DefaultVideoAttributes,
    VideoAttributes,
    VideoChannel,
    VideoCommandFlags,
    VideoPrivacy,
)


URL = "https://videos.example.org"


class TestBooleanAttributes:
    """Test three-level precedence for boolean attributes."""

    @pytest.mark.parametrize("key", BOOLEAN_ATTRIBUTES)
    def test_explicit_true_beats_default_false(self, key):
        """An explicit True overrides a False default."""
        flags = VideoCommandFlags(**{key: True})
        defaults = DefaultVideoAttributes(**{key: False})

        attributes = build_video_attributes(URL, flags, defaults)

        assert getattr(attributes, key) is True

    @pytest.mark.parametrize("key", BOOLEAN_ATTRIBUTES)
    def test_explicit_false_beats_default_true(self, key):
        """An explicit False is a value, not an absence."""
        flags = VideoCommandFlags(**{key: False})
        defaults = DefaultVideoAttributes(**{key: True})

        attributes = build_video_attributes(URL, flags, defaults)

        assert getattr(attributes, key) is False

    @pytest.mark.parametrize("key", BOOLEAN_ATTRIBUTES)
    def test_default_true_used_when_flag_absent(self, key):
        """The default applies when the flag is not given."""
        defaults = DefaultVideoAttributes(**{key: True})

        attributes = build_video_attributes(URL, VideoCommandFlags(), defaults)

        assert getattr(attributes, key) is True

    @pytest.mark.parametrize("key", BOOLEAN_ATTRIBUTES)
    def test_false_when_both_absent(self, key):
        """No flag and no default gives False."""
        attributes = build_video_attributes(URL, VideoCommandFlags(), DefaultVideoAttributes())

        assert getattr(attributes, key) is False

    def test_fields_are_independent(self):
        """Each boolean is resolved on its own."""
        flags = VideoCommandFlags(nsfw=True)
        defaults = DefaultVideoAttributes(comments_enabled=True, nsfw=False)

        attributes = build_video_attributes(URL, flags, defaults)

        assert attributes.nsfw is True
        assert attributes.comments_enabled is True
        assert attributes.download_enabled is False
        assert attributes.wait_transcoding is False


class TestScalarAttributes:
    """Test precedence for name, category, licence, language and support."""

    def test_flags_override_defaults(self):
        """Explicit values win over defaults."""
        flags = VideoCommandFlags(
            video_name="Flag name", category=3, licence=2, language="fr", support="flag"
        )
        defaults = DefaultVideoAttributes(
            name="Default name", category=1, licence=1, language="en", support="default"
        )

        attributes = build_video_attributes(URL, flags, defaults)

        assert attributes.name == "Flag name"
        assert attributes.category == 3
        assert attributes.licence == 2
        assert attributes.language == "fr"
        assert attributes.support == "flag"

    def test_defaults_fill_missing_flags(self):
        """Defaults apply to flags that were not given."""
        defaults = DefaultVideoAttributes(name="video.mp4", category=10, language="en")

        attributes = build_video_attributes(URL, VideoCommandFlags(), defaults)

        assert attributes.name == "video.mp4"
        assert attributes.category == 10
        assert attributes.language == "en"
        assert attributes.licence is None
        assert attributes.support is None

    def test_unset_everywhere_is_none(self):
        """Without flags or defaults the values stay None."""
        attributes = build_video_attributes(URL, VideoCommandFlags())

        assert attributes.name is None
        assert attributes.category is None
        assert attributes.licence is None
        assert attributes.language is None
        assert attributes.support is None
        assert attributes.channel_id is None

    def test_empty_flag_falls_back_to_default(self):
        """Empty values count as absent."""
        flags = VideoCommandFlags(video_name="", support="")
        defaults = DefaultVideoAttributes(name="Default name", support="default")

        attributes = build_video_attributes(URL, flags, defaults)

        assert attributes.name == "Default name"
        assert attributes.support == "default"


class TestPrivacy:
    """Test privacy fallback."""

    def test_public_when_unset(self):
        """No flag and no default gives public."""
        attributes = build_video_attributes(URL, VideoCommandFlags(), DefaultVideoAttributes())
        assert attributes.privacy is VideoPrivacy.PUBLIC

    @pytest.mark.parametrize("privacy", list(VideoPrivacy))
    def test_explicit_privacy_used(self, privacy):
        """Any explicit privacy value is kept."""
        flags = VideoCommandFlags(privacy=privacy)
        defaults = DefaultVideoAttributes(privacy=VideoPrivacy.PUBLIC)

        attributes = build_video_attributes(URL, flags, defaults)

        assert attributes.privacy is privacy

    def test_default_privacy_used(self):
        """The default privacy applies without a flag."""
        defaults = DefaultVideoAttributes(privacy=VideoPrivacy.UNLISTED)

        attributes = build_video_attributes(URL, VideoCommandFlags(), defaults)

        assert attributes.privacy is VideoPrivacy.UNLISTED


class TestChannelLookup:
    """Test channel lookup handling."""

    def test_no_lookup_without_channel_name(self, channel_lookup):
        """The instance is not contacted when no channel is named."""
        build_video_attributes(URL, VideoCommandFlags(), channel_lookup=channel_lookup)
        channel_lookup.assert_not_called()

    def test_channel_id_and_support_adopted(self):
        """A found channel sets channel_id and fills missing support."""
        lookup = Mock(return_value=VideoChannel(id=42, name="chan", support="x"))
        flags = VideoCommandFlags(channel_name="chan")

        attributes = build_video_attributes(URL, flags, DefaultVideoAttributes(), lookup)

        lookup.assert_called_once_with(URL, "chan")
        assert attributes.channel_id == 42
        assert attributes.support == "x"

    def test_default_support_kept_over_channel_support(self):
        """Support from defaults has precedence over the channel's."""
        lookup = Mock(return_value=VideoChannel(id=42, name="chan", support="x"))
        flags = VideoCommandFlags(channel_name="chan")
        defaults = DefaultVideoAttributes(support="y")

        attributes = build_video_attributes(URL, flags, defaults, lookup)

        assert attributes.channel_id == 42
        assert attributes.support == "y"

    def test_channel_without_support(self):
        """A channel without support text leaves support unset."""
        lookup = Mock(return_value=VideoChannel(id=7, name="chan"))
        flags = VideoCommandFlags(channel_name="chan")

        attributes = build_video_attributes(URL, flags, channel_lookup=lookup)

        assert attributes.channel_id == 7
        assert attributes.support is None

    def test_lookup_failure_propagates(self):
        """Lookup errors reach the caller."""
        lookup = Mock(side_effect=ChannelNotFoundError("not found", status_code=404))
        flags = VideoCommandFlags(channel_name="missing")

        with pytest.raises(ChannelNotFoundError):
            build_video_attributes(URL, flags, channel_lookup=lookup)

    def test_default_lookup_is_http_client(self, sample_channel):
        """Without an explicit lookup the API client function is used."""
        flags = VideoCommandFlags(channel_name="my_channel")

        with patch('ptcli.attributes.get_video_channel', return_value=sample_channel) as mock_get:
            attributes = build_video_attributes(URL, flags)

        mock_get.assert_called_once_with(URL, "my_channel")
        assert attributes.channel_id == 42


class TestVideoAttributesPayload:
    """Test conversion to the API payload."""

    def test_to_dict_uses_api_keys(self):
        """Keys are camelCase and privacy is an integer."""
        attributes = VideoAttributes(
            name="Video",
            privacy=VideoPrivacy.PRIVATE,
            comments_enabled=True,
            channel_id=3
        )

        payload = attributes.to_dict()

        assert payload == {
            'name': 'Video',
            'privacy': 3,
            'nsfw': False,
            'commentsEnabled': True,
            'downloadEnabled': False,
            'waitTranscoding': False,
            'channelId': 3,
        }

    def test_defaults_from_dict(self):
        """Defaults load from a mapping and ignore unknown keys."""
        defaults = DefaultVideoAttributes.from_dict({
            'name': 'Default',
            'privacy': 2,
            'nsfw': True,
            'unknown': 'ignored',
        })

        assert defaults.name == 'Default'
        assert defaults.privacy is VideoPrivacy.UNLISTED
        assert defaults.nsfw is True


class TestCommonVideoOptions:
    """Test the shared click options."""

    @staticmethod
    def _make_command(captured):
        @click.command()
        @common_video_options
        def command(**options):
            captured.append(VideoCommandFlags.from_options(**options))
        return command

    def test_flags_parsed(self):
        """Options are converted into typed flags."""
        captured = []
        result = CliRunner().invoke(self._make_command(captured), [
            '-n', 'My video', '-c', '5', '-l', '2', '-L', 'fr',
            '-t', 'one,two', '-N', '-P', '3', '-C', 'chan',
            '-m', '-s', 'support', '-w', '-d', 'desc',
        ])

        assert result.exit_code == 0, result.output
        flags = captured[0]
        assert flags.video_name == 'My video'
        assert flags.category == 5
        assert flags.licence == 2
        assert flags.language == 'fr'
        assert flags.tags == ['one', 'two']
        assert flags.nsfw is True
        assert flags.privacy is VideoPrivacy.PRIVATE
        assert flags.channel_name == 'chan'
        assert flags.comments_enabled is True
        assert flags.support == 'support'
        assert flags.wait_transcoding is True
        assert flags.video_description == 'desc'

    def test_absent_values_are_none(self):
        """Valued options that were not given stay None."""
        captured = []
        result = CliRunner().invoke(self._make_command(captured), [])

        assert result.exit_code == 0, result.output
        flags = captured[0]
        assert flags.video_name is None
        assert flags.tags is None
        assert flags.privacy is None
        assert flags.channel_name is None
        assert flags.nsfw is None
        assert flags.comments_enabled is None
        assert flags.wait_transcoding is None

    def test_privacy_out_of_range_rejected(self):
        """Unknown privacy numbers are refused by the parser."""
        result = CliRunner().invoke(self._make_command([]), ['-P', '9'])
        assert result.exit_code == 2
