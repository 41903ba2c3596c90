"""Tests for URL parsing and timestamp helpers."""

import pytest

from yt_transcript_search.errors import InvalidInputError
from yt_transcript_search.models import ChannelRef, PlaylistRef
from yt_transcript_search.utils import (
    extract_video_id,
    format_timestamp,
    parse_collection_url,
    parse_video_url,
)


class TestExtractVideoId:
    def test_standard_url(self):
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_short_url(self):
        assert extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_embed_url(self):
        assert extract_video_id("https://www.youtube.com/embed/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_shorts_url(self):
        assert extract_video_id("https://www.youtube.com/shorts/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_raw_id(self):
        assert extract_video_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_url_with_params(self):
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30") == "dQw4w9WgXcQ"

    def test_invalid_url(self):
        assert extract_video_id("https://google.com") is None

    def test_invalid_short_id(self):
        assert extract_video_id("abc") is None


class TestParseVideoUrl:
    def test_valid(self):
        assert parse_video_url("youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_strips_whitespace(self):
        assert parse_video_url("  dQw4w9WgXcQ \n") == "dQw4w9WgXcQ"

    @pytest.mark.parametrize("url", ["", "not-a-url", "https://vimeo.com/12345"])
    def test_invalid_raises(self, url):
        with pytest.raises(InvalidInputError, match="Invalid YouTube URL"):
            parse_video_url(url)


class TestParseCollectionUrl:
    def test_playlist(self):
        ref = parse_collection_url("https://www.youtube.com/playlist?list=PLabc_123-x")
        assert isinstance(ref, PlaylistRef)
        assert ref.playlist_id == "PLabc_123-x"
        assert ref.url == "https://www.youtube.com/playlist?list=PLabc_123-x"

    def test_watch_url_with_list(self):
        ref = parse_collection_url("https://youtube.com/watch?v=dQw4w9WgXcQ&list=PLxyz")
        assert isinstance(ref, PlaylistRef)
        assert ref.playlist_id == "PLxyz"

    def test_channel_handle(self):
        ref = parse_collection_url("https://www.youtube.com/@SomeCreator")
        assert isinstance(ref, ChannelRef)
        assert ref.channel_path == "@SomeCreator"
        assert ref.url == "https://www.youtube.com/@SomeCreator/videos"

    def test_channel_id(self):
        ref = parse_collection_url("youtube.com/channel/UC1234567890/videos")
        assert ref.channel_path == "channel/UC1234567890"

    @pytest.mark.parametrize("prefix", ["c/", "user/"])
    def test_legacy_channel_urls(self, prefix):
        ref = parse_collection_url(f"https://www.youtube.com/{prefix}someone")
        assert ref.channel_path == f"{prefix}someone"

    @pytest.mark.parametrize(
        "url",
        ["", "https://www.youtube.com/watch?v=dQw4w9WgXcQ", "https://example.com/@someone"],
    )
    def test_invalid(self, url):
        with pytest.raises(InvalidInputError):
            parse_collection_url(url)


class TestFormatTimestamp:
    def test_seconds_only(self):
        assert format_timestamp(45) == "0:45"

    def test_minutes_and_seconds(self):
        assert format_timestamp(125) == "2:05"

    def test_hours(self):
        assert format_timestamp(3661) == "1:01:01"

    def test_zero(self):
        assert format_timestamp(0) == "0:00"
