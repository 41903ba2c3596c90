"""Utility functions."""

import re

from yt_transcript_search.errors import InvalidInputError
from yt_transcript_search.models import ChannelRef, PlaylistRef

_PLAYLIST_PATTERN = re.compile(
    r"^(?:https?://)?(?:www\.|m\.)?youtube\.com/(?:playlist\?|watch\?v=[\w-]+&).*?\blist=([\w-]+)"
)
_CHANNEL_PATTERN = re.compile(
    r"^(?:https?://)?(?:www\.|m\.)?youtube\.com/(@|channel/|c/|user/)([\w.-]+)"
)


def extract_video_id(url_or_id: str) -> str | None:
    """Extract YouTube video ID from URL or return as-is if valid ID."""
    patterns = [
        r"(?:v=|/v/|youtu\.be/)([a-zA-Z0-9_-]{11})",
        r"(?:embed/)([a-zA-Z0-9_-]{11})",
        r"(?:shorts/)([a-zA-Z0-9_-]{11})",
    ]
    for pattern in patterns:
        match = re.search(pattern, url_or_id)
        if match:
            return match.group(1)
    if re.match(r"^[a-zA-Z0-9_-]{11}$", url_or_id):
        return url_or_id
    return None


def parse_video_url(url: str) -> str:
    """Like extract_video_id, but raise InvalidInputError instead of returning None."""
    video_id = extract_video_id(url.strip()) if url else None
    if not video_id:
        raise InvalidInputError(f"Invalid YouTube URL or video ID: {url}")
    return video_id


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def parse_collection_url(url: str) -> PlaylistRef | ChannelRef:
    """Parse a playlist or channel URL into a collection reference."""
    url = (url or "").strip()
    match = _PLAYLIST_PATTERN.match(url)
    if match:
        return PlaylistRef(playlist_id=match.group(1))
    match = _CHANNEL_PATTERN.match(url)
    if match:
        prefix, name = match.groups()
        return ChannelRef(channel_path=f"{prefix}{name}")
    raise InvalidInputError(f"Invalid YouTube channel or playlist URL: {url}")


def format_timestamp(seconds: float) -> str:
    """Format seconds to HH:MM:SS or MM:SS."""
    h = int(seconds // 3600)
    m = int((seconds % 3600) // 60)
    s = int(seconds % 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"
