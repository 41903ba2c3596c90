"""Resolve channel and playlist references into video ids with yt-dlp."""

import asyncio
import logging
from functools import partial

import yt_dlp

from yt_transcript_search.errors import ResolveError
from yt_transcript_search.models import ChannelRef, PlaylistRef

logger = logging.getLogger(__name__)


class CollectionResolver:
    async def resolve_video_ids(
        self, ref: PlaylistRef | ChannelRef, max_videos: int = 50
    ) -> list[str]:
        loop = asyncio.get_event_loop()
        try:
            entries = await loop.run_in_executor(
                None, partial(self._extract_entries, ref.url, max_videos)
            )
        except yt_dlp.utils.DownloadError as e:
            raise ResolveError(f"Could not list videos for {ref.url}: {e}") from e

        video_ids: list[str] = []
        for entry in entries:
            vid = (entry or {}).get("id")
            if vid and vid not in video_ids:
                video_ids.append(vid)
            if len(video_ids) >= max_videos:
                break

        logger.info(f"Resolved {len(video_ids)} videos from {ref.kind} {ref.url}")
        return video_ids

    def _extract_entries(self, url: str, max_videos: int) -> list[dict]:
        """Synchronous flat playlist extraction, run in executor."""
        ydl_opts = {
            "quiet": True,
            "no_warnings": True,
            "extract_flat": True,
            "playlistend": max_videos,
        }
        with yt_dlp.YoutubeDL(ydl_opts) as ydl:
            info = ydl.extract_info(url, download=False)
        return list(info.get("entries") or []) if info else []
