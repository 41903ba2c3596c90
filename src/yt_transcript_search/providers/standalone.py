"""Standalone source using youtube-transcript-api directly."""

import asyncio
import logging
from functools import partial

from youtube_transcript_api import YouTubeTranscriptApi, TranscriptsDisabled, NoTranscriptFound

from yt_transcript_search.models import RawTranscript, RawUnit
from .base import TranscriptSource

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"


class StandaloneProvider(TranscriptSource):
    def __init__(self):
        self._api = YouTubeTranscriptApi()

    async def fetch_raw(self, video_id: str, language: str = "en") -> RawTranscript:
        loop = asyncio.get_event_loop()
        try:
            fetched = await loop.run_in_executor(
                None,
                partial(self._fetch, video_id, language),
            )
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            raise ValueError(f"No transcript available for {video_id}: {e}")

        units = [
            RawUnit(text=s.text, start=s.start, dur=s.duration)
            for s in fetched
        ]
        logger.debug(f"Fetched {len(units)} caption units for {video_id}")

        # The caption API carries no video title
        return RawTranscript(video_id=video_id, units=units)

    def _fetch(self, video_id: str, language: str):
        """Synchronous fetch in executor."""
        return self._api.fetch(video_id, languages=[language, FALLBACK_LANGUAGE])

    async def close(self) -> None:
        pass
