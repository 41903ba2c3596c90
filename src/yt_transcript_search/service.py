"""Transcript service: the single entry point the MCP tools talk to."""

import logging

from yt_transcript_search import formatting
from yt_transcript_search.batch import fetch_batch
from yt_transcript_search.cache import TranscriptCache
from yt_transcript_search.errors import (
    BatchFailedError,
    FetchError,
    InvalidInputError,
    TranscriptError,
)
from yt_transcript_search.models import BatchResult, SearchResult, Transcript
from yt_transcript_search.providers.base import TranscriptSource
from yt_transcript_search.resolver import CollectionResolver
from yt_transcript_search.search import search_transcript
from yt_transcript_search.utils import parse_collection_url, parse_video_url, watch_url

logger = logging.getLogger(__name__)


class TranscriptService:
    """Fetches, caches, searches and renders transcripts.

    The transcript source, the collection resolver and the cache are passed
    in by the owner, which is also responsible for calling ``close()``.
    """

    def __init__(
        self,
        source: TranscriptSource,
        resolver: CollectionResolver | None = None,
        cache: TranscriptCache | None = None,
        max_concurrent: int = 3,
        pacing_delay: float = 1.0,
    ):
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        self._source = source
        self._resolver = resolver
        self._cache = cache
        self._max_concurrent = max_concurrent
        self._pacing_delay = pacing_delay

    async def get_transcript(self, url: str, language: str = "en") -> Transcript:
        video_id = parse_video_url(url)

        if self._cache is not None:
            cached = self._cache.get(video_id, language)
            if cached is not None:
                return cached

        try:
            raw = await self._source.fetch_raw(video_id, language)
        except Exception as e:
            raise FetchError(video_id, str(e) or type(e).__name__) from e

        transcript = Transcript.from_raw(
            video_id, raw.units, language=language, title=raw.title
        )
        if raw.units and not transcript.segments:
            logger.warning(f"All {len(raw.units)} caption units of {video_id} were malformed")

        if self._cache is not None:
            self._cache.set(transcript)
        return transcript

    def search(
        self,
        transcript: Transcript,
        query: str,
        case_sensitive: bool = False,
        context_window: int = 30,
    ) -> list[SearchResult]:
        return search_transcript(
            transcript,
            query,
            case_sensitive=case_sensitive,
            context_window=context_window,
        )

    async def search_video(
        self,
        url: str,
        query: str,
        case_sensitive: bool = False,
        context_window: int = 30,
        language: str = "en",
    ) -> tuple[Transcript, list[SearchResult]]:
        if not query or not query.strip():
            raise InvalidInputError("Search query cannot be empty.")
        transcript = await self.get_transcript(url, language)
        return transcript, self.search(
            transcript, query, case_sensitive=case_sensitive, context_window=context_window
        )

    async def fetch_batch(
        self,
        urls: list[str],
        language: str = "en",
        max_concurrent: int | None = None,
    ) -> BatchResult:
        """Fetch many transcripts; raises BatchFailedError only when all of them fail."""

        async def fetch(url: str) -> Transcript:
            return await self.get_transcript(url, language)

        result = await fetch_batch(
            urls,
            fetch,
            concurrency_limit=max_concurrent or self._max_concurrent,
            pacing_delay=self._pacing_delay,
        )
        if result.all_failed:
            raise BatchFailedError(result.failures)
        return result

    async def list_collection_videos(
        self, collection_url: str, max_videos: int = 50
    ) -> list[str]:
        ref = parse_collection_url(collection_url)
        if self._resolver is None:
            raise TranscriptError("No collection resolver configured")
        video_ids = await self._resolver.resolve_video_ids(ref, max_videos)
        return [watch_url(vid) for vid in video_ids]

    async def fetch_collection(
        self,
        collection_url: str,
        max_videos: int = 50,
        language: str = "en",
        max_concurrent: int | None = None,
    ) -> BatchResult:
        urls = await self.list_collection_videos(collection_url, max_videos)
        if not urls:
            return BatchResult()
        return await self.fetch_batch(urls, language=language, max_concurrent=max_concurrent)

    as_plain_text = staticmethod(formatting.as_plain_text)
    as_srt = staticmethod(formatting.as_srt)
    as_vtt = staticmethod(formatting.as_vtt)
    as_json = staticmethod(formatting.as_json)
    render = staticmethod(formatting.render)

    async def close(self) -> None:
        await self._source.close()
