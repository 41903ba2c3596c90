"""Abstract base for transcript sources."""

from abc import ABC, abstractmethod

from yt_transcript_search.models import RawTranscript


class TranscriptSource(ABC):
    @abstractmethod
    async def fetch_raw(self, video_id: str, language: str = "en") -> RawTranscript:
        """Fetch the untyped timed-text units of a single video."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources."""
        ...
