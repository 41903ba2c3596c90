"""In-memory TTL cache for transcripts."""

from cachetools import TTLCache

from yt_transcript_search.models import Transcript


class TranscriptCache:
    def __init__(self, max_size: int = 100, ttl: int = 3600):
        self._cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl)
        self._hits = 0
        self._misses = 0

    def _key(self, video_id: str, language: str) -> str:
        return f"{video_id}:{language}"

    def get(self, video_id: str, language: str) -> Transcript | None:
        result = self._cache.get(self._key(video_id, language))
        if result is not None:
            self._hits += 1
        else:
            self._misses += 1
        return result

    def set(self, transcript: Transcript) -> None:
        # Transcripts are frozen, so the cached object can be handed out as-is.
        self._cache[self._key(transcript.video_id, transcript.language)] = transcript

    def clear(self) -> None:
        self._cache.clear()

    def stats(self) -> dict:
        return {
            "size": len(self._cache),
            "max_size": self._cache.maxsize,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / max(self._hits + self._misses, 1) * 100, 1),
        }
