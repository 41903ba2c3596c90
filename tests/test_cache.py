"""Tests for cache logic."""

from yt_transcript_search.cache import TranscriptCache
from yt_transcript_search.models import Transcript


class TestTranscriptCache:
    def test_set_and_get(self, sample_transcript):
        cache = TranscriptCache(max_size=10, ttl=3600)
        cache.set(sample_transcript)
        assert cache.get("dQw4w9WgXcQ", "en") is sample_transcript

    def test_miss(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        assert cache.get("nonexistent", "en") is None

    def test_keyed_by_language(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        en = Transcript(video_id="abc", language="en")
        de = Transcript(video_id="abc", language="de")
        cache.set(en)
        cache.set(de)
        assert cache.get("abc", "en") is en
        assert cache.get("abc", "de") is de
        assert cache.get("abc", "fr") is None

    def test_stats_after_operations(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        cache.set(Transcript(video_id="abc"))
        cache.get("abc", "en")  # hit
        cache.get("xyz", "en")  # miss
        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50.0

    def test_max_size(self):
        cache = TranscriptCache(max_size=2, ttl=3600)
        for vid in ("a", "b", "c"):
            cache.set(Transcript(video_id=vid))
        assert cache.stats()["size"] == 2

    def test_clear(self):
        cache = TranscriptCache(max_size=10, ttl=3600)
        cache.set(Transcript(video_id="abc"))
        cache.clear()
        assert cache.get("abc", "en") is None
