"""Backend source that calls a remote transcript service."""

import logging

import httpx

from yt_transcript_search.models import RawTranscript, RawUnit
from .base import TranscriptSource

logger = logging.getLogger(__name__)


class BackendProvider(TranscriptSource):
    def __init__(self, base_url: str, api_key: str = "", timeout: float = 60.0):
        self._base_url = base_url.rstrip("/")
        self._headers = {}
        if api_key:
            self._headers["X-API-Key"] = api_key
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=timeout,
        )

    async def fetch_raw(self, video_id: str, language: str = "en") -> RawTranscript:
        resp = await self._client.get(
            f"/transcript/{video_id}",
            params={"lang": language, "format": "segments"},
        )
        resp.raise_for_status()
        data = resp.json()

        units = [
            RawUnit(
                text=s.get("text", ""),
                start=s.get("start"),
                dur=s.get("duration", s.get("dur", "0")),
            )
            for s in data.get("segments", [])
        ]
        logger.debug(f"Backend returned {len(units)} units for {video_id}")

        return RawTranscript(
            video_id=data.get("video_id", video_id),
            title=data.get("title") or data.get("metadata", {}).get("title"),
            units=units,
        )

    async def close(self) -> None:
        await self._client.aclose()
