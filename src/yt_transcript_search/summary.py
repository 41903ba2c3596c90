"""Condensed views of a transcript for long videos."""

import re
from typing import Any, Literal

from yt_transcript_search.errors import InvalidInputError
from yt_transcript_search.formatting import as_plain_text
from yt_transcript_search.models import Transcript, TranscriptSegment
from yt_transcript_search.utils import format_timestamp

SummaryType = Literal["brief", "detailed", "topics", "timestamps", "chunks"]

PREVIEW_SEGMENTS = 3
MAX_TOPICS = 10
MIN_TOPIC_LENGTH = 20


def _overview(transcript: Transcript) -> dict[str, Any]:
    return {
        "video_id": transcript.video_id,
        "title": transcript.title,
        "duration": transcript.total_duration,
        "segment_count": len(transcript.segments),
        "language": transcript.language,
    }


def key_topics(transcript: Transcript) -> list[str]:
    """First sentences long enough to carry a topic."""
    sentences = re.split(r"[.!?]+", as_plain_text(transcript))
    topics = [s.strip() for s in sentences if len(s.strip()) > MIN_TOPIC_LENGTH]
    return topics[:MAX_TOPICS]


def time_chunks(transcript: Transcript, chunk_minutes: int = 5) -> list[dict[str, str]]:
    """Group segments into fixed windows of ``chunk_minutes``."""
    if chunk_minutes < 1:
        raise InvalidInputError("chunk_minutes must be >= 1")
    chunk_seconds = chunk_minutes * 60
    chunks: dict[int, list[TranscriptSegment]] = {}

    for seg in transcript.segments:
        chunk_idx = int(seg.start // chunk_seconds)
        chunks.setdefault(chunk_idx, []).append(seg)

    return [
        {
            "start": format_timestamp(idx * chunk_seconds),
            "end": format_timestamp((idx + 1) * chunk_seconds),
            "text": " ".join(s.text for s in chunks[idx]),
        }
        for idx in sorted(chunks)
    ]


def summarize(
    transcript: Transcript,
    summary_type: SummaryType = "brief",
    chunk_minutes: int = 5,
) -> dict[str, Any]:
    if summary_type == "brief":
        preview = " ".join(s.text for s in transcript.segments[:PREVIEW_SEGMENTS])
        return {**_overview(transcript), "preview": f"{preview}..."}
    if summary_type == "detailed":
        return {**_overview(transcript), "full_text": as_plain_text(transcript)}
    if summary_type == "topics":
        return {"video_id": transcript.video_id, "key_topics": key_topics(transcript)}
    if summary_type == "timestamps":
        return {
            "video_id": transcript.video_id,
            "timestamped_content": [
                {"time": s.start, "timestamp": format_timestamp(s.start), "text": s.text}
                for s in transcript.segments
            ],
        }
    if summary_type == "chunks":
        return {
            "video_id": transcript.video_id,
            "chunk_minutes": chunk_minutes,
            "chunks": time_chunks(transcript, chunk_minutes),
        }
    raise InvalidInputError(f"Unknown summary type: {summary_type}")
