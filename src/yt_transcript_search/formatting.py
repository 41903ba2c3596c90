"""Render transcripts as plain text, SRT, VTT-style subtitles or JSON."""

from typing import Callable, Literal

from yt_transcript_search.errors import InvalidInputError
from yt_transcript_search.models import Transcript

OutputFormat = Literal["json", "text", "srt", "vtt"]


def format_srt_time(seconds: float) -> str:
    """Format seconds as HH:MM:SS,mmm. Hours are not wrapped at 24."""
    total_ms = int(round(seconds * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def as_plain_text(transcript: Transcript) -> str:
    return " ".join(seg.text for seg in transcript.segments)


def as_srt(transcript: Transcript) -> str:
    cues = [
        f"{index}\n"
        f"{format_srt_time(seg.start)} --> {format_srt_time(seg.end)}\n"
        f"{seg.text}\n"
        for index, seg in enumerate(transcript.segments, start=1)
    ]
    return "\n".join(cues)


def as_vtt(transcript: Transcript) -> str:
    """SRT layout with every comma swapped for a period.

    The swap runs over the whole render, so commas inside cue text are
    replaced too, and no WEBVTT header is emitted.
    """
    return as_srt(transcript).replace(",", ".")


def as_json(transcript: Transcript) -> str:
    return transcript.model_dump_json(indent=2)


FORMATTERS: dict[str, Callable[[Transcript], str]] = {
    "json": as_json,
    "text": as_plain_text,
    "srt": as_srt,
    "vtt": as_vtt,
}


def render(transcript: Transcript, fmt: OutputFormat = "json") -> str:
    try:
        formatter = FORMATTERS[fmt]
    except KeyError:
        raise InvalidInputError(
            f"Unknown format {fmt!r}, expected one of: {', '.join(FORMATTERS)}"
        ) from None
    return formatter(transcript)
