"""Shared test fixtures."""

import pytest

from yt_transcript_search.models import RawTranscript, RawUnit, Transcript, TranscriptSegment


@pytest.fixture
def sample_segments():
    return [
        TranscriptSegment(text="Hello world", start=0.0, duration=2.5),
        TranscriptSegment(text="this is a test", start=2.5, duration=3.0),
        TranscriptSegment(text="of the transcript", start=5.5, duration=2.0),
        TranscriptSegment(text="extraction system", start=7.5, duration=2.5),
        TranscriptSegment(text="goodbye world", start=10.0, duration=2.0),
    ]


@pytest.fixture
def sample_transcript(sample_segments):
    return Transcript(
        video_id="dQw4w9WgXcQ",
        title="Sample video",
        language="en",
        segments=sample_segments,
    )


@pytest.fixture
def sample_raw():
    return RawTranscript(
        video_id="dQw4w9WgXcQ",
        title="Sample video",
        units=[
            RawUnit(text="Hello world", start="0.0", dur="2.5"),
            RawUnit(text="this is a test", start="2.5", dur="3.0"),
            RawUnit(text="of the transcript", start="5.5", dur="2.0"),
            RawUnit(text="extraction system", start="7.5", dur="2.5"),
            RawUnit(text="goodbye world", start="10.0", dur="2.0"),
        ],
    )
