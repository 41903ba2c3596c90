"""Data models for transcripts, search results and batch outcomes."""

import logging
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

logger = logging.getLogger(__name__)

Seconds = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class TranscriptSegment(BaseModel):
    """One timed span of transcript text."""

    model_config = ConfigDict(frozen=True)

    text: str
    start: Seconds
    duration: Seconds

    @computed_field
    @property
    def end(self) -> float:
        return self.start + self.duration


class RawUnit(BaseModel):
    """Timed text record as delivered by a transcript source, not yet validated."""

    text: str = ""
    start: str | float | None = None
    dur: str | float | None = "0"


class RawTranscript(BaseModel):
    video_id: str
    title: str | None = None
    units: list[RawUnit] = []


class Transcript(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    title: str | None = None
    language: str = "en"
    segments: tuple[TranscriptSegment, ...] = ()

    @computed_field
    @property
    def total_duration(self) -> float:
        return max((s.end for s in self.segments), default=0.0)

    @classmethod
    def from_raw(
        cls,
        video_id: str,
        units: list[RawUnit],
        language: str = "en",
        title: str | None = None,
    ) -> "Transcript":
        """Build a transcript from raw units, skipping the ones that fail validation."""
        segments = []
        for unit in units:
            try:
                segments.append(
                    TranscriptSegment(text=unit.text, start=unit.start, duration=unit.dur)
                )
            except ValidationError as e:
                logger.debug(
                    f"Skipping malformed unit in {video_id} "
                    f"(start={unit.start!r}, dur={unit.dur!r}): {e.error_count()} error(s)"
                )
        segments.sort(key=lambda s: s.start)
        return cls(
            video_id=video_id,
            title=title,
            language=language,
            segments=tuple(segments),
        )


class SearchContext(BaseModel):
    before: tuple[TranscriptSegment, ...] = ()
    after: tuple[TranscriptSegment, ...] = ()


class SearchResult(BaseModel):
    segment: TranscriptSegment
    context: SearchContext
    match_index: int


class BatchSuccess(BaseModel):
    status: Literal["success"] = "success"
    identifier: str
    transcript: Transcript


class BatchFailure(BaseModel):
    status: Literal["failure"] = "failure"
    identifier: str
    error: str


BatchItemOutcome = Annotated[
    Union[BatchSuccess, BatchFailure], Field(discriminator="status")
]


class BatchResult(BaseModel):
    transcripts: list[Transcript] = []
    failures: list[BatchFailure] = []

    @property
    def succeeded(self) -> int:
        return len(self.transcripts)

    @property
    def total(self) -> int:
        return len(self.transcripts) + len(self.failures)

    @property
    def all_failed(self) -> bool:
        return bool(self.failures) and not self.transcripts


class PlaylistRef(BaseModel):
    kind: Literal["playlist"] = "playlist"
    playlist_id: str

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/playlist?list={self.playlist_id}"


class ChannelRef(BaseModel):
    kind: Literal["channel"] = "channel"
    # "@handle", "channel/UC...", "c/name" or "user/name"
    channel_path: str

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/{self.channel_path}/videos"


CollectionRef = Annotated[Union[PlaylistRef, ChannelRef], Field(discriminator="kind")]
