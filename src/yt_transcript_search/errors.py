"""Exception types raised by the transcript service."""


class TranscriptError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(TranscriptError, ValueError):
    """Malformed URL or argument, rejected before any network activity."""


class FetchError(TranscriptError):
    """The upstream transcript source failed for one video."""

    def __init__(self, video_id: str, upstream_message: str):
        self.video_id = video_id
        self.upstream_message = upstream_message
        super().__init__(
            f"Failed to fetch transcript for {video_id}: {upstream_message}"
        )


class BatchFailedError(TranscriptError):
    """Every item of a batch failed."""

    def __init__(self, failures: list):
        self.failures = failures
        details = "; ".join(f"{f.identifier}: {f.error}" for f in failures[:5])
        if len(failures) > 5:
            details += f"; ... ({len(failures) - 5} more)"
        super().__init__(
            f"All {len(failures)} transcripts failed to load ({details})"
        )


class ResolveError(TranscriptError):
    """A channel or playlist could not be resolved into video ids."""
