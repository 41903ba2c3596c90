"""Transcript sources."""

from .base import TranscriptSource
from .standalone import StandaloneProvider
from .backend import BackendProvider

__all__ = ["TranscriptSource", "StandaloneProvider", "BackendProvider"]
