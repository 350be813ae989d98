"""Game event formatters for marble draw."""

from .transcript_formatter import TranscriptFormatter

__all__ = ["TranscriptFormatter"]
