"""Service layer for yt-transcript."""

from .transcript_service import TranscriptService

__all__ = ['TranscriptService']
