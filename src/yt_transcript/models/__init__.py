"""Data models for yt-transcript."""

from .transcript import CaptionTrack, TranscriptSnippet, ExcludeRange, SelectionRequest

__all__ = [
    "CaptionTrack",
    "TranscriptSnippet",
    "ExcludeRange",
    "SelectionRequest",
]
