"""Utility functions for working with YouTube video references."""

import re
from typing import Optional

from ..core.exceptions import UnrecognizedVideoReferenceError
from .logging import get_logger

logger = get_logger("youtube_utils")

VIDEO_ID_CHARS = r"[a-zA-Z0-9_-]"

# Checked in order; the first match wins
_VIDEO_PATTERNS = [
    re.compile(rf"(?:youtube\.com/watch\?v=)({VIDEO_ID_CHARS}{{11}})(?!{VIDEO_ID_CHARS})"),
    re.compile(rf"(?:youtube\.com/watch\?[^#\s]*?&v=)({VIDEO_ID_CHARS}{{11}})(?!{VIDEO_ID_CHARS})"),
    re.compile(rf"(?:youtu\.be/)({VIDEO_ID_CHARS}{{11}})(?!{VIDEO_ID_CHARS})"),
    re.compile(rf"(?:youtube(?:-nocookie)?\.com/embed/)({VIDEO_ID_CHARS}{{11}})(?!{VIDEO_ID_CHARS})"),
    re.compile(rf"(?:youtube\.com/(?:v|shorts|live)/)({VIDEO_ID_CHARS}{{11}})(?!{VIDEO_ID_CHARS})"),
    re.compile(rf"^({VIDEO_ID_CHARS}{{11}})$"),
]


def resolve_video_id(value: str) -> str:
    """
    Extract the 11-character video ID from a URL or a bare ID.

    Args:
        value: YouTube watch, short-link or embed URL, or the ID itself

    Returns:
        The video ID

    Raises:
        UnrecognizedVideoReferenceError: when nothing matches
    """
    text = (value or "").strip()
    for pattern in _VIDEO_PATTERNS:
        match = pattern.search(text)
        if match:
            video_id = match.group(1)
            logger.debug(f"Resolved video reference {text!r} to {video_id}")
            return video_id

    raise UnrecognizedVideoReferenceError(value)


def validate_youtube_url(value: Optional[str]) -> bool:
    """Return True when ``value`` resolves to a video ID."""
    if not value:
        return False
    try:
        resolve_video_id(value)
    except UnrecognizedVideoReferenceError:
        return False
    return True
