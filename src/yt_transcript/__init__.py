"""
yt-transcript

Fetch the captions of a YouTube video and print them as plain or timestamped
text, optionally restricted to a time window.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .core.exceptions import TranscriptError
from .models import CaptionTrack, TranscriptSnippet, ExcludeRange, SelectionRequest
from .services import TranscriptService
from .utils import (
    parse_time,
    parse_exclude_range,
    format_timestamp,
    resolve_video_id,
    filter_snippets,
    format_transcript
)

__all__ = [
    'get_logger',
    'TranscriptError',
    'CaptionTrack',
    'TranscriptSnippet',
    'ExcludeRange',
    'SelectionRequest',
    'TranscriptService',
    'parse_time',
    'parse_exclude_range',
    'format_timestamp',
    'resolve_video_id',
    'filter_snippets',
    'format_transcript'
]

# Set up package-level logger
logger = get_logger(__name__)
