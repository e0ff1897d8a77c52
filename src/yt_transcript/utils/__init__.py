"""
Utility modules for yt-transcript.
"""

from .logging import setup_logger, get_logger, set_log_level
from .time_utils import (
    parse_time,
    parse_exclude_range,
    parse_exclude_ranges,
    parse_only_times,
    format_timestamp
)
from .youtube_utils import resolve_video_id, validate_youtube_url
from .transcript_utils import filter_snippets, format_transcript

__all__ = [
    'setup_logger',
    'get_logger',
    'set_log_level',
    'parse_time',
    'parse_exclude_range',
    'parse_exclude_ranges',
    'parse_only_times',
    'format_timestamp',
    'resolve_video_id',
    'validate_youtube_url',
    'filter_snippets',
    'format_transcript'
]
