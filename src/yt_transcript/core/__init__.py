"""Core modules for yt-transcript."""

from .config import config, Config
from .exceptions import (
    TranscriptError,
    SelectionError,
    YouTubeRequestError,
    VideoPlayabilityError,
    InvalidTimeFormatError,
    InvalidRangeFormatError,
    InvalidRangeOrderError,
    ConflictingSelectionError,
    TimestampsRequiredError,
    UnrecognizedVideoReferenceError,
    PageFetchFailedError,
    RequestBlockedError,
    ApiKeyNotFoundError,
    ApiRequestFailedError,
    AgeRestrictedError,
    VideoUnavailableError,
    VideoUnplayableError,
    CaptionsDisabledError,
    TranscriptFetchFailedError
)

# transcript_fetcher depends on models, which depend on these exceptions;
# import it as yt_transcript.core.transcript_fetcher

__all__ = [
    'config',
    'Config',
    'TranscriptError',
    'SelectionError',
    'YouTubeRequestError',
    'VideoPlayabilityError',
    'InvalidTimeFormatError',
    'InvalidRangeFormatError',
    'InvalidRangeOrderError',
    'ConflictingSelectionError',
    'TimestampsRequiredError',
    'UnrecognizedVideoReferenceError',
    'PageFetchFailedError',
    'RequestBlockedError',
    'ApiKeyNotFoundError',
    'ApiRequestFailedError',
    'AgeRestrictedError',
    'VideoUnavailableError',
    'VideoUnplayableError',
    'CaptionsDisabledError',
    'TranscriptFetchFailedError'
]
