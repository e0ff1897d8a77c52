"""Exceptions raised by the transcript pipeline."""

from typing import Any, Dict, Optional


class TranscriptError(Exception):
    """Base class for every failure the pipeline reports."""

    default_message = "Transcript error"
    error_code = "TRANSCRIPT_ERROR"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to a serializable dictionary."""
        return {
            "code": self.error_code,
            "message": self.message
        }


# =============================================================================
# USER INPUT
# =============================================================================

class SelectionError(TranscriptError):
    """Invalid time expression or selection request."""


class InvalidTimeFormatError(SelectionError):
    """Time string is not MM:SS or HH:MM:SS."""

    error_code = "INVALID_TIME_FORMAT"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid time format: '{value}'. Use MM:SS or HH:MM:SS.")


class InvalidRangeFormatError(SelectionError):
    """Exclude range is not START-END."""

    error_code = "INVALID_RANGE_FORMAT"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid range format: '{value}'. Use START-END, e.g. 1:00-2:30.")


class InvalidRangeOrderError(SelectionError):
    """Range start lies after its end."""

    error_code = "INVALID_RANGE_ORDER"

    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: start ({start}s) is after end ({end}s).")


class ConflictingSelectionError(SelectionError):
    """``only`` combined with ``from``/``to``."""

    error_code = "CONFLICTING_SELECTION"
    default_message = "--only cannot be combined with --from/--to."


class TimestampsRequiredError(SelectionError):
    """Time selection requested for a transcript without timestamps."""

    error_code = "TIMESTAMPS_REQUIRED"
    default_message = "--from, --to, --only and --exclude require --timestamps."


class UnrecognizedVideoReferenceError(SelectionError):
    """Input is neither a video ID nor a known YouTube URL."""

    error_code = "UNRECOGNIZED_VIDEO_REFERENCE"

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Could not extract video ID from: {value}")


# =============================================================================
# NETWORK STAGES
# =============================================================================

class YouTubeRequestError(TranscriptError):
    """A request to YouTube failed or returned something unusable."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.status_code is not None:
            data["status_code"] = self.status_code
        return data


class PageFetchFailedError(YouTubeRequestError):
    error_code = "PAGE_FETCH_FAILED"
    default_message = "Failed to load video page."


class RequestBlockedError(YouTubeRequestError):
    """YouTube is rate limiting or asking for a CAPTCHA; retry later."""

    error_code = "REQUEST_BLOCKED"
    default_message = "Request blocked (IP/rate limit). Try again later."


class ApiKeyNotFoundError(YouTubeRequestError):
    error_code = "API_KEY_NOT_FOUND"
    default_message = "Could not extract Innertube API key from the video page."


class ApiRequestFailedError(YouTubeRequestError):
    error_code = "API_REQUEST_FAILED"
    default_message = "Innertube API request failed."


class TranscriptFetchFailedError(YouTubeRequestError):
    error_code = "TRANSCRIPT_FETCH_FAILED"
    default_message = "Failed to fetch transcript data."


class CaptionsDisabledError(YouTubeRequestError):
    error_code = "CAPTIONS_DISABLED"
    default_message = "Transcripts are disabled for this video."


# =============================================================================
# PLAYABILITY
# =============================================================================

class VideoPlayabilityError(YouTubeRequestError):
    """The player response reported a non-OK playability status."""


class AgeRestrictedError(VideoPlayabilityError):
    error_code = "AGE_RESTRICTED"
    default_message = "Video is age-restricted or unavailable."


class VideoUnavailableError(VideoPlayabilityError):
    error_code = "VIDEO_UNAVAILABLE"
    default_message = "Video is unavailable."


class VideoUnplayableError(VideoPlayabilityError):
    error_code = "VIDEO_UNPLAYABLE"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Video unplayable: {reason}")
