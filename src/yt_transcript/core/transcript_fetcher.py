"""
YouTube transcript fetching through the Innertube API.

The pipeline makes three sequential requests, one attempt each:
1. the public watch page, to scrape the Innertube API key
2. the Innertube player endpoint, for playability status and caption tracks
3. the chosen track's timed-text URL, parsed into transcript snippets
"""

import html
import re
from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit
from xml.etree import ElementTree

import requests

from ..models import CaptionTrack, TranscriptSnippet
from ..utils.logging import get_logger
from .config import Config, config as default_config
from .exceptions import (
    AgeRestrictedError,
    ApiKeyNotFoundError,
    ApiRequestFailedError,
    CaptionsDisabledError,
    PageFetchFailedError,
    RequestBlockedError,
    TranscriptError,
    TranscriptFetchFailedError,
    VideoUnavailableError,
    VideoUnplayableError,
)

logger = get_logger("transcript_fetcher")

_TAG_RE = re.compile(r"<[^>]*>")


# =============================================================================
# PURE HELPERS
# =============================================================================

def extract_innertube_api_key(page_html: str, api_key_pattern: str, recaptcha_marker: str) -> str:
    """
    Pull the Innertube API key out of a watch page.

    Raises:
        RequestBlockedError: the page is a CAPTCHA / rate-limit interstitial
        ApiKeyNotFoundError: the key is simply not there
    """
    match = re.search(api_key_pattern, page_html)
    if match:
        return match.group(1)
    if recaptcha_marker in page_html:
        raise RequestBlockedError()
    raise ApiKeyNotFoundError()


def classify_playability(status: Optional[str], reason: Optional[str] = None) -> Optional[TranscriptError]:
    """
    Map a player ``playabilityStatus`` onto an error, or None when playable.

    The error is returned rather than raised so the decision can be checked
    without a network call.
    """
    if not status or status == "OK":
        return None

    reason = reason or status
    if status == "LOGIN_REQUIRED" and "bot" in reason:
        return RequestBlockedError("Request blocked. Try again later.")
    if "inappropriate" in reason:
        return AgeRestrictedError()
    if "unavailable" in reason:
        return VideoUnavailableError()
    return VideoUnplayableError(reason)


def collect_caption_tracks(player: Dict[str, Any]) -> List[CaptionTrack]:
    """Check playability and return the caption tracks of a player response."""
    playability = player.get("playabilityStatus") or {}
    error = classify_playability(playability.get("status"), playability.get("reason"))
    if error is not None:
        raise error

    renderer = (player.get("captions") or {}).get("playerCaptionsTracklistRenderer") or {}
    tracks = renderer.get("captionTracks") or []
    if not tracks:
        raise CaptionsDisabledError()
    return [CaptionTrack.from_innertube(track) for track in tracks]


def select_track(tracks: Sequence[CaptionTrack], languages: Sequence[str]) -> CaptionTrack:
    """
    Pick a track for the first preferred language that has one.

    Manual captions win over generated ones within a language. When no
    preferred language matches, the first track is returned.
    """
    if not tracks:
        raise CaptionsDisabledError()

    manual = [t for t in tracks if not t.is_generated]
    generated = [t for t in tracks if t.is_generated]
    for lang in languages:
        for candidates in (manual, generated):
            for track in candidates:
                if track.language_code == lang:
                    return track

    fallback = tracks[0]
    logger.warning(
        f"No caption track for {list(languages)}; falling back to "
        f"'{fallback.language_code}' ({fallback.kind_label})"
    )
    return fallback


def strip_format_param(url: str) -> str:
    """Drop ``fmt`` from a timed-text URL so the default XML format is served."""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "fmt"]
    return urlunsplit(parts._replace(query=urlencode(query)))


def _clean_text(raw: str) -> str:
    return _TAG_RE.sub("", html.unescape(raw)).strip()


def parse_transcript_xml(payload: str) -> List[TranscriptSnippet]:
    """
    Parse a timed-text XML document into snippets, keeping document order.

    Elements without a ``start`` are skipped, a missing ``dur`` counts as
    zero, and elements whose text is empty after unescaping are dropped.
    An empty payload yields no snippets.
    """
    if not payload.strip():
        return []
    try:
        root = ElementTree.fromstring(payload.encode("utf-8"))
    except ElementTree.ParseError as e:
        raise TranscriptFetchFailedError(f"Could not parse transcript data: {e}") from e

    snippets = []
    for element in root.iter("text"):
        start = element.get("start")
        if not start:
            continue
        text = _clean_text("".join(element.itertext()))
        if not text:
            continue
        snippets.append(TranscriptSnippet(
            text=text,
            start=float(start),
            duration=float(element.get("dur") or 0),
        ))
    return snippets


# =============================================================================
# NETWORK CLIENT
# =============================================================================

class TranscriptFetcher:
    """Performs the three Innertube requests over one ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None, config: Optional[Config] = None):
        self.config = config or default_config
        self.session = session or requests.Session()
        self.timeout = self.config.network.http_timeout

    def fetch_page_credential(self, video_id: str) -> str:
        """Load the watch page and return the Innertube API key embedded in it."""
        innertube = self.config.innertube
        url = innertube.watch_url.format(video_id=video_id)
        logger.debug(f"Fetching watch page: {url}")
        try:
            response = self.session.get(
                url,
                headers={"Accept-Language": self.config.network.accept_language},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise PageFetchFailedError(f"Failed to load video page: {e}") from e

        if not response.ok:
            raise PageFetchFailedError(
                f"Failed to load video page: {response.status_code}",
                status_code=response.status_code,
            )

        api_key = extract_innertube_api_key(response.text, innertube.api_key_pattern, innertube.recaptcha_marker)
        logger.debug(f"Extracted Innertube API key for {video_id}")
        return api_key

    def fetch_caption_tracks(self, video_id: str, api_key: str) -> List[CaptionTrack]:
        """Query the player endpoint and return the caption tracks on offer."""
        innertube = self.config.innertube
        url = innertube.player_url.format(api_key=api_key)
        logger.debug(f"Requesting player data for {video_id} as {innertube.client_name} {innertube.client_version}")
        try:
            response = self.session.post(
                url,
                json=innertube.context_payload(video_id),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ApiRequestFailedError(f"Innertube API error: {e}") from e

        if not response.ok:
            raise ApiRequestFailedError(
                f"Innertube API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            player = response.json()
        except ValueError as e:
            raise ApiRequestFailedError("Innertube API returned invalid JSON.") from e

        tracks = collect_caption_tracks(player)
        summary = ", ".join(f"{t.language_code}{'-asr' if t.is_generated else ''}" for t in tracks)
        logger.info(f"Tracks for {video_id}: [{summary}]")
        return tracks

    def fetch_snippets(self, track: CaptionTrack) -> List[TranscriptSnippet]:
        """Download and parse the timed text of ``track``."""
        url = strip_format_param(track.base_url)
        logger.debug(f"Downloading transcript: {track.language_code} ({track.kind_label})")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TranscriptFetchFailedError(f"Failed to fetch transcript data: {e}") from e

        if not response.ok:
            raise TranscriptFetchFailedError(status_code=response.status_code)

        snippets = parse_transcript_xml(response.text)
        logger.info(f"Parsed {len(snippets)} snippets")
        return snippets
