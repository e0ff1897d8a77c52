"""Service that runs the whole transcript pipeline for one video."""

from typing import List, Optional, Sequence, Tuple

from ..core.config import Config, config as default_config
from ..core.exceptions import TimestampsRequiredError
from ..core.transcript_fetcher import TranscriptFetcher, select_track
from ..models import CaptionTrack, SelectionRequest, TranscriptSnippet
from ..utils.logging import get_logger
from ..utils.transcript_utils import filter_snippets, format_transcript
from ..utils.youtube_utils import resolve_video_id

logger = get_logger("transcript_service")


class TranscriptService:
    """Resolve, fetch, select and render a video transcript."""

    def __init__(self, fetcher: Optional[TranscriptFetcher] = None, config: Optional[Config] = None):
        self.config = config or default_config
        self.fetcher = fetcher or TranscriptFetcher(config=self.config)
        logger.debug("Initialized TranscriptService")

    def list_tracks(self, video_ref: str) -> List[CaptionTrack]:
        """Return the caption tracks available for a video."""
        video_id = resolve_video_id(video_ref)
        api_key = self.fetcher.fetch_page_credential(video_id)
        return self.fetcher.fetch_caption_tracks(video_id, api_key)

    def get_snippets(
        self,
        video_ref: str,
        languages: Optional[Sequence[str]] = None
    ) -> Tuple[str, CaptionTrack, List[TranscriptSnippet]]:
        """
        Fetch the snippets of the best caption track for a video.

        Args:
            video_ref: Video URL or ID
            languages: Preferred language codes, most preferred first

        Returns:
            Tuple of (video_id, chosen track, snippets)
        """
        languages = list(languages or self.config.transcript.default_languages)
        video_id = resolve_video_id(video_ref)
        logger.info(f"Fetching transcript for {video_id} (languages: {', '.join(languages)})")

        api_key = self.fetcher.fetch_page_credential(video_id)
        tracks = self.fetcher.fetch_caption_tracks(video_id, api_key)
        track = select_track(tracks, languages)
        logger.info(f"Selected track: {track.language_code} ({track.kind_label})")

        snippets = self.fetcher.fetch_snippets(track)
        return video_id, track, snippets

    def get_transcript(
        self,
        video_ref: str,
        languages: Optional[Sequence[str]] = None,
        selection: Optional[SelectionRequest] = None,
        timestamps: bool = False
    ) -> str:
        """
        Fetch a transcript and render it as text.

        Args:
            video_ref: Video URL or ID
            languages: Preferred language codes, most preferred first
            selection: Optional time selection; requires ``timestamps``
            timestamps: Prefix each line with its start time

        Returns:
            The formatted transcript
        """
        if selection is not None and not selection.is_empty and not timestamps:
            raise TimestampsRequiredError()

        _, _, snippets = self.get_snippets(video_ref, languages)

        if selection is not None and not selection.is_empty:
            before = len(snippets)
            snippets = filter_snippets(snippets, selection)
            logger.info(f"Selection kept {len(snippets)} of {before} snippets")

        return format_transcript(snippets, with_timestamps=timestamps)
