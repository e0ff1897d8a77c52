"""Selecting and rendering transcript snippets."""

import math
from typing import List, Sequence

from ..core.exceptions import InvalidRangeOrderError
from ..models import SelectionRequest, TranscriptSnippet
from .time_utils import format_timestamp


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def filter_snippets(snippets: Sequence[TranscriptSnippet], request: SelectionRequest) -> List[TranscriptSnippet]:
    """
    Apply a selection to an ordered snippet sequence.

    ``only`` keeps snippets whose start, rounded half up, is one of the given
    seconds. Otherwise ``start``/``end`` keep snippets whose unrounded start
    lies in the inclusive window. Exclude ranges are applied afterwards.
    Order is preserved.
    """
    if request.only:
        selected = [s for s in snippets if _round_half_up(s.start) in request.only]
    elif request.has_range:
        lower = request.start if request.start is not None else 0
        upper = request.end if request.end is not None else math.inf
        if lower > upper:
            raise InvalidRangeOrderError(lower, upper)
        selected = [s for s in snippets if lower <= s.start <= upper]
    else:
        selected = list(snippets)

    if request.exclude:
        selected = [
            s for s in selected
            if not any(r.contains(s.start) for r in request.exclude)
        ]

    return selected


def format_transcript(snippets: Sequence[TranscriptSnippet], with_timestamps: bool = False) -> str:
    """Render snippets one per line, optionally prefixed with ``[MM:SS]``/``[HH:MM:SS]``."""
    if with_timestamps:
        return "\n".join(f"[{format_timestamp(s.start)}] {s.text}" for s in snippets)
    return "\n".join(s.text for s in snippets)
