"""Data models for caption tracks, transcript snippets and time selections."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from ..core.exceptions import ConflictingSelectionError, InvalidRangeOrderError


@dataclass(frozen=True)
class CaptionTrack:
    """One caption stream available for a video."""
    base_url: str
    language_code: str
    is_generated: bool = False
    name: Optional[str] = None

    @property
    def kind_label(self) -> str:
        return "generated" if self.is_generated else "manual"

    @classmethod
    def from_innertube(cls, data: Dict[str, Any]) -> "CaptionTrack":
        """Build a track from a ``captionTracks`` entry of a player response."""
        name_data = data.get("name") or {}
        name = name_data.get("simpleText")
        if name is None and name_data.get("runs"):
            name = "".join(run.get("text", "") for run in name_data["runs"])
        return cls(
            base_url=data.get("baseUrl", ""),
            language_code=data.get("languageCode", ""),
            is_generated=data.get("kind") == "asr",
            name=name or None,
        )


@dataclass(frozen=True)
class TranscriptSnippet:
    """A single timed caption entry."""
    text: str
    start: float
    duration: float = 0.0

    @property
    def end(self) -> float:
        """Calculate end time."""
        return self.start + self.duration


@dataclass(frozen=True)
class ExcludeRange:
    """Inclusive interval of seconds to drop from a transcript."""
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidRangeOrderError(self.start, self.end)

    def contains(self, seconds: float) -> bool:
        return self.start <= seconds <= self.end


@dataclass(frozen=True)
class SelectionRequest:
    """
    Validated time selection over a transcript.

    ``only`` picks snippets by their rounded start second; ``start``/``end``
    bound a continuous window. The two modes are mutually exclusive. Exclude
    ranges are applied on top of either mode.
    """
    start: Optional[int] = None
    end: Optional[int] = None
    only: FrozenSet[int] = field(default_factory=frozenset)
    exclude: Tuple[ExcludeRange, ...] = ()

    def __post_init__(self):
        # Normalize iterables so callers can pass lists
        object.__setattr__(self, "only", frozenset(self.only))
        object.__setattr__(self, "exclude", tuple(self.exclude))

        if self.only and self.has_range:
            raise ConflictingSelectionError()
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidRangeOrderError(self.start, self.end)

    @property
    def has_range(self) -> bool:
        return self.start is not None or self.end is not None

    @property
    def is_empty(self) -> bool:
        return not (self.has_range or self.only or self.exclude)

    @classmethod
    def build(
        cls,
        start: Optional[int] = None,
        end: Optional[int] = None,
        only: Optional[Iterable[int]] = None,
        exclude: Optional[Iterable[ExcludeRange]] = None,
    ) -> "SelectionRequest":
        return cls(start=start, end=end, only=frozenset(only or ()), exclude=tuple(exclude or ()))
