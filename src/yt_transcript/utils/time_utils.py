"""Parsing and formatting of user-facing time expressions."""

import re
from typing import FrozenSet, Iterable, Tuple

from ..core.exceptions import InvalidRangeFormatError, InvalidTimeFormatError
from ..models import ExcludeRange

_COMPONENT = re.compile(r"[0-9]+")
_LIST_SEPARATORS = re.compile(r"[\s,]+")


def parse_time(value: str) -> int:
    """
    Convert ``MM:SS`` or ``HH:MM:SS`` into whole seconds.

    Surrounding whitespace is ignored. Minutes and seconds must be in [0, 59];
    hours are unbounded.

    Raises:
        InvalidTimeFormatError: for any other shape or out-of-range component
    """
    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(_COMPONENT.fullmatch(part) for part in parts):
        raise InvalidTimeFormatError(value)

    numbers = [int(part) for part in parts]
    if len(numbers) == 2:
        hours, minutes, seconds = 0, numbers[0], numbers[1]
    else:
        hours, minutes, seconds = numbers

    if minutes > 59 or seconds > 59:
        raise InvalidTimeFormatError(value)

    return hours * 3600 + minutes * 60 + seconds


def parse_exclude_range(value: str) -> ExcludeRange:
    """
    Parse ``START-END`` into an inclusive :class:`ExcludeRange`.

    The separator is the first ``-`` that is neither the first nor the last
    character.
    """
    text = value.strip()
    separator = text.find("-", 1)
    if separator == -1 or separator == len(text) - 1:
        raise InvalidRangeFormatError(value)

    start = parse_time(text[:separator])
    end = parse_time(text[separator + 1:])
    # ExcludeRange rejects start > end
    return ExcludeRange(start, end)


def parse_exclude_ranges(values: Iterable[str]) -> Tuple[ExcludeRange, ...]:
    """Parse one or more arguments, each holding space-separated ranges."""
    ranges = []
    for value in values:
        for item in value.split():
            ranges.append(parse_exclude_range(item))
    return tuple(ranges)


def parse_only_times(values: Iterable[str]) -> FrozenSet[int]:
    """Parse one or more arguments, each holding space- or comma-separated times."""
    times = set()
    for value in values:
        for item in _LIST_SEPARATORS.split(value):
            if item:
                times.add(parse_time(item))
    return frozenset(times)


def format_timestamp(seconds: float) -> str:
    """Format seconds as MM:SS, or HH:MM:SS once there is a whole hour. Fractions are floored."""
    total = int(seconds // 1)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
