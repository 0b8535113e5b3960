# src/telemetry_metrics/core/names.py
"""Metric and event name resolution.

Names arrive either as dotted text ("http.request.duration") or as an
ordered sequence of segments (["http", "request", "duration"]) and are
normalized to a tuple of segments. Malformed text - empty, or with leading,
trailing or consecutive dots - is a hard error, never a warning.
"""

import re
from collections.abc import Sequence

from telemetry_metrics.contracts.errors import EmptyEventNameError, InvalidNameError
from telemetry_metrics.contracts.types import EventName, MetricName

SEPARATOR = "."

# Non-empty, no separator, no whitespace
_SEGMENT_PATTERN = re.compile(r"[^.\s]+")


def resolve_name(value: object, *, what: str = "metric name") -> tuple[str, ...]:
    """Normalize a dotted string or a segment sequence.

    Args:
        value: Dotted text or a list/tuple of segments
        what: Label used in error messages ("metric name", "event name")

    Returns:
        Tuple of segments

    Raises:
        InvalidNameError: If the name is empty or malformed

    Example:
        >>> resolve_name("http.request.duration")
        ('http', 'request', 'duration')
        >>> resolve_name(["vm", "memory"])
        ('vm', 'memory')
    """
    if isinstance(value, str):
        return _resolve_text(value, what)
    if isinstance(value, (list, tuple)):
        return _resolve_segments(value, what)
    raise InvalidNameError(
        f"Expected {what} to be a string or a list of segments, got: {value!r}",
        value=value,
    )


def _resolve_text(text: str, what: str) -> tuple[str, ...]:
    if not text:
        raise InvalidNameError(f"Expected {what} to be non-empty", value=text)
    segments = text.split(SEPARATOR)
    if "" in segments:
        raise InvalidNameError(
            f"Expected {what} to have no leading, trailing or consecutive dots, got: {text!r}",
            value=text,
        )
    for segment in segments:
        if not _SEGMENT_PATTERN.fullmatch(segment):
            raise InvalidNameError(f"Invalid segment {segment!r} in {what} {text!r}", value=text)
    return tuple(segments)


def _resolve_segments(segments: Sequence[object], what: str) -> tuple[str, ...]:
    if not segments:
        raise InvalidNameError(f"Expected {what} to be a non-empty list of segments", value=segments)
    resolved = []
    for segment in segments:
        if not isinstance(segment, str) or not _SEGMENT_PATTERN.fullmatch(segment):
            raise InvalidNameError(
                f"Expected {what} to be a list of non-empty segments without dots, got: {segments!r}",
                value=segments,
            )
        # StrEnum members normalize to their plain value
        resolved.append(str.__str__(segment))
    return tuple(resolved)


def split_measurement(name: MetricName, event_name: EventName | None = None) -> tuple[EventName, str]:
    """Split a metric name into its event name and measurement segment.

    The last segment names the measurement; the rest is the event name.
    An explicit event name replaces the derived one.

    Raises:
        EmptyEventNameError: If the name has a single segment and no
            event name override was supplied
    """
    *prefix, measurement = name
    if event_name is not None:
        return event_name, measurement
    if not prefix:
        raise EmptyEventNameError(
            f"Event name derived from metric name {format_name(name)!r} is empty; "
            "pass event_name explicitly or use a name with at least two segments",
            value=name,
        )
    return tuple(prefix), measurement


def format_name(name: Sequence[str]) -> str:
    """Render a normalized name as dotted text."""
    return SEPARATOR.join(name)
