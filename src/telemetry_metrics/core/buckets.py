# src/telemetry_metrics/core/buckets.py
"""Histogram bucket boundaries for distribution metrics.

Boundaries are a non-empty, strictly increasing sequence of numbers:

    [0, 100, 200, 300]
    # Buckets: (-inf, 0], (0, 100], (100, 200], (200, 300], (300, +inf)

They can be listed explicitly or described as an inclusive range plus step,
either as BucketRange(first, last, step) or as ((first, last), step). A
Python range object is taken as the boundaries it yields, so
range(100, 301, 100) gives (100, 200, 300).
"""

from collections.abc import Sequence
from numbers import Real

from telemetry_metrics.contracts.errors import InvalidBucketsError
from telemetry_metrics.contracts.types import BucketRange


def build_buckets(spec: object) -> tuple[int | float, ...]:
    """Validate or expand bucket boundaries.

    Raises:
        InvalidBucketsError: If the boundaries are empty, non-numeric, not
            increasing, or the range is malformed

    Example:
        >>> build_buckets([0, 100, 200])
        (0, 100, 200)
        >>> build_buckets(BucketRange(100, 300, 100))
        (100, 200, 300)
    """
    if isinstance(spec, BucketRange):
        return expand_range(spec)
    if _is_range_pair(spec):
        (first, last), step = spec  # type: ignore[misc]
        return expand_range(BucketRange(first, last, step))
    if isinstance(spec, range):
        return _validate_boundaries(tuple(spec))
    if isinstance(spec, (list, tuple)):
        return _validate_boundaries(spec)
    raise InvalidBucketsError(
        f"Expected buckets to be a list of numbers or a ((first, last), step) range, got: {spec!r}",
        value=spec,
    )


def expand_range(bucket_range: BucketRange) -> tuple[int, ...]:
    """Expand an inclusive range into explicit boundaries.

    Raises:
        InvalidBucketsError: If first >= last, step is not positive, or step
            does not evenly divide last - first
    """
    first, last, step = bucket_range.first, bucket_range.last, bucket_range.step
    for value in (first, last, step):
        if not _is_integer(value):
            raise InvalidBucketsError(f"Expected bucket range bounds and step to be integers, got: {value!r}", value=value)
    if first >= last:
        raise InvalidBucketsError(
            f"Expected bucket range to be increasing, got: {first}..{last}",
            value=bucket_range,
        )
    if step <= 0:
        raise InvalidBucketsError(f"Expected bucket step to be positive, got: {step}", value=step)
    if (last - first) % step != 0:
        raise InvalidBucketsError(
            f"Expected bucket step {step} to evenly divide the range {first}..{last}",
            value=bucket_range,
        )

    boundaries = [first]
    while boundaries[-1] < last:
        boundaries.append(boundaries[-1] + step)
    return tuple(boundaries)


def _validate_boundaries(boundaries: Sequence[object]) -> tuple[int | float, ...]:
    if not boundaries:
        raise InvalidBucketsError("Expected buckets to be a non-empty list", value=boundaries)
    for boundary in boundaries:
        if not _is_number(boundary):
            raise InvalidBucketsError(f"Expected bucket boundary to be a number, got: {boundary!r}", value=boundary)
    for previous, current in zip(boundaries, boundaries[1:]):
        if not previous < current:  # type: ignore[operator]
            raise InvalidBucketsError(
                f"Expected bucket boundaries to be increasing, got {current!r} after {previous!r}",
                value=current,
            )
    return tuple(boundaries)  # type: ignore[arg-type]


def _is_range_pair(spec: object) -> bool:
    return (
        isinstance(spec, tuple)
        and len(spec) == 2
        and isinstance(spec[0], tuple)
        and len(spec[0]) == 2
    )


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
