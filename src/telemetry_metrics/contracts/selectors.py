"""Measurement selectors.

A metric reads its value from an event in one of three ways. The variant is
decided once, when options are normalized, so nothing downstream ever has to
probe a function's arity again:

- Key: index into the event's measurement map
- Unary: fn(measurements) -> number
- Binary: fn(measurements, metadata) -> number

Example:
    >>> Key("duration")
    Key(key='duration')
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from telemetry_metrics.contracts.types import Measurements, Metadata


@dataclass(frozen=True, slots=True)
class Key:
    """Look the measurement up under a key."""

    key: Hashable


@dataclass(frozen=True, slots=True)
class Unary:
    """Derive the measurement from the measurement map."""

    fn: Callable[[Measurements], Any]


@dataclass(frozen=True, slots=True)
class Binary:
    """Derive the measurement from measurements and metadata."""

    fn: Callable[[Measurements, Metadata], Any]


MeasurementSelector = Key | Unary | Binary
