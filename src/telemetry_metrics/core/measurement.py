# src/telemetry_metrics/core/measurement.py
"""Measurement accessor synthesis.

The accessor is the only piece of a descriptor that does work per event.
synthesize() dispatches on the selector variant exactly once and returns a
frozen accessor that:

- is always called as accessor(measurements, metadata)
- returns the raw value (None when a key is absent) if no unit conversion
  was requested
- otherwise multiplies by the conversion ratio, raising MeasurementTypeError
  for non-numeric or absent values

Accessors hold no state beyond their selector and ratio, so one descriptor
can be evaluated from any number of dispatcher threads.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from fractions import Fraction
from numbers import Real
from types import MappingProxyType
from typing import Any

from telemetry_metrics.contracts.errors import MeasurementTypeError
from telemetry_metrics.contracts.selectors import Binary, Key, MeasurementSelector, Unary
from telemetry_metrics.contracts.types import ConversionRatio, Measurements, Metadata

_NO_METADATA: Metadata = MappingProxyType({})


def scale(value: Any, ratio: ConversionRatio) -> Any:
    """Multiply a measurement by an exact ratio.

    Integers stay exact when the ratio is integral; otherwise the result is
    the correctly rounded quotient (value * numerator) / denominator.

    Raises:
        MeasurementTypeError: If value is not a real number
    """
    if not isinstance(value, Real) or isinstance(value, bool):
        raise MeasurementTypeError(value)
    if ratio.denominator == 1:
        return value * ratio.numerator
    return value * ratio.numerator / ratio.denominator


@dataclass(frozen=True, slots=True)
class KeyAccessor:
    """Reads measurements[key]."""

    key: Hashable
    ratio: ConversionRatio = Fraction(1)

    def __call__(self, measurements: Measurements, metadata: Metadata = _NO_METADATA) -> Any:
        value = measurements.get(self.key)
        if self.ratio == 1:
            return value
        return scale(value, self.ratio)


@dataclass(frozen=True, slots=True)
class UnaryAccessor:
    """Calls fn(measurements)."""

    fn: Callable[[Measurements], Any]
    ratio: ConversionRatio = Fraction(1)

    def __call__(self, measurements: Measurements, metadata: Metadata = _NO_METADATA) -> Any:
        value = self.fn(measurements)
        if self.ratio == 1:
            return value
        return scale(value, self.ratio)


@dataclass(frozen=True, slots=True)
class BinaryAccessor:
    """Calls fn(measurements, metadata)."""

    fn: Callable[[Measurements, Metadata], Any]
    ratio: ConversionRatio = Fraction(1)

    def __call__(self, measurements: Measurements, metadata: Metadata = _NO_METADATA) -> Any:
        value = self.fn(measurements, metadata)
        if self.ratio == 1:
            return value
        return scale(value, self.ratio)


MeasurementAccessor = KeyAccessor | UnaryAccessor | BinaryAccessor


def synthesize(selector: MeasurementSelector, ratio: ConversionRatio = Fraction(1)) -> MeasurementAccessor:
    """Build the accessor for a selector and conversion ratio.

    Example:
        >>> accessor = synthesize(Key("total"), Fraction(1, 1000))
        >>> accessor({"total": 76_000})
        76.0
        >>> synthesize(Key("total"))({})  # absent key, no conversion
    """
    match selector:
        case Key(key=key):
            return KeyAccessor(key, ratio)
        case Unary(fn=fn):
            return UnaryAccessor(fn, ratio)
        case Binary(fn=fn):
            return BinaryAccessor(fn, ratio)
    raise TypeError(f"Unknown measurement selector: {selector!r}")
