"""Kinds and unit vocabularies shared across the compiler.

Every value here crosses a module boundary: the compiler dispatches on
MetricKind, the unit converter classifies tags against TimeUnit/ByteUnit,
and reporters read MetricKind back off the descriptor.
"""

from enum import StrEnum


class MetricKind(StrEnum):
    """The five metric types a descriptor can describe.

    Reporters decide how each kind is aggregated; the compiler only needs
    to know which kinds take bucket boundaries.
    """

    COUNTER = "counter"
    SUM = "sum"
    LAST_VALUE = "last_value"
    SUMMARY = "summary"
    DISTRIBUTION = "distribution"

    @property
    def requires_buckets(self) -> bool:
        """Whether the kind needs histogram bucket boundaries."""
        return self is MetricKind.DISTRIBUTION


class TimeUnit(StrEnum):
    """Units of the time domain.

    NATIVE is the tick of the platform's monotonic clock; its length is
    configured through CompilerSettings.native_ticks_per_second.
    """

    NATIVE = "native"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"


class ByteUnit(StrEnum):
    """Units of the byte domain (decimal, powers of 1000)."""

    BYTE = "byte"
    KILOBYTE = "kilobyte"
    MEGABYTE = "megabyte"


class UnitDomain(StrEnum):
    """Closed conversion domains. Pairs must not cross domains."""

    TIME = "time"
    BYTES = "bytes"
