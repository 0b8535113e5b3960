# src/telemetry_metrics/contracts/descriptor.py
"""The compiled metric descriptor.

A MetricDescriptor is the only thing the compiler hands back. It is built
once, never mutated, and read concurrently by any number of reporters, so
every field is immutable: names, tags and reporter options are tuples, and
the callables are either module-level functions or frozen dataclasses.

Reporter contract (for each event delivered under descriptor.event_name):
    1. if not descriptor.keep(metadata, measurements): skip
    2. value = descriptor.measurement(measurements, metadata); skip if None
    3. tags = restrict descriptor.tag_values(metadata) to descriptor.tags
    4. aggregate / export (reporter-specific)
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any

from telemetry_metrics.contracts.enums import MetricKind
from telemetry_metrics.contracts.types import (
    EventName,
    KeepPredicate,
    Measurements,
    Metadata,
    MetricName,
    ReporterOptions,
    TagValuesFn,
)


@dataclass(frozen=True, slots=True)
class MetricDescriptor:
    """Validated, normalized definition of one metric.

    Attributes:
        kind: Metric type (counter, sum, last_value, summary, distribution)
        name: Normalized metric name
        event_name: Name of the event the metric listens to
        measurement: Accessor called as (measurements, metadata); returns
            the value to feed the metric, or None when the key is absent
        tags: Metadata keys that partition the metric into series
        tag_values: Applied to metadata before tags are extracted
        keep: Predicate called as (metadata, measurements)
        description: Human-readable description, or None
        unit: Resolved target unit
        reporter_options: Opaque reporter-specific (key, value) pairs in the
            order given; keys may repeat
        buckets: Histogram boundaries; None for every kind but distribution
    """

    kind: MetricKind
    name: MetricName
    event_name: EventName
    measurement: Callable[[Measurements, Metadata], Any]
    tags: tuple[Hashable, ...]
    tag_values: TagValuesFn
    keep: KeepPredicate
    description: str | None
    unit: str
    # Values are opaque and may be unhashable
    reporter_options: ReporterOptions = field(hash=False)
    buckets: tuple[int | float, ...] | None = None

    @property
    def metric_type(self) -> str:
        """Kind as a plain string, for reporters that key on it."""
        return str(self.kind)

    @property
    def dotted_name(self) -> str:
        """Metric name rendered with '.' separators."""
        return ".".join(self.name)

    @property
    def dotted_event_name(self) -> str:
        """Event name rendered with '.' separators."""
        return ".".join(self.event_name)

    def reporter_option(self, key: str, default: Any = None) -> Any:
        """First value given for a reporter option, or default."""
        for option, value in self.reporter_options:
            if option == key:
                return value
        return default
