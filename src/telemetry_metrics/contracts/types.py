"""Semantic types for metric definitions.

Type aliases document intent at the signatures; the frozen dataclasses are
the small value records passed between compiler stages.
"""

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

MetricName = tuple[str, ...]
"""Normalized metric name, e.g. ('http', 'request', 'duration')"""

EventName = tuple[str, ...]
"""Normalized name of the event a metric listens to, e.g. ('http', 'request')"""

Measurements = Mapping[Hashable, Any]
"""Measurement map delivered with every event"""

Metadata = Mapping[Hashable, Any]
"""Metadata map delivered with every event"""

TagValuesFn = Callable[[Metadata], Metadata]
"""Applied to event metadata once per event, before tag extraction"""

KeepPredicate = Callable[[Metadata, Measurements], bool]
"""Compiled keep/drop filter, always called as (metadata, measurements)"""

ConversionRatio = Fraction
"""Exact multiplicative factor between two units of one domain"""

ReporterOptions = tuple[tuple[str, Any], ...]
"""Reporter-specific (key, value) pairs, in caller order; keys may repeat"""


@dataclass(frozen=True, slots=True)
class ResolvedUnit:
    """Outcome of unit resolution.

    Attributes:
        unit: Target unit recorded on the descriptor
        ratio: Factor applied to raw measurements (1 when no conversion)
    """

    unit: str
    ratio: ConversionRatio = Fraction(1)

    @property
    def converts(self) -> bool:
        """Whether measurements must be scaled."""
        return self.ratio != 1


@dataclass(frozen=True, slots=True)
class BucketRange:
    """Bucket boundaries as an inclusive range with a fixed step.

    BucketRange(100, 300, 100) describes the boundaries (100, 200, 300).
    """

    first: int
    last: int
    step: int
