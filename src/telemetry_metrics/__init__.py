"""
telemetry_metrics: compile metric declarations into immutable descriptors.

The package defines metrics; it does not aggregate them. Each of counter(),
sum(), last_value(), summary() and distribution() validates a declaration
and returns a MetricDescriptor that reporters attach to their event source.

Usage:
    from telemetry_metrics import counter, distribution

    metrics = [
        counter("http.request.count", tags=["route"]),
        distribution(
            "http.request.duration",
            unit=("native", "millisecond"),
            buckets=((0, 1000), 100),
        ),
    ]
"""

from telemetry_metrics.contracts import (
    Binary,
    BucketRange,
    ByteUnit,
    ConflictingFiltersError,
    EmptyEventNameError,
    InvalidBucketsError,
    InvalidFilterArityError,
    InvalidNameError,
    InvalidOptionShapeError,
    InvalidUnitError,
    Key,
    MeasurementTypeError,
    MetricDefinitionError,
    MetricDescriptor,
    MetricKind,
    MissingBucketsError,
    TimeUnit,
    Unary,
    UnsupportedOptionError,
)
from telemetry_metrics.core.compiler import (
    compile_metric,
    counter,
    distribution,
    last_value,
    sum,
    summary,
)
from telemetry_metrics.core.config import CompilerSettings, load_settings
from telemetry_metrics.core.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Binary",
    "BucketRange",
    "ByteUnit",
    "CompilerSettings",
    "ConflictingFiltersError",
    "EmptyEventNameError",
    "InvalidBucketsError",
    "InvalidFilterArityError",
    "InvalidNameError",
    "InvalidOptionShapeError",
    "InvalidUnitError",
    "Key",
    "MeasurementTypeError",
    "MetricDefinitionError",
    "MetricDescriptor",
    "MetricKind",
    "MissingBucketsError",
    "TimeUnit",
    "Unary",
    "UnsupportedOptionError",
    "compile_metric",
    "configure_logging",
    "counter",
    "distribution",
    "last_value",
    "load_settings",
    "sum",
    "summary",
]
