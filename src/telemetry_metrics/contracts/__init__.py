"""Shared contracts: descriptor, selectors, kinds, units and errors.

This package is a leaf: it imports nothing from telemetry_metrics.core.
"""

from telemetry_metrics.contracts.descriptor import MetricDescriptor
from telemetry_metrics.contracts.enums import ByteUnit, MetricKind, TimeUnit, UnitDomain
from telemetry_metrics.contracts.errors import (
    ConflictingFiltersError,
    EmptyEventNameError,
    InvalidBucketsError,
    InvalidFilterArityError,
    InvalidNameError,
    InvalidOptionShapeError,
    InvalidUnitError,
    MeasurementTypeError,
    MetricDefinitionError,
    MissingBucketsError,
    UnsupportedOptionError,
)
from telemetry_metrics.contracts.selectors import Binary, Key, MeasurementSelector, Unary
from telemetry_metrics.contracts.types import (
    BucketRange,
    ConversionRatio,
    EventName,
    KeepPredicate,
    Measurements,
    Metadata,
    MetricName,
    ReporterOptions,
    ResolvedUnit,
    TagValuesFn,
)

__all__ = [
    "Binary",
    "BucketRange",
    "ByteUnit",
    "ConflictingFiltersError",
    "ConversionRatio",
    "EmptyEventNameError",
    "EventName",
    "InvalidBucketsError",
    "InvalidFilterArityError",
    "InvalidNameError",
    "InvalidOptionShapeError",
    "InvalidUnitError",
    "KeepPredicate",
    "Key",
    "MeasurementSelector",
    "MeasurementTypeError",
    "Measurements",
    "Metadata",
    "MetricDefinitionError",
    "MetricDescriptor",
    "MetricKind",
    "MetricName",
    "MissingBucketsError",
    "ReporterOptions",
    "ResolvedUnit",
    "TagValuesFn",
    "TimeUnit",
    "Unary",
    "UnitDomain",
    "UnsupportedOptionError",
]
