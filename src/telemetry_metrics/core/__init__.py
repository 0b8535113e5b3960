# src/telemetry_metrics/core/__init__.py
"""Compiler core: name resolution, units, buckets, filters, accessors, options, compiler."""

from telemetry_metrics.core.buckets import build_buckets, expand_range
from telemetry_metrics.core.compiler import (
    compile_metric,
    counter,
    distribution,
    last_value,
    sum,
    summary,
)
from telemetry_metrics.core.config import CompilerSettings, load_settings
from telemetry_metrics.core.filters import always_keep, compile_filter
from telemetry_metrics.core.measurement import (
    BinaryAccessor,
    KeyAccessor,
    MeasurementAccessor,
    UnaryAccessor,
    synthesize,
)
from telemetry_metrics.core.names import format_name, resolve_name, split_measurement
from telemetry_metrics.core.options import DistributionOptions, MetricOptions, identity
from telemetry_metrics.core.units import DEFAULT_UNIT_TABLES, UnitTables, conversion_ratio, resolve_unit

__all__ = [
    "DEFAULT_UNIT_TABLES",
    "BinaryAccessor",
    "CompilerSettings",
    "DistributionOptions",
    "KeyAccessor",
    "MeasurementAccessor",
    "MetricOptions",
    "UnaryAccessor",
    "UnitTables",
    "always_keep",
    "build_buckets",
    "compile_filter",
    "compile_metric",
    "conversion_ratio",
    "counter",
    "distribution",
    "expand_range",
    "format_name",
    "identity",
    "last_value",
    "load_settings",
    "resolve_name",
    "resolve_unit",
    "split_measurement",
    "sum",
    "summary",
    "synthesize",
]
