# src/telemetry_metrics/core/compiler.py
"""Metric compilation pipeline.

One linear pipeline serves every metric kind; the kind only decides which
options struct is accepted and whether bucket boundaries are required:

    raw name + options
      -> resolve metric name
      -> validate options (event name, selector, unit, tags, tag_values,
         description, reporter options, buckets)
      -> split name into event name + measurement segment
      -> synthesize measurement accessor (selector x conversion ratio)
      -> compile keep/drop filter
      -> require buckets (distribution only)
      -> MetricDescriptor

The pipeline keeps no state between calls. Any failure aborts the call with
a MetricDefinitionError; there is never a partial descriptor.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from telemetry_metrics.contracts.descriptor import MetricDescriptor
from telemetry_metrics.contracts.enums import MetricKind
from telemetry_metrics.contracts.errors import MetricDefinitionError, MissingBucketsError
from telemetry_metrics.contracts.selectors import Key
from telemetry_metrics.core.config import DEFAULT_SETTINGS, CompilerSettings
from telemetry_metrics.core.filters import compile_filter
from telemetry_metrics.core.logging import get_logger
from telemetry_metrics.core.measurement import synthesize
from telemetry_metrics.core.names import format_name, resolve_name, split_measurement
from telemetry_metrics.core.options import DistributionOptions, MetricOptions, options_model_for

logger = get_logger(__name__)

NameInput = str | Sequence[str]


def compile_metric(
    kind: MetricKind | str,
    name: NameInput,
    options: Mapping[str, Any] | None = None,
    *,
    settings: CompilerSettings | None = None,
) -> MetricDescriptor:
    """Compile a metric declaration into a descriptor.

    Args:
        kind: Metric kind (MetricKind member or its string value)
        name: Metric name, dotted text or a list of segments
        options: Raw metric options
        settings: Compiler settings; defaults apply when omitted

    Returns:
        Immutable MetricDescriptor

    Raises:
        MetricDefinitionError: If the declaration is invalid (see
            telemetry_metrics.contracts.errors for the taxonomy)
        ValueError: If kind is not a known metric kind
    """
    kind = MetricKind(kind)
    settings = settings if settings is not None else DEFAULT_SETTINGS
    try:
        descriptor = _compile(kind, name, options if options is not None else {}, settings)
    except MetricDefinitionError as e:
        logger.debug(
            "metric_rejected",
            kind=str(kind),
            metric=name if isinstance(name, str) else repr(name),
            error=type(e).__name__,
            reason=e.message,
        )
        raise

    logger.debug(
        "metric_compiled",
        kind=str(kind),
        metric=descriptor.dotted_name,
        event_name=descriptor.dotted_event_name,
        unit=descriptor.unit,
    )
    return descriptor


def _compile(
    kind: MetricKind,
    name: NameInput,
    raw_options: Mapping[str, Any],
    settings: CompilerSettings,
) -> MetricDescriptor:
    metric_name = resolve_name(name)
    options: MetricOptions = options_model_for(kind).from_dict(
        raw_options,
        kind=kind,
        unit_tables=settings.unit_tables(),
    )

    event_name, measurement_segment = split_measurement(metric_name, options.event_name)
    selector = options.measurement if options.measurement is not None else Key(measurement_segment)
    accessor = synthesize(selector, options.unit.ratio)
    keep = compile_filter(options.keep, options.drop)

    buckets = None
    if kind.requires_buckets:
        assert isinstance(options, DistributionOptions)
        if options.buckets is None:
            raise MissingBucketsError(
                f"Distribution {format_name(metric_name)!r} requires the buckets option",
                value=None,
            )
        buckets = options.buckets

    return MetricDescriptor(
        kind=kind,
        name=metric_name,
        event_name=event_name,
        measurement=accessor,
        tags=options.tags,
        tag_values=options.resolved_tag_values(),
        keep=keep,
        description=options.description,
        unit=options.unit.unit,
        reporter_options=options.reporter_options,
        buckets=buckets,
    )


# =============================================================================
# Per-kind entry points
# =============================================================================


def counter(name: NameInput, *, settings: CompilerSettings | None = None, **options: Any) -> MetricDescriptor:
    """Counter metric: the number of events, regardless of measurement value.

    Example:
        counter("http.request.count", tags=["controller", "action"])
    """
    return compile_metric(MetricKind.COUNTER, name, options, settings=settings)


def sum(name: NameInput, *, settings: CompilerSettings | None = None, **options: Any) -> MetricDescriptor:  # noqa: A001
    """Sum metric: the running total of measurement values.

    Example:
        sum("user.session_count.change", event_name="user.session_count", tags=["role"])
    """
    return compile_metric(MetricKind.SUM, name, options, settings=settings)


def last_value(name: NameInput, *, settings: CompilerSettings | None = None, **options: Any) -> MetricDescriptor:
    """Last-value metric: the measurement of the most recent event.

    Example:
        last_value("vm.memory.total", unit=("byte", "megabyte"))
    """
    return compile_metric(MetricKind.LAST_VALUE, name, options, settings=settings)


def summary(name: NameInput, *, settings: CompilerSettings | None = None, **options: Any) -> MetricDescriptor:
    """Summary metric: statistics (min, max, percentiles, ...) over measurements."""
    return compile_metric(MetricKind.SUMMARY, name, options, settings=settings)


def distribution(name: NameInput, *, settings: CompilerSettings | None = None, **options: Any) -> MetricDescriptor:
    """Distribution metric: a histogram over the given bucket boundaries.

    Example:
        distribution("http.request.duration", buckets=[100, 200, 500], unit=("native", "millisecond"))
        distribution("http.request.duration", buckets=((100, 1000), 100))
    """
    return compile_metric(MetricKind.DISTRIBUTION, name, options, settings=settings)
