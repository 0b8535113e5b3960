# tests/property/core/test_compiler_properties.py
"""Property-based tests for metric compilation.

Determinism Properties:
- Compiling the same declaration twice yields equal descriptors

Rejection Properties:
- keep together with drop is rejected for every kind
- buckets are rejected for every kind except distribution
"""

from __future__ import annotations

import pytest
from hypothesis import given

from telemetry_metrics import ConflictingFiltersError, MetricKind, UnsupportedOptionError, compile_metric
from tests.conftest import compile_any
from tests.property.conftest import metric_kinds, multi_segment_lists, unit_pairs
from tests.property.settings import DETERMINISM_SETTINGS, QUICK_SETTINGS, STANDARD_SETTINGS


def _keep(metadata: dict[str, object]) -> bool:
    return True


@given(kind=metric_kinds, parts=multi_segment_lists, unit=unit_pairs)
@DETERMINISM_SETTINGS
def test_compilation_is_idempotent(kind: MetricKind, parts: list[str], unit: tuple[str, str]) -> None:
    options = {"tags": ["route"], "unit": unit, "keep": _keep, "reporter_options": [("prefix", "app")]}

    assert compile_any(kind, ".".join(parts), **options) == compile_any(kind, parts, **options)


@given(kind=metric_kinds, parts=multi_segment_lists)
@STANDARD_SETTINGS
def test_name_and_event_name(kind: MetricKind, parts: list[str]) -> None:
    metric = compile_any(kind, parts)

    assert metric.name == tuple(parts)
    assert metric.event_name == tuple(parts[:-1])
    assert metric.dotted_name == ".".join(parts)


@given(kind=metric_kinds)
@QUICK_SETTINGS
def test_keep_and_drop_conflict(kind: MetricKind) -> None:
    with pytest.raises(ConflictingFiltersError):
        compile_any(kind, "my.metric", keep=_keep, drop=_keep)


@given(kind=metric_kinds)
@QUICK_SETTINGS
def test_buckets_only_on_distribution(kind: MetricKind) -> None:
    if kind.requires_buckets:
        assert compile_metric(kind, "my.metric", {"buckets": [1, 2]}).buckets == (1, 2)
    else:
        with pytest.raises(UnsupportedOptionError):
            compile_metric(kind, "my.metric", {"buckets": [1, 2]})
