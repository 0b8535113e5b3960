# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- settings: default CompilerSettings
- slow_native_settings: settings whose native tick is a microsecond, for
  tests that must not depend on the default native resolution
- kind: parametrized over every MetricKind; distribution needs buckets, so
  tests that loop over every kind go through compile_any() which supplies
  them

Helpers:
- ALL_KINDS / NON_DISTRIBUTION_KINDS: parametrization tuples

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings as hypothesis_settings

from telemetry_metrics import CompilerSettings, MetricDescriptor, MetricKind, compile_metric

ALL_KINDS = tuple(MetricKind)
NON_DISTRIBUTION_KINDS = tuple(kind for kind in MetricKind if not kind.requires_buckets)

# Minimal extra options each kind needs to compile
EXTRA_OPTIONS: dict[MetricKind, dict[str, Any]] = {
    MetricKind.DISTRIBUTION: {"buckets": [0, 100, 200]},
}


def compile_any(kind: MetricKind, name: Any, **options: Any) -> MetricDescriptor:
    """Compile a metric of any kind, adding the options the kind requires."""
    merged = {**EXTRA_OPTIONS.get(kind, {}), **options}
    return compile_metric(kind, name, merged)


@pytest.fixture(params=ALL_KINDS, ids=str)
def kind(request: pytest.FixtureRequest) -> MetricKind:
    """Every metric kind."""
    return request.param  # type: ignore[no-any-return]


@pytest.fixture
def settings() -> CompilerSettings:
    return CompilerSettings()


@pytest.fixture
def slow_native_settings() -> CompilerSettings:
    return CompilerSettings(native_ticks_per_second=1_000_000)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

hypothesis_settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

hypothesis_settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

hypothesis_settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

hypothesis_settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
