# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Strategy Categories:
- Names (segments, dotted text, malformed text)
- Units (tags of each conversion domain)
- Buckets (increasing boundary lists, well-formed ranges)
- Metric kinds

Usage:
    from tests.property.conftest import dotted_names, time_units

    @given(name=dotted_names)
    def test_something(name: str) -> None:
        ...
"""

# =============================================================================
# Hypothesis Settings
# =============================================================================
#
# For standardized @settings decorators, import from tests.property.settings:
#   from tests.property.settings import STANDARD_SETTINGS, QUICK_SETTINGS
#
# Tiers: DETERMINISM (500), STANDARD (100), QUICK (20)
# =============================================================================

from __future__ import annotations

from hypothesis import strategies as st

from telemetry_metrics.contracts import ByteUnit, MetricKind, TimeUnit

# =============================================================================
# Names
# =============================================================================

# Segments are non-empty and contain neither dots nor whitespace
segments = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="_-"),
    min_size=1,
    max_size=12,
)

segment_lists = st.lists(segments, min_size=1, max_size=6)

# Names with an event prefix (at least two segments)
multi_segment_lists = st.lists(segments, min_size=2, max_size=6)

dotted_names = segment_lists.map(".".join)


@st.composite
def malformed_dotted_names(draw: st.DrawFn) -> str:
    """Dotted text with an empty segment somewhere."""
    parts = draw(segment_lists)
    position = draw(st.sampled_from(["leading", "trailing", "inner"]))
    if position == "leading":
        return "." + ".".join(parts)
    if position == "trailing":
        return ".".join(parts) + "."
    index = draw(st.integers(min_value=0, max_value=len(parts)))
    return ".".join([*parts[:index], "", *parts[index:]])


# =============================================================================
# Units
# =============================================================================

time_units = st.sampled_from([str(unit) for unit in TimeUnit])
byte_units = st.sampled_from([str(unit) for unit in ByteUnit])
convertible_units = st.one_of(time_units, byte_units)
unit_pairs = st.one_of(st.tuples(time_units, time_units), st.tuples(byte_units, byte_units))
cross_domain_pairs = st.one_of(st.tuples(time_units, byte_units), st.tuples(byte_units, time_units))

native_resolutions = st.integers(min_value=1, max_value=10**12)

# Measurements that are exact in every decimal byte scale
whole_megabytes = st.integers(min_value=0, max_value=10**9)


# =============================================================================
# Buckets
# =============================================================================

bucket_lists = st.lists(
    st.integers(min_value=-(10**6), max_value=10**6),
    min_size=1,
    max_size=20,
    unique=True,
).map(sorted)


@st.composite
def bucket_ranges(draw: st.DrawFn) -> tuple[int, int, int]:
    """(first, last, step) with step evenly dividing last - first."""
    first = draw(st.integers(min_value=-1000, max_value=1000))
    step = draw(st.integers(min_value=1, max_value=100))
    count = draw(st.integers(min_value=1, max_value=50))
    return first, first + step * count, step


# =============================================================================
# Kinds
# =============================================================================

metric_kinds = st.sampled_from(list(MetricKind))
