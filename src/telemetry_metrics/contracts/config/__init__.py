"""Default registries for metric compilation.

Settings classes are NOT re-exported here; they live in
telemetry_metrics.core.config so that contracts stays a leaf package.
"""

from telemetry_metrics.contracts.config.defaults import (
    BYTE_UNITS_PER_MEGABYTE,
    DEFAULT_NATIVE_TICKS_PER_SECOND,
    OPTION_DEFAULTS,
    TIME_TICKS_PER_SECOND,
    get_option_default,
)

__all__ = [
    "BYTE_UNITS_PER_MEGABYTE",
    "DEFAULT_NATIVE_TICKS_PER_SECOND",
    "OPTION_DEFAULTS",
    "TIME_TICKS_PER_SECOND",
    "get_option_default",
]
