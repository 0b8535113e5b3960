# src/telemetry_metrics/contracts/config/defaults.py
"""Default value registries for metric compilation.

Two categories of defaults:

1. OPTION_DEFAULTS: Values a metric option takes when the caller omits it.
   The per-kind option models read their defaults from here so the
   documented value and the applied value cannot drift.

2. Unit scale tables: Fixed conversion factors for the two unit domains.
   Only native ticks per second is platform dependent; it is supplied by
   CompilerSettings and merged in by UnitTables.
"""

from types import MappingProxyType
from typing import Final

from telemetry_metrics.contracts.enums import ByteUnit, TimeUnit

# =============================================================================
# OPTION_DEFAULTS - applied when an option is omitted
# =============================================================================

OPTION_DEFAULTS: Final[MappingProxyType[str, object]] = MappingProxyType(
    {
        "tags": (),
        "description": None,
        # "unit" is a no-op tag: no conversion, nothing for reporters to render
        "unit": "unit",
        "reporter_options": (),
    }
)

# =============================================================================
# Unit scale tables
# =============================================================================

# time.monotonic_ns() resolution; overridable via CompilerSettings
DEFAULT_NATIVE_TICKS_PER_SECOND: Final[int] = 1_000_000_000

# Ticks of each fixed time unit in one second (the reference unit).
# NATIVE is deliberately absent - it comes from configuration.
TIME_TICKS_PER_SECOND: Final[MappingProxyType[str, int]] = MappingProxyType(
    {
        TimeUnit.SECOND: 1,
        TimeUnit.MILLISECOND: 1_000,
        TimeUnit.MICROSECOND: 1_000_000,
        TimeUnit.NANOSECOND: 1_000_000_000,
    }
)

# Units of each byte unit in one megabyte. Decimal, not 1024-based.
BYTE_UNITS_PER_MEGABYTE: Final[MappingProxyType[str, int]] = MappingProxyType(
    {
        ByteUnit.BYTE: 1_000_000,
        ByteUnit.KILOBYTE: 1_000,
        ByteUnit.MEGABYTE: 1,
    }
)


def get_option_default(option: str) -> object:
    """Get the default for a metric option.

    Raises:
        KeyError: If the option has no documented default (bug - every
                  optional option must be listed in OPTION_DEFAULTS)
    """
    return OPTION_DEFAULTS[option]
