# src/telemetry_metrics/core/units.py
"""Unit resolution and conversion ratios.

A unit option is either a plain tag ("byte", "millisecond", or any custom
identifier such as "request") or a (from_unit, to_unit) pair asking for
measurements to be converted. Pairs are only meaningful inside one of two
closed domains:

- time: native, second, millisecond, microsecond, nanosecond
- bytes: byte, kilobyte, megabyte (decimal)

Ratios are exact Fractions computed through a single reference unit per
domain (ticks per second, units per megabyte). Because they are exact, a
sub-unit ratio such as nanosecond -> second (1/10**9) never truncates to zero
and ratio(a, b) * ratio(b, a) == 1 holds for every pair.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType

from telemetry_metrics.contracts.config.defaults import (
    BYTE_UNITS_PER_MEGABYTE,
    DEFAULT_NATIVE_TICKS_PER_SECOND,
    TIME_TICKS_PER_SECOND,
)
from telemetry_metrics.contracts.enums import TimeUnit, UnitDomain
from telemetry_metrics.contracts.errors import InvalidUnitError
from telemetry_metrics.contracts.types import ConversionRatio, ResolvedUnit

_UNIT_TAG_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class UnitTables:
    """Scale tables handed to the converter.

    Attributes:
        time_ticks_per_second: Ticks of each time unit in one second,
            including native
        byte_units_per_megabyte: Units of each byte unit in one megabyte
    """

    time_ticks_per_second: Mapping[str, int]
    byte_units_per_megabyte: Mapping[str, int]

    @classmethod
    def with_native(cls, native_ticks_per_second: int) -> "UnitTables":
        """Build tables for a platform whose native tick is 1/N second."""
        if native_ticks_per_second <= 0:
            raise ValueError(f"native_ticks_per_second must be positive, got {native_ticks_per_second}")
        time_table = {TimeUnit.NATIVE.value: native_ticks_per_second}
        time_table.update({str(unit): ticks for unit, ticks in TIME_TICKS_PER_SECOND.items()})
        return cls(
            time_ticks_per_second=MappingProxyType(time_table),
            byte_units_per_megabyte=MappingProxyType({str(unit): n for unit, n in BYTE_UNITS_PER_MEGABYTE.items()}),
        )

    def domain_of(self, unit: str) -> UnitDomain | None:
        """Domain a unit belongs to, or None for domain-free tags."""
        if unit in self.time_ticks_per_second:
            return UnitDomain.TIME
        if unit in self.byte_units_per_megabyte:
            return UnitDomain.BYTES
        return None


DEFAULT_UNIT_TABLES = UnitTables.with_native(DEFAULT_NATIVE_TICKS_PER_SECOND)


def resolve_unit(spec: object, tables: UnitTables = DEFAULT_UNIT_TABLES) -> ResolvedUnit:
    """Resolve a unit option into the descriptor unit and conversion ratio.

    Args:
        spec: A unit tag, or a (from_unit, to_unit) pair (tuple or list)
        tables: Scale tables (native ticks come from configuration)

    Returns:
        ResolvedUnit with the target unit and the ratio to apply

    Raises:
        InvalidUnitError: If the unit option is malformed, a pair element is not a
            known unit, or the pair crosses domains

    Example:
        >>> resolve_unit("byte")
        ResolvedUnit(unit='byte', ratio=Fraction(1, 1))
        >>> resolve_unit(("byte", "kilobyte"))
        ResolvedUnit(unit='kilobyte', ratio=Fraction(1, 1000))
    """
    if _is_unit_tag(spec):
        return ResolvedUnit(unit=_plain(spec))

    if isinstance(spec, (tuple, list)) and len(spec) == 2:
        from_unit, to_unit = spec
        if not (_is_unit_tag(from_unit) and _is_unit_tag(to_unit)):
            raise InvalidUnitError(f"Expected a pair of unit tags, got: {spec!r}", value=spec)
        from_unit, to_unit = _plain(from_unit), _plain(to_unit)
        if from_unit == to_unit:
            return ResolvedUnit(unit=to_unit)
        return ResolvedUnit(unit=to_unit, ratio=conversion_ratio(from_unit, to_unit, tables))

    raise InvalidUnitError(
        f"Expected unit to be a unit tag or a (from_unit, to_unit) pair, got: {spec!r}",
        value=spec,
    )


def conversion_ratio(from_unit: str, to_unit: str, tables: UnitTables = DEFAULT_UNIT_TABLES) -> ConversionRatio:
    """Factor converting a value in from_unit into to_unit.

    Raises:
        InvalidUnitError: If either unit is unknown or the domains differ
    """
    if from_unit == to_unit:
        return Fraction(1)

    from_domain = tables.domain_of(from_unit)
    to_domain = tables.domain_of(to_unit)
    if from_domain is None or to_domain is None:
        unknown = from_unit if from_domain is None else to_unit
        raise InvalidUnitError(
            f"Unit {unknown!r} is not a time or byte unit and cannot be converted",
            value=(from_unit, to_unit),
        )
    if from_domain is not to_domain:
        raise InvalidUnitError(
            f"Cannot convert {from_unit!r} ({from_domain}) to {to_unit!r} ({to_domain})",
            value=(from_unit, to_unit),
        )

    match from_domain:
        case UnitDomain.TIME:
            scale = tables.time_ticks_per_second
        case UnitDomain.BYTES:
            scale = tables.byte_units_per_megabyte
    return Fraction(scale[to_unit], scale[from_unit])


def _is_unit_tag(value: object) -> bool:
    return isinstance(value, str) and _UNIT_TAG_PATTERN.fullmatch(value) is not None


def _plain(unit: str) -> str:
    # TimeUnit.SECOND -> "second"
    return str.__str__(unit)
