# src/telemetry_metrics/core/filters.py
"""Keep/drop filter compilation.

Users may pass a keep predicate or a drop predicate (never both - they are
logical complements). Either takes the event metadata, optionally followed by
the measurements. The compiled filter always has the uniform signature
(metadata, measurements) -> bool so reporters never inspect arity.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from telemetry_metrics.contracts.errors import (
    ConflictingFiltersError,
    InvalidFilterArityError,
    InvalidOptionShapeError,
)
from telemetry_metrics.contracts.types import KeepPredicate, Measurements, Metadata
from telemetry_metrics.core.signatures import positional_arity

_SUPPORTED_ARITIES = (1, 2)


def always_keep(metadata: Metadata, measurements: Measurements) -> bool:
    """Default filter: every event is kept."""
    return True


@dataclass(frozen=True, slots=True)
class KeepWhen:
    """Keep the event when the predicate holds."""

    predicate: Callable[..., Any]
    arity: int

    def __call__(self, metadata: Metadata, measurements: Measurements) -> Any:
        if self.arity == 1:
            return self.predicate(metadata)
        return self.predicate(metadata, measurements)


@dataclass(frozen=True, slots=True)
class DropWhen:
    """Keep the event unless the predicate holds."""

    predicate: Callable[..., Any]
    arity: int

    def __call__(self, metadata: Metadata, measurements: Measurements) -> bool:
        if self.arity == 1:
            return not self.predicate(metadata)
        return not self.predicate(metadata, measurements)


def compile_filter(keep: object = None, drop: object = None) -> KeepPredicate:
    """Compile keep/drop options into a single predicate.

    Args:
        keep: Predicate selecting events to keep, or None
        drop: Predicate selecting events to drop, or None

    Returns:
        Predicate called as (metadata, measurements)

    Raises:
        ConflictingFiltersError: If both keep and drop are supplied
        InvalidOptionShapeError: If the supplied filter is not callable
        InvalidFilterArityError: If it takes neither 1 nor 2 arguments
    """
    if keep is not None and drop is not None:
        raise ConflictingFiltersError(
            "Only one of keep or drop can be given; they are logical complements",
            value=(keep, drop),
        )
    if keep is not None:
        return KeepWhen(keep, _filter_arity("keep", keep))  # type: ignore[arg-type]
    if drop is not None:
        return DropWhen(drop, _filter_arity("drop", drop))  # type: ignore[arg-type]
    return always_keep


def _filter_arity(option: str, predicate: object) -> int:
    if not callable(predicate):
        raise InvalidOptionShapeError(
            f"Expected {option} to be a function, got: {predicate!r}",
            value=predicate,
            option=option,
        )
    arity = positional_arity(predicate)
    if arity not in _SUPPORTED_ARITIES:
        raise InvalidFilterArityError(
            f"Expected {option} to take one (metadata) or two (metadata, measurements) arguments, "
            f"got a function of arity {arity}",
            value=predicate,
            arity=arity,
        )
    return arity  # type: ignore[return-value]
