# src/telemetry_metrics/core/options.py
"""Typed option models for metric declarations.

Each metric kind has a typed options struct instead of a loose key-value
bag. Field validators normalize every option on its own (names, unit,
measurement selector, tags, buckets, ...) and raise the typed
MetricDefinitionError subclasses; cross-option work (splitting the name,
composing the accessor, compiling filters) is left to the compiler.

Example usage:
    options = MetricOptions.from_dict({"tags": ["method"], "unit": ("native", "millisecond")}, kind=MetricKind.SUMMARY)
    options.tags        # ('method',)
    options.unit        # ResolvedUnit(unit='millisecond', ratio=Fraction(1, 1000000))
"""

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator, model_validator

from telemetry_metrics.contracts.config.defaults import get_option_default
from telemetry_metrics.contracts.enums import MetricKind
from telemetry_metrics.contracts.errors import (
    InvalidOptionShapeError,
    MetricDefinitionError,
    UnsupportedOptionError,
)
from telemetry_metrics.contracts.selectors import Binary, Key, MeasurementSelector, Unary
from telemetry_metrics.contracts.types import EventName, Metadata, ReporterOptions, ResolvedUnit, TagValuesFn
from telemetry_metrics.core.buckets import build_buckets
from telemetry_metrics.core.names import resolve_name
from telemetry_metrics.core.signatures import positional_arity
from telemetry_metrics.core.units import DEFAULT_UNIT_TABLES, UnitTables, resolve_unit

# Validation context key carrying the UnitTables for this compilation
UNIT_TABLES_CONTEXT_KEY = "unit_tables"


def identity(metadata: Metadata) -> Metadata:
    """Default tag_values: metadata is used unchanged."""
    return metadata


@dataclass(frozen=True, slots=True)
class TakeKeys:
    """tag_values built from a legacy ``metadata=[...]`` key list."""

    keys: tuple[Hashable, ...]

    def __call__(self, metadata: Metadata) -> Metadata:
        return {key: metadata[key] for key in self.keys if key in metadata}


class MetricOptions(BaseModel):
    """Options accepted by counter, sum, last_value and summary.

    Every field is normalized by a plain validator, so the annotations
    describe the normalized form rather than what callers may pass. An
    option given as None is treated as omitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    event_name: EventName | None = None
    measurement: MeasurementSelector | None = None
    tags: tuple[Hashable, ...] = Field(default_factory=lambda: tuple(get_option_default("tags")))  # type: ignore[call-overload]
    tag_values: TagValuesFn | None = None
    metadata: TagValuesFn | None = Field(
        default=None,
        description="Legacy spelling of tag_values: 'all', a list of keys, or a function",
    )
    description: str | None = None
    unit: ResolvedUnit = Field(default_factory=lambda: ResolvedUnit(unit=str(get_option_default("unit"))))
    keep: Callable[..., Any] | None = None
    drop: Callable[..., Any] | None = None
    reporter_options: ReporterOptions = Field(default_factory=lambda: tuple(get_option_default("reporter_options")))  # type: ignore[call-overload]

    @classmethod
    def from_dict(
        cls,
        options: Mapping[str, Any],
        *,
        kind: MetricKind,
        unit_tables: UnitTables = DEFAULT_UNIT_TABLES,
    ) -> Self:
        """Validate raw options into the typed struct.

        Raises:
            MetricDefinitionError: The first typed error any validator raised
        """
        if not isinstance(options, Mapping):
            raise InvalidOptionShapeError(f"Expected options to be a mapping, got: {options!r}", value=options)
        try:
            return cls.model_validate(dict(options), context={UNIT_TABLES_CONTEXT_KEY: unit_tables})
        except ValidationError as e:
            raise _translate_validation_error(e, kind) from None

    @field_validator("event_name", mode="plain")
    @classmethod
    def _validate_event_name(cls, v: object) -> EventName | None:
        if v is None:
            return None
        return resolve_name(v, what="event name")

    @field_validator("measurement", mode="plain")
    @classmethod
    def _validate_measurement(cls, v: object) -> MeasurementSelector | None:
        if v is None or isinstance(v, (Key, Unary, Binary)):
            return v
        if callable(v):
            arity = positional_arity(v)
            if arity == 1:
                return Unary(v)
            if arity == 2:
                return Binary(v)
            raise InvalidOptionShapeError(
                f"Expected measurement function to take one or two arguments, got arity {arity}",
                value=v,
                option="measurement",
            )
        if isinstance(v, Hashable):
            return Key(v)
        raise InvalidOptionShapeError(
            f"Expected measurement to be a key or a function, got: {v!r}",
            value=v,
            option="measurement",
        )

    @field_validator("tags", mode="plain")
    @classmethod
    def _validate_tags(cls, v: object) -> tuple[Hashable, ...]:
        if v is None:
            return tuple(get_option_default("tags"))  # type: ignore[call-overload]
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise InvalidOptionShapeError(f"Expected tag keys to be a list, got: {v!r}", value=v, option="tags")
        for tag in v:
            if not isinstance(tag, Hashable):
                raise InvalidOptionShapeError(f"Expected tag key to be hashable, got: {tag!r}", value=v, option="tags")
        return tuple(v)

    @field_validator("tag_values", mode="plain")
    @classmethod
    def _validate_tag_values(cls, v: object) -> TagValuesFn | None:
        if v is None:
            return None
        return _unary_function("tag_values", v)

    @field_validator("metadata", mode="plain")
    @classmethod
    def _validate_metadata(cls, v: object) -> TagValuesFn | None:
        if v is None:
            return None
        if v == "all":
            return identity
        if isinstance(v, (list, tuple)):
            return TakeKeys(tuple(v))
        if callable(v):
            return _unary_function("metadata", v)
        raise InvalidOptionShapeError(
            f"Expected metadata to be 'all', a list of keys or a function, got: {v!r}",
            value=v,
            option="metadata",
        )

    @field_validator("description", mode="plain")
    @classmethod
    def _validate_description(cls, v: object) -> str | None:
        if v is None or isinstance(v, str):
            return v
        raise InvalidOptionShapeError(
            f"Expected description to be a string, got: {v!r}", value=v, option="description"
        )

    @field_validator("unit", mode="plain")
    @classmethod
    def _validate_unit(cls, v: object, info: ValidationInfo) -> ResolvedUnit:
        if v is None:
            v = get_option_default("unit")
        tables = DEFAULT_UNIT_TABLES
        if info.context is not None:
            tables = info.context.get(UNIT_TABLES_CONTEXT_KEY, DEFAULT_UNIT_TABLES)
        return resolve_unit(v, tables)

    @field_validator("keep", "drop", mode="plain")
    @classmethod
    def _validate_filter(cls, v: object, info: ValidationInfo) -> Callable[..., Any] | None:
        # Arity and keep/drop exclusivity are checked by compile_filter()
        if v is None or callable(v):
            return v
        raise InvalidOptionShapeError(
            f"Expected {info.field_name} to be a function, got: {v!r}",
            value=v,
            option=info.field_name,
        )

    @field_validator("reporter_options", mode="plain")
    @classmethod
    def _validate_reporter_options(cls, v: object) -> ReporterOptions:
        # Keyword lists are kept as given, repeated keys included
        if v is None:
            return ()
        pairs = tuple(v.items()) if isinstance(v, Mapping) else v
        if not isinstance(pairs, (list, tuple)):
            raise InvalidOptionShapeError(
                f"Expected reporter_options to be a keyword list or mapping, got: {v!r}",
                value=v,
                option="reporter_options",
            )
        for pair in pairs:
            if not (isinstance(pair, tuple) and len(pair) == 2 and isinstance(pair[0], str)):
                raise InvalidOptionShapeError(
                    f"Expected reporter_options to be a keyword list or mapping, got: {v!r}",
                    value=v,
                    option="reporter_options",
                )
        return tuple(pairs)

    @model_validator(mode="after")
    def _validate_single_tag_values_source(self) -> Self:
        if self.tag_values is not None and self.metadata is not None:
            raise InvalidOptionShapeError(
                "Only one of tag_values or metadata can be given",
                value=(self.tag_values, self.metadata),
                option="tag_values",
            )
        return self

    def resolved_tag_values(self) -> TagValuesFn:
        """The tag_values function to put on the descriptor."""
        if self.tag_values is not None:
            return self.tag_values
        if self.metadata is not None:
            return self.metadata
        return identity


class DistributionOptions(MetricOptions):
    """Options accepted by distribution: everything plus bucket boundaries.

    buckets is optional at this level so that a missing value surfaces as
    MissingBucketsError from the compiler rather than a shape error.
    """

    buckets: tuple[int | float, ...] | None = None

    @field_validator("buckets", mode="plain")
    @classmethod
    def _validate_buckets(cls, v: object) -> tuple[int | float, ...] | None:
        if v is None:
            return None
        return build_buckets(v)


def options_model_for(kind: MetricKind) -> type[MetricOptions]:
    """Options struct accepted by a metric kind."""
    if kind.requires_buckets:
        return DistributionOptions
    return MetricOptions


def _unary_function(option: str, fn: object) -> Callable[..., Any]:
    if not callable(fn) or positional_arity(fn) != 1:
        raise InvalidOptionShapeError(
            f"Expected {option} to be a one-argument function, got: {fn!r}",
            value=fn,
            option=option,
        )
    return fn


def _translate_validation_error(error: ValidationError, kind: MetricKind) -> MetricDefinitionError:
    """Recover the typed error from pydantic's wrapper.

    Validators raise MetricDefinitionError subclasses, which pydantic keeps
    in the error context. Unknown options are the only pydantic-native
    failure left over.
    """
    for detail in error.errors():
        original = detail.get("ctx", {}).get("error")
        if isinstance(original, MetricDefinitionError):
            return original
        option = str(detail["loc"][0]) if detail["loc"] else None
        if detail["type"] == "extra_forbidden":
            return UnsupportedOptionError(
                f"Option {option!r} is not supported by {kind} metrics",
                value=detail.get("input"),
                option=option,
            )
        return InvalidOptionShapeError(
            f"Invalid option {option!r}: {detail['msg']}",
            value=detail.get("input"),
            option=option,
        )
    return InvalidOptionShapeError(str(error))
