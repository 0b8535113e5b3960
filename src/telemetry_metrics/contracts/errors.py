"""Metric definition errors.

Everything under MetricDefinitionError is a compile-time, synchronous,
non-retryable configuration error: it is raised at the point the invalid
option is detected and aborts the whole compilation. Callers (application
startup code) should treat these as fatal.

MeasurementTypeError is the one runtime error. It is raised by a compiled
measurement accessor when a unit conversion meets a non-numeric value, long
after compilation succeeded. The event dispatcher that invokes the accessor
is responsible for catching and logging it.
"""

from typing import Any


class MetricDefinitionError(ValueError):
    """Base class for invalid metric definitions.

    Attributes:
        value: The offending input, exactly as the caller supplied it
        message: Human-readable error description
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        self.value = value
        self.message = message
        super().__init__(message)


class InvalidNameError(MetricDefinitionError):
    """Malformed or empty metric or event name."""


class EmptyEventNameError(MetricDefinitionError):
    """Event name derived from a single-segment metric name would be empty."""


class InvalidUnitError(MetricDefinitionError):
    """Unit pair spans two domains, or an element is not a recognized unit."""


class InvalidBucketsError(MetricDefinitionError):
    """Distribution bucket boundaries are malformed."""


class MissingBucketsError(MetricDefinitionError):
    """Distribution declared without bucket boundaries."""


class ConflictingFiltersError(MetricDefinitionError):
    """Both keep and drop were supplied."""


class InvalidFilterArityError(MetricDefinitionError):
    """Filter function takes neither one nor two positional arguments.

    Attributes:
        arity: Positional arity found on the supplied function, or None when
            it could not be determined
    """

    def __init__(self, message: str, *, value: Any = None, arity: int | None = None) -> None:
        self.arity = arity
        super().__init__(message, value=value)


class InvalidOptionShapeError(MetricDefinitionError):
    """An option failed its shape check.

    Attributes:
        option: Name of the offending option (e.g. "tags")
    """

    def __init__(self, message: str, *, value: Any = None, option: str | None = None) -> None:
        self.option = option
        super().__init__(message, value=value)


class UnsupportedOptionError(InvalidOptionShapeError):
    """Option is unknown, or not supported by this metric kind."""


class MeasurementTypeError(TypeError):
    """A unit conversion was applied to a non-numeric or absent measurement.

    Raised at measurement time, once per offending event.

    Attributes:
        value: The measurement value that could not be scaled
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Expected measurement to be a number, got: {value!r}")
