"""Tests for keep/drop filter compilation."""

from typing import Any

import pytest

from telemetry_metrics.contracts import ConflictingFiltersError, InvalidFilterArityError, InvalidOptionShapeError
from telemetry_metrics.core.filters import DropWhen, KeepWhen, always_keep, compile_filter

METADATA = {"method": "GET", "status": 200}
MEASUREMENTS = {"duration": 15}


def is_get(metadata: dict[str, Any]) -> bool:
    return metadata["method"] == "GET"


def is_slow(metadata: dict[str, Any], measurements: dict[str, Any]) -> bool:
    return measurements["duration"] > 10


class TestCompileFilter:
    def test_default_keeps_everything(self) -> None:
        predicate = compile_filter()

        assert predicate is always_keep
        assert predicate(METADATA, MEASUREMENTS) is True

    def test_keep_with_metadata_only(self) -> None:
        predicate = compile_filter(keep=is_get)

        assert predicate == KeepWhen(is_get, 1)
        assert predicate(METADATA, MEASUREMENTS) is True
        assert predicate({"method": "POST"}, MEASUREMENTS) is False

    def test_keep_with_metadata_and_measurements(self) -> None:
        predicate = compile_filter(keep=is_slow)

        assert predicate(METADATA, {"duration": 20}) is True
        assert predicate(METADATA, {"duration": 5}) is False

    def test_drop_is_negated(self) -> None:
        predicate = compile_filter(drop=is_get)

        assert predicate == DropWhen(is_get, 1)
        assert predicate(METADATA, MEASUREMENTS) is False
        assert predicate({"method": "POST"}, MEASUREMENTS) is True

    def test_drop_with_two_arguments(self) -> None:
        predicate = compile_filter(drop=is_slow)

        assert predicate(METADATA, {"duration": 20}) is False
        assert predicate(METADATA, {"duration": 5}) is True

    def test_keep_and_drop_conflict(self) -> None:
        with pytest.raises(ConflictingFiltersError, match="Only one of keep or drop"):
            compile_filter(keep=is_get, drop=is_slow)

    @pytest.mark.parametrize(
        "predicate",
        [
            lambda: True,
            lambda a, b, c: True,
        ],
    )
    def test_unsupported_arity(self, predicate: Any) -> None:
        with pytest.raises(InvalidFilterArityError) as exc_info:
            compile_filter(keep=predicate)

        assert exc_info.value.arity in (0, 3)

    def test_optional_parameters_do_not_count(self) -> None:
        predicate = compile_filter(keep=lambda metadata, extra=None: extra is None)

        assert predicate == KeepWhen(predicate.predicate, 1)  # type: ignore[attr-defined]
        assert predicate(METADATA, MEASUREMENTS) is True

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(InvalidOptionShapeError, match="drop to be a function") as exc_info:
            compile_filter(drop="status")

        assert exc_info.value.option == "drop"

    def test_compiled_filters_compare_structurally(self) -> None:
        assert compile_filter(keep=is_get) == compile_filter(keep=is_get)
