"""Tests for distribution bucket boundaries."""

import pytest

from telemetry_metrics.contracts import BucketRange, InvalidBucketsError
from telemetry_metrics.core.buckets import build_buckets, expand_range


class TestListForm:
    """Explicit boundary lists."""

    def test_increasing_list_is_accepted(self) -> None:
        assert build_buckets([0, 100, 200]) == (0, 100, 200)

    def test_single_float_boundary(self) -> None:
        assert build_buckets([99.9]) == (99.9,)

    def test_mixed_int_and_float(self) -> None:
        assert build_buckets((0, 0.5, 1)) == (0, 0.5, 1)

    def test_not_increasing_raises_with_offending_value(self) -> None:
        with pytest.raises(InvalidBucketsError, match="increasing") as exc_info:
            build_buckets([0, 200, 100])

        assert exc_info.value.value == 100

    def test_duplicates_raise(self) -> None:
        with pytest.raises(InvalidBucketsError, match="increasing"):
            build_buckets([0, 100, 100])

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidBucketsError, match="non-empty"):
            build_buckets([])

    @pytest.mark.parametrize("boundary", ["200", None, True])
    def test_non_numeric_boundary_raises(self, boundary: object) -> None:
        with pytest.raises(InvalidBucketsError, match="number") as exc_info:
            build_buckets([0, 100, boundary])

        assert exc_info.value.value is boundary

    @pytest.mark.parametrize("spec", [None, "0,100", 100, {0, 100}])
    def test_other_shapes_raise(self, spec: object) -> None:
        with pytest.raises(InvalidBucketsError):
            build_buckets(spec)


class TestRangeForm:
    """Inclusive ranges with a step."""

    def test_bucket_range(self) -> None:
        assert build_buckets(BucketRange(100, 300, 100)) == (100, 200, 300)

    def test_range_pair(self) -> None:
        assert build_buckets(((100, 300), 100)) == (100, 200, 300)

    def test_python_range(self) -> None:
        assert build_buckets(range(100, 301, 100)) == (100, 200, 300)

    @pytest.mark.parametrize("spec", [range(0), range(300, 99, -100)])
    def test_empty_or_decreasing_python_range_raises(self, spec: range) -> None:
        with pytest.raises(InvalidBucketsError):
            build_buckets(spec)

    def test_range_matches_list_form(self) -> None:
        assert build_buckets(((0, 50), 10)) == build_buckets([0, 10, 20, 30, 40, 50])

    def test_decreasing_range_raises(self) -> None:
        with pytest.raises(InvalidBucketsError, match="increasing"):
            build_buckets(((300, 100), 100))

    def test_empty_range_raises(self) -> None:
        with pytest.raises(InvalidBucketsError):
            expand_range(BucketRange(100, 100, 10))

    def test_step_must_divide_range(self) -> None:
        with pytest.raises(InvalidBucketsError, match="evenly divide"):
            build_buckets(((0, 100), 30))

    @pytest.mark.parametrize("step", [0, -10])
    def test_step_must_be_positive(self, step: int) -> None:
        with pytest.raises(InvalidBucketsError, match="positive"):
            expand_range(BucketRange(0, 100, step))

    def test_float_bounds_raise(self) -> None:
        with pytest.raises(InvalidBucketsError, match="integers"):
            build_buckets(((0.0, 1.0), 1))
