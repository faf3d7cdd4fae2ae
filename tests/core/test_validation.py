"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_scalar: numeric acceptance, bool and non-number rejection
    - check_dimension: positive integer counts
    - check_index: bounds and integer type
    - check_length: replacement sequence length
    - check_array: numpy conversion, dtype and dimensionality
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    SizeMismatchError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:
    """check_scalar accepts numbers.Number values except bools."""

    @pytest.mark.parametrize("value", [
        1, -3.5, 2 + 1j, Fraction(1, 3), Decimal("1.5"),
        np.float64(2.0), np.int32(7), np.float32(0.5),
    ])
    def test_numeric_passes(self, value):
        check_scalar(value, "value")  # no exception

    @pytest.mark.parametrize("value", ["1", None, [1], object()])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ValidationError, match="expected a numeric value"):
            check_scalar(value, "value")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(True, "value")

    def test_numpy_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_scalar(np.bool_(False), "value")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_value"):
            check_scalar("x", "my_value")


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:
    """check_dimension enforces positive integer counts."""

    def test_positive_passes(self):
        assert check_dimension(3, "rows") == 3

    def test_numpy_integer_converted(self):
        result = check_dimension(np.int64(4), "rows")
        assert result == 4
        assert type(result) is int

    def test_zero_rejected(self):
        with pytest.raises(InvalidDimensionError, match="at least 1, got 0"):
            check_dimension(0, "rows")

    def test_negative_rejected(self):
        with pytest.raises(InvalidDimensionError):
            check_dimension(-2, "columns")

    def test_float_rejected(self):
        with pytest.raises(InvalidDimensionError, match="positive integer"):
            check_dimension(2.0, "rows")

    def test_bool_rejected(self):
        with pytest.raises(InvalidDimensionError):
            check_dimension(True, "rows")

    def test_error_message_includes_name(self):
        with pytest.raises(InvalidDimensionError, match="columns"):
            check_dimension(0, "columns")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:
    """check_index enforces 0 <= index < bound with no wrap-around."""

    def test_first_and_last_pass(self):
        assert check_index(0, 3, "row") == 0
        assert check_index(2, 3, "row") == 2

    def test_bound_rejected(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(3, 3, "row")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "row"

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfRangeError, match="column index -1"):
            check_index(-1, 3, "column")

    @pytest.mark.parametrize("index", [1.0, "a", None, True])
    def test_non_integer_is_type_problem_not_range(self, index):
        with pytest.raises(ValidationError, match="must be an integer") as exc_info:
            check_index(index, 3, "row")
        assert not isinstance(exc_info.value, IndexOutOfRangeError)


# ═══════════════════════════════════════════════════════════════════════
# check_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckLength:
    """check_length requires an exact length match."""

    def test_exact_length_passes(self):
        check_length([1, 2, 3], 3, "values")

    def test_short_rejected(self):
        with pytest.raises(SizeMismatchError, match="expected 3 values, got 2") as exc_info:
            check_length([1, 2], 3, "values")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_long_rejected(self):
        with pytest.raises(SizeMismatchError):
            check_length((1, 2, 3, 4), 3, "values")


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a 2-D numeric ndarray."""

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert isinstance(result, np.ndarray)
        assert result.shape == (2, 2)

    def test_int_dtype_preserved(self):
        result = check_array(np.array([[1, 2]], dtype=np.int64), "X")
        assert np.issubdtype(result.dtype, np.integer)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([[None, 1.0]], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "X")

    def test_rejects_booleans(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([[True, False]], "X")

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D.*got 1D"):
            check_array([1.0, 2.0], "X")

    def test_rejects_3d(self):
        with pytest.raises(DimensionError, match=r"shape \(2, 2, 2\)"):
            check_array(np.ones((2, 2, 2)), "X")

    def test_error_message_includes_name(self):
        with pytest.raises(DimensionError, match="my_array"):
            check_array([1.0], "my_array")
