"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension / check_index: integer and range checks
    - check_element_count: exact list length
    - check_values / check_2d: conversion, dtype inference, lossless casts
    - check_scalar / check_exponent: operand checks
    - check_same_shape / check_inner_dimensions / check_square /
      check_same_dtype: conformance checks
"""

import numpy as np
import pytest

from zmatrix.core.exceptions import (
    DimensionError,
    ElementTypeError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)
from zmatrix.core.validation import (
    check_2d,
    check_dimension,
    check_element_count,
    check_exponent,
    check_index,
    check_inner_dimensions,
    check_same_dtype,
    check_same_shape,
    check_scalar,
    check_square,
    check_values,
)


# ═══════════════════════════════════════════════════════════════════════
# Dimensions and indices
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_accepts_zero_and_positive(self):
        assert check_dimension(0, 'rows') == 0
        assert check_dimension(4, 'rows') == 4

    def test_accepts_numpy_integer(self):
        result = check_dimension(np.int32(3), 'cols')
        assert result == 3
        assert type(result) is int

    def test_rejects_negative(self):
        with pytest.raises(DimensionError, match="rows"):
            check_dimension(-1, 'rows')

    def test_rejects_float(self):
        with pytest.raises(DimensionError, match="float"):
            check_dimension(2.0, 'rows')

    def test_rejects_bool(self):
        with pytest.raises(DimensionError):
            check_dimension(True, 'rows')


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(0, 3, 'row') == 0
        assert check_index(2, 3, 'row') == 2

    def test_upper_bound_exclusive(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index(3, 3, 'row')
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == 'row'

    def test_negative_does_not_wrap(self):
        with pytest.raises(IndexOutOfBoundsError, match="column index -1"):
            check_index(-1, 3, 'column')

    def test_empty_axis_has_no_valid_index(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index(0, 0, 'row')

    def test_non_integer_is_validation_error(self):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_index(1.0, 3, 'row')


class TestCheckElementCount:

    def test_exact_passes(self):
        check_element_count(9, 9, 'values')

    @pytest.mark.parametrize("count", [8, 10])
    def test_mismatch_raises(self, count):
        with pytest.raises(DimensionError, match=f"expected exactly 9 values, got {count}"):
            check_element_count(count, 9, 'values')


# ═══════════════════════════════════════════════════════════════════════
# Values
# ═══════════════════════════════════════════════════════════════════════


class TestCheckValues:

    def test_ints_infer_int64(self):
        result = check_values([1, 2, 3], None, 'values')
        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, [1, 2, 3])

    def test_floats_infer_float64(self):
        result = check_values([1.5, 2.0], None, 'values')
        assert result.dtype == np.float64

    def test_empty_infers_default(self):
        result = check_values([], None, 'values')
        assert result.size == 0
        assert result.dtype == np.int64

    def test_explicit_dtype(self):
        result = check_values([1, 2], np.int32, 'values')
        assert result.dtype == np.int32

    def test_integral_floats_into_int(self):
        result = check_values([1.0, -2.0], np.int64, 'values')
        np.testing.assert_array_equal(result, [1, -2])

    def test_returns_copy(self):
        source = np.array([1, 2, 3])
        result = check_values(source, np.int64, 'values')
        result[0] = 99
        assert source[0] == 1

    def test_rejects_fraction_into_int(self):
        with pytest.raises(ValidationError, match="non-integral"):
            check_values([1.5], np.int64, 'values')

    def test_rejects_nan_into_int(self):
        with pytest.raises(ValidationError, match="non-finite"):
            check_values([np.nan], np.int64, 'values')

    def test_rejects_out_of_range(self):
        with pytest.raises(ValidationError, match="exceed the range"):
            check_values([300], np.int8, 'values')

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_values(["a", "b"], None, 'values')

    def test_rejects_mixed(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_values([None, 1], None, 'values')

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="boolean"):
            check_values([True, False], None, 'values')

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_values([1 + 2j], None, 'values')

    def test_rejects_nested(self):
        with pytest.raises(DimensionError, match="flat sequence"):
            check_values([[1, 2], [3, 4]], None, 'values')

    def test_rejects_unsupported_dtype(self):
        with pytest.raises(ElementTypeError):
            check_values([1, 2], np.uint8, 'values')


class TestCheck2d:

    def test_nested_rows(self):
        result = check_2d([[1, 2, 3], [4, 5, 6]], None, 'array')
        assert result.shape == (2, 3)
        assert result.dtype == np.int64

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            check_2d([1, 2, 3], None, 'array')

    def test_rejects_3d(self):
        with pytest.raises(DimensionError, match="got 3D"):
            check_2d(np.zeros((2, 2, 2)), None, 'array')

    def test_rejects_ragged(self):
        with pytest.raises(DimensionError):
            check_2d([[1, 2], [3]], None, 'array')


# ═══════════════════════════════════════════════════════════════════════
# Operands
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    def test_int_scalar(self):
        result = check_scalar(2, np.dtype(np.int64), 'scalar')
        assert result == 2
        assert result.dtype == np.int64

    def test_int_into_float(self):
        result = check_scalar(2, np.dtype(np.float64), 'scalar')
        assert result.dtype == np.float64

    def test_integral_float_into_int(self):
        assert check_scalar(3.0, np.dtype(np.int64), 'scalar') == 3

    def test_rejects_fraction_into_int(self):
        with pytest.raises(ValidationError, match="non-integral"):
            check_scalar(0.5, np.dtype(np.int64), 'scalar')

    @pytest.mark.parametrize("value", [True, "2", None, 1 + 1j])
    def test_rejects_non_real(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, np.dtype(np.int64), 'scalar')


class TestCheckExponent:

    @pytest.mark.parametrize("exponent", [0, 1, 10, np.int64(5)])
    def test_accepts_non_negative(self, exponent):
        assert check_exponent(exponent) == int(exponent)

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="inverse is not supported"):
            check_exponent(-1)

    def test_rejects_float(self):
        with pytest.raises(ValidationError):
            check_exponent(2.0)


class TestConformance:

    def test_same_shape_passes(self):
        check_same_shape((2, 3), (2, 3), 'add')

    def test_same_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="2x3 and 3x2") as exc_info:
            check_same_shape((2, 3), (3, 2), 'add')
        assert exc_info.value.operation == 'add'
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (3, 2)

    def test_inner_dimensions_pass(self):
        check_inner_dimensions((2, 3), (3, 5), 'matmul')

    def test_inner_dimensions_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="cannot multiply 2x3 by 2x3"):
            check_inner_dimensions((2, 3), (2, 3), 'matmul')

    def test_square(self):
        check_square((4, 4), 'power')
        with pytest.raises(ShapeMismatchError, match="square"):
            check_square((2, 3), 'power')

    def test_same_dtype(self):
        check_same_dtype(np.dtype(np.int64), np.dtype(np.int64), 'add')
        with pytest.raises(ElementTypeError, match="int64 and float64"):
            check_same_dtype(np.dtype(np.int64), np.dtype(np.float64), 'add')
