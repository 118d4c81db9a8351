"""
Input validation utilities for zmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (no truncation of 2.5 into an int matrix)
    - No clamping or wrapping of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from zmatrix.core.dtypes import infer_dtype, resolve_dtype
from zmatrix.core.exceptions import (
    DimensionError,
    ElementTypeError,
    IndexOutOfBoundsError,
    ShapeMismatchError,
    ValidationError,
)


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def _format_shape(shape: tuple[int, int]) -> str:
    return f"{shape[0]}x{shape[1]}"


def check_dimension(value: object, name: str) -> int:
    """
    Verify a matrix dimension is a non-negative integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        DimensionError: If value is not an integer or is negative
    """
    if not _is_integer(value):
        raise DimensionError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise DimensionError(f"{name}: expected a non-negative integer, got {value}")
    return int(value)


def check_index(index: object, bound: int, axis: str) -> int:
    """
    Verify an element index lies in [0, bound).

    Args:
        index: Index to check
        bound: Exclusive upper bound (number of rows or columns)
        axis: 'row' or 'column', used in error messages

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is negative or >= bound
    """
    if not _is_integer(index):
        raise ValidationError(
            f"{axis} index: expected an integer, got {type(index).__name__} {index!r}"
        )
    if not 0 <= index < bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
            axis=axis,
        )
    return int(index)


def check_element_count(count: int, expected: int, name: str) -> None:
    """
    Verify an element list holds exactly the expected number of values.

    Raises:
        DimensionError: If count differs from expected
    """
    if count != expected:
        raise DimensionError(
            f"{name}: expected exactly {expected} values, got {count}"
        )


def _check_numeric(array: NDArray[Any], name: str) -> None:
    if array.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"non-numeric data or integers too large for any element type"
        )
    if array.dtype.kind == 'b':
        raise ValidationError(f"{name}: boolean values are not matrix elements")
    if array.dtype.kind not in ('i', 'u', 'f'):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected integer or floating point data"
        )


def _cast(array: NDArray[Any], dtype: np.dtype, name: str) -> NDArray[Any]:
    """Cast numeric data to dtype, refusing lossy conversions into integers."""
    if dtype.kind == 'i' and array.size > 0:
        if array.dtype.kind == 'f':
            if not np.all(np.isfinite(array)):
                raise ValidationError(
                    f"{name}: non-finite values cannot be stored as {dtype}"
                )
            if not np.all(array == np.trunc(array)):
                raise ValidationError(
                    f"{name}: non-integral values cannot be stored as {dtype}"
                )
        info = np.iinfo(dtype)
        # Compare in Python ints so uint64 and large floats stay exact
        low, high = int(array.min()), int(array.max())
        if low < info.min or high > info.max:
            raise ValidationError(
                f"{name}: values in [{low}, {high}] exceed the range of {dtype} "
                f"[{info.min}, {info.max}]"
            )
    return array.astype(dtype)


def check_values(
    values: ArrayLike,
    dtype: DTypeLike | None,
    name: str,
) -> NDArray[Any]:
    """
    Validate element values and convert them to a flat array of one dtype.

    Args:
        values: Sequence or array of numbers
        dtype: Target element type, or None to infer it from the values
        name: Parameter name for error messages

    Returns:
        1-D numpy array (a fresh copy) with the resolved element type

    Raises:
        DimensionError: If values is not one-dimensional
        ValidationError: If values are non-numeric, boolean, or cannot be
            represented exactly in the target element type
        ElementTypeError: If dtype is not a supported element type
    """
    try:
        array = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected a flat sequence of values, got {array.ndim}D "
            f"with shape {array.shape}"
        )
    _check_numeric(array, name)
    target = infer_dtype(array) if dtype is None else resolve_dtype(dtype)
    return _cast(array, target, name)


def check_2d(
    array: ArrayLike,
    dtype: DTypeLike | None,
    name: str,
) -> NDArray[Any]:
    """
    Validate a 2-D array-like (nested rows) of element values.

    Returns:
        2-D numpy array (a fresh copy) with the resolved element type

    Raises:
        DimensionError: If the input is not 2-dimensional or rows are ragged
        ValidationError: As for check_values
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise DimensionError(f"{name}: cannot convert to a 2D array: {e}") from e

    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}"
        )
    _check_numeric(result, name)
    target = infer_dtype(result) if dtype is None else resolve_dtype(dtype)
    return _cast(result, target, name)


def check_scalar(value: object, dtype: np.dtype, name: str) -> np.generic:
    """
    Validate a scalar operand against an element type.

    Args:
        value: Scalar to check (int, float or numpy number)
        dtype: Element type the scalar must be representable in
        name: Parameter name for error messages

    Returns:
        The scalar as a numpy scalar of the given dtype

    Raises:
        ValidationError: If value is not a real number, is boolean, or
            cannot be represented exactly in dtype
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    array = np.asarray([value])
    _check_numeric(array, name)
    return _cast(array, dtype, name)[0]


def check_exponent(exponent: object) -> int:
    """
    Verify a power exponent is a non-negative integer.

    Negative exponents would need an inverse, which is not supported.

    Raises:
        ValidationError: If exponent is not an integer or is negative
    """
    if not _is_integer(exponent):
        raise ValidationError(
            f"exponent: expected a non-negative integer, got {type(exponent).__name__} {exponent!r}"
        )
    if exponent < 0:
        raise ValidationError(
            f"exponent: expected a non-negative integer, got {exponent} "
            f"(matrix inverse is not supported)"
        )
    return int(exponent)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: operands must have identical shapes, "
            f"got {_format_shape(left)} and {_format_shape(right)}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left column count equals the right row count.

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: inner dimensions differ, cannot multiply "
            f"{_format_shape(left)} by {_format_shape(right)}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        ShapeMismatchError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise ShapeMismatchError(
            f"{operation}: expected a square matrix, got {_format_shape(shape)}",
            operation=operation,
            left_shape=shape,
        )


def check_same_dtype(left: np.dtype, right: np.dtype, operation: str) -> None:
    """
    Verify two operands share an element type.

    Raises:
        ElementTypeError: If the element types differ
    """
    if left != right:
        raise ElementTypeError(
            f"{operation}: operands must have the same element type, "
            f"got {left} and {right}"
        )
