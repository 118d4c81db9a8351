"""
Convenience constructors for common matrix shapes.

    column_vector([1, 2, 3])      3 x 1
    row_vector([1, 2, 3])         1 x 3
    square_matrix(3, values)      3 x 3

The int_* variants fix the element type to DEFAULT_INT_DTYPE.
"""

from __future__ import annotations

from numpy.typing import ArrayLike, DTypeLike

from zmatrix.core.dtypes import DEFAULT_INT_DTYPE
from zmatrix.core.validation import check_values
from zmatrix.matrix import Matrix


def column_vector(values: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
    """n x 1 matrix holding values top to bottom."""
    data = check_values(values, dtype, 'values')
    return Matrix(data.size, 1, data, dtype=data.dtype)


def row_vector(values: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
    """1 x n matrix holding values left to right."""
    data = check_values(values, dtype, 'values')
    return Matrix(1, data.size, data, dtype=data.dtype)


def square_matrix(
    n: int,
    values: ArrayLike | None = None,
    dtype: DTypeLike | None = None,
) -> Matrix:
    """n x n matrix from n * n row-major values, zero-filled if values is None."""
    return Matrix(n, n, values, dtype=dtype)


def int_matrix(rows: int, cols: int, values: ArrayLike | None = None) -> Matrix:
    return Matrix(rows, cols, values, dtype=DEFAULT_INT_DTYPE)


def int_column_vector(values: ArrayLike) -> Matrix:
    return column_vector(values, dtype=DEFAULT_INT_DTYPE)


def int_row_vector(values: ArrayLike) -> Matrix:
    return row_vector(values, dtype=DEFAULT_INT_DTYPE)


def int_square_matrix(n: int, values: ArrayLike | None = None) -> Matrix:
    return square_matrix(n, values, dtype=DEFAULT_INT_DTYPE)
