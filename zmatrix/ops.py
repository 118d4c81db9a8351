"""
Free functions over Matrix: products, identity and power.

    >>> fib = Matrix(2, 2, [1, 1, 1, 0])
    >>> power(fib, 10).at(0, 1)
    55
"""

from __future__ import annotations

import numbers

from numpy.typing import DTypeLike

from zmatrix.core.dtypes import DEFAULT_DTYPE
from zmatrix.core.validation import check_dimension, check_exponent, check_square
from zmatrix.matrix import Matrix


def matmul(left: Matrix, right: Matrix) -> Matrix:
    """Matrix product left * right (left m x n, right n x p -> m x p)."""
    return left._matmul(right, stacklevel=2)


def scalar_multiply(scalar: numbers.Real, matrix: Matrix) -> Matrix:
    """Every element of matrix multiplied by scalar; same as scalar * matrix."""
    return matrix._scale(scalar, stacklevel=2)


def identity(n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> Matrix:
    """
    The n x n identity matrix: 1 on the diagonal, 0 elsewhere.

    Args:
        n: Size of the matrix
        dtype: Element type (default int64)
    """
    n = check_dimension(n, 'n')
    return Matrix.from_function(n, n, lambda i, j: 1 if i == j else 0, dtype=dtype)


def _power(base: Matrix, exponent: int, stacklevel: int) -> Matrix:
    check_square(base.shape, 'power')
    exponent = check_exponent(exponent)

    current = base.copy()
    result = identity(base.rows, dtype=base.dtype)
    while exponent > 0:
        if exponent & 1:
            result = result._matmul(current, stacklevel=stacklevel + 1)
        exponent >>= 1
        if exponent:
            current = current._matmul(current, stacklevel=stacklevel + 1)
    return result


def power(base: Matrix, exponent: int) -> Matrix:
    """
    Raise a square matrix to a non-negative integer power.

    Uses repeated squaring: O(log exponent) matrix products instead of
    O(exponent). The result equals exponent-fold repeated multiplication;
    exponent 0 gives the identity whatever the base contains.

    Args:
        base: Square matrix
        exponent: Non-negative integer

    Returns:
        New matrix base ** exponent with base's shape and element type

    Raises:
        ShapeMismatchError: If base is not square
        ValidationError: If exponent is negative or not an integer
        MovedFromError: If base was moved from
    """
    return _power(base, exponent, stacklevel=2)
