"""
Matrix: a dense, fixed-shape, row-major matrix value type.

A Matrix owns a one-dimensional numpy array of exactly rows * cols
elements of a single element type (signed integer or floating point).
The shape is fixed at construction; an operation producing a different
shape returns a new Matrix.

Ownership:
    Each instance exclusively owns its storage. copy() duplicates the
    storage; take() transfers it to a new instance in O(1) and leaves the
    source moved-from. A moved-from matrix keeps its shape and element
    type but rejects every element operation with MovedFromError until it
    is reassigned with assign() or move_assign().

Access paths:
    at(i, j) / m[i, j]      bounds-checked read
    set(i, j, v) / m[i, j] = v
                            bounds-checked write
    row_unchecked(i)        writable view of row i, no bounds check on i

Construction:
    Matrix(rows, cols)                      zero-filled
    Matrix(rows, cols, values)              row-major element list
    Matrix.full(rows, cols, value)
    Matrix.from_function(rows, cols, func)  func(i, j) -> value
    Matrix.from_array(nested_rows)
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from zmatrix.core.dtypes import (
    DEFAULT_DTYPE,
    exact,
    infer_dtype,
    resolve_dtype,
    warn_on_overflow,
)
from zmatrix.core.exceptions import MovedFromError, ValidationError
from zmatrix.core.tolerances import ToleranceTier, select_tolerance
from zmatrix.core.validation import (
    check_2d,
    check_dimension,
    check_element_count,
    check_index,
    check_inner_dimensions,
    check_same_dtype,
    check_same_shape,
    check_scalar,
    check_values,
)
from zmatrix.render import format_matrix


class Matrix:
    """
    Dense rows x cols matrix with exclusively owned, row-major storage.

    Parameters
    ----------
    rows, cols : int
        Non-negative dimensions, fixed for the lifetime of the instance.
    values : sequence of numbers, optional
        Exactly rows * cols values in row-major order; element (i, j) is
        values[i * cols + j]. If omitted, every element is 0.
    dtype : dtype-like, optional
        Element type. Defaults to int64 for zero-filled matrices and is
        inferred from values otherwise (int64 or float64).

    Raises
    ------
    DimensionError
        If a dimension is invalid or values has the wrong length.
    ValidationError
        If values are non-numeric or not representable in dtype.
    """

    __slots__ = ('_rows', '_cols', '_dtype', '_data')

    # Make numpy defer to our reflected operators (np.int64(2) * m)
    __array_ufunc__ = None

    # Mutable value type
    __hash__ = None
    __iter__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        values: ArrayLike | None = None,
        *,
        dtype: DTypeLike | None = None,
    ):
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')

        if values is None:
            element_type = DEFAULT_DTYPE if dtype is None else resolve_dtype(dtype)
            data = np.zeros(rows * cols, dtype=element_type)
        else:
            data = check_values(values, dtype, 'values')
            check_element_count(data.size, rows * cols, 'values')

        self._rows = rows
        self._cols = cols
        self._dtype = data.dtype
        self._data: NDArray[Any] | None = data

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: NDArray[Any]) -> Matrix:
        """Adopt an already validated flat array without copying it."""
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._cols = cols
        matrix._dtype = data.dtype
        matrix._data = data
        return matrix

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: DTypeLike | None = None) -> Matrix:
        """Matrix with every element set to 0."""
        return cls(rows, cols, dtype=dtype)

    @classmethod
    def full(
        cls,
        rows: int,
        cols: int,
        value: numbers.Real,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Matrix with every element set to value.

        Without dtype, the element type is inferred from value
        (int64 for integers, float64 for floats).
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if dtype is None:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
                raise ValidationError(
                    f"value: expected a real number, got {type(value).__name__} {value!r}"
                )
            element_type = infer_dtype(np.asarray([value]))
        else:
            element_type = resolve_dtype(dtype)
        fill = check_scalar(value, element_type, 'value')
        return cls._wrap(rows, cols, np.full(rows * cols, fill, dtype=element_type))

    @classmethod
    def from_list(
        cls,
        rows: int,
        cols: int,
        values: ArrayLike,
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """Matrix from exactly rows * cols values in row-major order."""
        return cls(rows, cols, values, dtype=dtype)

    @classmethod
    def from_function(
        cls,
        rows: int,
        cols: int,
        func: Callable[[int, int], numbers.Real],
        dtype: DTypeLike | None = None,
    ) -> Matrix:
        """
        Matrix whose element (i, j) is func(i, j).

        func is called exactly once per element, in row-major order.
        """
        rows = check_dimension(rows, 'rows')
        cols = check_dimension(cols, 'cols')
        if not callable(func):
            raise ValidationError(
                f"func: expected a callable (row, col) -> value, got {type(func).__name__}"
            )
        values = [func(i, j) for i in range(rows) for j in range(cols)]
        return cls(rows, cols, values, dtype=dtype)

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Matrix:
        """
        Matrix from a 2-D array-like (numpy array or nested row lists).

        The shape is taken from the input; the data is copied.
        """
        data = check_2d(array, dtype, 'array')
        rows, cols = data.shape
        return cls._wrap(rows, cols, data.reshape(-1))

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def _storage(self) -> NDArray[Any]:
        if self._data is None:
            raise MovedFromError(
                f"{self._rows}x{self._cols} matrix was moved from; "
                f"reassign it before use"
            )
        return self._data

    @property
    def is_moved(self) -> bool:
        """True if the storage was transferred away."""
        return self._data is None

    def copy(self) -> Matrix:
        """Independent deep copy; the copy is always writeable."""
        return self._wrap(self._rows, self._cols, self._storage().copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def take(self) -> Matrix:
        """
        Transfer the storage into a new matrix without copying elements.

        After the call this matrix is moved-from: its shape is still
        reported, but element operations raise MovedFromError until it is
        reassigned.
        """
        data = self._storage()
        self._data = None
        return self._wrap(self._rows, self._cols, data)

    @classmethod
    def moved_from(cls, source: Matrix) -> Matrix:
        """New matrix taking over source's storage (see take())."""
        return source.take()

    def _check_assignable(self, source: object, operation: str) -> Matrix:
        if not isinstance(source, Matrix):
            raise ValidationError(
                f"{operation}: expected a Matrix, got {type(source).__name__}"
            )
        check_same_shape(self.shape, source.shape, operation)
        check_same_dtype(self._dtype, source.dtype, operation)
        if self._data is not None and not self._data.flags.writeable:
            raise ValidationError(f"{operation}: matrix is read-only")
        return source

    def assign(self, source: Matrix) -> Matrix:
        """
        Copy assignment: replace this matrix's contents with a copy of source.

        Shapes and element types must match. The previous storage is
        dropped. Also restores a moved-from matrix to a valid state.
        """
        source = self._check_assignable(source, 'assign')
        data = source._storage().copy()
        self._data = data
        return self

    def move_assign(self, source: Matrix) -> Matrix:
        """
        Move assignment: take over source's storage, leaving source moved-from.

        Shapes and element types must match. Moving a matrix into itself
        is a no-op.
        """
        if source is self:
            return self
        source = self._check_assignable(source, 'move_assign')
        self._data = source.take()._data
        return self

    # ------------------------------------------------------------------
    # Shape and element type
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def readonly(self) -> bool:
        """True if element writes are refused."""
        return not self._storage().flags.writeable

    def size(self) -> int:
        """Total number of elements, rows * cols."""
        return self._rows * self._cols

    def dim(self) -> tuple[int, int]:
        """Dimensions as (rows, cols)."""
        return (self._rows, self._cols)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def at(self, i: int, j: int) -> numbers.Real:
        """
        Element at row i, column j as a Python scalar.

        Raises IndexOutOfBoundsError for indices outside the matrix;
        negative indices do not wrap.
        """
        data = self._storage()
        i = check_index(i, self._rows, 'row')
        j = check_index(j, self._cols, 'column')
        return data[i * self._cols + j].item()

    def set(self, i: int, j: int, value: numbers.Real) -> None:
        """Bounds-checked in-place update of element (i, j)."""
        data = self._storage()
        if not data.flags.writeable:
            raise ValidationError("set: matrix is read-only")
        i = check_index(i, self._rows, 'row')
        j = check_index(j, self._cols, 'column')
        data[i * self._cols + j] = check_scalar(value, self._dtype, 'value')

    @staticmethod
    def _split_key(key: object) -> tuple[object, object]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"index: expected m[row, col], got {key!r}; "
                f"use row_unchecked(i) for a raw row view"
            )
        return key

    def __getitem__(self, key: tuple[int, int]) -> numbers.Real:
        return self.at(*self._split_key(key))

    def __setitem__(self, key: tuple[int, int], value: numbers.Real) -> None:
        self.set(*self._split_key(key), value)

    def row_unchecked(self, i: int) -> NDArray[Any]:
        """
        Raw view of row i.

        Writing through the returned view updates this matrix
        (m.row_unchecked(1)[2] = 7). The row index is NOT validated: an
        out-of-range i yields a short or empty view, or a different row
        for negative i. Prefer at() / set() unless the check is provably
        redundant.
        """
        data = self._storage()
        start = i * self._cols
        return data[start:start + self._cols]

    def as_readonly(self) -> Matrix:
        """Copy of this matrix whose elements cannot be written."""
        data = self._storage().copy()
        data.flags.writeable = False
        return self._wrap(self._rows, self._cols, data)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _elementwise(
        self,
        other: Matrix,
        op: Callable[[NDArray[Any], NDArray[Any]], NDArray[Any]],
        operation: str,
        stacklevel: int,
    ) -> Matrix:
        left = self._storage()
        right = other._storage()
        check_same_shape(self.shape, other.shape, operation)
        check_same_dtype(self._dtype, other.dtype, operation)

        result = op(left, right)
        if self._dtype.kind == 'i':
            warn_on_overflow(
                op(exact(left), exact(right)),
                self._dtype,
                operation,
                stacklevel=stacklevel + 1,
            )
        return self._wrap(self._rows, self._cols, result)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, np.add, 'add', stacklevel=2)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, np.subtract, 'subtract', stacklevel=2)

    def __neg__(self) -> Matrix:
        data = self._storage()
        result = np.negative(data)
        if self._dtype.kind == 'i':
            # -min wraps back onto min
            warn_on_overflow(np.negative(exact(data)), self._dtype, 'negate', stacklevel=2)
        return self._wrap(self._rows, self._cols, result)

    def _scale(self, scalar: numbers.Real, stacklevel: int) -> Matrix:
        data = self._storage()
        factor = check_scalar(scalar, self._dtype, 'scalar')
        result = data * factor
        if self._dtype.kind == 'i':
            warn_on_overflow(
                exact(data) * int(factor),
                self._dtype,
                'scale',
                stacklevel=stacklevel + 1,
            )
        return self._wrap(self._rows, self._cols, result)

    def scale(self, scalar: numbers.Real) -> Matrix:
        """Every element multiplied by scalar (validated against dtype)."""
        return self._scale(scalar, stacklevel=2)

    def _matmul(self, other: Matrix, stacklevel: int) -> Matrix:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"matmul: expected a Matrix operand, got {type(other).__name__}"
            )
        left = self._storage()
        right = other._storage()
        check_inner_dimensions(self.shape, other.shape, 'matmul')
        check_same_dtype(self._dtype, other.dtype, 'matmul')

        m, n = self.shape
        p = other.cols
        a = left.reshape(m, n)
        b = right.reshape(n, p)
        product = np.matmul(a, b)
        # An empty inner dimension gives zeros, which always fit
        if self._dtype.kind == 'i' and n > 0:
            warn_on_overflow(
                np.matmul(exact(a), exact(b)),
                self._dtype,
                'matmul',
                stacklevel=stacklevel + 1,
            )
        return self._wrap(m, p, np.ascontiguousarray(product, dtype=self._dtype).reshape(-1))

    def matmul(self, other: Matrix) -> Matrix:
        """
        Matrix product self * other.

        self is m x n, other must be n x p; the result is m x p with
        element (i, j) = sum over k of self(i, k) * other(k, j). An empty
        inner dimension yields the zero matrix.
        """
        return self._matmul(other, stacklevel=2)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return self._matmul(other, stacklevel=2)
        if isinstance(other, (numbers.Number, np.generic)):
            return self._scale(other, stacklevel=2)
        return NotImplemented

    def __rmul__(self, other: object) -> Matrix:
        if isinstance(other, (numbers.Number, np.generic)):
            return self._scale(other, stacklevel=2)
        return NotImplemented

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other, stacklevel=2)

    def __pow__(self, exponent: int, modulo: None = None) -> Matrix:
        if modulo is not None:
            return NotImplemented
        from zmatrix.ops import _power
        return _power(self, exponent, stacklevel=2)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """
        Element-wise equality of two matrices of identical shape.

        Raises ShapeMismatchError for different shapes instead of
        returning False.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        left = self._storage()
        right = other._storage()
        check_same_shape(self.shape, other.shape, 'equality')
        check_same_dtype(self._dtype, other.dtype, 'equality')
        return bool(np.array_equal(left, right))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        Approximate equality under a tolerance tier.

        The tier defaults to the element type's tier (EXACT for integers,
        FP64 or FP32 for floats). Shape rules are the same as for ==.
        """
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"allclose: expected a Matrix, got {type(other).__name__}"
            )
        left = self._storage()
        right = other._storage()
        check_same_shape(self.shape, other.shape, 'allclose')
        if tier is None:
            tier = select_tolerance(self._dtype)
        return bool(np.allclose(left, right, rtol=tier.rtol, atol=tier.atol))

    # ------------------------------------------------------------------
    # Conversion and rendering
    # ------------------------------------------------------------------

    def tolist(self) -> list[list[numbers.Real]]:
        """Nested row lists of Python scalars."""
        return self._storage().reshape(self._rows, self._cols).tolist()

    def to_numpy(self) -> NDArray[Any]:
        """2-D numpy copy of the elements."""
        return self._storage().reshape(self._rows, self._cols).copy()

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        header = f"rows={self._rows}, cols={self._cols}, dtype={self._dtype}"
        if self._data is None:
            return f"Matrix({header}, <moved>)"
        return f"Matrix({header}, values={self.tolist()})"
