"""
Element-type configuration.

A matrix stores its elements in a numpy array of a single dtype. Only
signed integer and floating point dtypes are supported: both are closed
under +, -, unary negation and *, and both have 0 as additive identity.

Integer arithmetic in numpy wraps silently on overflow, so integer
results are recomputed exactly on Python ints and out-of-range values
are reported through warnings (IntegerOverflowWarning) rather than raised.
"""

import warnings
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from zmatrix.core.exceptions import ElementTypeError, IntegerOverflowWarning


DEFAULT_INT_DTYPE = np.dtype(np.int64)
DEFAULT_FLOAT_DTYPE = np.dtype(np.float64)

# Used by zero/fill construction and identity() when no dtype is given
DEFAULT_DTYPE = DEFAULT_INT_DTYPE

# numpy dtype kinds: 'i' signed integer, 'f' floating point
SUPPORTED_KINDS = ('i', 'f')


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Convert a dtype-like to a supported numpy dtype.

    Args:
        dtype: Anything accepted by numpy.dtype (np.int32, 'float64', int, ...)

    Returns:
        numpy.dtype of kind 'i' or 'f'

    Raises:
        ElementTypeError: If dtype is None, not understood by numpy, or not
            a signed integer / floating point type
    """
    if dtype is None:
        raise ElementTypeError("dtype: expected an element type, got None")

    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ElementTypeError(
            f"dtype: cannot interpret {dtype!r} as an element type: {e}",
            dtype=dtype,
        ) from e

    if resolved.kind not in SUPPORTED_KINDS:
        raise ElementTypeError(
            f"dtype: unsupported element type {resolved}, "
            f"expected a signed integer or floating point type",
            dtype=resolved,
        )
    return resolved


def infer_dtype(array: NDArray[Any]) -> np.dtype:
    """
    Choose the element type for numeric input given without a dtype.

    Integral input (signed or unsigned) maps to DEFAULT_INT_DTYPE, floating
    input to DEFAULT_FLOAT_DTYPE. An empty input defaults to DEFAULT_DTYPE.
    """
    if array.size == 0:
        return DEFAULT_DTYPE
    if array.dtype.kind in ('i', 'u'):
        return DEFAULT_INT_DTYPE
    if array.dtype.kind == 'f':
        return DEFAULT_FLOAT_DTYPE
    raise ElementTypeError(
        f"cannot infer an element type from dtype {array.dtype}",
        dtype=array.dtype,
    )


def exact(array: NDArray[Any]) -> NDArray[np.object_]:
    """
    Copy of an integer array holding Python ints.

    Arithmetic on the copy is arbitrary precision, so it yields the true
    result of an operation for comparison with the wrapped numpy one.
    """
    return array.astype(object)


def warn_on_overflow(
    reference: NDArray[np.object_],
    dtype: np.dtype,
    operation: str,
    stacklevel: int = 1,
) -> None:
    """
    Warn if an exact integer result falls outside dtype's range.

    Args:
        reference: The operation's result computed on exact() copies
        dtype: Element type of the actual (integer) result
        operation: Operation name for the warning message
        stacklevel: As for warnings.warn, counted from the caller of this
            function (1 blames the caller itself)
    """
    if dtype.kind != 'i' or reference.size == 0:
        return

    info = np.iinfo(dtype)
    low, high = int(min(reference.flat)), int(max(reference.flat))
    if low < info.min or high > info.max:
        warnings.warn(
            f"{operation}: result exceeds the range of {dtype} "
            f"[{info.min}, {info.max}]; integer values wrapped around",
            IntegerOverflowWarning,
            stacklevel=stacklevel + 1,
        )
