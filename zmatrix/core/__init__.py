"""
Core infrastructure for zmatrix.

This module provides the shared pieces the Matrix type is built on.

Key components:
    exceptions: Exception and warning hierarchy
    validation: Input validators
    dtypes: Element-type configuration and overflow diagnostics
    tolerances: Tolerance tiers for approximate comparison
"""

from zmatrix.core.exceptions import (
    ZMatrixError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
    ElementTypeError,
    MovedFromError,
    IntegerOverflowWarning,
)
from zmatrix.core.dtypes import (
    DEFAULT_DTYPE,
    DEFAULT_INT_DTYPE,
    DEFAULT_FLOAT_DTYPE,
    resolve_dtype,
)
from zmatrix.core.tolerances import ToleranceTier, EXACT, FP64, FP32

__all__ = [
    # Exceptions
    "ZMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
    "ElementTypeError",
    "MovedFromError",
    "IntegerOverflowWarning",
    # Element types
    "DEFAULT_DTYPE",
    "DEFAULT_INT_DTYPE",
    "DEFAULT_FLOAT_DTYPE",
    "resolve_dtype",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
]
