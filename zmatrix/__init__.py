"""
zmatrix: fixed-shape dense matrices over integer or floating point elements.

A single value type, Matrix, with bounds-checked element access,
element-wise arithmetic, matrix products and exponentiation by repeated
squaring. Integer matrices are not closed under inversion, so no inverse
is provided.

Submodules:
    matrix: The Matrix type
    ops: matmul, scalar_multiply, identity, power
    aliases: Vector / square / integer constructors
    render: Textual rendering
    core: Exceptions, validation, element types, tolerances

Example:
    >>> from zmatrix import Matrix, power
    >>> mat = Matrix(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
    >>> mat.at(1, 2)
    6
    >>> print(-mat)
    -1 -2 -3
    -4 -5 -6
    -7 -8 -9
"""

__version__ = "0.1.0"

from zmatrix.matrix import Matrix
from zmatrix.ops import identity, matmul, power, scalar_multiply
from zmatrix.aliases import (
    column_vector,
    row_vector,
    square_matrix,
    int_matrix,
    int_column_vector,
    int_row_vector,
    int_square_matrix,
)
from zmatrix.render import format_matrix
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

__all__ = [
    "__version__",
    # Type
    "Matrix",
    # Functions
    "identity",
    "matmul",
    "power",
    "scalar_multiply",
    "format_matrix",
    # Aliases
    "column_vector",
    "row_vector",
    "square_matrix",
    "int_matrix",
    "int_column_vector",
    "int_row_vector",
    "int_square_matrix",
    # Exceptions
    "ZMatrixError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
    "ElementTypeError",
    "MovedFromError",
    "IntegerOverflowWarning",
]
