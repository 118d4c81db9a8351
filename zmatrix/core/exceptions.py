"""
Exception hierarchy for zmatrix.

All exceptions inherit from ZMatrixError to allow catching any
library-specific error. Misuse of a matrix (non-conformant shapes,
out-of-range indices, use after move) is a programmer error and is
raised immediately at the call site.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class ZMatrixError(Exception):
    """Base exception for all zmatrix errors."""
    pass


class ValidationError(ZMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (values, scalars, indices,
    exponents) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect.

    Raised when a dimension is not a non-negative integer, when an
    element list does not hold exactly rows * cols values, or when
    array-like input has the wrong number of dimensions.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operands are not shape-conformant for an operation.

    Addition, subtraction and equality require identical shapes; matrix
    multiplication requires the left column count to equal the right row
    count; power requires a square base.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left (or only) operand
        right_shape: Shape of the right operand, if any
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element index outside the matrix.

    Indices are never clamped or wrapped; negative indices are out of
    bounds.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound for the axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class ElementTypeError(ValidationError, TypeError):
    """
    Element type is unsupported or operands have different element types.

    Attributes:
        dtype: The offending element type, if a single one is at fault
    """

    def __init__(self, message: str, dtype: object | None = None):
        super().__init__(message)
        self.dtype = dtype


class MovedFromError(ZMatrixError):
    """
    Matrix used after its storage was transferred away.

    A moved-from matrix keeps its shape but holds no storage. It may be
    dropped or reassigned (assign / move_assign); any other element
    operation raises this error.
    """
    pass


class IntegerOverflowWarning(RuntimeWarning):
    """Integer arithmetic produced a value outside the element type's range."""
    pass
