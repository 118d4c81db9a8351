"""
Tests for the zmatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via ZMatrixError)
    - Builtin compatibility (IndexError, TypeError, RuntimeWarning)
    - Diagnostic attributes on ShapeMismatchError, IndexOutOfBoundsError,
      ElementTypeError
    - Default attribute values (None for optional attributes)
"""

import pytest

from zmatrix.core.exceptions import (
    DimensionError,
    ElementTypeError,
    IndexOutOfBoundsError,
    IntegerOverflowWarning,
    MovedFromError,
    ShapeMismatchError,
    ValidationError,
    ZMatrixError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via ZMatrixError."""

    def test_validation_error_is_zmatrix_error(self):
        with pytest.raises(ZMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong count")

    def test_shape_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise ShapeMismatchError("2x3 vs 3x3")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfBoundsError("row index 5 out of range")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfBoundsError("row index 5 out of range")

    def test_element_type_error_is_type_error(self):
        with pytest.raises(TypeError):
            raise ElementTypeError("complex128 unsupported")

    def test_moved_from_is_zmatrix_error(self):
        with pytest.raises(ZMatrixError):
            raise MovedFromError("moved")

    def test_moved_from_is_not_validation_error(self):
        """Use after move is misuse of state, not bad input."""
        assert not isinstance(MovedFromError("moved"), ValidationError)

    def test_overflow_warning_is_runtime_warning(self):
        assert issubclass(IntegerOverflowWarning, RuntimeWarning)
        assert not issubclass(IntegerOverflowWarning, ZMatrixError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:

    def test_all_attributes(self):
        err = ShapeMismatchError(
            "cannot multiply",
            operation='matmul',
            left_shape=(2, 3),
            right_shape=(2, 3),
        )
        assert str(err) == "cannot multiply"
        assert err.operation == 'matmul'
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 3)

    def test_defaults_are_none(self):
        err = ShapeMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestIndexOutOfBoundsError:

    def test_all_attributes(self):
        err = IndexOutOfBoundsError("out of range", index=-1, bound=3, axis='column')
        assert err.index == -1
        assert err.bound == 3
        assert err.axis == 'column'

    def test_defaults_are_none(self):
        err = IndexOutOfBoundsError("out of range")
        assert err.index is None
        assert err.bound is None
        assert err.axis is None


class TestElementTypeError:

    def test_dtype_attribute(self):
        err = ElementTypeError("unsupported", dtype='complex128')
        assert err.dtype == 'complex128'

    def test_default_is_none(self):
        assert ElementTypeError("unsupported").dtype is None
