"""
Textual rendering of matrices.

The layout is the library's only external format: elements of a row are
separated by a single space, rows by a newline, with no trailing
separator after the last element of a row or after the last row.

    >>> print(format_matrix(Matrix(2, 2, [1, 2, 3, 4])))
    1 2
    3 4
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zmatrix.matrix import Matrix


COLUMN_SEPARATOR = ' '
ROW_SEPARATOR = '\n'


def format_row(row: list) -> str:
    """Render one row of Python scalars."""
    return COLUMN_SEPARATOR.join(str(value) for value in row)


def format_matrix(matrix: Matrix) -> str:
    """
    Render a matrix in row-major order.

    Args:
        matrix: Matrix to render (must not be moved-from)

    Returns:
        The rendered text; empty for a matrix with no rows

    Raises:
        MovedFromError: If the matrix no longer holds storage
    """
    return ROW_SEPARATOR.join(format_row(row) for row in matrix.tolist())
