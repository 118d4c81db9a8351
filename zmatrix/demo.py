#!/usr/bin/env python3
"""
zmatrix demonstration
=====================

Builds a 3x3 matrix, a column vector and a row vector and prints an
element lookup, the matrices, a negation, a scalar product and the
matrix products between them.

Usage:
    zmatrix-demo
    python -m zmatrix.demo --power 5
    python -m zmatrix.demo --float
"""

from __future__ import annotations

import argparse
import sys

from zmatrix.aliases import column_vector, row_vector, square_matrix
from zmatrix.core.dtypes import DEFAULT_FLOAT_DTYPE, DEFAULT_INT_DTYPE
from zmatrix.core.exceptions import ZMatrixError


def show(label: str, value: object) -> None:
    print(f"{label}=\n{value}")


def run(power: int | None = None, use_float: bool = False) -> None:
    dtype = DEFAULT_FLOAT_DTYPE if use_float else DEFAULT_INT_DTYPE

    mat = square_matrix(3, [
        1, 2, 3,
        4, 5, 6,
        7, 8, 9,
    ], dtype=dtype).as_readonly()
    vec = column_vector([1, 2, 3], dtype=dtype)
    rvec = row_vector([1, 2, 3], dtype=dtype)

    print(f"mat[1][2]={mat.at(1, 2)}")

    show("mat", mat)
    show("vec", vec)
    show("rvec", rvec)

    show("-mat", -mat)
    show("2*mat", 2 * mat)

    show("mat*mat", mat * mat)
    show("mat*vec", mat * vec)
    show("vec*rvec", vec * rvec)
    show("rvec*vec", rvec * vec)

    if power is not None:
        show(f"mat**{power}", mat ** power)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description='Print basic zmatrix operations on a small example'
    )
    parser.add_argument(
        '--power', '-p',
        type=int,
        default=None,
        metavar='K',
        help='Also print mat raised to the non-negative power K'
    )
    parser.add_argument(
        '--float',
        dest='use_float',
        action='store_true',
        help='Use float64 elements instead of int64'
    )
    args = parser.parse_args(argv)

    try:
        run(power=args.power, use_float=args.use_float)
    except ZMatrixError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
