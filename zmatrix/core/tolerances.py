"""
Tolerance tiers for approximate matrix comparison.

Exact equality (==) is the contract for integer matrices. Floating point
matrices built through different but mathematically equal paths (power
by squaring vs. repeated multiplication, reassociated sums) agree only
up to rounding, so Matrix.allclose takes one of these tiers:

- EXACT: bitwise-equal values
- FP64: double precision rounding
- FP32: single precision rounding

Used by Matrix.allclose and the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance; same as element-wise ==',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, a few ulps of accumulated rounding',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)


def select_tolerance(dtype: np.dtype) -> ToleranceTier:
    """Select the default tolerance tier for an element type."""
    if dtype.kind == 'i':
        return EXACT
    if dtype.itemsize <= 4:
        return FP32
    return FP64
