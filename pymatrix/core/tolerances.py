"""
Tolerance tiers for approximate matrix comparison.

Exact element types (int, Fraction, Decimal) compare exactly. Floating
types carry rounding from elimination and products, so approximate
comparison uses a tier matched to their precision:
- EXACT: no tolerance
- FP64: Python float, numpy float64, complex
- FP32: numpy float32 / float16 / complex64

Used by Matrix.allclose() and the test suite.
"""

import numbers
from dataclasses import dataclass
from typing import Any

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
    description='Integer and rational arithmetic, no rounding',
)

FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='fp64',
    description='Double precision, elimination and product rounding',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp32',
    description='Single or half precision numpy scalars',
)


def select_tolerance(value: Any) -> ToleranceTier:
    """Select the tolerance tier for an element value."""
    if isinstance(value, (np.floating, np.complexfloating)):
        if np.finfo(value.dtype).bits <= 32:
            return FP32
        return FP64
    if isinstance(value, (float, complex)):
        return FP64
    if isinstance(value, numbers.Number):
        return EXACT
    return FP64
