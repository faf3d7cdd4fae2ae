"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the dense
matrix implementation.

Key components:
    protocols: Scalar element capability
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
    timing: Section timer
"""

from pymatrix.core.protocols import Scalar
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionError,
    SizeMismatchError,
    DimensionMismatchError,
    NotSquareError,
)

__all__ = [
    # Protocols
    "Scalar",
    # Result
    "Result",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionError",
    "SizeMismatchError",
    "DimensionMismatchError",
    "NotSquareError",
]
