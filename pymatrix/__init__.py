"""
PyMatrix: dense row-major matrices over any numeric element type.

Elements may be int, float, complex, Fraction, Decimal or numpy scalars.
Determinants are computed by Gaussian elimination with row/column pivoting,
exactly for integer matrices.

Submodules:
    core: exceptions, validation, Scalar protocol, Result envelope
    dense: Matrix and its operators
"""

__version__ = "0.1.0"

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
from pymatrix.dense import (
    Matrix,
    add,
    subtract,
    multiply,
    negate,
    transpose,
    eliminate,
    determinant,
)

__all__ = [
    "__version__",
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "negate",
    "transpose",
    "eliminate",
    "determinant",
    "MatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionError",
    "SizeMismatchError",
    "DimensionMismatchError",
    "NotSquareError",
]
