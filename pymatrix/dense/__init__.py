"""
Dense matrix module.

Public API:
    Matrix                      - row-major R x C matrix of Scalar elements
    add, subtract, multiply     - binary operators (also +, -, @)
    negate, transpose           - unary transformations
    eliminate(matrix)           - Gaussian elimination, Result[EliminationParams]
    determinant(matrix)         - determinant via eliminate()
"""

from pymatrix.dense.matrix import Matrix
from pymatrix.dense.ops import add, subtract, multiply, negate, transpose
from pymatrix.dense.elimination import EliminationParams, eliminate, determinant

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "negate",
    "transpose",
    "EliminationParams",
    "eliminate",
    "determinant",
]
