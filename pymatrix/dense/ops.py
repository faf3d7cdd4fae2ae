"""
Binary and unary matrix operators.

Every function returns a newly allocated Matrix; operands are read but
never modified and never share storage with the result. Matrix exposes
these as +, -, @ and unary -.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    SizeMismatchError,
    ValidationError,
)
from pymatrix.core.protocols import zero_like

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


def _check_matrix(value: Any, name: str) -> None:
    from pymatrix.dense.matrix import Matrix

    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected a Matrix, got {type(value).__name__}"
        )


def _elementwise(
    left: Matrix,
    right: Matrix,
    op: Callable[[Any, Any], Any],
    name: str,
) -> Matrix:
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    # Same cell count is not enough: a 2x3 and a 3x2 are rejected.
    if left.shape != right.shape:
        raise SizeMismatchError(
            f"{name}: operand shapes differ, {left.shape} vs {right.shape}",
            expected=left.shape, actual=right.shape,
        )
    data = [
        op(a, b)
        for a_row, b_row in zip(left, right)
        for a, b in zip(a_row, b_row)
    ]
    return left._build(left.rows, left.columns, data)


def add(left: Matrix, right: Matrix) -> Matrix:
    """
    Elementwise sum.

    Raises
    ------
    SizeMismatchError
        If the operands do not have identical (rows, columns).
    """
    return _elementwise(left, right, lambda a, b: a + b, 'add')


def subtract(left: Matrix, right: Matrix) -> Matrix:
    """
    Elementwise difference left - right.

    Raises
    ------
    SizeMismatchError
        If the operands do not have identical (rows, columns).
    """
    return _elementwise(left, right, lambda a, b: a - b, 'subtract')


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """
    Matrix product.

    The result is left.rows x right.columns, with cell (i, k) the sum over
    j of left[i, j] * right[j, k], accumulated from the additive identity.

    Raises
    ------
    DimensionMismatchError
        If left.columns != right.rows.
    """
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    if left.columns != right.rows:
        raise DimensionMismatchError(
            f"multiply: left has {left.columns} columns but right has "
            f"{right.rows} rows ({left.shape} @ {right.shape})",
            left_shape=left.shape, right_shape=right.shape,
        )

    right_columns = [right.get_column(k) for k in range(right.columns)]
    data = []
    for current_row in left:
        for current_column in right_columns:
            value = zero_like(current_row[0])
            for a, b in zip(current_row, current_column):
                value += a * b
            data.append(value)
    return left._build(left.rows, right.columns, data)


def negate(matrix: Matrix) -> Matrix:
    """Elementwise additive inverse."""
    _check_matrix(matrix, 'matrix')
    data = [-value for row in matrix for value in row]
    return matrix._build(matrix.rows, matrix.columns, data)


def transpose(matrix: Matrix) -> Matrix:
    """columns x rows matrix with cell (c, r) = matrix[r, c]."""
    _check_matrix(matrix, 'matrix')
    data = [
        value
        for c in range(matrix.columns)
        for value in matrix.get_column(c)
    ]
    return matrix._build(matrix.columns, matrix.rows, data)
