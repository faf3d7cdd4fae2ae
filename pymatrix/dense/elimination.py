"""
Gaussian elimination with row/column pivoting.

Reduces a private copy of a square matrix to upper-triangular form and
derives the determinant from it:

    1. sign starts at +1.
    2. For each pivot index i:
       a. pivot = working[i, i]
       b. if pivot is zero, exchange row i with the first row x > i whose
          (x, i) entry is nonzero, and negate sign
       c. if still zero, exchange column i with the first column x > i whose
          (i, x) entry is nonzero, and negate sign
       d. if still zero the matrix is singular: stop, determinant is zero
       e. otherwise subtract (working[x, i] / pivot) * row i from every row
          x below i
    3. determinant = sign * product(diagonal)

Rows are always searched before columns and the lowest qualifying index
wins, so the sequence of exchanges is reproducible.

Integer cells are promoted before reduction so that dividing two of them
by each other never produces a float:
    - all integers: reduced over fractions.Fraction, determinant returned as int
    - integers and Fractions: reduced over Fraction, determinant is a Fraction
    - integers and Decimals: integers become Decimal
    - anything else (floats, complex, numpy floats) is reduced as given
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any

from pymatrix.core.exceptions import NotSquareError
from pymatrix.core.protocols import is_zero, one_like, zero_like
from pymatrix.core.result import Result
from pymatrix.core.timing import Timer

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


@dataclass(frozen=True)
class EliminationParams:
    """
    Parameter payload of a Gaussian elimination run.

    Attributes:
        upper: Reduced working matrix. Upper-triangular unless singular, in
            which case reduction stopped at singular_pivot.
        sign: +1 or -1 after all exchanges (Fraction for integer input)
        determinant: sign * product(diagonal), or zero when singular
        row_exchanges: (i, x) pairs in the order they were applied
        column_exchanges: (i, x) pairs in the order they were applied
        singular: True if no nonzero pivot could be found
        singular_pivot: Pivot index at which singularity was detected
    """
    upper: 'Matrix'
    sign: Any
    determinant: Any
    row_exchanges: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    column_exchanges: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    singular: bool = False
    singular_pivot: int | None = None


def _is_integral(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _working_kind(values: list[Any]) -> str | None:
    if all(_is_integral(v) for v in values):
        return 'integer'
    if all(_is_integral(v) or isinstance(v, Fraction) for v in values):
        return 'rational'
    if all(_is_integral(v) or isinstance(v, Decimal) for v in values):
        return 'decimal'
    return None


def _working_copy(matrix: Matrix) -> tuple[Matrix, str | None]:
    """Copy of matrix with integer cells promoted to the matrix's exact type."""
    values = [value for row in matrix for value in row]
    kind = _working_kind(values)
    if kind in ('integer', 'rational'):
        values = [Fraction(int(v)) if _is_integral(v) else v for v in values]
    elif kind == 'decimal':
        values = [Decimal(int(v)) if _is_integral(v) else v for v in values]
    return matrix._build(matrix.rows, matrix.columns, values), kind


def eliminate(matrix: Matrix, *, timing: bool = False) -> Result[EliminationParams]:
    """
    Reduce a square matrix to upper-triangular form.

    Parameters
    ----------
    matrix : Matrix
        Square input. Not modified.
    timing : bool
        If True, record 'pivot_search' and 'row_reduction' section times.

    Returns
    -------
    Result[EliminationParams]
        A singular outcome is a normal result, flagged by params.singular
        and a warning.

    Raises
    ------
    NotSquareError
        If matrix is not square.
    """
    if not matrix.is_square:
        raise NotSquareError(
            f"determinant requires a square matrix, got shape {matrix.shape}",
            shape=matrix.shape,
        )

    timer = Timer()
    timer.start()

    n = matrix.rows
    working, kind = _working_copy(matrix)
    exact = kind in ('integer', 'rational')
    zero = zero_like(working.get(0, 0))
    if kind == 'integer':
        zero = int(zero)
    sign = one_like(working.get(0, 0))
    row_exchanges: list[tuple[int, int]] = []
    column_exchanges: list[tuple[int, int]] = []

    for i in range(n):
        with timer.section('pivot_search'):
            pivot = working.get(i, i)

            if is_zero(pivot):
                for x in range(i + 1, n):
                    if not is_zero(working.get(x, i)):
                        working.exchange_rows(x, i)
                        row_exchanges.append((i, x))
                        sign = -sign
                        pivot = working.get(i, i)
                        break

            if is_zero(pivot):
                for x in range(i + 1, n):
                    if not is_zero(working.get(i, x)):
                        working.exchange_columns(i, x)
                        column_exchanges.append((i, x))
                        sign = -sign
                        pivot = working.get(i, i)
                        break

        if is_zero(pivot):
            timer.stop()
            params = EliminationParams(
                upper=working,
                sign=sign,
                determinant=zero,
                row_exchanges=tuple(row_exchanges),
                column_exchanges=tuple(column_exchanges),
                singular=True,
                singular_pivot=i,
            )
            return _result(
                params, n, exact, timer, timing,
                warnings=(f"matrix is singular: no nonzero pivot at index {i}",),
            )

        with timer.section('row_reduction'):
            pivot_row = working.get_row(i)
            for x in range(i + 1, n):
                m = working.get(x, i) / pivot
                new_row = [a - m * b for a, b in zip(working.get_row(x), pivot_row)]
                working.set_row(x, new_row)

    value = sign * math.prod(working.get_diagonal(), start=one_like(sign))
    if kind == 'integer':
        value = int(value)

    timer.stop()
    params = EliminationParams(
        upper=working,
        sign=sign,
        determinant=value,
        row_exchanges=tuple(row_exchanges),
        column_exchanges=tuple(column_exchanges),
    )
    return _result(params, n, exact, timer, timing)


def _result(
    params: EliminationParams,
    n: int,
    exact: bool,
    timer: Timer,
    timing: bool,
    warnings: tuple[str, ...] = (),
) -> Result[EliminationParams]:
    return Result(
        params=params,
        info={
            'method': 'gaussian_elimination',
            'n': n,
            'exact': exact,
            'n_exchanges': len(params.row_exchanges) + len(params.column_exchanges),
        },
        timing=timer.result() if timing else None,
        backend_name='python_gauss',
        warnings=warnings,
    )


def determinant(matrix: Matrix) -> Any:
    """Determinant of a square matrix; zero for a singular one."""
    return eliminate(matrix).params.determinant
