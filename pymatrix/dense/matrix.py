"""
Matrix: dense, row-major two-dimensional numeric container.

A Matrix owns one flat list of elements of length rows * columns. The
element at (row, column) is stored at index row * columns + column. Every
accessor and mutator goes through that mapping, and every mutator validates
its arguments before writing, so a rejected call leaves the matrix
unchanged. Rows and columns handed out or taken in are copied; no two
matrices share storage.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import NotSquareError, ValidationError
from pymatrix.core.protocols import Scalar, zero_like
from pymatrix.core.tolerances import EXACT, select_tolerance
from pymatrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_length,
    check_scalar,
)
from pymatrix.dense import ops
from pymatrix.dense.elimination import determinant


class Matrix:
    """
    Dense rows x columns matrix of Scalar elements.

    Construction:
        Matrix(rows, columns, default)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(np.eye(3))
        Matrix.identity(3)

    Matrices are mutable and therefore unhashable. Equality is structural:
    same shape and equal cells.
    """

    __slots__ = ('_rows', '_columns', '_data')
    __hash__ = None

    def __init__(self, rows: int, columns: int, default: Scalar):
        """
        Create a matrix with every cell set to default.

        Parameters
        ----------
        rows, columns : int
            Positive dimensions. Zero-sized matrices are rejected.
        default : Scalar
            Initial value of every cell.

        Raises
        ------
        InvalidDimensionError
            If rows or columns is not a positive integer.
        ValidationError
            If default is not numeric.
        """
        self._rows = check_dimension(rows, 'rows')
        self._columns = check_dimension(columns, 'columns')
        check_scalar(default, 'default')
        self._data: list[Any] = [default] * (self._rows * self._columns)

    @classmethod
    def _build(cls, rows: int, columns: int, data: list[Any]) -> Matrix:
        """Internal builder over an already-validated flat list it takes ownership of."""
        check_length(data, rows * columns, 'data')
        matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._columns = columns
        matrix._data = data
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Scalar]]) -> Matrix:
        """
        Build a matrix from a sequence of equal-length rows.

        Raises
        ------
        InvalidDimensionError
            If there are no rows or the first row is empty.
        SizeMismatchError
            If a row's length differs from the first row's.
        ValidationError
            If any value is not numeric.
        """
        n_rows = check_dimension(len(rows), 'rows')
        n_columns = check_dimension(len(rows[0]), 'columns')
        data = []
        for r, row in enumerate(rows):
            check_length(row, n_columns, f'rows[{r}]')
            for c, value in enumerate(row):
                check_scalar(value, f'rows[{r}][{c}]')
                data.append(value)
        return cls._build(n_rows, n_columns, data)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2-D numpy array-like.

        Elements are converted to Python scalars (int, float, complex).
        """
        arr = check_array(array, 'array')
        return cls.from_rows(arr.tolist())

    @classmethod
    def identity(cls, n: int, one: Scalar = 1) -> Matrix:
        """n x n identity matrix whose element type follows one."""
        check_scalar(one, 'one')
        matrix = cls(n, n, zero_like(one))
        for i in range(matrix._rows):
            matrix._data[i * matrix._columns + i] = one
        return matrix

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    def _check_square(self, operation: str) -> None:
        if not self.is_square:
            raise NotSquareError(
                f"{operation} requires a square matrix, got shape {self.shape}",
                shape=self.shape,
            )

    # --- Element access ---

    def get(self, row: int, column: int) -> Any:
        """Value at (row, column)."""
        row = check_index(row, self._rows, 'row')
        column = check_index(column, self._columns, 'column')
        return self._data[row * self._columns + column]

    def set(self, row: int, column: int, value: Scalar) -> None:
        """Overwrite the value at (row, column)."""
        row = check_index(row, self._rows, 'row')
        column = check_index(column, self._columns, 'column')
        check_scalar(value, 'value')
        self._data[row * self._columns + column] = value

    def get_row(self, row: int) -> list[Any]:
        """Copy of row, length columns."""
        row = check_index(row, self._rows, 'row')
        start = row * self._columns
        return self._data[start:start + self._columns]

    def get_column(self, column: int) -> list[Any]:
        """Copy of column, length rows."""
        column = check_index(column, self._columns, 'column')
        return self._data[column::self._columns]

    def get_diagonal(self) -> list[Any]:
        """Cells (i, i) for i in range(n). Square matrices only."""
        self._check_square('get_diagonal')
        return self._data[::self._columns + 1]

    def get_trace(self) -> Any:
        """Sum of the diagonal. Square matrices only."""
        diagonal = self.get_diagonal()
        total = zero_like(diagonal[0])
        for value in diagonal:
            total += value
        return total

    def set_row(self, row: int, values: Sequence[Scalar]) -> None:
        """
        Overwrite an entire row.

        Raises
        ------
        IndexOutOfRangeError
            If row is invalid.
        SizeMismatchError
            If len(values) != columns.
        """
        row = check_index(row, self._rows, 'row')
        check_length(values, self._columns, 'values')
        for c, value in enumerate(values):
            check_scalar(value, f'values[{c}]')
        start = row * self._columns
        self._data[start:start + self._columns] = list(values)

    def set_column(self, column: int, values: Sequence[Scalar]) -> None:
        """
        Overwrite an entire column.

        Raises
        ------
        IndexOutOfRangeError
            If column is invalid.
        SizeMismatchError
            If len(values) != rows.
        """
        column = check_index(column, self._columns, 'column')
        check_length(values, self._rows, 'values')
        for r, value in enumerate(values):
            check_scalar(value, f'values[{r}]')
        self._data[column::self._columns] = list(values)

    # --- Structural permutations ---

    def exchange_rows(self, row1: int, row2: int) -> None:
        """Swap two rows in place."""
        row1 = check_index(row1, self._rows, 'row')
        row2 = check_index(row2, self._rows, 'row')
        if row1 == row2:
            return
        n = self._columns
        a, b = row1 * n, row2 * n
        self._data[a:a + n], self._data[b:b + n] = (
            self._data[b:b + n], self._data[a:a + n]
        )

    def exchange_columns(self, column1: int, column2: int) -> None:
        """Swap two columns in place."""
        column1 = check_index(column1, self._columns, 'column')
        column2 = check_index(column2, self._columns, 'column')
        if column1 == column2:
            return
        n = self._columns
        self._data[column1::n], self._data[column2::n] = (
            self._data[column2::n], self._data[column1::n]
        )

    # --- Derived values ---

    def get_determinant(self) -> Any:
        """
        Determinant by Gaussian elimination with row/column pivoting.

        Works on a private copy; this matrix is never modified. Integer
        matrices are reduced over exact fractions and return an int.
        A singular matrix returns zero.

        Raises
        ------
        NotSquareError
            If the matrix is not square.
        """
        return determinant(self)

    def transpose(self) -> Matrix:
        """New columns x rows matrix with rows and columns swapped."""
        return ops.transpose(self)

    def copy(self) -> Matrix:
        """Independent copy sharing no storage with this matrix."""
        return self._build(self._rows, self._columns, list(self._data))

    # --- Conversion ---

    def to_rows(self) -> list[list[Any]]:
        """Nested list, one inner list per row."""
        return [self.get_row(r) for r in range(self._rows)]

    def to_array(self) -> NDArray[Any]:
        """numpy array copy of shape (rows, columns)."""
        return np.array(self.to_rows())

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate elementwise equality.

        Uses |a - b| <= atol + rtol * |b| per cell. When rtol/atol are not
        given they come from the tolerance tier of the element types, and
        exact types (int, Fraction, Decimal) compare with ==. Matrices of
        different shape are never close.
        """
        if self.shape != other.shape:
            return False
        if rtol is None and atol is None:
            tiers = [select_tolerance(self._data[0]), select_tolerance(other._data[0])]
            if all(tier is EXACT for tier in tiers):
                return self._data == other._data
            rtol = max(tier.rtol for tier in tiers)
            atol = max(tier.atol for tier in tiers)
        rtol = 0.0 if rtol is None else rtol
        atol = 0.0 if atol is None else atol
        return all(
            abs(a - b) <= atol + rtol * abs(b)
            for a, b in zip(self._data, other._data)
        )

    # --- Rendering ---

    def display(self) -> str:
        """
        Row-major text rendering.

        One line per row, values in column order, e.g. for [[1, 2], [3, 4]]:

            { 1, 2, }
            { 3, 4, }

        Every line, including the last, ends with a newline.
        """
        lines = []
        for r in range(self._rows):
            cells = ''.join(f' {value},' for value in self.get_row(r))
            lines.append('{' + cells + ' }\n')
        return ''.join(lines)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, columns={self._columns}, "
            f"data={self._data!r})"
        )

    # --- Python protocols ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._data == other._data
        )

    def __len__(self) -> int:
        return self._rows

    def __iter__(self) -> Iterator[list[Any]]:
        for r in range(self._rows):
            yield self.get_row(r)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, column = self._unpack_key(key)
        return self.get(row, column)

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        row, column = self._unpack_key(key)
        self.set(row, column, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(
                f"matrix index must be a (row, column) tuple, got {key!r}"
            )
        return key

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.subtract(self, other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return ops.multiply(self, other)

    def __neg__(self) -> Matrix:
        return ops.negate(self)
