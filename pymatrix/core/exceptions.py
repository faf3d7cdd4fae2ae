"""
Exception hierarchy for PyMatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Every error here is a caller contract violation:
it is raised before any state is modified and is never retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.
    
    Raised when user-provided inputs (element values, sequences,
    array-likes) fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    Requested matrix dimensions are not usable.
    
    Raised when rows or columns is not a positive integer. Zero-sized
    matrices are rejected.
    
    Attributes:
        rows: Requested number of rows
        columns: Requested number of columns
    """
    
    def __init__(
        self,
        message: str,
        rows: object = None,
        columns: object = None
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row, column or cell index lies outside the matrix.
    
    Also an IndexError, so generic sequence-handling code catches it.
    
    Attributes:
        axis: 'row' or 'column'
        index: The offending index
        bound: The exclusive upper bound for that axis
    """
    
    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.bound = bound


class DimensionError(ValidationError):
    """
    Matrix or sequence shapes are incorrect or inconsistent.
    
    Base class for the shape errors below.
    """
    pass


class SizeMismatchError(DimensionError):
    """
    A supplied sequence or operand has the wrong size.
    
    Raised by set_row/set_column when the replacement has the wrong
    length, and by add/subtract when operand shapes differ.
    
    Attributes:
        expected: Expected length or shape
        actual: Length or shape received
    """
    
    def __init__(
        self,
        message: str,
        expected: int | tuple[int, int] | None = None,
        actual: int | tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DimensionMismatchError(DimensionError):
    """
    Operands of a matrix product have incompatible inner dimensions.
    
    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """
    
    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation is only defined for square matrices.
    
    Raised by the determinant, diagonal and trace accessors.
    
    Attributes:
        shape: Shape of the offending matrix
    """
    
    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape
