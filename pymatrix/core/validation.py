"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Callers run them before touching
any matrix storage, so a failed check never leaves a partial mutation.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No negative-index wrap-around
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    SizeMismatchError,
    ValidationError,
)


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value can be stored as a matrix element.
    
    Accepts anything registered as numbers.Number (int, float, complex,
    Fraction, Decimal, numpy scalars). Booleans are rejected even though
    bool subclasses int.
    
    Args:
        value: Candidate element
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If value is not numeric
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        raise ValidationError(
            f"{name}: expected a numeric value, got {type(value).__name__} {value!r}"
        )


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row or column count is a positive integer.
    
    Args:
        value: Requested count
        name: 'rows' or 'columns'
        
    Returns:
        The count as a plain int
        
    Raises:
        InvalidDimensionError: If value is not an int or is < 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise InvalidDimensionError(
            f"{name}: must be at least 1, got {value}"
        )
    return int(value)


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).
    
    Args:
        index: Index to check
        bound: Exclusive upper bound (number of rows or columns)
        axis: 'row' or 'column', used in the message and attributes
        
    Returns:
        The index as a plain int
        
    Raises:
        ValidationError: If index is not an int
        IndexOutOfRangeError: If index is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise ValidationError(
            f"{axis} index must be an integer, got {type(index).__name__} {index!r}"
        )
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{axis} index {index} is out of range for {bound} {axis}s",
            axis=axis, index=int(index), bound=bound,
        )
    return int(index)


def check_length(values: Sequence[Any], expected: int, name: str) -> None:
    """
    Verify a replacement sequence has exactly the expected length.
    
    Args:
        values: Sequence to check
        expected: Required length
        name: Parameter name for error messages
        
    Raises:
        SizeMismatchError: If the lengths differ
    """
    actual = len(values)
    if actual != expected:
        raise SizeMismatchError(
            f"{name}: expected {expected} values, got {actual}",
            expected=expected, actual=actual,
        )


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert a 2-D array-like to a numpy array.
    
    Rejects inputs that result in object dtype (mixed types) or in a
    non-numeric dtype (strings, datetimes, booleans). The dtype is returned
    unchanged, so integer arrays stay integer.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        2-D numpy.ndarray with numeric dtype
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If the array is not 2-D
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    
    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {result.ndim}D with shape {result.shape}"
        )
    
    return result
