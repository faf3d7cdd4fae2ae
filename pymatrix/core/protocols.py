"""
Core protocols for PyMatrix.

Matrix elements are not restricted to one concrete numeric type. Instead
they must satisfy the Scalar protocol: the closed set of arithmetic
operations Gaussian elimination needs. We use Protocol (structural typing)
rather than ABC (nominal typing) so that int, float, complex, Fraction,
Decimal and numpy scalars all qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only the operations actually used
    - No ordering or display requirement for pure arithmetic use
    - Identities are derived from the element's own type
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

T = TypeVar('T', bound='Scalar')  # Element type


@runtime_checkable
class Scalar(Protocol):
    """
    Arithmetic capability required of a matrix element.
    
    add, subtract and multiply are needed by the elementwise operators and
    the matrix product; true division by a pivot and negation of the sign
    are needed by the determinant; equality is needed for the zero test
    and structural matrix equality.
    """
    
    def __add__(self, other: Any) -> Any:
        ...
    
    def __sub__(self, other: Any) -> Any:
        ...
    
    def __mul__(self, other: Any) -> Any:
        ...
    
    def __truediv__(self, other: Any) -> Any:
        ...
    
    def __neg__(self) -> Any:
        ...
    
    def __eq__(self, other: object) -> bool:
        ...


def zero_like(value: T) -> T:
    """Additive identity of value's type."""
    return type(value)(0)


def one_like(value: T) -> T:
    """Multiplicative identity of value's type."""
    return type(value)(1)


def is_zero(value: Scalar) -> bool:
    """
    Exact zero test.
    
    No tolerance is applied: a float pivot of 1e-300 is nonzero.
    """
    return bool(value == zero_like(value))
