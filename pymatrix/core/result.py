"""
Generic result container for PyMatrix computations.

Algorithms that produce more than a single value (Gaussian elimination
returns a triangular matrix, a sign, the exchanges it made and whether it
stopped early) wrap their output in this envelope. Non-fatal diagnostics
travel on it as warning strings; the library itself does not log.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, element type, pivots)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.
    
    Type Parameters:
        P: The algorithm-specific parameter payload type
        
    Attributes:
        params: Algorithm-specific payload
        info: Structured metadata (method, element type, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the routine that produced this result
        warnings: Non-fatal issues encountered during computation
        
    Examples:
        >>> Result(
        ...     params=EliminationParams(...),
        ...     info={'method': 'gaussian_elimination', 'n': 3},
        ...     timing=None,
        ...     backend_name='python_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
