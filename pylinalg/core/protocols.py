"""
Core protocols for PyLinalg.

We use Protocol (structural typing) rather than ABC (nominal typing) so
any object with the right shape can act as a backend.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pylinalg.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for computational backends.

    Each backend takes a Matrix and produces an operation-specific
    parameter payload wrapped in a Result.

    Backends are stateless. This makes them easy to test and swap.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_doolittle', 'cpu_gauss_jordan'
        """
        ...

    def solve(self, matrix) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            matrix: The Matrix to operate on

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the matrix is invalid for this backend
        """
        ...
