"""
Core protocols for pylinsys.

These define structural interfaces that solver implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pylinsys.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design (a linear system)
    and produce a parameter payload. The backend owns every detail of the
    computation: elimination order, worker pools, timing.

    Backends are stateless between calls. Configuration is fixed at
    construction time and every working array is created per solve, so a
    single backend instance may serve concurrent callers.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}[_parallel]'
        Examples: 'cpu_gauss', 'cpu_gauss_parallel', 'cpu_cramer'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the solve.

        Args:
            design: Validated linear system

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If the system has no unique solution
            ValidationError: If design is invalid for this backend
        """
        ...
