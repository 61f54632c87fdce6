"""
Core protocols for PyOLS.

We use Protocol (structural typing) rather than ABC (nominal typing) so that
a backend only has to provide the right attributes, not inherit from us.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pyols.core.result import Result

P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless: everything they need is on
    the design, so one instance may serve concurrent callers.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_normal'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
        """
        ...
