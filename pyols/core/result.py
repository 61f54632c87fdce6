"""
Result envelope shared by every PyOLS entry point.

A backend returns Result[P], where P is its own frozen parameter record
(OLSParams, StationarityParams, ...). The envelope adds what every solve
has in common: a metadata dict, optional per-section timings, the backend
identifier, non-fatal warnings and library versions. Solution wrappers hold
a Result and expose its fields as properties.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every Result unless overridden."""
    import numpy as np
    from pyols import __version__

    return {
        'pyols_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen container for one computation.

    Attributes:
        params: Payload record produced by the backend
        info: Method metadata (algorithm, pivot tolerance, lag choice)
        timing: Seconds per section plus total_seconds, or None
        backend_name: Backend identifier, e.g. 'cpu_normal'
        warnings: Messages for conditions that did not stop the solve
        provenance: pyols and numpy versions
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """True if some warning message contains `substring`."""
        return any(substring in w for w in self.warnings)
