"""
Exception hierarchy for PyOLS.

Everything raised on purpose derives from PyOLSError. Input problems are
ValidationErrors and are raised at the boundary before any algebra runs.
Failures during elimination are NumericalErrors. Exceptions keep the values
that triggered them as attributes so callers can inspect them without
parsing the message.
"""


class PyOLSError(Exception):
    """Base exception for all PyOLS errors."""
    pass


class ValidationError(PyOLSError):
    """Caller input was rejected before computation."""
    pass


class DimensionError(ValidationError):
    """
    Shapes or lengths do not fit together.

    Raised when array shapes don't match expected dimensions, when a
    flattened buffer does not hold nobs x nparams values, or when two
    matrices cannot be multiplied.
    """
    pass


class EmptyInputError(DimensionError):
    """
    An input has no observations or no parameters.

    Raised before any matrix is constructed when nobs or nparams is zero.
    """
    pass


class NotSquareError(DimensionError):
    """
    Inversion requested on a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyOLSError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when Gauss-Jordan elimination meets a pivot whose magnitude is
    below the working tolerance. For regression this usually means
    perfectly collinear predictors or fewer observations than parameters.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column at which elimination stopped
        pivot_value: Largest available pivot in that column
        tolerance: Threshold the pivot was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        tolerance: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.tolerance = tolerance
