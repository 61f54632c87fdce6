"""
Dense matrix primitives and Gauss-Jordan inversion.

Matrices are C-contiguous float64 NumPy arrays: one flat row-major buffer
plus (rows, cols). Every function allocates its output and returns it
read-only, so results can be shared without defensive copies. Inputs are
never modified.

The matrices handled here are small (one row and column per model
parameter), so inversion favours a transparent algorithm with an explicit
singularity check over calling into LAPACK.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.exceptions import DimensionError, NotSquareError, SingularMatrixError
from pyols.core.compute.tolerances import PIVOT_TOLERANCE


def _as_matrix(A: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    A = np.asarray(A, dtype=np.float64)
    if A.ndim == 1 and A.size == 0:
        A = A.reshape(0, 0)
    if A.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {A.ndim}D with shape {A.shape}"
        )
    return A


def _readonly(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    A.flags.writeable = False
    return A


def transpose(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Transpose an r x c matrix into a freshly allocated c x r matrix.

    Total: an empty matrix maps to an empty matrix.
    """
    A = _as_matrix(A, 'A')
    return _readonly(np.ascontiguousarray(A.T))


def multiply(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product C = A B.

    Args:
        A: Matrix (r x k)
        B: Matrix (k x c)

    Returns:
        C (r x c), C[i, j] = sum_k A[i, k] * B[k, j]

    Raises:
        DimensionError: If A.cols != B.rows
    """
    A = _as_matrix(A, 'A')
    B = _as_matrix(B, 'B')
    if A.shape[1] != B.shape[0]:
        raise DimensionError(
            f"Cannot multiply {A.shape[0]}x{A.shape[1]} by "
            f"{B.shape[0]}x{B.shape[1]}: inner dimensions {A.shape[1]} != {B.shape[0]}"
        )
    return _readonly(np.ascontiguousarray(A @ B))


def matvec(A: ArrayLike, x: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix-vector product A x.

    Raises:
        DimensionError: If x is not 1D or A.cols != len(x)
    """
    A = _as_matrix(A, 'A')
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise DimensionError(
            f"x: expected 1D array, got {x.ndim}D with shape {x.shape}"
        )
    if A.shape[1] != x.shape[0]:
        raise DimensionError(
            f"Cannot multiply {A.shape[0]}x{A.shape[1]} matrix by vector of "
            f"length {x.shape[0]}"
        )
    return _readonly(A @ x)


def invert(
    A: ArrayLike,
    *,
    tol: float = PIVOT_TOLERANCE,
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix by Gauss-Jordan elimination with partial pivoting.

    Works on the augmented matrix [A | I]. For each column i the row with
    the largest |a_ki| among rows i..n-1 is swapped into place, the pivot
    row is normalised, and column i is eliminated from every other row.
    When all columns are done the right half holds the inverse.

    NaN and Inf inputs are not rejected up front. A NaN pivot fails the
    tolerance test and is reported as singular; other non-finite values
    propagate into the result.

    Args:
        A: Square matrix (n x n), n >= 1
        tol: Smallest acceptable pivot magnitude
        matrix_name: Name used in error messages

    Returns:
        The inverse (n x n), read-only

    Raises:
        NotSquareError: If A is not a non-empty square 2D matrix
        SingularMatrixError: If a pivot's magnitude falls below tol
    """
    A = np.asarray(A, dtype=np.float64)
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[0] == 0:
        raise NotSquareError(
            f"{matrix_name}: inversion requires a non-empty square matrix, "
            f"got shape {A.shape}",
            shape=A.shape,
        )
    n = A.shape[0]

    aug = np.hstack([A, np.eye(n)])

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]

        pivot = aug[i, i]
        # Written so that a NaN pivot also fails
        if not abs(pivot) >= tol:
            raise SingularMatrixError(
                f"{matrix_name} is singular or ill-conditioned: pivot {pivot:.3e} "
                f"in column {i} is below tolerance {tol:.0e}",
                matrix_name=matrix_name,
                pivot_index=i,
                pivot_value=float(pivot),
                tolerance=tol,
            )

        aug[i] /= pivot

        factors = aug[:, i].copy()
        factors[i] = 0.0
        aug -= np.outer(factors, aug[i])

    return _readonly(np.ascontiguousarray(aug[:, n:]))
