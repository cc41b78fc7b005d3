import logging
from typing import Optional

import numpy as np

from .params import PIVOT_TOLERANCE

logger = logging.getLogger(__name__)


def solve_linear_system(A: np.ndarray, b: np.ndarray,
                        tol: float = PIVOT_TOLERANCE) -> Optional[np.ndarray]:
    """
    Solve A @ x = b by Gaussian elimination with partial pivoting.

    Returns None when a pivot magnitude falls below `tol` (singular system)
    or is not finite, and when the solution itself is not finite.
    The inputs are copied and never modified.
    """
    M = np.array(A, dtype=float)
    y = np.array(b, dtype=float).reshape(-1)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ValueError(f"A must be a square matrix, got shape {M.shape}")
    n = M.shape[0]
    if y.size != n:
        raise ValueError(f"b length ({y.size}) must match A size ({n})")

    for k in range(n):
        pivot_row = k + int(np.argmax(np.abs(M[k:, k])))
        pivot = M[pivot_row, k]
        if not np.isfinite(pivot) or abs(pivot) < tol:
            logger.debug(f"Singular or non-finite system: pivot {pivot:g} at column {k}")
            return None

        if pivot_row != k:
            M[[k, pivot_row]] = M[[pivot_row, k]]
            y[[k, pivot_row]] = y[[pivot_row, k]]

        pivot = M[k, k]
        M[k, k:] /= pivot
        y[k] /= pivot

        for i in range(k + 1, n):
            factor = M[i, k]
            M[i, k:] -= factor * M[k, k:]
            y[i] -= factor * y[k]

    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = y[i] - np.dot(M[i, i + 1:], x[i + 1:])
    if not np.all(np.isfinite(x)):
        logger.debug("Solution is not finite")
        return None
    return x
