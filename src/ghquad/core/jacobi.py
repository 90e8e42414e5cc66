"""jacobi.py – symmetric tridiagonal matrix similar to the Hermite Jacobi matrix

The monic Hermite polynomials p_k = H_k / 2^k satisfy

    p_{k+1}(x) = (x - B_k) p_k(x) - A_k p_{k-1}(x),   B_k = 0,  A_k = k/2

so the symmetric Jacobi matrix has zero diagonal and off-diagonal
entries sqrt(A_k) = sqrt(k/2), k = 1..n-1.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

__all__ = ["hermite_jacobi"]


def hermite_jacobi(n: int) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Return ``(D, E)``: diagonal (length n) and off-diagonal (length n-1)."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ValueError(f"n must be an integer >= 1 (got {n!r})")

    D = np.zeros(n, dtype=np.float64)
    i = np.arange(1, n, dtype=np.float64)
    E = np.sqrt(i / 2.0)
    return D, E
