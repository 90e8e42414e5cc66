"""golub_welsch.py – Gauss quadrature rule from a Jacobi-similar matrix

Golub & Welsch (1969): the nodes are the eigenvalues of the symmetric
tridiagonal matrix J, and the weight of node j is

    w_j = mu0 · v_{j,0}²

where v_j is the unit eigenvector for node j and mu0 = ∫ w(x) dx is the
zeroth moment of the weight function.
"""
from __future__ import annotations

from typing import Tuple, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ghquad.core.eigensolvers import Eigensolver, get_eigensolver
from ghquad.core.errors import EigensolverError

__all__ = ["golub_welsch"]


def golub_welsch(D: ArrayLike,
                 E: ArrayLike,
                 mu0: float,
                 *,
                 eigensolver: Union[str, Eigensolver, None] = None,
                 ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Nodes and weights for the Gauss rule encoded by ``(D, E)``.

    Parameters
    ----------
    D : array_like, shape (n,)
        Diagonal of J.  Float64 arrays are overwritten by the solver.
    E : array_like, shape (n-1,)
        Sub/super-diagonal of J.  Float64 arrays are destroyed by the solver.
    mu0 : float
        Zeroth moment of the weight function.
    eigensolver : str, Eigensolver or None
        Backend for the tridiagonal eigenproblem (default LAPACK ``dstev``).

    Returns
    -------
    x : ndarray, shape (n,)
        Nodes, in solver order (ascending for ``dstev``).
    w : ndarray, shape (n,)
        Weights.
    """
    D = np.asarray(D, dtype=np.float64).ravel()
    E = np.asarray(E, dtype=np.float64).ravel()
    n = D.size
    if n == 0:
        raise ValueError("D must be non-empty")
    if E.size != n - 1:
        raise ValueError(f"E must have length n-1 = {n - 1} (got {E.size})")

    res = get_eigensolver(eigensolver).tridiagonal_eigenpairs(D, E)
    if res.info != 0:
        raise EigensolverError(res.routine, res.info)

    x = np.array(res.eigenvalues, dtype=np.float64)
    w = mu0 * res.eigenvectors[0, :] ** 2
    return x, w
