"""companion.py – polynomial roots as companion-matrix eigenvalues

For p(x) = c_0 + c_1 x + … + c_n x^n the companion matrix of the monic
polynomial p / c_n is

    ⎡0 0 … 0  -c_0/c_n    ⎤
    ⎢1 0 … 0  -c_1/c_n    ⎥
    ⎢0 1 … 0  -c_2/c_n    ⎥
    ⎢⋮      ⋱    ⋮        ⎥
    ⎣0 0 … 1  -c_{n-1}/c_n⎦

and its eigenvalues are the roots of p.
"""
from __future__ import annotations

from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ghquad.core.eigensolvers import Eigensolver, get_eigensolver
from ghquad.core.errors import ComplexRootError, EigensolverError

__all__ = ["DEFAULT_IMAG_TOL", "companion_matrix", "find_roots"]

DEFAULT_IMAG_TOL = 1e-8


def companion_matrix(c: ArrayLike) -> NDArray[np.float64]:
    """Column-major (Fortran-order) companion matrix of coefficients *c*.

    Parameters
    ----------
    c : array_like, shape (n + 1,)
        Ascending coefficients; ``c[n]`` must be nonzero and ``n ≥ 1``.

    Returns
    -------
    ndarray, shape (n, n), Fortran order
    """
    c = np.asarray(c, dtype=np.float64).ravel()
    if c.size < 2:
        raise ValueError(f"need a polynomial of degree >= 1 (got {c.size} coefficient(s))")
    if c[-1] == 0:
        raise ValueError("leading coefficient must be nonzero")

    n = c.size - 1
    C = np.zeros((n, n), dtype=np.float64, order="F")
    idx = np.arange(n - 1)
    C[idx + 1, idx] = 1.0
    C[:, -1] = -c[:-1] / c[-1]
    return C


def find_roots(c: ArrayLike,
               *,
               eigensolver: Union[str, Eigensolver, None] = None,
               imag_tol: Optional[float] = DEFAULT_IMAG_TOL) -> NDArray[np.float64]:
    """Real roots of the polynomial with ascending coefficients *c*.

    Parameters
    ----------
    c : array_like, shape (n + 1,)
        Ascending coefficients, nonzero leading term.
    eigensolver : str, Eigensolver or None
        Backend for the general eigenvalue problem (default LAPACK ``dgeev``).
    imag_tol : float or None
        A root is accepted as real when ``|imag| <= imag_tol * max(1, |real|)``.
        ``None`` skips the check and keeps the real parts unconditionally.

    Returns
    -------
    ndarray, shape (n,)
        Roots in the order the eigensolver returns them (unsorted).

    Raises
    ------
    EigensolverError
        The eigenvalue routine reported a nonzero status.
    ComplexRootError
        Some root has a non-negligible imaginary part.
    """
    C = companion_matrix(c)
    res = get_eigensolver(eigensolver).general_eigenvalues(C)
    if res.info != 0:
        raise EigensolverError(res.routine, res.info)

    if imag_tol is not None:
        scale = np.maximum(1.0, np.abs(res.wr))
        excess = np.abs(res.wi) > imag_tol * scale
        if np.any(excess):
            raise ComplexRootError(np.max(np.abs(res.wi)), imag_tol)

    return np.array(res.wr, dtype=np.float64)
