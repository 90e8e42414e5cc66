"""eigensolvers.py – pluggable eigenvalue backends

The quadrature code needs exactly two capabilities from a linear-algebra
library:

* eigenvalues (no vectors) of a general real matrix – polynomial roots via
  the companion matrix;
* eigenvalues *and* unit eigenvectors of a symmetric tridiagonal matrix –
  the Golub–Welsch algorithm.

Both are expressed by the abstract :class:`Eigensolver`.  Results carry the
routine's status code instead of raising, so the caller decides how a
failure is reported (see :class:`ghquad.core.errors.EigensolverError`).

Backends
--------
``LapackEigensolver``  (default)
    SciPy's LAPACK wrappers: ``dgeev`` with a workspace-size query, ``dstev``.
``NumpyEigensolver``
    ``numpy.linalg.eigvals`` / ``numpy.linalg.eigh`` on the dense matrix.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import lapack

__all__ = [
    "GeneralEigenResult",
    "TridiagonalEigenResult",
    "Eigensolver",
    "LapackEigensolver",
    "NumpyEigensolver",
    "get_eigensolver",
]


# ---------------------------------------------------------------------------
# Result containers                                                          ──
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class GeneralEigenResult:
    """Eigenvalues of a general real matrix, split into real/imaginary parts."""

    wr: NDArray[np.float64]
    wi: NDArray[np.float64]
    info: int
    routine: str


@dataclass(slots=True)
class TridiagonalEigenResult:
    """Eigenpairs of a symmetric tridiagonal matrix.

    ``eigenvectors[:, j]`` is the unit eigenvector for ``eigenvalues[j]``.
    """

    eigenvalues: NDArray[np.float64]
    eigenvectors: NDArray[np.float64]
    info: int
    routine: str


# ---------------------------------------------------------------------------
# Interface                                                                  ──
# ---------------------------------------------------------------------------
class Eigensolver(ABC):
    name: str = ""

    @abstractmethod
    def general_eigenvalues(self, a: ArrayLike) -> GeneralEigenResult:
        """Eigenvalues of the square real matrix *a* (may be overwritten)."""

    @abstractmethod
    def tridiagonal_eigenpairs(self, d: ArrayLike, e: ArrayLike) -> TridiagonalEigenResult:
        """Eigenpairs of the symmetric tridiagonal matrix with diagonal *d*
        (length n) and off-diagonal *e* (length n-1); both may be destroyed.
        """


def _nan_general(n: int, info: int, routine: str) -> GeneralEigenResult:
    return GeneralEigenResult(np.full(n, np.nan), np.full(n, np.nan), int(info), routine)


# ---------------------------------------------------------------------------
# SciPy / LAPACK backend                                                     ──
# ---------------------------------------------------------------------------
class LapackEigensolver(Eigensolver):
    """``dgeev`` and ``dstev`` through :mod:`scipy.linalg.lapack`."""

    name = "lapack"

    def workspace_size(self, n: int) -> tuple[int, int]:
        """Optimal ``LWORK`` for ``dgeev`` without eigenvectors (the LWORK = -1 query).

        Returns ``(lwork, info)``.
        """
        work, info = lapack.dgeev_lwork(n, compute_vl=0, compute_vr=0)
        return max(int(np.real(work)), 1), int(info)

    def general_eigenvalues(self, a: ArrayLike) -> GeneralEigenResult:
        a = np.asfortranarray(a, dtype=np.float64)
        if a.ndim != 2 or a.shape[0] != a.shape[1]:
            raise ValueError(f"a must be a square matrix (got shape {a.shape})")
        n = a.shape[0]

        # 1. workspace query, 2. factorization with a buffer of that size
        lwork, info = self.workspace_size(n)
        if info != 0:
            return _nan_general(n, info, "dgeev_lwork")

        wr, wi, _, _, info = lapack.dgeev(a, compute_vl=0, compute_vr=0,
                                          lwork=lwork, overwrite_a=1)
        return GeneralEigenResult(wr, wi, int(info), "dgeev")

    def tridiagonal_eigenpairs(self, d: ArrayLike, e: ArrayLike) -> TridiagonalEigenResult:
        d = np.asarray(d, dtype=np.float64)
        e = np.asarray(e, dtype=np.float64)
        n = d.size

        if n == 1:
            # 1×1 matrix: its own eigenvalue, eigenvector [1]
            return TridiagonalEigenResult(d.copy(), np.ones((1, 1), order="F"), 0, "dstev")

        vals, z, info = lapack.dstev(d, e, compute_v=1, overwrite_d=1, overwrite_e=1)
        return TridiagonalEigenResult(vals, z, int(info), "dstev")


# ---------------------------------------------------------------------------
# NumPy backend                                                              ──
# ---------------------------------------------------------------------------
class NumpyEigensolver(Eigensolver):
    """Dense ``numpy.linalg`` routines; a ``LinAlgError`` maps to ``info = 1``."""

    name = "numpy"

    def general_eigenvalues(self, a: ArrayLike) -> GeneralEigenResult:
        a = np.asarray(a, dtype=np.float64)
        if a.ndim != 2 or a.shape[0] != a.shape[1]:
            raise ValueError(f"a must be a square matrix (got shape {a.shape})")
        n = a.shape[0]
        try:
            vals = np.linalg.eigvals(a)
        except np.linalg.LinAlgError:
            return _nan_general(n, 1, "numpy.linalg.eigvals")
        return GeneralEigenResult(np.real(vals).astype(np.float64),
                                  np.imag(vals).astype(np.float64),
                                  0, "numpy.linalg.eigvals")

    def tridiagonal_eigenpairs(self, d: ArrayLike, e: ArrayLike) -> TridiagonalEigenResult:
        d = np.asarray(d, dtype=np.float64)
        e = np.asarray(e, dtype=np.float64)
        T = np.diag(d) + np.diag(e, k=1) + np.diag(e, k=-1)
        try:
            eigvals, eigvecs = np.linalg.eigh(T)
        except np.linalg.LinAlgError:
            n = d.size
            return TridiagonalEigenResult(np.full(n, np.nan), np.full((n, n), np.nan),
                                          1, "numpy.linalg.eigh")
        return TridiagonalEigenResult(eigvals, np.asfortranarray(eigvecs), 0,
                                      "numpy.linalg.eigh")


_BACKENDS = {
    LapackEigensolver.name: LapackEigensolver,
    NumpyEigensolver.name: NumpyEigensolver,
}


def get_eigensolver(solver: Union[str, Eigensolver, None] = None) -> Eigensolver:
    """Resolve ``None`` (LAPACK), a backend name, or an instance to an Eigensolver."""
    if solver is None:
        return LapackEigensolver()
    if isinstance(solver, Eigensolver):
        return solver
    try:
        return _BACKENDS[solver]()
    except (KeyError, TypeError):
        raise ValueError(
            f"unknown eigensolver {solver!r}; choose from {sorted(_BACKENDS)}"
        ) from None
