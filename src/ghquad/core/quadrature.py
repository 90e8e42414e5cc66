"""quadrature.py – Gauss–Hermite nodes and weights

Two independent constructions of the n-point rule

    ∫_{−∞}^{+∞} f(t) e^{−t²} dt ≈ Σ_{i=1}^{n} w_i f(x_i)

* ``gauss_hermite``        – Golub–Welsch: eigenpairs of the symmetric
  tridiagonal Jacobi-similar matrix.  Stable well beyond n = 100.
* ``gauss_hermite_direct`` – roots of the coefficient polynomial H_n via its
  companion matrix, weights from the closed form evaluated in log space.
  Simple, but the coefficients grow combinatorially and root-finding loses
  accuracy from roughly n ≈ 20.

Pick one explicitly; neither falls back to the other.  Import with
``from ghquad.core.quadrature import gauss_hermite``.
"""
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

import numpy as np
from numpy.typing import NDArray

from ghquad.core.companion import DEFAULT_IMAG_TOL, find_roots
from ghquad.core.eigensolvers import Eigensolver
from ghquad.core.errors import PrecisionWarning
from ghquad.core.golub_welsch import golub_welsch
from ghquad.core.hermite import eval_hermite, hermite_coefficients
from ghquad.core.jacobi import hermite_jacobi

__all__ = [
    "SQRT_PI",
    "QuadratureParams",
    "QuadratureRule",
    "gauss_hermite",
    "gauss_hermite_direct",
]

# mu0 = ∫ exp(-x²) dx
SQRT_PI = math.sqrt(math.pi)


# ---------------------------------------------------------------------------
# Parameters & result                                                        ──
# ---------------------------------------------------------------------------
@dataclass
class QuadratureParams:
    imag_tol: Optional[float] = DEFAULT_IMAG_TOL  # None → accept any root
    direct_order_limit: int = 20                  # warn above this (empirical)
    solver: str = "lapack"


@dataclass(slots=True)
class QuadratureRule:
    """Nodes *x* and weights *w* of an n-point rule; unpacks as ``x, w``."""

    x: NDArray[np.float64]
    w: NDArray[np.float64]

    def __post_init__(self):
        self.x = np.asarray(self.x, dtype=np.float64)
        self.w = np.asarray(self.w, dtype=np.float64)
        if self.x.shape != self.w.shape:
            raise ValueError(
                f"x and w must have the same shape (got {self.x.shape} and {self.w.shape})"
            )

    def __iter__(self) -> Iterator[NDArray[np.float64]]:
        yield self.x
        yield self.w

    def __len__(self) -> int:
        return self.x.size

    def sorted(self) -> "QuadratureRule":
        """Copy ordered by ascending node."""
        idx = np.argsort(self.x)
        return QuadratureRule(self.x[idx], self.w[idx])

    def integrate(self, f: Callable[[NDArray[np.float64]], NDArray]) -> Union[float, NDArray]:
        """Σ w_i f(x_i) ≈ ∫ f(x) e^{−x²} dx.

        *f* is called once with the node vector and must return an array whose
        leading axis has length n.
        """
        return np.dot(self.w, np.asarray(f(self.x)))

    def expectation(self,
                    f: Callable[[NDArray[np.float64]], NDArray],
                    mean: float = 0.0,
                    std: float = 1.0) -> Union[float, NDArray]:
        """E[f(Z)] for Z ~ N(mean, std²).

        Uses the change of variables z = mean + √2·std·x, so that
        E[f(Z)] = π^{-1/2} Σ w_i f(mean + √2·std·x_i).
        """
        z = mean + math.sqrt(2.0) * std * self.x
        return np.dot(self.w / SQRT_PI, np.asarray(f(z)))


def _check_quadrature_order(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"Gauss–Hermite order must be an integer (got {n!r})")
    if n < 1:
        raise ValueError(f"Gauss–Hermite requires n ≥ 1 (got n={n})")
    return int(n)


# ---------------------------------------------------------------------------
# Golub–Welsch                                                               ──
# ---------------------------------------------------------------------------
def gauss_hermite(n: int,
                  params: Optional[QuadratureParams] = None,
                  *,
                  eigensolver: Union[str, Eigensolver, None] = None) -> QuadratureRule:
    """Return abscissae *x* and weights *w* for *n*-point Gauss–Hermite quadrature.

    Parameters
    ----------
    n : int
        Quadrature order (must be ``n ≥ 1``).
    params : QuadratureParams, optional
        Only ``solver`` is used here.
    eigensolver : str or Eigensolver, optional
        Overrides ``params.solver``.

    Returns
    -------
    QuadratureRule
        ``x`` in solver order (ascending with LAPACK), ``w`` with Σ w = √π.

    Raises
    ------
    ValueError
        If *n* is not an integer ≥ 1.
    EigensolverError
        If the tridiagonal eigensolver fails.

    Notes
    -----
    We construct the symmetric tridiagonal matrix with zero diagonal and
    off-diagonal sqrt(k/2) and use its eigenvalue/eigenvector decomposition
    ("Golub–Welsch" algorithm): w_j = √π · v_{j,0}².
    """
    n = _check_quadrature_order(n)
    p = params or QuadratureParams()

    D, E = hermite_jacobi(n)
    x, w = golub_welsch(D, E, SQRT_PI,
                        eigensolver=eigensolver if eigensolver is not None else p.solver)
    return QuadratureRule(x, w)


# ---------------------------------------------------------------------------
# Direct root-finding                                                        ──
# ---------------------------------------------------------------------------
def gauss_hermite_direct(n: int,
                         params: Optional[QuadratureParams] = None,
                         *,
                         eigensolver: Union[str, Eigensolver, None] = None) -> QuadratureRule:
    """Gauss–Hermite rule from the roots of H_n and the closed-form weights.

    The weights are

        w_i = 2^{n-1} n! √π / (n² H_{n-1}(x_i)²)

    computed as ``exp`` of their logarithm so that 2^{n-1} n! never
    overflows.

    Parameters
    ----------
    n : int
        Quadrature order (``n ≥ 1``).
    params : QuadratureParams, optional
        ``imag_tol`` for the real-root check, ``direct_order_limit`` for the
        precision warning, ``solver`` for the eigenvalue backend.
    eigensolver : str or Eigensolver, optional
        Overrides ``params.solver``.

    Returns
    -------
    QuadratureRule
        Nodes in the order the eigensolver returns them (not sorted).

    Raises
    ------
    ValueError
        If *n* is not an integer ≥ 1.
    EigensolverError
        If the general eigensolver fails.
    ComplexRootError
        If root-finding produced complex roots (only at high order).
    OverflowError
        If the coefficients of H_n overflow float64 (from about n = 263).

    Warns
    -----
    PrecisionWarning
        If ``n > params.direct_order_limit``.
    """
    n = _check_quadrature_order(n)
    p = params or QuadratureParams()

    if n > p.direct_order_limit:
        warnings.warn(
            f"direct Gauss–Hermite construction is unreliable for n > "
            f"{p.direct_order_limit} (got n={n}); use gauss_hermite instead",
            PrecisionWarning,
            stacklevel=2,
        )

    coef = hermite_coefficients(n)
    x = find_roots(coef,
                   eigensolver=eigensolver if eigensolver is not None else p.solver,
                   imag_tol=p.imag_tol)

    h_prev = eval_hermite(x, n - 1)
    log_w = ((n - 1) * math.log(2.0) + math.lgamma(n + 1) + 0.5 * math.log(math.pi)
             - 2.0 * math.log(n) - 2.0 * np.log(np.abs(h_prev)))
    return QuadratureRule(x, np.exp(log_w))
