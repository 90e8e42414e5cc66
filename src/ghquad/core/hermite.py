"""
hermite.py  –  Physicists' Hermite polynomials H_n via the three-term recurrence
--------------------------------------------------------------------------------
    H_0(x) = 1,   H_1(x) = 2x,   H_{i+1}(x) = 2x H_i(x) - 2i H_{i-1}(x)

• ``hermite_coefficients(n)``  – power-basis coefficients of H_n (ascending)
• ``hermite_value(x, n)``      – H_n at one point, O(1) memory
• ``eval_hermite(x, n)``       – elementwise evaluation with broadcasting

The loops live in Numba kernels (``*_nb``); the public wrappers validate
and convert the inputs before dispatching.
"""

from __future__ import annotations

import warnings

import numpy as np
from numba import njit
from numpy.typing import ArrayLike, NDArray

from ghquad.core.errors import PrecisionWarning

__all__ = [
    "MAX_EXACT_ORDER",
    "hermite_coefficients",
    "hermite_value",
    "eval_hermite",
]

# Largest order whose coefficients all fit in int64 (H_26 has one > 2**63 - 1)
MAX_EXACT_ORDER = 25


# ────────────────────────────────────────────────────────────────────────
#  1.  Input checks
# ────────────────────────────────────────────────────────────────────────
def _check_order(n, name: str = "n") -> int:
    """Return *n* as a Python int; raise ValueError unless it is an integer ≥ 0."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"{name} must be an integer (got {n!r})")
    if n < 0:
        raise ValueError(f"{name} must be >= 0 (got {n})")
    return int(n)


# ────────────────────────────────────────────────────────────────────────
#  2.  Numba kernels (no Python objects)
# ────────────────────────────────────────────────────────────────────────
@njit(cache=True)
def _coefficient_table_nb(n: int, table: NDArray) -> NDArray:
    """
    Fill ``table[i, j]`` = coefficient of x^j in H_i for i = 0..n (n ≥ 1).

    The dtype of *table* (int64 or float64) is the accumulator width.
    Returns a copy of row n.
    """
    table[0, 0] = 1
    table[1, 1] = 2
    for i in range(2, n + 1):
        table[i, 0] = -2 * (i - 1) * table[i - 2, 0]
        for j in range(1, i + 1):
            table[i, j] = 2 * table[i - 1, j - 1] - 2 * (i - 1) * table[i - 2, j]
    return table[n].copy()


@njit(cache=True, fastmath=True)
def _hermite_scalar_nb(x: float, n: int) -> float:
    if n == 0:
        return 1.0
    h_prev = 1.0
    h = 2.0 * x
    for i in range(1, n):
        h_prev, h = h, 2.0 * x * h - 2.0 * i * h_prev
    return h


@njit(cache=True, fastmath=True)
def _hermite_pairwise_nb(x: NDArray[np.float64],
                         n: NDArray[np.int64]) -> NDArray[np.float64]:
    out = np.empty(x.size, dtype=np.float64)
    for k in range(x.size):
        out[k] = _hermite_scalar_nb(x[k], n[k])
    return out


# ────────────────────────────────────────────────────────────────────────
#  3.  Public wrappers
# ────────────────────────────────────────────────────────────────────────
def hermite_coefficients(n: int) -> NDArray[np.float64]:
    """Coefficients of H_n in ascending powers of x.

    Parameters
    ----------
    n : int
        Polynomial degree (≥ 0).

    Returns
    -------
    ndarray, shape (n + 1,)
        ``c[i]`` is the coefficient of x**i; ``c[n] == 2**n``.

    Warns
    -----
    PrecisionWarning
        For ``n > MAX_EXACT_ORDER`` the table is accumulated in float64,
        so the coefficients are no longer exact integers.

    Raises
    ------
    OverflowError
        If a coefficient is not representable in float64 (from about n = 263).
    """
    n = _check_order(n)
    if n == 0:
        return np.ones(1)
    if n == 1:
        return np.array([0.0, 2.0])

    if n <= MAX_EXACT_ORDER:
        table = np.zeros((n + 1, n + 1), dtype=np.int64)
    else:
        warnings.warn(
            f"H_{n} coefficients exceed int64; accumulating in float64 "
            f"(exact only up to n = {MAX_EXACT_ORDER})",
            PrecisionWarning,
            stacklevel=2,
        )
        table = np.zeros((n + 1, n + 1), dtype=np.float64)

    c = _coefficient_table_nb(n, table).astype(np.float64)
    if not np.all(np.isfinite(c)):
        raise OverflowError(
            f"H_{n} coefficients overflow float64; use the Golub–Welsch rule "
            f"for orders this high"
        )
    return c


def hermite_value(x: float, n: int) -> float:
    """H_n(x) at a single point."""
    return float(_hermite_scalar_nb(float(x), _check_order(n)))


def eval_hermite(x: ArrayLike, n: ArrayLike) -> NDArray[np.float64]:
    """Evaluate H_n(x) elementwise over sequences of points and orders.

    Broadcasting follows the lengths of the two (flattened) inputs:

    * equal lengths      → pairs ``(x[k], n[k])``
    * ``x`` is longer    → ``n[0]`` for every point
    * ``n`` is longer    → ``x[0]`` for every order

    When the lengths differ the shorter input must have exactly one element.

    Parameters
    ----------
    x : array_like of float
    n : array_like of int
        Non-negative integer orders.

    Returns
    -------
    ndarray, shape (max(len(x), len(n)),)
    """
    x_arr = np.atleast_1d(np.asarray(x, dtype=np.float64)).ravel()
    n_arr = np.atleast_1d(np.asarray(n)).ravel()

    if x_arr.size == 0 or n_arr.size == 0:
        raise ValueError("x and n must both be non-empty")
    if not np.issubdtype(n_arr.dtype, np.integer):
        raise ValueError(f"n must hold integers (got dtype {n_arr.dtype})")
    if np.any(n_arr < 0):
        raise ValueError(f"n must be >= 0 (got min {n_arr.min()})")
    n_arr = n_arr.astype(np.int64)

    if x_arr.size > n_arr.size:
        if n_arr.size != 1:
            raise ValueError(
                f"cannot broadcast {n_arr.size} orders over {x_arr.size} points"
            )
        n_arr = np.full(x_arr.size, n_arr[0], dtype=np.int64)
    elif n_arr.size > x_arr.size:
        if x_arr.size != 1:
            raise ValueError(
                f"cannot broadcast {x_arr.size} points over {n_arr.size} orders"
            )
        x_arr = np.full(n_arr.size, x_arr[0], dtype=np.float64)

    return _hermite_pairwise_nb(np.ascontiguousarray(x_arr),
                                np.ascontiguousarray(n_arr))
