"""errors.py – exception and warning types raised by ghquad

Solver failures and complex roots are hard errors; precision loss at high
order is only a warning because the numbers returned are still finite.
"""
from __future__ import annotations

__all__ = ["EigensolverError", "ComplexRootError", "PrecisionWarning"]


class EigensolverError(RuntimeError):
    """An eigenvalue routine returned a nonzero status code.

    ``info < 0`` means argument ``-info`` was illegal; ``info > 0`` means
    the algorithm failed to converge (LAPACK conventions).
    """

    def __init__(self, routine: str, info: int):
        self.routine = routine
        self.info = int(info)
        if self.info < 0:
            detail = f"argument {-self.info} had an illegal value"
        else:
            detail = "the algorithm failed to converge"
        super().__init__(f"{routine} failed with info={self.info}: {detail}")


class ComplexRootError(ValueError):
    """Companion-matrix eigenvalues were expected real but are not."""

    def __init__(self, max_imag: float, imag_tol: float):
        self.max_imag = float(max_imag)
        self.imag_tol = imag_tol
        super().__init__(
            f"polynomial has complex roots (max |imag| = {self.max_imag:.3e}, "
            f"tolerance {imag_tol:.1e})"
        )


class PrecisionWarning(UserWarning):
    """Results are computed but may have lost accuracy."""
