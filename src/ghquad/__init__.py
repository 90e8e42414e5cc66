"""ghquad: Gauss–Hermite quadrature rules.

    ∫ f(x) exp(-x²) dx ≈ Σ w_i f(x_i)

>>> from ghquad import gauss_hermite
>>> x, w = gauss_hermite(5)
"""
from ghquad.core.companion import companion_matrix, find_roots
from ghquad.core.eigensolvers import (
    Eigensolver,
    GeneralEigenResult,
    LapackEigensolver,
    NumpyEigensolver,
    TridiagonalEigenResult,
    get_eigensolver,
)
from ghquad.core.errors import ComplexRootError, EigensolverError, PrecisionWarning
from ghquad.core.golub_welsch import golub_welsch
from ghquad.core.hermite import (
    MAX_EXACT_ORDER,
    eval_hermite,
    hermite_coefficients,
    hermite_value,
)
from ghquad.core.jacobi import hermite_jacobi
from ghquad.core.quadrature import (
    SQRT_PI,
    QuadratureParams,
    QuadratureRule,
    gauss_hermite,
    gauss_hermite_direct,
)

__all__ = [
    "ComplexRootError",
    "Eigensolver",
    "EigensolverError",
    "GeneralEigenResult",
    "LapackEigensolver",
    "MAX_EXACT_ORDER",
    "NumpyEigensolver",
    "PrecisionWarning",
    "QuadratureParams",
    "QuadratureRule",
    "SQRT_PI",
    "TridiagonalEigenResult",
    "companion_matrix",
    "eval_hermite",
    "find_roots",
    "gauss_hermite",
    "gauss_hermite_direct",
    "get_eigensolver",
    "golub_welsch",
    "hermite_coefficients",
    "hermite_jacobi",
    "hermite_value",
]

__version__ = "0.1.0"
