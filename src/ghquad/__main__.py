"""
__main__.py
===========
Print a Gauss–Hermite rule from the command line:

    python -m ghquad 5
    python -m ghquad 10 --method direct --solver numpy --sort
"""
from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

import numpy as np

from ghquad.core.errors import ComplexRootError, EigensolverError
from ghquad.core.quadrature import (
    SQRT_PI,
    QuadratureParams,
    gauss_hermite,
    gauss_hermite_direct,
)

_METHODS = {
    "stable": gauss_hermite,
    "direct": gauss_hermite_direct,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghquad",
        description="Compute nodes and weights of n-point Gauss–Hermite quadrature.",
    )
    parser.add_argument("n", type=int, help="Quadrature order (n ≥ 1)")
    parser.add_argument("--method", choices=sorted(_METHODS), default="stable",
                        help="stable = Golub–Welsch, direct = companion-matrix "
                             "root finding (default: stable)")
    parser.add_argument("--solver", choices=["lapack", "numpy"], default="lapack",
                        help="Eigenvalue backend (default: lapack)")
    parser.add_argument("--sort", action="store_true",
                        help="Print nodes in ascending order")
    parser.add_argument("--precision", type=int, default=16,
                        help="Significant digits in the output (default: 16)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.precision < 0:
        parser.error(f"--precision must be >= 0 (got {args.precision})")

    t0 = time.perf_counter()
    try:
        rule = _METHODS[args.method](args.n, QuadratureParams(solver=args.solver))
    except (ValueError, OverflowError, ComplexRootError, EigensolverError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - t0

    if args.sort:
        rule = rule.sorted()

    p = args.precision
    for xi, wi in zip(rule.x, rule.w):
        print(f"{xi: .{p}e} {wi: .{p}e}")

    total = float(np.sum(rule.w))
    print(f"# n={args.n} method={args.method} sum(w)={total:.{p}g} "
          f"(sqrt(pi)={SQRT_PI:.{p}g}) in {elapsed:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
