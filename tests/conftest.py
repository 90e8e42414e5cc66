import numpy as np
import pytest

from ghquad.core.eigensolvers import (
    Eigensolver,
    GeneralEigenResult,
    TridiagonalEigenResult,
)


class FailingEigensolver(Eigensolver):
    """Reports a convergence failure from every routine."""

    name = "failing"

    def __init__(self, info: int = 3):
        self.info = info
        self.calls = 0

    def general_eigenvalues(self, a):
        self.calls += 1
        n = np.shape(a)[0]
        return GeneralEigenResult(np.zeros(n), np.zeros(n), self.info, "broken")

    def tridiagonal_eigenpairs(self, d, e):
        self.calls += 1
        n = np.size(d)
        return TridiagonalEigenResult(np.zeros(n), np.eye(n), self.info, "broken")


@pytest.fixture
def failing_solver():
    return FailingEigensolver()
