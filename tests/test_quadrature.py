import math
import warnings

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from numpy.polynomial.hermite import hermgauss
from numpy.testing import assert_allclose

from ghquad.core.errors import EigensolverError, PrecisionWarning
from ghquad.core.quadrature import (
    SQRT_PI,
    QuadratureParams,
    QuadratureRule,
    gauss_hermite,
    gauss_hermite_direct,
)

ORCHESTRATORS = [gauss_hermite, gauss_hermite_direct]


# ---------------------------------------------------------------------------
# Concrete rules
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("rule_fn", ORCHESTRATORS)
def test_order_one(rule_fn):
    x, w = rule_fn(1)
    assert_allclose(x, [0.0], atol=1e-15)
    assert_allclose(w, [math.sqrt(math.pi)], rtol=1e-14)


@pytest.mark.parametrize("rule_fn", ORCHESTRATORS)
def test_order_two(rule_fn):
    rule = rule_fn(2).sorted()
    assert_allclose(rule.x, [-1 / math.sqrt(2), 1 / math.sqrt(2)], rtol=1e-12)
    assert_allclose(rule.w, [SQRT_PI / 2, SQRT_PI / 2], rtol=1e-12)
    assert_allclose(rule.w, [0.88622693, 0.88622693], rtol=1e-8)


def test_order_five_stable():
    x, w = gauss_hermite(5)
    assert np.min(np.abs(x)) < 1e-13
    assert np.all(w > 0)
    xs = np.sort(x)
    assert_allclose(xs, -xs[::-1], atol=1e-13)


@pytest.mark.parametrize("n", [1, 2, 5, 20, 50, 100])
def test_stable_matches_numpy_hermgauss(n):
    rule = gauss_hermite(n).sorted()
    x_ref, w_ref = hermgauss(n)
    assert_allclose(rule.x, x_ref, rtol=1e-12, atol=1e-12)
    assert_allclose(rule.w, w_ref, rtol=1e-8, atol=1e-14)


@pytest.mark.parametrize("n", [2, 3, 5, 10])
def test_direct_agrees_with_stable(n):
    direct = gauss_hermite_direct(n).sorted()
    stable = gauss_hermite(n).sorted()
    assert_allclose(direct.x, stable.x, rtol=1e-10, atol=1e-12)
    assert_allclose(direct.w, stable.w, rtol=1e-8)


@pytest.mark.parametrize("solver", ["lapack", "numpy"])
def test_solver_choice_through_params(solver):
    params = QuadratureParams(solver=solver)
    a = gauss_hermite(6, params).sorted()
    b = gauss_hermite_direct(6, params).sorted()
    assert_allclose(a.x, b.x, atol=1e-12)
    assert_allclose(a.w, b.w, rtol=1e-9)


@pytest.mark.parametrize("rule_fn", ORCHESTRATORS)
def test_polynomial_moments_are_exact(rule_fn):
    # exact up to degree 2n - 1 = 9
    rule = rule_fn(5)
    assert rule.integrate(lambda x: x**2) == pytest.approx(SQRT_PI / 2, rel=1e-10)
    assert rule.integrate(lambda x: x**4) == pytest.approx(3 * SQRT_PI / 4, rel=1e-10)
    assert rule.integrate(lambda x: x**8) == pytest.approx(105 * SQRT_PI / 16, rel=1e-10)
    assert rule.integrate(lambda x: x**7) == pytest.approx(0.0, abs=1e-10)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------
@settings(max_examples=40, deadline=None)
@given(n=st.integers(min_value=1, max_value=150))
def test_weights_sum_to_sqrt_pi(n):
    _, w = gauss_hermite(n)
    assert abs(np.sum(w) - SQRT_PI) < 1e-12
    assert np.all(w >= 0)


@settings(max_examples=40, deadline=None)
@given(n=st.integers(min_value=1, max_value=150))
def test_nodes_symmetric_about_zero(n):
    x, _ = gauss_hermite(n)
    xs = np.sort(x)
    assert_allclose(xs, -xs[::-1], atol=1e-9)
    assert np.all(np.diff(xs) > 0)


@settings(max_examples=15, deadline=None)
@given(n=st.integers(min_value=1, max_value=12))
def test_direct_weights_sum_to_sqrt_pi(n):
    _, w = gauss_hermite_direct(n)
    assert np.sum(w) == pytest.approx(SQRT_PI, rel=1e-9)


# ---------------------------------------------------------------------------
# Errors and warnings
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("rule_fn", ORCHESTRATORS)
@pytest.mark.parametrize("n", [0, -3, 2.5, True, None])
def test_rejects_invalid_order(rule_fn, n):
    with pytest.raises(ValueError):
        rule_fn(n)


@pytest.mark.parametrize("rule_fn", ORCHESTRATORS)
def test_solver_failure_propagates(rule_fn, failing_solver):
    with pytest.raises(EigensolverError) as excinfo:
        rule_fn(4, eigensolver=failing_solver)
    assert excinfo.value.info == 3
    assert failing_solver.calls == 1


def test_direct_warns_above_order_limit():
    params = QuadratureParams(direct_order_limit=3)
    with pytest.warns(PrecisionWarning, match="unreliable"):
        x, w = gauss_hermite_direct(4, params)
    assert x.shape == w.shape == (4,)


def test_direct_silent_at_order_limit():
    params = QuadratureParams(direct_order_limit=8)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        gauss_hermite_direct(8, params)


def test_direct_refuses_orders_that_overflow():
    with pytest.warns(PrecisionWarning):
        with pytest.raises(OverflowError, match="float64"):
            gauss_hermite_direct(300)


def test_stable_handles_high_order_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        x, w = gauss_hermite(200)
    assert x.shape == (200,)
    assert abs(np.sum(w) - SQRT_PI) < 1e-12


# ---------------------------------------------------------------------------
# QuadratureRule
# ---------------------------------------------------------------------------
def test_rule_unpacks_and_sorts():
    rule = QuadratureRule(np.array([1.0, -1.0, 0.0]), np.array([0.1, 0.2, 0.3]))
    x, w = rule
    assert len(rule) == 3
    s = rule.sorted()
    assert_allclose(s.x, [-1.0, 0.0, 1.0])
    assert_allclose(s.w, [0.2, 0.3, 0.1])
    assert_allclose(x, [1.0, -1.0, 0.0])


def test_rule_shape_mismatch():
    with pytest.raises(ValueError, match="same shape"):
        QuadratureRule(np.zeros(3), np.zeros(2))


def test_rule_integrate_vector_valued():
    rule = gauss_hermite(6)
    out = rule.integrate(lambda x: np.stack([np.ones_like(x), x**2], axis=1))
    assert_allclose(out, [SQRT_PI, SQRT_PI / 2], rtol=1e-12)


def test_rule_expectation_under_normal():
    rule = gauss_hermite(10)
    mean, std = 1.0, 2.0
    assert rule.expectation(lambda z: np.ones_like(z), mean, std) == pytest.approx(1.0)
    assert rule.expectation(lambda z: z, mean, std) == pytest.approx(mean)
    assert rule.expectation(lambda z: z**2, mean, std) == pytest.approx(mean**2 + std**2)
