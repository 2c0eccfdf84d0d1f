"""
Test configuration and fixtures for proximable-functions tests.

Provides concrete test functions (squared distance, L1 norm with soft
thresholding), problem fixtures and a reference FISTA loop.
"""

import numpy as np
import pytest

from proximable_functions import (
    DifferentiableFunction, ProximableFunction, ExactArgmin, register_prox,
    leastsquares_misfit,
)


def soft_threshold(z, t):
    """Soft thresholding operator: sign(z) * max(|z| - t, 0)."""
    return np.sign(z) * np.maximum(np.abs(z) - t, 0.0)


class SquaredDistance(DifferentiableFunction):
    """f(x) = 1/2 ||x - y||^2 (gradient Lipschitz constant 1)."""

    def __init__(self, y):
        self.y = np.asarray(y)

    def fun_grad_eval(self, x, out):
        r = x - self.y
        out[...] = r
        return 0.5 * float(np.vdot(r, r).real)


class CountingDifferentiable(DifferentiableFunction):
    """Wraps a differentiable function and counts evaluations by kind."""

    def __init__(self, fun, fail_at_call=None):
        self.fun = fun
        self.fun_grad_calls = 0
        self.grad_calls = 0
        self.fail_at_call = fail_at_call

    def _check_failure(self):
        if self.fail_at_call is not None and self.fun_grad_calls + self.grad_calls >= self.fail_at_call:
            raise RuntimeError("gradient evaluation failed")

    def fun_grad_eval(self, x, out):
        self._check_failure()
        self.fun_grad_calls += 1
        return self.fun.fun_grad_eval(x, out)

    def grad_eval(self, x, out):
        self._check_failure()
        self.grad_calls += 1
        self.fun.grad_eval(x, out)


class L1Norm(ProximableFunction):
    """g(x) = weight * ||x||_1, exact proximal operator by soft thresholding."""

    def __init__(self, weight=1.0, options=None):
        self.weight = weight
        if options is not None:
            self.options = options

    def value(self, x):
        return self.weight * float(np.sum(np.abs(x)))


@register_prox(L1Norm, ExactArgmin, override=True)
def _prox_l1(y, step, g, options, out):
    out[...] = soft_threshold(y, step * g.weight)


def prox_grad_step(diff, g, x, L):
    """Plain proximal-gradient step prox_{g/L}(x - grad f(x) / L)."""
    return soft_threshold(x - diff.gradient(x) / L, g.weight / L)


def reference_fista(diff, g, x0, L, niter, nesterov=True, reset_counter=None):
    """
    Allocating FISTA loop returning every iterate x_1..x_niter.

    Momentum is restarted whenever the (never reset) counter of accelerated
    iterations reaches ``reset_counter``.
    """
    x = np.array(x0, dtype=float)
    xprev_ = x.copy()
    t0 = 1.0
    counter = 0
    iterates = []
    for n in range(1, niter + 1):
        x_ = prox_grad_step(diff, g, x, L)
        if nesterov:
            t = (1.0 + np.sqrt(1.0 + 4.0 * t0**2)) / 2.0
            x = x_.copy() if n == 1 else x_ + (t0 - 1.0) / t * (x_ - xprev_)
            counter += 1
            t0 = t
            xprev_ = x_.copy()
            if reset_counter is not None and counter >= reset_counter:
                t0 = 1.0
        else:
            x = x_
        iterates.append(x.copy())
    return iterates


@pytest.fixture
def random_seed():
    """Fixed random seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(random_seed):
    return np.random.default_rng(random_seed)


@pytest.fixture
def tolerance():
    """Standard numerical tolerance."""
    return 1e-6


@pytest.fixture
def denoising_problem(rng):
    """1/2||x - y||^2 + lam ||x||_1 with known soft-threshold solution."""
    y = rng.standard_normal(50) * 2.0
    lam = 0.5
    return {
        'y': y,
        'lam': lam,
        'diff': SquaredDistance(y),
        'prox': L1Norm(lam),
        'solution': soft_threshold(y, lam),
    }


@pytest.fixture
def lasso_problem(rng):
    """Overdetermined LASSO 1/2||Ax - y||^2 + lam ||x||_1."""
    n_samples, n_features = 40, 12
    A = rng.standard_normal((n_samples, n_features)) / np.sqrt(n_samples)
    x_true = np.zeros(n_features)
    x_true[[1, 4, 7]] = [1.5, -2.0, 0.8]
    y = A @ x_true + 0.01 * rng.standard_normal(n_samples)
    lam = 0.05
    return {
        'A': A,
        'y': y,
        'lam': lam,
        'x_true': x_true,
        'diff': leastsquares_misfit(A, y),
        'prox': L1Norm(lam),
        'L': float(np.linalg.norm(A, 2) ** 2),
    }
