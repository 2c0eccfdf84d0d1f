"""
Finite-difference validation of gradient implementations.

Compares the analytic directional derivative <grad f(x), dx> against the
central difference (f(x + h dx) - f(x - h dx)) / (2h) along a random
direction scaled to the norm of x.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .core.array import ensure_array
from .core.interfaces import DifferentiableFunction

logger = logging.getLogger(__name__)


def gradient_error(fun: DifferentiableFunction, x: np.ndarray, *, step: float = 1e-5,
                   direction: Optional[np.ndarray] = None, rng=None) -> float:
    """Relative error between finite-difference and analytic directional derivatives."""
    x = ensure_array(x, "x")
    if direction is None:
        rng = np.random.default_rng(rng)
        direction = rng.standard_normal(x.shape)
        if np.iscomplexobj(x):
            direction = direction + 1j * rng.standard_normal(x.shape)
        x_norm = np.linalg.norm(x)
        direction *= (x_norm if x_norm > 0 else 1.0) / np.linalg.norm(direction)
    direction = ensure_array(direction, "direction")

    gradient = np.empty_like(x)
    fun.grad_eval(x, gradient)
    analytic = float(np.vdot(gradient, direction).real)
    finite_diff = (fun.fun_eval(x + step * direction) - fun.fun_eval(x - step * direction)) / (2 * step)

    error = abs(finite_diff - analytic) / max(abs(analytic), np.finfo(float).tiny)
    logger.debug(f"Gradient check: analytic={analytic}, finite difference={finite_diff}, "
                 f"relative error={error}")
    return error


def check_gradient(fun: DifferentiableFunction, x: np.ndarray, *, step: float = 1e-5,
                   rtol: float = 1e-6, direction: Optional[np.ndarray] = None, rng=None) -> bool:
    """
    Whether ``fun``'s gradient at ``x`` agrees with finite differences to ``rtol``.

    Args:
        fun: Differentiable function to check
        x: Evaluation point
        step: Finite-difference step h
        rtol: Admissible relative error
        direction: Perturbation direction (random, scaled to ||x||, when None)
        rng: Seed or generator for the random direction
    """
    return gradient_error(fun, x, step=step, direction=direction, rng=rng) <= rtol
