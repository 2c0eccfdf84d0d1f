"""
FISTA (Fast Iterative Shrinkage-Thresholding Algorithm) solver.

Accelerated proximal gradient method for min_x f(x) + g(x), with f
differentiable (gradient Lipschitz constant L) and g proximable:

    x_{n}   = prox_{g/L}(x - grad f(x) / L)
    t_{n}   = (1 + sqrt(1 + 4 t_{n-1}^2)) / 2
    x       = x_{n} + ((t_{n-1} - 1) / t_{n}) (x_{n} - x_{n-1})

The iteration count is fixed and L is given: there is no convergence test and
no backtracking.

Reference:
- Beck, A., & Teboulle, M. (2009). A fast iterative shrinkage-thresholding algorithm
  for linear inverse problems. SIAM Journal on Imaging Sciences, 2(1), 183-202.
"""

from __future__ import annotations

import logging

import numpy as np

from ..combined import DiffPlusProxFunction
from ..core.array import real_dtype
from ..core.dispatch import prox, register_argmin
from ..core.errors import ProximableFunctionsError, UnresolvedParameterError
from ..core.options import ArgminFISTA

logger = logging.getLogger(__name__)


def nesterov_momentum(t: float) -> float:
    """Momentum update t_{k+1} = (1 + sqrt(1 + 4 t_k^2)) / 2."""
    return (1 + np.sqrt(1 + 4 * t**2)) / 2


@register_argmin(DiffPlusProxFunction, ArgminFISTA)
def fista_argmin_(fun: DiffPlusProxFunction, x: np.ndarray, options: ArgminFISTA) -> np.ndarray:
    """
    Minimize ``fun.diff + fun.prox`` in place with FISTA.

    Args:
        fun: Composite objective
        x: Initial estimate on entry, final iterate on return
        options: FISTA options with ``niter`` and ``lipschitz_constant`` set

    Returns:
        x after exactly ``options.niter`` iterations

    Raises:
        UnresolvedParameterError: if ``niter`` or the Lipschitz constant is unset
        ProximableFunctionsError: if ``x`` does not have a floating dtype
    """
    if options.niter is None:
        raise UnresolvedParameterError("FISTA requires the number of iterations (niter) to be set")
    if options.lipschitz_constant is None:
        raise UnresolvedParameterError(
            "FISTA requires a Lipschitz constant; bind one with set_lipschitz_constant"
        )

    if not np.issubdtype(x.dtype, np.inexact):
        raise ProximableFunctionsError(f"x must have a real or complex floating dtype, got {x.dtype}")

    # Initialization
    T = real_dtype(x).type
    x_ = np.empty_like(x) if options.nesterov else x
    xprev_ = x.copy()
    gradient = np.empty_like(x)
    L = T(options.lipschitz_constant)
    counter = None if options.reset_counter is None else 0
    t0 = T(1)
    diff_fun = fun.diff
    prox_fun = fun.prox
    history = options.fun_history
    eval_fun = options.verbose or history is not None

    logger.debug(f"FISTA: niter={options.niter}, L={L}, nesterov={options.nesterov}, "
                 f"reset_counter={options.reset_counter}")

    for n in range(1, options.niter + 1):

        # Compute gradient
        if eval_fun:
            fval_n = diff_fun.fun_grad_eval(x, gradient)
            if history is not None:
                history[n - 1] = fval_n
        else:
            diff_fun.grad_eval(x, gradient)

        if options.verbose:
            print(f"Iter: {n}, fval: {fval_n}")

        # Proximal gradient step, with the proximable term's own options
        prox(x - gradient / L, 1 / L, prox_fun, out=x_)

        # Nesterov acceleration
        if options.nesterov:
            t = nesterov_momentum(t0)
            if n == 1:
                x[...] = x_
            else:
                x[...] = x_ + (t0 - 1) / t * (x_ - xprev_)
            if counter is not None:
                counter += 1

            t0 = t
            xprev_[...] = x_

            # Reset momentum (the counter keeps accumulating)
            if counter is not None and counter >= options.reset_counter:
                t0 = T(1)

    return x
