"""
Minimization options.

Options values select which strategy the generic operators (``argmin``,
``prox``, ``proj``) use for a given function type:

- ``ExactArgmin``: use the function's own analytic implementation.
- ``ArgminFISTA``: iterative solver for ``min_x f(x) + g(x)`` with ``f``
  differentiable and ``g`` proximable (Beck & Teboulle, 2009).

Options are immutable values. The only mutable part is the optional
objective-history buffer of ``ArgminFISTA``, which the solver fills in place.

References:
- Beck, A., & Teboulle, M. (2009). A fast iterative shrinkage-thresholding algorithm
  for linear inverse problems. SIAM Journal on Imaging Sciences, 2(1), 183-202.
"""

from __future__ import annotations

import dataclasses
import numbers
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .array import scalar_dtype
from .errors import InvalidOptionsError


class ArgminOptions:
    """Base class of every minimization options variant."""
    pass


@dataclass(frozen=True)
class ExactArgmin(ArgminOptions):
    """Stateless marker requesting the analytic proximal/projection/argmin of a function."""
    pass


_EXACT_ARGMIN = ExactArgmin()


def exact_argmin() -> ExactArgmin:
    """
    Exact optimization options for proximal/projection operators.

    Operators requested with these options raise
    ``NotImplementedMethodError`` when the function type does not provide an
    analytically-defined implementation.
    """
    return _EXACT_ARGMIN


@dataclass(frozen=True, eq=False)
class ArgminFISTA(ArgminOptions):
    """
    FISTA solver options. Usually built with :func:`fista_options`, which
    allocates the history buffer; direct construction is validated the same way.

    Attributes:
        lipschitz_constant: Step-size constant L (step = 1/L), None until bound
        nesterov: Whether Nesterov momentum is applied
        reset_counter: Number of accelerated iterations after which momentum is reset
        niter: Total (fixed) number of iterations
        verbose: Print iteration index and objective value
        fun_history: Buffer of length ``niter`` receiving f(x) per iteration, or None
    """
    lipschitz_constant: Optional[float] = None
    nesterov: bool = True
    reset_counter: Optional[int] = None
    niter: Optional[int] = None
    verbose: bool = False
    fun_history: Optional[np.ndarray] = None

    def __post_init__(self):
        _check_parameters(self.lipschitz_constant, self.reset_counter, self.niter)
        if self.fun_history is not None and not (
                isinstance(self.fun_history, np.ndarray) and self.niter is not None
                and self.fun_history.shape == (self.niter,)):
            raise InvalidOptionsError(
                f"fun_history must be None or an array of shape (niter,) = ({self.niter},), "
                f"got {getattr(self.fun_history, 'shape', type(self.fun_history).__name__)}")

    def with_lipschitz_constant(self, L: float) -> "ArgminFISTA":
        """Copy of these options bound to ``L``; all other fields are shared unchanged."""
        _check_lipschitz_constant(L)
        return dataclasses.replace(self, lipschitz_constant=L)

    @property
    def records_history(self) -> bool:
        return self.fun_history is not None


def fista_options(L: Optional[float],
                  *,
                  nesterov: bool = True,
                  reset_counter: Optional[int] = None,
                  niter: Optional[int] = None,
                  verbose: bool = False,
                  fun_history: bool = False) -> ArgminFISTA:
    """
    FISTA iterative solver options for the problem

        min_x f(x) + g(x)

    where ``g`` is a "proximable" function. They can also be used as the
    options of proximal or projection operators.

    ``L`` should satisfy L >= Lip(grad f) and is problem specific. It may be
    left as None and bound later with :func:`set_lipschitz_constant`, since
    it is often only known once the smooth term is.

    Args:
        L: Lipschitz constant of the gradient of f, or None
        nesterov: Enable Nesterov acceleration
        reset_counter: Number of iterations after which the momentum is reset
            (None: never reset)
        niter: Total number of iterations
        verbose: Print iteration index and f(x) at every iteration
        fun_history: Store f(x) at every iteration, retrievable with
            :func:`fun_history` after minimization. Only honoured when
            ``niter`` is given.

    Returns:
        ArgminFISTA options

    Note:
        When setting the options of proximal or projection operators, follow
        the recommendations of each proximable function on how to choose L.
        The underlying optimization may be an algebraic reformulation of
        min_x 1/2||x-y||^2 + lambda*g(x), so f is not necessarily 1/2||x-y||^2.
    """
    _check_parameters(L, reset_counter, niter)

    fval = None
    if fun_history and niter is not None:
        fval = np.empty(int(niter), dtype=scalar_dtype(L))

    return ArgminFISTA(lipschitz_constant=L,
                       nesterov=bool(nesterov),
                       reset_counter=None if reset_counter is None else int(reset_counter),
                       niter=None if niter is None else int(niter),
                       verbose=bool(verbose),
                       fun_history=fval)


def lipschitz_constant(options: ArgminFISTA) -> Optional[float]:
    return options.lipschitz_constant


def set_lipschitz_constant(options: ArgminFISTA, L: float) -> ArgminFISTA:
    return options.with_lipschitz_constant(L)


def fun_history(options: ArgminFISTA) -> Optional[np.ndarray]:
    return options.fun_history


def _is_int(value, minimum: int) -> bool:
    return (isinstance(value, numbers.Integral) and not isinstance(value, bool)
            and value >= minimum)


def _check_lipschitz_constant(L) -> None:
    if (not isinstance(L, numbers.Real) or isinstance(L, bool)
            or not np.isfinite(L) or L <= 0):
        raise InvalidOptionsError(f"Lipschitz constant must be a finite positive real, got {L!r}")


def _check_parameters(L, reset_counter, niter) -> None:
    if L is not None:
        _check_lipschitz_constant(L)
    if reset_counter is not None and not _is_int(reset_counter, minimum=1):
        raise InvalidOptionsError(f"reset_counter must be a positive integer, got {reset_counter!r}")
    if niter is not None and not _is_int(niter, minimum=0):
        raise InvalidOptionsError(f"niter must be a non-negative integer, got {niter!r}")
