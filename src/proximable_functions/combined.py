"""
Composite objective f + g with f differentiable and g proximable.

Built with :func:`combine` or the ``+`` operator (either order):

    >>> fun = f + g                       # exact options
    >>> fun = combine(g, f, options=fista_options(1.0, niter=100))
    >>> x = fun.argmin(x0)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .core.interfaces import DifferentiableFunction, MinimizableFunction, ProximableFunction
from .core.options import ArgminOptions, exact_argmin


@dataclass(frozen=True, eq=False)
class DiffPlusProxFunction(MinimizableFunction):
    """
    Immutable pairing of a differentiable term, a proximable term and the
    options used to minimize their sum.
    """
    diff: DifferentiableFunction
    prox: ProximableFunction
    options: ArgminOptions = field(default_factory=exact_argmin)

    def value(self, x: np.ndarray) -> float:
        return self.diff.fun_eval(x) + self.prox.value(x)

    def with_options(self, options: ArgminOptions) -> "DiffPlusProxFunction":
        return dataclasses.replace(self, options=options)


def combine(first, second, options: Optional[ArgminOptions] = None) -> DiffPlusProxFunction:
    """
    Build f + g from a differentiable and a proximable term given in any order.

    The differentiable term is always stored first.

    Raises:
        TypeError: if the operands are not one differentiable and one proximable term
    """
    if options is None:
        options = exact_argmin()
    if isinstance(first, DifferentiableFunction) and isinstance(second, ProximableFunction):
        return DiffPlusProxFunction(first, second, options)
    if isinstance(first, ProximableFunction) and isinstance(second, DifferentiableFunction):
        return DiffPlusProxFunction(second, first, options)
    raise TypeError(
        f"Cannot combine {type(first).__name__} and {type(second).__name__}: "
        f"expected one differentiable and one proximable function"
    )
