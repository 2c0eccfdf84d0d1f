"""
Abstract function types for composite minimization.

Defines contracts for: DifferentiableFunction, ProximableFunction,
ProjectionableSet, MinimizableFunction.

Concrete function libraries subclass these and register their operators in
:mod:`proximable_functions.core.dispatch` per options type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from . import dispatch
from .options import ArgminOptions, exact_argmin


class DifferentiableFunction(ABC):
    """
    Smooth term f with value and gradient evaluation.

    Subclasses implement at least :meth:`fun_grad_eval`; :meth:`grad_eval`
    and :meth:`fun_eval` are derived from it and may be overridden when a
    cheaper evaluation exists.
    """

    @abstractmethod
    def fun_grad_eval(self, x: np.ndarray, out: np.ndarray) -> float:
        """Write grad f(x) into ``out`` and return f(x)."""
        ...

    def grad_eval(self, x: np.ndarray, out: np.ndarray) -> None:
        """Write grad f(x) into ``out``."""
        self.fun_grad_eval(x, out)

    def fun_eval(self, x: np.ndarray) -> float:
        """Evaluate f(x)."""
        return self.fun_grad_eval(x, np.empty_like(x))

    def gradient(self, x: np.ndarray) -> np.ndarray:
        """Allocating gradient evaluation."""
        out = np.empty_like(x)
        self.grad_eval(x, out)
        return out

    def __call__(self, x: np.ndarray) -> float:
        return self.fun_eval(x)

    def __add__(self, other):
        if isinstance(other, ProximableFunction):
            from ..combined import combine
            return combine(self, other)
        return NotImplemented


class ProximableFunction(ABC):
    """
    Non-smooth term g whose proximal/projection operators can be evaluated.

    ``options`` are the options used when g's proximal map is evaluated as a
    sub-step of an outer solver. Instances may rebind it.
    """

    options: ArgminOptions = exact_argmin()

    @abstractmethod
    def value(self, x: np.ndarray) -> float:
        """Evaluate g(x)."""
        ...

    def __call__(self, x: np.ndarray) -> float:
        return self.value(x)

    def prox(self, y: np.ndarray, step: float, options: Optional[ArgminOptions] = None,
             out: Optional[np.ndarray] = None) -> np.ndarray:
        return dispatch.prox(y, step, self, options, out)

    def proj(self, y: np.ndarray, epsilon: float, options: Optional[ArgminOptions] = None,
             out: Optional[np.ndarray] = None) -> np.ndarray:
        return dispatch.proj(y, epsilon, self, options, out)

    def __add__(self, other):
        if isinstance(other, DifferentiableFunction):
            from ..combined import combine
            return combine(other, self)
        return NotImplemented


class ProjectionableSet(ABC):
    """Constraint set C with a (possibly approximate) projection operator."""

    options: ArgminOptions = exact_argmin()

    def proj(self, y: np.ndarray, options: Optional[ArgminOptions] = None,
             out: Optional[np.ndarray] = None) -> np.ndarray:
        return dispatch.proj_set(y, self, options, out)


class MinimizableFunction(ABC):
    """Objective whose minimizer is computed by :func:`dispatch.argmin`."""

    options: ArgminOptions = exact_argmin()

    @abstractmethod
    def value(self, x: np.ndarray) -> float:
        ...

    def __call__(self, x: np.ndarray) -> float:
        return self.value(x)

    def argmin(self, initial_estimate: np.ndarray, options: Optional[ArgminOptions] = None,
               out: Optional[np.ndarray] = None) -> np.ndarray:
        return dispatch.argmin(self, initial_estimate, options, out)
