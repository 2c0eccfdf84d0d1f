"""
Operator registry for minimization, proximal and projection operators.

Each operator is implemented per (function type, options type) pair by the
function types themselves and registered here, either with a decorator or
directly::

    @register_prox(L1Norm, ExactArgmin)
    def _prox_l1(y, step, g, options, out):
        out[...] = soft_threshold(y, step * g.weight)

    register_argmin(DiffPlusProxFunction, ArgminFISTA, fista_argmin_)

Resolution walks the MRO of the function type first and of the options type
second, so the most specific registered pair wins. When no pair matches, the
universal fallback raises ``NotImplementedMethodError``.

Implementation signatures:
    argmin:   impl(fun, x, options) -> x           (x is in/out)
    prox:     impl(y, step, g, options, out) -> None
    proj:     impl(y, epsilon, g, options, out) -> None
    proj_set: impl(y, C, options, out) -> None
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Dict, Optional, Tuple, Type

import numpy as np

from .array import ArrayLike, ensure_array
from .errors import NotImplementedMethodError

VALID_OPERATORS = {"argmin", "prox", "proj", "proj_set"}

# Global registry storage: operator -> {(function type, options type): implementation}
_REGISTRY: Dict[str, Dict[Tuple[type, type], Callable]] = {op: {} for op in VALID_OPERATORS}


def not_implemented(*args: Any, **kwargs: Any):
    """Universal fallback for every operator."""
    raise NotImplementedMethodError()


def register(operator: str, fun_type: Type, options_type: Type,
             implementation: Optional[Callable] = None, *, override: bool = False):
    """
    Register an operator implementation for a (function type, options type) pair.

    Can be used as decorator or called directly.

    Args:
        operator: One of 'argmin', 'prox', 'proj', 'proj_set'
        fun_type: Function (or constraint set) type the implementation handles
        options_type: Options type the implementation handles
        implementation: Implementation to register (decorator form if None)
        override: Whether to allow overriding an existing registration silently

    Returns:
        The implementation, or a decorator when ``implementation`` is None
    """
    if operator not in VALID_OPERATORS:
        raise ValueError(f"Invalid operator '{operator}'. Must be one of: {sorted(VALID_OPERATORS)}")

    def decorator(impl: Callable) -> Callable:
        if not callable(impl):
            raise TypeError(f"Operator implementation must be callable, got {impl!r}")
        key = (fun_type, options_type)
        existing = _REGISTRY[operator].get(key)
        if existing is not None and existing is not impl and not override:
            warnings.warn(
                f"Overriding existing {operator} for ({fun_type.__name__}, {options_type.__name__}): "
                f"{existing} -> {impl}. Use override=True to suppress this warning."
            )
        _REGISTRY[operator][key] = impl
        return impl

    if implementation is not None:
        return decorator(implementation)
    return decorator


def unregister(operator: str, fun_type: Type, options_type: Type) -> None:
    """Remove a registration; missing entries are ignored."""
    _REGISTRY[operator].pop((fun_type, options_type), None)


def register_argmin(fun_type, options_type, implementation=None, *, override=False):
    return register("argmin", fun_type, options_type, implementation, override=override)


def register_prox(fun_type, options_type, implementation=None, *, override=False):
    return register("prox", fun_type, options_type, implementation, override=override)


def register_proj(fun_type, options_type, implementation=None, *, override=False):
    return register("proj", fun_type, options_type, implementation, override=override)


def register_proj_set(set_type, options_type, implementation=None, *, override=False):
    return register("proj_set", set_type, options_type, implementation, override=override)


def resolve(operator: str, fun: Any, options: Any) -> Callable:
    """Most specific implementation of ``operator`` for ``(type(fun), type(options))``."""
    table = _REGISTRY[operator]
    for fun_cls in type(fun).__mro__:
        for options_cls in type(options).__mro__:
            impl = table.get((fun_cls, options_cls))
            if impl is not None:
                return impl
    return not_implemented


def is_implemented(operator: str, fun: Any, options: Any) -> bool:
    return resolve(operator, fun, options) is not not_implemented


# Generic operators

def argmin_(fun, x: np.ndarray, options=None) -> np.ndarray:
    """
    Minimize ``fun`` in place: ``x`` holds the initial estimate on entry and
    the minimizer on return.

    Args:
        fun: Minimizable function (e.g. differentiable + proximable term)
        x: In/out array
        options: Minimization options (default: ``fun.options``)

    Returns:
        x
    """
    if options is None:
        options = fun.options
    return resolve("argmin", fun, options)(fun, x, options)


def argmin(fun, initial_estimate: ArrayLike, options=None,
           out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Minimize ``fun`` starting from ``initial_estimate`` without modifying it.

    The estimate is copied into ``out`` (allocated when None), which is then
    updated in place and returned.
    """
    initial_estimate = ensure_array(initial_estimate, "initial_estimate")
    if out is None:
        out = np.array(initial_estimate, copy=True)
    else:
        out[...] = initial_estimate
    return argmin_(fun, out, options)


def prox(y: ArrayLike, step: float, g, options=None,
         out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Proximal operator ``argmin_x 1/2||x - y||^2 + step*g(x)``, written into ``out``.

    ``options`` defaults to the options carried by ``g``.
    """
    if options is None:
        options = g.options
    if out is None:
        out = np.empty_like(y)
    resolve("prox", g, options)(y, step, g, options, out)
    return out


def proj(y: ArrayLike, epsilon: float, g, options=None,
         out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Projection of ``y`` onto the sublevel set ``{x: g(x) <= epsilon}``, written into ``out``.

    ``options`` defaults to the options carried by ``g``.
    """
    if options is None:
        options = g.options
    if out is None:
        out = np.empty_like(y)
    resolve("proj", g, options)(y, epsilon, g, options, out)
    return out


def proj_set(y: ArrayLike, C, options=None,
             out: Optional[np.ndarray] = None) -> np.ndarray:
    """Projection of ``y`` onto the set ``C``, written into ``out``."""
    if options is None:
        options = C.options
    if out is None:
        out = np.empty_like(y)
    resolve("proj_set", C, options)(y, C, options, out)
    return out
