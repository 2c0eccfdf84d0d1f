"""
Core abstractions: options, abstract function types, operator dispatch.
"""

from .array import ArrayLike, ensure_array
from .dispatch import (
    argmin, argmin_, prox, proj, proj_set,
    register_argmin, register_prox, register_proj, register_proj_set,
    not_implemented,
)
from .errors import (
    ProximableFunctionsError, InvalidOptionsError, UnresolvedParameterError,
    NotImplementedMethodError,
)
from .interfaces import (
    DifferentiableFunction, ProximableFunction, ProjectionableSet, MinimizableFunction,
)
from .options import (
    ArgminOptions, ExactArgmin, exact_argmin, ArgminFISTA, fista_options,
    lipschitz_constant, set_lipschitz_constant, fun_history,
)

__all__ = [
    'ArrayLike', 'ensure_array',
    'argmin', 'argmin_', 'prox', 'proj', 'proj_set',
    'register_argmin', 'register_prox', 'register_proj', 'register_proj_set', 'not_implemented',
    'ProximableFunctionsError', 'InvalidOptionsError', 'UnresolvedParameterError',
    'NotImplementedMethodError',
    'DifferentiableFunction', 'ProximableFunction', 'ProjectionableSet', 'MinimizableFunction',
    'ArgminOptions', 'ExactArgmin', 'exact_argmin', 'ArgminFISTA', 'fista_options',
    'lipschitz_constant', 'set_lipschitz_constant', 'fun_history',
]
