"""
Composite minimization of f(x) + g(x), f differentiable and g proximable.

Example:
    >>> from proximable_functions import fista_options, leastsquares_misfit
    >>> f = leastsquares_misfit(A, y)
    >>> options = fista_options(f.lipschitz_constant(), niter=200, fun_history=True)
    >>> x = (f + g).with_options(options).argmin(np.zeros(n))
    >>> fun_history(options)   # f(x) at every iteration
"""

from .__about__ import __version__

from .core import (
    argmin, argmin_, prox, proj, proj_set,
    register_argmin, register_prox, register_proj, register_proj_set,
    ProximableFunctionsError, InvalidOptionsError, UnresolvedParameterError,
    NotImplementedMethodError,
    DifferentiableFunction, ProximableFunction, ProjectionableSet, MinimizableFunction,
    ArgminOptions, ExactArgmin, exact_argmin, ArgminFISTA, fista_options,
    lipschitz_constant, set_lipschitz_constant, fun_history,
)
from .combined import DiffPlusProxFunction, combine
# Importing the solvers registers them with the dispatcher
from .solvers import fista_argmin_, nesterov_momentum
from .functions import LeastSquaresMisfit, leastsquares_misfit
from .gradient_check import check_gradient, gradient_error
from .configuration import FISTAConfig, load_fista_config, load_fista_options

__all__ = [
    '__version__',
    'argmin', 'argmin_', 'prox', 'proj', 'proj_set',
    'register_argmin', 'register_prox', 'register_proj', 'register_proj_set',
    'ProximableFunctionsError', 'InvalidOptionsError', 'UnresolvedParameterError',
    'NotImplementedMethodError',
    'DifferentiableFunction', 'ProximableFunction', 'ProjectionableSet', 'MinimizableFunction',
    'ArgminOptions', 'ExactArgmin', 'exact_argmin', 'ArgminFISTA', 'fista_options',
    'lipschitz_constant', 'set_lipschitz_constant', 'fun_history',
    'DiffPlusProxFunction', 'combine',
    'fista_argmin_', 'nesterov_momentum',
    'LeastSquaresMisfit', 'leastsquares_misfit',
    'check_gradient', 'gradient_error',
    'FISTAConfig', 'load_fista_config', 'load_fista_options',
]
