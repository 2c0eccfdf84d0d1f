"""Iterative solvers registered for composite objectives."""

from .fista import fista_argmin_, nesterov_momentum

__all__ = ['fista_argmin_', 'nesterov_momentum']
