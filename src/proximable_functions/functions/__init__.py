"""Reference differentiable terms."""

from .leastsquares import LeastSquaresMisfit, leastsquares_misfit

__all__ = ['LeastSquaresMisfit', 'leastsquares_misfit']
