"""
Least-squares misfit f(x) = 1/2 ||A x - y||^2.

Reference differentiable term: A may be a dense array, a scipy sparse matrix
or a ``scipy.sparse.linalg.LinearOperator`` acting on flattened inputs, so
that x keeps its own shape (e.g. images) while A maps between vector spaces.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.sparse.linalg import LinearOperator, aslinearoperator

from ..core.array import ArrayLike, ensure_array
from ..core.interfaces import DifferentiableFunction


class LeastSquaresMisfit(DifferentiableFunction):
    """
    f(x) = 1/2 ||A x - y||^2, grad f(x) = A^H (A x - y).

    Args:
        A: Forward operator (array, sparse matrix or LinearOperator)
        y: Observed data; its shape is kept for residuals
        input_shape: Shape of x (default: ``(A.shape[1],)``)
    """

    def __init__(self, A, y: ArrayLike, input_shape: Optional[tuple] = None):
        self.A: LinearOperator = aslinearoperator(A)
        self.y = ensure_array(y, "y")
        if self.y.size != self.A.shape[0]:
            raise ValueError(f"y has {self.y.size} entries but A has {self.A.shape[0]} rows")
        self.input_shape = tuple(input_shape) if input_shape is not None else (self.A.shape[1],)
        if int(np.prod(self.input_shape)) != self.A.shape[1]:
            raise ValueError(f"input_shape {self.input_shape} does not match A with "
                             f"{self.A.shape[1]} columns")

    def residual(self, x: np.ndarray) -> np.ndarray:
        return self.A.matvec(x.reshape(-1)) - self.y.reshape(-1)

    def fun_grad_eval(self, x: np.ndarray, out: np.ndarray) -> float:
        r = self.residual(x)
        out[...] = self.A.rmatvec(r).reshape(self.input_shape)
        return 0.5 * float(np.vdot(r, r).real)

    def grad_eval(self, x: np.ndarray, out: np.ndarray) -> None:
        out[...] = self.A.rmatvec(self.residual(x)).reshape(self.input_shape)

    def fun_eval(self, x: np.ndarray) -> float:
        r = self.residual(x)
        return 0.5 * float(np.vdot(r, r).real)

    def lipschitz_constant(self, n_iter: int = 50, tol: float = 1e-7, rng=None) -> float:
        """
        Estimate L = ||A^H A||_2 using power iteration.

        Iterates v <- A^H A v / ||A^H A v|| and returns the Rayleigh quotient
        v^H A^H A v at convergence.
        """
        rng = np.random.default_rng(rng)
        v = rng.normal(size=(self.A.shape[1],))
        v /= (np.linalg.norm(v) + 1e-12)
        last = 0.0
        lam = 0.0
        for _ in range(n_iter):
            w = self.A.rmatvec(self.A.matvec(v))
            nrm = np.linalg.norm(w) + 1e-12
            v = w / nrm
            lam = float(np.vdot(v, self.A.rmatvec(self.A.matvec(v))).real)
            if abs(lam - last) < tol * max(1.0, last):
                break
            last = lam
        return max(lam, 1e-12)


def leastsquares_misfit(A, y: ArrayLike, input_shape: Optional[tuple] = None) -> LeastSquaresMisfit:
    return LeastSquaresMisfit(A, y, input_shape=input_shape)
