"""
Array helpers shared by the solver and the reference functions.

Everything in this package operates on NumPy arrays in place; these helpers
validate inputs at the public boundary and pick numeric kinds for scratch
buffers and scalar constants.
"""

from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from .errors import ProximableFunctionsError

ArrayLike = Any  # np.ndarray, or anything np.asarray accepts at the boundary


def ensure_array(x: Any, name: str = "x", dtype: Optional[Any] = None) -> NDArray:
    """
    Return ``x`` as a finite floating (real or complex) NumPy array.

    Arrays that already satisfy the requirements are returned as-is, so that
    in/out buffers keep their identity.

    Raises:
        ProximableFunctionsError: if ``x`` cannot be converted, is not of a
            floating kind, or contains inf/nan values.
    """
    if not isinstance(x, np.ndarray) or (dtype is not None and x.dtype != dtype):
        try:
            x = np.asarray(x, dtype=dtype)
        except (ValueError, TypeError) as e:
            raise ProximableFunctionsError(f"Cannot convert {name} to array: {e}") from e

    if not np.issubdtype(x.dtype, np.inexact):
        raise ProximableFunctionsError(
            f"{name} must have a real or complex floating dtype, got {x.dtype}"
        )
    if not np.all(np.isfinite(x)):
        raise ProximableFunctionsError(f"{name} contains non-finite values (inf/nan)")
    return x


def real_dtype(x: NDArray) -> np.dtype:
    """Real counterpart of the dtype of ``x`` (float64 for complex128, ...)."""
    return np.empty(0, dtype=x.dtype).real.dtype


def scalar_dtype(value: Any) -> np.dtype:
    """Numeric kind used for buffers that store values of the same kind as ``value``."""
    if isinstance(value, (np.floating, np.ndarray)) and np.issubdtype(value.dtype, np.floating):
        return value.dtype
    return np.dtype(np.float64)
