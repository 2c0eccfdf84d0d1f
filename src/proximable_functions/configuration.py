"""
File-based configuration of FISTA options.

YAML example::

    lipschitz_constant: 1.0
    niter: 200
    reset_counter: 50
    fun_history: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveFloat, PositiveInt, ValidationError

from .core.errors import InvalidOptionsError
from .core.options import ArgminFISTA, fista_options


class FISTAConfig(BaseModel):
    # Strict: no coercion of 3.0 -> 3 or "yes" -> True
    model_config = ConfigDict(extra="forbid", strict=True)

    lipschitz_constant: Optional[PositiveFloat] = None
    nesterov: bool = True
    reset_counter: Optional[PositiveInt] = None
    niter: Optional[NonNegativeInt] = None
    verbose: bool = False
    fun_history: bool = False

    def to_options(self) -> ArgminFISTA:
        return fista_options(self.lipschitz_constant,
                             nesterov=self.nesterov,
                             reset_counter=self.reset_counter,
                             niter=self.niter,
                             verbose=self.verbose,
                             fun_history=self.fun_history)


def load_fista_config(path: Union[str, Path]) -> FISTAConfig:
    """Read a :class:`FISTAConfig` from a YAML file; an empty file yields the defaults."""
    with open(path, "r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise InvalidOptionsError(f"FISTA configuration in {path} must be a mapping")
    try:
        return FISTAConfig(**raw)
    except ValidationError as e:
        raise InvalidOptionsError(f"Config validation failed: {e}") from e


def load_fista_options(path: Union[str, Path]) -> ArgminFISTA:
    return load_fista_config(path).to_options()
