"""
Tests for composite objective construction.
"""

import dataclasses

import numpy as np
import pytest

from proximable_functions import DiffPlusProxFunction, ExactArgmin, combine, fista_options
from tests.conftest import L1Norm, SquaredDistance


@pytest.fixture
def terms():
    return SquaredDistance(np.array([1.0, -2.0, 0.5])), L1Norm(0.3)


class TestAddition:

    def test_diff_plus_prox(self, terms):
        f, g = terms
        fun = f + g
        assert isinstance(fun, DiffPlusProxFunction)
        assert fun.diff is f
        assert fun.prox is g
        assert isinstance(fun.options, ExactArgmin)

    def test_prox_plus_diff_keeps_differentiable_term_first(self, terms):
        f, g = terms
        fun = g + f
        assert fun.diff is f
        assert fun.prox is g

    def test_unsupported_operands(self, terms):
        f, g = terms
        with pytest.raises(TypeError):
            f + f
        with pytest.raises(TypeError):
            g + g
        with pytest.raises(TypeError):
            f + 1.0


class TestCombine:

    def test_combine_with_options_either_order(self, terms):
        f, g = terms
        options = fista_options(1.0, niter=10)
        for fun in (combine(f, g, options), combine(g, f, options=options)):
            assert fun.diff is f
            assert fun.prox is g
            assert fun.options is options

    def test_combine_rejects_two_smooth_terms(self, terms):
        f, _ = terms
        with pytest.raises(TypeError, match="one differentiable and one proximable"):
            combine(f, SquaredDistance(np.zeros(3)))

    def test_with_options_returns_new_value(self, terms):
        f, g = terms
        fun = f + g
        options = fista_options(1.0, niter=3)
        bound = fun.with_options(options)
        assert bound.options is options
        assert isinstance(fun.options, ExactArgmin)
        assert bound.diff is f and bound.prox is g

    def test_combined_objective_is_immutable(self, terms):
        f, g = terms
        fun = f + g
        with pytest.raises(dataclasses.FrozenInstanceError):
            fun.options = fista_options(1.0)

    def test_value_is_sum_of_terms(self, terms):
        f, g = terms
        x = np.array([0.5, 0.5, -1.0])
        assert (f + g)(x) == pytest.approx(f(x) + g(x))
