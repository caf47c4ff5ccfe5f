"""Tests for function.py: the plotted function y = cos²(x) / (x² + 1)."""

import math

import numpy as np
import pytest

from function import f


class TestScalar:

    def test_zero(self):
        """cos(0)² / 1 = 1."""
        assert f(0.0) == pytest.approx(1.0)

    def test_known_value(self):
        x = 3.8
        assert f(x) == pytest.approx(math.cos(x) ** 2 / (x * x + 1))

    def test_zero_at_cos_root(self):
        assert f(3 * math.pi / 2) == pytest.approx(0.0, abs=1e-15)

    def test_returns_python_float(self):
        assert isinstance(f(4.0), float)

    def test_even(self):
        assert f(-5.3) == pytest.approx(f(5.3))


class TestRangeOnDomain:
    """On [3.8, 7.6] the function stays within [0, 1]."""

    @pytest.mark.parametrize("x", np.linspace(3.8, 7.6, 97).tolist())
    def test_bounded(self, x: float):
        y = f(x)
        assert 0.0 <= y <= 1.0


class TestArray:

    def test_shape_preserved(self):
        xs = np.linspace(3.8, 7.6, 50)
        assert f(xs).shape == (50,)

    def test_matches_scalar(self):
        xs = np.linspace(3.8, 7.6, 25)
        ys = f(xs)
        for x, y in zip(xs, ys):
            assert y == pytest.approx(f(float(x)))
