"""Unit tests for the Newton-Raphson root finder"""

import math
import pytest
from quote_gateway.domain.newton import optimize


def test_optimize_linear_root():
    assert optimize(lambda x: x - 0.25) == pytest.approx(0.25, abs=1e-9)


def test_optimize_quadratic_root():
    assert optimize(lambda x: x * x - 2, x0=1.0) == pytest.approx(math.sqrt(2), abs=1e-6)


def test_optimize_returns_seed_when_already_root():
    assert optimize(lambda x: x) == 0.0


def test_optimize_zero_derivative():
    """Test flat function stops instead of dividing by zero"""
    assert optimize(lambda x: 5.0) is None


def test_optimize_non_finite_value():
    assert optimize(lambda x: math.nan) is None


def test_optimize_iteration_cap():
    """Test no real root within a few iterations -> no value"""
    assert optimize(lambda x: x * x + 1, x0=1.0, max_iterations=5) is None
