"""
Shared pytest configuration.

Fixtures for polynomials used across several test modules. matplotlib is
switched to a non-interactive backend before anything imports pyplot.
"""
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from fixedpoly import Polynomial, CubicPolynomial


@pytest.fixture
def sample_points():
    """Abscissae for comparing polynomials by evaluation."""
    return np.linspace(-3.0, 3.0, 13)


@pytest.fixture
def difference_of_squares():
    """x^2 - 1"""
    return Polynomial[2]([-1.0, 0.0, 1.0])


@pytest.fixture
def humped_cubic():
    """-x^3 + 3x, local maximum 2 at x = 1 and local minimum -2 at x = -1."""
    return CubicPolynomial([0.0, 3.0, 0.0, -1.0])
