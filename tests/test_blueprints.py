"""Tests for interpolation blueprints."""

import pytest

from fixedpoly import (
    LinearFunction, CubicPolynomial, QuinticPolynomial, QuadraticPolynomial,
    DegenerateInputError
)
from fixedpoly.algebra.blueprints import LinearInterpolation, CubicDerivativeInterpolation


def test_linear_interpolation():
    f = LinearFunction.interpolation(0.0, 0.0, 1.0, 2.0)
    assert isinstance(f, LinearFunction)
    assert f(1.0) == 2.0
    assert f(0.0) == 0.0


def test_linear_interpolation_reversed_points():
    f = LinearFunction.interpolation(3.0, 1.0, 1.0, 5.0)
    assert f.slope == pytest.approx(-2.0)
    assert f(3.0) == pytest.approx(1.0)
    assert f(1.0) == pytest.approx(5.0)


def test_linear_interpolation_degenerate():
    with pytest.raises(DegenerateInputError):
        LinearFunction.interpolation(1.0, 0.0, 1.0, 2.0)


def test_point_slope_form():
    f = LinearFunction.point_slope_form(2.0, 3.0, -0.5)
    assert f.slope == -0.5
    assert f.intercept == 4.0
    assert f(2.0) == pytest.approx(3.0)


def test_cubic_derivative_interpolation():
    p = CubicPolynomial.derivative_interpolation(1.0, 2.0, 0.5, 3.0, -1.0, 1.5)
    assert p(1.0) == pytest.approx(2.0)
    assert p(3.0) == pytest.approx(-1.0)
    assert p.derivative_at(1.0) == pytest.approx(0.5)
    assert p.derivative_at(3.0) == pytest.approx(1.5)


def test_cubic_derivative_interpolation_recovers_cubic():
    target = CubicPolynomial([1.0, -2.0, 0.5, 0.25])
    p = CubicPolynomial.derivative_interpolation(
        -1.0, target(-1.0), target.derivative_at(-1.0),
        2.0, target(2.0), target.derivative_at(2.0)
    )
    assert p.coefficients.tolist() == pytest.approx(target.coefficients.tolist())


def test_cubic_second_derivative_interpolation():
    p = CubicPolynomial.second_derivative_interpolation(0.5, 1.0, -2.0, 2.5, 4.0, 3.0)
    assert p(0.5) == pytest.approx(1.0)
    assert p(2.5) == pytest.approx(4.0)
    assert p.dderivative_at(0.5) == pytest.approx(-2.0)
    assert p.dderivative_at(2.5) == pytest.approx(3.0)


def test_quintic_interpolation():
    p = QuinticPolynomial.interpolation(1.0, 0.0, 1.0, 0.0, 4.0, 2.0, -1.0, 0.5)
    assert p(1.0) == pytest.approx(0.0, abs=1e-9)
    assert p.derivative_at(1.0) == pytest.approx(1.0)
    assert p.dderivative_at(1.0) == pytest.approx(0.0, abs=1e-9)
    assert p(4.0) == pytest.approx(2.0)
    assert p.derivative_at(4.0) == pytest.approx(-1.0)
    assert p.dderivative_at(4.0) == pytest.approx(0.5)


def test_quintic_rest_to_rest():
    # Standard minimum-jerk profile 10t^3 - 15t^4 + 6t^5 on [0, 1].
    p = QuinticPolynomial.interpolation(0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0, 0.0)
    assert p.coefficients.tolist() == pytest.approx([0.0, 0.0, 0.0, 10.0, -15.0, 6.0])


@pytest.mark.parametrize("x_f", [1.0, 0.0])
def test_non_positive_span_is_rejected(x_f):
    with pytest.raises(DegenerateInputError):
        CubicPolynomial.derivative_interpolation(1.0, 0.0, 0.0, x_f, 1.0, 0.0)
    with pytest.raises(DegenerateInputError):
        CubicPolynomial.second_derivative_interpolation(1.0, 0.0, 0.0, x_f, 1.0, 0.0)
    with pytest.raises(DegenerateInputError):
        QuinticPolynomial.interpolation(1.0, 0.0, 0.0, 0.0, x_f, 1.0, 0.0, 0.0)


def test_apply_to_existing_polynomial():
    f = LinearFunction()
    LinearInterpolation(0.0, 1.0, 2.0, 5.0).apply(f)
    assert f.coefficients.tolist() == [1.0, 2.0]


def test_apply_checks_degree():
    with pytest.raises(ValueError):
        CubicDerivativeInterpolation(0.0, 0.0, 0.0, 1.0, 1.0, 0.0).apply(QuadraticPolynomial())


def test_tolerance_override():
    with pytest.raises(DegenerateInputError):
        LinearInterpolation(0.0, 0.0, 1e-3, 1.0, tolerance=1e-2).instantiate()
