"""
Fixed-Degree Polynomials
========================
Polynomials whose degree is part of their type.

``Polynomial[D]`` returns the class of degree-``D`` polynomials; it always
stores exactly ``D+1`` coefficients in ascending power order. The common
degrees have named classes carrying their interpolation blueprints:

    LinearFunction       == Polynomial[1]
    QuadraticPolynomial  == Polynomial[2]
    CubicPolynomial      == Polynomial[3]
    QuinticPolynomial    == Polynomial[5]

Root finding, division, extrema and intersections live in
`fixedpoly.algebra.operators`; the static methods here are thin entry points
to the same operator objects.
"""
from __future__ import annotations

from numbers import Real
from typing import ClassVar, Iterable, TYPE_CHECKING
import logging
import types

import numpy as np
import matplotlib.pyplot as plt

from fixedpoly import config
from fixedpoly.combinatorics.pascals_triangle import PascalsTriangle
from fixedpoly.errors import DegenerateInputError
from fixedpoly.utils import format_number

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure
    from fixedpoly.algebra.operators import Extremum, Point2D

logger = logging.getLogger(__name__)

_SPECIALISATIONS: dict[int, type[Polynomial]] = {}


def _check_degree(degree: object) -> int:
    if isinstance(degree, bool) or not isinstance(degree, int) or degree < 0:
        raise TypeError(f"Polynomial degree must be a non-negative integer, got {degree!r}.")
    return degree


class Polynomial:
    """
    Polynomial c0 + c1 x + ... + cD x^D with a degree fixed by its class.

    Usage:
        p = Polynomial[2]([-1.0, 0.0, 1.0])   # x^2 - 1
        p(3.0)                                # 8.0
        p.derivative()                        # LinearFunction([0.0, 2.0])
    """
    DEGREE: ClassVar[int | None] = None

    def __init_subclass__(cls, degree: int | None = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if degree is None:
            return
        degree = _check_degree(degree)
        if degree in _SPECIALISATIONS:
            raise TypeError(
                f"Degree {degree} is already bound to {_SPECIALISATIONS[degree].__name__}."
            )
        cls.DEGREE = degree
        _SPECIALISATIONS[degree] = cls

    def __class_getitem__(cls, degree: int) -> type[Polynomial]:
        if cls is not Polynomial:
            raise TypeError(f"{cls.__name__} already has a fixed degree.")
        degree = _check_degree(degree)
        specialisation = _SPECIALISATIONS.get(degree)
        if specialisation is None:
            specialisation = types.new_class(f"Polynomial[{degree}]", (Polynomial,), {"degree": degree})
            specialisation.__module__ = __name__
        return specialisation

    def __init__(self, coefficients: Iterable[float] | None = None) -> None:
        """
        Args:
            coefficients: Exactly DEGREE+1 values, constant term first.
                All coefficients are zero when omitted.

        Raises:
            TypeError: If the class has no degree (plain `Polynomial`).
            ValueError: If the number of coefficients does not match the degree.
        """
        if self.DEGREE is None:
            raise TypeError("Polynomial has no degree, instantiate Polynomial[D] instead.")
        self._coefficients: npt.NDArray[np.float64] = np.zeros(self.DEGREE + 1, dtype=np.float64)
        if coefficients is not None:
            self.coefficients = coefficients

    @property
    def degree(self) -> int:
        return self.DEGREE

    @property
    def coefficients(self) -> npt.NDArray[np.float64]:
        """Coefficient storage, constant term first. Writable in place."""
        return self._coefficients

    @coefficients.setter
    def coefficients(self, values: Iterable[float]) -> None:
        if not isinstance(values, np.ndarray):
            values = list(values)
        array = np.array(values, dtype=np.float64)
        if array.shape != self._coefficients.shape:
            raise ValueError(
                f"{self.__class__.__name__} takes exactly {self.DEGREE + 1} coefficients, "
                f"got {array.size}."
            )
        self._coefficients[:] = array

    def copy(self) -> Polynomial:
        return type(self)(self._coefficients)

    def __call__(self, x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Evaluate the polynomial with Horner's scheme.

        Args:
            x: A number or an array of numbers (evaluated elementwise).
        """
        result = np.zeros_like(x, dtype=np.float64)
        for c in self._coefficients[::-1]:
            result = result * x + c
        if np.isscalar(x):
            return float(result)
        return result

    def shift(self, offset: float) -> Polynomial:
        """
        Re-express the polynomial in the shifted variable x' = x - offset.

        The returned polynomial q satisfies q(x') = p(x' + offset), obtained
        by expanding every (x' + offset)^k with binomial coefficients. The
        original polynomial is left untouched.
        """
        n = self.DEGREE
        triangle = PascalsTriangle.of_order(n)
        c = self._coefficients
        shifted = np.empty(n + 1, dtype=np.float64)
        for j in range(n + 1):
            # Diagonal j holds C(j, j), C(j+1, j), ..., C(n, j).
            total = 0.0
            power = 1.0
            for i, binomial in enumerate(triangle.diagonal(j)):
                total += c[j + i] * binomial * power
                power *= offset
            shifted[j] = total
        return type(self)(shifted)

    def derivative(self) -> Polynomial:
        """Derivative polynomial of degree DEGREE-1 (the zero constant for DEGREE 0)."""
        n = self.DEGREE
        if n == 0:
            return Polynomial[0]()
        return Polynomial[n - 1](self._coefficients[1:] * np.arange(1, n + 1, dtype=np.float64))

    def derivative_at(self, x: float) -> float:
        """Value of the first derivative at `x`."""
        return self.derivative()(x)

    def dderivative_at(self, x: float) -> float:
        """Value of the second derivative at `x`."""
        return self.derivative().derivative()(x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.DEGREE == other.DEGREE and np.array_equal(self._coefficients, other._coefficients)

    __hash__ = None

    def __neg__(self) -> Polynomial:
        return type(self)(-self._coefficients)

    def __mul__(self, other: Polynomial | float) -> Polynomial:
        if isinstance(other, Polynomial):
            return Polynomial[self.DEGREE + other.DEGREE](np.convolve(self._coefficients, other._coefficients))
        if isinstance(other, (Real, np.number)):
            return type(self)(self._coefficients * float(other))
        return NotImplemented

    def __rmul__(self, other: float) -> Polynomial:
        if isinstance(other, (Real, np.number)):
            return type(self)(self._coefficients * float(other))
        return NotImplemented

    def format(self, precision: int | None = None) -> str:
        """
        Render as 'c0 + c1 x + c2 x^2 + ...'.

        Every term is printed, zeros included, so the length of the output only
        depends on the degree and the magnitude of the coefficients.
        """
        if precision is None:
            precision = config.PRINT_PRECISION
        terms = []
        for power, c in enumerate(self._coefficients):
            text = format_number(c, precision)
            if power == 1:
                text += " x"
            elif power > 1:
                text += f" x^{power}"
            terms.append(text)
        return " + ".join(terms)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._coefficients.tolist()})"

    def plot(self, x_begin: float, x_end: float, n_points: int = 500, show: bool = True) -> Figure:
        """
        Plot the polynomial over [x_begin, x_end].

        Raises:
            DegenerateInputError: If the interval is empty or reversed.
        """
        if x_end <= x_begin:
            raise DegenerateInputError(f"Cannot plot over [{x_begin}, {x_end}].")
        xs = np.linspace(x_begin, x_end, n_points)

        fig = plt.figure(figsize=(7, 5))
        plt.plot(xs, self(xs), 'b', lw=2)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(self.format())
        plt.xlabel("x")
        plt.ylabel("p(x)")

        if show:
            plt.show()
        return fig

    # Operator entry points. Same objects as in fixedpoly.algebra.operators.

    @staticmethod
    def roots(polynomial: Polynomial, tolerance: float | None = None) -> npt.NDArray[np.float64]:
        """Real roots of `polynomial` (degree <= 3), see `operators.Roots`."""
        from fixedpoly.algebra import operators
        return operators.roots(polynomial, tolerance=tolerance)

    @staticmethod
    def divide(
        polynomial: Polynomial,
        divisor: Polynomial | float,
        tolerance: float | None = None
    ) -> tuple[Polynomial, Polynomial | float]:
        """Quotient and remainder, see `operators.Division`."""
        from fixedpoly.algebra import operators
        return operators.divide(polynomial, divisor, tolerance=tolerance)

    @staticmethod
    def maximum(
        x_begin: float,
        x_end: float,
        polynomial: Polynomial,
        tolerance: float | None = None
    ) -> Extremum:
        """Largest value of `polynomial` on [x_begin, x_end]."""
        from fixedpoly.algebra import operators
        return operators.maximum(x_begin, x_end, polynomial, tolerance=tolerance)

    @staticmethod
    def minimum(
        x_begin: float,
        x_end: float,
        polynomial: Polynomial,
        tolerance: float | None = None
    ) -> Extremum:
        """Smallest value of `polynomial` on [x_begin, x_end]."""
        from fixedpoly.algebra import operators
        return operators.minimum(x_begin, x_end, polynomial, tolerance=tolerance)


class LinearFunction(Polynomial, degree=1):
    """Straight line c0 + c1 x."""

    @classmethod
    def interpolation(cls, x_i: float, y_i: float, x_f: float, y_f: float) -> LinearFunction:
        """Line through (x_i, y_i) and (x_f, y_f)."""
        from fixedpoly.algebra.blueprints import LinearInterpolation
        return LinearInterpolation(x_i, y_i, x_f, y_f).instantiate()

    @classmethod
    def point_slope_form(cls, x_f: float, y_f: float, slope: float) -> LinearFunction:
        """Line through (x_f, y_f) with the given slope."""
        from fixedpoly.algebra.blueprints import LinearPointSlopeForm
        return LinearPointSlopeForm(x_f, y_f, slope).instantiate()

    @staticmethod
    def intersection(
        f: LinearFunction,
        g: LinearFunction,
        tolerance: float | None = None
    ) -> Point2D:
        """Crossing point of two lines, see `operators.Intersection`."""
        from fixedpoly.algebra import operators
        return operators.intersection(f, g, tolerance=tolerance)

    @property
    def slope(self) -> float:
        return float(self._coefficients[1])

    @property
    def intercept(self) -> float:
        return float(self._coefficients[0])


class QuadraticPolynomial(Polynomial, degree=2):
    """Quadratic c0 + c1 x + c2 x^2."""
    pass


class CubicPolynomial(Polynomial, degree=3):
    """Cubic c0 + c1 x + c2 x^2 + c3 x^3."""

    @classmethod
    def derivative_interpolation(
        cls,
        x_i: float, y_i: float, dy_i: float,
        x_f: float, y_f: float, dy_f: float
    ) -> CubicPolynomial:
        """Cubic matching value and slope at both ends (Hermite)."""
        from fixedpoly.algebra.blueprints import CubicDerivativeInterpolation
        return CubicDerivativeInterpolation(x_i, y_i, dy_i, x_f, y_f, dy_f).instantiate()

    @classmethod
    def second_derivative_interpolation(
        cls,
        x_i: float, y_i: float, ddy_i: float,
        x_f: float, y_f: float, ddy_f: float
    ) -> CubicPolynomial:
        """Cubic matching value and curvature at both ends."""
        from fixedpoly.algebra.blueprints import CubicSecondDerivativeInterpolation
        return CubicSecondDerivativeInterpolation(x_i, y_i, ddy_i, x_f, y_f, ddy_f).instantiate()


class QuinticPolynomial(Polynomial, degree=5):
    """Quintic, used for smooth point-to-point trajectories."""

    @classmethod
    def interpolation(
        cls,
        x_i: float, y_i: float, dy_i: float, ddy_i: float,
        x_f: float, y_f: float, dy_f: float, ddy_f: float
    ) -> QuinticPolynomial:
        """Quintic matching value, slope and curvature at both ends."""
        from fixedpoly.algebra.blueprints import QuinticInterpolation
        return QuinticInterpolation(x_i, y_i, dy_i, ddy_i, x_f, y_f, dy_f, ddy_f).instantiate()
