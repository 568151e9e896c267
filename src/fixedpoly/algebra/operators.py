"""
Algebraic Operators
===================
Function objects working on fixed-degree polynomials.

    Roots         closed-form real roots up to degree 3
    Division      synthetic division by (x - r) or long division
    Maximum       largest value on an interval (degree <= 4)
    Minimum       smallest value on an interval (degree <= 4)
    Intersection  crossing point of two lines

The stateless operators have a module-level instance (`roots`, `divide`,
`maximum`, `minimum`); `intersection` is a function creating a new
`Intersection` per call. These are also what the static methods on
`Polynomial` and `LinearFunction` call.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from math import copysign, sqrt
from typing import TYPE_CHECKING
import logging

import numpy as np

from fixedpoly.algebra.polynomial import Polynomial
from fixedpoly.errors import (
    ComplexRootsError, DegenerateInputError, DivisionByZeroDegreeError
)
from fixedpoly.utils import is_zero, resolve_tolerance

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point2D:
    """A point in the plane."""
    x: float
    y: float


@dataclass(frozen=True)
class Extremum:
    """Location and value of an extremum."""
    x: float
    value: float


def effective_coefficients(
    coefficients: npt.NDArray[np.float64],
    tolerance: float | None = None
) -> npt.NDArray[np.float64]:
    """
    Drop leading coefficients that are zero relative to the largest one.

    Returns an empty array for the zero polynomial.
    """
    c = np.asarray(coefficients, dtype=np.float64)
    scale = float(np.max(np.abs(c))) if c.size else 0.0
    end = c.size
    while end > 0 and is_zero(c[end - 1], tolerance, scale):
        end -= 1
    return c[:end]


class Roots:
    """
    Real roots of polynomials of degree 0 to 3 by closed-form formulas.

    Leading coefficients that vanish within tolerance lower the degree, so a
    QuadraticPolynomial with c2 == 0 is solved as a line. The result is a
    sorted array of distinct real roots (a repeated root appears once).

    Raises:
        ComplexRootsError: For a quadratic whose roots are a complex pair.
        DegenerateInputError: For the zero polynomial or degree > 3.
    """

    def __call__(self, polynomial: Polynomial, tolerance: float | None = None) -> npt.NDArray[np.float64]:
        tolerance = resolve_tolerance(tolerance)
        c = effective_coefficients(polynomial.coefficients, tolerance)
        degree = c.size - 1

        if degree < 0:
            raise DegenerateInputError(
                f"Every x is a root of the zero polynomial {polynomial!r}."
            )
        if degree == 0:
            found: list[float] = []
        elif degree == 1:
            found = self.linear(c)
        elif degree == 2:
            found = self.quadratic(c, tolerance)
        elif degree == 3:
            found = self.cubic(c, tolerance)
        else:
            raise DegenerateInputError(
                f"No closed-form root solver for degree {degree} ({polynomial!r})."
            )
        return np.unique(np.array(found, dtype=np.float64))

    @staticmethod
    def linear(c: npt.NDArray[np.float64]) -> list[float]:
        return [-c[0] / c[1]]

    @staticmethod
    def quadratic(c: npt.NDArray[np.float64], tolerance: float) -> list[float]:
        """a x^2 + b x + c by the discriminant b^2 - 4ac."""
        c0, b, a = c
        discriminant = b * b - 4.0 * a * c0

        if is_zero(discriminant, tolerance, max(b * b, abs(4.0 * a * c0))):
            logger.debug(f"Quadratic {c.tolist()} has a repeated root.")
            return [-b / (2.0 * a)]

        if discriminant < 0.0:
            real = -b / (2.0 * a)
            imag = sqrt(-discriminant) / (2.0 * abs(a))
            logger.debug(f"Quadratic {c.tolist()} has complex roots {real} +/- {imag}j.")
            raise ComplexRootsError(
                f"No real roots: discriminant {discriminant} of {c.tolist()} is negative.",
                roots=np.array([complex(real, -imag), complex(real, imag)])
            )

        # Avoids cancellation between -b and the square root.
        q = -0.5 * (b + copysign(sqrt(discriminant), b))
        return [q / a, c0 / q]

    @staticmethod
    def cubic(c: npt.NDArray[np.float64], tolerance: float) -> list[float]:
        """
        a x^3 + b x^2 + c x + d by Cardano's method.

        Substituting x = t - b/(3a) gives the depressed cubic t^3 + p t + q
        whose discriminant (q/2)^2 + (p/3)^3 selects the case:
            > 0  one real root (the other two are complex)
            = 0  a triple root (p = 0) or a simple and a double root
            < 0  three distinct real roots (trigonometric form)
        """
        d, c1, b, a = c
        B, C, D = b / a, c1 / a, d / a
        shift = -B / 3.0
        p = C - B * B / 3.0
        q = 2.0 * B**3 / 27.0 - B * C / 3.0 + D

        # p and q lose their digits to cancellation, so the zero tests are
        # relative to the size of the terms they are built from.
        p_scale = max(abs(C), B * B / 3.0)
        q_scale = max(2.0 * abs(B)**3 / 27.0, abs(B * C) / 3.0, abs(D))

        half_q = q / 2.0
        third_p = p / 3.0
        discriminant = half_q**2 + third_p**3
        scale = max((q_scale / 2.0)**2, (p_scale / 3.0)**3)

        if is_zero(discriminant, tolerance, scale):
            if is_zero(p, tolerance, p_scale):
                logger.debug(f"Cubic {c.tolist()} has a triple root.")
                return [shift]
            logger.debug(f"Cubic {c.tolist()} has a simple and a double root.")
            return [3.0 * q / p + shift, -1.5 * q / p + shift]

        if discriminant > 0.0:
            logger.debug(f"Cubic {c.tolist()} has one real root.")
            root = sqrt(discriminant)
            # Cube root of the larger term only, the other one is -p / (3u).
            u = float(np.cbrt(-half_q - copysign(root, half_q)))
            return [u - third_p / u + shift]

        logger.debug(f"Cubic {c.tolist()} has three real roots.")
        radius = 2.0 * sqrt(-third_p)
        cosine = np.clip((3.0 * q / (2.0 * p)) * sqrt(-3.0 / p), -1.0, 1.0)
        phi = np.arccos(cosine) / 3.0
        return [
            float(radius * np.cos(phi - 2.0 * np.pi * k / 3.0)) + shift
            for k in range(3)
        ]


class Division:
    """
    Polynomial division.

    A number r as divisor means synthetic division by (x - r), returning the
    quotient and a float remainder. A polynomial divisor of effective degree
    m < DEGREE means long division, returning Polynomial[DEGREE - m] and
    Polynomial[max(m - 1, 0)].

    Raises:
        DivisionByZeroDegreeError: If the divisor is the zero polynomial.
        DegenerateInputError: If the dividend is a constant or the divisor
            degree is not below the dividend degree.
    """

    def __call__(
        self,
        polynomial: Polynomial,
        divisor: Polynomial | float,
        tolerance: float | None = None
    ) -> tuple[Polynomial, Polynomial | float]:
        if polynomial.DEGREE < 1:
            raise DegenerateInputError(f"Cannot divide the constant {polynomial!r}.")
        if isinstance(divisor, Polynomial):
            return self.long_division(polynomial, divisor, tolerance)
        return self.synthetic_division(polynomial, float(divisor))

    @staticmethod
    def synthetic_division(polynomial: Polynomial, factor: float) -> tuple[Polynomial, float]:
        """Divide by (x - factor)."""
        c = polynomial.coefficients
        n = polynomial.DEGREE
        quotient = np.empty(n, dtype=np.float64)
        carry = 0.0
        for k in range(n, 0, -1):
            carry = c[k] + factor * carry
            quotient[k - 1] = carry
        remainder = float(c[0] + factor * carry)
        return Polynomial[n - 1](quotient), remainder

    @staticmethod
    def long_division(
        polynomial: Polynomial,
        divisor: Polynomial,
        tolerance: float | None = None
    ) -> tuple[Polynomial, Polynomial]:
        d = effective_coefficients(divisor.coefficients, tolerance)
        m = d.size - 1
        n = polynomial.DEGREE
        if m < 0:
            logger.debug(f"Division of {polynomial!r} by the zero polynomial.")
            raise DivisionByZeroDegreeError(
                f"Cannot divide {polynomial!r} by the zero polynomial {divisor!r}."
            )
        if m >= n:
            raise DegenerateInputError(
                f"Divisor degree {m} must be below the dividend degree {n}."
            )

        remainder = polynomial.coefficients.copy()
        quotient = np.zeros(n - m + 1, dtype=np.float64)
        for k in range(n - m, -1, -1):
            factor = remainder[k + m] / d[m]
            quotient[k] = factor
            remainder[k:k + m + 1] -= factor * d
        return Polynomial[n - m](quotient), Polynomial[max(m - 1, 0)](remainder[:max(m, 1)])


class IntervalExtremum(ABC):
    """
    Extremum of a polynomial of degree <= 4 on a closed interval.

    Candidates are the interval ends and the real roots of the derivative
    that fall inside the interval. If there are no interior critical points
    the extremum is at one of the ends.
    """

    @abstractmethod
    def select(self, values: npt.NDArray[np.float64]) -> int:
        """Index of the chosen candidate."""
        pass

    def __call__(
        self,
        x_begin: float,
        x_end: float,
        polynomial: Polynomial,
        tolerance: float | None = None
    ) -> Extremum:
        if x_begin > x_end:
            raise DegenerateInputError(f"Search interval [{x_begin}, {x_end}] is reversed.")
        if polynomial.DEGREE > 4:
            raise DegenerateInputError(
                f"Critical points of degree {polynomial.DEGREE} polynomials have no closed form."
            )

        candidates = [x_begin]
        if polynomial.DEGREE > 1:
            candidates.extend(
                float(x) for x in self.critical_points(polynomial, tolerance)
                if x_begin < x < x_end
            )
        candidates.append(x_end)

        xs = np.array(candidates, dtype=np.float64)
        values = polynomial(xs)
        i = self.select(values)
        return Extremum(x=float(xs[i]), value=float(values[i]))

    @staticmethod
    def critical_points(polynomial: Polynomial, tolerance: float | None = None) -> npt.NDArray[np.float64]:
        try:
            return roots(polynomial.derivative(), tolerance=tolerance)
        except ComplexRootsError:
            logger.debug(f"No real critical points for {polynomial!r}.")
        except DegenerateInputError:
            logger.debug(f"Derivative of {polynomial!r} vanishes, it is constant.")
        return np.empty(0, dtype=np.float64)


class Maximum(IntervalExtremum):
    """Largest value of a polynomial on [x_begin, x_end]."""

    def select(self, values: npt.NDArray[np.float64]) -> int:
        return int(np.argmax(values))


class Minimum(IntervalExtremum):
    """Smallest value of a polynomial on [x_begin, x_end]."""

    def select(self, values: npt.NDArray[np.float64]) -> int:
        return int(np.argmin(values))


class Intersection:
    """
    Crossing point of two lines.

    The object remembers whether its last call failed, see `fail()`.

    Raises:
        DegenerateInputError: If the lines are parallel or coincide.
    """

    def __init__(self) -> None:
        self._fail = False

    def fail(self) -> bool:
        """True if the previous call did not produce an intersection."""
        return self._fail

    def __call__(self, f: Polynomial, g: Polynomial, tolerance: float | None = None) -> Point2D:
        self._fail = False
        if f.DEGREE != 1 or g.DEGREE != 1:
            self._fail = True
            raise ValueError(
                f"Intersection is defined for linear functions, got degrees {f.DEGREE} and {g.DEGREE}."
            )
        b_f, m_f = f.coefficients
        b_g, m_g = g.coefficients

        if is_zero(m_f - m_g, tolerance, max(abs(m_f), abs(m_g))):
            self._fail = True
            logger.debug(f"Lines {f!r} and {g!r} are parallel.")
            raise DegenerateInputError(
                f"Parallel lines have no single intersection: slopes {m_f} and {m_g}, "
                f"intercepts {b_f} and {b_g}."
            )
        x = (b_g - b_f) / (m_f - m_g)
        return Point2D(x=float(x), y=float(f(x)))


roots = Roots()
divide = Division()
maximum = Maximum()
minimum = Minimum()


def intersection(f: Polynomial, g: Polynomial, tolerance: float | None = None) -> Point2D:
    """
    Crossing point of two lines.

    Uses a fresh `Intersection` per call, so no failure flag is shared
    between callers. Keep an own `Intersection` to query `fail()`.
    """
    return Intersection()(f, g, tolerance=tolerance)
