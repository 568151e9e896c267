"""
Interpolation Blueprints
========================
Closed-form recipes that build a polynomial from boundary constraints.

A blueprint is a frozen set of constraints. `instantiate()` returns a new
polynomial of the target degree, `apply()` writes the solution into an
existing one. The degree-specific classmethods (`LinearFunction.interpolation`,
`CubicPolynomial.derivative_interpolation`, ...) are the usual way in.

Cubic and quintic coefficients are first solved in the local coordinate
t = x - x_i, where the initial conditions fix the low-order terms directly,
and then shifted back to x.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, TYPE_CHECKING
import logging

import numpy as np

from fixedpoly.algebra.polynomial import (
    Polynomial, LinearFunction, CubicPolynomial, QuinticPolynomial
)
from fixedpoly.errors import DegenerateInputError
from fixedpoly.utils import is_zero, resolve_tolerance

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BluePrint(ABC):
    """
    Abstract base class for polynomial blueprints.
    """
    TARGET: ClassVar[type[Polynomial]]

    tolerance: float | None = field(default=None, kw_only=True)

    @abstractmethod
    def solve(self) -> npt.NDArray[np.float64]:
        """Coefficients of the target polynomial, constant term first."""
        pass

    def instantiate(self) -> Polynomial:
        """Build a new polynomial satisfying the constraints."""
        return self.TARGET(self.solve())

    def apply(self, polynomial: Polynomial) -> Polynomial:
        """
        Overwrite the coefficients of `polynomial` with the solution.

        Raises:
            ValueError: If `polynomial` does not have the target degree.
        """
        if polynomial.DEGREE != self.TARGET.DEGREE:
            raise ValueError(
                f"{self.__class__.__name__} builds degree {self.TARGET.DEGREE} polynomials, "
                f"got one of degree {polynomial.DEGREE}."
            )
        polynomial.coefficients = self.solve()
        return polynomial

    def _positive_span(self, x_i: float, x_f: float) -> float:
        span = x_f - x_i
        if span <= resolve_tolerance(self.tolerance):
            logger.debug(f"{self.__class__.__name__} rejected span {span} for [{x_i}, {x_f}].")
            raise DegenerateInputError(
                f"{self.__class__.__name__} needs x_f > x_i, got x_i={x_i}, x_f={x_f}."
            )
        return span


@dataclass(frozen=True)
class LinearInterpolation(BluePrint):
    """Line through two points."""
    TARGET = LinearFunction

    x_i: float
    y_i: float
    x_f: float
    y_f: float

    def solve(self) -> npt.NDArray[np.float64]:
        span = self.x_f - self.x_i
        if is_zero(span, self.tolerance):
            raise DegenerateInputError(
                f"Cannot interpolate a line through two points with the same abscissa x={self.x_i}."
            )
        slope = (self.y_f - self.y_i) / span
        return np.array([self.y_i - slope * self.x_i, slope])


@dataclass(frozen=True)
class LinearPointSlopeForm(BluePrint):
    """Line through a point with a given slope."""
    TARGET = LinearFunction

    x_f: float
    y_f: float
    slope: float

    def solve(self) -> npt.NDArray[np.float64]:
        return np.array([self.y_f - self.slope * self.x_f, self.slope])


@dataclass(frozen=True)
class CubicDerivativeInterpolation(BluePrint):
    """
    Cubic through (x_i, y_i) and (x_f, y_f) with slopes dy_i and dy_f.

    With T = x_f - x_i and s = (y_f - y_i) / T the local coefficients are
        a0 = y_i
        a1 = dy_i
        a2 = (3 s - 2 dy_i - dy_f) / T
        a3 = (dy_i + dy_f - 2 s) / T^2
    """
    TARGET = CubicPolynomial

    x_i: float
    y_i: float
    dy_i: float
    x_f: float
    y_f: float
    dy_f: float

    def solve(self) -> npt.NDArray[np.float64]:
        span = self._positive_span(self.x_i, self.x_f)
        secant = (self.y_f - self.y_i) / span
        local = CubicPolynomial([
            self.y_i,
            self.dy_i,
            (3.0 * secant - 2.0 * self.dy_i - self.dy_f) / span,
            (self.dy_i + self.dy_f - 2.0 * secant) / span**2,
        ])
        return local.shift(-self.x_i).coefficients


@dataclass(frozen=True)
class CubicSecondDerivativeInterpolation(BluePrint):
    """
    Cubic through (x_i, y_i) and (x_f, y_f) with curvatures ddy_i and ddy_f.

    With T = x_f - x_i the local coefficients are
        a0 = y_i
        a1 = (y_f - y_i) / T - T (2 ddy_i + ddy_f) / 6
        a2 = ddy_i / 2
        a3 = (ddy_f - ddy_i) / (6 T)
    """
    TARGET = CubicPolynomial

    x_i: float
    y_i: float
    ddy_i: float
    x_f: float
    y_f: float
    ddy_f: float

    def solve(self) -> npt.NDArray[np.float64]:
        span = self._positive_span(self.x_i, self.x_f)
        local = CubicPolynomial([
            self.y_i,
            (self.y_f - self.y_i) / span - span * (2.0 * self.ddy_i + self.ddy_f) / 6.0,
            self.ddy_i / 2.0,
            (self.ddy_f - self.ddy_i) / (6.0 * span),
        ])
        return local.shift(-self.x_i).coefficients


@dataclass(frozen=True)
class QuinticInterpolation(BluePrint):
    """
    Quintic matching value, slope and curvature at both ends.

    The initial conditions give a0 = y_i, a1 = dy_i, a2 = ddy_i / 2. The
    remaining 3x3 system in a3..a5 has the closed-form solution
        a3 = (10 A - 4 B T + C T^2 / 2) / T^3
        a4 = (-15 A + 7 B T - C T^2) / T^4
        a5 = (6 A - 3 B T + C T^2 / 2) / T^5
    where A, B and C are the value, slope and curvature still missing at
    the final end after the low-order terms are accounted for.
    """
    TARGET = QuinticPolynomial

    x_i: float
    y_i: float
    dy_i: float
    ddy_i: float
    x_f: float
    y_f: float
    dy_f: float
    ddy_f: float

    def solve(self) -> npt.NDArray[np.float64]:
        T = self._positive_span(self.x_i, self.x_f)
        a0 = self.y_i
        a1 = self.dy_i
        a2 = self.ddy_i / 2.0

        A = self.y_f - (a0 + a1 * T + a2 * T**2)
        B = self.dy_f - (a1 + 2.0 * a2 * T)
        C = self.ddy_f - 2.0 * a2

        local = QuinticPolynomial([
            a0,
            a1,
            a2,
            (10.0 * A - 4.0 * B * T + 0.5 * C * T**2) / T**3,
            (-15.0 * A + 7.0 * B * T - C * T**2) / T**4,
            (6.0 * A - 3.0 * B * T + 0.5 * C * T**2) / T**5,
        ])
        return local.shift(-self.x_i).coefficients
