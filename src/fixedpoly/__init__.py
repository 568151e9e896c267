"""
fixedpoly
=========
Fixed-degree polynomial algebra: polynomials whose degree is part of their
type, interpolation blueprints, closed-form root finding, division, extrema
and line intersections, on top of a Pascal's triangle coefficient table.
"""
import logging

from fixedpoly.errors import (
    PolynomialError, DegenerateInputError, OutOfRangeError,
    DivisionByZeroDegreeError, ComplexRootsError
)
from fixedpoly.combinatorics import PascalsTriangle, DiagonalView
from fixedpoly.algebra import (
    Polynomial, LinearFunction, QuadraticPolynomial, CubicPolynomial, QuinticPolynomial,
    Roots, Division, Maximum, Minimum, Intersection, Extremum, Point2D,
    roots, divide, maximum, minimum, intersection
)
from fixedpoly.logging_config import setup_logging, configure_from_env, trace

logging.getLogger(__name__).addHandler(logging.NullHandler())
configure_from_env()

__version__ = "0.1.0"
