"""
The ALGEBRA layer holds the fixed-degree polynomial types, the blueprints
that build them from boundary constraints and the operators acting on them.
"""
from fixedpoly.algebra.polynomial import (
    Polynomial, LinearFunction, QuadraticPolynomial, CubicPolynomial, QuinticPolynomial
)
from fixedpoly.algebra.blueprints import (
    BluePrint, LinearInterpolation, LinearPointSlopeForm, CubicDerivativeInterpolation,
    CubicSecondDerivativeInterpolation, QuinticInterpolation
)
from fixedpoly.algebra.operators import (
    Roots, Division, Maximum, Minimum, Intersection, Extremum, Point2D,
    roots, divide, maximum, minimum, intersection
)
