"""Exception hierarchy for polynomial and coefficient-table operations."""


class PolynomialError(Exception):
    """Base class for runtime-data errors raised by fixedpoly."""

    pass


class DegenerateInputError(PolynomialError, ValueError):
    """Input makes the requested construction or solve ill-posed.

    Raised for zero or negative interpolation spans, parallel lines,
    reversed search intervals and polynomials without a closed-form solve.
    """

    pass


class OutOfRangeError(PolynomialError, IndexError):
    """Row or diagonal index beyond the order of a coefficient table."""

    pass


class DivisionByZeroDegreeError(PolynomialError, ZeroDivisionError):
    """Division by the identically zero polynomial."""

    pass


class ComplexRootsError(PolynomialError, ArithmeticError):
    """The polynomial has no real roots.

    The complex roots that were found are kept in ``roots`` so that callers
    can tell "no real solution" apart from a failed operation.
    """

    def __init__(self, message: str, roots=()) -> None:
        super().__init__(message)
        self.roots = roots
