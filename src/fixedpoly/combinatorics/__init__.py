"""Binomial coefficient tables."""
from fixedpoly.combinatorics.pascals_triangle import PascalsTriangle, DiagonalView
