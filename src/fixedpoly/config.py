"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for global numeric constants.

Why is this file needed?
------------------------
1. Consistency: Every zero test (degenerate spans, discriminants, parallel
   lines) uses the same tolerance instead of literals scattered around.
2. Tuning: The defaults can be overridden from the environment without
   touching code (FIXEDPOLY_TOLERANCE, FIXEDPOLY_PRINT_PRECISION,
   FIXEDPOLY_LOG_LEVEL).

Exports:
    DEFAULT_TOLERANCE (float): Tolerance for "is zero" decisions, relative
        to the size of the terms compared.
    PRINT_PRECISION (int): Number of decimals used when printing polynomials.
    PRECOMPUTED_TRIANGLE_ORDERS (tuple[int, ...]): Pascal's triangle orders
        populated from literal tables.
    LOG_LEVEL (str | None): Level name applied to the package logger on
        import, None leaves logging to the application.
"""
import os
import logging

logger = logging.getLogger(__name__)


def get_env_number(name: str, default: float, cast: type = float) -> float:
    """
    Read a numeric setting from the environment, falling back to `default`.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid value {raw!r} for {name}, using {default}.")
        return default


# Global Constants
DEFAULT_TOLERANCE: float = get_env_number("FIXEDPOLY_TOLERANCE", 1e-10)
PRINT_PRECISION: int = int(get_env_number("FIXEDPOLY_PRINT_PRECISION", 2, cast=int))
PRECOMPUTED_TRIANGLE_ORDERS: tuple[int, ...] = (3, 5)
LOG_LEVEL: str | None = os.environ.get("FIXEDPOLY_LOG_LEVEL")
