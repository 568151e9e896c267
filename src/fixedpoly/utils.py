from __future__ import annotations

from fixedpoly import config


def resolve_tolerance(tolerance: float | None) -> float:
    """Return `tolerance`, or the configured default when it is None."""
    return config.DEFAULT_TOLERANCE if tolerance is None else tolerance

def is_zero(value: float, tolerance: float | None = None, scale: float = 1.0) -> bool:
    """
    Check whether `value` is zero relative to `scale`.

    Args:
        value: The number to test.
        tolerance: Relative tolerance, defaults to `config.DEFAULT_TOLERANCE`.
        scale: Magnitude of the terms `value` was computed from. The test is
            ``|value| <= tolerance * |scale|``. A zero scale means every term
            vanished, then `tolerance` is used as an absolute bound. With the
            default scale of 1 the test is absolute.
    """
    tolerance = resolve_tolerance(tolerance)
    if scale == 0.0:
        return abs(value) <= tolerance
    return abs(value) <= tolerance * abs(scale)

def format_number(value: float, precision: int) -> str:
    """Fixed-point representation that never prints a negative zero."""
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text
