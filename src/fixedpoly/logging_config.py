"""
Logging Configuration
=====================
Switches on the DEBUG records of the solvers.

The library only emits DEBUG records: which discriminant branch a root solve
took, whether a Pascal's triangle came from a literal table, why an input was
rejected. By default they go nowhere (NullHandler). Three ways to see them:

    setup_logging(logging.DEBUG)          application-wide, console (+ file)
    FIXEDPOLY_LOG_LEVEL=DEBUG             the same, applied on import
    with trace(): roots(p)                only for the duration of a block
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, TextIO
import logging
import sys

from fixedpoly import config

PACKAGE_LOGGER = "fixedpoly"
SOLVER_LOGGER = "fixedpoly.algebra"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> None:
    """
    Configures the logger for the 'fixedpoly' namespace.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Console stream, stdout by default.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    logger.debug(f"Logging for '{PACKAGE_LOGGER}' set to {logging.getLevelName(level)}.")


def configure_from_env() -> bool:
    """
    Apply `config.LOG_LEVEL` (FIXEDPOLY_LOG_LEVEL), if set.

    Returns:
        True if logging was configured. An unknown level name is reported
        with a warning and ignored.
    """
    name = config.LOG_LEVEL
    if not name:
        return False
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        logger.warning(f"Ignoring unknown log level {name!r} in FIXEDPOLY_LOG_LEVEL.")
        return False
    setup_logging(level)
    return True


@contextmanager
def trace(logger_name: str = SOLVER_LOGGER, stream: Optional[TextIO] = None) -> Iterator[logging.Handler]:
    """
    Print the DEBUG records of `logger_name` while the block runs.

    The logger's level and handlers are restored on exit, so this is safe to
    use inside a library or a test.

    Usage:
        with trace():
            roots(CubicPolynomial([-1.0, 3.0, -3.0, 1.0]))  # "... has a triple root."
    """
    target = logging.getLogger(logger_name)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))

    previous_level = target.level
    target.setLevel(logging.DEBUG)
    target.addHandler(handler)
    try:
        yield handler
    finally:
        target.removeHandler(handler)
        target.setLevel(previous_level)
        handler.flush()
