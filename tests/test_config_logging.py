"""Tests for configuration defaults, tolerance handling and logging setup."""

import io
import logging

import pytest

from fixedpoly import (
    config, setup_logging, configure_from_env, trace,
    LinearFunction, QuadraticPolynomial, CubicPolynomial, ComplexRootsError
)
from fixedpoly.config import get_env_number
from fixedpoly.utils import is_zero, format_number


def test_env_override(monkeypatch):
    monkeypatch.setenv("FIXEDPOLY_TEST_NUMBER", "0.5")
    assert get_env_number("FIXEDPOLY_TEST_NUMBER", 1.0) == 0.5


def test_env_invalid_value_falls_back(monkeypatch):
    monkeypatch.setenv("FIXEDPOLY_TEST_NUMBER", "not-a-number")
    assert get_env_number("FIXEDPOLY_TEST_NUMBER", 1.0) == 1.0


def test_is_zero_scales_with_magnitude():
    assert is_zero(1e-12)
    assert not is_zero(1e-6)
    assert is_zero(1e-6, scale=1e5)
    assert is_zero(0.05, tolerance=0.1)
    assert not is_zero(1e-12, scale=1e-12)
    assert is_zero(1e-25, scale=1e-12)
    assert is_zero(1e-12, scale=0.0)


def test_default_tolerance_is_read_at_call_time(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_TOLERANCE", 0.5)
    assert is_zero(0.4)


def test_print_precision_setting(monkeypatch):
    monkeypatch.setattr(config, "PRINT_PRECISION", 3)
    assert str(LinearFunction([1.0, 2.0])) == "1.000 + 2.000 x"


def test_format_number():
    assert format_number(-0.0001, 2) == "0.00"
    assert format_number(-1.5, 1) == "-1.5"


def _configured_handlers(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


def _reset(logger):
    for handler in _configured_handlers(logger):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("fixedpoly")
    _reset(logger)
    yield logger
    _reset(logger)


def test_setup_logging(tmp_path, package_logger):
    log_file = tmp_path / "fixedpoly.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    assert package_logger.level == logging.DEBUG
    assert len(_configured_handlers(package_logger)) == 2

    QuadraticPolynomial.roots(QuadraticPolynomial([4.0, -4.0, 1.0]))

    setup_logging(level=logging.DEBUG)
    assert len(_configured_handlers(package_logger)) == 1
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    written = log_file.read_text(encoding="utf-8")
    assert "set to DEBUG" in written
    assert "repeated root" in written


def test_setup_logging_to_stream(package_logger):
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    logging.getLogger("fixedpoly.algebra.operators").info("hello")
    logging.getLogger("fixedpoly.algebra.operators").debug("hidden")
    assert "fixedpoly.algebra.operators - INFO - hello" in stream.getvalue()
    assert "hidden" not in stream.getvalue()


def test_configure_from_env(monkeypatch, package_logger):
    monkeypatch.setattr(config, "LOG_LEVEL", "debug")
    assert configure_from_env()
    assert package_logger.level == logging.DEBUG


def test_configure_from_env_unset(monkeypatch, package_logger):
    monkeypatch.setattr(config, "LOG_LEVEL", None)
    assert not configure_from_env()
    assert _configured_handlers(package_logger) == []


def test_configure_from_env_ignores_unknown_level(monkeypatch, package_logger, caplog):
    monkeypatch.setattr(config, "LOG_LEVEL", "chatty")
    with caplog.at_level(logging.WARNING, logger="fixedpoly"):
        assert not configure_from_env()
    assert _configured_handlers(package_logger) == []
    assert any("chatty" in record.getMessage() for record in caplog.records)


def test_trace_shows_solver_records():
    stream = io.StringIO()
    solver_logger = logging.getLogger("fixedpoly.algebra")
    level, handlers = solver_logger.level, list(solver_logger.handlers)

    with trace(stream=stream):
        CubicPolynomial.roots(CubicPolynomial([-1.0, 3.0, -3.0, 1.0]))

    assert "fixedpoly.algebra.operators - Cubic" in stream.getvalue()
    assert "triple root" in stream.getvalue()
    assert solver_logger.level == level
    assert solver_logger.handlers == handlers

    QuadraticPolynomial.roots(QuadraticPolynomial([4.0, -4.0, 1.0]))
    assert "repeated root" not in stream.getvalue()


def test_trace_restores_logger_on_error():
    solver_logger = logging.getLogger("fixedpoly.algebra")
    level = solver_logger.level
    with pytest.raises(ComplexRootsError):
        with trace(stream=io.StringIO()):
            QuadraticPolynomial.roots(QuadraticPolynomial([1.0, 0.0, 1.0]))
    assert solver_logger.level == level
    assert not any(isinstance(h, logging.StreamHandler) for h in solver_logger.handlers)


def test_solver_branches_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="fixedpoly"):
        QuadraticPolynomial.roots(QuadraticPolynomial([4.0, -4.0, 1.0]))
    assert any("repeated root" in record.getMessage() for record in caplog.records)
