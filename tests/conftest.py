"""Pytest configuration and shared fixtures for result-option tests."""

import pytest


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test without a cached configuration or environment overrides."""
    from result_option import _config

    monkeypatch.delenv("RESULT_OPTION_CHECK_UNCHECKED", raising=False)
    monkeypatch.delenv("RESULT_OPTION_LOG_LEVEL", raising=False)
    monkeypatch.setattr(_config, "_config", None)


@pytest.fixture
def sample_value():
    """Sample Value for testing."""
    from result_option import Value

    return Value(42)


@pytest.fixture
def sample_absent():
    """Sample Absent for testing."""
    from result_option import Absent

    return Absent


@pytest.fixture
def sample_failure():
    """Sample Failure for testing."""
    from result_option import Failure

    return Failure("boom")


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test performed."""
    import logging

    import structlog

    from result_option import _logging

    root = logging.getLogger()
    level = root.level
    yield
    _logging.clear_log_hooks()
    if _logging.is_configured():
        structlog.reset_defaults()
        for handler in root.handlers[:]:
            if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
                root.removeHandler(handler)
        root.setLevel(level)
        _logging._configured = False
