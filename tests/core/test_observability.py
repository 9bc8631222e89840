"""
Tests for structured logging and tracing setup.

- TestStructuredLogging: configure_logging()/get_logger()/reset_logging()
- TestOpenTelemetryTracing: configure_tracing()/get_tracer()
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog

from tolstoi.core import logging as log_module
from tolstoi.core import tracing as tracing_module
from tolstoi.core.logging import configure_logging, get_logger, reset_logging
from tolstoi.core.tracing import configure_tracing, get_tracer, reset_tracing


@pytest.fixture(autouse=True)
def clean_logging() -> Generator[None, None, None]:
    reset_logging()
    yield
    reset_logging()


class TestStructuredLogging:
    """structlog configuration."""

    def test_logger_returns_bound_logger(self) -> None:
        configure_logging()
        logger = get_logger("test")

        assert hasattr(logger, "bind"), "Logger must be structlog BoundLogger"

    def test_logger_supports_bound_context(self) -> None:
        configure_logging()
        bound = get_logger("test").bind(chapter=3)

        assert bound is not None

    def test_configure_logging_sets_flag(self) -> None:
        configure_logging()

        assert log_module._configured is True

    def test_processors_are_minimal(self) -> None:
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert structlog.contextvars.merge_contextvars not in processors
        assert log_module.add_service_info in processors

    def test_configure_logging_is_idempotent(self) -> None:
        configure_logging(log_level="DEBUG")
        configure_logging(log_level="ERROR")

        assert log_module._configured is True

    def test_reset_logging_clears_flag(self) -> None:
        configure_logging()
        reset_logging()

        assert log_module._configured is False

    def test_logs_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """stdout is reserved for verdicts."""
        configure_logging(log_level="INFO", json_output=True)
        get_logger("test").info("hello_event", chapter=1)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello_event" in captured.err
        assert '"service": "tolstoi"' in captured.err

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="INFO")
        get_logger("test").debug("hidden_event")

        assert "hidden_event" not in capsys.readouterr().err


class TestOpenTelemetryTracing:
    """OpenTelemetry configuration."""

    def test_tracer_can_start_span(self) -> None:
        tracer = get_tracer("test")

        assert hasattr(tracer, "start_as_current_span")

    def test_configure_tracing_sets_flag(self) -> None:
        reset_tracing()
        configure_tracing()

        assert tracing_module._configured is True
        reset_tracing()
