"""Tests for structlog configuration."""

import logging
import os
from collections.abc import Generator
from unittest.mock import patch

import pytest
import structlog

from swaglabs.config.logging import configure_logging, get_logger, scenario_context, worker_id
from swaglabs.config.settings import Settings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    yield
    configure_logging(Settings(_env_file=None))


def _settings(**overrides) -> Settings:
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None, **overrides)


class TestConfigureLogging:
    def test_debug_uses_console_renderer(self) -> None:
        """
        Given: debug is enabled
        When: Logging is configured
        Then: Events are pretty-printed for the console
        """
        configure_logging(_settings(debug=True))

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_default_uses_json_renderer(self) -> None:
        configure_logging(_settings(debug=False))

        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_json_output_contains_event_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(_settings(debug=False, log_level="INFO"))

        structlog.get_logger().info("scenario_started", scenario="test_login")

        out = capsys.readouterr().out
        assert '"event": "scenario_started"' in out
        assert '"scenario": "test_login"' in out

    def test_level_filters_lower_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(_settings(log_level="WARNING"))

        structlog.get_logger().info("hidden_event")

        assert "hidden_event" not in capsys.readouterr().out

    def test_get_logger_returns_usable_logger(self) -> None:
        logger = get_logger("swaglabs.test")

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")


class TestRunContext:
    def test_events_carry_worker_id(self, capsys: pytest.CaptureFixture[str]) -> None:
        """
        Given: A run under an xdist worker
        When: Logging is configured and an event is logged
        Then: The event names the worker
        """
        with patch.dict(os.environ, {"PYTEST_XDIST_WORKER": "gw3"}):
            configure_logging(_settings(log_level="INFO"))

        structlog.get_logger().info("worker_event")

        assert '"worker": "gw3"' in capsys.readouterr().out

    def test_worker_id_without_xdist(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert worker_id() == "main"

    def test_scenario_context_binds_and_unbinds(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(_settings(log_level="INFO"))

        with scenario_context("tests/e2e/test_login.py::test_valid_login"):
            structlog.get_logger().info("inside")
        structlog.get_logger().info("outside")

        inside, outside = capsys.readouterr().out.strip().splitlines()
        assert '"scenario": "tests/e2e/test_login.py::test_valid_login"' in inside
        assert '"scenario"' not in outside

    def test_noisy_libraries_quieted(self) -> None:
        configure_logging(_settings(log_level="DEBUG"))

        assert logging.getLogger("httpx").level == logging.WARNING
