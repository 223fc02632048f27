"""Tests for the structlog configuration wrapper."""

import logging

import structlog

from baseline_check.core import configure_structlog


class TestConfigureStructlog:
    def test_configure_in_debug_mode(self) -> None:
        configure_structlog(debug=True)

    def test_configure_in_json_mode(self) -> None:
        configure_structlog(debug=False)

    def test_logger_usable_after_configure(self) -> None:
        configure_structlog(debug=True)
        logger = structlog.get_logger("baseline_check.test")
        logger.info("analysis finished", features=3)

    def test_configure_multiple_times_is_safe(self) -> None:
        configure_structlog(debug=True)
        configure_structlog(debug=False)
        configure_structlog(debug=True)

    def test_stdlib_logger_usable_after_configure(self) -> None:
        configure_structlog(debug=False)
        logging.getLogger("baseline_check.test").info("stdlib message")
