"""Test logging configuration."""

import logging
from pathlib import Path

import structlog
from structlog.testing import LogCapture

from route_bench.common.logging import get_logger, setup_logging


class TestLogging:
    """Test logging functionality."""

    def setup_method(self) -> None:
        """Reset logging configuration before each test."""
        structlog.reset_defaults()
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    def teardown_method(self) -> None:
        """Leave no handlers behind for other test modules."""
        self.setup_method()
        logging.getLogger().setLevel(logging.WARNING)

    def test_setup_logging_default(self) -> None:
        setup_logging()
        logger = get_logger("test")
        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")

    def test_setup_logging_with_level(self) -> None:
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_level_is_case_insensitive(self) -> None:
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_json_format(self) -> None:
        setup_logging(json_format=True)
        logger = get_logger("test")

        cap = LogCapture()
        structlog.configure(processors=[cap])

        logger.info("Latency measured", target="8.8.8.8", latency_ms=11.4)

        assert len(cap.entries) == 1
        assert cap.entries[0]["event"] == "Latency measured"
        assert cap.entries[0]["latency_ms"] == 11.4

    def test_setup_logging_with_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "route-bench.log"
        setup_logging(log_file=str(log_file))

        python_logger = logging.getLogger("test_file")
        python_logger.info("test message")

        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        assert "test message" in log_file.read_text()

    def test_log_file_keeps_debug_command_events(self, tmp_path: Path) -> None:
        """Console stays at INFO while the file records every command run"""
        log_file = tmp_path / "logs" / "route-bench.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("route_bench.common.process").debug(
            "Running command", argv=["traceroute", "-n", "8.8.8.8"], timeout=90.0
        )
        for handler in logging.getLogger().handlers:
            handler.flush()

        handlers = logging.getLogger().handlers
        file_handler = next(h for h in handlers if isinstance(h, logging.FileHandler))
        console_handler = next(h for h in handlers if type(h) is logging.StreamHandler)
        assert console_handler.level == logging.INFO
        assert file_handler.level == logging.DEBUG
        content = log_file.read_text(encoding="utf-8")
        assert "Running command" in content
        assert "traceroute" in content
        assert "\x1b[" not in content

    def test_log_file_is_appended(self, tmp_path: Path) -> None:
        log_file = tmp_path / "route-bench.log"
        log_file.write_text("previous run\n", encoding="utf-8")

        setup_logging(log_file=log_file)
        logging.getLogger("test_append").warning("next run")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert content.startswith("previous run\n")
        assert "next run" in content

    def test_root_level_without_log_file(self) -> None:
        setup_logging(level="WARNING")
        assert logging.getLogger().level == logging.WARNING
