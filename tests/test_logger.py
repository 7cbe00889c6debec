"""Tests for vibe_env.logger module."""

import io
import json
import logging
import os
from unittest import mock

import pytest

from vibe_env.logger import (
    DefaultLogger,
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()  # type: ignore


class TestDefaultLogger:
    """Tests for the DefaultLogger implementation."""

    def test_session_id_is_uuid(self):
        assert len(DefaultLogger().get_session_id()) == 36

    def test_writes_to_given_output(self):
        output = io.StringIO()
        logger = DefaultLogger(output=output, include_timestamp=False)
        logger.info("Test message")

        assert output.getvalue() == "[INFO] [vibe-env] Test message\n"

    def test_includes_timestamp_by_default(self):
        output = io.StringIO()
        DefaultLogger(output=output).info("Test message")

        assert not output.getvalue().startswith("[INFO]")
        assert "T" in output.getvalue().split(" ")[0]

    def test_accepts_kwargs(self):
        output = io.StringIO()
        logger = DefaultLogger(name="custom", output=output, include_timestamp=False)
        logger.warning("Careful", key="value", number=42)

        assert output.getvalue().strip() == "[WARNING] [custom] Careful (key=value number=42)"

    def test_writes_to_stdout_by_default(self, capsys):
        DefaultLogger(include_timestamp=False).error("On stdout")

        assert "[ERROR] [vibe-env] On stdout" in capsys.readouterr().out

    def test_all_levels(self):
        output = io.StringIO()
        logger = DefaultLogger(output=output)

        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")
        logger.critical("c")

        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            assert f"[{level}]" in output.getvalue()


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_session_id_is_short(self):
        assert len(StructuredLogger(name="test-structured").get_session_id()) == 8

    def test_text_format(self, capsys):
        logger = StructuredLogger(name="test-text")
        logger.info("Test message", key="value")

        out = capsys.readouterr().out
        assert "[INFO] [test-text]" in out
        assert "Test message" in out
        assert "key=value" in out

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="test-json", json_format=True)
        logger.info("Test message", count=3)

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["level"] == "INFO"
        assert entry["message"] == "Test message"
        assert entry["logger"] == "test-json"
        assert entry["session_id"] == logger.get_session_id()
        assert entry["count"] == 3

    def test_reserved_kwargs_are_prefixed(self, capsys):
        logger = StructuredLogger(name="test-reserved", json_format=True)
        logger.info("Test", name="kept")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["_name"] == "kept"
        assert entry["logger"] == "test-reserved"

    def test_respects_level(self, capsys):
        logger = StructuredLogger(name="test-level", level=logging.WARNING)
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_reinitialising_does_not_duplicate_handlers(self):
        StructuredLogger(name="test-reinit")
        logger = StructuredLogger(name="test-reinit")
        assert len(logger._logger.handlers) == 1

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "vibe.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file))
        logger.info("File test message")

        for handler in logger._logger.handlers:
            handler.flush()

        assert "File test message" in log_file.read_text()

    def test_unwritable_log_file_falls_back_to_stdout(self, tmp_path, capsys):
        bad_path = tmp_path / "missing-dir" / "vibe.log"
        logger = StructuredLogger(name="test-bad-file", log_file=str(bad_path))
        logger.info("still logged")

        captured = capsys.readouterr()
        assert "Failed to setup log file" in captured.err
        assert "still logged" in captured.out
        assert len(logger._logger.handlers) == 1


class TestLoggerFactoryFunctions:
    """Tests for create_logger and get_logger."""

    def test_create_logger_returns_logger(self):
        assert isinstance(create_logger(name="test-factory"), Logger)

    def test_explicit_arguments_win_over_env(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_EXPLICIT_LOG_LEVEL": "DEBUG"}):
            logger = create_logger(name="test-explicit", level=logging.ERROR)
        logger.warning("hidden")

        assert "hidden" not in capsys.readouterr().out

    def test_get_logger_reads_env_level(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_PROJECT_LOG_LEVEL": "WARNING"}):
            logger = get_logger("test-project")
        logger.info("Should not appear")
        logger.warning("Should appear")

        out = capsys.readouterr().out
        assert "Should not appear" not in out
        assert "Should appear" in out

    def test_get_logger_reads_env_json(self, capsys):
        with mock.patch.dict(os.environ, {"TEST_JSON_ENV_LOG_JSON": "true"}):
            logger = get_logger("test-json-env")
        logger.info("JSON env test")

        assert json.loads(capsys.readouterr().out.strip())["message"] == "JSON env test"

    def test_get_logger_unknown_level_falls_back_to_info(self):
        with mock.patch.dict(os.environ, {"TEST_BAD_LEVEL_LOG_LEVEL": "CHATTY"}):
            logger = get_logger("test-bad-level")
        assert logger._logger.level == logging.INFO

    def test_default_name(self):
        with mock.patch.dict(os.environ, {"VIBE_ENV_LOG_LEVEL": "DEBUG"}):
            logger = get_logger()
        assert logger._logger.name == "vibe-env"
        assert logger._logger.level == logging.DEBUG
