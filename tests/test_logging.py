# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Tests for the logging helpers."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from microsoft_login import (
    TOKEN_URL,
    EnvConfigProvider,
    Logger,
    MicrosoftAuthClient,
    RedirectContext,
    SilentLogger,
    StdlibLogger,
    StdoutLogger,
    StubTransport,
    create_logger,
)


class TestLoggerFactory:
    """Tests for create_logger."""

    def test_default_is_stdlib_logging(self):
        """Test records go through logging unless told otherwise."""
        with patch.dict(os.environ, {}, clear=True):
            logger = create_logger(name="microsoft_login.client")

        assert isinstance(logger, StdlibLogger)
        assert isinstance(logger, Logger)
        assert logger.name == "microsoft_login.client"

    def test_stdout_on_request(self):
        logger = create_logger(logger_type="stdout")

        assert isinstance(logger, StdoutLogger)
        assert logger.level == "INFO"

    def test_silent(self):
        assert isinstance(create_logger(logger_type="silent"), SilentLogger)

    def test_from_environment(self):
        """Test the logger type and stdout level can come from the environment."""
        env = {"MICROSOFT_LOGIN_LOG_TYPE": "stdout", "MICROSOFT_LOGIN_LOG_LEVEL": "warning"}
        with patch.dict(os.environ, env):
            logger = create_logger()

        assert isinstance(logger, StdoutLogger)
        assert logger.level == "WARNING"

    def test_generic_log_type_ignored(self):
        """Test a host application's LOG_TYPE does not switch the library to stdout."""
        with patch.dict(os.environ, {"LOG_TYPE": "stdout"}, clear=True):
            assert isinstance(create_logger(), StdlibLogger)

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown logger_type"):
            create_logger(logger_type="syslog")


class TestStdlibLogger:
    """Tests for StdlibLogger."""

    def test_records_carry_fields(self, caplog):
        """Test messages and structured fields reach the logging module."""
        logger = StdlibLogger("microsoft_login.test")

        with caplog.at_level(logging.DEBUG, logger="microsoft_login.test"):
            logger.warning("Token exchange failed", reason="no_body")

        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Token exchange failed"
        assert record.fields == {"reason": "no_body"}

    def test_nothing_written_to_stdout(self, capsys):
        StdlibLogger("microsoft_login.test").info("hello", host="example.com")

        assert capsys.readouterr().out == ""


class TestStdoutLogger:
    """Tests for StdoutLogger."""

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            StdoutLogger(level="LOUD")

    def test_json_output(self, capsys):
        """Test each record is one JSON line with its fields."""
        logger = StdoutLogger(name="test-logger", level="DEBUG")

        logger.info("Token exchange succeeded", host="example.com")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["level"] == "INFO"
        assert entry["logger"] == "test-logger"
        assert entry["message"] == "Token exchange succeeded"
        assert entry["fields"] == {"host": "example.com"}
        assert entry["timestamp"].endswith("Z")

    def test_level_filtering(self, capsys):
        logger = StdoutLogger(level="WARNING")

        logger.debug("hidden")
        logger.info("hidden")
        logger.warning("shown")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["message"] == "shown"

    def test_not_mirrored_into_logging(self, caplog, capsys):
        """Test stdout output is not duplicated through the logging module."""
        logger = StdoutLogger(name="microsoft_login.stdout-test")

        with caplog.at_level(logging.DEBUG):
            logger.warning("once")

        assert caplog.records == []
        assert capsys.readouterr().out.count("once") == 1


class TestSilentLogger:
    """Tests for SilentLogger."""

    def test_stores_entries(self):
        logger = SilentLogger()

        logger.debug("one")
        logger.warning("two", reason="x")

        assert logger.logs == [
            {"level": "DEBUG", "message": "one", "fields": {}},
            {"level": "WARNING", "message": "two", "fields": {"reason": "x"}},
        ]
        assert logger.has_log("two", level="WARNING")
        assert not logger.has_log("two", level="INFO")


class TestClientDefaultLogging:
    """Tests for the logging a client does when no logger is given."""

    def test_exchange_writes_nothing_to_stdout(self, capsys, caplog):
        """Test a default client logs through logging and keeps stdout clean."""
        transport = StubTransport()
        transport.add_json_response("POST", TOKEN_URL, {"access_token": "tok1"})

        with patch.dict(os.environ, {}, clear=True):
            client = MicrosoftAuthClient(
                transport=transport,
                env=EnvConfigProvider({"MICROSOFT_CLIENT_ID": "cid", "MICROSOFT_CLIENT_SECRET": "csecret"}),
            )

        with caplog.at_level(logging.DEBUG, logger="microsoft_login"):
            client.exchange_code("authcode123", RedirectContext("example.com"))

        assert capsys.readouterr().out == ""
        assert any(
            record.name == "microsoft_login.client"
            and record.getMessage() == "Exchanging authorization code for token"
            for record in caplog.records
        )
