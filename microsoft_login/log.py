# SPDX-License-Identifier: MIT
# Copyright (c) 2025 microsoft-login contributors

"""Logging for the OAuth helper.

By default records go to the standard ``logging`` module under the
``microsoft_login`` namespace, so the host application decides where they
end up. Structured fields travel on the record as ``record.fields``.

``MICROSOFT_LOGIN_LOG_TYPE=stdout`` switches to one JSON object per line
on stdout, for scripts that have no logging setup of their own. ``SilentLogger`` keeps
entries in memory for assertions in tests.
"""

import json
import logging
import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

DEFAULT_LOGGER_NAME = "microsoft_login"
ENV_LOG_TYPE = "MICROSOFT_LOGIN_LOG_TYPE"
ENV_LOG_LEVEL = "MICROSOFT_LOGIN_LOG_LEVEL"


class Logger(ABC):
    """Logger interface used by the client and transports.

    Each method takes a message plus keyword fields describing the event.
    """

    @abstractmethod
    def debug(self, message: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **fields: Any) -> None:
        pass


class StdlibLogger(Logger):
    """Forwards records to ``logging.getLogger(name)``."""

    def __init__(self, name: str = DEFAULT_LOGGER_NAME):
        self.name = name
        self._logger = logging.getLogger(name)

    def _emit(self, level: int, message: str, fields: dict[str, Any]) -> None:
        self._logger.log(level, message, extra={"fields": fields})

    def debug(self, message: str, **fields: Any) -> None:
        self._emit(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._emit(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit(logging.WARNING, message, fields)


class StdoutLogger(Logger):
    """Writes JSON lines to stdout; nothing goes through ``logging``."""

    _LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30}

    def __init__(self, name: str = DEFAULT_LOGGER_NAME, level: str = "INFO"):
        level = level.upper()
        if level not in self._LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(self._LEVELS)}")
        self.name = name
        self.level = level

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        if self._LEVELS[level] < self._LEVELS[self.level]:
            return
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if fields:
            entry["fields"] = fields
        print(json.dumps(entry, default=str), file=sys.stdout, flush=True)

    def debug(self, message: str, **fields: Any) -> None:
        self._emit("DEBUG", message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._emit("INFO", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("WARNING", message, fields)


class SilentLogger(Logger):
    """Collects entries in ``logs`` instead of emitting them."""

    def __init__(self):
        self.logs: list[dict[str, Any]] = []

    def debug(self, message: str, **fields: Any) -> None:
        self.logs.append({"level": "DEBUG", "message": message, "fields": fields})

    def info(self, message: str, **fields: Any) -> None:
        self.logs.append({"level": "INFO", "message": message, "fields": fields})

    def warning(self, message: str, **fields: Any) -> None:
        self.logs.append({"level": "WARNING", "message": message, "fields": fields})

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether a stored message (optionally at ``level``) contains ``message``."""
        return any(
            message in entry["message"]
            for entry in self.logs
            if level is None or entry["level"] == level
        )


def create_logger(logger_type: str | None = None, name: str | None = None) -> Logger:
    """Create a logger.

    Args:
        logger_type: "logging" (default), "stdout" or "silent"; falls back
            to the MICROSOFT_LOGIN_LOG_TYPE env var
        name: Logger name; defaults to "microsoft_login"

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized
    """
    logger_type = (logger_type or os.getenv(ENV_LOG_TYPE) or "logging").lower()
    name = name or DEFAULT_LOGGER_NAME

    if logger_type == "logging":
        return StdlibLogger(name)
    elif logger_type == "stdout":
        return StdoutLogger(name, level=os.getenv(ENV_LOG_LEVEL) or "INFO")
    elif logger_type == "silent":
        return SilentLogger()
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: logging, stdout, silent"
        )
