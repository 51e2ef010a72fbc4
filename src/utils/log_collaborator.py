"""
Logging collaborator.

Structured debug/info/warn/error events from the review pipeline,
forwarded to the standard logging module.
"""

import json
import logging
from typing import Any, Dict, Optional

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class AgentLogger:
    """
    Default logging collaborator for ReviewGenerationAgent.

    Any object with debug/info/warn/error(message, data) methods can be
    injected instead (tests use a Mock).
    """

    def __init__(self, name: str = "src.orchestrator", logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(name)

    def log(self, level: str, message: str, data: Optional[Dict[str, Any]] = None) -> None:
        numeric_level = _LEVELS.get(level.lower(), logging.INFO)
        if not self.logger.isEnabledFor(numeric_level):
            return

        if data:
            self.logger.log(numeric_level, "%s | %s", message, _format_data(data))
        else:
            self.logger.log(numeric_level, "%s", message)

    def debug(self, message: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.log("debug", message, data)

    def info(self, message: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.log("info", message, data)

    def warn(self, message: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.log("warn", message, data)

    def error(self, message: str, data: Optional[Dict[str, Any]] = None) -> None:
        self.log("error", message, data)


def _format_data(data: Dict[str, Any]) -> str:
    # default=str covers enums, exceptions and other non-JSON values
    return json.dumps(data, default=str, ensure_ascii=False, sort_keys=True)
