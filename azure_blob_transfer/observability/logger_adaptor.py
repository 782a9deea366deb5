"""Loguru-backed logger adaptor with a single stderr sink."""

import sys
from typing import Any, Dict, Optional

from loguru import logger as _loguru_logger

from azure_blob_transfer.constants import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <blue>[{level}]</blue> "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_loggers: Dict[str, "LoggerAdapter"] = {}
_sink_id: Optional[int] = None


def set_log_level(level: str = LOG_LEVEL) -> None:
    """Replace the stderr sink with one filtered at ``level``.

    Raises:
        ValueError: If loguru does not know the level name.
    """
    global _sink_id

    level = level.upper()
    # Validates the name before the current sink is dropped.
    _loguru_logger.level(level)
    if _sink_id is None:
        _loguru_logger.remove()
    else:
        _loguru_logger.remove(_sink_id)
    _sink_id = _loguru_logger.add(
        sys.stderr, format=LOG_FORMAT, level=level, colorize=True
    )


def _configure_default_sink() -> None:
    try:
        set_log_level(LOG_LEVEL)
    except ValueError:
        # Imported at startup, so a bad LOG_LEVEL falls back to INFO.
        set_log_level("INFO")
        _loguru_logger.bind(logger_name="azure_blob_transfer").warning(
            f"Unknown LOG_LEVEL {LOG_LEVEL!r}, using INFO"
        )


class LoggerAdapter:
    """Minimal logger that forwards to loguru with the logger name bound."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._log = _loguru_logger.bind(logger_name=name)

    @property
    def name(self) -> str:
        return self._name

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.exception(msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log.critical(msg, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """Return the cached adaptor for ``name``, configuring the sink on first use."""
    if _sink_id is None:
        _configure_default_sink()
    if name is None:
        name = "azure_blob_transfer"
    if name not in _loggers:
        _loggers[name] = LoggerAdapter(name)
    return _loggers[name]


default_logger = get_logger()
