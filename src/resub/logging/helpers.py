from __future__ import annotations

"""Small logging helpers to standardize resub logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields.
    - setup_base_logger: Root logger configuration for the 'resub' logger.
    - get_logger: Namespaced logger factory ('resub.*').

Design notes:
    - Diagnostics always go to stderr (or an injected stream); transformed
      text and "modified" notices are written to stdout by the rewriters and
      never pass through logging.
    - The version is resolved lazily to avoid circular imports.
"""

import logging
from typing import Optional, TextIO

BASE_LOGGER_NAME = "resub"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'resub.io.rewriter').
        - msg: Formatted message string.
        - version: resub.__version__ (fixed per formatter instance).
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the resub version, or 'unknown' when it cannot be imported."""
        try:
            from resub import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return "unknown"

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'resub' logger and return it.

    Calling it again replaces the handler, so the formatter and stream
    always reflect the latest call.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger(BASE_LOGGER_NAME)
    for old in list(base.handlers):
        base.removeHandler(old)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'resub'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER_NAME}.{name}")
