"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

_PACKAGE_LOGGER = "fars"

# Attributes every LogRecord carries; anything else arrived through extra=
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Timestamps are ISO-8601 in UTC.  Context passed through ``extra=``
    (``year``, ``state``, ``path``, ``reason``) lands under ``context``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        context = {
            key: value for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if context:
            payload["context"] = context

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach a handler to the ``fars`` package logger.

    Safe to call repeatedly; handlers installed by earlier calls are
    replaced rather than stacked.

    Args:
        level: Logging level for the package logger.
        json_format: Use ``JsonFormatter`` instead of a plain text format.
        handler: Handler to install.  Defaults to a ``StreamHandler`` on
            stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, "_fars_handler", False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    handler._fars_handler = True
    logger.addHandler(handler)
    return logger
