"""Logging setup shared by the library and the server."""

from __future__ import annotations

import logging
import sys

from apimenu.config import APIMENU_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ROOT_LOGGERS = ("apimenu", "server")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}

_configured = False


class ExtraFieldsFormatter(logging.Formatter):
    """Append ``extra={...}`` fields to the message as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{base} [{pairs}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the ``apimenu`` and ``server`` loggers.

    Calling it again only updates the level.
    """
    global _configured

    resolved = level if level is not None else APIMENU_LOG_LEVEL
    for name in _ROOT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        if not _configured:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(ExtraFieldsFormatter(_LOG_FORMAT))
            logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring handlers on first use."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
