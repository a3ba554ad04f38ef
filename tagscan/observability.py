"""Logging setup driven by the ``logging`` config section.

Library modules only call ``logging.getLogger(__name__)``; applications (and
the developer scripts) call :func:`configure_logging` once to attach a
handler to the ``tagscan`` logger.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

from tagscan.config import get_config
from tagscan.config.schemas.observability import LoggingConfig

ROOT_LOGGER = "tagscan"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "ts": self.formatTime(record, _DATE_FORMAT),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def _marked(handler: logging.Handler) -> bool:
    return getattr(handler, "_tagscan_handler", False)


def configure_logging(
    cfg: LoggingConfig | None = None, stream=None
) -> logging.Logger:
    """Attach a single stream handler to the ``tagscan`` logger.

    Calling it again replaces the previously installed handler, so level or
    format changes take effect without duplicating output.
    """
    if cfg is None:
        cfg = get_config().logging
    logger = logging.getLogger(ROOT_LOGGER)
    for h in [h for h in logger.handlers if _marked(h)]:
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    if cfg.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(fmt=_TEXT_FORMAT, datefmt=_DATE_FORMAT)
        )
    handler._tagscan_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(_LEVELS[cfg.level])
    return logger


__all__ = ["configure_logging", "JsonFormatter", "ROOT_LOGGER"]
