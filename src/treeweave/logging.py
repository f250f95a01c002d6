"""Logging set-up for treeweave.

Package modules log through ``logging.getLogger(__name__)`` and stay silent
until :func:`init_logging` attaches a handler to the ``treeweave`` logger.
The handler prints either plain text or one JSON object per record.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Mapping, Optional

logger = logging.getLogger("treeweave")
logger.addHandler(logging.NullHandler())

LEVELS = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
FORMATS = ("text", "json")


class JSONFormatter(logging.Formatter):
    def format(self, record):
        base = {"level": record.levelname, "name": record.name, "msg": record.getMessage()}
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            base.update(extra)
        return json.dumps(base, ensure_ascii=False)


def _level(level: int | str | None) -> int:
    if level is None or isinstance(level, str):
        return LEVELS.get(str(level or "none").strip().lower(), logging.WARNING)
    return int(level)


def init_logging(level: int | str | None = None, fmt: str = "text") -> logging.Handler:
    """Attach a stderr handler to the ``treeweave`` logger.

    Calling again replaces the handler installed by the previous call, so the
    level and format can change without duplicating output.
    """
    if fmt not in FORMATS:
        raise ValueError(f"unknown log format {fmt!r}; expected one of {FORMATS}")

    for h in list(logger.handlers):
        if getattr(h, "_treeweave", False) or isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler._treeweave = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
    logger.addHandler(handler)
    logger.setLevel(_level(level))
    return handler


def init_logging_from_cfg(cfg: Optional[Mapping[str, Any]]) -> logging.Handler:
    """Configure from the ``logging`` section of a config mapping.

    ``TREEWEAVE_LOG_LEVEL`` and ``TREEWEAVE_LOG_FORMAT`` take precedence.
    """
    section = (cfg or {}).get("logging") or {}
    level = os.getenv("TREEWEAVE_LOG_LEVEL", section.get("level"))
    fmt = os.getenv("TREEWEAVE_LOG_FORMAT", section.get("format") or "text")
    return init_logging(level, fmt)


__all__ = ["logger", "init_logging", "init_logging_from_cfg", "JSONFormatter", "LEVELS"]
