"""Logging setup shared by the command line and the transports."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_HANDLER_NAME = "rpgmaker_mcp"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Send package logs to stderr at ``level``.

    Standard output is reserved for the stdio transport, so nothing is ever
    logged there. Calling this again only adjusts the level.
    """

    logger = logging.getLogger("rpgmaker_mcp")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved
    logger.setLevel(level)

    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["LOG_FORMAT", "configure_logging"]
