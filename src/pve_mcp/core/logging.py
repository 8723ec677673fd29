"""Logging setup shared by the server and the agent CLI."""
from __future__ import annotations

import logging
import sys

from ..config.models import LoggingConfig

ROOT_LOGGER = "pve-mcp"


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the ``pve-mcp`` logger tree.

    Output always goes to stderr because stdout carries the MCP protocol.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, config.level, logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)
    handlers = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
