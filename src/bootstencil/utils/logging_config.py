"""Logging setup shared by the CLI and the HTTP server."""

from __future__ import annotations

import logging

from bootstencil.config import BOOTSTENCIL_LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured
    resolved = level if level is not None else BOOTSTENCIL_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    if not _configured:
        logging.basicConfig(level=resolved, format=_FORMAT)
        _configured = True
    else:
        logging.getLogger().setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
