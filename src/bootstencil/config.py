"""Local configuration for bootstencil."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_HTML_PARSER = "lxml"
DEFAULT_MARKER_ATTRIBUTE = "data-stencil"
DEFAULT_LOG_LEVEL = "WARNING"

# Packaged Bootstrap 4 assets; BOOTSTENCIL_TEMPLATE_PATH points at a directory with the same layout.
PACKAGED_TEMPLATE_PATH = Path(__file__).resolve().parent / "assets"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str) -> int | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


_template_path = os.getenv("BOOTSTENCIL_TEMPLATE_PATH")
BOOTSTENCIL_TEMPLATE_PATH = (
    Path(_template_path).expanduser().resolve() if _template_path else PACKAGED_TEMPLATE_PATH
)
BOOTSTENCIL_HTML_PARSER = os.getenv("BOOTSTENCIL_HTML_PARSER", DEFAULT_HTML_PARSER)
BOOTSTENCIL_MARKER_ATTRIBUTE = os.getenv("BOOTSTENCIL_MARKER_ATTRIBUTE", DEFAULT_MARKER_ATTRIBUTE)
BOOTSTENCIL_UID_SEED = _env_int("BOOTSTENCIL_UID_SEED")
BOOTSTENCIL_STRICT_INDENTATION = _env_flag("BOOTSTENCIL_STRICT_INDENTATION", True)
BOOTSTENCIL_LOG_LEVEL = os.getenv("BOOTSTENCIL_LOG_LEVEL", DEFAULT_LOG_LEVEL)
