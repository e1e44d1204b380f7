"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_MAX_OUTLINE_CHARS = 64 * 1024

MAX_OUTLINE_CHARS = int(os.getenv("BOOTSTENCIL_MAX_OUTLINE_CHARS", str(DEFAULT_MAX_OUTLINE_CHARS)))
