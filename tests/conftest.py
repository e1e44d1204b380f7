"""Test setup for bootstencil."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bootstencil.uid import UidAllocator, reset_default_allocators  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_default_allocators() -> None:
    """Keep process-wide allocators from leaking between tests."""
    reset_default_allocators()


@pytest.fixture
def uids() -> UidAllocator:
    """Deterministic allocator starting at 100."""
    return UidAllocator(seed=100)


@pytest.fixture
def site_outline() -> str:
    return (
        "# Site\n"
        "- [Home](/)\n"
        "- [About](/about)\n"
        "  - [Team](/about/team)\n"
        "  - [Contact](/about/contact)\n"
    )
