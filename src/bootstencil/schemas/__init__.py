"""Shared schemas for bootstencil."""

from bootstencil.schemas.link import Link
from bootstencil.schemas.menu import MenuNode

__all__ = ["Link", "MenuNode"]
