"""Custom exceptions for bootstencil."""

from __future__ import annotations


class BootstencilError(Exception):
    """Base exception for bootstencil operations."""


class TemplateLoadError(BootstencilError):
    """Template asset is missing or cannot be parsed."""


class TargetNotFoundError(BootstencilError):
    """Strict marker lookup matched zero or several nodes."""

    def __init__(self, marker: str, count: int) -> None:
        self.marker = marker
        self.count = count
        if count:
            message = f"Marker {marker!r} matched {count} nodes, expected exactly one"
        else:
            message = f"Marker {marker!r} not found in template"
        super().__init__(message)


class MalformedLineError(BootstencilError):
    """Outline text violates the list dialect grammar."""

    def __init__(
        self,
        message: str,
        *,
        line: str,
        line_number: int | None = None,
        column: int | None = None,
    ) -> None:
        self.line = line
        self.line_number = line_number
        self.column = column
        location = f"line {line_number}" if line_number is not None else "line"
        if column is not None:
            location += f", column {column + 1}"
        super().__init__(f"{message} ({location}: {line!r})")


class StructuralDedentError(MalformedLineError):
    """Indentation refers to a nesting level with no live ancestor."""


class MutualExclusionError(BootstencilError):
    """Two mutually exclusive configuration shapes were supplied."""
