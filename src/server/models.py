"""Pydantic models for the render API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from server.server_config import MAX_OUTLINE_CHARS


class OutlineRequest(BaseModel):
    """Request carrying outline text.

    Attributes
    ----------
    outline : str
        Outline in the ``#``/``-`` list dialect.
    strict_indentation : bool | None
        Reject dedents that are not a whole number of indentation units;
        ``None`` uses the server configuration.

    """

    outline: str = Field(..., max_length=MAX_OUTLINE_CHARS, description="Outline text")
    strict_indentation: bool | None = Field(default=None, description="Reject uneven dedents")

    @field_validator("outline")
    @classmethod
    def validate_outline(cls, v: str) -> str:
        """Validate that ``outline`` is not blank."""
        if not v.strip():
            err = "outline cannot be empty"
            raise ValueError(err)
        return v


class NavbarRequest(OutlineRequest):
    """Request model for the /api/navbar endpoint."""

    css_class: str | None = Field(default=None, description="Extra classes of the nav element")
    in_container: bool = Field(default=False, description="Keep the positioning container")
    pretty: bool = Field(default=False, description="Indent the HTML output")


class ModalButton(BaseModel):
    """Footer button of a modal."""

    label: str
    css_class: str | None = "btn-secondary"
    dismiss: bool = True


class ModalRequest(BaseModel):
    """Request model for the /api/modal endpoint."""

    title: str | None = None
    text: str | None = None
    id: str | None = None
    css_class: str | None = None
    buttons: list[ModalButton] = Field(default_factory=list)
    pretty: bool = False


class MenuResponse(BaseModel):
    """Parsed menu tree."""

    menu: dict[str, Any]


class HtmlResponse(BaseModel):
    """Rendered HTML fragment."""

    html: str


class ErrorResponse(BaseModel):
    """Error response with the offending line when known."""

    error: str
    line_number: int | None = None
