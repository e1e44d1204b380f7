"""Render endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from bootstencil.exceptions import MalformedLineError
from bootstencil.modal import Modal
from bootstencil.navbar import Navbar
from bootstencil.outline import parse_outline
from bootstencil.schemas import MenuNode
from bootstencil.utils.logging_config import get_logger
from server.models import (
    ErrorResponse,
    HtmlResponse,
    MenuResponse,
    ModalRequest,
    NavbarRequest,
    OutlineRequest,
)

logger = get_logger(__name__)

router = APIRouter()

COMMON_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def _parse(request: OutlineRequest) -> MenuNode:
    try:
        return parse_outline(request.outline, strict_indentation=request.strict_indentation)
    except MalformedLineError as exc:
        logger.warning(
            "Rejected outline", extra={"line_number": exc.line_number, "error": str(exc)}
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorResponse(error=str(exc), line_number=exc.line_number).model_dump(),
        ) from exc


@router.post("/api/menu", responses=COMMON_RESPONSES)
async def api_menu(request: OutlineRequest) -> MenuResponse:
    """Parse outline text and return the menu tree."""
    return MenuResponse(menu=_parse(request).to_dict())


@router.post("/api/navbar", responses=COMMON_RESPONSES)
async def api_navbar(request: NavbarRequest) -> HtmlResponse:
    """Render a navbar from outline text."""
    navbar = Navbar(
        menu=_parse(request),
        css_class=request.css_class,
        in_container=request.in_container,
    )
    return HtmlResponse(html=navbar.render_html(pretty=request.pretty))


@router.post("/api/modal")
async def api_modal(request: ModalRequest) -> HtmlResponse:
    """Render a modal dialog."""
    modal = Modal(title=request.title, text=request.text, id=request.id, css_class=request.css_class)
    for button in request.buttons:
        modal.add_button(button.label, button.css_class, dismiss=button.dismiss)
    return HtmlResponse(html=modal.render_html(pretty=request.pretty))
