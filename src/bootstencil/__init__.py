"""bootstencil: render Bootstrap fragments from HTML template stencils."""

from bootstencil.button import Button
from bootstencil.exceptions import (
    BootstencilError,
    MalformedLineError,
    MutualExclusionError,
    StructuralDedentError,
    TargetNotFoundError,
    TemplateLoadError,
)
from bootstencil.html_utils import merge
from bootstencil.modal import Modal
from bootstencil.navbar import Navbar
from bootstencil.outline import Lexeme, lex_line, parse_outline
from bootstencil.schemas import Link, MenuNode
from bootstencil.templates import HtmlTemplate, TemplateIndex, load_template
from bootstencil.uid import UidAllocator

__all__ = [
    "BootstencilError",
    "Button",
    "HtmlTemplate",
    "Lexeme",
    "Link",
    "MalformedLineError",
    "MenuNode",
    "Modal",
    "MutualExclusionError",
    "Navbar",
    "StructuralDedentError",
    "TargetNotFoundError",
    "TemplateIndex",
    "TemplateLoadError",
    "UidAllocator",
    "lex_line",
    "load_template",
    "merge",
    "parse_outline",
]
