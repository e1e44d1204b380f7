"""Parse the ``#``/``-`` outline dialect into a menu tree.

The dialect accepts one optional title line (``# Title``) and list items
(``- Item`` or ``- [Item](href)``). Nesting is given by indentation; the
first indentation increase defines the unit used for every dedent.

Example::

    # Site
    - [Home](/)
    - [About](/about)
      - [Team](/about/team)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, Literal

from bootstencil.config import BOOTSTENCIL_STRICT_INDENTATION
from bootstencil.exceptions import MalformedLineError, StructuralDedentError
from bootstencil.schemas import Link, MenuNode

logger = logging.getLogger(__name__)

LexemeKind = Literal["title", "item"]

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_WHITESPACE = frozenset(" \t")
_KINDS: dict[str, LexemeKind] = {"#": "title", "-": "item"}

# Lexer states.
_KIND, _TEXT, _LINK_TEXT, _LINK_GAP, _HREF = range(5)


@dataclass(frozen=True)
class Lexeme:
    """One tokenized outline line."""

    indentation: int
    kind: LexemeKind
    text: str
    href: str | None = None
    line_number: int | None = None
    line: str = field(default="", repr=False)


def lex_line(line: str, line_number: int | None = None) -> Lexeme:
    """Tokenize one non-blank outline line.

    Raises:
        MalformedLineError: If the line does not start with ``#`` or ``-``, or
            link text is not followed by ``(``.
    """
    state = _KIND
    indentation = 0
    kind: LexemeKind | None = None
    text: list[str] = []
    href: list[str] | None = None
    skip_whitespace = True

    for column, char in enumerate(line):
        if state == _KIND:
            if char in _WHITESPACE:
                continue
            if char not in _KINDS:
                raise MalformedLineError(
                    f"Unsupported markdown, expected '#' or '-' but found {char!r}",
                    line=line,
                    line_number=line_number,
                    column=column,
                )
            indentation = column
            kind = _KINDS[char]
            state = _TEXT
        elif state == _TEXT:
            if skip_whitespace and char in _WHITESPACE:
                continue
            if char == "[":
                state = _LINK_TEXT
            else:
                skip_whitespace = False
                text.append(char)
        elif state == _LINK_TEXT:
            if char == "]":
                state = _LINK_GAP
            else:
                text.append(char)
        elif state == _LINK_GAP:
            if char in _WHITESPACE:
                continue
            if char != "(":
                raise MalformedLineError(
                    f"Unsupported markdown, expected '(' after link text but found {char!r}",
                    line=line,
                    line_number=line_number,
                    column=column,
                )
            href = []
            state = _HREF
        else:
            if char == ")":
                break
            href.append(char)

    if kind is None:
        raise MalformedLineError("Line has no list marker", line=line, line_number=line_number)

    return Lexeme(
        indentation=indentation,
        kind=kind,
        text="".join(text).strip(),
        href="".join(href).strip() if href is not None else None,
        line_number=line_number,
        line=line,
    )


def iter_lexemes(markdown: str) -> Iterator[Lexeme]:
    """Yield lexemes for every non-blank line, numbered from 1."""
    for line_number, line in enumerate(_LINE_SPLIT_RE.split(markdown), start=1):
        if line.strip():
            yield lex_line(line, line_number)


def parse_outline(markdown: str, *, strict_indentation: bool | None = None) -> MenuNode:
    """Build a menu tree from outline text.

    Args:
        markdown: Outline text.
        strict_indentation: Reject dedents that are not a whole number of
            indentation units. Defaults to ``BOOTSTENCIL_STRICT_INDENTATION``;
            when disabled the step count is rounded down.

    Returns:
        A synthetic root whose label is the optional title and whose children
        are the top-level entries.

    Raises:
        MalformedLineError: On a line outside the dialect.
        StructuralDedentError: When indentation has no enclosing level.
    """
    strict = BOOTSTENCIL_STRICT_INDENTATION if strict_indentation is None else strict_indentation
    root = MenuNode(children=[])
    # Ancestors of the node accepting new children; stack[-1] is the target.
    stack: list[MenuNode] = [root]
    last_added: MenuNode | None = None
    last_added_path: list[MenuNode] = []
    current_indent: int | None = None
    indent_unit = 0

    for lexeme in iter_lexemes(markdown):
        if current_indent is None:
            current_indent = lexeme.indentation

        if lexeme.indentation > current_indent:
            if last_added is None:
                raise StructuralDedentError(
                    "Indented line has no parent item",
                    line=lexeme.line,
                    line_number=lexeme.line_number,
                    column=lexeme.indentation,
                )
            if indent_unit == 0:
                indent_unit = lexeme.indentation - current_indent
            if last_added.children is None:
                last_added.children = []
            stack = [*last_added_path, last_added]
            current_indent = lexeme.indentation
        elif lexeme.indentation < current_indent:
            if indent_unit == 0:
                raise StructuralDedentError(
                    "Dedent without an enclosing level",
                    line=lexeme.line,
                    line_number=lexeme.line_number,
                    column=lexeme.indentation,
                )
            steps, remainder = divmod(current_indent - lexeme.indentation, indent_unit)
            if remainder and strict:
                raise StructuralDedentError(
                    f"Indentation is not a multiple of the {indent_unit}-column unit",
                    line=lexeme.line,
                    line_number=lexeme.line_number,
                    column=lexeme.indentation,
                )
            if steps >= len(stack):
                raise StructuralDedentError(
                    "Dedent goes past the top level",
                    line=lexeme.line,
                    line_number=lexeme.line_number,
                    column=lexeme.indentation,
                )
            if steps:
                del stack[-steps:]
            logger.debug("Dedent by %d level(s) at line %s", steps, lexeme.line_number)
            current_indent = lexeme.indentation

        label = Link(text=lexeme.text, href=lexeme.href)
        if lexeme.kind == "title":
            root.label = label
            continue
        node = stack[-1].append(MenuNode(label=label))
        last_added, last_added_path = node, list(stack)

    return root
