"""Shared HTML helpers for template working copies."""

from __future__ import annotations

import re
from typing import Iterable

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML templates (pip install beautifulsoup4)."
    ) from exc


_CLASS = "class"
_WHITESPACE_RE = re.compile(r"\s+")


def find_fragment_root(soup: BeautifulSoup) -> Tag | None:
    """Return the first element of a parsed fragment.

    Parsers such as lxml wrap fragments in ``<html><body>``; the fragment root
    is then the first element inside ``<body>``.
    """
    container = soup.body if soup.body else soup
    return container.find(True, recursive=False)


def split_classes(value: str | Iterable[str] | None) -> list[str]:
    """Split a class attribute value (string or token list) into tokens."""
    if value is None:
        return []
    if isinstance(value, str):
        return [token for token in _WHITESPACE_RE.split(value) if token]
    tokens: list[str] = []
    for item in value:
        tokens.extend(split_classes(item))
    return tokens


def get_classes(tag: Tag) -> list[str]:
    """Get the CSS classes of an element, empty when the attribute is unset."""
    return split_classes(tag.get(_CLASS))


def add_class(tag: Tag, css_class: str | Iterable[str] | None) -> Tag:
    """Append each class token not already present on the element."""
    new_tokens = split_classes(css_class)
    if not new_tokens:
        return tag
    classes = get_classes(tag)
    for token in new_tokens:
        if token not in classes:
            classes.append(token)
    tag[_CLASS] = classes
    return tag


def remove_class(tag: Tag, css_class: str | None) -> Tag:
    """Remove a class token from the element."""
    if css_class is None:
        return tag
    classes = get_classes(tag)
    if css_class not in classes:
        return tag
    remaining = [token for token in classes if token != css_class]
    if remaining:
        tag[_CLASS] = remaining
    else:
        del tag[_CLASS]
    return tag


def set_attr(tag: Tag, name: str, value: str | None) -> Tag:
    """Set an attribute value, ignoring ``None``."""
    if value is None:
        return tag
    tag[name] = value
    return tag


def set_text(tag: Tag, text: str | None) -> Tag:
    """Replace element content with text, ignoring ``None``."""
    if text is None:
        return tag
    tag.string = text
    return tag


def unwrap_element(tag: Tag) -> None:
    """Remove the element but keep its children in its place."""
    tag.unwrap()


def is_empty(tag: Tag) -> bool:
    """Check whether an element has no child elements and no visible text."""
    for child in tag.children:
        if isinstance(child, Tag):
            return False
        if isinstance(child, NavigableString) and str(child).strip():
            return False
    return True


def merge(target: Tag, source: Tag) -> None:
    """Merge source element into target element.

    Target children are replaced by source children, which are moved, not
    copied. Source attributes override target attributes, except ``class``:
    source tokens missing from target are appended after target's own.
    """
    target.clear()
    for child in list(source.contents):
        target.append(child.extract())
    for name, value in source.attrs.items():
        if name == _CLASS:
            add_class(target, value)
        elif isinstance(value, list):
            target[name] = list(value)
        else:
            target[name] = value
    if target.get(_CLASS) is not None:
        target[_CLASS] = list(dict.fromkeys(get_classes(target)))


def new_tag(name: str, attrs: dict[str, str] | None = None, text: str | None = None) -> Tag:
    """Create a detached element."""
    tag = BeautifulSoup("", "html.parser").new_tag(name, attrs=attrs or {})
    set_text(tag, text)
    return tag
