"""Template loading and marker-based target resolution."""

from __future__ import annotations

import copy
import logging
from functools import lru_cache
from itertools import chain
from typing import ClassVar, Iterator

try:
    from bs4 import BeautifulSoup, FeatureNotFound
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML templates (pip install beautifulsoup4)."
    ) from exc

from bootstencil.config import (
    BOOTSTENCIL_HTML_PARSER,
    BOOTSTENCIL_MARKER_ATTRIBUTE,
    BOOTSTENCIL_TEMPLATE_PATH,
)
from bootstencil.exceptions import TargetNotFoundError, TemplateLoadError
from bootstencil.html_utils import find_fragment_root
from bootstencil.uid import UidAllocator, default_allocator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def load_template(name: str) -> Tag:
    """Load and parse a named template asset once per process.

    The returned tree is shared by every renderer and must never be mutated;
    renderers work on a deep copy.

    Args:
        name: Asset path relative to the template directory
            (e.g. ``"bootstrap4/navbar.html"``).

    Returns:
        The root element of the parsed template.

    Raises:
        TemplateLoadError: If the asset is missing, unreadable or empty.
    """
    path = BOOTSTENCIL_TEMPLATE_PATH / name
    if not path.is_file():
        raise TemplateLoadError(f"Template asset not found: {path}")
    try:
        soup = BeautifulSoup(path.read_text(encoding="utf-8"), BOOTSTENCIL_HTML_PARSER)
    except (OSError, UnicodeDecodeError, FeatureNotFound) as exc:
        raise TemplateLoadError(f"Cannot parse template asset {path}: {exc}") from exc
    root = find_fragment_root(soup)
    if root is None:
        raise TemplateLoadError(f"Template asset has no root element: {path}")
    logger.debug("Loaded template %s with parser %s", name, BOOTSTENCIL_HTML_PARSER)
    return root


def iter_markers(node: Tag, attribute: str = BOOTSTENCIL_MARKER_ATTRIBUTE) -> list[str]:
    """Return the marker names carried by a node."""
    value = node.get(attribute)
    if not value:
        return []
    if isinstance(value, list):
        value = " ".join(value)
    return value.split()


def _walk(root: Tag) -> Iterator[Tag]:
    return chain([root], root.find_all(True))


def strip_markers(root: Tag, attribute: str = BOOTSTENCIL_MARKER_ATTRIBUTE) -> None:
    """Remove marker attributes from a rendered tree."""
    for node in _walk(root):
        if attribute in node.attrs:
            del node[attribute]


class TemplateIndex:
    """Marker lookup table for one working copy, built once.

    The root itself is indexed along with its descendants, in document order.
    """

    def __init__(self, root: Tag, attribute: str = BOOTSTENCIL_MARKER_ATTRIBUTE) -> None:
        self.root = root
        self.attribute = attribute
        self._nodes: dict[str, list[Tag]] = {}
        for node in _walk(root):
            for marker in iter_markers(node, attribute):
                self._nodes.setdefault(marker, []).append(node)

    def __contains__(self, marker: str) -> bool:
        return bool(self._live(marker))

    def single(self, marker: str) -> Tag:
        """Return the only node carrying ``marker``.

        Raises:
            TargetNotFoundError: If zero or several nodes carry the marker.
        """
        nodes = self._live(marker)
        if len(nodes) != 1:
            raise TargetNotFoundError(marker, len(nodes))
        return nodes[0]

    def first(self, marker: str) -> Tag:
        """Return the first node carrying ``marker`` in document order."""
        nodes = self._live(marker)
        if not nodes:
            raise TargetNotFoundError(marker, 0)
        return nodes[0]

    def take(self, marker: str) -> Tag:
        """Detach the only node carrying ``marker`` and return it.

        The detached subtree leaves the index; callers copy it once per item.
        """
        node = self.single(marker)
        node.extract()
        self._forget(node)
        return node

    def _live(self, marker: str) -> list[Tag]:
        # Nodes removed from the tree after indexing no longer resolve.
        return [node for node in self._nodes.get(marker, []) if self._attached(node)]

    def _attached(self, node: Tag) -> bool:
        return node is self.root or any(parent is self.root for parent in node.parents)

    def _forget(self, subtree: Tag) -> None:
        detached = {id(node) for node in _walk(subtree)}
        for marker in list(self._nodes):
            kept = [node for node in self._nodes[marker] if id(node) not in detached]
            if kept:
                self._nodes[marker] = kept
            else:
                del self._nodes[marker]


class HtmlTemplate:
    """Base class for renderers working on a private copy of a template.

    Subclasses set ``template_name`` and ``uid_prefix`` and implement
    ``_render``. Rendering happens once; later :meth:`render` calls return the
    same root.
    """

    template_name: ClassVar[str]
    uid_prefix: ClassVar[str]

    def __init__(self, *, uids: UidAllocator | None = None) -> None:
        self.root: Tag = copy.copy(load_template(self.template_name))
        self.targets = TemplateIndex(self.root)
        self.uids = uids or default_allocator(self.uid_prefix)
        self._rendered = False

    @property
    def rendered(self) -> bool:
        return self._rendered

    def target(self, marker: str, scope: Tag | None = None) -> Tag:
        return self._index_for(scope).single(marker)

    def first_target(self, marker: str, scope: Tag | None = None) -> Tag:
        return self._index_for(scope).first(marker)

    def take_target(self, marker: str, scope: Tag | None = None) -> Tag:
        return self._index_for(scope).take(marker)

    def instantiate(self, sub_template: Tag) -> Tag:
        """Deep-copy a detached sub-template for one item."""
        return copy.copy(sub_template)

    def next_uid(self) -> str:
        return self.uids.next_id(self.uid_prefix)

    def render(self) -> Tag:
        """Render the working copy and return its root element."""
        if self._rendered:
            return self.root
        logger.debug("Rendering %s from %s", type(self).__name__, self.template_name)
        self._render()
        strip_markers(self.root)
        self._rendered = True
        return self.root

    def render_html(self, *, pretty: bool = False) -> str:
        """Render and serialize the fragment."""
        root = self.render()
        return root.prettify() if pretty else str(root)

    def _render(self) -> None:
        raise NotImplementedError

    def _index_for(self, scope: Tag | None) -> TemplateIndex:
        if scope is None:
            return self.targets
        return TemplateIndex(scope)
