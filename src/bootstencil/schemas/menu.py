"""Navigation menu tree model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, overload

from bootstencil.schemas.link import Link


@dataclass(eq=False)
class MenuNode:
    """One entry of a navigation hierarchy.

    ``children`` is ``None`` for a leaf item. A list, even an empty one, marks
    a submenu container. ``parent`` is only maintained while building the
    tree and is not used for rendering.
    """

    label: Link | None = None
    css_class: str | None = None
    parent: MenuNode | None = field(default=None, repr=False)
    children: list[MenuNode] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    @overload
    def add(self, item: str, href: str | None = None) -> MenuNode: ...

    @overload
    def add(self, item: Link) -> MenuNode: ...

    def add(self, item: str | Link, href: str | None = None) -> MenuNode:
        """Add a leaf item from text and optional href, or from a link."""
        if isinstance(item, Link):
            if href is not None:
                raise TypeError("href cannot be combined with a Link item")
            label = item
        else:
            label = Link(text=item, href=href)
        return self.append(MenuNode(label=label))

    def append(self, node: MenuNode) -> MenuNode:
        """Attach an existing node as the last child."""
        if self.children is None:
            self.children = []
        node.parent = self
        self.children.append(node)
        return node

    @classmethod
    def from_markdown(cls, markdown: str) -> MenuNode:
        """Create a menu from the ``#``/``-`` outline dialect."""
        from bootstencil.outline import parse_outline

        return parse_outline(markdown)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        result: dict[str, Any] = {
            "label": self.label.model_dump(exclude_none=True) if self.label else None,
        }
        if self.css_class is not None:
            result["css_class"] = self.css_class
        if self.children is not None:
            result["children"] = [child.to_dict() for child in self.children]
        return result
