"""Link model rendered as an anchor or a span."""

from __future__ import annotations

from bs4.element import NavigableString, Tag
from pydantic import BaseModel, ConfigDict, Field

from bootstencil.html_utils import get_classes, new_tag, set_attr

_ICON_PREFIX = "fa-"


class Link(BaseModel):
    """HTML link, or a plain span when no ``href`` is given.

    Attributes:
        text: Displayed text.
        href: Hyperlink reference; ``None`` renders a ``<span>``.
        icon: Font Awesome icon name without the ``fa-`` prefix.
        css_class: CSS class(es) of the element.
        id: Element identifier.
        rel: ``rel`` attribute.
        target: ``target`` attribute.
    """

    model_config = ConfigDict(extra="forbid")

    text: str | None = None
    href: str | None = None
    icon: str | None = Field(default=None, description="Font Awesome icon name")
    css_class: str | None = None
    id: str | None = None
    rel: str | None = None
    target: str | None = None

    @property
    def tag_name(self) -> str:
        return "a" if self.href is not None else "span"

    def to_tag(self) -> Tag:
        """Build a fresh element for this link."""
        tag = new_tag(self.tag_name)
        set_attr(tag, "href", self.href)
        set_attr(tag, "class", self.css_class)
        set_attr(tag, "id", self.id)
        set_attr(tag, "rel", self.rel)
        set_attr(tag, "target", self.target)
        if self.text is not None:
            tag.append(self.text)
        if self.icon:
            tag.append(new_tag("span", {"class": f"fa fa-{self.icon}"}, " "))
        return tag

    @classmethod
    def from_tag(cls, tag: Tag) -> "Link":
        """Read a link back from an ``<a>`` or ``<span>`` element."""
        icon = None
        text_parts: list[str] = []
        for child in tag.children:
            if isinstance(child, NavigableString):
                text_parts.append(str(child))
            elif isinstance(child, Tag) and child.name == "span" and icon is None:
                icon = next(
                    (
                        token[len(_ICON_PREFIX):]
                        for token in get_classes(child)
                        if token.startswith(_ICON_PREFIX)
                    ),
                    None,
                )
        text = "".join(text_parts).strip()
        classes = get_classes(tag)
        rel = tag.get("rel")
        if isinstance(rel, list):
            rel = " ".join(rel)
        return cls(
            text=text or None,
            href=tag.get("href"),
            icon=icon,
            css_class=" ".join(classes) if classes else None,
            id=tag.get("id"),
            rel=rel,
            target=tag.get("target"),
        )
