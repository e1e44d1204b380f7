"""Bootstrap 4 navigation bar."""

from __future__ import annotations

from bs4.element import Tag

from bootstencil.exceptions import MutualExclusionError
from bootstencil.html_utils import add_class, merge, remove_class, set_text, unwrap_element
from bootstencil.schemas import MenuNode
from bootstencil.templates import HtmlTemplate
from bootstencil.uid import UidAllocator

_DEFAULT_ALIGNMENT = "mr-auto"


class Navbar(HtmlTemplate):
    """Navigation bar rendered from ``bootstrap4/navbar.html``.

    Set either ``menu`` for a single menu or ``parts`` for several menus with
    their own alignment classes, never both. The label of the menu (or of the
    first part) becomes the brand link.

    Attributes:
        css_class: Extra classes of the ``<nav>`` element (``navbar-dark``,
            ``bg-dark``...).
        in_container: Keep the inner positioning ``.container`` wrapper.
        menu: Single menu to render.
        parts: Several menus rendered side by side.
    """

    template_name = "bootstrap4/navbar.html"
    uid_prefix = "bs4navbar"

    def __init__(
        self,
        *,
        menu: MenuNode | None = None,
        parts: list[MenuNode] | None = None,
        css_class: str | None = None,
        in_container: bool = False,
        uids: UidAllocator | None = None,
    ) -> None:
        super().__init__(uids=uids)
        self.menu = menu
        self.parts = parts
        self.css_class = css_class
        self.in_container = in_container
        self._item_template: Tag | None = None
        self._dropdown_template: Tag | None = None

    def _render(self) -> None:
        if self.menu is not None and self.parts is not None:
            raise MutualExclusionError("Navbar menu and parts are mutually exclusive")
        parts = [self.menu] if self.menu is not None else list(self.parts or [])

        container_template = self.take_target("container")
        self._item_template = self.take_target("item", container_template)
        self._dropdown_template = self.take_target("dropdown", container_template)

        if not self.in_container:
            unwrap_element(self.target("positioning"))
        add_class(self.root, self.css_class)

        brand_link = self.target("brand-link")
        if parts and parts[0].label is not None:
            merge(brand_link, parts[0].label.to_tag())
        else:
            brand_link.extract()

        uid = self.next_uid()
        self.target("toggler")["data-target"] = f"#{uid}"
        content = self.target("content")
        content["id"] = uid

        for index, part in enumerate(parts):
            content.append(self._render_part(part, container_template, first=index == 0))

    def _render_part(self, part: MenuNode, container_template: Tag, *, first: bool) -> Tag:
        container = self.instantiate(container_template)
        if part.css_class is not None:
            if not first:
                remove_class(container, _DEFAULT_ALIGNMENT)
            add_class(container, part.css_class)
        for child in part.children or []:
            if child.is_leaf:
                container.append(self._render_item(child))
            else:
                container.append(self._render_dropdown(child))
        return container

    def _render_item(self, node: MenuNode) -> Tag:
        item = self.instantiate(self._item_template)
        if node.label is not None:
            merge(self.target("item-link", item), node.label.to_tag())
        return item

    def _render_dropdown(self, node: MenuNode) -> Tag:
        dropdown = self.instantiate(self._dropdown_template)
        dropdown_text = self.target("dropdown-text", dropdown)
        dropdown_container = self.target("dropdown-container", dropdown)
        item_template = self.take_target("dropdown-item", dropdown_container)

        set_text(dropdown_text, node.label.text if node.label else None)
        uid = self.next_uid()
        dropdown_text["id"] = uid
        dropdown_container["aria-labelledby"] = uid
        add_class(dropdown_container, node.css_class)

        for child in node.children or []:
            item = self.instantiate(item_template)
            if child.label is not None:
                merge(self.target("dropdown-link", item), child.label.to_tag())
            dropdown_container.append(item)
        return dropdown
